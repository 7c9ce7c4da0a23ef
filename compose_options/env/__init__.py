"""Environment sources and merging for compose-options."""

from compose_options.env.dotenv_file import DotEnvFileSource
from compose_options.env.merger import EnvironmentMerger, parse_key_value_list

__all__ = [
    "DotEnvFileSource",
    "EnvironmentMerger",
    "parse_key_value_list",
]

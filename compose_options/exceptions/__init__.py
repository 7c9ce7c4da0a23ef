"""Exception hierarchy for compose-options."""
from compose_options.exceptions.base import ConfigError
from compose_options.exceptions.config import (
    ConfigFileNotFoundError,
    NoConfigurationFoundError,
    DocumentParseError,
    ProjectLoadError,
)
from compose_options.exceptions.env import (
    MalformedEnvFileError,
    InvalidKeyValueFormatError,
)

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "NoConfigurationFoundError",
    "DocumentParseError",
    "ProjectLoadError",
    "MalformedEnvFileError",
    "InvalidKeyValueFormatError",
]

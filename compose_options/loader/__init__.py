"""Parsing and loading boundary for compose-options.

The resolution core only depends on the ``DocumentParser`` and
``ProjectLoader`` protocols; ``parse_yaml`` and ``load`` are the defaults.
"""

from compose_options.loader.models import ConfigFile, ConfigDetails, LoaderOptions, LoadOption, Project
from compose_options.loader.parser import parse_yaml
from compose_options.loader.loader import (
    load,
    deep_merge,
    with_name,
    with_discard_env_files,
    with_skip_interpolation,
)

__all__ = [
    "ConfigFile",
    "ConfigDetails",
    "LoaderOptions",
    "LoadOption",
    "Project",
    "parse_yaml",
    "load",
    "deep_merge",
    "with_name",
    "with_discard_env_files",
    "with_skip_interpolation",
]

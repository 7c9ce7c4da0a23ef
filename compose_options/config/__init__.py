"""Project resolution for compose-options."""

# Re-export options
from compose_options.config.options import (
    ProjectOptions,
    ProjectOptionsFn,
    with_name,
    with_working_directory,
    with_env,
    with_os_env,
    with_os_env_from,
    with_dotenv,
    with_discard_env_file,
    with_interpolation,
    with_load_options,
)

# Re-export resolvers
from compose_options.config.resolver import ConfigPathResolver, ResolvedPaths
from compose_options.config.naming import ProjectNameResolver, derive_name

# Re-export reader and assembler
from compose_options.config.reader import ConfigFileReader
from compose_options.config.assembler import ProjectAssembler, project_from_options

# Re-export protocols
from compose_options.config.protocols import DocumentParser, ProjectLoader

__all__ = [
    # Options
    "ProjectOptions",
    "ProjectOptionsFn",
    "with_name",
    "with_working_directory",
    "with_env",
    "with_os_env",
    "with_os_env_from",
    "with_dotenv",
    "with_discard_env_file",
    "with_interpolation",
    "with_load_options",
    # Resolvers
    "ConfigPathResolver",
    "ResolvedPaths",
    "ProjectNameResolver",
    "derive_name",
    # Reader and assembler
    "ConfigFileReader",
    "ProjectAssembler",
    "project_from_options",
    # Protocols
    "DocumentParser",
    "ProjectLoader",
]

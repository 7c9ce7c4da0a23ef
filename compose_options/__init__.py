"""Resolve compose project files, working directory, name and environment."""

from compose_options.constants import VERSION
from compose_options.config import (
    ProjectOptions,
    ProjectAssembler,
    project_from_options,
)
from compose_options.loader import Project

__version__ = VERSION

__all__ = [
    "ProjectOptions",
    "ProjectAssembler",
    "project_from_options",
    "Project",
]

"""Project options and the option functions that build them."""

import os
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Self

from pydantic import BaseModel, Field

from compose_options.constants import STDIN_PATH
from compose_options.env import EnvironmentMerger
from compose_options.loader import LoaderOptions, with_discard_env_files, with_skip_interpolation


class ProjectOptions(BaseModel):
    """Inputs for resolving a project, built by applying option functions.

    Option functions run in the order given and each may overwrite what an
    earlier one set; there is no fixed precedence between sources.
    """

    name: str = ""
    working_dir: str = ""
    config_paths: list[str] = Field(default_factory=list, description="Config paths, '-' for stdin")
    environment: dict[str, str] = Field(default_factory=dict)
    load_options: list[Callable[[LoaderOptions], None]] = Field(default_factory=list)

    @classmethod
    def create(
            cls,
            config_paths: Sequence[str] | None = None,
            *fns: "ProjectOptionsFn",
    ) -> Self:
        """Create options and apply ``fns`` to them in order.

        Args:
            config_paths: Explicit config paths (may be empty)
            *fns: Option functions

        Returns:
            The populated options

        Raises:
            ConfigError: Whatever an option function raises
        """
        options = cls(config_paths=list(config_paths or []))
        for fn in fns:
            fn(options)
        return options

    def get_working_dir(self) -> str:
        """Return the working directory.

        The explicit value wins, then the directory of the first config path
        that is not standard input, then the process current directory.
        """
        if self.working_dir:
            return self.working_dir
        for path in self.config_paths:
            if path != STDIN_PATH:
                return os.path.dirname(os.path.abspath(path))
        return os.getcwd()


ProjectOptionsFn = Callable[[ProjectOptions], None]


def with_name(name: str) -> ProjectOptionsFn:
    """Set the project name."""
    def _apply(options: ProjectOptions) -> None:
        options.name = name
    return _apply


def with_working_directory(working_dir: str) -> ProjectOptionsFn:
    """Set the working directory."""
    def _apply(options: ProjectOptions) -> None:
        options.working_dir = working_dir
    return _apply


def with_env(env: Iterable[str]) -> ProjectOptionsFn:
    """Import ``KEY=VALUE`` strings into the environment used for interpolation."""
    entries = list(env)

    def _apply(options: ProjectOptions) -> None:
        EnvironmentMerger(options.environment).import_explicit(entries)
    return _apply


def with_os_env_from(environ: Mapping[str, str]) -> ProjectOptionsFn:
    """Import every variable of the given environment snapshot."""
    def _apply(options: ProjectOptions) -> None:
        EnvironmentMerger(options.environment).import_from_process_environment(environ)
    return _apply


def with_os_env(options: ProjectOptions) -> None:
    """Import every variable of the process environment."""
    EnvironmentMerger(options.environment).import_from_process_environment()


def with_dotenv(options: ProjectOptions) -> None:
    """Import the ``.env`` file of the working directory, if there is one."""
    EnvironmentMerger(options.environment).import_from_dotenv_file(options.get_working_dir())


def with_discard_env_file(options: ProjectOptions) -> None:
    """Have the loader drop ``env_file`` from every service."""
    options.load_options.append(with_discard_env_files)


def with_interpolation(enabled: bool) -> ProjectOptionsFn:
    """Enable or disable variable interpolation in the loader."""
    def _apply(options: ProjectOptions) -> None:
        if not enabled:
            options.load_options.append(with_skip_interpolation)
    return _apply


def with_load_options(*directives: Callable[[LoaderOptions], None]) -> ProjectOptionsFn:
    """Append arbitrary load directives."""
    def _apply(options: ProjectOptions) -> None:
        options.load_options.extend(directives)
    return _apply

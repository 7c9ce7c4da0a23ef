"""Configuration path resolution for compose-options."""

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel

from compose_options.constants import (
    COMPOSE_FILE_PATH,
    COMPOSE_FILE_SEPARATOR,
    DEFAULT_FILE_NAMES,
    DEFAULT_FILE_SEPARATOR,
    STDIN_PATH,
)
from compose_options.exceptions import ConfigFileNotFoundError, NoConfigurationFoundError

logger = logging.getLogger(__name__)


class ResolvedPaths(BaseModel):
    """Config paths to open and the paths to record on the project."""

    open_paths: list[str]
    display_paths: list[str]


class ConfigPathResolver:
    """Resolve the configuration files that define a project.

    Resolution order (first match wins):
    1. Explicit paths, made absolute against the working directory and
       checked for existence ('-' is passed through)
    2. The COMPOSE_FILE environment variable, split on COMPOSE_FILE_SEPARATOR
       (os.pathsep by default), taken as-is
    3. The first directory, from the working directory upwards, holding any
       of DEFAULT_FILE_NAMES; the most preferred name in that directory wins

    Note: The upward search stops at the nearest directory with a match,
    even if a more preferred file name exists further up.
    """

    def __init__(
            self,
            environ: Mapping[str, str] | None = None,
            file_names: Sequence[str] = DEFAULT_FILE_NAMES,
    ) -> None:
        """Initialize the path resolver.

        Args:
            environ: Environment snapshot to read overrides from (os.environ if None)
            file_names: Candidate file names in order of preference
        """
        self._environ = os.environ if environ is None else environ
        self.file_names = list(file_names)

    def resolve(self, explicit_paths: Sequence[str], working_dir: str | None = None) -> ResolvedPaths:
        """Resolve configuration paths.

        Args:
            explicit_paths: Paths given by the caller, possibly empty
            working_dir: Base for relative paths and start of the search
                (process current directory if None or empty)

        Returns:
            ResolvedPaths with the paths to open and the paths to display

        Raises:
            ConfigFileNotFoundError: If an explicit path does not exist
            NoConfigurationFoundError: If the search reaches the filesystem root
        """
        base = working_dir or os.getcwd()

        # 1. Explicit paths (highest priority)
        if explicit_paths:
            return ResolvedPaths(
                open_paths=[self._resolve_explicit(path, base) for path in explicit_paths],
                display_paths=list(explicit_paths),
            )

        # 2. Environment override
        from_env = self._paths_from_environment()
        if from_env:
            logger.debug(f"Using config files from {COMPOSE_FILE_PATH}: {from_env}")
            return ResolvedPaths(open_paths=from_env, display_paths=list(from_env))

        # 3. Upward search
        winner = self._search_upwards(Path(os.path.abspath(base)))
        return ResolvedPaths(open_paths=[winner], display_paths=[winner])

    def _resolve_explicit(self, path: str, base: str) -> str:
        if path == STDIN_PATH:
            return path
        if not os.path.isabs(path):
            path = os.path.abspath(os.path.join(base, path))
        if not os.path.exists(path):
            raise ConfigFileNotFoundError(path)
        return path

    def _paths_from_environment(self) -> list[str]:
        value = self._environ.get(COMPOSE_FILE_PATH, "")
        if not value:
            return []
        separator = self._environ.get(COMPOSE_FILE_SEPARATOR) or DEFAULT_FILE_SEPARATOR
        return value.split(separator)

    def _search_upwards(self, start: Path) -> str:
        directory = start
        while True:
            candidates = self._find_in_directory(directory)
            if candidates:
                winner = candidates[0]
                if len(candidates) > 1:
                    logger.warning(
                        f"Found multiple config files with supported names: {', '.join(candidates)}"
                    )
                    logger.warning(f"Using {winner}")
                return winner

            parent = directory.parent
            if parent == directory:
                raise NoConfigurationFoundError(start)
            directory = parent

    def _find_in_directory(self, directory: Path) -> list[str]:
        """Return every config file in ``directory``, in order of preference.

        Args:
            directory: Directory to search

        Returns:
            Paths of existing candidate files (may be empty)
        """
        return [
            str(directory / name)
            for name in self.file_names
            if (directory / name).is_file()
        ]

"""Environment variable merging for compose-options."""

import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from compose_options.env.dotenv_file import DotEnvFileSource
from compose_options.exceptions import InvalidKeyValueFormatError


def parse_key_value_list(entries: Iterable[str]) -> dict[str, str]:
    """Split ``KEY=VALUE`` strings into a mapping.

    Only the first ``=`` separates key from value, so values may contain ``=``.

    Args:
        entries: Strings of the form ``KEY=VALUE``

    Returns:
        Mapping of keys to values; later duplicates win

    Raises:
        InvalidKeyValueFormatError: If an entry contains no ``=``
    """
    result: dict[str, str] = {}
    for entry in entries:
        key, sep, value = entry.partition("=")
        if not sep:
            raise InvalidKeyValueFormatError(entry)
        result[key] = value
    return result


class EnvironmentMerger:
    """Merge variable sources into a single mapping.

    Every import overwrites keys that are already present and no import ever
    removes a key, so precedence is decided purely by the order in which the
    caller runs the imports.

    Attributes:
        environment: The shared mapping being written to
    """

    def __init__(self, environment: dict[str, str] | None = None) -> None:
        """Initialize the merger.

        Args:
            environment: Existing mapping to write into (a new dict if None)
        """
        self.environment = environment if environment is not None else {}

    def import_from_process_environment(self, environ: Mapping[str, str] | None = None) -> None:
        """Import every variable of the process environment.

        Args:
            environ: Environment snapshot to import (``os.environ`` if None)
        """
        self._update(os.environ if environ is None else environ)

    def import_from_dotenv_file(self, working_dir: str | Path) -> None:
        """Import the ``.env`` file of ``working_dir``; a missing file is a no-op.

        Raises:
            MalformedEnvFileError: If the file exists but cannot be parsed
        """
        self._update(DotEnvFileSource(working_dir).load())

    def import_explicit(self, entries: Iterable[str]) -> None:
        """Import ``KEY=VALUE`` strings.

        Raises:
            InvalidKeyValueFormatError: If an entry contains no ``=``
        """
        self._update(parse_key_value_list(entries))

    def as_string_list(self) -> list[str]:
        """Render the merged mapping as ``KEY=VALUE`` strings."""
        return [f"{key}={value}" for key, value in self.environment.items()]

    def _update(self, values: Mapping[str, str]) -> None:
        for key, value in values.items():
            self.environment[key] = value

"""Environment source exceptions for compose-options."""

from pathlib import Path

from compose_options.exceptions.base import ConfigError


class MalformedEnvFileError(ConfigError):
    """Raised when a dotenv file contains a statement that cannot be parsed.

    A bare ``KEY`` with no ``=`` is treated as malformed as well.
    """

    def __init__(self, path: str | Path, line: int, statement: str) -> None:
        super().__init__(
            f"Malformed env file {path} at line {line}: {statement.strip()!r}"
        )
        self.path = str(path)
        self.line = line


class InvalidKeyValueFormatError(ConfigError, ValueError):
    """Raised when an explicit variable is not written as ``KEY=VALUE``."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"Invalid variable {entry!r}: expected KEY=VALUE")
        self.entry = entry

"""Configuration file exceptions for compose-options."""

from pathlib import Path

from compose_options.exceptions.base import ConfigError


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Raised when an explicitly requested config file does not exist.

    Also a ``FileNotFoundError`` so callers that only care about the OS-level
    condition can keep catching that.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Configuration file not found: {path}")
        self.path = str(path)


class NoConfigurationFoundError(ConfigError):
    """Raised when the upward search reaches the filesystem root without a match."""

    def __init__(self, search_root: str | Path) -> None:
        super().__init__(
            f"Can't find a suitable configuration file in {search_root} or any parent directory"
        )
        self.search_root = str(search_root)


class DocumentParseError(ConfigError):
    """Raised when a configuration document cannot be parsed.

    This includes:
    - YAML syntax errors
    - Empty documents
    - Documents whose top-level object is not a mapping
    """

    def __init__(
            self,
            message: str,
            *,
            filename: str | None = None,
            line: int | None = None,
            column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.filename = filename
        self.line = line
        self.column = column


class ProjectLoadError(ConfigError):
    """Raised by the default loader when parsed documents cannot form a project."""

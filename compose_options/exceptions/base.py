"""Base exception classes for compose-options."""


class ConfigError(Exception):
    """Base class for user-facing configuration errors.

    All resolution and loading errors inherit from this class so callers can
    report them uniformly, e.g. the CLI prints the message and exits with 1.
    """

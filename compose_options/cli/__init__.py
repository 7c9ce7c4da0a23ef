"""Command-line interface for compose-options."""

from compose_options.cli.app import app

__all__ = ["app"]

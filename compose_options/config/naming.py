"""Project name resolution for compose-options."""

import os
import re
from collections.abc import Mapping

from compose_options.constants import COMPOSE_PROJECT_NAME
from compose_options.loader import LoaderOptions, LoadOption

# Runs of characters not allowed in a derived project name
_INVALID_NAME_CHARS = re.compile(r"[^-_a-z0-9]+")


def derive_name(working_dir: str) -> str:
    """Derive a project name from a directory.

    The base name is lower-cased and every character outside ``[a-z0-9_-]``
    is deleted, so ``/home/user/My_App!!`` gives ``my_app``. The result may
    be empty.
    """
    base = os.path.basename(os.path.abspath(working_dir))
    return _INVALID_NAME_CHARS.sub("", base.lower())


class ProjectNameResolver:
    """Resolve the project name.

    Priority: explicit name, then COMPOSE_PROJECT_NAME when it is set (even
    to an empty value), then a name derived from the working directory.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the name resolver.

        Args:
            environ: Environment to read COMPOSE_PROJECT_NAME from; the process
                environment when omitted
        """
        self._environ = os.environ if environ is None else environ

    def resolve(self, name: str | None, working_dir: str) -> str:
        """Resolve the project name.

        Args:
            name: Explicitly requested name, ignored when empty
            working_dir: Absolute working directory used to derive a fallback name

        Returns:
            The explicit name, the COMPOSE_PROJECT_NAME value, or a derived name
        """
        if name:
            return name
        if COMPOSE_PROJECT_NAME in self._environ:
            return self._environ[COMPOSE_PROJECT_NAME]
        return derive_name(working_dir)

    def directive(self, name: str | None, working_dir: str) -> LoadOption:
        """Return a load directive that sets the resolved name when applied."""
        def _apply(opts: LoaderOptions) -> None:
            opts.name = self.resolve(name, working_dir)
        return _apply

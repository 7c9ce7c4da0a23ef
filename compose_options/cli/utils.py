"""CLI utility functions for compose-options."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from compose_options.config import (
    ProjectOptions,
    ProjectOptionsFn,
    with_dotenv,
    with_env,
    with_interpolation,
    with_name,
    with_os_env,
    with_working_directory,
)
from compose_options.loader import Project

# Project sections printed by ``config``, in output order
_OUTPUT_SECTIONS = ["services", "networks", "volumes", "secrets", "configs"]


def _build_options(
        files: Optional[list[str]],
        project_name: Optional[str],
        project_directory: Optional[Path],
        env: Optional[list[str]],
        *,
        dotenv: bool = True,
        interpolate: bool = True,
) -> ProjectOptions:
    """Translate CLI flags into ProjectOptions.

    Sources are applied lowest precedence first: the working directory, the
    ``.env`` file, the process environment, then ``--env`` values.
    """
    fns: list[ProjectOptionsFn] = []
    if project_directory is not None:
        fns.append(with_working_directory(str(project_directory)))
    if dotenv:
        fns.append(with_dotenv)
    fns.append(with_os_env)
    if env:
        fns.append(with_env(env))
    if project_name:
        fns.append(with_name(project_name))
    fns.append(with_interpolation(interpolate))
    return ProjectOptions.create(files or [], *fns)


def _project_to_dict(project: Project) -> dict[str, Any]:
    """Return the printable form of ``project``, omitting empty sections."""
    data: dict[str, Any] = {"name": project.name}
    for section in _OUTPUT_SECTIONS:
        value = getattr(project, section)
        if value:
            data[section] = value
    return data

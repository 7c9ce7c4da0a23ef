"""Default project loader for compose-options.

Merges parsed documents in order (later documents win), interpolates
variables from the resolved environment and applies load directives. It does
not validate the service graph.
"""

import logging
from typing import Any

from compose_options.exceptions import ProjectLoadError
from compose_options.loader.interpolation import interpolate
from compose_options.loader.models import ConfigDetails, LoaderOptions, LoadOption, Project

logger = logging.getLogger(__name__)

# Top-level sections whose entries are keyed by name
SECTIONS = ["services", "networks", "volumes", "secrets", "configs"]


def load(details: ConfigDetails, *options: LoadOption) -> Project:
    """Build a project from parsed documents.

    Args:
        details: Parsed documents, working directory and environment
        *options: Load directives, applied in order to a fresh LoaderOptions

    Returns:
        The merged project

    Raises:
        ProjectLoadError: If a section is not a mapping or interpolation fails
    """
    opts = LoaderOptions()
    for option in options:
        option(opts)

    merged: dict[str, Any] = {}
    for config_file in details.config_files:
        logger.debug(f"Merging {config_file.filename}")
        merged = deep_merge(merged, config_file.config)

    if not opts.skip_interpolation:
        merged = interpolate(merged, details.environment)

    sections = {name: _section(merged, name) for name in SECTIONS}
    services = {}
    for service_name, service in sections["services"].items():
        if service is None:
            service = {}
        if not isinstance(service, dict):
            raise ProjectLoadError(
                f"Service '{service_name}' must be a mapping, got {type(service).__name__}"
            )
        if opts.discard_env_files:
            service = {k: v for k, v in service.items() if k != "env_file"}
        services[service_name] = service
    sections["services"] = services

    return Project(
        name=opts.name,
        working_dir=details.working_dir,
        compose_files=[f.filename for f in details.config_files],
        environment=dict(details.environment),
        **sections,
    )


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dicts with "overlay wins".

    Dicts are merged recursively; lists and scalars from ``overlay`` replace
    those of ``base``. Neither input is mutated.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def with_name(name: str) -> LoadOption:
    """Return a directive that sets the project name."""
    def _apply(opts: LoaderOptions) -> None:
        opts.name = name
    return _apply


def with_discard_env_files(opts: LoaderOptions) -> None:
    """Directive that drops the ``env_file`` key of every service."""
    opts.discard_env_files = True


def with_skip_interpolation(opts: LoaderOptions) -> None:
    """Directive that disables variable interpolation."""
    opts.skip_interpolation = True


def _section(merged: dict[str, Any], name: str) -> dict[str, Any]:
    value = merged.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ProjectLoadError(f"'{name}' must be a mapping, got {type(value).__name__}")
    return value

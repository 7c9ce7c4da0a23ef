"""Variable interpolation for parsed configuration documents."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from compose_options.exceptions import ProjectLoadError

logger = logging.getLogger(__name__)

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_BRACED = re.compile(r"^(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<op>:-|-|:\?|\?)(?P<arg>.*))?$", re.DOTALL)


def interpolate(value: Any, environment: Mapping[str, str]) -> Any:
    """Substitute variable references in every string of ``value``.

    Supported forms are ``$NAME``, ``${NAME}``, ``${NAME:-default}`` (default
    when unset or empty), ``${NAME-default}`` (default when unset),
    ``${NAME:?message}`` and ``${NAME?message}`` (error), and ``$$`` for a
    literal dollar sign. Defaults and messages may themselves contain
    references, e.g. ``${A:-${B}}``. Mapping keys are left untouched.

    Raises:
        ProjectLoadError: On a malformed reference or a required variable
    """
    if isinstance(value, str):
        return _interpolate_string(value, environment)
    if isinstance(value, dict):
        return {k: interpolate(v, environment) for k, v in value.items()}
    if isinstance(value, list):
        return [interpolate(v, environment) for v in value]
    return value


def _interpolate_string(value: str, environment: Mapping[str, str]) -> str:
    parts = []
    pos = 0
    while True:
        start = value.find("$", pos)
        if start == -1:
            break
        parts.append(value[pos:start])
        following = value[start + 1:start + 2]
        named = _NAME.match(value, start + 1)
        if following == "$":
            parts.append("$")
            pos = start + 2
        elif following == "{":
            end = _closing_brace(value, start)
            parts.append(_replace_braced(value[start + 2:end], value[start:end + 1], environment))
            pos = end + 1
        elif named is not None:
            parts.append(_lookup(named.group(0), environment))
            pos = named.end()
        else:
            parts.append("$")
            pos = start + 1
    parts.append(value[pos:])
    return "".join(parts)


def _closing_brace(value: str, start: int) -> int:
    """Index of the brace closing the ``${`` at ``start``, counting nested braces."""
    depth = 0
    for index in range(start + 1, len(value)):
        if value[index] == "{":
            depth += 1
        elif value[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    raise ProjectLoadError(f"Invalid interpolation format: {value[start:]!r}")


def _replace_braced(content: str, reference: str, environment: Mapping[str, str]) -> str:
    braced = _BRACED.match(content)
    if braced is None:
        raise ProjectLoadError(f"Invalid interpolation format: {reference!r}")
    name, op, arg = braced.group("name", "op", "arg")
    current = environment.get(name)

    if op == ":-":
        return current if current else _interpolate_string(arg, environment)
    if op == "-":
        return current if current is not None else _interpolate_string(arg, environment)
    if (op == ":?" and not current) or (op == "?" and current is None):
        message = _interpolate_string(arg, environment)
        raise ProjectLoadError(f"Required variable {name} is missing a value: {message}")
    return _lookup(name, environment)


def _lookup(name: str, environment: Mapping[str, str]) -> str:
    if name not in environment:
        logger.warning(f"The {name} variable is not set. Defaulting to a blank string.")
        return ""
    return environment[name]

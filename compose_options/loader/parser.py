"""YAML document parser for compose-options."""

from typing import Any

import yaml

from compose_options.exceptions import DocumentParseError


def parse_yaml(content: bytes | str, *, filename: str | None = None) -> dict[str, Any]:
    """Parse a configuration document.

    Args:
        content: Raw document bytes or text
        filename: Name used in error messages

    Returns:
        The top-level mapping of the document

    Raises:
        DocumentParseError: If the YAML is invalid, empty, or not a mapping
    """
    where = f" in {filename}" if filename else ""
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        error_msg = f"Failed to parse YAML{where}: {e}"
        line = column = None
        mark = getattr(e, 'problem_mark', None)
        if mark is not None:
            line, column = mark.line + 1, mark.column + 1
            error_msg += f" (line {line}, column {column})"
        raise DocumentParseError(error_msg, filename=filename, line=line, column=column) from e

    if data is None:
        raise DocumentParseError(f"Configuration document is empty{where}", filename=filename)

    if not isinstance(data, dict):
        raise DocumentParseError(
            f"Top-level object must be a mapping{where}, got {type(data).__name__}",
            filename=filename,
        )

    return _stringify_keys(data)


def _stringify_keys(value: Any) -> Any:
    """Convert mapping keys such as ``80:`` or ``true:`` to strings, recursively."""
    if isinstance(value, dict):
        return {_key(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_keys(v) for v in value]
    return value


def _key(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    return key if isinstance(key, str) else str(key)

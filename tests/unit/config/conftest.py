"""Config module test fixtures.

Provides fixtures specific to path resolution, reading and assembly.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest


# =============================================================================
# Directory Trees
# =============================================================================

@pytest.fixture
def nested_tree(tmp_path: Path) -> dict[str, Path]:
    """Create the tree ``a/b/c`` with compose.yml in ``a`` and ``a/b``.

    Returns:
        Mapping of level name to directory path.
    """
    a = tmp_path / "a"
    b = a / "b"
    c = b / "c"
    c.mkdir(parents=True)
    (a / "compose.yml").write_text("services: {top: {}}\n")
    (b / "compose.yml").write_text("services: {middle: {}}\n")
    return {"a": a, "b": b, "c": c}


# =============================================================================
# Standard Input
# =============================================================================

@pytest.fixture
def stdin_factory():
    """Factory fixture for fake binary standard input streams."""
    def _create(content: str) -> io.BytesIO:
        return io.BytesIO(content.encode("utf-8"))

    return _create

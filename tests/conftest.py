"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or function-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from pathlib import Path

import pytest

from compose_options.constants import (
    COMPOSE_FILE_PATH,
    COMPOSE_FILE_SEPARATOR,
    COMPOSE_PROJECT_NAME,
)


# =============================================================================
# Environment Isolation
# =============================================================================

@pytest.fixture(autouse=True)
def clean_compose_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove COMPOSE_* overrides of the host so they cannot leak into tests."""
    for name in (COMPOSE_FILE_PATH, COMPOSE_FILE_SEPARATOR, COMPOSE_PROJECT_NAME):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a temporary project directory.

    Returns:
        Path to a clean directory named ``project``.
    """
    directory = tmp_path / "project"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


@pytest.fixture
def write_compose():
    """Factory fixture for writing compose files.

    Returns:
        Callable that writes ``content`` to ``directory / name`` and returns the path.
    """
    def _write(directory: Path, name: str = "compose.yaml", content: str = "services: {}\n") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "cli: Tests that invoke the Typer app")

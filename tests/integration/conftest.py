"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """Create a project with a base file, an override and a .env file.

    Layout::

        Sample_Stack/
            .env
            compose.yaml
            compose.override.yaml
            nested/deeper/
    """
    root = tmp_path / "Sample_Stack"
    (root / "nested" / "deeper").mkdir(parents=True)
    (root / ".env").write_text("TAG=1.25\nDB_PASSWORD=from-dotenv\n")
    (root / "compose.yaml").write_text(
        "services:\n"
        "  web:\n"
        "    image: nginx:${TAG}\n"
        "    env_file: web.env\n"
        "  db:\n"
        "    image: postgres\n"
        "    environment:\n"
        "      POSTGRES_PASSWORD: ${DB_PASSWORD}\n"
        "volumes:\n"
        "  data: {}\n"
    )
    (root / "compose.override.yaml").write_text(
        "services:\n"
        "  web:\n"
        "    ports:\n"
        "      - '8080:80'\n"
    )
    return root

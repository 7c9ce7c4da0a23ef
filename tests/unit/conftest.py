"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight fakes and fast execution.
"""

from __future__ import annotations

from typing import Any

import pytest

from compose_options.loader import ConfigDetails, LoaderOptions, Project


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Fake Loader
# =============================================================================

@pytest.fixture
def recording_loader():
    """Factory fixture for a loader that records what it was called with.

    Returns:
        Callable loader with a ``calls`` list of (details, LoaderOptions) pairs.
    """
    calls: list[tuple[ConfigDetails, LoaderOptions]] = []

    def _load(details: ConfigDetails, *options: Any) -> Project:
        opts = LoaderOptions()
        for option in options:
            option(opts)
        calls.append((details, opts))
        return Project(
            name=opts.name,
            working_dir=details.working_dir,
            compose_files=[f.filename for f in details.config_files],
        )

    _load.calls = calls  # type: ignore[attr-defined]
    return _load

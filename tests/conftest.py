from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from marketsync.context import ReleaseContext
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def release_context() -> ReleaseContext:
    return ReleaseContext(
        ref="refs/tags/v1.2.3",
        repository="testowner/testrepo",
        actor="testactor",
        run_id="42",
        sha="abc123",
    )


@pytest.fixture
def fixed_clock():
    moment = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
    return lambda: moment

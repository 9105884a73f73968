"""
Pytest configuration and shared fixtures.

Provides sample report rows, a fake report source, remote config
objects, and environment isolation used across the test suite.
"""

import os
from typing import Any

import pytest

from issueboard.core.config.loader import clear_cache
from issueboard.core.config.models import RemoteConfig
from issueboard.core.reports.models import Report

CONFIG_ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "VITE_SUPABASE_URL",
    "VITE_SUPABASE_ANON_KEY",
    "ISSUEBOARD_TABLE",
    "ISSUEBOARD_LOCALE",
)


# ==============================================================================
# Environment Fixtures
# ==============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Remove config variables and user env files, and reset the config cache."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    clear_cache()
    yield
    # load_layered_env writes os.environ directly
    for name in CONFIG_ENV_VARS:
        os.environ.pop(name, None)
    clear_cache()


@pytest.fixture
def remote_env(monkeypatch):
    """Provide a valid remote configuration through the environment."""
    monkeypatch.setenv("SUPABASE_URL", "https://demo.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-test-key")


@pytest.fixture
def remote_config():
    """Provide a RemoteConfig for the default table."""
    return RemoteConfig(url="https://demo.supabase.co", key="anon-test-key")


# ==============================================================================
# Sample Data Fixtures
# ==============================================================================


def make_row(
    id: str,
    status: Any = "pending",
    created_at: str = "2025-03-01T12:00:00+00:00",
    description: str = "Something is broken",
    user_id: str | None = "5b7c1e9a-2f44-4d1b-8e2a-0c6d3f9b1a77",
) -> dict[str, Any]:
    """Build a raw row as the remote table returns it."""
    return {
        "id": id,
        "description": description,
        "status": status,
        "created_at": created_at,
        "user_id": user_id,
    }


@pytest.fixture
def mixed_rows():
    """Two pending and three resolved rows, newest first."""
    return [
        make_row("r5", "resolved", "2025-03-05T12:00:00+00:00", "Dark mode colors fixed"),
        make_row("r4", "pending", "2025-03-04T12:00:00+00:00", "Add CSV export"),
        make_row("r3", "resolved", "2025-03-03T12:00:00+00:00", "Login loop on Safari"),
        make_row("r2", "pending", "2025-03-02T12:00:00+00:00", "Typo on pricing page"),
        make_row("r1", "resolved", "2025-03-01T12:00:00+00:00", "Crash when saving draft"),
    ]


@pytest.fixture
def mixed_reports(mixed_rows):
    """The mixed rows as Report objects."""
    return [Report.model_validate(row) for row in mixed_rows]


# ==============================================================================
# Fake Sources
# ==============================================================================


class FakeReportSource:
    """In-memory stand-in for ReportClient."""

    def __init__(self, reports: list[Report] | None = None, error: Exception | None = None):
        self.reports = list(reports or [])
        self.error = error
        self.calls = 0
        self.closed = False

    async def fetch_all(self) -> list[Report]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.reports)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_source(mixed_reports):
    """Provide a fake source returning the mixed reports."""
    return FakeReportSource(mixed_reports)


@pytest.fixture
def row_factory():
    """Provide the raw row builder."""
    return make_row


@pytest.fixture
def source_factory():
    """Provide the fake source class for tests that need custom behaviour."""
    return FakeReportSource

"""
Tests for the dashboard API stats endpoint.

Tests validate:
- GET /api/stats endpoint
- Zero counts before the first fetch
- Counts follow the current reports
"""

import asyncio

from fastapi.testclient import TestClient

from issueboard.core.board.state import BoardState
from issueboard.core.dashboard.api.app import create_app
from issueboard.core.reports.models import Report


class TestStatsEndpoint:
    """Tests for GET /api/stats endpoint."""

    def test_stats_before_first_fetch(self, fake_source):
        client = TestClient(create_app(board_state=BoardState(fake_source)))

        response = client.get("/api/stats")

        assert response.status_code == 200
        assert response.json() == {"total": 0, "pending": 0, "resolved": 0, "unknown": 0}

    def test_stats_mixed(self, fake_source):
        board = BoardState(fake_source)
        asyncio.run(board.refresh())
        client = TestClient(create_app(board_state=board))

        data = client.get("/api/stats").json()

        assert data == {"total": 5, "pending": 2, "resolved": 3, "unknown": 0}

    def test_stats_recomputed_after_refresh(self, fake_source, mixed_reports, row_factory):
        board = BoardState(fake_source)
        asyncio.run(board.refresh())
        client = TestClient(create_app(board_state=board))

        fake_source.reports = [
            *mixed_reports,
            Report.model_validate(row_factory("r6", "pending")),
            Report.model_validate(row_factory("r7", "duplicate")),
        ]
        client.post("/api/refresh")
        data = client.get("/api/stats").json()

        assert data == {"total": 7, "pending": 3, "resolved": 3, "unknown": 1}

"""
Tests for API error handling.

Tests validate:
- Consistent error response format with error codes
- HTTPException handling with proper error codes
- Validation error handling
- Uncaught exception handling without tracebacks in the response
"""

from fastapi.testclient import TestClient

from issueboard.core.board.state import BoardState
from issueboard.core.dashboard.api.app import ErrorCode, create_app


def make_client(fake_source, **kwargs) -> TestClient:
    app = create_app(board_state=BoardState(fake_source))

    @app.get("/test/boom")
    async def boom() -> dict[str, str]:
        raise RuntimeError("kaboom")

    @app.get("/test/number")
    async def number(n: int) -> dict[str, int]:
        return {"n": n}

    return TestClient(app, **kwargs)


class TestErrorResponseFormat:
    """Tests for consistent error response format."""

    def test_404_error_format(self, fake_source):
        response = make_client(fake_source).get("/api/nonexistent")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == ErrorCode.NOT_FOUND
        assert "message" in data
        assert data["request_id"]

    def test_405_error_format(self, fake_source):
        response = make_client(fake_source).get("/api/refresh")

        assert response.status_code == 405
        assert response.json()["error_code"] == ErrorCode.METHOD_NOT_ALLOWED

    def test_validation_error_format(self, fake_source):
        response = make_client(fake_source).get("/test/number", params={"n": "abc"})

        assert response.status_code == 422
        data = response.json()
        assert data["error_code"] == ErrorCode.VALIDATION_ERROR
        assert data["message"] == "Request validation failed"
        assert "query -> n" in data["detail"]

    def test_uncaught_exception(self, fake_source, caplog):
        client = make_client(fake_source, raise_server_exceptions=False)

        with caplog.at_level("ERROR", logger="issueboard.core.dashboard.api.app"):
            response = client.get("/test/boom")

        assert response.status_code == 500
        data = response.json()
        assert data["error_code"] == ErrorCode.INTERNAL_ERROR
        assert data["message"] == "An internal server error occurred"
        assert "Traceback" not in data["detail"]
        assert "kaboom" in caplog.text


class TestBoardNotReady:
    """Routes answer 503 until a board is attached."""

    def test_json_routes(self):
        client = TestClient(create_app())

        for path in ("/api/board", "/api/stats"):
            response = client.get(path)
            assert response.status_code == 503
            assert response.json()["error_code"] == ErrorCode.NOT_READY

    def test_page(self):
        response = TestClient(create_app()).get("/")

        assert response.status_code == 503
        assert response.json()["message"] == "Board not ready"

"""
FastAPI application setup for the issueboard dashboard.

Creates the app, wires the board view model in at startup, and
registers routes and error handlers.
"""

import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from issueboard import __version__
from issueboard.core.board.labels import Labels, get_labels
from issueboard.core.board.state import BoardState
from issueboard.core.config.loader import load_config
from issueboard.core.dashboard.api.routes import board, page, stats
from issueboard.core.reports.client import ReportClient

logger = logging.getLogger(__name__)


# Error codes for consistent error responses
class ErrorCode(str, Enum):
    """Standard error codes for API responses."""

    # Client errors (4xx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Server errors (5xx)
    NOT_READY = "NOT_READY"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error_code: ErrorCode
    message: str
    detail: str | None = None
    request_id: str | None = None


def _error_code_for(status_code: int) -> ErrorCode:
    if status_code == status.HTTP_404_NOT_FOUND:
        return ErrorCode.NOT_FOUND
    if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return ErrorCode.METHOD_NOT_ALLOWED
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        return ErrorCode.NOT_READY
    if status_code < 500:
        return ErrorCode.INVALID_REQUEST
    return ErrorCode.INTERNAL_ERROR


def _error_response(
    request: Request, status_code: int, error_code: ErrorCode, message: str, detail: str
) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        detail=detail,
        request_id=str(id(request)),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handle HTTPException (ours and Starlette's routing errors).

    Logs 5xx at error level and everything else at info level.
    """
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)

    if exc.status_code >= 500:
        logger.error(
            "HTTP %d on %s %s: %s",
            exc.status_code,
            request.method,
            request.url.path,
            detail,
            extra={"request_id": id(request)},
        )
    else:
        logger.info(
            "HTTP %d on %s %s: %s",
            exc.status_code,
            request.method,
            request.url.path,
            detail,
            extra={"request_id": id(request)},
        )

    return _error_response(
        request, exc.status_code, _error_code_for(exc.status_code), detail, detail
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return the first validation error without internal details."""
    logger.warning(
        "Validation error on %s %s: %s",
        request.method,
        request.url.path,
        exc.errors(),
        extra={"request_id": id(request)},
    )

    first_error = exc.errors()[0] if exc.errors() else {}
    field = " -> ".join(str(loc) for loc in first_error.get("loc", []))
    error_msg = first_error.get("msg", "Invalid input")

    return _error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorCode.VALIDATION_ERROR,
        "Request validation failed",
        f"{field}: {error_msg}" if field else error_msg,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all uncaught exceptions.

    The full traceback goes to the log; the client gets a clean envelope.
    """
    logger.error(
        "Unhandled exception on %s %s: %s\n%s",
        request.method,
        request.url.path,
        str(exc),
        traceback.format_exc(),
        extra={"request_id": id(request)},
    )

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.INTERNAL_ERROR,
        "An internal server error occurred",
        str(exc),
    )


def create_app(board_state: BoardState | None = None, labels: Labels | None = None) -> FastAPI:
    """
    Create the dashboard app.

    When no board is given, startup builds one from the environment
    configuration. Either way startup triggers the initial fetch.

    Args:
        board_state: Preconfigured view model (tests, embedding)
        labels: Display labels; defaults to the configured locale

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        client: ReportClient | None = None
        if getattr(app.state, "board", None) is None:
            config = load_config()
            app.state.labels = app.state.labels or get_labels(config.locale)
            client = ReportClient(config.remote)
            app.state.board = BoardState(client)
            logger.info("Dashboard reading %s from %s", config.remote.table, config.remote.url)
        app.state.board.start_refresh()
        try:
            yield
        finally:
            await app.state.board.cancel_pending()
            if client is not None:
                await client.aclose()

    app = FastAPI(
        title="Issueboard Dashboard",
        description="Issue tracker dashboard for hosted bug and feature reports",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.board = board_state
    app.state.labels = labels

    app.include_router(page.router, tags=["page"])
    app.include_router(board.router, prefix="/api", tags=["board"])
    app.include_router(stats.router, prefix="/api", tags=["stats"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    app.add_exception_handler(
        StarletteHTTPException, http_exception_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        RequestValidationError, validation_exception_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, general_exception_handler)

    return app


app = create_app()

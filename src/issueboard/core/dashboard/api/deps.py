"""
Request dependencies shared by the dashboard routes.
"""

from fastapi import HTTPException, Request, status

from issueboard.core.board.labels import DEFAULT_LOCALE, LABELS, Labels
from issueboard.core.board.state import BoardState


def get_board(request: Request) -> BoardState:
    """
    Return the board attached to the running app.

    Raises:
        HTTPException: 503 if startup has not attached a board yet
    """
    board: BoardState | None = getattr(request.app.state, "board", None)
    if board is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Board not ready",
        )
    return board


def get_board_labels(request: Request) -> Labels:
    """Labels for the configured locale (zh-TW when none was configured)."""
    labels: Labels | None = getattr(request.app.state, "labels", None)
    return labels or LABELS[DEFAULT_LOCALE]

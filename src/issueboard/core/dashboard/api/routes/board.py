"""
Board API routes for the dashboard.

Provides JSON access to the board view model:
- GET /api/board - Loading flag, stats and reports in display order
- POST /api/refresh - Start a refresh; the fetch completes in the background
"""

from fastapi import APIRouter, BackgroundTasks, Depends, status

from issueboard.core.board.state import BoardSnapshot, BoardState
from issueboard.core.dashboard.api.deps import get_board

router = APIRouter()


@router.get("/board", response_model=BoardSnapshot)
async def get_board_snapshot(board: BoardState = Depends(get_board)) -> BoardSnapshot:
    """
    Get the current board.

    Reports are in the order the remote returned them (newest first).
    While ``loading`` is true the reports and stats are the previous
    snapshot's.

    Example response:
        {
          "loading": false,
          "stats": {"total": 2, "pending": 1, "resolved": 1, "unknown": 0},
          "reports": [
            {
              "id": "b71e",
              "description": "Export button does nothing",
              "status": "pending",
              "raw_status": "pending",
              "created_at": "2025-03-02T08:15:00Z",
              "user_id": "0f5e2c8a-41d2-4c55-a1b0-9b3f6e2d7c11",
              "short_user_id": "0f5e2c8a-4..."
            },
            ...
          ]
        }
    """
    return board.snapshot()


@router.post(
    "/refresh",
    response_model=BoardSnapshot,
    status_code=status.HTTP_202_ACCEPTED,
)
async def refresh_board(
    background_tasks: BackgroundTasks,
    board: BoardState = Depends(get_board),
) -> BoardSnapshot:
    """
    Re-fetch the reports.

    Responds immediately with the loading snapshot. Repeated calls are not
    debounced; if refreshes overlap, the last one started wins.
    """
    token = board.begin_refresh()
    background_tasks.add_task(board.finish_refresh, token)
    return board.snapshot()

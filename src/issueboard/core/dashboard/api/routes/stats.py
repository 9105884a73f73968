"""
Stats API routes for the dashboard.

- GET /api/stats - Total, pending, resolved (and unknown) report counts
"""

from fastapi import APIRouter, Depends

from issueboard.core.board.state import BoardState
from issueboard.core.dashboard.api.deps import get_board
from issueboard.core.reports.models import ReportStats

router = APIRouter()


@router.get("/stats", response_model=ReportStats)
async def get_stats(board: BoardState = Depends(get_board)) -> ReportStats:
    """
    Get the aggregate counts for the stats row.

    Counts are derived from the reports currently held, so they are the
    previous snapshot's while a refresh is in flight.

    Example response:
        {"total": 5, "pending": 2, "resolved": 3, "unknown": 0}
    """
    return board.stats

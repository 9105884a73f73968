"""
HTML page routes.

- GET / - The dashboard page
- POST /refresh - Refresh button target; redirects back to the page
"""

from pathlib import Path

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from issueboard.core.board.labels import Labels
from issueboard.core.board.state import BoardState
from issueboard.core.dashboard.api.deps import get_board, get_board_labels
from issueboard.core.reports.models import ReportStatus

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Placeholder blocks shown while a fetch is in flight
SKELETON_COUNT = 3


@router.get("/", response_class=HTMLResponse)
async def board_page(
    request: Request,
    board: BoardState = Depends(get_board),
    labels: Labels = Depends(get_board_labels),
) -> HTMLResponse:
    """Render the board: header, stats row, then cards or skeletons."""
    return templates.TemplateResponse(
        request,
        "board.html",
        {
            "snapshot": board.snapshot(),
            "labels": labels,
            "statuses": ReportStatus,
            "skeleton_count": SKELETON_COUNT,
        },
    )


@router.post("/refresh")
async def refresh_page(
    background_tasks: BackgroundTasks,
    board: BoardState = Depends(get_board),
) -> RedirectResponse:
    """Start a refresh and send the browser back to the (loading) page."""
    token = board.begin_refresh()
    background_tasks.add_task(board.finish_refresh, token)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)

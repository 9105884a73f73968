"""
Board view model.

Holds the fetched reports and the loading flag, runs the fetch
transition, and hands renderers an immutable snapshot.

Transition:
    begin_refresh()   loading = True, new fetch token
    finish_refresh()  await fetch_all(); if the token is still the newest,
                      replace reports (success only) and set loading = False,
                      whether the fetch succeeded, failed or raised

Fetch failures are logged and otherwise invisible: the previous reports
stay on screen. When refreshes overlap, only the most recently started
one is applied; older results are dropped.
"""

import asyncio
import logging
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from issueboard.core.reports.exceptions import ReportFetchError
from issueboard.core.reports.models import Report, ReportStats, compute_stats

logger = logging.getLogger(__name__)


class ReportSource(Protocol):
    """Anything that can fetch the full report snapshot."""

    async def fetch_all(self) -> list[Report]: ...


class BoardSnapshot(BaseModel):
    """Point-in-time view of the board for rendering and the JSON API."""

    loading: bool = Field(..., description="A fetch is in flight")
    stats: ReportStats = Field(default_factory=ReportStats)
    reports: list[Report] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class BoardState:
    """
    In-memory state of the dashboard.

    Starts empty and loading; the first refresh is triggered on mount.

    Example:
        >>> state = BoardState(ReportClient(config.remote))
        >>> await state.refresh()
        >>> state.stats.total
        5
    """

    def __init__(self, source: ReportSource) -> None:
        self.source = source
        self.reports: list[Report] = []
        self.loading: bool = True
        self._latest_token = 0
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def stats(self) -> ReportStats:
        """Counts derived from the current reports, recomputed on every access."""
        return compute_stats(self.reports)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            loading=self.loading,
            stats=self.stats,
            reports=list(self.reports),
        )

    def begin_refresh(self) -> int:
        """
        Enter the loading state and issue a new fetch token.

        Returns:
            Token to pass to finish_refresh()
        """
        self._latest_token += 1
        self.loading = True
        logger.debug("Refresh %d started", self._latest_token)
        return self._latest_token

    async def finish_refresh(self, token: int) -> None:
        """
        Run the fetch for ``token`` and apply its result if still current.

        The loading flag is cleared however the fetch settles. Errors other
        than ReportFetchError are re-raised after that.

        Args:
            token: Value returned by begin_refresh()
        """
        reports: list[Report] | None = None
        try:
            reports = await self.source.fetch_all()
        except ReportFetchError as e:
            logger.warning(
                "Refresh %d failed, keeping %d report(s): %s", token, len(self.reports), e
            )
        finally:
            if token != self._latest_token:
                logger.debug(
                    "Refresh %d superseded by %d, result dropped", token, self._latest_token
                )
            else:
                if reports is not None:
                    self.reports = reports
                self.loading = False
                logger.debug("Refresh %d settled (%d report(s))", token, len(self.reports))

    async def refresh(self) -> None:
        """Run a full refresh and wait for it to settle."""
        await self.finish_refresh(self.begin_refresh())

    def start_refresh(self) -> asyncio.Task[None]:
        """
        Schedule a refresh on the running event loop.

        The loading flag is set before this returns; the fetch itself
        runs in a task that is kept alive until it completes.
        """
        token = self.begin_refresh()
        task = asyncio.create_task(self.finish_refresh(token))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and (exc := task.exception()) is not None:
            logger.error("Background refresh crashed: %r", exc, exc_info=exc)

    async def cancel_pending(self) -> None:
        """Cancel scheduled refreshes that have not finished yet (shutdown)."""
        tasks = [task for task in self._tasks if not task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.debug("Cancelled %d pending refresh(es)", len(tasks))

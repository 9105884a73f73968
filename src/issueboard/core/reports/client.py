"""
Remote data source for reports.

Reads the full reports table from a Supabase project through its
PostgREST query API, newest first. There is no filtering, no paging,
no retry and no backoff: a fetch either returns the whole snapshot or
raises ReportFetchError.

Example:
    >>> from issueboard.core.config import load_config
    >>> client = ReportClient(load_config().remote)
    >>> reports = await client.fetch_all()
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import AsyncClient, acreate_client

from issueboard.core.config.models import RemoteConfig
from issueboard.core.reports.exceptions import ReportFetchError
from issueboard.core.reports.models import Report

logger = logging.getLogger(__name__)

# Builds the Supabase handle from (url, key)
ClientFactory = Callable[[str, str], Awaitable[AsyncClient]]

ORDER_COLUMN = "created_at"


class ReportClient:
    """
    Read-only client for the reports table.

    The Supabase handle is created on first use and reused by every
    later fetch. Pass ``client_factory`` to substitute the handle (tests).

    Attributes:
        config: Remote connection settings
    """

    def __init__(
        self, config: RemoteConfig, client_factory: ClientFactory = acreate_client
    ) -> None:
        self.config = config
        self._client_factory = client_factory
        self._client: AsyncClient | None = None
        self._client_lock = asyncio.Lock()

    @property
    def table(self) -> str:
        """Name of the table that is queried."""
        return self.config.table

    async def _get_client(self) -> AsyncClient:
        async with self._client_lock:
            if self._client is None:
                logger.debug("Creating Supabase client for %s", self.config.url)
                try:
                    self._client = await self._client_factory(self.config.url, self.config.key)
                except Exception as e:
                    raise ReportFetchError(
                        self.table,
                        f"Failed to create remote client: {e}",
                        url=self.config.url,
                    ) from e
            return self._client

    async def fetch_all(self) -> list[Report]:
        """
        Fetch every report, ordered by creation time descending.

        Returns:
            Reports in the order the remote returned them (possibly empty)

        Raises:
            ReportFetchError: If the request fails or any row is malformed
        """
        client = await self._get_client()
        logger.debug("Fetching all rows from %s", self.table)

        try:
            response = (
                await client.table(self.table)
                .select("*")
                .order(ORDER_COLUMN, desc=True)
                .execute()
            )
        except APIError as e:
            raise ReportFetchError(
                self.table, f"Query rejected: {e.message or e}", code=e.code
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ReportFetchError(self.table, f"Request failed: {e}") from e
        except ValueError as e:
            # Body that is not JSON
            raise ReportFetchError(self.table, f"Unreadable response: {e}") from e

        reports = self._parse_rows(response.data)
        logger.debug("Fetched %d report(s) from %s", len(reports), self.table)
        return reports

    async def aclose(self) -> None:
        """Close the Supabase handle's HTTP session, if one was created."""
        async with self._client_lock:
            client, self._client = self._client, None
        if client is not None:
            await client.postgrest.aclose()
            logger.debug("Closed Supabase client for %s", self.config.url)

    def _parse_rows(self, rows: Any) -> list[Report]:
        """Validate raw rows; one bad row fails the whole snapshot."""
        if not isinstance(rows, list):
            raise ReportFetchError(
                self.table, f"Expected a list of rows, got {type(rows).__name__}"
            )
        try:
            return [Report.model_validate(row) for row in rows]
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(loc) for loc in first.get("loc", ()))
            raise ReportFetchError(
                self.table, f"Malformed row: {field}: {first.get('msg')}"
            ) from e

"""
Report models for issueboard.

A Report is one bug/feature submission row read from the remote table.
Rows are only ever read; creation and updates happen elsewhere.
"""

import uuid
from collections import Counter
from collections.abc import Iterable
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

# Number of user id characters shown on a card
USER_ID_DISPLAY_LENGTH = 10


class ReportStatus(str, Enum):
    """Workflow status of a report."""

    PENDING = "pending"
    RESOLVED = "resolved"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> "ReportStatus":
        """
        Map a raw column value onto a status.

        Only the exact strings "pending" and "resolved" are recognized;
        anything else (other strings, None, numbers) is UNKNOWN.

        Example:
            >>> ReportStatus.parse("pending")
            <ReportStatus.PENDING: 'pending'>
            >>> ReportStatus.parse("wontfix")
            <ReportStatus.UNKNOWN: 'unknown'>
        """
        if isinstance(value, cls):
            return value
        if value == cls.PENDING.value:
            return cls.PENDING
        if value == cls.RESOLVED.value:
            return cls.RESOLVED
        return cls.UNKNOWN


class Report(BaseModel):
    """
    A single bug/feature report.

    Example:
        >>> report = Report(
        ...     id="8c1f",
        ...     description="App crashes on launch",
        ...     status="pending",
        ...     created_at="2025-03-01T12:00:00+00:00",
        ...     user_id="f3a9c2d1-77aa-4e1b-9c0e-1234567890ab",
        ... )
        >>> report.short_user_id
        'f3a9c2d1-7...'
    """

    id: str = Field(..., description="Opaque unique identifier")
    description: str = Field(default="", description="Free-text report body")
    status: ReportStatus = Field(default=ReportStatus.UNKNOWN, description="Parsed status")
    raw_status: str | None = Field(
        default=None, description="Status value exactly as stored in the table"
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    user_id: str | None = Field(default=None, description="Submitter identifier")

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def capture_raw_status(cls, data: Any) -> Any:
        """Keep the stored status string before it is mapped to the enum."""
        if isinstance(data, dict) and "raw_status" not in data:
            status = data.get("status")
            if isinstance(status, Enum):
                status = status.value
            data = {**data, "raw_status": None if status is None else str(status)}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Integer and UUID primary keys are displayed as strings."""
        if isinstance(v, (int, uuid.UUID)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("description", mode="before")
    @classmethod
    def coerce_description(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> ReportStatus:
        return ReportStatus.parse(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def short_user_id(self) -> str:
        """Submitter id cut to its first characters, always followed by an ellipsis."""
        return f"{(self.user_id or '')[:USER_ID_DISPLAY_LENGTH]}..."


class ReportStats(BaseModel):
    """
    Aggregate counts shown in the stats row.

    ``unknown`` counts reports whose status is neither pending nor
    resolved, so ``total == pending + resolved + unknown`` always holds.
    """

    total: int = Field(default=0, ge=0, description="Number of reports")
    pending: int = Field(default=0, ge=0, description="Reports with status pending")
    resolved: int = Field(default=0, ge=0, description="Reports with status resolved")
    unknown: int = Field(default=0, ge=0, description="Reports with any other status")


def compute_stats(reports: Iterable[Report]) -> ReportStats:
    """
    Count reports by status.

    Args:
        reports: Reports to aggregate

    Returns:
        ReportStats for the given reports

    Example:
        >>> stats = compute_stats([])
        >>> (stats.total, stats.pending, stats.resolved)
        (0, 0, 0)
    """
    counts = Counter(report.status for report in reports)
    return ReportStats(
        total=sum(counts.values()),
        pending=counts[ReportStatus.PENDING],
        resolved=counts[ReportStatus.RESOLVED],
        unknown=counts[ReportStatus.UNKNOWN],
    )

"""
Display strings and date formatting per locale.

The zh-TW table carries the board's original wording; en is the
alternative for English-speaking teams.
"""

from dataclasses import dataclass
from datetime import datetime

from issueboard.core.reports.exceptions import ConfigError
from issueboard.core.reports.models import ReportStatus


@dataclass(frozen=True)
class Labels:
    """UI strings for one locale."""

    locale: str
    subtitle: str
    refresh: str
    total: str
    pending: str
    resolved: str
    all_reports: str
    date_order: str  # "ymd" or "mdy"
    title: str = "Issue Tracker"
    user_prefix: str = "UID"
    badge_pending: str = "Pending"
    badge_resolved: str = "Resolved"
    badge_unknown: str = "Unknown"

    def badge(self, status: ReportStatus) -> str:
        """Badge text for a status."""
        if status == ReportStatus.PENDING:
            return self.badge_pending
        if status == ReportStatus.RESOLVED:
            return self.badge_resolved
        return self.badge_unknown

    def reports_heading(self, count: int) -> str:
        return f"{self.all_reports} ({count})"

    def format_date(self, value: datetime) -> str:
        """
        Render the calendar date of a timestamp in local time.

        Aware timestamps are converted to the local zone first; naive ones
        are taken as already local. No zero padding on month and day.

        Example:
            >>> LABELS["zh-TW"].format_date(datetime(2025, 3, 7, 9, 30))
            '2025/3/7'
            >>> LABELS["en"].format_date(datetime(2025, 3, 7, 9, 30))
            '3/7/2025'
        """
        local = value.astimezone() if value.tzinfo is not None else value
        if self.date_order == "mdy":
            return f"{local.month}/{local.day}/{local.year}"
        return f"{local.year}/{local.month}/{local.day}"


DEFAULT_LOCALE = "zh-TW"

LABELS: dict[str, Labels] = {
    DEFAULT_LOCALE: Labels(
        locale=DEFAULT_LOCALE,
        subtitle="GiveMeMoney 錯誤與功能建議看板",
        refresh="更新資料",
        total="總量",
        pending="待處理",
        resolved="已解決",
        all_reports="所有報告",
        date_order="ymd",
    ),
    "en": Labels(
        locale="en",
        subtitle="GiveMeMoney bug and feature request board",
        refresh="Refresh",
        total="Total",
        pending="Pending",
        resolved="Resolved",
        all_reports="All reports",
        date_order="mdy",
    ),
}


def get_labels(locale: str) -> Labels:
    """
    Look up the label table for a locale.

    Raises:
        ConfigError: If the locale has no table
    """
    try:
        return LABELS[locale]
    except KeyError:
        raise ConfigError(f"Unsupported locale: {locale}", locale=locale) from None

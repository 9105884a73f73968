"""
Report records and the remote client that reads them.
"""

from issueboard.core.reports.exceptions import ConfigError, IssueboardError, ReportFetchError
from issueboard.core.reports.models import Report, ReportStats, ReportStatus, compute_stats

__all__ = [
    "ConfigError",
    "IssueboardError",
    "Report",
    "ReportFetchError",
    "ReportStats",
    "ReportStatus",
    "compute_stats",
]

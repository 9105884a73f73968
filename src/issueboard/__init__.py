"""
Issueboard - Issue tracker dashboard

Displays bug and feature reports stored in a hosted Supabase table,
with aggregate counts and a card list, in the browser or the terminal.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from issueboard.core.config.models import BoardConfig
from issueboard.core.reports.models import Report, ReportStats, ReportStatus

__all__ = ["BoardConfig", "Report", "ReportStats", "ReportStatus", "__version__"]

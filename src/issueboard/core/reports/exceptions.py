"""
Custom exceptions for issueboard.

Exception Hierarchy:
    IssueboardError (base)
    ├── ReportFetchError (the remote query failed, for any reason)
    └── ConfigError (missing or invalid configuration)

Example:
    >>> from issueboard.core.reports.exceptions import ReportFetchError
    >>> try:
    ...     raise ReportFetchError("bug_reports", "Connection refused")
    ... except ReportFetchError as e:
    ...     print(e)
    [bug_reports] Connection refused
"""


class IssueboardError(Exception):
    """
    Base exception for all issueboard errors.

    Attributes:
        message: Human-readable error message
        context: Additional context passed as keyword arguments
    """

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class ReportFetchError(IssueboardError):
    """
    The single "fetch failed" error.

    Network failures, rejected keys, PostgREST API errors and malformed
    rows all collapse into this one type. The original exception is kept
    as ``__cause__``.

    Attributes:
        table: Name of the table that was queried
    """

    def __init__(self, table: str, message: str, **context: object) -> None:
        super().__init__(message, table=table, **context)
        self.table = table

    def __str__(self) -> str:
        return f"[{self.table}] {self.message}"


class ConfigError(IssueboardError):
    """Raised when the remote URL/key are missing or a setting is invalid."""


__all__ = [
    "IssueboardError",
    "ReportFetchError",
    "ConfigError",
]

"""
Board view model and display labels.
"""

from issueboard.core.board.labels import DEFAULT_LOCALE, LABELS, Labels, get_labels
from issueboard.core.board.state import BoardSnapshot, BoardState, ReportSource

__all__ = [
    "BoardSnapshot",
    "BoardState",
    "DEFAULT_LOCALE",
    "LABELS",
    "Labels",
    "ReportSource",
    "get_labels",
]

"""
Rich-based board renderer for issueboard.

Draws the same page as the web dashboard in the terminal: header,
three stat cards, then report cards (or placeholders while loading).
"""

from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from issueboard.core.board.labels import DEFAULT_LOCALE, LABELS, Labels
from issueboard.core.board.state import BoardSnapshot
from issueboard.core.reports.models import Report, ReportStats, ReportStatus

# Placeholder panels shown while a fetch is in flight
SKELETON_COUNT = 3

# Width of one report card; Columns fits as many per row as the console allows
CARD_WIDTH = 48


class BoardRenderer:
    """
    Render the issue board using Rich.

    The board displays:
    - Header: title, subtitle and the refresh hint
    - Stats: total, pending and resolved cards
    - Reports: one card per report, in the order received

    Example:
        >>> renderer = BoardRenderer()
        >>> renderer.print(state.snapshot())
    """

    def __init__(self, console: Console | None = None, labels: Labels | None = None):
        """
        Initialize the board renderer.

        Args:
            console: Rich console for output. If None, creates a new one.
            labels: Display labels. Defaults to zh-TW.
        """
        self.console = console or Console()
        self.labels = labels or LABELS[DEFAULT_LOCALE]

    def render(self, snapshot: BoardSnapshot) -> Group:
        """
        Build the full board from a snapshot.

        Args:
            snapshot: Board state to display

        Returns:
            Rich Group with header, stats and report area
        """
        body = (
            self._render_skeletons()
            if snapshot.loading
            else self._render_reports(snapshot.reports)
        )
        return Group(
            self._render_header(),
            self._render_stats(snapshot.stats),
            Text(
                f"ⓘ {self.labels.reports_heading(len(snapshot.reports))}",
                style="bold",
            ),
            body,
        )

    def print(self, snapshot: BoardSnapshot) -> None:
        """Render the snapshot to the console."""
        self.console.print(self.render(snapshot))

    def _render_header(self) -> Panel:
        """Render the title panel."""
        lines = [
            Text(f"🐛 {self.labels.title}", style="bold magenta"),
            Text(self.labels.subtitle, style="dim"),
        ]
        return Panel(
            Group(*lines),
            subtitle=f"[dim]{self.labels.refresh}: issueboard show[/dim]",
            subtitle_align="right",
            border_style="magenta",
            padding=(0, 1),
        )

    def _render_stats(self, stats: ReportStats) -> Table:
        """Render the three stat cards side by side."""
        row = Table.grid(expand=True, padding=(0, 1))
        for _ in range(3):
            row.add_column(ratio=1)
        row.add_row(
            self._stat_card("▦", self.labels.total, stats.total, "blue"),
            self._stat_card("🕒", self.labels.pending, stats.pending, "yellow"),
            self._stat_card("✔", self.labels.resolved, stats.resolved, "green"),
        )
        return row

    def _stat_card(self, icon: str, label: str, value: int, color: str) -> Panel:
        content = Text()
        content.append(f"{icon} ", style=color)
        content.append(f"{label}\n", style="bold dim")
        content.append(str(value), style="bold")
        return Panel(content, border_style=color, padding=(0, 2))

    def _render_skeletons(self) -> Group:
        """Render placeholder panels for the loading state."""
        return Group(
            *(
                Panel(Text("…", style="dim"), border_style="dim", height=5)
                for _ in range(SKELETON_COUNT)
            )
        )

    def _render_reports(self, reports: list[Report]) -> RenderableType:
        """Render one card per report, keeping the received order."""
        if not reports:
            return Text("")
        return Columns(
            [self._render_report(report) for report in reports],
            width=CARD_WIDTH,
        )

    def _render_report(self, report: Report) -> Panel:
        """Render a single report card."""
        top = Table.grid(expand=True)
        top.add_column()
        top.add_column(justify="right")
        top.add_row(
            self._render_badge(report),
            Text(self.labels.format_date(report.created_at), style="bold dim"),
        )

        return Panel(
            Group(
                top,
                Text(""),
                Text(report.description),
                Text(""),
                Text(f"{self.labels.user_prefix}: {report.short_user_id}", style="dim"),
            ),
            border_style=self._get_status_color(report.status),
            padding=(1, 2),
        )

    def _render_badge(self, report: Report) -> Text:
        color = self._get_status_color(report.status)
        badge = Text(f" {self.labels.badge(report.status).upper()} ", style=f"bold {color} reverse")
        if report.status == ReportStatus.UNKNOWN and report.raw_status:
            badge.append(f" ({report.raw_status})", style="dim")
        return badge

    def _get_status_color(self, status: ReportStatus) -> str:
        """Get color for a report status."""
        color_map = {
            ReportStatus.PENDING: "yellow",
            ReportStatus.RESOLVED: "green",
        }
        return color_map.get(status, "white")

"""Timeline screen: a live table of instants and their display labels.

Each row shows the relative label ("Now", "03:45 pm", "Yesterday", ...), the
full clock time and the padded short date of one instant. Rows are rebuilt on
``config.refresh_interval`` so relative labels age as the clock moves.

Key bindings: s (Toggle sort order), r (Refresh), q (Quit).
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.timer import Timer
from textual.widgets import DataTable

from timeglance.presenter import TimestampPresenter, default_presenter
from timeglance.utils.config import config
from timeglance.utils.error_handling import log_ui_error
from timeglance.utils.logger import log
from timeglance.widgets.footer import Footer
from timeglance.widgets.header import Header, page_title
from timeglance.widgets.relative_timestamp import RelativeTimestamp

COLUMNS = ("When", "Clock", "Date")


class TimelineScreen(Screen):
    """Live table of instants, ordered by ``sort_instants``."""

    BINDINGS = [
        ("s", "toggle_sort", "Sort"),
        ("r", "refresh_rows", "Refresh"),
        ("q", "quit", "Quit"),
    ]

    DEFAULT_CSS = """
    #timeline-body {
        height: 1fr;
    }
    #timeline-refreshed {
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        instants: Iterable[datetime],
        ascending: bool = True,
        presenter: Optional[TimestampPresenter] = None,
    ):
        super().__init__()
        self.presenter = presenter or default_presenter
        self.ascending = ascending
        self.instants = self.presenter.sort_instants(list(instants), ascending)
        self._timer: Optional[Timer] = None

    def _get_footer_text(self) -> str:
        order = "Oldest first" if self.ascending else "Newest first"
        return (
            f" [orange1]s[/orange1] Sort: {order}    "
            f"[orange1]r[/orange1] Refresh    "
            f"[orange1]q[/orange1] Quit"
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="timeline-body"):
            yield DataTable(id="timeline-table", cursor_type="row")
            yield RelativeTimestamp(
                self.presenter.now(),
                presenter=self.presenter,
                prefix="Refreshed: ",
                id="timeline-refreshed",
            )
        yield Footer(text=self._get_footer_text(), classes="footer-timeline")

    def on_mount(self) -> None:
        self.title = page_title("Timeline")
        table = self.query_one("#timeline-table", DataTable)
        table.add_columns(*COLUMNS)
        self.refresh_rows()
        self._timer = self.set_interval(config.refresh_interval, self.refresh_rows)

    def on_unmount(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def row_labels(self, now: Optional[datetime] = None) -> list[tuple[str, str, str]]:
        """Cell text for every row, resolved against one sample of now."""
        presenter = self.presenter
        now = presenter.now() if now is None else now
        return [
            (
                presenter.describe(instant, now=now),
                presenter.format_clock_hhmmss(instant),
                presenter.format_short_date(instant, zero_pad=True),
            )
            for instant in self.instants
        ]

    def refresh_rows(self) -> None:
        """Rebuild table rows and stamp the refresh time."""
        try:
            now = self.presenter.now()
            table = self.query_one("#timeline-table", DataTable)
            table.clear()
            for cells in self.row_labels(now):
                table.add_row(*cells)
            self.query_one("#timeline-refreshed", RelativeTimestamp).set_instant(now)
            log.debug(f"[UI] Timeline refreshed with {len(self.instants)} rows")
        except Exception as e:
            # Refresh timers may fire while the screen is being torn down
            log_ui_error("timeline", "refreshing rows", e)

    def action_toggle_sort(self) -> None:
        self.ascending = not self.ascending
        self.presenter.sort_instants(self.instants, self.ascending)
        try:
            self.query_one(Footer).set_text(self._get_footer_text())
        except Exception as e:
            log_ui_error("footer", "updating sort order", e)
        self.refresh_rows()

    def action_refresh_rows(self) -> None:
        self.refresh_rows()

    def action_quit(self) -> None:
        self.app.exit()

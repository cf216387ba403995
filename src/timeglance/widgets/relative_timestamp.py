from __future__ import annotations

from datetime import datetime

from rich.text import Text
from textual.timer import Timer
from textual.widgets import Static

from timeglance.presenter import TimestampPresenter, default_presenter
from timeglance.utils.config import config
from timeglance.utils.logger import log


class RelativeTimestamp(Static):
    """A label showing ``describe(instant)`` that keeps itself current.

    The label is re-resolved every ``interval`` seconds so "Now" ages into a
    clock time, and a clock time into "Yesterday", without the owner having
    to do anything.
    """

    DEFAULT_CSS = """
    RelativeTimestamp {
        width: auto;
        height: 1;
    }
    """

    def __init__(
        self,
        instant: datetime,
        presenter: TimestampPresenter | None = None,
        interval: float | None = None,
        prefix: str = "",
        **kwargs,
    ) -> None:
        super().__init__("", **kwargs)
        self._instant = instant
        self._presenter = presenter or default_presenter
        self._interval = interval if interval is not None else config.refresh_interval
        self._prefix = prefix
        self._timer: Timer | None = None
        self.label_text = ""

    @property
    def instant(self) -> datetime:
        return self._instant

    def on_mount(self) -> None:
        self.refresh_label()
        self._timer = self.set_interval(self._interval, self.refresh_label)

    def on_unmount(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def set_instant(self, instant: datetime) -> None:
        """Show a different instant and re-render at once."""
        self._instant = instant
        self.refresh_label()

    def refresh_label(self) -> None:
        self.label_text = self._presenter.describe(self._instant)
        log.debug(f"[UI] RelativeTimestamp -> {self.label_text!r}")
        self.update(Text(f"{self._prefix}{self.label_text}"))

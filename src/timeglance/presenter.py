"""Human-friendly timestamp labels.

``TimestampPresenter`` turns an instant into the short label a list view
shows next to an item:

- "Now" for the current minute
- "03:45 pm" earlier today
- "Yesterday"
- "March 5" earlier this month
- "5/3/21" for anything older

The field comparisons it is built from are exposed too. They compare a single
calendar field and nothing else, so ``same_month`` is true for March 2020 and
March 2021; the classification predicates combine exactly the fields they
need.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from .instant import Clock, local_now, to_epoch_millis

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

NOW_LABEL = "Now"
YESTERDAY_LABEL = "Yesterday"


class TimestampPresenter:
    """Comparison, formatting and label resolution for instants.

    Args:
        clock: Zero-argument callable returning the current instant.
            Defaults to the local wall clock.

    Every method that depends on the current instant also takes a ``now``
    keyword that replaces the clock sample for that call.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or local_now

    def now(self) -> datetime:
        """Sample the clock."""
        return self._clock()

    def _now(self, now: Optional[datetime]) -> datetime:
        return self._clock() if now is None else now

    # Field comparisons

    @staticmethod
    def same_year(a: datetime, b: datetime) -> bool:
        return a.year == b.year

    @staticmethod
    def same_month(a: datetime, b: datetime) -> bool:
        return a.month == b.month

    @staticmethod
    def same_day_of_month(a: datetime, b: datetime) -> bool:
        return a.day == b.day

    @staticmethod
    def same_hour(a: datetime, b: datetime) -> bool:
        return a.hour == b.hour

    @staticmethod
    def same_minute(a: datetime, b: datetime) -> bool:
        return a.minute == b.minute

    @staticmethod
    def identical(a: datetime, b: datetime) -> bool:
        """Exact instant equality at millisecond resolution."""
        return to_epoch_millis(a) == to_epoch_millis(b)

    # Classification against the current instant

    def is_right_now(self, instant: datetime, *, now: Optional[datetime] = None) -> bool:
        """True when ``instant`` falls in the current minute. Seconds are ignored."""
        now = self._now(now)
        return (
            self.same_year(instant, now)
            and self.same_month(instant, now)
            and self.same_day_of_month(instant, now)
            and self.same_hour(instant, now)
            and self.same_minute(instant, now)
        )

    def is_today(self, instant: datetime, *, now: Optional[datetime] = None) -> bool:
        now = self._now(now)
        return (
            self.same_year(instant, now)
            and self.same_month(instant, now)
            and self.same_day_of_month(instant, now)
        )

    def yesterday(self, *, now: Optional[datetime] = None) -> datetime:
        """The current instant moved back one calendar day, time of day kept."""
        return self._now(now) - timedelta(days=1)

    def is_yesterday(self, instant: datetime, *, now: Optional[datetime] = None) -> bool:
        """Match the current year and month, and yesterday's day of month.

        Year and month come from the current instant, not from yesterday.
        On the 1st of a month the last day of the previous month is therefore
        not "yesterday", while a later date this month that shares
        yesterday's day number is.
        """
        now = self._now(now)
        return (
            self.same_year(instant, now)
            and self.same_month(instant, now)
            and self.same_day_of_month(instant, self.yesterday(now=now))
        )

    def is_this_month(self, instant: datetime, *, now: Optional[datetime] = None) -> bool:
        now = self._now(now)
        return self.same_year(instant, now) and self.same_month(instant, now)

    # Formatting

    @staticmethod
    def _clock_parts(instant: datetime):
        hour = instant.hour % 12 or 12
        meridiem = "PM" if instant.hour >= 12 else "AM"
        return hour, meridiem

    @classmethod
    def format_clock_hhmm(cls, instant: datetime) -> str:
        """12-hour clock as ``HH:MM AM|PM``."""
        hour, meridiem = cls._clock_parts(instant)
        return f"{hour:02d}:{instant.minute:02d} {meridiem}"

    @classmethod
    def format_clock_hhmmss(cls, instant: datetime) -> str:
        """12-hour clock as ``HH:MM:SS AM|PM``."""
        hour, meridiem = cls._clock_parts(instant)
        return f"{hour:02d}:{instant.minute:02d}:{instant.second:02d} {meridiem}"

    @staticmethod
    def format_short_date(instant: datetime, zero_pad: bool = False) -> str:
        """Day/month/two-digit-year, e.g. ``5/3/21`` or ``05/03/21`` with ``zero_pad``."""
        width = 2 if zero_pad else 1
        year = str(instant.year)[-2:]
        return f"{instant.day:0{width}d}/{instant.month:0{width}d}/{year}"

    @staticmethod
    def format_month_day(instant: datetime, abbreviate: bool = False) -> str:
        names = MONTH_ABBREVIATIONS if abbreviate else MONTH_NAMES
        return f"{names[instant.month - 1]} {instant.day}"

    # Ordering

    @staticmethod
    def sort_instants(instants: List[datetime], ascending: bool = True) -> List[datetime]:
        """Sort ``instants`` in place by epoch milliseconds and return the same list.

        Ascending puts the earliest first. Equal instants keep their relative
        order in either direction.
        """
        instants.sort(key=to_epoch_millis, reverse=not ascending)
        return instants

    # Resolution

    def describe(self, instant: datetime, *, now: Optional[datetime] = None) -> str:
        """Pick the display label for ``instant``.

        Rules are tried from the narrowest to the widest window, all against
        a single sample of the current instant.
        """
        now = self._now(now)
        if self.is_right_now(instant, now=now):
            return NOW_LABEL
        if self.is_today(instant, now=now):
            return self.format_clock_hhmm(instant).lower()
        if self.is_yesterday(instant, now=now):
            return YESTERDAY_LABEL
        if self.is_this_month(instant, now=now):
            return self.format_month_day(instant, abbreviate=False)
        return self.format_short_date(instant, zero_pad=False)


default_presenter = TimestampPresenter()

same_year = default_presenter.same_year
same_month = default_presenter.same_month
same_day_of_month = default_presenter.same_day_of_month
same_hour = default_presenter.same_hour
same_minute = default_presenter.same_minute
identical = default_presenter.identical
is_right_now = default_presenter.is_right_now
is_today = default_presenter.is_today
yesterday = default_presenter.yesterday
is_yesterday = default_presenter.is_yesterday
is_this_month = default_presenter.is_this_month
format_clock_hhmm = default_presenter.format_clock_hhmm
format_clock_hhmmss = default_presenter.format_clock_hhmmss
format_short_date = default_presenter.format_short_date
format_month_day = default_presenter.format_month_day
sort_instants = default_presenter.sort_instants
describe = default_presenter.describe

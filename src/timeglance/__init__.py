"""timeglance: human-friendly timestamp labels.

The module-level functions are bound to a default ``TimestampPresenter`` that
reads the local wall clock. Build your own presenter to pass a different
clock.
"""

from __future__ import annotations

from timeglance.instant import from_epoch_millis, local_now, to_epoch_millis
from timeglance.presenter import (
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    TimestampPresenter,
    default_presenter,
    describe,
    format_clock_hhmm,
    format_clock_hhmmss,
    format_month_day,
    format_short_date,
    identical,
    is_right_now,
    is_this_month,
    is_today,
    is_yesterday,
    same_day_of_month,
    same_hour,
    same_minute,
    same_month,
    same_year,
    sort_instants,
    yesterday,
)

__all__ = [
    "MONTH_ABBREVIATIONS",
    "MONTH_NAMES",
    "TimestampPresenter",
    "default_presenter",
    "describe",
    "format_clock_hhmm",
    "format_clock_hhmmss",
    "format_month_day",
    "format_short_date",
    "from_epoch_millis",
    "identical",
    "is_right_now",
    "is_this_month",
    "is_today",
    "is_yesterday",
    "local_now",
    "same_day_of_month",
    "same_hour",
    "same_minute",
    "same_month",
    "same_year",
    "sort_instants",
    "to_epoch_millis",
    "yesterday",
]

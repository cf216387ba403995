"""Instant helpers: epoch milliseconds and the local wall clock.

An instant is a plain ``datetime``. Naive values are read as local wall-clock
time, the same way the host clock reports them; aware values keep their own
offset. Calendar fields are always taken as-is, never converted.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)

# Epoch-millisecond range that datetime can represent, with a day of slack
# at each end so local offsets never push a value out of range.
MIN_EPOCH_MILLIS = (datetime(1, 1, 2, tzinfo=timezone.utc) - EPOCH) // _ONE_MILLISECOND
MAX_EPOCH_MILLIS = (datetime(9999, 12, 30, tzinfo=timezone.utc) - EPOCH) // _ONE_MILLISECOND


def local_now() -> datetime:
    """Sample the host clock as a naive local datetime."""
    return datetime.now()


def to_epoch_millis(instant: datetime) -> int:
    """Whole milliseconds elapsed since 1970-01-01T00:00:00Z.

    Sub-millisecond precision is truncated towards negative infinity.
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        instant = instant.astimezone()
    return (instant - EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(millis: int) -> datetime:
    """Build a naive local datetime from epoch milliseconds."""
    aware = EPOCH + timedelta(milliseconds=millis)
    return aware.astimezone().replace(tzinfo=None)

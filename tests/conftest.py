import os
import sys
from datetime import datetime

import pytest

# Ensure local src path is importable
_here = os.path.dirname(os.path.dirname(__file__))
_src = os.path.join(_here, "src")
if os.path.isdir(_src) and _src not in sys.path:
    sys.path.insert(0, _src)

from timeglance.presenter import TimestampPresenter  # noqa: E402

# Saturday afternoon in the middle of a month, far from any rollover
FIXED_NOW = datetime(2021, 3, 20, 15, 45, 30)


class CountingClock:
    """Clock stub returning a fixed instant and counting how often it is read."""

    def __init__(self, now: datetime):
        self.now = now
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.now


@pytest.fixture
def clock() -> CountingClock:
    return CountingClock(FIXED_NOW)


@pytest.fixture
def presenter(clock) -> TimestampPresenter:
    """Presenter whose current instant is always ``FIXED_NOW``."""
    return TimestampPresenter(clock=clock)


def presenter_at(now: datetime) -> TimestampPresenter:
    """Presenter frozen at an arbitrary instant."""
    return TimestampPresenter(clock=lambda: now)

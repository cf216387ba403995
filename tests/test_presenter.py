"""Tests for timestamp comparison, formatting and label resolution."""

from datetime import datetime, timedelta, timezone

import pytest

import timeglance
from timeglance.presenter import MONTH_ABBREVIATIONS, MONTH_NAMES, TimestampPresenter

from conftest import FIXED_NOW, presenter_at


class TestFieldComparisons:
    """Each comparison looks at exactly one calendar field."""

    def test_same_year(self):
        assert TimestampPresenter.same_year(datetime(2021, 1, 1), datetime(2021, 12, 31))
        assert not TimestampPresenter.same_year(datetime(2020, 12, 31), datetime(2021, 1, 1))

    def test_month_and_day_ignore_year(self):
        """Jan 5 2020 and Jan 5 2021 share month and day of month."""
        a = datetime(2020, 1, 5)
        b = datetime(2021, 1, 5)

        assert TimestampPresenter.same_month(a, b)
        assert TimestampPresenter.same_day_of_month(a, b)
        assert not TimestampPresenter.same_year(a, b)

    def test_same_hour_and_minute(self):
        a = datetime(2021, 3, 5, 14, 30)
        assert TimestampPresenter.same_hour(a, datetime(2019, 7, 1, 14, 0))
        assert not TimestampPresenter.same_hour(a, datetime(2021, 3, 5, 2, 30))
        assert TimestampPresenter.same_minute(a, datetime(2019, 7, 1, 9, 30))
        assert not TimestampPresenter.same_minute(a, datetime(2021, 3, 5, 14, 31))


class TestIdentical:
    """Exact instant equality at millisecond resolution."""

    def test_identical_to_itself(self):
        a = datetime(2021, 3, 5, 12, 0, 0, 250000)
        assert TimestampPresenter.identical(a, a)

    def test_different_milliseconds(self):
        a = datetime(2021, 3, 5, 12, 0, 0)
        assert not TimestampPresenter.identical(a, a + timedelta(milliseconds=1))

    def test_sub_millisecond_difference_is_identical(self):
        a = datetime(2021, 3, 5, 12, 0, 0)
        assert TimestampPresenter.identical(a, a + timedelta(microseconds=500))

    def test_same_instant_in_different_offsets(self):
        utc = datetime(2021, 3, 5, 12, 0, tzinfo=timezone.utc)
        plus_two = datetime(2021, 3, 5, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        assert TimestampPresenter.identical(utc, plus_two)


class TestClassification:
    """Predicates evaluated against a fixed current instant."""

    def test_right_now_ignores_seconds(self, presenter):
        assert presenter.is_right_now(FIXED_NOW)
        assert presenter.is_right_now(FIXED_NOW.replace(second=0))
        assert presenter.is_right_now(FIXED_NOW.replace(second=59))
        assert not presenter.is_right_now(FIXED_NOW - timedelta(minutes=1))

    def test_right_now_needs_same_year(self, presenter):
        assert not presenter.is_right_now(FIXED_NOW.replace(year=2020))

    def test_is_today(self, presenter):
        assert presenter.is_today(FIXED_NOW.replace(hour=0, minute=0))
        assert presenter.is_today(FIXED_NOW.replace(hour=23, minute=59))
        assert not presenter.is_today(FIXED_NOW - timedelta(days=1))
        assert not presenter.is_today(FIXED_NOW.replace(year=2020))

    def test_is_this_month(self, presenter):
        assert presenter.is_this_month(datetime(2021, 3, 1))
        assert presenter.is_this_month(datetime(2021, 3, 31))
        assert not presenter.is_this_month(datetime(2020, 3, 20))
        assert not presenter.is_this_month(datetime(2021, 2, 20))

    def test_is_yesterday(self, presenter):
        assert presenter.is_yesterday(datetime(2021, 3, 19, 12, 0))
        assert presenter.is_yesterday(datetime(2021, 3, 19, 0, 0))
        assert not presenter.is_yesterday(datetime(2021, 3, 18, 12, 0))
        assert not presenter.is_yesterday(datetime(2020, 3, 19, 12, 0))

    def test_explicit_now_skips_the_clock(self, presenter, clock):
        assert presenter.is_today(datetime(2000, 1, 1, 8), now=datetime(2000, 1, 1, 20))
        assert clock.calls == 0


class TestYesterday:
    """Calendar-day rollback of the current instant."""

    def test_mid_month(self, presenter):
        assert presenter.yesterday() == datetime(2021, 3, 19, 15, 45, 30)

    def test_first_of_month_rolls_back_to_last_day(self):
        assert presenter_at(datetime(2021, 3, 1, 10, 0)).yesterday() == datetime(2021, 2, 28, 10, 0)
        assert presenter_at(datetime(2021, 5, 1, 10, 0)).yesterday() == datetime(2021, 4, 30, 10, 0)

    def test_leap_year(self):
        assert presenter_at(datetime(2020, 3, 1)).yesterday() == datetime(2020, 2, 29)

    def test_first_of_year(self):
        assert presenter_at(datetime(2021, 1, 1, 9, 30)).yesterday() == datetime(2020, 12, 31, 9, 30)


class TestYesterdayQuirk:
    """``is_yesterday`` takes year and month from now, not from yesterday."""

    def test_last_day_of_previous_month_is_not_yesterday(self):
        presenter = presenter_at(datetime(2021, 3, 1, 10, 0))
        feb_28 = datetime(2021, 2, 28, 12, 0)

        assert presenter.yesterday().date() == feb_28.date()
        assert not presenter.is_yesterday(feb_28)
        assert presenter.describe(feb_28) == "28/2/21"

    def test_later_day_this_month_matching_yesterdays_day_is_yesterday(self):
        presenter = presenter_at(datetime(2021, 3, 1, 10, 0))
        assert presenter.is_yesterday(datetime(2021, 3, 28, 12, 0))

    def test_new_years_day(self):
        presenter = presenter_at(datetime(2021, 1, 1, 10, 0))
        assert not presenter.is_yesterday(datetime(2020, 12, 31, 12, 0))
        assert presenter.describe(datetime(2020, 12, 31, 12, 0)) == "31/12/20"


class TestClockFormats:
    """12-hour clock rendering."""

    @pytest.mark.parametrize(
        "hour, expected",
        [
            (0, "12:07 AM"),
            (1, "01:07 AM"),
            (11, "11:07 AM"),
            (12, "12:07 PM"),
            (13, "01:07 PM"),
            (23, "11:07 PM"),
        ],
    )
    def test_hhmm(self, hour, expected):
        assert TimestampPresenter.format_clock_hhmm(datetime(2021, 3, 5, hour, 7)) == expected

    def test_hhmmss(self):
        assert TimestampPresenter.format_clock_hhmmss(datetime(2021, 3, 5, 0, 5, 9)) == "12:05:09 AM"
        assert TimestampPresenter.format_clock_hhmmss(datetime(2021, 3, 5, 15, 45, 30)) == "03:45:30 PM"


class TestDateFormats:
    """Short date and month-day rendering."""

    def test_short_date(self):
        date = datetime(2021, 3, 5)
        assert TimestampPresenter.format_short_date(date, zero_pad=True) == "05/03/21"
        assert TimestampPresenter.format_short_date(date, zero_pad=False) == "5/3/21"

    def test_short_date_two_digit_fields_unchanged_by_padding(self):
        date = datetime(1999, 12, 25)
        assert TimestampPresenter.format_short_date(date, zero_pad=True) == "25/12/99"
        assert TimestampPresenter.format_short_date(date) == "25/12/99"

    def test_short_date_keeps_leading_zero_of_year(self):
        assert TimestampPresenter.format_short_date(datetime(2005, 7, 4)) == "4/7/05"

    def test_month_day(self):
        date = datetime(2021, 3, 5)
        assert TimestampPresenter.format_month_day(date, abbreviate=True) == "Mar 5"
        assert TimestampPresenter.format_month_day(date, abbreviate=False) == "March 5"

    def test_month_tables(self):
        assert len(MONTH_NAMES) == 12
        assert MONTH_ABBREVIATIONS[0] == "Jan"
        assert MONTH_ABBREVIATIONS[8] == "Sep"
        assert TimestampPresenter.format_month_day(datetime(2021, 12, 31), abbreviate=False) == "December 31"


class TestSortInstants:
    """In-place ordering by epoch milliseconds."""

    def test_ascending(self):
        items = [datetime(2021, 1, 3), datetime(2021, 1, 1), datetime(2021, 1, 2)]
        result = TimestampPresenter.sort_instants(items, ascending=True)

        assert result is items
        assert [d.day for d in items] == [1, 2, 3]

    def test_descending(self):
        items = [datetime(2021, 1, 3), datetime(2021, 1, 1), datetime(2021, 1, 2)]
        result = TimestampPresenter.sort_instants(items, ascending=False)

        assert result is items
        assert [d.day for d in items] == [3, 2, 1]

    def test_orders_by_instant_not_wall_clock(self):
        early = datetime(2021, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=5)))  # 07:00 UTC
        late = datetime(2021, 1, 1, 9, 0, tzinfo=timezone.utc)

        assert TimestampPresenter.sort_instants([late, early]) == [early, late]

    def test_equal_instants_keep_relative_order(self):
        utc = datetime(2021, 1, 1, 12, 0, tzinfo=timezone.utc)
        plus_one = datetime(2021, 1, 1, 13, 0, tzinfo=timezone(timedelta(hours=1)))
        earlier = datetime(2020, 1, 1, tzinfo=timezone.utc)

        ascending = TimestampPresenter.sort_instants([utc, plus_one, earlier])
        assert [d.hour for d in ascending] == [0, 12, 13]

        descending = TimestampPresenter.sort_instants([utc, plus_one, earlier], ascending=False)
        assert [d.hour for d in descending] == [12, 13, 0]

    def test_empty(self):
        assert TimestampPresenter.sort_instants([]) == []


class TestDescribe:
    """The cascading label rules."""

    def test_now(self, presenter):
        assert presenter.describe(FIXED_NOW) == "Now"

    def test_earlier_today(self, presenter):
        assert presenter.describe(FIXED_NOW - timedelta(hours=2)) == "01:45 pm"

    def test_morning_today(self, presenter):
        assert presenter.describe(datetime(2021, 3, 20, 9, 5)) == "09:05 am"

    def test_later_today_is_a_clock_time(self, presenter):
        assert presenter.describe(datetime(2021, 3, 20, 22, 0)) == "10:00 pm"

    def test_yesterday_at_noon(self, presenter):
        assert presenter.describe(datetime(2021, 3, 19, 12, 0)) == "Yesterday"

    def test_earlier_this_month(self, presenter):
        assert presenter.describe(FIXED_NOW - timedelta(days=15)) == "March 5"

    def test_older(self, presenter):
        assert presenter.describe(datetime(2020, 1, 20, 15, 45)) == "20/1/20"

    def test_same_day_other_year_is_short_date(self, presenter):
        assert presenter.describe(FIXED_NOW.replace(year=2020)) == "20/3/20"

    def test_samples_clock_once(self, presenter, clock):
        presenter.describe(datetime(2019, 6, 1))
        assert clock.calls == 1

    def test_explicit_now(self):
        presenter = TimestampPresenter()
        assert presenter.describe(datetime(2021, 3, 19, 8), now=FIXED_NOW) == "Yesterday"


class TestModuleLevelApi:
    """The package exposes the default presenter's operations."""

    def test_functions_are_exported(self):
        for name in ("describe", "is_right_now", "is_today", "is_yesterday", "is_this_month", "yesterday",
                     "format_clock_hhmm", "format_clock_hhmmss", "format_short_date", "format_month_day",
                     "sort_instants", "identical", "same_year", "same_month", "same_day_of_month",
                     "same_hour", "same_minute"):
            assert callable(getattr(timeglance, name)), name

    def test_describe_with_explicit_now(self):
        assert timeglance.describe(FIXED_NOW, now=FIXED_NOW) == "Now"
        assert timeglance.describe(datetime(2021, 3, 5), now=FIXED_NOW) == "March 5"

    def test_describe_reads_the_wall_clock(self):
        assert timeglance.describe(datetime(1999, 12, 31)) == "31/12/99"

    def test_formatters(self):
        assert timeglance.format_short_date(datetime(2021, 3, 5), True) == "05/03/21"
        assert timeglance.format_month_day(datetime(2021, 3, 5), True) == "Mar 5"

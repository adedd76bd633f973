"""Tests for relative-date arithmetic and comparisons."""

from __future__ import annotations

import pytest

from chrono.arithmetic.comparisons import earliest, is_earlier, is_later, latest
from chrono.arithmetic.ops import (
    beginning_of,
    date_time,
    earlier,
    end_of,
    hours_around,
    hours_between,
    hours_from,
    later,
    minutes_between,
    minutes_from,
    time_between,
)
from chrono.core.date import date
from chrono.errors import UnknownUnitError
from chrono.units.timeunit import Unit


class TestLater:
    """Tests for later() and earlier()."""

    def test_days(self) -> None:
        """Ten days after Feb 27th 2009 is Mar 9th."""
        assert later(date(2009, 2, 27), 10, "day") == date(2009, 3, 9)

    def test_defaults_to_one_day(self) -> None:
        """Amount and unit default to one day."""
        assert later(date(2009, 2, 27)) == date(2009, 2, 28)
        assert earlier(date(2009, 3, 1)) == date(2009, 2, 28)

    def test_month_end_clamps(self) -> None:
        """Adding a month to Jan 31st lands on the last day of February."""
        assert later(date(2009, 1, 31), 1, "month") == date(2009, 2, 28)
        assert later(date(2008, 1, 31), 1, "month") == date(2008, 2, 29)

    def test_leap_year_addition(self) -> None:
        """Feb 29th plus one year is Feb 28th."""
        assert later(date(2008, 2, 29), 1, Unit.YEAR) == date(2009, 2, 28)

    def test_week(self) -> None:
        """Weeks are seven days."""
        assert later(date(2009, 2, 27), 1, "week") == date(2009, 3, 6)

    def test_time_units(self) -> None:
        """Hours, minutes and seconds carry into larger fields."""
        d = date(2009, 2, 27, 23, 59, 59)
        assert later(d, 1, "second") == date(2009, 2, 28)
        assert later(d, 2, "minute") == date(2009, 2, 28, 0, 1, 59)
        assert later(d, 25, "hour") == date(2009, 3, 1, 0, 59, 59)

    def test_milliseconds(self) -> None:
        """Milliseconds carry into seconds."""
        shifted = later(date(2009, 2, 27), 1500, "millisecond")
        assert shifted.second == 1
        assert shifted.millisecond == 500

    def test_negative_amount(self) -> None:
        """A negative amount moves backwards."""
        assert later(date(2009, 3, 9), -10, "day") == date(2009, 2, 27)

    def test_earlier_minutes(self) -> None:
        """earlier() subtracts."""
        assert earlier(date(2009, 2, 27, 12, 34, 56), 100, "minute") == date(
            2009, 2, 27, 10, 54, 56
        )

    def test_round_trip(self) -> None:
        """earlier(later(d, n, u), n, u) == d for reversible cases."""
        d = date(2009, 2, 27, 12, 34, 56, 789)
        for unit in Unit:
            for amount in (1, 5, 13):
                assert earlier(later(d, amount, unit), amount, unit) == d, (unit, amount)

    def test_later_is_later(self) -> None:
        """One day later is strictly later."""
        d = date(2009, 12, 31, 23, 59, 59)
        assert is_later(later(d, 1, "day"), d)

    def test_keeps_zone(self) -> None:
        """The result is expressed in the same zone."""
        d = date(2009, 2, 27, tz="Europe/Moscow")
        assert later(d, 1, "month").timezone_name == "Europe/Moscow"

    def test_unknown_unit(self) -> None:
        """Unknown units raise instead of returning the date unchanged."""
        with pytest.raises(UnknownUnitError):
            later(date(2009, 2, 27), 1, "fortnight")
        with pytest.raises(UnknownUnitError):
            earlier(date(2009, 2, 27), 1, "days")


class TestComparisons:
    """Tests for is_earlier(), is_later(), earliest() and latest()."""

    def test_is_earlier(self) -> None:
        """is_earlier is strict."""
        a = date(2009, 2, 25)
        b = date(2009, 2, 27)
        assert is_earlier(a, b)
        assert not is_earlier(b, a)
        assert not is_earlier(a, a)

    def test_is_later(self) -> None:
        """is_later is strict."""
        a = date(2009, 2, 25)
        b = date(2009, 2, 27)
        assert is_later(b, a)
        assert not is_later(a, b)
        assert not is_later(b, b)

    def test_across_zones(self) -> None:
        """Comparison uses instants, not wall times."""
        moscow = date(2009, 2, 27, 14, tz="Europe/Moscow")
        utc = date(2009, 2, 27, 12, tz="UTC")
        assert is_earlier(moscow, utc)

    def test_earliest_latest(self) -> None:
        """Extremes of several Dates."""
        a = date(2009, 2, 25)
        b = date(2009, 2, 27)
        c = date(2009, 2, 26)
        assert earliest(b, a, c) == a
        assert latest(a, c, b) == b
        assert earliest(a) == a


class TestTimeBetween:
    """Tests for time_between()."""

    def test_days(self) -> None:
        """Two days between Feb 27th and Feb 25th."""
        assert time_between(date(2009, 2, 27), date(2009, 2, 25), "day") == 2

    def test_symmetric(self) -> None:
        """The order of the arguments does not matter."""
        a = date(2009, 2, 27, 12)
        b = date(2009, 2, 25, 6)
        assert time_between(a, b, "hour") == time_between(b, a, "hour") == 54

    def test_default_unit_is_seconds(self) -> None:
        """Without a unit the result is in seconds."""
        assert time_between(date(2009, 2, 27), date(2009, 2, 27, 0, 1, 30)) == 90

    def test_same_date_is_zero(self) -> None:
        """A Date is zero units from itself."""
        d = date(2009, 2, 27, 12, 34, 56)
        for unit in Unit:
            assert time_between(d, d, unit) == 0

    def test_fractional(self) -> None:
        """Partial units give fractions."""
        assert time_between(date(2009, 2, 27), date(2009, 2, 27, 18), "day") == 0.75

    def test_fixed_month_length(self) -> None:
        """A month is counted as thirty days."""
        assert time_between(date(2009, 1, 1), date(2009, 1, 31), "month") == 1

    def test_milliseconds(self) -> None:
        """Milliseconds are counted."""
        result = time_between(date(2009, 2, 27), date(2009, 2, 27, 0, 0, 1, 250), "millisecond")
        assert result == pytest.approx(1250)

    def test_across_zones(self) -> None:
        """The same instant in two zones is zero apart."""
        assert time_between(
            date(2009, 2, 27, 12, tz="UTC"), date(2009, 2, 27, 15, tz="Europe/Moscow")
        ) == 0

    def test_plural_unit_rejected(self) -> None:
        """Plural unit keys are rejected here too."""
        with pytest.raises(UnknownUnitError):
            time_between(date(2009, 2, 27), date(2009, 2, 25), "days")


class TestBeginningOf:
    """Tests for beginning_of()."""

    def setup_method(self) -> None:
        self.d = date(2009, 2, 27, 12, 34, 56, 789)

    def test_year(self) -> None:
        assert beginning_of(self.d, "year") == date(2009, 1, 1)

    def test_month(self) -> None:
        assert beginning_of(self.d, "month") == date(2009, 2, 1)

    def test_week_starts_monday(self) -> None:
        """Friday Feb 27th 2009 is in the week starting Monday Feb 23rd."""
        assert beginning_of(self.d, "week") == date(2009, 2, 23)

    def test_week_across_month(self) -> None:
        """The week may start in the previous month."""
        assert beginning_of(date(2009, 3, 1), "week") == date(2009, 2, 23)

    def test_day(self) -> None:
        assert beginning_of(self.d, "day") == date(2009, 2, 27)

    def test_hour(self) -> None:
        assert beginning_of(self.d, "hour") == date(2009, 2, 27, 12)

    def test_minute(self) -> None:
        assert beginning_of(self.d, "minute") == date(2009, 2, 27, 12, 34)

    def test_second(self) -> None:
        assert beginning_of(self.d, "second") == date(2009, 2, 27, 12, 34, 56)

    def test_millisecond_rejected(self) -> None:
        """Milliseconds are not a period."""
        with pytest.raises(UnknownUnitError):
            beginning_of(self.d, "millisecond")

    def test_keeps_zone(self) -> None:
        """Flooring happens on the wall clock of the Date's zone."""
        d = date(2009, 2, 27, 1, tz="Europe/Moscow")
        start = beginning_of(d, "day")
        assert start.timezone_name == "Europe/Moscow"
        assert (start.day, start.hour) == (27, 0)

    def test_idempotent(self) -> None:
        """Flooring twice changes nothing."""
        for unit in ("year", "month", "week", "day", "hour", "minute", "second"):
            once = beginning_of(self.d, unit)
            assert beginning_of(once, unit) == once


class TestEndOf:
    """Tests for end_of()."""

    def setup_method(self) -> None:
        self.d = date(2009, 2, 27, 12, 34, 56)

    def test_year(self) -> None:
        assert end_of(self.d, "year") == date(2009, 12, 31, 23, 59, 59)

    def test_month(self) -> None:
        assert end_of(self.d, "month") == date(2009, 2, 28, 23, 59, 59)

    def test_leap_month(self) -> None:
        assert end_of(date(2008, 2, 10), "month") == date(2008, 2, 29, 23, 59, 59)

    def test_week(self) -> None:
        assert end_of(self.d, "week") == date(2009, 3, 1, 23, 59, 59)

    def test_day(self) -> None:
        assert end_of(self.d, "day") == date(2009, 2, 27, 23, 59, 59)

    def test_hour(self) -> None:
        assert end_of(self.d, "hour") == date(2009, 2, 27, 12, 59, 59)

    def test_minute(self) -> None:
        assert end_of(self.d, "minute") == date(2009, 2, 27, 12, 34, 59)

    def test_millisecond_rejected(self) -> None:
        with pytest.raises(UnknownUnitError):
            end_of(self.d, "millisecond")


class TestWholeUnitsBetween:
    """Tests for minutes_between() and hours_between()."""

    def test_minutes_between(self) -> None:
        """Signed whole minutes."""
        noon = date(2009, 2, 27, 12)
        assert minutes_between(noon, date(2009, 2, 27, 13, 30)) == 90
        assert minutes_between(noon, date(2009, 2, 27, 10, 30)) == -90

    def test_truncates_toward_zero(self) -> None:
        """Partial units are dropped in both directions."""
        start = date(2009, 2, 27, 0)
        end = date(2009, 2, 27, 5, 59, 59)
        assert hours_between(start, end) == 5
        assert hours_between(end, start) == -5

    def test_non_dates_give_none(self) -> None:
        """Non-Date arguments give None instead of raising."""
        assert minutes_between(None, date(2009, 2, 27)) is None
        assert hours_between(date(2009, 2, 27), "tomorrow") is None


class TestShorthands:
    """Tests for hours_from(), minutes_from(), hours_around() and date_time()."""

    def test_hours_from(self) -> None:
        assert hours_from(date(2009, 2, 27, 22), 3) == date(2009, 2, 28, 1)

    def test_minutes_from(self) -> None:
        assert minutes_from(date(2009, 2, 27, 12), -15) == date(2009, 2, 27, 11, 45)

    def test_hours_around(self) -> None:
        """One Date per offset, in order."""
        d = date(2009, 2, 27, 12)
        assert hours_around([-2, 0, 2], d) == [
            date(2009, 2, 27, 10),
            d,
            date(2009, 2, 27, 14),
        ]

    def test_date_time(self) -> None:
        """Minutes are counted from the day's midnight, whatever its time."""
        assert date_time(date(2009, 2, 27, 18, 45), 90) == date(2009, 2, 27, 1, 30)

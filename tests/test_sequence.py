"""Tests for lazy Date sequences."""

from __future__ import annotations

from itertools import islice

import pytest

from chrono.arithmetic.ops import time_between
from chrono.core.date import date
from chrono.core.sequence import DateSequence, date_sequence
from chrono.errors import UnknownUnitError
from chrono.units.timeunit import Unit


class TestBoundedSequence:
    """Tests for sequences with an end."""

    def test_twelve_hours(self) -> None:
        """Twelve hourly Dates from midnight, end excluded."""
        hours = list(date_sequence("hour", date(2009, 2, 27), date(2009, 2, 27, 12)))
        assert len(hours) == 12
        assert [d.hour for d in hours] == list(range(12))
        assert hours[0] == date(2009, 2, 27)
        for a, b in zip(hours, hours[1:]):
            assert time_between(a, b, "hour") == 1

    def test_end_not_on_step(self) -> None:
        """The last element is the last one strictly before end."""
        days = list(date_sequence("day", date(2009, 2, 27), date(2009, 3, 2, 6)))
        assert days[-1] == date(2009, 3, 2)
        assert len(days) == 4

    def test_empty_when_end_not_after_start(self) -> None:
        """No elements when start is not before end."""
        d = date(2009, 2, 27)
        assert list(date_sequence("day", d, d)) == []
        assert list(date_sequence("day", d, date(2009, 2, 1))) == []

    def test_months_step_from_previous(self) -> None:
        """Each element is one unit after the previous one."""
        months = list(date_sequence("month", date(2009, 1, 31), date(2009, 5, 1)))
        assert [(d.month, d.day) for d in months] == [(1, 31), (2, 28), (3, 28), (4, 28)]


class TestUnboundedSequence:
    """Tests for sequences without an end."""

    def test_is_lazy(self) -> None:
        """An unbounded sequence yields as many elements as consumed."""
        years = date_sequence("year", date(2009, 2, 27))
        assert [d.year for d in islice(years, 4)] == [2009, 2010, 2011, 2012]

    def test_is_unbounded(self) -> None:
        """is_bounded reports a missing end."""
        assert not date_sequence("day", date(2009, 2, 27)).is_bounded
        assert date_sequence("day", date(2009, 2, 27), date(2009, 3, 1)).is_bounded


class TestRestart:
    """Tests for re-iterating a sequence."""

    def test_restartable(self) -> None:
        """Each iteration starts over from start."""
        seq = date_sequence("minute", date(2009, 2, 27), date(2009, 2, 27, 0, 3))
        assert list(seq) == list(seq)

    def test_independent_iterators(self) -> None:
        """Two traversals do not affect each other."""
        seq = date_sequence("day", date(2009, 2, 27))
        first = iter(seq)
        second = iter(seq)
        next(first)
        next(first)
        assert next(second) == date(2009, 2, 27)
        assert next(first) == date(2009, 3, 1)


class TestValidation:
    """Tests for sequence construction."""

    def test_unknown_unit_rejected_eagerly(self) -> None:
        """The unit is checked when the sequence is created."""
        with pytest.raises(UnknownUnitError):
            date_sequence("hours", date(2009, 2, 27))

    def test_properties(self) -> None:
        """The sequence exposes its unit and bounds."""
        start = date(2009, 2, 27)
        seq = DateSequence(Unit.WEEK, start)
        assert seq.unit is Unit.WEEK
        assert seq.start == start
        assert seq.end is None

    def test_repr(self) -> None:
        seq = date_sequence("day", date(2009, 2, 27))
        assert repr(seq) == "DateSequence('day', Date(2009, 2, 27, 0, 0, 0, tz='UTC'), None)"

"""Lazy sequences of Dates.

This module provides DateSequence, an iterable that steps from a start
Date by one unit at a time, optionally stopping before an end Date.
"""

from __future__ import annotations

from typing import Iterator

from chrono.core.date import Date
from chrono.units.timeunit import Unit


class DateSequence:
    """Dates from start, each one unit after the previous.

    The sequence stops before the first Date that is not strictly
    earlier than end; with no end it never stops. Elements are computed
    one at a time as they are consumed.

    Each call to iter() starts over from start, so a DateSequence can
    be traversed any number of times and traversals do not affect each
    other.

    Examples:
        >>> from chrono.core.date import date
        >>> hours = DateSequence("hour", date(2009, 2, 27), date(2009, 2, 27, 3))
        >>> [d.hour for d in hours]
        [0, 1, 2]

        >>> from itertools import islice
        >>> years = DateSequence("year", date(2009, 2, 27))
        >>> [d.year for d in islice(years, 4)]
        [2009, 2010, 2011, 2012]
    """

    __slots__ = ("_unit", "_start", "_end")

    def __init__(self, unit: Unit | str, start: Date, end: Date | None = None) -> None:
        """Create a sequence.

        Raises:
            UnknownUnitError: If unit names no unit.
        """
        self._unit: Unit = Unit.from_key(unit)
        self._start: Date = start
        self._end: Date | None = end

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def start(self) -> Date:
        return self._start

    @property
    def end(self) -> Date | None:
        return self._end

    @property
    def is_bounded(self) -> bool:
        return self._end is not None

    def __iter__(self) -> Iterator[Date]:
        from chrono.arithmetic.comparisons import is_earlier
        from chrono.arithmetic.ops import later

        current = self._start
        while self._end is None or is_earlier(current, self._end):
            yield current
            current = later(current, 1, self._unit)

    def __repr__(self) -> str:
        return f"DateSequence({self._unit.value!r}, {self._start!r}, {self._end!r})"


def date_sequence(unit: Unit | str, start: Date, end: Date | None = None) -> DateSequence:
    """Return the Dates from start up to (not including) end, one unit apart.

    Raises:
        UnknownUnitError: If unit names no unit.

    Examples:
        >>> from chrono.core.date import date
        >>> len(list(date_sequence("hour", date(2009, 2, 27), date(2009, 2, 27, 12))))
        12
    """
    return DateSequence(unit, start, end)


__all__ = ["DateSequence", "date_sequence"]

"""Relative-date arithmetic.

This module provides the unit algebra built on the backend's
calendar-aware add/subtract:

    - later, earlier: Shift a Date by a number of units
    - time_between: Elapsed time between two Dates in a unit
    - beginning_of, end_of: Period boundaries around a Date
    - minutes_between, hours_between: Signed whole minutes/hours
    - hours_from, minutes_from, hours_around, date_time: Shorthands

Adding one month to January 31st yields the last day of February; the
backend decides. Elapsed-time conversion uses the fixed unit lengths
of Unit.to_seconds(), so time_between(..., "month") is an approximation.
"""

from __future__ import annotations

from typing import Iterable

from chrono._internal.constants import MICROS_PER_MILLISECOND, MILLIS_PER_SECOND
from chrono.convert.epoch import to_millis
from chrono.core.date import Date
from chrono.errors import InvalidDateError, UnknownUnitError
from chrono.units.timeunit import Unit

_MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
_MILLIS_PER_HOUR: int = 60 * _MILLIS_PER_MINUTE

# Fields reset to their minimum when flooring to each unit.
_FLOOR_FIELDS: dict[Unit, dict[str, int]] = {
    Unit.YEAR: {"month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Unit.MONTH: {"day": 1, "hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Unit.WEEK: {"hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Unit.DAY: {"hour": 0, "minute": 0, "second": 0, "microsecond": 0},
    Unit.HOUR: {"minute": 0, "second": 0, "microsecond": 0},
    Unit.MINUTE: {"second": 0, "microsecond": 0},
    Unit.SECOND: {"microsecond": 0},
}


def later(value: Date, amount: int = 1, unit: Unit | str = Unit.DAY) -> Date:
    """Return a Date `amount` units later than value.

    Args:
        value: The starting Date.
        amount: Number of units; negative values move backwards.
        unit: A Unit or its singular key.

    Raises:
        UnknownUnitError: If unit names no unit.
        InvalidDateError: If the result falls outside the backend's range.

    Examples:
        >>> from chrono.core.date import date
        >>> later(date(2009, 2, 27), 10, "day")
        Date(2009, 3, 9, 0, 0, 0, tz='UTC')
    """
    unit = Unit.from_key(unit)
    if unit is Unit.MILLISECOND:
        amount = amount * MICROS_PER_MILLISECOND
    try:
        shifted = value.datetime.add(**{unit.backend_name: amount})
    except (OverflowError, ValueError) as exc:
        raise InvalidDateError(
            f"{value!r} shifted by {amount} {unit.value} is out of range"
        ) from exc
    return Date._from_backend(shifted)


def earlier(value: Date, amount: int = 1, unit: Unit | str = Unit.DAY) -> Date:
    """Return a Date `amount` units earlier than value.

    Examples:
        >>> from chrono.core.date import date
        >>> earlier(date(2009, 2, 27, 12, 34, 56), 100, "minute")
        Date(2009, 2, 27, 10, 54, 56, tz='UTC')
    """
    return later(value, -amount, unit)


def time_between(date_a: Date, date_b: Date, unit: Unit | str = Unit.SECOND) -> float:
    """How many units lie between date_a and date_b?

    The result is never negative, whichever Date comes first.

    Raises:
        UnknownUnitError: If unit names no unit.

    Examples:
        >>> from chrono.core.date import date
        >>> time_between(date(2009, 2, 27), date(2009, 2, 25), "day")
        2.0
    """
    unit = Unit.from_key(unit)
    seconds = abs(to_millis(date_a) - to_millis(date_b)) / MILLIS_PER_SECOND
    return seconds / unit.to_seconds()


def beginning_of(value: Date, unit: Unit | str) -> Date:
    """Return the start of the year, month, week, day, ... containing value.

    Every field finer than unit is set to its minimum. Weeks start on
    Monday.

    Raises:
        UnknownUnitError: If unit is not a period (millisecond or unknown).

    Examples:
        >>> from chrono.core.date import date
        >>> beginning_of(date(2009, 2, 27, 12, 34, 56), "month")
        Date(2009, 2, 1, 0, 0, 0, tz='UTC')
    """
    unit = Unit.from_key(unit)
    if unit not in _FLOOR_FIELDS:
        raise UnknownUnitError(f"{unit.value!r} has no beginning or end")

    floored = value.datetime.replace(**_FLOOR_FIELDS[unit])
    if unit is Unit.WEEK:
        floored = floored.subtract(days=floored.isoweekday() - 1)
    return Date._from_backend(floored)


def end_of(value: Date, unit: Unit | str) -> Date:
    """Return the last second of the period containing value.

    Examples:
        >>> from chrono.core.date import date
        >>> end_of(date(2009, 2, 27), "month")
        Date(2009, 2, 28, 23, 59, 59, tz='UTC')
    """
    start = beginning_of(value, unit)
    return earlier(later(start, 1, unit), 1, Unit.SECOND)


def _whole_units_between(start: object, end: object, millis_per_unit: int) -> int | None:
    if not isinstance(start, Date) or not isinstance(end, Date):
        return None
    delta = to_millis(end) - to_millis(start)
    whole = abs(delta) // millis_per_unit
    return whole if delta >= 0 else -whole


def minutes_between(start: object, end: object) -> int | None:
    """Signed whole minutes from start to end, or None for non-Dates.

    Examples:
        >>> from chrono.core.date import date
        >>> minutes_between(date(2009, 2, 27, 12, 0, 0), date(2009, 2, 27, 10, 30, 0))
        -90
    """
    return _whole_units_between(start, end, _MILLIS_PER_MINUTE)


def hours_between(start: object, end: object) -> int | None:
    """Signed whole hours from start to end, or None for non-Dates."""
    return _whole_units_between(start, end, _MILLIS_PER_HOUR)


def hours_from(value: Date, hours: int) -> Date:
    return later(value, hours, Unit.HOUR)


def minutes_from(value: Date, minutes: int) -> Date:
    return later(value, minutes, Unit.MINUTE)


def hours_around(offsets: Iterable[int], value: Date) -> list[Date]:
    """Return value shifted by each of the given hour offsets.

    Examples:
        >>> from chrono.core.date import date
        >>> [d.hour for d in hours_around(range(-1, 2), date(2009, 2, 27, 12))]
        [11, 12, 13]
    """
    return [hours_from(value, offset) for offset in offsets]


def date_time(day: Date, minutes: int) -> Date:
    """Combine a day with a time given as minutes after its midnight."""
    return minutes_from(beginning_of(day, Unit.DAY), minutes)


__all__ = [
    "later",
    "earlier",
    "time_between",
    "beginning_of",
    "end_of",
    "minutes_between",
    "hours_between",
    "hours_from",
    "minutes_from",
    "hours_around",
    "date_time",
]

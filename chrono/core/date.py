"""Date class wrapping a single backend instant.

This module provides the Date value used by every other part of the
library, together with the date(), now() and today() constructors.
"""

from __future__ import annotations

import datetime as _datetime

import pendulum

from chrono._internal.constants import MICROS_PER_MILLISECOND
from chrono.errors import InvalidDateError
from chrono.units.field import Field
from chrono.units.timezone import resolve_timezone


class Date:
    """An immutable absolute instant with calendar field accessors.

    Date wraps a backend DateTime. Despite the name it always carries a
    time of day; the time fields default to zero when omitted. Every
    transformation returns a new Date.

    Two Dates are equal when they denote the same point on the timeline,
    whatever zone they are expressed in.

    Attributes:
        year: The year component.
        month: The month component (1-12).
        day: The day of month (1-31).
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        millisecond: The millisecond component (0-999).
        day_of_week: ISO day of week, Monday=1 through Sunday=7.

    Examples:
        >>> d = Date(2009, 2, 27, 12, 34, 56)
        >>> d.year, d.month, d.day
        (2009, 2, 27)
        >>> d.field("hour")
        12
        >>> str(d)
        '2009-02-27 12:34:56'
    """

    __slots__ = ("_dt",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        tz: str | _datetime.tzinfo | None = None,
    ) -> None:
        """Create a Date from calendar fields.

        Args:
            year: The year.
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            millisecond: The millisecond (0-999).
            tz: Zone name or tzinfo; None for the configured default.

        Raises:
            InvalidDateError: If the backend rejects the fields.
            UnknownTimezoneError: If tz is not a known zone.
        """
        zone = resolve_timezone(tz)
        try:
            dt = pendulum.datetime(
                year,
                month,
                day,
                hour,
                minute,
                second,
                millisecond * MICROS_PER_MILLISECOND,
                tz=zone,
            )
        except ValueError as exc:
            raise InvalidDateError(
                f"invalid date fields {(year, month, day, hour, minute, second, millisecond)}: {exc}"
            ) from exc
        self._dt: pendulum.DateTime = dt

    @classmethod
    def _from_backend(cls, dt: pendulum.DateTime) -> Date:
        """Wrap a backend DateTime without revalidating it."""
        instance = object.__new__(cls)
        instance._dt = dt
        return instance

    @classmethod
    def from_datetime(
        cls,
        dt: _datetime.datetime,
        tz: str | _datetime.tzinfo | None = None,
    ) -> Date:
        """Wrap a standard library or backend datetime.

        Naive datetimes are read as wall time in `tz` (or the
        configured default zone); aware ones keep their own zone.
        """
        return cls._from_backend(pendulum.instance(dt, tz=resolve_timezone(tz)))

    # Properties - calendar fields

    @property
    def year(self) -> int:
        return self._dt.year

    @property
    def month(self) -> int:
        return self._dt.month

    @property
    def day(self) -> int:
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def millisecond(self) -> int:
        return self._dt.microsecond // MICROS_PER_MILLISECOND

    @property
    def day_of_week(self) -> int:
        return self._dt.isoweekday()

    def field(self, unit: Field | str) -> int:
        """Return the calendar field named by unit.

        Raises:
            UnknownUnitError: If unit is not a readable field.
        """
        return getattr(self, Field.from_key(unit).attribute)

    # Backend access

    @property
    def datetime(self) -> pendulum.DateTime:
        """The wrapped backend instant."""
        return self._dt

    @property
    def timezone(self) -> _datetime.tzinfo:
        return self._dt.tzinfo

    @property
    def timezone_name(self) -> str | None:
        return self._dt.timezone_name

    def in_timezone(self, tz: str | _datetime.tzinfo) -> Date:
        """Return the same instant expressed in another zone."""
        return Date._from_backend(self._dt.in_timezone(resolve_timezone(tz)))

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._dt == other._dt

    def __hash__(self) -> int:
        return hash((self._dt.int_timestamp, self._dt.microsecond))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._dt < other._dt

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._dt <= other._dt

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._dt > other._dt

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._dt >= other._dt

    # String representation

    def __str__(self) -> str:
        # Fixed iso8601 rendering, whatever the configured locale.
        from chrono.format import Format, format_date
        from chrono.units.locale import Locale

        return format_date(self, Format.ISO8601, locale=Locale.US)

    def __repr__(self) -> str:
        fields = [self.year, self.month, self.day, self.hour, self.minute, self.second]
        if self.millisecond:
            fields.append(self.millisecond)
        args = ", ".join(str(f) for f in fields)
        return f"Date({args}, tz={self.timezone_name!r})"


def date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    *,
    tz: str | _datetime.tzinfo | None = None,
) -> Date:
    """Return a new Date; the time fields default to midnight.

    Examples:
        >>> date(2009, 2, 27).hour
        0
    """
    return Date(year, month, day, hour, minute, second, millisecond, tz=tz)


def now(tz: str | _datetime.tzinfo | None = None) -> Date:
    """Return a Date for the current instant."""
    return Date._from_backend(pendulum.now(resolve_timezone(tz)))


def today(tz: str | _datetime.tzinfo | None = None) -> Date:
    """Return the current date with the time fields set to zero."""
    current = now(tz)
    return Date(current.year, current.month, current.day, tz=current.timezone)


def field(value: Date, unit: Field | str) -> int:
    """Return the calendar field of value named by unit.

    Raises:
        UnknownUnitError: If unit is not a readable field.

    Examples:
        >>> field(date(2009, 2, 27, 12, 34, 56), "minute")
        34
    """
    return value.field(unit)


__all__ = ["Date", "date", "now", "today", "field"]

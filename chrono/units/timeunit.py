"""Unit enumeration for relative-date arithmetic.

This module provides the Unit enum naming the granularities accepted
by later/earlier, time_between, beginning_of/end_of and date_sequence.
"""

from __future__ import annotations

from enum import Enum

from chrono._internal.constants import UNITS_IN_SECONDS
from chrono.errors import UnknownUnitError


class Unit(Enum):
    """Named granularities of time.

    Each unit knows a fixed approximation of its length in seconds.
    The approximation is only used to convert elapsed time between
    units; calendar arithmetic is left to the backend, which handles
    variable month and year lengths.

    Keys are singular everywhere: "day" is a unit, "days" is not.

    Examples:
        >>> Unit.HOUR.to_seconds()
        3600

        >>> Unit.from_key("minute")
        <Unit.MINUTE: 'minute'>
    """

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    def to_seconds(self) -> float:
        """Return the fixed number of seconds in one unit.

        Examples:
            >>> Unit.DAY.to_seconds()
            86400

            >>> Unit.MILLISECOND.to_seconds()
            0.001
        """
        return UNITS_IN_SECONDS[self.value]

    @property
    def backend_name(self) -> str:
        """Keyword used by the backend's add/subtract for this unit."""
        if self is Unit.MILLISECOND:
            return "microseconds"
        return f"{self.value}s"

    @classmethod
    def from_key(cls, key: Unit | str) -> Unit:
        """Resolve a Unit member or its singular string value.

        Raises:
            UnknownUnitError: If key names no unit.

        Examples:
            >>> Unit.from_key(Unit.DAY)
            <Unit.DAY: 'day'>

            >>> Unit.from_key("days")
            Traceback (most recent call last):
            ...
            chrono.errors.UnknownUnitError: unknown unit 'days'; unit keys are singular, use 'day'
        """
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            pass

        message = f"unknown unit {key!r}"
        if isinstance(key, str) and key.endswith("s"):
            singular = key[:-1]
            if singular in _VALUES:
                raise UnknownUnitError(
                    f"{message}; unit keys are singular, use {singular!r}"
                )
        raise UnknownUnitError(
            f"{message}; expected one of {', '.join(sorted(_VALUES))}"
        )


_VALUES: frozenset[str] = frozenset(u.value for u in Unit)


__all__ = ["Unit"]

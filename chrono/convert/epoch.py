"""Epoch conversion utilities for Date values.

Functions:
    to_millis: Milliseconds since the Unix epoch.
    from_millis: Create a Date from milliseconds since the Unix epoch.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> from chrono.core.date import date
    >>> to_millis(date(1970, 1, 1, 0, 0, 1, tz="UTC"))
    1000
    >>> from_millis(1000).second
    1
"""

from __future__ import annotations

import datetime as _datetime

import pendulum

from chrono._internal.constants import MICROS_PER_MILLISECOND, MILLIS_PER_SECOND
from chrono.core.date import Date
from chrono.errors import InvalidDateError
from chrono.units.timezone import resolve_timezone


def to_millis(value: Date) -> int:
    """Return value as milliseconds since 1970-01-01 00:00:00 UTC.

    The result does not depend on the zone value is expressed in.
    """
    dt = value.datetime
    return dt.int_timestamp * MILLIS_PER_SECOND + dt.microsecond // MICROS_PER_MILLISECOND


def from_millis(
    millis: int,
    tz: str | _datetime.tzinfo | None = None,
) -> Date:
    """Create a Date from milliseconds since the Unix epoch.

    Args:
        millis: Milliseconds since 1970-01-01 00:00:00 UTC.
        tz: Zone of the result; None for the configured default.

    Raises:
        InvalidDateError: If the timestamp is outside the backend's range.
    """
    seconds, rest = divmod(millis, MILLIS_PER_SECOND)
    try:
        dt = pendulum.from_timestamp(seconds, tz=resolve_timezone(tz))
    except (OverflowError, ValueError, OSError) as exc:
        raise InvalidDateError(f"timestamp {millis}ms is out of range") from exc
    return Date._from_backend(dt.add(microseconds=rest * MICROS_PER_MILLISECOND))


__all__ = ["to_millis", "from_millis"]

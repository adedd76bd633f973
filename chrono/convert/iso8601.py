"""ISO 8601 conversion.

Functions:
    to_iso8601: Format a Date as a full ISO 8601 timestamp.
    from_iso8601: Parse an ISO 8601 string into a Date.

This is the machine-readable counterpart of the "iso8601" named format,
which renders the shorter "yyyy-MM-dd HH:mm:ss" form without an offset.

Examples:
    >>> from chrono.core.date import date
    >>> to_iso8601(date(2009, 2, 27, 12, 34, 56, tz="UTC"))
    '2009-02-27T12:34:56.000+00:00'

    >>> from_iso8601("2009-02-27T12:34:56Z").hour
    12
"""

from __future__ import annotations

import datetime as _datetime
import logging

import pendulum

from chrono.core.date import Date
from chrono.errors import DateParseError
from chrono.units.timezone import resolve_timezone

logger = logging.getLogger(__name__)

_ISO8601_TOKENS: str = "YYYY-MM-DD[T]HH:mm:ss.SSSZ"


def to_iso8601(value: Date) -> str:
    """Format value with milliseconds and its UTC offset."""
    return value.datetime.format(_ISO8601_TOKENS)


def from_iso8601(text: str, tz: str | _datetime.tzinfo | None = None) -> Date:
    """Parse an ISO 8601 date or date-time.

    Args:
        text: The string to parse.
        tz: Zone for strings without an offset; None for the
            configured default.

    Raises:
        DateParseError: If text is not ISO 8601.
    """
    try:
        parsed = pendulum.parse(text, tz=resolve_timezone(tz))
    except ValueError as exc:
        logger.debug("rejected ISO 8601 input %r: %s", text, exc)
        raise DateParseError(f"{text!r} is not an ISO 8601 date") from exc

    if not isinstance(parsed, pendulum.DateTime):
        raise DateParseError(f"{text!r} does not denote an instant")
    return Date._from_backend(parsed)


__all__ = ["to_iso8601", "from_iso8601"]

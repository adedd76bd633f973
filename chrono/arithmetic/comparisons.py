"""Comparison operations for Date values.

Comparisons are made on absolute instants: two Dates expressed in
different zones compare by the point on the timeline they denote.

Supported Operations:
    - is_earlier: Strictly before
    - is_later: Strictly after
    - earliest, latest: Find extremes
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chrono.core.date import Date


def is_earlier(date_a: Date, date_b: Date) -> bool:
    """Is date_a strictly earlier than date_b?

    Examples:
        >>> from chrono.core.date import date
        >>> is_earlier(date(2009, 2, 25), date(2009, 2, 27))
        True
        >>> is_earlier(date(2009, 2, 27), date(2009, 2, 27))
        False
    """
    return date_a.datetime < date_b.datetime


def is_later(date_a: Date, date_b: Date) -> bool:
    """Is date_a strictly later than date_b?

    Examples:
        >>> from chrono.core.date import date
        >>> is_later(date(2009, 3, 9), date(2009, 2, 27))
        True
    """
    return date_a.datetime > date_b.datetime


def earliest(first: Date, *rest: Date) -> Date:
    """Return the earliest of the given Dates (the first one on ties)."""
    result = first
    for value in rest:
        if is_earlier(value, result):
            result = value
    return result


def latest(first: Date, *rest: Date) -> Date:
    """Return the latest of the given Dates (the first one on ties)."""
    result = first
    for value in rest:
        if is_later(value, result):
            result = value
    return result


__all__ = [
    "is_earlier",
    "is_later",
    "earliest",
    "latest",
]

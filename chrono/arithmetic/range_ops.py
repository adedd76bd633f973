"""Range predicates over (start, end) pairs of Dates.

A range is any two-item sequence (start, end) and is read as the
half-open interval [start, end): start is contained, end is not.

    - valid_range: Both ends present and start strictly before end
    - is_within: A Date lies inside a range
    - are_overlapping: Two ranges share at least one instant

These predicates never raise. Degenerate input (None ends, reversed
or empty ranges, non-Date values) gives False.
"""

from __future__ import annotations

from typing import Sequence

from chrono.arithmetic.comparisons import is_earlier
from chrono.core.date import Date

Range = Sequence[Date | None]


def _bounds(date_range: object) -> tuple[Date, Date] | None:
    """Return (start, end) of a valid range, or None."""
    try:
        start, end = date_range  # type: ignore[misc]
    except (TypeError, ValueError):
        return None
    if not isinstance(start, Date) or not isinstance(end, Date):
        return None
    if not is_earlier(start, end):
        return None
    return start, end


def valid_range(date_range: Range) -> bool:
    """Is date_range a non-empty range with start before end?

    Examples:
        >>> from chrono.core.date import date
        >>> valid_range((date(2020, 1, 1), date(2020, 1, 10)))
        True
        >>> valid_range((date(2020, 1, 10), date(2020, 1, 1)))
        False
        >>> valid_range((None, date(2020, 1, 1)))
        False
    """
    return _bounds(date_range) is not None


def is_within(value: Date, date_range: Range) -> bool:
    """Does value lie in [start, end)?

    Examples:
        >>> from chrono.core.date import date
        >>> jan = (date(2020, 1, 1), date(2020, 2, 1))
        >>> is_within(date(2020, 1, 1), jan)
        True
        >>> is_within(date(2020, 2, 1), jan)
        False
    """
    bounds = _bounds(date_range)
    if bounds is None or not isinstance(value, Date):
        return False
    start, end = bounds
    return not is_earlier(value, start) and is_earlier(value, end)


def are_overlapping(range_a: Range, range_b: Range) -> bool:
    """Do two valid ranges share at least one instant?

    Ranges that only touch (one ends where the other starts) do not
    overlap.

    Examples:
        >>> from chrono.core.date import date
        >>> are_overlapping(
        ...     (date(2020, 1, 1), date(2020, 1, 10)),
        ...     (date(2020, 1, 5), date(2020, 1, 15)),
        ... )
        True
        >>> are_overlapping(
        ...     (date(2020, 1, 10), date(2020, 1, 1)),
        ...     (date(2020, 1, 5), date(2020, 1, 15)),
        ... )
        False
    """
    bounds_a = _bounds(range_a)
    bounds_b = _bounds(range_b)
    if bounds_a is None or bounds_b is None:
        return False
    start_a, end_a = bounds_a
    start_b, end_b = bounds_b
    return is_earlier(start_a, end_b) and is_earlier(start_b, end_a)


__all__ = [
    "valid_range",
    "is_within",
    "are_overlapping",
]

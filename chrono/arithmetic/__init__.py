"""Date arithmetic, comparisons and range predicates.

The functions in this module shift Dates by calendar units, measure
the time between them, and test ranges of Dates.

Relative Operations (from chrono.arithmetic.ops):
    - later, earlier: Shift a Date by a number of units
    - time_between: Elapsed time in a unit
    - beginning_of, end_of: Period boundaries
    - minutes_between, hours_between: Signed whole minutes/hours
    - hours_from, minutes_from, hours_around, date_time: Shorthands

Comparison Operations (from chrono.arithmetic.comparisons):
    - is_earlier, is_later: Strict ordering
    - earliest, latest: Find extremes

Range Predicates (from chrono.arithmetic.range_ops):
    - valid_range: Start strictly before end
    - is_within: Date inside [start, end)
    - are_overlapping: Two ranges share an instant
"""

from __future__ import annotations

from chrono.arithmetic.comparisons import (
    earliest,
    is_earlier,
    is_later,
    latest,
)
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
from chrono.arithmetic.range_ops import (
    are_overlapping,
    is_within,
    valid_range,
)

__all__ = [
    # Relative operations
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
    # Comparisons
    "is_earlier",
    "is_later",
    "earliest",
    "latest",
    # Range predicates
    "valid_range",
    "is_within",
    "are_overlapping",
]

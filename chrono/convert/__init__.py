"""Date conversion utilities.

This module provides functions for converting Dates to and from
machine-oriented representations:
    - Unix epoch milliseconds
    - Full ISO 8601 timestamps

Examples:
    >>> from chrono import date
    >>> from chrono.convert import to_millis, from_millis

    >>> d = date(2009, 2, 27, 12, 34, 56)
    >>> from_millis(to_millis(d)) == d
    True
"""

from __future__ import annotations

from chrono.convert.epoch import from_millis, to_millis
from chrono.convert.iso8601 import from_iso8601, to_iso8601

__all__ = [
    # Epoch
    "to_millis",
    "from_millis",
    # ISO 8601
    "to_iso8601",
    "from_iso8601",
]

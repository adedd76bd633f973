"""Core value types.

This module provides:
    - Date: Immutable absolute instant with calendar field accessors
    - DateSequence: Lazy, restartable sequence of Dates one unit apart
"""

from __future__ import annotations

from chrono.core.date import Date, date, field, now, today
from chrono.core.sequence import DateSequence, date_sequence

__all__: list[str] = [
    "Date",
    "DateSequence",
    "date",
    "date_sequence",
    "field",
    "now",
    "today",
]

"""Date formatting and parsing.

This module provides conversion of Dates to and from text:
    - A registry of named formats (iso8601, short-date, long-date-time, ...)
    - LDML pattern strings for everything else
    - Locale-aware month/day names and AM/PM markers

Functions:
    format_date: Format a Date with a named format or pattern.
    parse_date: Parse a string with a named format or pattern.
    register_format: Add a named format to the default registry.
    unregister_format: Remove a custom named format.

Examples:
    >>> from chrono import date
    >>> from chrono.format import format_date, parse_date

    >>> format_date(date(2009, 2, 27), "compact-date")
    '20090227'

    >>> parse_date("20090227", "compact-date").day
    27
"""

from __future__ import annotations

from chrono.format.formatting import format_date, parse_date
from chrono.format.pattern import to_backend_tokens
from chrono.format.registry import (
    Format,
    FormatDescriptor,
    FormatRegistry,
    NamedFormat,
    PatternFormat,
    default_registry,
    register_format,
    unregister_format,
)

__all__: list[str] = [
    "format_date",
    "parse_date",
    "Format",
    "FormatDescriptor",
    "FormatRegistry",
    "NamedFormat",
    "PatternFormat",
    "default_registry",
    "register_format",
    "unregister_format",
    "to_backend_tokens",
]

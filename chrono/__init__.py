"""Chrono: calendar date arithmetic, comparison, formatting and parsing.

Chrono is a thin layer over the pendulum date/time library. It adds a
unit-keyed vocabulary ("year", "month", "day", ...), a relative-date
algebra, range predicates, lazy date sequences and a table of named
formats.

Core Types:
    Date: Immutable absolute instant with calendar field accessors
    DateSequence: Lazy, restartable sequence of Dates one unit apart

Units:
    Unit: Arithmetic granularities (YEAR, MONTH, WEEK, DAY, ...)
    Field: Calendar fields readable from a Date
    Locale: Supported formatting locales (US, RU)

Functions:
    date, now, today, field: Construction and field lookup
    later, earlier, time_between, beginning_of, end_of: Unit algebra
    is_earlier, is_later: Ordering
    date_sequence: Lazy sequences
    valid_range, is_within, are_overlapping: Range predicates
    format_date, parse_date, register_format: Named formats
    configure, get_locale, set_locale: Process-wide settings

Exceptions:
    ChronoError: Base exception
    InvalidDateError: Calendar fields rejected
    UnknownUnitError: Unit key not supported
    DateParseError: Text does not match the format
    UnknownLocaleError: Locale key not supported
    UnknownFormatError: Format name not registered
    UnknownTimezoneError: Time zone not known

Example:
    >>> from chrono import date, later, format_date
    >>> d = later(date(2009, 2, 27), 10, "day")
    >>> format_date(d, "short-date", locale="us")
    '3/9/09'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from chrono.core.date import Date, date, field, now, today
from chrono.core.sequence import DateSequence, date_sequence

# Units
from chrono.units.field import Field
from chrono.units.locale import Locale
from chrono.units.timeunit import Unit
from chrono.units.timezone import resolve_timezone, time_zone

# Arithmetic
from chrono.arithmetic import (
    are_overlapping,
    beginning_of,
    date_time,
    earlier,
    earliest,
    end_of,
    hours_around,
    hours_between,
    hours_from,
    is_earlier,
    is_later,
    is_within,
    later,
    latest,
    minutes_between,
    minutes_from,
    time_between,
    valid_range,
)

# Formats
from chrono.format import (
    Format,
    FormatRegistry,
    NamedFormat,
    PatternFormat,
    format_date,
    parse_date,
    register_format,
    unregister_format,
)

# Conversion
from chrono.convert import from_iso8601, from_millis, to_iso8601, to_millis

# Settings
from chrono.config import (
    Settings,
    configure,
    get_locale,
    get_settings,
    reset_settings,
    set_locale,
)

# Exceptions
from chrono.errors import (
    ChronoError,
    DateParseError,
    InvalidDateError,
    UnknownFormatError,
    UnknownLocaleError,
    UnknownTimezoneError,
    UnknownUnitError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateSequence",
    "date",
    "now",
    "today",
    "field",
    "date_sequence",
    # Units
    "Unit",
    "Field",
    "Locale",
    "resolve_timezone",
    "time_zone",
    # Arithmetic
    "later",
    "earlier",
    "is_earlier",
    "is_later",
    "earliest",
    "latest",
    "time_between",
    "beginning_of",
    "end_of",
    "minutes_between",
    "hours_between",
    "hours_from",
    "minutes_from",
    "hours_around",
    "date_time",
    "valid_range",
    "is_within",
    "are_overlapping",
    # Formats
    "Format",
    "FormatRegistry",
    "NamedFormat",
    "PatternFormat",
    "format_date",
    "parse_date",
    "register_format",
    "unregister_format",
    # Conversion
    "to_millis",
    "from_millis",
    "to_iso8601",
    "from_iso8601",
    # Settings
    "Settings",
    "configure",
    "get_settings",
    "reset_settings",
    "get_locale",
    "set_locale",
    # Exceptions
    "ChronoError",
    "InvalidDateError",
    "UnknownUnitError",
    "DateParseError",
    "UnknownLocaleError",
    "UnknownFormatError",
    "UnknownTimezoneError",
]

"""Internal constants for Chrono.

These constants define the unit conversion table, the fixed patterns
and the configuration keys used throughout the library. This module is
not part of the public API.
"""

from __future__ import annotations

# Approximate length of each unit in seconds. Only used to convert
# elapsed time; arithmetic is calendar-aware and goes through the backend.
UNITS_IN_SECONDS: dict[str, float] = {
    "year": 31557600,  # 365.25 days
    "month": 2592000,  # 30 days
    "week": 604800,
    "day": 86400,
    "hour": 3600,
    "minute": 60,
    "second": 1,
    "millisecond": 0.001,
}

MILLIS_PER_SECOND: int = 1_000
MICROS_PER_MILLISECOND: int = 1_000

# Patterns (LDML syntax) of the formats that do not depend on locale.
ISO8601_PATTERN: str = "yyyy-MM-dd HH:mm:ss"
DB_DATE_TIME_PATTERN: str = "yyyy-MM-dd hh:mm:ss"
RUSSIAN_SHORT_DATE_PATTERN: str = "dd MMM ''yy"
COMPACT_DATE_PATTERN: str = "yyyyMMdd"

DEFAULT_TIMEZONE: str = "UTC"

# Environment variables read by Settings.from_env()
LOCALE_ENV: str = "CHRONO_LOCALE"
TIMEZONE_ENV: str = "CHRONO_TIMEZONE"


__all__ = [
    "UNITS_IN_SECONDS",
    "MILLIS_PER_SECOND",
    "MICROS_PER_MILLISECOND",
    "ISO8601_PATTERN",
    "DB_DATE_TIME_PATTERN",
    "RUSSIAN_SHORT_DATE_PATTERN",
    "COMPACT_DATE_PATTERN",
    "DEFAULT_TIMEZONE",
    "LOCALE_ENV",
    "TIMEZONE_ENV",
]

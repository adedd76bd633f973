"""Chrono exception hierarchy.

All Chrono-specific exceptions inherit from ChronoError. Errors raised
by the calendar backend are translated into these at the API boundary.
"""

from __future__ import annotations


class ChronoError(Exception):
    """Base exception for all Chrono errors."""

    pass


class InvalidDateError(ChronoError):
    """Calendar fields rejected at construction.

    Examples:
        - Month value outside 1-12
        - February 30th
        - Hour value of 24
    """

    pass


class UnknownUnitError(ChronoError):
    """Unit key outside the supported set for the operation.

    Examples:
        - A plural key such as "days" (keys are singular)
        - "millisecond" passed to beginning_of
        - "week" passed to field lookup
    """

    pass


class DateParseError(ChronoError):
    """Text does not match the resolved format."""

    pass


class UnknownLocaleError(ChronoError):
    """Locale key is not one of the supported locales."""

    pass


class UnknownFormatError(ChronoError):
    """Format name is not registered, or a pattern letter is unsupported.

    Raised for unregistered names only when strict resolution is
    requested; otherwise the text is tried as a raw pattern.
    """

    pass


class UnknownTimezoneError(ChronoError):
    """Time zone name is not known to the backend."""

    pass


__all__ = [
    "ChronoError",
    "InvalidDateError",
    "UnknownUnitError",
    "DateParseError",
    "UnknownLocaleError",
    "UnknownFormatError",
    "UnknownTimezoneError",
]

"""Formatting and parsing of Dates.

Functions:
    format_date: Render a Date with a named format or raw pattern.
    parse_date: Parse text with a named format or raw pattern.

Both take the format as a registered name (see chrono.format.registry),
a Format member, a raw LDML pattern, or None for iso8601. The locale
decides month and day names, AM/PM markers and which pattern a style
format resolves to; when omitted, the configured default locale is used.

Examples:
    >>> from chrono.core.date import date
    >>> format_date(date(2009, 2, 27, 12, 34, 56), "short-date-time", locale="us")
    '2/27/09 12:34 PM'

    >>> parse_date("12/25/09", "short-date", locale="us")
    Date(2009, 12, 25, 0, 0, 0, tz='UTC')
"""

from __future__ import annotations

import datetime as _datetime
import logging

import pendulum
from pendulum.formatting import Formatter

from chrono.config import get_settings
from chrono.core.date import Date
from chrono.errors import DateParseError
from chrono.format.pattern import to_backend_tokens
from chrono.format.registry import FormatLike, FormatRegistry, default_registry
from chrono.units.locale import Locale
from chrono.units.timezone import resolve_timezone

logger = logging.getLogger(__name__)

_formatter = Formatter()


def _resolve_locale(locale: Locale | str | None) -> Locale:
    if locale is None:
        return get_settings().locale
    return Locale.from_key(locale)


def format_date(
    value: Date,
    fmt: FormatLike = None,
    *,
    locale: Locale | str | None = None,
    strict: bool = False,
    registry: FormatRegistry | None = None,
) -> str:
    """Render value as text.

    Args:
        value: The Date to format.
        fmt: Format name, Format member, descriptor, raw LDML pattern,
            or None for iso8601.
        locale: Locale key; None for the configured default.
        strict: Reject strings that are not registered names instead
            of using them as patterns.
        registry: Registry to resolve names in; None for the default.

    Raises:
        UnknownFormatError: If the format cannot be resolved.
        UnknownLocaleError: If locale is not supported.

    Examples:
        >>> from chrono.core.date import date
        >>> format_date(date(2009, 2, 27), "long-date", locale="us")
        'February 27, 2009'
        >>> format_date(date(2009, 2, 27), "yyyy/MM/dd")
        '2009/02/27'
    """
    loc = _resolve_locale(locale)
    pattern = (registry or default_registry()).pattern_for(fmt, loc, strict=strict)
    return value.datetime.format(to_backend_tokens(pattern), locale=loc.backend_code)


def parse_date(
    text: str,
    fmt: FormatLike = None,
    *,
    locale: Locale | str | None = None,
    strict: bool = False,
    tz: str | _datetime.tzinfo | None = None,
    registry: FormatRegistry | None = None,
) -> Date:
    """Parse text into a Date.

    Fields missing from the pattern are taken from 1970-01-01 00:00:00,
    never from the current date. Patterns without a zone read the text
    as wall time in tz, or in the configured default zone.

    Args:
        text: The string to parse.
        fmt: As for format_date().
        locale: Locale key; None for the configured default.
        strict: As for format_date().
        tz: Zone for text without zone information.
        registry: Registry to resolve names in; None for the default.

    Raises:
        DateParseError: If text does not match the resolved pattern.
        UnknownFormatError: If the format cannot be resolved.
        UnknownLocaleError: If locale is not supported.

    Examples:
        >>> parse_date("2009-02-27 12:34:56").minute
        34
    """
    loc = _resolve_locale(locale)
    pattern = (registry or default_registry()).pattern_for(fmt, loc, strict=strict)
    tokens = to_backend_tokens(pattern)
    zone = resolve_timezone(tz)
    try:
        parts = _formatter.parse(
            text,
            tokens,
            pendulum.datetime(1970, 1, 1, tz=zone),
            locale=loc.backend_code,
        )
        if parts["tz"] is None:
            parts["tz"] = zone
        parsed = pendulum.datetime(**parts)
    except ValueError as exc:
        logger.debug("could not parse %r with %r (%s): %s", text, pattern, loc.value, exc)
        raise DateParseError(f"{text!r} does not match format {pattern!r}") from exc
    return Date._from_backend(parsed)


__all__ = ["format_date", "parse_date"]

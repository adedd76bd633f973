"""Named format registry.

A format is described either by a symbolic name registered here or by a
raw LDML pattern. Names resolve to a pattern, either fixed or chosen per
locale; raw patterns are used as they are.

Built-in names:
    iso8601             yyyy-MM-dd HH:mm:ss
    db-date-time        yyyy-MM-dd hh:mm:ss
    russian-short-date  dd MMM ''yy
    compact-date        yyyyMMdd
    short-date, short-date-time, medium-date, medium-date-time,
    long-date, long-date-time, full-date, full-date-time
                        locale-dependent styles

Examples:
    >>> registry = FormatRegistry.with_defaults()
    >>> registry.pattern_for("short-date", Locale.US)
    'M/d/yy'
    >>> registry.pattern_for("short-date", Locale.RU)
    'dd.MM.yy'
    >>> registry.pattern_for("EEE, d MMM", Locale.US)
    'EEE, d MMM'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Union

from chrono._internal.constants import (
    COMPACT_DATE_PATTERN,
    DB_DATE_TIME_PATTERN,
    ISO8601_PATTERN,
    RUSSIAN_SHORT_DATE_PATTERN,
)
from chrono.errors import UnknownFormatError
from chrono.format.pattern import to_backend_tokens
from chrono.units.locale import Locale

logger = logging.getLogger(__name__)


class Format(Enum):
    """Built-in format names."""

    ISO8601 = "iso8601"
    SHORT_DATE = "short-date"
    SHORT_DATE_TIME = "short-date-time"
    MEDIUM_DATE = "medium-date"
    MEDIUM_DATE_TIME = "medium-date-time"
    LONG_DATE = "long-date"
    LONG_DATE_TIME = "long-date-time"
    FULL_DATE = "full-date"
    FULL_DATE_TIME = "full-date-time"
    DB_DATE_TIME = "db-date-time"
    RUSSIAN_SHORT_DATE = "russian-short-date"
    COMPACT_DATE = "compact-date"


@dataclass(frozen=True)
class NamedFormat:
    """A format referred to by its registered name."""

    name: str


@dataclass(frozen=True)
class PatternFormat:
    """A format given directly as an LDML pattern."""

    pattern: str


FormatDescriptor = Union[NamedFormat, PatternFormat]
FormatLike = Union[FormatDescriptor, Format, str, None]

# A registered format is one pattern, or one pattern per locale.
FormatEntry = Union[str, Mapping[Locale, str]]


STYLE_PATTERNS: dict[Format, dict[Locale, str]] = {
    Format.SHORT_DATE: {
        Locale.US: "M/d/yy",
        Locale.RU: "dd.MM.yy",
    },
    Format.SHORT_DATE_TIME: {
        Locale.US: "M/d/yy h:mm a",
        Locale.RU: "dd.MM.yy H:mm",
    },
    Format.MEDIUM_DATE: {
        Locale.US: "MMM d, yyyy",
        Locale.RU: "dd.MM.yyyy",
    },
    Format.MEDIUM_DATE_TIME: {
        Locale.US: "MMM d, yyyy h:mm:ss a",
        Locale.RU: "dd.MM.yyyy H:mm:ss",
    },
    Format.LONG_DATE: {
        Locale.US: "MMMM d, yyyy",
        Locale.RU: "d MMMM yyyy 'г.'",
    },
    Format.LONG_DATE_TIME: {
        Locale.US: "MMMM d, yyyy h:mm:ss a z",
        Locale.RU: "d MMMM yyyy 'г.' H:mm:ss z",
    },
    Format.FULL_DATE: {
        Locale.US: "EEEE, MMMM d, yyyy",
        Locale.RU: "EEEE, d MMMM yyyy 'г.'",
    },
    Format.FULL_DATE_TIME: {
        Locale.US: "EEEE, MMMM d, yyyy h:mm:ss a z",
        Locale.RU: "EEEE, d MMMM yyyy 'г.' H:mm:ss z",
    },
}

FIXED_PATTERNS: dict[Format, str] = {
    Format.ISO8601: ISO8601_PATTERN,
    Format.DB_DATE_TIME: DB_DATE_TIME_PATTERN,
    Format.RUSSIAN_SHORT_DATE: RUSSIAN_SHORT_DATE_PATTERN,
    Format.COMPACT_DATE: COMPACT_DATE_PATTERN,
}


class FormatRegistry:
    """Mapping from format names to LDML patterns.

    Names are looked up exactly. Strings that are not registered names
    are taken as raw patterns unless strict resolution is requested.
    """

    def __init__(self) -> None:
        self._entries: dict[str, FormatEntry] = {}
        self._builtin: frozenset[str] = frozenset()

    @classmethod
    def with_defaults(cls) -> FormatRegistry:
        """Return a registry holding the built-in formats."""
        registry = cls()
        for fmt, pattern in FIXED_PATTERNS.items():
            registry.register(fmt.value, pattern)
        for fmt, patterns in STYLE_PATTERNS.items():
            registry.register(fmt.value, patterns)
        registry._builtin = frozenset(registry._entries)
        return registry

    def register(self, name: str, entry: FormatEntry, *, replace: bool = False) -> None:
        """Register a named format.

        Args:
            name: The symbolic name.
            entry: An LDML pattern, or a mapping of locale keys to patterns.
            replace: Allow replacing an existing custom format.

        Raises:
            ValueError: If name is empty, built in, or already registered
                and replace is False.
            UnknownFormatError: If a pattern is malformed.
            UnknownLocaleError: If a mapping key is not a supported locale.
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"format name must be a non-empty string, got {name!r}")
        if name in self._builtin:
            raise ValueError(f"built-in format {name!r} cannot be replaced")
        if name in self._entries and not replace:
            raise ValueError(f"format {name!r} is already registered")

        if isinstance(entry, str):
            to_backend_tokens(entry)
            stored: FormatEntry = entry
        else:
            stored = {Locale.from_key(key): pattern for key, pattern in entry.items()}
            for pattern in stored.values():
                to_backend_tokens(pattern)

        self._entries[name] = stored
        logger.debug("registered format %r", name)

    def unregister(self, name: str) -> None:
        """Remove a custom format.

        Raises:
            ValueError: If name is a built-in format.
            UnknownFormatError: If name is not registered.
        """
        if name in self._builtin:
            raise ValueError(f"built-in format {name!r} cannot be removed")
        if name not in self._entries:
            raise UnknownFormatError(f"no format named {name!r}")
        del self._entries[name]
        logger.debug("unregistered format %r", name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def names(self) -> list[str]:
        """Return the registered names, built-ins first."""
        return list(self._entries)

    def describe(self, fmt: FormatLike, *, strict: bool = False) -> FormatDescriptor:
        """Turn a format argument into a NamedFormat or PatternFormat.

        None means iso8601. A registered name (or Format member) becomes
        a NamedFormat; any other string becomes a PatternFormat.

        Raises:
            UnknownFormatError: If strict is set and a string is not a
                registered name, or a NamedFormat is not registered.
        """
        if fmt is None:
            return NamedFormat(Format.ISO8601.value)
        if isinstance(fmt, PatternFormat):
            return fmt
        if isinstance(fmt, Format):
            return NamedFormat(fmt.value)
        if isinstance(fmt, NamedFormat):
            if fmt.name not in self._entries:
                raise UnknownFormatError(f"no format named {fmt.name!r}")
            return fmt
        if isinstance(fmt, str):
            if fmt in self._entries:
                return NamedFormat(fmt)
            if strict:
                raise UnknownFormatError(f"no format named {fmt!r}")
            logger.debug("%r is not a registered format; using it as a pattern", fmt)
            return PatternFormat(fmt)
        raise TypeError(f"format must be a name, pattern or descriptor, got {type(fmt).__name__}")

    def pattern_for(
        self,
        fmt: FormatLike,
        locale: Locale,
        *,
        strict: bool = False,
    ) -> str:
        """Resolve a format argument to the LDML pattern for locale.

        Raises:
            UnknownFormatError: See describe(); also raised when a named
                format has no pattern for locale.
        """
        descriptor = self.describe(fmt, strict=strict)
        if isinstance(descriptor, PatternFormat):
            return descriptor.pattern

        entry = self._entries[descriptor.name]
        if isinstance(entry, str):
            return entry
        try:
            return entry[locale]
        except KeyError:
            raise UnknownFormatError(
                f"format {descriptor.name!r} has no pattern for locale {locale.value!r}"
            ) from None


_default_registry = FormatRegistry.with_defaults()


def default_registry() -> FormatRegistry:
    """Return the registry used when none is passed explicitly."""
    return _default_registry


def register_format(name: str, entry: FormatEntry, *, replace: bool = False) -> None:
    """Register a named format in the default registry.

    Examples:
        >>> register_format("month-year", "MMMM yyyy")
        >>> from chrono import date, format_date
        >>> format_date(date(2009, 2, 27), "month-year", locale="us")
        'February 2009'
    """
    _default_registry.register(name, entry, replace=replace)


def unregister_format(name: str) -> None:
    """Remove a custom format from the default registry."""
    _default_registry.unregister(name)


__all__ = [
    "Format",
    "NamedFormat",
    "PatternFormat",
    "FormatDescriptor",
    "FormatRegistry",
    "STYLE_PATTERNS",
    "FIXED_PATTERNS",
    "default_registry",
    "register_format",
    "unregister_format",
]

"""Locale enumeration for formatting and parsing.

The Locale decides month and day names and AM/PM markers, and which
pattern a style format (short-date, long-date-time, ...) resolves to.
"""

from __future__ import annotations

import locale as _platform_locale
from enum import Enum

from chrono.errors import UnknownLocaleError


class Locale(Enum):
    """Supported locales.

    Examples:
        >>> Locale.from_key("ru").backend_code
        'ru'

        >>> Locale.from_key("fr")
        Traceback (most recent call last):
        ...
        chrono.errors.UnknownLocaleError: unknown locale 'fr'; expected one of us, ru
    """

    US = "us"  # US English
    RU = "ru"  # Russian (Russia)

    @property
    def backend_code(self) -> str:
        """Locale code understood by the backend."""
        return _BACKEND_CODES[self]

    @classmethod
    def from_key(cls, key: Locale | str) -> Locale:
        """Resolve a Locale member or its string key.

        Raises:
            UnknownLocaleError: If key is not a supported locale.
        """
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            raise UnknownLocaleError(
                f"unknown locale {key!r}; expected one of "
                f"{', '.join(loc.value for loc in cls)}"
            ) from None

    @classmethod
    def platform_default(cls) -> Locale:
        """Map the process locale onto a supported Locale.

        Russian platform locales map to RU; everything else to US.
        """
        name = _platform_locale.getlocale()[0] or ""
        if name.lower().startswith("ru"):
            return cls.RU
        return cls.US


_BACKEND_CODES: dict[Locale, str] = {
    Locale.US: "en",
    Locale.RU: "ru",
}


__all__ = ["Locale"]

"""Chrono configuration.

Process-wide defaults read by construction, formatting and parsing when
the caller does not pass a locale or time zone explicitly.

All settings have defaults and can be overridden via environment variables:

    CHRONO_LOCALE     locale key ("us", "ru"); default: platform locale
    CHRONO_TIMEZONE   IANA zone name; default: "UTC"

Settings are global configuration meant to be set once at startup. Library
functions read them but never change them, and nothing guards them against
concurrent modification.

Example:
    >>> from chrono.config import configure, get_settings
    >>> configure(locale="ru")
    Settings(locale=<Locale.RU: 'ru'>, timezone='UTC')
    >>> get_settings().locale.backend_code
    'ru'
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

from chrono._internal.constants import DEFAULT_TIMEZONE, LOCALE_ENV, TIMEZONE_ENV
from chrono.units.locale import Locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Default locale and time zone."""

    locale: Locale
    timezone: str = DEFAULT_TIMEZONE

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment, falling back to defaults."""
        locale_key = os.getenv(LOCALE_ENV)
        locale = Locale.from_key(locale_key) if locale_key else Locale.platform_default()
        return cls(locale=locale, timezone=os.getenv(TIMEZONE_ENV, DEFAULT_TIMEZONE))


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.debug("loaded settings %s", _settings)
    return _settings


def configure(
    locale: Locale | str | None = None,
    timezone: str | None = None,
) -> Settings:
    """Replace the process-wide settings.

    Args:
        locale: New default locale key, or None to keep the current one.
        timezone: New default IANA zone name, or None to keep the current one.

    Returns:
        The new settings.

    Raises:
        UnknownLocaleError: If locale is not supported.
        UnknownTimezoneError: If timezone is not a known zone.
    """
    global _settings
    from chrono.units.timezone import resolve_timezone

    changes: dict[str, object] = {}
    if locale is not None:
        changes["locale"] = Locale.from_key(locale)
    if timezone is not None:
        resolve_timezone(timezone)
        changes["timezone"] = timezone

    _settings = replace(get_settings(), **changes)
    logger.debug("configured settings %s", _settings)
    return _settings


def reset_settings() -> None:
    """Forget configured settings; the next read reloads from the environment."""
    global _settings
    _settings = None


def get_locale() -> Locale:
    """Return the default locale."""
    return get_settings().locale


def set_locale(key: Locale | str) -> Locale:
    """Set the default locale and return it.

    Raises:
        UnknownLocaleError: If key is not a supported locale.
    """
    return configure(locale=key).locale


__all__ = [
    "Settings",
    "get_settings",
    "configure",
    "reset_settings",
    "get_locale",
    "set_locale",
]

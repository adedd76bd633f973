"""Units, fields, locales and time zones.

This module provides:
    - Unit: Granularities for arithmetic (YEAR, MONTH, DAY, etc.)
    - Field: Calendar fields readable from a Date
    - Locale: Supported formatting locales
    - resolve_timezone, time_zone: Backend time zone lookup
"""

from __future__ import annotations

from chrono.units.field import Field
from chrono.units.locale import Locale
from chrono.units.timeunit import Unit
from chrono.units.timezone import resolve_timezone, time_zone

__all__: list[str] = [
    "Field",
    "Locale",
    "Unit",
    "resolve_timezone",
    "time_zone",
]

"""Time zone resolution.

Time zones are backend objects; this module only maps names and
offsets onto them and translates backend failures into
UnknownTimezoneError.
"""

from __future__ import annotations

import datetime as _datetime

import pendulum

from chrono.errors import UnknownTimezoneError

# Some zones are ahead of UTC by 14 hours (Pacific/Kiritimati)
_MAX_OFFSET_HOURS: int = 14


def resolve_timezone(tz: str | _datetime.tzinfo | None = None) -> _datetime.tzinfo:
    """Return a backend time zone for a name, a tzinfo, or None.

    Args:
        tz: An IANA zone name, an existing tzinfo, or None for the
            configured default zone.

    Raises:
        UnknownTimezoneError: If the name is not a known zone.

    Examples:
        >>> resolve_timezone("Europe/Moscow").name
        'Europe/Moscow'
    """
    if tz is None:
        from chrono.config import get_settings

        tz = get_settings().timezone
    if isinstance(tz, _datetime.tzinfo):
        return tz
    try:
        return pendulum.timezone(tz)
    except (ValueError, KeyError) as exc:
        raise UnknownTimezoneError(f"unknown time zone {tz!r}") from exc


def time_zone(offset_hours: int) -> _datetime.tzinfo:
    """Return a fixed-offset zone `offset_hours` east of UTC.

    Raises:
        UnknownTimezoneError: If the offset is beyond +/-14 hours.

    Examples:
        >>> time_zone(3).utcoffset(None)
        datetime.timedelta(seconds=10800)
    """
    if abs(offset_hours) > _MAX_OFFSET_HOURS:
        raise UnknownTimezoneError(
            f"offset {offset_hours}h is outside "
            f"[-{_MAX_OFFSET_HOURS}, {_MAX_OFFSET_HOURS}]"
        )
    return pendulum.fixed_timezone(int(offset_hours * 3600))


__all__ = ["resolve_timezone", "time_zone"]

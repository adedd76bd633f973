"""Field enumeration for calendar field lookup."""

from __future__ import annotations

from enum import Enum

from chrono.errors import UnknownUnitError


class Field(Enum):
    """Calendar fields readable from a Date.

    Examples:
        >>> Field.from_key("day-of-week")
        <Field.DAY_OF_WEEK: 'day-of-week'>
        >>> Field.DAY_OF_WEEK.attribute
        'day_of_week'
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    DAY_OF_WEEK = "day-of-week"

    @property
    def attribute(self) -> str:
        """Name of the Date property holding this field."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key: Field | str) -> Field:
        """Resolve a Field member or its string value.

        Raises:
            UnknownUnitError: If key names no readable field.
        """
        if isinstance(key, cls):
            return key
        # Unit members share their values with the matching fields.
        value = getattr(key, "value", key)
        try:
            return cls(value)
        except ValueError:
            raise UnknownUnitError(
                f"unknown field {key!r}; expected one of "
                f"{', '.join(f.value for f in cls)}"
            ) from None


__all__ = ["Field"]

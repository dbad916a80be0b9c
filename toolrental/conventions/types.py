"""
Basic types and enums used across the rental calendar.
"""

from enum import Enum


class Weekday(Enum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, value) -> "Weekday":
        """Accept a Weekday, its name ("MONDAY", "mon") or its number (0-6)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unsupported weekday: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if member.name == key or member.name[:3] == key:
                    return member
        raise ValueError(f"Unsupported weekday: {value!r}")


class HolidayType(Enum):
    """Holiday rule variants."""

    FIXED_DAY = "fixed_day"
    NTH_WEEKDAY = "nth_weekday"


class DayType(Enum):
    """How a single rental day is classified for billing."""

    WEEKDAY = "WEEKDAY"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"


class CatalogSourceType(Enum):
    """Supported catalog sources."""

    BUILTIN = "builtin"
    JSON = "json"

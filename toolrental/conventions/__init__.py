# Re-export calendar conventions
from .calendars_quantlib import WEEKEND_ONLY, Calendar, WeekendCalendar
from .types import CatalogSourceType, DayType, HolidayType, Weekday

__all__ = [
    "Calendar",
    "WeekendCalendar",
    "WEEKEND_ONLY",
    "CatalogSourceType",
    "DayType",
    "HolidayType",
    "Weekday",
]

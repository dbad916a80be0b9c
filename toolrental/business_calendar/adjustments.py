"""
Date adjustment functions for holiday observance.
"""

from datetime import date, datetime, timedelta
from typing import Union

from toolrental.conventions.calendars_quantlib import WEEKEND_ONLY, Calendar
from toolrental.conventions.types import Weekday


def adjust_for_weekend_observance(
    dt: Union[date, datetime],
    observed_on_closest_weekday: bool,
    calendar: Calendar = WEEKEND_ONLY,
) -> date:
    """Move a weekend holiday to the closest weekday.

    Saturday is observed on the preceding Friday, Sunday on the following
    Monday. Weekdays, and any date when observance is off, are returned as is.
    """
    if isinstance(dt, datetime):
        dt = dt.date()

    if not observed_on_closest_weekday or not calendar.is_weekend(dt):
        return dt

    if dt.weekday() == Weekday.SATURDAY.value:
        return dt - timedelta(days=1)
    elif dt.weekday() == Weekday.SUNDAY.value:
        return dt + timedelta(days=1)
    else:
        raise ValueError(f"Unexpected weekend day for {calendar.name} calendar: {dt}")

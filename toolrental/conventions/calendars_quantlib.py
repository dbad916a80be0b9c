"""
QuantLib-backed weekend calendar.

Rental billing only needs to know which days are weekends; holidays come from
the rental holiday rules, not from a market calendar, so only QuantLib's
WeekendsOnly calendar is wrapped here.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql


def _to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


class Calendar:
    """Base calendar class for QuantLib-backed weekend checks."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_weekend(self, dt: Union[date, datetime]) -> bool:
        """Check if date falls on a weekend."""
        return self._ql_calendar.isWeekend(_to_ql_date(dt).weekday())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class WeekendCalendar(Calendar):
    """Calendar that only considers Saturday and Sunday as non-working days."""

    def __init__(self):
        super().__init__("Weekend", ql.WeekendsOnly())


WEEKEND_ONLY = WeekendCalendar()

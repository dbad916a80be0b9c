"""
Holiday resolution.

Expands holiday rules into the concrete dates they fall on (after weekend
observance) for a span of calendar years.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import FrozenSet, Iterable, Optional, Set

from dateutil.relativedelta import relativedelta
from dateutil.relativedelta import weekday as rd_weekday

from toolrental.business_calendar.adjustments import adjust_for_weekend_observance
from toolrental.exceptions import InvalidDateError
from toolrental.schema.holidays import FixedDayHoliday, HolidayRule, NthWeekdayHoliday

logger = logging.getLogger(__name__)


def _fixed_day(rule: FixedDayHoliday, year: int) -> date:
    try:
        return date(year, rule.month, rule.day_of_month)
    except ValueError as exc:
        raise InvalidDateError(
            f"Holiday {rule.name or rule} has no date in {year}: {exc}"
        ) from exc


def _nth_weekday(rule: NthWeekdayHoliday, year: int) -> Optional[date]:
    # First matching weekday on or after the 1st, then (nth - 1) more weeks
    first_of_month = date(year, rule.month, 1)
    dt = first_of_month + relativedelta(weekday=rd_weekday(rule.weekday.value, rule.nth_of_month))
    if dt.month != rule.month:
        return None
    return dt


def resolve_holiday(rule: HolidayRule, year: int) -> Optional[date]:
    """Return the observed date of ``rule`` in ``year``, or None if it has none.

    An nth-weekday rule whose ordinal runs past the end of the month (e.g. the
    5th Monday of a month with four) yields no date for that year.

    Raises:
        InvalidDateError: Fixed-day rule names a day the month does not have
        TypeError: ``rule`` is not a known holiday rule variant
    """
    if isinstance(rule, FixedDayHoliday):
        dt = _fixed_day(rule, year)
    elif isinstance(rule, NthWeekdayHoliday):
        dt = _nth_weekday(rule, year)
        if dt is None:
            logger.debug("No %s in %s for %s; skipped", rule.nth_of_month, year, rule)
            return None
    else:
        raise TypeError(f"Unsupported holiday rule: {rule!r}")

    return adjust_for_weekend_observance(dt, rule.observed_on_closest_weekday)


def resolve_holidays(
    rules: Iterable[HolidayRule], start_year: int, end_year: int
) -> FrozenSet[date]:
    """Resolve every rule for every year in [start_year, end_year]."""
    holiday_dates: Set[date] = set()
    for rule in rules:
        for year in range(start_year, end_year + 1):
            dt = resolve_holiday(rule, year)
            if dt is not None:
                holiday_dates.add(dt)

    logger.debug(
        "Resolved %s holiday dates for %s-%s", len(holiday_dates), start_year, end_year
    )
    return frozenset(holiday_dates)

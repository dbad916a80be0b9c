"""
Chargeable day counting over a rental period.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import AbstractSet, Iterable, Iterator, Union

from toolrental.business_calendar.holidays import resolve_holidays
from toolrental.conventions.calendars_quantlib import WEEKEND_ONLY, Calendar
from toolrental.conventions.types import DayType
from toolrental.data.builtin import DEFAULT_HOLIDAYS
from toolrental.schema.entities import ChargePolicy
from toolrental.schema.holidays import HolidayRule

logger = logging.getLogger(__name__)


def rental_period(checkout_date: Union[date, datetime], rental_days: int) -> Iterator[date]:
    """Yield each day from the day after checkout through the due date."""
    if isinstance(checkout_date, datetime):
        checkout_date = checkout_date.date()
    for offset in range(1, rental_days + 1):
        yield checkout_date + timedelta(days=offset)


def classify_day(
    dt: date, holidays: AbstractSet[date], calendar: Calendar = WEEKEND_ONLY
) -> DayType:
    """Classify a day as HOLIDAY, WEEKEND or WEEKDAY, in that priority."""
    if dt in holidays:
        return DayType.HOLIDAY
    if calendar.is_weekend(dt):
        return DayType.WEEKEND
    return DayType.WEEKDAY


def is_chargeable(
    dt: date,
    charge_policy: ChargePolicy,
    holidays: AbstractSet[date],
    calendar: Calendar = WEEKEND_ONLY,
) -> bool:
    """True unless one of the policy's "no charge" rules excludes the day.

    The weekend, weekday and holiday exclusions are checked independently, so
    a holiday that falls on a weekend is excluded by either flag.
    """
    weekend = calendar.is_weekend(dt)
    if weekend and not charge_policy.charged_on_weekend:
        return False
    if not weekend and not charge_policy.charged_on_weekday:
        return False
    if dt in holidays and not charge_policy.charged_on_holiday:
        return False
    return True


def count_chargeable_days(
    checkout_date: Union[date, datetime],
    rental_days: int,
    charge_policy: ChargePolicy,
    holiday_rules: Iterable[HolidayRule] = DEFAULT_HOLIDAYS,
    calendar: Calendar = WEEKEND_ONLY,
) -> int:
    """Count the billable days of a rental.

    Args:
        checkout_date: Checkout date (not itself billed)
        rental_days: Number of calendar days rented; expected to be 1 or greater
        charge_policy: Policy deciding which day types are billed
        holiday_rules: Holiday rules to resolve over the rental's years
        calendar: Calendar deciding which days are weekends

    Returns:
        Number of chargeable days, 0 for a non-positive ``rental_days``
    """
    if isinstance(checkout_date, datetime):
        checkout_date = checkout_date.date()
    if rental_days <= 0:
        return 0

    due_date = checkout_date + timedelta(days=rental_days)
    holidays = resolve_holidays(holiday_rules, checkout_date.year, due_date.year)

    charge_days = 0
    for dt in rental_period(checkout_date, rental_days):
        if is_chargeable(dt, charge_policy, holidays, calendar):
            charge_days += 1
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("No charge for %s (%s)", dt, classify_day(dt, holidays, calendar).value)

    logger.debug(
        "%s of %s days chargeable for %s from %s",
        charge_days, rental_days, charge_policy.tool_type, checkout_date,
    )
    return charge_days

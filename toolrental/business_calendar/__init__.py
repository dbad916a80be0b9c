"""Rental calendar: holiday resolution and chargeable day counting."""

from .adjustments import adjust_for_weekend_observance
from .charge_days import classify_day, count_chargeable_days, is_chargeable, rental_period
from .holidays import resolve_holiday, resolve_holidays

__all__ = [
    "adjust_for_weekend_observance",
    "resolve_holiday",
    "resolve_holidays",
    "rental_period",
    "classify_day",
    "is_chargeable",
    "count_chargeable_days",
]

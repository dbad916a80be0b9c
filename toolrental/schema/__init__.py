"""
Value schemas for tools, charge policies, rental terms and holiday rules.
"""

from .entities import ChargePolicy, RentalTerms, Tool
from .holidays import FixedDayHoliday, HolidayRule, NthWeekdayHoliday

__all__ = [
    "Tool",
    "ChargePolicy",
    "RentalTerms",
    # Holiday rule variants
    "HolidayRule",
    "FixedDayHoliday",
    "NthWeekdayHoliday",
]

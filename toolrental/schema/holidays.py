"""
Holiday rule schemas.

A holiday rule is one of two variants, combined in the ``HolidayRule`` union:

- ``FixedDayHoliday``: the same calendar date every year (e.g., July 4)
- ``NthWeekdayHoliday``: the nth given weekday of a month (e.g., 1st Monday of September)

Both variants optionally move a weekend occurrence to the closest weekday.
"""

from dataclasses import dataclass
from typing import Union

from toolrental.conventions.types import Weekday


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month!r}")


@dataclass(frozen=True)
class FixedDayHoliday:
    """Holiday on the same calendar date every year."""

    month: int
    day_of_month: int
    observed_on_closest_weekday: bool = False
    name: str = ""

    def __post_init__(self):
        _check_month(self.month)
        # Whether the day exists in a given year is checked on resolution (Feb 29)
        if not 1 <= self.day_of_month <= 31:
            raise ValueError(f"day_of_month must be in 1..31, got {self.day_of_month!r}")


@dataclass(frozen=True)
class NthWeekdayHoliday:
    """Holiday on the nth occurrence of a weekday within a month."""

    month: int
    weekday: Weekday
    nth_of_month: int = 1
    observed_on_closest_weekday: bool = False
    name: str = ""

    def __post_init__(self):
        _check_month(self.month)
        object.__setattr__(self, "weekday", Weekday.parse(self.weekday))
        if self.nth_of_month < 1:
            raise ValueError("nth_of_month must be 1 or greater")


HolidayRule = Union[FixedDayHoliday, NthWeekdayHoliday]

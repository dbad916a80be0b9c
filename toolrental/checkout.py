"""
Tool rental checkout.

Validates raw checkout input against a catalog and produces a
``RentalAgreement`` that can be priced and printed as a receipt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Tuple, Union

from toolrental.business_calendar.charge_days import count_chargeable_days
from toolrental.data.builtin import DEFAULT_CATALOG
from toolrental.data.catalog import Catalog
from toolrental.exceptions import (
    InvalidDateFormat,
    InvalidDiscountPercent,
    InvalidRentalDayCount,
    InvalidToolCode,
)
from toolrental.pricing.calculator import compute_price, to_decimal
from toolrental.pricing.types import PriceBreakdown
from toolrental.schema.entities import ChargePolicy, RentalTerms, Tool
from toolrental.schema.holidays import HolidayRule
from toolrental.utils.date import DateLike, to_date

logger = logging.getLogger(__name__)

MIN_RENTAL_DAYS = 1
MIN_DISCOUNT_PERCENT = Decimal(0)
MAX_DISCOUNT_PERCENT = Decimal(100)


@dataclass(frozen=True)
class RentalAgreement:
    """A tool rented under a set of rental terms.

    Attributes:
        tool: Tool being rented
        terms: Checkout date, rental length, charge policy and discount
        holidays: Holiday rules applied when counting chargeable days
    """

    tool: Tool
    terms: RentalTerms
    holidays: Tuple[HolidayRule, ...] = field(default=DEFAULT_CATALOG.holidays)

    @property
    def checkout_date(self) -> date:
        return self.terms.checkout_date

    @property
    def due_date(self) -> date:
        return self.terms.due_date

    @property
    def rental_days(self) -> int:
        return self.terms.rental_days

    @property
    def discount_percent(self) -> Decimal:
        return self.terms.discount_percent

    @property
    def charge_policy(self) -> ChargePolicy:
        return self.terms.charge_policy

    @property
    def daily_charge_cents(self) -> int:
        return self.terms.charge_policy.daily_charge_cents

    def charge_days(self, holiday_rules: Optional[Iterable[HolidayRule]] = None) -> int:
        """Number of chargeable days in the rental period."""
        if holiday_rules is None:
            holiday_rules = self.holidays
        return count_chargeable_days(
            self.checkout_date, self.rental_days, self.charge_policy, holiday_rules
        )

    def price(self, holiday_rules: Optional[Iterable[HolidayRule]] = None) -> PriceBreakdown:
        """Price the rental."""
        return compute_price(
            self.charge_days(holiday_rules), self.daily_charge_cents, self.discount_percent
        )


def parse_rental_days(value: Union[str, int]) -> int:
    if isinstance(value, bool):
        raise InvalidRentalDayCount("The rental day count must be a positive integer")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise InvalidRentalDayCount("The rental day count must be a positive integer") from exc


def parse_discount_percent(value: Union[str, int, float, Decimal]) -> Decimal:
    if isinstance(value, bool):
        raise InvalidDiscountPercent("The discount percentage must be a valid number")
    try:
        discount = to_decimal(value.strip().rstrip("%") if isinstance(value, str) else value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidDiscountPercent("The discount percentage must be a valid number") from exc
    if not discount.is_finite():
        raise InvalidDiscountPercent("The discount percentage must be a valid number")
    return discount


def parse_checkout_date(value: DateLike) -> date:
    try:
        return to_date(value)
    except (TypeError, ValueError) as exc:
        raise InvalidDateFormat("The checkout date must be formatted like MM/DD/YY") from exc


def checkout(
    tool_code: str,
    rental_days: Union[str, int],
    discount_percent: Union[str, int, float, Decimal],
    checkout_date: DateLike,
    catalog: Catalog = DEFAULT_CATALOG,
) -> RentalAgreement:
    """Validate checkout input and create a rental agreement.

    Args:
        tool_code: Code of the tool being rented (e.g., "LADW")
        rental_days: Number of days rented, 1 or greater
        discount_percent: Discount percentage in [0, 100)
        checkout_date: Checkout date, 'MM/DD/YY' or a date
        catalog: Tools, charge policies and holidays to use

    Returns:
        RentalAgreement for the validated input

    Raises:
        InvalidRentalDayCount: rental_days is not an integer >= 1
        InvalidDiscountPercent: discount_percent is not a number in [0, 100)
        InvalidDateFormat: checkout_date cannot be parsed
        InvalidToolCode: tool_code is unknown or its type has no charge policy
    """
    days = parse_rental_days(rental_days)
    discount = parse_discount_percent(discount_percent)
    start = parse_checkout_date(checkout_date)

    if days < MIN_RENTAL_DAYS:
        raise InvalidRentalDayCount("The number of rental days must be 1 or greater")
    if not MIN_DISCOUNT_PERCENT <= discount < MAX_DISCOUNT_PERCENT:
        raise InvalidDiscountPercent("The discount percentage must be between 0 and 100")

    tool = catalog.lookup_tool(tool_code)
    if tool is None:
        raise InvalidToolCode(tool_code)
    policy = catalog.lookup_policy(tool.type)
    if policy is None:
        logger.error("Tool %s has type %s with no charge policy", tool.code, tool.type)
        raise InvalidToolCode(tool_code)

    agreement = RentalAgreement(
        tool=tool,
        terms=RentalTerms(
            checkout_date=start,
            rental_days=days,
            charge_policy=policy,
            discount_percent=discount,
        ),
        holidays=catalog.holidays,
    )
    logger.info(
        "Checked out %s for %s days from %s at %s%% discount",
        tool.code, days, start, discount,
    )
    return agreement

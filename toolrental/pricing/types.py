"""Data structures for rental pricing."""

from dataclasses import dataclass
from decimal import Decimal

CENTS_PER_DOLLAR = 100


def cents_to_dollars(cents: int) -> Decimal:
    """Exact dollar amount for an integer number of cents."""
    return Decimal(cents) / CENTS_PER_DOLLAR


@dataclass(frozen=True)
class PriceBreakdown:
    """Charge amounts for one rental, in cents.

    Attributes:
        charge_days: Number of billable days
        pre_discount_cents: charge_days x daily charge
        discount_cents: Discount, rounded half-up to a whole cent
        final_cents: pre_discount_cents - discount_cents
    """

    charge_days: int
    pre_discount_cents: int
    discount_cents: int
    final_cents: int

    @property
    def pre_discount_charge(self) -> Decimal:
        return cents_to_dollars(self.pre_discount_cents)

    @property
    def discount_amount(self) -> Decimal:
        return cents_to_dollars(self.discount_cents)

    @property
    def final_charge(self) -> Decimal:
        return cents_to_dollars(self.final_cents)

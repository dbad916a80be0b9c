from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal


@dataclass(frozen=True)
class Tool:
    code: str
    type: str
    brand: str


@dataclass(frozen=True)
class ChargePolicy:
    """Daily charge and billable day types for one tool type.

    Attributes:
        tool_type: Tool type this policy applies to (e.g., "Ladder")
        daily_charge_cents: Daily rate in cents
        charged_on_weekday: Whether Monday-Friday days are billed
        charged_on_weekend: Whether Saturday/Sunday days are billed
        charged_on_holiday: Whether observed holidays are billed
    """

    tool_type: str
    daily_charge_cents: int
    charged_on_weekday: bool = True
    charged_on_weekend: bool = True
    charged_on_holiday: bool = True

    def __post_init__(self):
        if self.daily_charge_cents < 0:
            raise ValueError("daily_charge_cents must be non-negative")


@dataclass(frozen=True)
class RentalTerms:
    """Checkout date, length, policy and discount for one rental.

    The billable period runs from the day after ``checkout_date`` through
    ``due_date`` inclusive.
    """

    checkout_date: date
    rental_days: int
    charge_policy: ChargePolicy
    discount_percent: Decimal = Decimal(0)

    @property
    def due_date(self) -> date:
        return self.checkout_date + timedelta(days=self.rental_days)

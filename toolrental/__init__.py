"""Tool Rental Pricing Engine.

This package prices tool rentals: it counts the chargeable days of a rental
under a tool's charge policy and the holiday calendar, then computes the
pre-discount charge, a half-up rounded discount and the final charge.

Key modules:
- business_calendar: Holiday resolution and chargeable day counting
- pricing: Exact-decimal charge calculation
- data: Tool, charge policy and holiday catalogs
- checkout: Input validation and rental agreements
- receipt: Receipt rendering
- cli: Command-line checkout
"""

from .business_calendar import count_chargeable_days, resolve_holiday, resolve_holidays
from .checkout import RentalAgreement, checkout
from .data import DEFAULT_CATALOG, Catalog
from .pricing import PriceBreakdown, compute_price
from .schema import ChargePolicy, FixedDayHoliday, NthWeekdayHoliday, RentalTerms, Tool

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Core
    "resolve_holiday",
    "resolve_holidays",
    "count_chargeable_days",
    "compute_price",
    # Types
    "Tool",
    "ChargePolicy",
    "RentalTerms",
    "FixedDayHoliday",
    "NthWeekdayHoliday",
    "PriceBreakdown",
    "RentalAgreement",
    "Catalog",
    "DEFAULT_CATALOG",
    # Checkout
    "checkout",
]

"""Rental agreement receipt text."""

from __future__ import annotations

import sys
from decimal import Decimal
from typing import List, Optional, TextIO

from toolrental.checkout import RentalAgreement
from toolrental.pricing.types import PriceBreakdown, cents_to_dollars
from toolrental.utils.date import CHECKOUT_FMT, format_date


def format_currency(cents: int) -> str:
    """Format cents as US dollars, e.g. 123456 -> '$1,234.56'."""
    dollars: Decimal = cents_to_dollars(cents)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def receipt_lines(
    agreement: RentalAgreement,
    breakdown: Optional[PriceBreakdown] = None,
    date_format: str = CHECKOUT_FMT,
) -> List[str]:
    """Receipt lines for an agreement, pricing it first if needed."""
    if breakdown is None:
        breakdown = agreement.price()

    tool = agreement.tool
    return [
        f"Tool code: {tool.code}",
        f"Tool type: {tool.type}",
        f"Tool brand: {tool.brand}",
        f"Rental days: {agreement.rental_days}",
        f"Check out date: {format_date(agreement.checkout_date, date_format)}",
        f"Due date: {format_date(agreement.due_date, date_format)}",
        f"Daily rental charge: {format_currency(agreement.daily_charge_cents)}",
        f"Charge days: {breakdown.charge_days}",
        f"Pre-discount charge: {format_currency(breakdown.pre_discount_cents)}",
        f"Discount percent: {agreement.discount_percent}%",
        f"Discount amount: {format_currency(breakdown.discount_cents)}",
        f"Final charge: {format_currency(breakdown.final_cents)}",
    ]


def render_receipt(
    agreement: RentalAgreement,
    breakdown: Optional[PriceBreakdown] = None,
    date_format: str = CHECKOUT_FMT,
) -> str:
    return "\n".join(receipt_lines(agreement, breakdown, date_format)) + "\n"


def print_receipt(
    agreement: RentalAgreement,
    stream: Optional[TextIO] = None,
    date_format: str = CHECKOUT_FMT,
) -> None:
    """Write the receipt to ``stream`` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    stream.write(render_receipt(agreement, date_format=date_format))

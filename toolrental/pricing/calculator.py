"""Pre-discount, discount and final charge for a rental."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, Inexact, localcontext
from typing import Union

from toolrental.pricing.types import PriceBreakdown

logger = logging.getLogger(__name__)

PercentLike = Union[Decimal, int, float, str]

_WHOLE_CENT = Decimal(1)


def to_decimal(value: PercentLike) -> Decimal:
    """Exact Decimal for a percent; floats go through their repr, never binary."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def discount_fraction(discount_percent: PercentLike) -> Decimal:
    """Convert a percentage (e.g., 10) to a fraction (0.10)."""
    percent = to_decimal(discount_percent)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits(percent))
        ctx.traps[Inexact] = True
        return percent.scaleb(-2)


def round_half_up(amount: Decimal) -> int:
    """Round to a whole number of cents; exact halves round away from zero."""
    with localcontext() as ctx:
        # quantize fails once the whole-cent result outgrows the precision
        ctx.prec = max(ctx.prec, amount.adjusted() + 2)
        return int(amount.quantize(_WHOLE_CENT, rounding=ROUND_HALF_UP))


def compute_price(
    charge_days: int, daily_charge_cents: int, discount_percent: PercentLike = 0
) -> PriceBreakdown:
    """Return the PriceBreakdown for a chargeable day count.

    The discount is the exact product of the pre-discount charge and the
    discount fraction; only the final rounding to whole cents is inexact.

    Args:
        charge_days: Number of chargeable days
        daily_charge_cents: Daily rate in cents
        discount_percent: Discount as a percentage, e.g. 10 for 10%

    Returns:
        PriceBreakdown with all amounts in cents
    """
    pre_discount_cents = charge_days * daily_charge_cents
    fraction = discount_fraction(discount_percent)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits(fraction) + len(str(abs(pre_discount_cents))) + 2)
        ctx.traps[Inexact] = True
        discount = fraction * pre_discount_cents
    discount_cents = round_half_up(discount)
    final_cents = pre_discount_cents - discount_cents

    logger.debug(
        "Priced %s days at %s cents: pre=%s discount=%s (%s) final=%s",
        charge_days, daily_charge_cents, pre_discount_cents, discount_cents, discount, final_cents,
    )
    return PriceBreakdown(
        charge_days=charge_days,
        pre_discount_cents=pre_discount_cents,
        discount_cents=discount_cents,
        final_cents=final_cents,
    )

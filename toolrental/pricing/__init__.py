"""Rental pricing.

Exact-decimal charge calculation: pre-discount charge, half-up rounded
discount and final charge, all in cents.
"""

from .calculator import compute_price, discount_fraction, round_half_up
from .types import PriceBreakdown, cents_to_dollars

__all__ = [
    "PriceBreakdown",
    "compute_price",
    "discount_fraction",
    "round_half_up",
    "cents_to_dollars",
]

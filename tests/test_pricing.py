"""
Tests for rental price calculation.
"""

from decimal import Decimal

import pytest

from toolrental.pricing import PriceBreakdown, compute_price, discount_fraction, round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            ("0.5", 1),
            ("1.5", 2),
            ("2.5", 3),
            ("1.49", 1),
            ("1.99", 2),
            ("199.0", 199),
            ("0", 0),
        ],
    )
    def test_rounding(self, amount, expected):
        assert round_half_up(Decimal(amount)) == expected


class TestDiscountFraction:
    def test_exact_decimal(self):
        assert discount_fraction(10) == Decimal("0.1")
        assert discount_fraction("1") == Decimal("0.01")

    def test_float_keeps_written_value(self):
        assert discount_fraction(0.1) == Decimal("0.001")

    def test_long_percent_is_not_rounded(self):
        percent = Decimal("12.49999999999999999999999999999")
        assert discount_fraction(percent) == Decimal("0.1249999999999999999999999999999")


class TestComputePrice:
    def test_no_discount(self):
        assert compute_price(1, 199, 0) == PriceBreakdown(1, 199, 0, 199)

    def test_ten_percent(self):
        breakdown = compute_price(10, 199, 10)
        assert breakdown.pre_discount_cents == 1990
        assert breakdown.discount_cents == 199
        assert breakdown.final_cents == 1791

    def test_one_percent_rounds_up(self):
        # 199 x 0.01 = 1.99 -> 2
        assert compute_price(1, 199, 1) == PriceBreakdown(1, 199, 2, 197)

    @pytest.mark.parametrize(
        "pre_discount,expected_discount",
        [
            (50, 1),   # 0.5
            (150, 2),  # 1.5
            (250, 3),  # 2.5, not banker's 2
        ],
    )
    def test_exact_half_cent_rounds_away_from_zero(self, pre_discount, expected_discount):
        breakdown = compute_price(1, pre_discount, 1)
        assert breakdown.discount_cents == expected_discount
        assert breakdown.final_cents == pre_discount - expected_discount

    def test_fractional_percent(self):
        # 2 x 299 = 598; 598 x 0.125 = 74.75 -> 75
        assert compute_price(2, 299, Decimal("12.5")) == PriceBreakdown(2, 598, 75, 523)

    def test_just_below_half_cent_rounds_down(self):
        # 4 x 0.1249999999999999999999999999999 = 0.49999999999999999999999999999996
        breakdown = compute_price(1, 4, Decimal("12.49999999999999999999999999999"))
        assert breakdown.discount_cents == 0
        assert breakdown.final_cents == 4

    def test_large_amount_keeps_half_cent(self):
        # (10**29 + 50) x 0.01 = 10**27 + 0.5 -> 10**27 + 1
        breakdown = compute_price(1, 10**29 + 50, 1)
        assert breakdown.discount_cents == 10**27 + 1
        assert breakdown.final_cents == 10**29 + 50 - (10**27 + 1)

    def test_string_percent(self):
        assert compute_price(3, 149, "20") == PriceBreakdown(3, 447, 89, 358)

    def test_zero_days(self):
        assert compute_price(0, 299, 50) == PriceBreakdown(0, 0, 0, 0)

    def test_dollar_properties(self):
        breakdown = compute_price(10, 199, 10)
        assert breakdown.pre_discount_charge == Decimal("19.90")
        assert breakdown.discount_amount == Decimal("1.99")
        assert breakdown.final_charge == Decimal("17.91")

    def test_breakdown_is_immutable(self):
        breakdown = compute_price(1, 199)
        with pytest.raises(AttributeError):
            breakdown.final_cents = 0

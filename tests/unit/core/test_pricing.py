"""Unit tests for the money helpers.

Covers:
- final price = price reduced by the percentage discount.
- Missing / zero discount leaves the price untouched.
- Half-up rounding to cents.
- Out-of-range discounts are rejected.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.core.pricing import compute_final_price, to_money

pytestmark = pytest.mark.unit


class TestToMoney:
    def test_quantizes_to_cents(self):
        assert to_money(Decimal("10")) == Decimal("10.00")

    def test_rounds_half_up(self):
        assert to_money(Decimal("2.345")) == Decimal("2.35")
        assert to_money(Decimal("2.344")) == Decimal("2.34")

    def test_accepts_strings_and_ints(self):
        assert to_money("19.999") == Decimal("20.00")
        assert to_money(7) == Decimal("7.00")


class TestComputeFinalPrice:
    @pytest.mark.parametrize(
        "price, discount, expected",
        [
            ("1000", "10", "900.00"),
            ("3500", "10", "3150.00"),
            ("4200", "15", "3570.00"),
            ("3800", "20", "3040.00"),
            ("999.99", "33", "669.99"),
            ("100", "100", "0.00"),
            ("0.05", "50", "0.03"),
        ],
    )
    def test_applies_percentage_discount(self, price, discount, expected):
        assert compute_final_price(Decimal(price), Decimal(discount)) == Decimal(expected)

    @pytest.mark.parametrize("discount", [None, 0, Decimal("0")])
    def test_no_discount_keeps_price(self, discount):
        assert compute_final_price(Decimal("1500.00"), discount) == Decimal("1500.00")

    @pytest.mark.parametrize("discount", ["-1", "100.01", "250"])
    def test_discount_out_of_range_raises(self, discount):
        with pytest.raises(ValueError, match="between 0 and 100"):
            compute_final_price(Decimal("100"), Decimal(discount))

    def test_negative_price_raises(self):
        with pytest.raises(ValueError):
            compute_final_price(Decimal("-1"), None)

    def test_result_always_has_two_places(self):
        result = compute_final_price(Decimal("10"), Decimal("3"))
        assert result == Decimal("9.70")
        assert result.as_tuple().exponent == -2

"""Unit tests for utils.currency."""

import math

import pytest

from storefront.catalog_kit.utils.currency import format_number_to_price, parse_price_to_number


class TestParsePriceToNumber:
    """Test suite for parse_price_to_number."""

    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            ("₹12,000", 12000),
            ("₹1,23,456", 123456),
            ("₹999", 999),
            ("Price: ₹2,499 only", 2499),
            ("₹0", 0),
        ],
    )
    def test_parses_canonical_prices(self, price, expected):
        assert parse_price_to_number(price) == expected

    @pytest.mark.parametrize("price", ["12,000", "", "₹", "₹,,", "$12", "rupees 500"])
    def test_unrecognized_strings_return_zero(self, price):
        assert parse_price_to_number(price) == 0

    @pytest.mark.parametrize("price", [None, 12000, 12.5, True, ["₹1"], {"price": "₹1"}])
    def test_non_strings_return_zero(self, price):
        assert parse_price_to_number(price) == 0

    def test_fraction_is_ignored(self):
        assert parse_price_to_number("₹1,299.99") == 1299


class TestFormatNumberToPrice:
    """Test suite for format_number_to_price."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (0, "₹0"),
            (999, "₹999"),
            (1000, "₹1,000"),
            (12000, "₹12,000"),
            (100000, "₹1,00,000"),
            (1234567, "₹12,34,567"),
            (1234.5, "₹1,234.5"),
            (1234.56789, "₹1,234.568"),
            (2.0, "₹2"),
            (-1500, "₹-1,500"),
        ],
    )
    def test_formats_with_indian_grouping(self, number, expected):
        assert format_number_to_price(number) == expected

    @pytest.mark.parametrize("number", [math.nan, math.inf, -math.inf, "12", None, True, [1]])
    def test_non_numbers_return_zero_price(self, number):
        assert format_number_to_price(number) == "₹0"

    def test_large_numbers_keep_all_digits(self):
        assert format_number_to_price(10 ** 30) == "₹10" + ",00" * 13 + ",000"

    def test_rounds_the_exact_binary_value(self):
        """1.0005 实际存储为 1.000499999...，舍入后不进位。"""
        assert format_number_to_price(1.0005) == "₹1"
        assert format_number_to_price(-1.0005) == "₹-1"


class TestPriceRoundTrip:
    """format(parse(s)) == s for canonical prices."""

    @pytest.mark.parametrize("price", ["₹0", "₹999", "₹1,000", "₹12,000", "₹1,00,000", "₹12,34,567"])
    def test_round_trip(self, price):
        assert format_number_to_price(parse_price_to_number(price)) == price

    def test_western_grouping_is_normalized(self):
        assert format_number_to_price(parse_price_to_number("₹1,200,000")) == "₹12,00,000"

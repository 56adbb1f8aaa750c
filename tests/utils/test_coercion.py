"""Unit tests for utils.coercion."""

import math

import pytest

from storefront.catalog_kit.utils.coercion import clamp, coerce_int, is_finite_number, parse_int


class TestParseInt:
    """parse_int follows the leading-integer parsing rules."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (7, 7),
            ("42", 42),
            (" 42", 42),
            ("3abc", 3),
            ("-7", -7),
            ("+5", 5),
            ("2.9", 2),
            (2.9, 2),
            (-2.9, -2),
        ],
    )
    def test_parses(self, value, expected):
        assert parse_int(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", None, True, False, math.nan, math.inf, [3], {}])
    def test_invalid_returns_none(self, value):
        assert parse_int(value) is None


class TestCoerceInt:
    """coerce_int falls back to the default for invalid input and zero."""

    def test_valid_value(self):
        assert coerce_int("12", 10) == 12

    @pytest.mark.parametrize("value", [None, "abc", 0, "0", math.nan])
    def test_default(self, value):
        assert coerce_int(value, 10) == 10

    def test_negative_is_kept(self):
        assert coerce_int(-3, 10) == -3


class TestHelpers:
    def test_clamp(self):
        assert clamp(500, 1, 100) == 100
        assert clamp(-5, 1, 100) == 1
        assert clamp(50, 1, 100) == 50
        assert clamp(-5, 0) == 0

    @pytest.mark.parametrize(("value", "expected"), [(1, True), (1.5, True), (math.nan, False), (True, False), ("1", False)])
    def test_is_finite_number(self, value, expected):
        assert is_finite_number(value) is expected

"""
Tests for money rounding and formatting (rounding.py).

Tests:
1-3.  round_price to the nearest 0.10, accumulation precision
4-6.  Comma-decimal display, currency and price codes
7.    Suggested wholesale price
"""

import pytest

from jewelry_costing.rounding import (
    accumulate,
    codify_price,
    format_currency,
    format_decimal,
    round_price,
    suggested_wholesale_price,
)


# ============================================================
# Rounding
# ============================================================

@pytest.mark.parametrize("raw,expected", [
    (21.54, 21.5),
    (21.55, 21.6),
    (21.56, 21.6),
    (2.7, 2.7),
    (0.04, 0.0),
    (0.05, 0.1),
    (0.0, 0.0),
])
def test_round_price_nearest_tenth(raw, expected):
    assert round_price(raw) == expected


def test_round_price_is_idempotent():
    for raw in (1.23, 4.05, 29.599999999999998, 100.0):
        assert round_price(round_price(raw)) == round_price(raw)


def test_accumulate_keeps_four_places():
    assert accumulate(0.1, 0.2) == 0.3
    assert accumulate(1.0, 0.123456) == 1.1235


# ============================================================
# Formatting
# ============================================================

def test_format_decimal_comma_separator():
    assert format_decimal(3.5) == "3,50"
    assert format_decimal(1.5, 3) == "1,500"
    assert format_decimal(None) == "0,00"
    assert format_decimal(float("nan")) == "0,00"


def test_format_currency():
    assert format_currency(36.9) == "36,90€"
    assert format_currency(None) == "0,00€"


def test_codify_price():
    """'1' + cents + '9'."""
    assert codify_price(36.9) == "136909"
    assert codify_price(5.0) == "15009"
    assert codify_price(0) == ""
    assert codify_price(-2.0) == ""


def test_suggested_wholesale_price():
    """(5.00 labor + 2.00 materials) x 2 + 8.20 metal + 10g x 2.00."""
    assert suggested_wholesale_price(10.0, 8.2, 5.0, 2.0) == pytest.approx(42.2)


"""Tests for amount parser."""

import pytest
from decimal import Decimal

from fintrack.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("₱1,234.50", Decimal("1234.50")),
        ("$99", Decimal("99")),
        ("  42  ", Decimal("42")),
        ("-5", Decimal("-5")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "12..5", "(10.00)"])
def test_parse_amount_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-inf"])
def test_parse_amount_rejects_non_finite(text):
    with pytest.raises(ValueError, match="finite"):
        parse_amount(text)

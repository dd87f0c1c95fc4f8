"""Unit tests for rupee rounding and formatting"""

import pytest
from finserv_calculators.utils.currency import format_inr, format_lakhs, round_half_up


@pytest.mark.parametrize("value,expected", [(2.5, 3), (2.49, 2), (9321.31, 9321), (137.5, 138), (0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (1_000, "₹1,000"),
        (100_000, "₹1,00,000"),
        (2_237_040, "₹22,37,040"),
        (125_000_000, "₹12,50,00,000"),
        (1234.5, "₹1,235"),
        (-1_500, "-₹1,500"),
    ],
)
def test_format_inr_indian_grouping(amount, expected):
    assert format_inr(amount) == expected


def test_format_lakhs():
    assert format_lakhs(1_000_000) == "₹10.0L"
    assert format_lakhs(150_000) == "₹1.5L"

"""Rupee rounding and display helpers"""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest whole rupee, halves rounding up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2), which
    would make published EMI figures drift by a rupee on exact halves.
    """
    return int(math.floor(value + 0.5))


def format_inr(amount: float) -> str:
    """
    Format a rupee amount with Indian digit grouping.

    The last three digits form one group, every group above it has two:
        2237040    -> "₹22,37,040"
        125000000  -> "₹12,50,00,000"
    Amounts are rounded to whole rupees first.
    """
    rupees = round_half_up(abs(amount))
    sign = "-" if amount < 0 and rupees else ""
    digits = str(rupees)

    if len(digits) <= 3:
        return f"{sign}₹{digits}"

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return f"{sign}₹{','.join(groups)},{tail}"


def format_lakhs(amount: float) -> str:
    """Compact lakh notation shown next to loan amount sliders (₹10.0L for ten lakh)"""
    return f"₹{amount / 100_000:.1f}L"

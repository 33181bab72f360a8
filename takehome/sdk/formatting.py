"""Currency and rate formatting for helper text and CLI output."""

import math


def format_whole(amount: float) -> str:
    """Format as whole dollars: 84250.4 -> '$84,250'. Halves round away from zero."""
    sign = "-" if amount < 0 else ""
    dollars = math.floor(abs(amount) + 0.5)
    return f"{sign}${dollars:,}"


def format_currency(amount: float) -> str:
    """Format with cents: 1080 -> '$1,080.00'."""
    sign = "-" if amount < 0 else ""
    cents = math.floor(abs(amount) * 100 + 0.5) / 100
    return f"{sign}${cents:,.2f}"


def format_rate(rate: float) -> str:
    """Format a percentage without trailing zeros: 5.0 -> '5', 3.078 -> '3.078'."""
    return f"{rate:g}"

"""Marginal bracket arithmetic shared by federal, state and city taxes.

A bracket table is an ordered list of (max, rate) entries. Each rate
applies only to the slice of income between the previous bound and its
own bound. Tax amounts and the per-bracket helper text are produced from
the same segmentation so the two never disagree.
"""

import math
from typing import Sequence

from ..formatting import format_rate, format_whole
from .schemas import Bracket


def round_cents(amount: float) -> float:
    """Round to the nearest cent, halves rounding up.

    Example: 2.625 -> 2.63 (Python's round() gives 2.62)
    """
    return math.floor(amount * 100 + 0.5) / 100


def bracket_segments(income: float, brackets: Sequence[Bracket]) -> list[tuple[float, float]]:
    """Split income into (amount, rate) slices, lowest bracket first.

    Stops at the bracket containing the last dollar of income; brackets
    above it are never reached.
    """
    segments = []
    if income <= 0:
        return segments

    previous_max = 0.0
    for bracket in brackets:
        chunk = min(income, bracket.max) - previous_max
        if chunk > 0:
            segments.append((chunk, bracket.rate))
        if income <= bracket.max:
            break
        previous_max = bracket.max
    return segments


def bracket_tax(income: float, brackets: Sequence[Bracket]) -> float:
    """Tax on income under a marginal bracket table, rounded to the cent."""
    if income <= 0:
        return 0.0
    tax = 0.0
    for chunk, rate in bracket_segments(income, brackets):
        tax += chunk * (rate / 100)
    return round_cents(tax)


def amount_at_rates(income: float, brackets: Sequence[Bracket]) -> str:
    """Describe the bracket slices: '$11,925 at 10%, $36,550 at 12%, ...'."""
    return ", ".join(
        f"{format_whole(chunk)} at {format_rate(rate)}%"
        for chunk, rate in bracket_segments(income, brackets)
    )

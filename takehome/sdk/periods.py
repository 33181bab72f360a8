"""Pay period conversion.

Daily amounts assume 260 working days a year and hourly amounts 2,080
working hours, not calendar days.
"""

from .taxes.brackets import round_cents

# Multiply an amount in this period by the factor to get the yearly amount
PERIOD_TO_YEARLY_FACTOR = {
    "yearly": 1,
    "monthly": 12,
    "weekly": 52,
    "daily": 260,
    "hourly": 2080,
}

# Higher = longer period; used to pick the headline period
PERIOD_RANK = {
    "yearly": 5,
    "monthly": 4,
    "weekly": 3,
    "daily": 2,
    "hourly": 1,
}

PERIOD_ADJECTIVE = {
    "yearly": "Yearly",
    "monthly": "Monthly",
    "weekly": "Weekly",
    "daily": "Daily",
    "hourly": "Hourly",
}

HEADLINE_PERIOD_LABEL = {
    "yearly": "a year",
    "monthly": "a month",
    "weekly": "a week",
    "daily": "a day",
    "hourly": "an hour",
}

_ROUND_TO_CENTS = {"monthly", "daily", "hourly"}


def to_yearly(amount: float, period: str) -> float:
    """Yearly equivalent of an amount earned per period (unknown period = yearly)."""
    return amount * PERIOD_TO_YEARLY_FACTOR.get(period, 1)


def from_yearly(yearly: float, period: str) -> float:
    """Per-period share of a yearly amount; cents for monthly/daily/hourly."""
    value = yearly / PERIOD_TO_YEARLY_FACTOR.get(period, 1)
    if period in _ROUND_TO_CENTS:
        return round_cents(value)
    return value


def headline_period(inp) -> str:
    """Longest period among the income inputs that carry an amount."""
    periods = []
    if inp.wages > 0:
        periods.append(inp.wages_period)
    if inp.business_income > 0:
        periods.append(inp.business_period)
    if not periods:
        return "yearly"
    return max(periods, key=lambda p: PERIOD_RANK.get(p, 0))


def periods_to_show(inp) -> list[str]:
    """Yearly plus every non-yearly input period, longest first; empty if all yearly."""
    periods = []
    if inp.wages > 0:
        periods.append(inp.wages_period)
    if inp.business_income > 0:
        periods.append(inp.business_period)
    if not any(p != "yearly" for p in periods):
        return []
    return sorted(set(["yearly"] + periods), key=lambda p: PERIOD_RANK.get(p, 0), reverse=True)

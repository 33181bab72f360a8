"""State income tax, state capital gains tax, and state disability insurance.

State bracket tables are not split by filing status; the filing status
is accepted so callers treat every jurisdiction alike, and the single
table applies to both.

Capital gains are taxed incrementally: tax(base + taxable gains) minus
tax(base), where the taxable part of long-term gains depends on the
state's capital gains policy (see CapitalGainsPolicy). Washington-style
flat_threshold policies are the exception and are computed directly.
"""

from typing import Callable, Optional

from ..formatting import format_rate, format_whole
from .brackets import bracket_tax, round_cents
from .schemas import CapitalGainsPolicy, StateRule, TaxTables


def get_state_rule(state_code: str, tables: TaxTables) -> Optional[StateRule]:
    """Rule for a state code, or None when no state / unknown state."""
    if not state_code:
        return None
    return tables.states.get(state_code)


def state_name(state_code: str, tables: TaxTables) -> Optional[str]:
    rule = get_state_rule(state_code, tables)
    return rule.name if rule else None


def state_tax(taxable_income: float, state_code: str, filing_status: str, tables: TaxTables) -> float:
    """State tax on ordinary income.

    Zero for unknown states, states without an income tax, and
    capital-gains-only states (wages are untaxed there).
    """
    if taxable_income <= 0:
        return 0.0
    rule = get_state_rule(state_code, tables)
    if rule is None or rule.kind != "bracketed":
        return 0.0
    return bracket_tax(taxable_income, rule.brackets)


def state_standard_deduction(state_code: str, filing_status: str, tables: TaxTables) -> float:
    """State standard deduction (0 when the state has none)."""
    rule = get_state_rule(state_code, tables)
    if rule is None or rule.standard_deduction is None:
        return 0.0
    return rule.standard_deduction.for_status(filing_status)


# =============================================================================
# Capital gains policies
# =============================================================================


def _ordinary(policy: CapitalGainsPolicy, long_term: float) -> float:
    return long_term


def _exclusion(policy: CapitalGainsPolicy, long_term: float) -> float:
    # Gains above the cap get no exclusion
    eligible = long_term if policy.exclusion_cap is None else min(long_term, policy.exclusion_cap)
    return long_term - eligible * policy.exclude_percent / 100


def _exclusion_floor(policy: CapitalGainsPolicy, long_term: float) -> float:
    excluded = max(policy.exclusion_floor, long_term * policy.exclude_percent / 100)
    return max(0.0, long_term - excluded)


# Taxable share of long-term gains, per incremental policy kind
TAXABLE_LONG_TERM: dict[str, Callable[[CapitalGainsPolicy, float], float]] = {
    "ordinary": _ordinary,
    "exclusion": _exclusion,
    "exclusion_floor": _exclusion_floor,
}


def taxable_long_term_gains(state_code: str, long_term: float, tables: TaxTables) -> float:
    """Long-term gains the state taxes at ordinary rates after its carve-out."""
    rule = get_state_rule(state_code, tables)
    if rule is None or long_term <= 0:
        return 0.0
    policy = rule.capital_gains_policy
    handler = TAXABLE_LONG_TERM.get(policy.kind)
    if handler is None:
        return 0.0
    return handler(policy, long_term)


def state_capital_gains_tax(
    base_income: float,
    short_term: float,
    long_term: float,
    state_code: str,
    filing_status: str,
    tables: TaxTables,
) -> float:
    """State tax attributable to capital gains.

    Args:
        base_income: State taxable wages + business (after state deduction)
        short_term: Short-term gains (always taxed as ordinary income)
        long_term: Long-term gains (subject to the state's carve-out)
        state_code: Two-letter state code
        filing_status: 'single' or 'married'
        tables: Tax tables for the year

    Returns:
        Incremental state tax on the gains, rounded to the cent
    """
    rule = get_state_rule(state_code, tables)
    if rule is None:
        return 0.0
    if short_term + long_term <= 0:
        return 0.0

    policy = rule.capital_gains_policy
    if policy.kind == "none":
        return 0.0
    if policy.kind == "flat_threshold":
        return round_cents(max(0.0, long_term - policy.threshold) * policy.rate / 100)
    if rule.kind != "bracketed":
        return 0.0

    taxable_gains = short_term + taxable_long_term_gains(state_code, long_term, tables)
    with_gains = state_tax(base_income + taxable_gains, state_code, filing_status, tables)
    without_gains = state_tax(base_income, state_code, filing_status, tables)
    return round_cents(with_gains - without_gains)


def investment_surcharge(state_code: str, income: float, tables: TaxTables) -> float:
    """Surcharge on income above the state's threshold (MN: 1% over $1M).

    Not rounded; callers round the combined state total.
    """
    rule = get_state_rule(state_code, tables)
    if rule is None or rule.investment_surcharge is None:
        return 0.0
    surcharge = rule.investment_surcharge
    if income <= surcharge.threshold:
        return 0.0
    return (income - surcharge.threshold) * surcharge.rate / 100


# =============================================================================
# State disability insurance
# =============================================================================


def state_disability(wages: float, state_code: str, tables: TaxTables) -> float:
    """State disability insurance withheld from wages (capped percentage)."""
    if wages <= 0:
        return 0.0
    rule = get_state_rule(state_code, tables)
    if rule is None or rule.disability is None:
        return 0.0
    sdi = rule.disability
    taxable = min(wages, sdi.wage_base) if sdi.wage_base is not None else wages
    amount = round_cents(taxable * sdi.rate / 100)
    if sdi.max_withholding is not None and amount > sdi.max_withholding:
        amount = sdi.max_withholding
    return amount


def state_disability_name(state_code: str, tables: TaxTables) -> Optional[str]:
    rule = get_state_rule(state_code, tables)
    if rule is None or rule.disability is None:
        return None
    return rule.disability.name


def state_disability_helper(wages: float, state_code: str, tables: TaxTables) -> Optional[str]:
    if wages <= 0:
        return None
    rule = get_state_rule(state_code, tables)
    if rule is None or rule.disability is None:
        return None
    sdi = rule.disability
    taxable = min(wages, sdi.wage_base) if sdi.wage_base is not None else wages
    if sdi.max_withholding is not None:
        return f"{format_whole(taxable)} at {format_rate(sdi.rate)}% (max {format_whole(sdi.max_withholding)})"
    return f"{format_whole(taxable)} at {format_rate(sdi.rate)}%"

"""Federal income tax and long-term capital gains tax.

Short-term gains are ordinary income: callers add them to the income
passed to federal_tax(). Long-term gains get a flat 0/15/20% rate picked
by where ordinary income plus the gain lands.
"""

from .brackets import bracket_tax, round_cents
from .schemas import TaxTables

LONG_TERM_RATES = (0, 15, 20)


def federal_tax(taxable_income: float, filing_status: str, tables: TaxTables) -> float:
    """Federal ordinary income tax on taxable income (after deductions)."""
    return bracket_tax(taxable_income, tables.federal.brackets.for_status(filing_status))


def standard_deduction(filing_status: str, tables: TaxTables) -> float:
    """Federal standard deduction for the filing status."""
    return tables.federal.standard_deduction.for_status(filing_status)


def long_term_rate(taxable_income: float, filing_status: str, tables: TaxTables) -> int:
    """Long-term capital gains rate (percent) for income including the gain."""
    if taxable_income <= 0:
        return LONG_TERM_RATES[0]
    zero_max, fifteen_max = tables.federal.long_term_thresholds.for_status(filing_status)
    if taxable_income <= zero_max:
        return LONG_TERM_RATES[0]
    if taxable_income <= fifteen_max:
        return LONG_TERM_RATES[1]
    return LONG_TERM_RATES[2]


def federal_long_term_tax(
    ordinary_income: float,
    long_term_amount: float,
    filing_status: str,
    tables: TaxTables,
) -> float:
    """Federal tax on long-term gains only.

    The gain stacks on top of ordinary income to pick the rate, and that
    single rate applies to the whole gain (not bracketed).

    Args:
        ordinary_income: Federal taxable income before the gain
        long_term_amount: Long-term capital gains
        filing_status: 'single' or 'married'
        tables: Tax tables for the year

    Returns:
        Long-term capital gains tax, rounded to the cent
    """
    if long_term_amount <= 0:
        return 0.0
    rate = long_term_rate(ordinary_income + long_term_amount, filing_status, tables)
    return round_cents(long_term_amount * rate / 100)

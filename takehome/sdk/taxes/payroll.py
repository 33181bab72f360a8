"""Payroll taxes: FICA on W-2 wages and SECA on self-employment profit.

Social Security stops at the wage base; Medicare is uncapped; Additional
Medicare applies to earnings over a filing-status threshold. When a
person has both wages and SE profit, wages consume the wage base and the
Additional Medicare threshold first, and SECA only covers what is left.
Each component is rounded to the cent before the total is summed.
"""

from ..formatting import format_rate, format_whole
from ..schemas import PayrollBreakdown
from .brackets import round_cents
from .schemas import TaxTables


def _breakdown(social_security: float, medicare: float, additional_medicare: float) -> PayrollBreakdown:
    social_security = round_cents(social_security)
    medicare = round_cents(medicare)
    additional_medicare = round_cents(additional_medicare)
    return PayrollBreakdown(
        social_security=social_security,
        medicare=medicare,
        additional_medicare=additional_medicare,
        total=round_cents(social_security + medicare + additional_medicare),
    )


def calc_fica(wages: float, filing_status: str, tables: TaxTables) -> PayrollBreakdown:
    """Employee-side FICA on W-2 wages."""
    if wages <= 0:
        return PayrollBreakdown()

    ss = tables.payroll.social_security
    medicare = tables.payroll.medicare
    threshold = medicare.additional_threshold.for_status(filing_status)

    ss_taxable = min(wages, ss.wage_base)
    over_threshold = max(0.0, wages - threshold)
    return _breakdown(
        social_security=ss_taxable * ss.rate / 100,
        medicare=wages * medicare.rate / 100,
        additional_medicare=over_threshold * medicare.additional_rate / 100,
    )


def se_taxable_amount(business_income: float, tables: TaxTables) -> float:
    """Share of net profit subject to SE tax (92.35% in 2025)."""
    return business_income * tables.payroll.se_profit_factor


def _se_bases(business_income: float, wages: float, filing_status: str, tables: TaxTables) -> tuple:
    """(se_taxable, ss_room, ss_taxable, se_over_threshold) for SECA."""
    ss = tables.payroll.social_security
    threshold = tables.payroll.medicare.additional_threshold.for_status(filing_status)

    se_taxable = se_taxable_amount(business_income, tables)

    # Wages use up the wage base first
    ss_room = max(0.0, ss.wage_base - min(wages, ss.wage_base))
    ss_taxable = min(se_taxable, ss_room)

    # Only the SE share of combined earnings over the threshold
    total_over = max(0.0, wages + se_taxable - threshold)
    wages_over = max(0.0, wages - threshold)
    se_over = max(0.0, total_over - wages_over)

    return se_taxable, ss_room, ss_taxable, se_over


def calc_self_employment_tax(
    business_income: float,
    wages: float,
    filing_status: str,
    tables: TaxTables,
) -> PayrollBreakdown:
    """Self-employment tax (both halves) on business profit.

    Args:
        business_income: Yearly net business profit
        wages: Yearly W-2 wages already subject to FICA
        filing_status: 'single' or 'married'
        tables: Tax tables for the year

    Returns:
        PayrollBreakdown of Social Security, Medicare and Additional Medicare
    """
    if business_income <= 0:
        return PayrollBreakdown()

    medicare = tables.payroll.medicare
    se_taxable, _, ss_taxable, se_over = _se_bases(business_income, wages, filing_status, tables)
    return _breakdown(
        social_security=ss_taxable * tables.payroll.social_security.se_rate / 100,
        medicare=se_taxable * medicare.se_rate / 100,
        additional_medicare=se_over * medicare.additional_rate / 100,
    )


def fica_helper(wages: float, filing_status: str, tables: TaxTables) -> str:
    """'SS 6.2% on $X; Medicare 1.45% on $Y[; +0.9% on $Z]'."""
    if wages <= 0:
        return "—"
    ss = tables.payroll.social_security
    medicare = tables.payroll.medicare
    threshold = medicare.additional_threshold.for_status(filing_status)

    parts = [
        f"SS {ss.rate:.1f}% on {format_whole(min(wages, ss.wage_base))}",
        f"Medicare {medicare.rate:.2f}% on {format_whole(wages)}",
    ]
    if wages > threshold:
        parts.append(f"+{medicare.additional_rate:.1f}% on {format_whole(wages - threshold)}")
    return "; ".join(parts)


def self_employment_helper(
    business_income: float,
    wages: float,
    filing_status: str,
    tables: TaxTables,
) -> str:
    """'92.35% of profit = $X; SS 12.4% on $Y; Medicare 2.9% on $X[; +0.9% on $Z]'."""
    if business_income <= 0:
        return "—"
    ss = tables.payroll.social_security
    medicare = tables.payroll.medicare
    se_taxable, ss_room, ss_taxable, se_over = _se_bases(business_income, wages, filing_status, tables)

    factor = format_rate(tables.payroll.se_profit_factor * 100)
    parts = [f"{factor}% of profit = {format_whole(se_taxable)}"]
    if ss_room > 0:
        parts.append(f"SS {format_rate(ss.se_rate)}% on {format_whole(ss_taxable)}")
    parts.append(f"Medicare {format_rate(medicare.se_rate)}% on {format_whole(se_taxable)}")
    if se_over > 0:
        parts.append(f"+{format_rate(medicare.additional_rate)}% on {format_whole(se_over)}")
    return "; ".join(parts)

"""Helper text explaining each tax row of a TaxResult.

Bracket breakdowns reuse bracket_segments(), the routine the taxes are
computed with, so the explanation always matches the number next to it.
"""

from .formatting import format_rate, format_whole
from .schemas import TaxHelpers, TaxResult
from .taxes.brackets import amount_at_rates
from .taxes.local import city_tax_helper
from .taxes.payroll import fica_helper, self_employment_helper
from .taxes.schemas import TaxTables
from .taxes.state import get_state_rule, state_disability_helper

NO_HELPER = "—"


def _federal_helper(result: TaxResult, tables: TaxTables) -> str:
    deduction = result.standard_deduction_applied
    if result.federal_taxable_income > 0:
        brackets = tables.federal.brackets.for_status(result.filing_status)
        text = amount_at_rates(result.federal_taxable_income, brackets)
        if deduction > 0:
            text += f" (after {format_whole(deduction)} standard deduction)"
        return text
    if result.federal_ordinary_income > 0 and deduction > 0:
        return f"Fully offset by {format_whole(deduction)} standard deduction"
    return NO_HELPER


def _state_helper(result: TaxResult, tables: TaxTables) -> str:
    if not result.state_code:
        return "Select a state to see your state taxes"
    rule = get_state_rule(result.state_code, tables)
    if rule is None:
        return NO_HELPER

    if rule.kind == "bracketed":
        if result.state_taxable_income <= 0:
            return NO_HELPER
        text = amount_at_rates(result.state_taxable_income, rule.brackets)
        deduction = result.state_standard_deduction_applied
        if deduction > 0:
            text += f" (after {format_whole(deduction)} state standard deduction)"
        return text

    policy = rule.capital_gains_policy
    if policy.kind == "flat_threshold" and result.ltcg_amount > policy.threshold:
        return f"{format_whole(result.ltcg_amount - policy.threshold)} at {format_rate(policy.rate)}%"
    return NO_HELPER


def _capital_gains_helper(result: TaxResult) -> str:
    short_term = result.short_term_amount
    long_term = result.ltcg_amount
    long_term_text = f"{format_whole(long_term)} at {result.ltcg_rate_percent}%"
    if short_term > 0 and long_term > 0:
        return f"{format_whole(short_term)} in Federal, {long_term_text}"
    if long_term > 0:
        return long_term_text
    if short_term > 0:
        return f"{format_whole(short_term)} in Federal"
    return NO_HELPER


def build_helpers(result: TaxResult, tables: TaxTables) -> TaxHelpers:
    """Explain every tax row of a result ('—' where there is nothing to show)."""
    city = NO_HELPER
    if result.city_id and result.city > 0:
        city = city_tax_helper(
            result.city_id, result.federal_ordinary_income, result.filing_status, tables
        ) or NO_HELPER

    fica = NO_HELPER
    if result.wages_yearly > 0:
        fica = fica_helper(result.wages_yearly, result.filing_status, tables)

    self_employment = NO_HELPER
    if result.self_employment > 0:
        self_employment = self_employment_helper(
            result.business_income_yearly, result.wages_yearly, result.filing_status, tables
        )

    disability = NO_HELPER
    if result.state_disability > 0 and result.state_code:
        disability = state_disability_helper(result.wages_yearly, result.state_code, tables) or NO_HELPER

    return TaxHelpers(
        federal=_federal_helper(result, tables),
        state=_state_helper(result, tables),
        city=city,
        fica=fica,
        self_employment=self_employment,
        state_disability=disability,
        capital_gains=_capital_gains_helper(result),
    )

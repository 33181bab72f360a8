"""Take-home tax calculation: combines every jurisdiction into one result.

Income, capital gains and the purchase are independent inputs:
- Federal = ordinary income tax on wages + business + short-term gains.
  The capital gains row is the federal long-term gains tax only.
- State = tax on (wages + business - state deduction) plus the state's
  tax on gains, plus any investment surcharge.
- City taxes ordinary income (long-term gains excluded).
- FICA, SE tax and state disability never see capital gains.
- Sales tax depends only on the purchase.

Two extra views split the total: income_only (taxes as if there were no
gains and no purchase) and stocks_only (tax attributable to the gains,
found by differencing with and without them). Their totals plus sales
tax add back up to total_tax.
"""

import logging
from typing import Optional

from .periods import to_yearly
from .schemas import CalculatorInput, IncomeOnlyTaxes, StocksOnlyTaxes, TaxResult
from .taxes import load_tax_tables
from .taxes.brackets import round_cents
from .taxes.federal import federal_long_term_tax, federal_tax, long_term_rate, standard_deduction
from .taxes.local import city_in_state, city_tax
from .taxes.payroll import calc_fica, calc_self_employment_tax
from .taxes.sales import sales_tax, sales_tax_rate
from .taxes.schemas import TaxTables
from .taxes.state import (
    investment_surcharge,
    state_capital_gains_tax,
    state_disability,
    state_standard_deduction,
    state_tax,
)

logger = logging.getLogger(__name__)


def compute_taxes(inp: CalculatorInput, tables: Optional[TaxTables] = None) -> TaxResult:
    """Compute the full itemized tax breakdown for one input.

    Pure and total: the same input and tables always give the same result,
    and unknown codes or odd amounts degrade to zero tax rather than raising.

    Args:
        inp: Calculator input (already coerced by CalculatorInput)
        tables: Tax tables; loads the configured year when omitted

    Returns:
        TaxResult with itemized taxes and the income-only / stocks-only views
    """
    if tables is None:
        tables = load_tax_tables()

    status = inp.filing_status
    state_code = inp.state
    city_id = inp.city
    if city_id and not city_in_state(city_id, state_code, tables):
        logger.debug(f"Ignoring city '{city_id}': not in state '{state_code}'")
        city_id = ""

    # Step 1: Annualize income
    wages = to_yearly(inp.wages, inp.wages_period)
    business = to_yearly(inp.business_income, inp.business_period)

    # Step 2: Split gains by holding period
    stocks = inp.stocks_amount
    pct = inp.short_term_percent / 100
    short_term = stocks * pct
    long_term = stocks * (1 - pct)

    # Step 3: Federal ordinary income tax
    ordinary_income = wages + business + short_term
    federal_deduction = standard_deduction(status, tables) if inp.use_federal_deduction else 0.0
    federal_taxable = max(0.0, ordinary_income - federal_deduction)
    federal = federal_tax(federal_taxable, status, tables)

    # Step 4: State income tax + state tax on gains + surcharge
    wages_and_business = wages + business
    state_deduction = (
        state_standard_deduction(state_code, status, tables)
        if inp.use_state_deduction and state_code
        else 0.0
    )
    state_base = max(0.0, wages_and_business - state_deduction)
    state_on_income = state_tax(state_base, state_code, status, tables)
    state_on_gains = state_capital_gains_tax(state_base, short_term, long_term, state_code, status, tables)
    surcharge = investment_surcharge(state_code, wages_and_business + stocks, tables)
    state = round_cents(state_on_income + state_on_gains + surcharge)

    # Step 5: City tax on ordinary income
    city = round_cents(city_tax(ordinary_income, city_id, status, tables))

    # Step 6-7: Payroll taxes and state disability (wages/business only)
    fica = calc_fica(wages, status, tables)
    self_employment = calc_self_employment_tax(business, wages, status, tables)
    disability = round_cents(state_disability(wages, state_code, tables))

    # Step 8: Sales tax
    purchase = inp.purchase_amount
    sales = sales_tax(purchase, state_code, tables)

    # Step 9: Federal long-term capital gains tax
    capital_gains = federal_long_term_tax(federal_taxable, long_term, status, tables)
    ltcg_rate = long_term_rate(federal_taxable + long_term, status, tables)

    # Step 10: Totals
    income_taxes = federal + state + city + fica.total + self_employment.total + disability + capital_gains
    total_tax = income_taxes + sales
    total_amount = wages + business + stocks + purchase
    final_total = wages + business + stocks - income_taxes

    # Step 11: Income-only view (no gains, no purchase)
    federal_no_stocks = federal_tax(max(0.0, wages_and_business - federal_deduction), status, tables)
    state_no_stocks = round_cents(
        state_on_income + investment_surcharge(state_code, wages_and_business, tables)
    )
    city_no_stocks = round_cents(city_tax(wages_and_business, city_id, status, tables))
    income_only_total = (
        federal_no_stocks + state_no_stocks + city_no_stocks
        + fica.total + self_employment.total + disability
    )
    income_only = IncomeOnlyTaxes(
        federal=federal_no_stocks,
        state=state_no_stocks,
        city=city_no_stocks,
        fica=fica.total,
        self_employment=self_employment.total,
        state_disability=disability,
        total=round_cents(income_only_total),
    )

    # Step 12: Stocks-only view (incremental attribution)
    federal_short_term = round_cents(federal - federal_no_stocks)
    state_with_short = state_tax(state_base + short_term, state_code, status, tables)
    state_with_both = state_tax(state_base + short_term + long_term, state_code, status, tables)
    state_short_term = round_cents(state_with_short - state_on_income)
    state_long_term = round_cents(state_with_both - state_with_short)
    # Whatever the ordinary-rate split misses: carve-outs, surcharge, flat cap-gains taxes
    state_other = round_cents(state - state_no_stocks - state_short_term - state_long_term)
    city_short_term = round_cents(city - city_no_stocks)
    stocks_only_total = (
        federal_short_term + state_short_term + city_short_term
        + capital_gains + state_long_term + state_other
    )
    stocks_only = StocksOnlyTaxes(
        federal_short_term=federal_short_term,
        state_short_term=state_short_term,
        city_short_term=city_short_term,
        federal_long_term=capital_gains,
        state_long_term=state_long_term,
        state_other=state_other,
        total=round_cents(stocks_only_total),
    )

    return TaxResult(
        federal=federal,
        state=state,
        city=city,
        fica=fica.total,
        self_employment=self_employment.total,
        state_disability=disability,
        sales=sales,
        capital_gains=capital_gains,
        ltcg_amount=long_term,
        ltcg_rate_percent=ltcg_rate,
        total_tax=total_tax,
        total_amount=total_amount,
        final_total=final_total,
        purchase_total_with_tax=purchase + sales,
        wages_yearly=wages,
        business_income_yearly=business,
        federal_ordinary_income=ordinary_income,
        federal_taxable_income=federal_taxable,
        standard_deduction_applied=federal_deduction,
        state_standard_deduction_applied=state_deduction,
        state_taxable_income=state_base + short_term + long_term,
        filing_status=status,
        state_code=state_code,
        city_id=city_id,
        purchase_amount=purchase,
        sales_tax_rate_percent=sales_tax_rate(state_code, tables),
        short_term_amount=short_term,
        long_term_amount=long_term,
        fica_breakdown=fica,
        self_employment_breakdown=self_employment,
        income_only=income_only,
        stocks_only=stocks_only,
    )


def calculate(tables: Optional[TaxTables] = None, **fields) -> TaxResult:
    """Convenience wrapper: compute_taxes(CalculatorInput(**fields))."""
    return compute_taxes(CalculatorInput(**fields), tables)

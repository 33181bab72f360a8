"""taxes - Per-jurisdiction tax calculators.

Scope:
- Marginal bracket arithmetic shared by federal, state and city taxes
- Federal ordinary income tax and long-term capital gains tax
- FICA (wages) and SECA (self-employment profit)
- State income tax, state capital gains carve-outs, state disability
- City/local income tax and state sales tax

Constraints:
- Pure calculation - every function takes the TaxTables it reads
- No I/O outside rules loading; no exceptions for odd amounts or codes
- Year-specific tables loaded from tax_rules/{year}.yaml

Usage:
    from takehome.sdk.taxes import load_tax_tables, federal_tax

    tables = load_tax_tables("2025")
    tax = federal_tax(84250, "single", tables)
"""

# Tax rules loading and schemas
from .rules import (
    TaxRulesError,
    load_tax_tables,
    get_available_years,
    clear_tax_tables_cache,
)
from .schemas import TaxTables, Bracket, CapitalGainsPolicy, StateRule, CityRate

# Bracket arithmetic
from .brackets import (
    round_cents,
    bracket_segments,
    bracket_tax,
    amount_at_rates,
)

# Calculators
from .federal import (
    federal_tax,
    standard_deduction,
    long_term_rate,
    federal_long_term_tax,
)
from .payroll import (
    calc_fica,
    calc_self_employment_tax,
    fica_helper,
    self_employment_helper,
)
from .state import (
    state_tax,
    state_name,
    state_standard_deduction,
    state_capital_gains_tax,
    investment_surcharge,
    state_disability,
    state_disability_name,
    state_disability_helper,
)
from .local import (
    city_tax,
    city_tax_helper,
    city_name,
    city_in_state,
    cities_by_state,
    all_major_cities,
)
from .sales import sales_tax, sales_tax_rate

__all__ = [
    # Rules
    "TaxRulesError",
    "load_tax_tables",
    "get_available_years",
    "clear_tax_tables_cache",
    "TaxTables",
    "Bracket",
    "CapitalGainsPolicy",
    "StateRule",
    "CityRate",
    # Brackets
    "round_cents",
    "bracket_segments",
    "bracket_tax",
    "amount_at_rates",
    # Federal
    "federal_tax",
    "standard_deduction",
    "long_term_rate",
    "federal_long_term_tax",
    # Payroll
    "calc_fica",
    "calc_self_employment_tax",
    "fica_helper",
    "self_employment_helper",
    # State
    "state_tax",
    "state_name",
    "state_standard_deduction",
    "state_capital_gains_tax",
    "investment_surcharge",
    "state_disability",
    "state_disability_name",
    "state_disability_helper",
    # Local
    "city_tax",
    "city_tax_helper",
    "city_name",
    "city_in_state",
    "cities_by_state",
    "all_major_cities",
    # Sales
    "sales_tax",
    "sales_tax_rate",
]

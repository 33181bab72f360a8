"""Take Home SDK - Core functionality for take-home pay estimates."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    get_tax_year,
    get_tax_rules_dir,
    get_input_defaults,
    ConfigError,
    KNOWN_SETTINGS,
)

from .schemas import (
    CalculatorInput,
    TaxResult,
    IncomeOnlyTaxes,
    StocksOnlyTaxes,
    PayrollBreakdown,
    TaxHelpers,
    ComparisonRow,
)

from .taxes import (
    TaxRulesError,
    TaxTables,
    load_tax_tables,
    get_available_years,
    cities_by_state,
)

from .periods import (
    to_yearly,
    from_yearly,
    headline_period,
    periods_to_show,
)

from .calculator import compute_taxes, calculate
from .helpers import build_helpers
from .compare import compare_states, compare_cities

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "get_tax_year",
    "get_tax_rules_dir",
    "get_input_defaults",
    "ConfigError",
    "KNOWN_SETTINGS",
    # Schemas
    "CalculatorInput",
    "TaxResult",
    "IncomeOnlyTaxes",
    "StocksOnlyTaxes",
    "PayrollBreakdown",
    "TaxHelpers",
    "ComparisonRow",
    # Tax rules
    "TaxRulesError",
    "TaxTables",
    "load_tax_tables",
    "get_available_years",
    "cities_by_state",
    # Periods
    "to_yearly",
    "from_yearly",
    "headline_period",
    "periods_to_show",
    # Calculation
    "compute_taxes",
    "calculate",
    "build_helpers",
    "compare_states",
    "compare_cities",
]

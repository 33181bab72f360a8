"""Pydantic schemas for calculator input and results.

CalculatorInput is lenient: malformed values degrade to a
safe default instead of raising, so a calculation always completes.
Result models are plain frozen records rebuilt on every calculation.
"""

import logging
import math
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

FilingStatus = Literal["single", "married"]
WagePeriod = Literal["yearly", "weekly", "daily", "hourly"]
BusinessPeriod = Literal["yearly", "monthly", "daily", "hourly"]

WAGE_PERIODS = ("yearly", "weekly", "daily", "hourly")
BUSINESS_PERIODS = ("yearly", "monthly", "daily", "hourly")
FILING_STATUSES = ("single", "married")

DEFAULT_SHORT_TERM_PERCENT = 50.0

_TRUE_STRINGS = {"1", "true", "yes", "y", "on"}
_FALSE_STRINGS = {"0", "false", "no", "n", "off"}


def coerce_amount(value: Any) -> float:
    """Parse a money amount; unparsable, non-finite or negative -> 0."""
    if isinstance(value, str):
        value = value.replace(",", "").replace("$", "").strip()
    try:
        amount = float(value)
    except (TypeError, ValueError):
        if value not in (None, ""):
            logger.debug(f"Unparsable amount {value!r} treated as 0")
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        logger.debug(f"Out-of-range amount {value!r} treated as 0")
        return 0.0
    return amount


# =============================================================================
# Input
# =============================================================================


class CalculatorInput(BaseModel):
    """Everything one take-home calculation depends on."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    wages: float = Field(default=0.0, description="W-2 wages in wages_period units")
    wages_period: WagePeriod = "yearly"
    business_income: float = Field(default=0.0, description="Self-employment profit in business_period units")
    business_period: BusinessPeriod = "yearly"
    stocks_amount: float = Field(default=0.0, description="Realized capital gains for the year")
    short_term_percent: float = Field(
        default=DEFAULT_SHORT_TERM_PERCENT,
        description="Share of gains held one year or less, 0-100",
    )
    purchase_amount: float = Field(default=0.0, description="Hypothetical purchase subject to sales tax")
    state: str = Field(default="", description="Two-letter state code, empty for none")
    city: str = Field(default="", description="City id; ignored unless it belongs to state")
    filing_status: FilingStatus = "single"
    use_federal_deduction: bool = True
    use_state_deduction: bool = True

    @field_validator("wages", "business_income", "stocks_amount", "purchase_amount", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> float:
        return coerce_amount(value)

    @field_validator("short_term_percent", mode="before")
    @classmethod
    def _short_term_percent(cls, value: Any) -> float:
        try:
            pct = float(value)
        except (TypeError, ValueError):
            return DEFAULT_SHORT_TERM_PERCENT
        if not math.isfinite(pct):
            return DEFAULT_SHORT_TERM_PERCENT
        return max(0.0, min(100.0, pct))

    @field_validator("wages_period", mode="before")
    @classmethod
    def _wages_period(cls, value: Any) -> str:
        value = str(value or "").strip().lower()
        return value if value in WAGE_PERIODS else "yearly"

    @field_validator("business_period", mode="before")
    @classmethod
    def _business_period(cls, value: Any) -> str:
        value = str(value or "").strip().lower()
        return value if value in BUSINESS_PERIODS else "yearly"

    @field_validator("filing_status", mode="before")
    @classmethod
    def _filing_status(cls, value: Any) -> str:
        value = str(value or "").strip().lower()
        return value if value in FILING_STATUSES else "single"

    @field_validator("state", mode="before")
    @classmethod
    def _state(cls, value: Any) -> str:
        return str(value or "").strip().upper()

    @field_validator("city", mode="before")
    @classmethod
    def _city(cls, value: Any) -> str:
        return str(value or "").strip().lower()

    @field_validator("use_federal_deduction", "use_state_deduction", mode="before")
    @classmethod
    def _flag(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        text = str(value).strip().lower()
        if text in _FALSE_STRINGS:
            return False
        if text not in _TRUE_STRINGS:
            logger.debug(f"Unrecognized flag {value!r} treated as true")
        return True


# =============================================================================
# Results
# =============================================================================


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class PayrollBreakdown(_Result):
    """FICA or SECA components, each rounded to the cent before summing."""

    social_security: float = 0.0
    medicare: float = 0.0
    additional_medicare: float = 0.0
    total: float = 0.0


class IncomeOnlyTaxes(_Result):
    """Taxes as if there were no capital gains and no purchase."""

    federal: float
    state: float
    city: float
    fica: float
    self_employment: float
    state_disability: float
    total: float


class StocksOnlyTaxes(_Result):
    """Tax attributable to capital gains, by incremental differencing."""

    federal_short_term: float
    state_short_term: float
    city_short_term: float
    federal_long_term: float
    state_long_term: float
    state_other: float = Field(..., description="State residual: carve-outs, surcharges, cap-gains-only taxes")
    total: float


class TaxResult(_Result):
    """Itemized multi-jurisdiction tax breakdown for one CalculatorInput."""

    federal: float
    state: float
    city: float
    fica: float
    self_employment: float
    state_disability: float
    sales: float
    capital_gains: float = Field(..., description="Federal long-term capital gains tax")
    ltcg_amount: float
    ltcg_rate_percent: int
    total_tax: float
    total_amount: float = Field(..., description="Wages + business + stocks + purchase")
    final_total: float = Field(..., description="Gross income minus all taxes except sales tax")
    purchase_total_with_tax: float

    wages_yearly: float
    business_income_yearly: float
    federal_ordinary_income: float = Field(..., description="Wages + business + short-term gains")
    federal_taxable_income: float
    standard_deduction_applied: float
    state_standard_deduction_applied: float
    state_taxable_income: float = Field(..., description="State base + short-term + long-term gains")

    filing_status: FilingStatus
    state_code: str
    city_id: str
    purchase_amount: float
    sales_tax_rate_percent: Optional[float]
    short_term_amount: float
    long_term_amount: float

    fica_breakdown: PayrollBreakdown
    self_employment_breakdown: PayrollBreakdown
    income_only: IncomeOnlyTaxes
    stocks_only: StocksOnlyTaxes


class TaxHelpers(_Result):
    """Human-readable explanation per tax row ('—' when unavailable)."""

    federal: str
    state: str
    city: str
    fica: str
    self_employment: str
    state_disability: str
    capital_gains: str


class ComparisonRow(_Result):
    """Total tax for the same input placed in another state or city."""

    state_code: str
    state_name: str
    city_id: str = ""
    city_name: str = ""
    total_tax: float

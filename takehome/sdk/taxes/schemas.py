"""Pydantic schemas for tax rules validation.

These schemas validate the tax_rules/*.yaml files and provide typed access
to bracket tables, payroll constants, and per-state / per-city rules.
All rates are percentages (6.2 means 6.2%).
"""

import math
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


FilingStatus = Literal["single", "married"]


class Bracket(BaseModel):
    """Single marginal bracket: `rate` applies to income up to `max`."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max: float = Field(..., gt=0, description="Upper bound (.inf for the top bracket)")
    rate: float = Field(..., ge=0, le=100, description="Marginal rate as a percentage")


def _check_brackets(brackets: list[Bracket]) -> list[Bracket]:
    """Brackets must be contiguous from 0 and end unbounded."""
    if not brackets:
        raise ValueError("bracket table is empty")
    previous_max = 0.0
    for bracket in brackets:
        if bracket.max <= previous_max:
            raise ValueError(
                f"bracket bounds must be strictly increasing ({bracket.max} after {previous_max})"
            )
        previous_max = bracket.max
    if not math.isinf(brackets[-1].max):
        raise ValueError("last bracket must be unbounded (.inf)")
    return brackets


BracketTable = Annotated[list[Bracket], AfterValidator(_check_brackets)]


class _ByFilingStatus(BaseModel):
    """Base for tables keyed single/married."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    def for_status(self, filing_status: str):
        return self.married if filing_status == "married" else self.single


class FilingStatusAmounts(_ByFilingStatus):
    single: float = Field(..., ge=0)
    married: float = Field(..., ge=0)


class FederalBrackets(_ByFilingStatus):
    single: BracketTable
    married: BracketTable


class LongTermThresholds(_ByFilingStatus):
    """Upper bounds of the 0% and 15% long-term capital gains tiers."""
    single: tuple[float, float]
    married: tuple[float, float]


class FederalRules(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    standard_deduction: FilingStatusAmounts
    brackets: FederalBrackets
    long_term_thresholds: LongTermThresholds


class SocialSecurityRules(BaseModel):
    """Social Security tax rules."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, le=100, description="Employee rate")
    se_rate: float = Field(..., ge=0, le=100, description="Self-employment rate (both halves)")
    wage_base: float = Field(..., gt=0, description="SS wage base (max taxable)")


class MedicareRules(BaseModel):
    """Medicare and Additional Medicare tax rules."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, le=100)
    se_rate: float = Field(..., ge=0, le=100)
    additional_rate: float = Field(..., ge=0, le=100)
    additional_threshold: FilingStatusAmounts


class PayrollRules(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    social_security: SocialSecurityRules
    medicare: MedicareRules
    se_profit_factor: float = Field(..., gt=0, le=1, description="Share of net profit subject to SE tax")


class CapitalGainsPolicy(BaseModel):
    """State treatment of capital gains.

    - ordinary: gains taxed like wages
    - exclusion: exclude_percent of long-term gains excluded, optionally
      only on the first exclusion_cap dollars of gain
    - exclusion_floor: exclude the greater of exclusion_floor or
      exclude_percent of long-term gains
    - flat_threshold: flat rate on long-term gains above threshold
    - none: gains untaxed
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["ordinary", "exclusion", "exclusion_floor", "flat_threshold", "none"]
    exclude_percent: float = Field(default=0, ge=0, le=100)
    exclusion_cap: Optional[float] = Field(default=None, gt=0)
    exclusion_floor: float = Field(default=0, ge=0)
    threshold: float = Field(default=0, ge=0)
    rate: float = Field(default=0, ge=0, le=100)

    @model_validator(mode="after")
    def check_parameters(self) -> "CapitalGainsPolicy":
        if self.kind == "flat_threshold" and self.rate <= 0:
            raise ValueError("flat_threshold policy requires a rate")
        if self.kind in ("exclusion", "exclusion_floor") and self.exclude_percent <= 0:
            raise ValueError(f"{self.kind} policy requires exclude_percent")
        return self


ORDINARY_CAPITAL_GAINS = CapitalGainsPolicy(kind="ordinary")
UNTAXED_CAPITAL_GAINS = CapitalGainsPolicy(kind="none")


class InvestmentSurcharge(BaseModel):
    """Extra rate on wages + business + gains above a threshold (e.g. MN)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    threshold: float = Field(..., ge=0)
    rate: float = Field(..., gt=0, le=100)


class DisabilityRate(BaseModel):
    """State disability insurance withheld from wages."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    rate: float = Field(..., ge=0, le=100)
    wage_base: Optional[float] = Field(default=None, gt=0)
    max_withholding: Optional[float] = Field(default=None, ge=0)


class StateRule(BaseModel):
    """Income tax rule for one state (exactly one `kind` per state)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    kind: Literal["no_income_tax", "capital_gains_only", "bracketed"]
    brackets: Optional[BracketTable] = None
    capital_gains: Optional[CapitalGainsPolicy] = None
    investment_surcharge: Optional[InvestmentSurcharge] = None
    standard_deduction: Optional[FilingStatusAmounts] = None
    sales_tax_rate: Optional[float] = Field(default=None, ge=0, le=100)
    disability: Optional[DisabilityRate] = None

    @model_validator(mode="after")
    def check_kind(self) -> "StateRule":
        if self.kind == "bracketed" and not self.brackets:
            raise ValueError(f"{self.name}: bracketed state requires brackets")
        if self.kind != "bracketed" and self.brackets:
            raise ValueError(f"{self.name}: only bracketed states may define brackets")
        if self.kind == "capital_gains_only" and (
            self.capital_gains is None or self.capital_gains.kind != "flat_threshold"
        ):
            raise ValueError(f"{self.name}: capital_gains_only state requires a flat_threshold policy")
        return self

    @property
    def capital_gains_policy(self) -> CapitalGainsPolicy:
        """Effective policy: explicit, else ordinary for bracketed states."""
        if self.capital_gains is not None:
            return self.capital_gains
        if self.kind == "bracketed":
            return ORDINARY_CAPITAL_GAINS
        return UNTAXED_CAPITAL_GAINS


class CityBrackets(_ByFilingStatus):
    single: BracketTable
    married: Optional[BracketTable] = None

    def for_status(self, filing_status: str):
        if filing_status == "married" and self.married:
            return self.married
        return self.single


class CityRate(BaseModel):
    """Local income tax: either a flat rate or a bracket table."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    state: str
    rate: Optional[float] = Field(default=None, ge=0, le=100)
    brackets: Optional[CityBrackets] = None

    @model_validator(mode="after")
    def check_rate_or_brackets(self) -> "CityRate":
        if (self.rate is None) == (self.brackets is None):
            raise ValueError(f"{self.name}: city requires exactly one of rate or brackets")
        return self

    @property
    def has_local_tax(self) -> bool:
        return self.rate is None or self.rate > 0


class TaxTables(BaseModel):
    """Complete reference tables for a tax year."""
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    tax_year: int
    federal: FederalRules
    payroll: PayrollRules
    states: dict[str, StateRule]
    cities: dict[str, CityRate] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_city_states(self) -> "TaxTables":
        for city_id, city in self.cities.items():
            if city.state not in self.states:
                raise ValueError(f"city '{city_id}' references unknown state '{city.state}'")
        return self

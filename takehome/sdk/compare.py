"""Compare total tax for the same input across states and cities."""

from typing import Optional

from .calculator import compute_taxes
from .schemas import CalculatorInput, ComparisonRow
from .taxes import load_tax_tables
from .taxes.local import all_major_cities
from .taxes.schemas import TaxTables


def compare_states(inp: CalculatorInput, tables: Optional[TaxTables] = None) -> list[ComparisonRow]:
    """Total tax in every state (no city), highest first."""
    if tables is None:
        tables = load_tax_tables()

    rows = []
    for code, rule in tables.states.items():
        result = compute_taxes(inp.model_copy(update={"state": code, "city": ""}), tables)
        rows.append(ComparisonRow(state_code=code, state_name=rule.name, total_tax=result.total_tax))
    return sorted(rows, key=lambda r: r.total_tax, reverse=True)


def compare_cities(inp: CalculatorInput, tables: Optional[TaxTables] = None) -> list[ComparisonRow]:
    """Total tax in every city with a local income tax, highest first."""
    if tables is None:
        tables = load_tax_tables()

    rows = []
    for city in all_major_cities(tables):
        state_code = city["state"]
        result = compute_taxes(inp.model_copy(update={"state": state_code, "city": city["id"]}), tables)
        rows.append(ComparisonRow(
            state_code=state_code,
            state_name=tables.states[state_code].name,
            city_id=city["id"],
            city_name=city["name"],
            total_tax=result.total_tax,
        ))
    return sorted(rows, key=lambda r: r.total_tax, reverse=True)

"""Take Home MCP Server - FastMCP implementation for tax calculation tools."""

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from takehome.sdk import (
    CalculatorInput,
    build_helpers,
    cities_by_state,
    compare_states as sdk_compare_states,
    compute_taxes as sdk_compute_taxes,
    get_available_years,
    load_tax_tables,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("take-home")


# --- Tools ---

@mcp.tool()
async def compute_taxes(
    wages: float = Field(default=0, description="W-2 wages per wages_period"),
    wages_period: str = Field(default="yearly", description="yearly, weekly, daily (260/yr) or hourly (2080/yr)"),
    business_income: float = Field(default=0, description="Self-employment profit per business_period"),
    business_period: str = Field(default="yearly", description="yearly, monthly, daily or hourly"),
    stocks_amount: float = Field(default=0, description="Capital gains for the year"),
    short_term_percent: float = Field(default=50, description="Percent of gains that are short-term (0-100)"),
    purchase_amount: float = Field(default=0, description="Purchase amount for sales tax"),
    state: str = Field(default="", description="Two-letter state code (e.g., 'NY')"),
    city: str = Field(default="", description="City id (from list_cities)"),
    filing_status: str = Field(default="single", description="'single' or 'married'"),
    use_federal_deduction: bool = Field(default=True, description="Apply the federal standard deduction"),
    use_state_deduction: bool = Field(default=True, description="Apply the state standard deduction"),
    year: str | None = Field(default=None, description="Tax year of the rules (default: configured year)"),
) -> dict[str, Any]:
    """Calculate take-home pay with an itemized federal/state/city/payroll/sales tax breakdown."""
    try:
        tables = load_tax_tables(year)
        inp = CalculatorInput(
            wages=wages,
            wages_period=wages_period,
            business_income=business_income,
            business_period=business_period,
            stocks_amount=stocks_amount,
            short_term_percent=short_term_percent,
            purchase_amount=purchase_amount,
            state=state,
            city=city,
            filing_status=filing_status,
            use_federal_deduction=use_federal_deduction,
            use_state_deduction=use_state_deduction,
        )
        result = sdk_compute_taxes(inp, tables)
        return {
            "result": result.model_dump(),
            "helpers": build_helpers(result, tables).model_dump(),
        }

    except Exception as e:
        logger.error(f"Error computing taxes: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def compare_states(
    wages: float = Field(default=0, description="W-2 wages per wages_period"),
    wages_period: str = Field(default="yearly", description="yearly, weekly, daily (260/yr) or hourly (2080/yr)"),
    business_income: float = Field(default=0, description="Self-employment profit per business_period"),
    business_period: str = Field(default="yearly", description="yearly, monthly, daily or hourly"),
    stocks_amount: float = Field(default=0, description="Capital gains for the year"),
    short_term_percent: float = Field(default=50, description="Percent of gains that are short-term (0-100)"),
    purchase_amount: float = Field(default=0, description="Purchase amount for sales tax"),
    filing_status: str = Field(default="single", description="'single' or 'married'"),
    use_federal_deduction: bool = Field(default=True, description="Apply the federal standard deduction"),
    use_state_deduction: bool = Field(default=True, description="Apply the state standard deduction"),
    year: str | None = Field(default=None, description="Tax year of the rules (default: configured year)"),
    limit: int = Field(default=51, description="Maximum number of states to return"),
) -> dict[str, Any]:
    """Rank states by total tax for the same income, highest first."""
    try:
        tables = load_tax_tables(year)
        inp = CalculatorInput(
            wages=wages,
            wages_period=wages_period,
            business_income=business_income,
            business_period=business_period,
            stocks_amount=stocks_amount,
            short_term_percent=short_term_percent,
            purchase_amount=purchase_amount,
            filing_status=filing_status,
            use_federal_deduction=use_federal_deduction,
            use_state_deduction=use_state_deduction,
        )
        rows = sdk_compare_states(inp, tables)
        return {
            "states": [row.model_dump(include={"state_code", "state_name", "total_tax"}) for row in rows[:limit]],
            "count": min(limit, len(rows)),
        }

    except Exception as e:
        logger.error(f"Error comparing states: {e}")
        return {"error": str(e), "states": [], "count": 0}


@mcp.tool()
async def list_cities(
    state: str = Field(description="Two-letter state code"),
) -> dict[str, Any]:
    """List cities with a local income tax in a state."""
    try:
        cities = cities_by_state(state.strip().upper(), load_tax_tables())
        return {"cities": cities, "count": len(cities)}
    except Exception as e:
        logger.error(f"Error listing cities: {e}")
        return {"error": str(e), "cities": [], "count": 0}


# --- Resources ---

@mcp.resource("takehome://rules/years")
async def list_years_resource() -> str:
    """List tax years with rules available."""
    try:
        return json.dumps({"years": get_available_years()}, indent=2)
    except Exception as e:
        return json.dumps({"error": str(e)})


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()

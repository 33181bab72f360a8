"""Tests for the MCP server tools."""

import asyncio

import pytest

pytest.importorskip("mcp")

from takehome.mcp import server  # noqa: E402
from takehome.sdk import CalculatorInput, compare_states  # noqa: E402


def compare_args(**overrides):
    """Every compare_states tool argument, spelled out (tool defaults are Field objects)."""
    args = {
        "wages": 0,
        "wages_period": "yearly",
        "business_income": 0,
        "business_period": "yearly",
        "stocks_amount": 0,
        "short_term_percent": 50,
        "purchase_amount": 0,
        "filing_status": "single",
        "use_federal_deduction": True,
        "use_state_deduction": True,
        "year": None,
        "limit": 51,
    }
    args.update(overrides)
    return args


class TestCompareStatesTool:
    def test_hourly_wages_are_annualized(self, tables):
        payload = asyncio.run(server.compare_states(**compare_args(wages=50, wages_period="hourly")))
        expected = compare_states(CalculatorInput(wages=104000), tables)
        assert payload["count"] == len(tables.states)
        assert payload["states"][0]["total_tax"] == pytest.approx(expected[0].total_tax)

    def test_deduction_flags_are_honored(self, tables):
        payload = asyncio.run(server.compare_states(
            **compare_args(wages=100000, use_federal_deduction=False, use_state_deduction=False)
        ))
        inp = CalculatorInput(wages=100000, use_federal_deduction=False, use_state_deduction=False)
        expected = {row.state_code: row.total_tax for row in compare_states(inp, tables)}
        for row in payload["states"]:
            assert row["total_tax"] == pytest.approx(expected[row["state_code"]])

    def test_year_is_passed_through(self):
        payload = asyncio.run(server.compare_states(**compare_args(wages=100000, year="1999")))
        assert "not found for year 1999" in payload["error"]
        assert payload["states"] == []

    def test_limit(self):
        payload = asyncio.run(server.compare_states(**compare_args(wages=100000, limit=3)))
        assert payload["count"] == 3
        assert len(payload["states"]) == 3

"""Tests for city income taxes and sales tax."""

import pytest

from takehome.sdk.taxes.local import (
    all_major_cities,
    cities_by_state,
    city_in_state,
    city_name,
    city_tax,
    city_tax_helper,
)
from takehome.sdk.taxes.sales import sales_tax, sales_tax_rate


class TestCityTax:
    def test_nyc_brackets(self, tables):
        assert city_tax(100000, "nyc", "single", tables) == pytest.approx(3751.17)

    def test_flat_rate(self, tables):
        assert city_tax(100000, "philadelphia", "single", tables) == pytest.approx(3750.00)

    def test_married_brackets(self, tables):
        assert city_tax(300000, "portland", "married", tables) == pytest.approx(2500.00)
        assert city_tax(300000, "portland", "single", tables) == pytest.approx(5125.00)

    def test_zero_rate_city(self, tables):
        assert city_tax(100000, "san_francisco", "single", tables) == 0

    def test_unknown_or_missing_city(self, tables):
        assert city_tax(100000, "atlantis", "single", tables) == 0
        assert city_tax(100000, "", "single", tables) == 0

    def test_helper(self, tables):
        assert city_tax_helper("nyc", 100000, "single", tables) == (
            "$12,000 at 3.078%, $13,000 at 3.762%, $25,000 at 3.819%, $50,000 at 3.876%"
        )
        assert city_tax_helper("detroit", 50000, "single", tables) == "$50,000 at 2.4%"
        assert city_tax_helper("san_francisco", 50000, "single", tables) is None


class TestCityLookup:
    def test_city_in_state(self, tables):
        assert city_in_state("nyc", "NY", tables)
        assert not city_in_state("nyc", "NJ", tables)
        assert not city_in_state("atlantis", "NY", tables)

    def test_city_name(self, tables):
        assert city_name("nyc", tables) == "New York City"
        assert city_name("atlantis", tables) is None

    def test_cities_by_state_skips_untaxed(self, tables):
        ids = [c["id"] for c in cities_by_state("NY", tables)]
        assert "nyc" in ids
        assert "yonkers" not in ids
        assert cities_by_state("CA", tables) == []
        assert cities_by_state("", tables) == []

    def test_cities_sorted_by_name(self, tables):
        names = [c["name"] for c in cities_by_state("OH", tables)]
        assert names == sorted(names)
        assert len(names) == 4

    def test_all_major_cities_carry_state(self, tables):
        cities = all_major_cities(tables)
        assert {"id": "nyc", "name": "New York City", "state": "NY"} in cities
        assert all(c["id"] != "san_francisco" for c in cities)


class TestSalesTax:
    def test_rate_lookup(self, tables):
        assert sales_tax_rate("TN", tables) == 7
        assert sales_tax_rate("ZZ", tables) is None
        assert sales_tax_rate("", tables) is None

    def test_purchase(self, tables):
        assert sales_tax(1000, "TN", tables) == pytest.approx(70.00)

    def test_no_purchase_or_state(self, tables):
        assert sales_tax(0, "TN", tables) == 0
        assert sales_tax(1000, "", tables) == 0

    def test_custom_rate(self, make_tables):
        tables = make_tables(states={
            "ZZ": {"name": "Testland", "kind": "no_income_tax", "sales_tax_rate": 8},
        })
        assert sales_tax(1000, "ZZ", tables) == pytest.approx(80.00)

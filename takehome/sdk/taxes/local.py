"""City and local income taxes.

A city either charges a flat rate on income or has its own bracket
table, optionally split by filing status (falling back to single).
"""

from typing import Optional

from ..formatting import format_rate, format_whole
from .brackets import amount_at_rates, bracket_tax, round_cents
from .schemas import CityRate, TaxTables


def get_city(city_id: str, tables: TaxTables) -> Optional[CityRate]:
    if not city_id:
        return None
    return tables.cities.get(city_id)


def city_in_state(city_id: str, state_code: str, tables: TaxTables) -> bool:
    """True if the city exists and belongs to the state."""
    city = get_city(city_id, tables)
    return city is not None and city.state == state_code


def city_tax(taxable_income: float, city_id: str, filing_status: str, tables: TaxTables) -> float:
    """Local income tax; 0 for no city, unknown city, or no income."""
    if taxable_income <= 0:
        return 0.0
    city = get_city(city_id, tables)
    if city is None:
        return 0.0
    if city.rate is not None:
        if city.rate == 0:
            return 0.0
        return round_cents(taxable_income * city.rate / 100)
    return bracket_tax(taxable_income, city.brackets.for_status(filing_status))


def city_tax_helper(city_id: str, taxable_income: float, filing_status: str, tables: TaxTables) -> Optional[str]:
    """'$X at R%' for flat-rate cities, per-bracket slices otherwise."""
    if taxable_income <= 0:
        return None
    city = get_city(city_id, tables)
    if city is None:
        return None
    if city.rate is not None:
        if city.rate == 0:
            return None
        return f"{format_whole(taxable_income)} at {format_rate(city.rate)}%"
    return amount_at_rates(taxable_income, city.brackets.for_status(filing_status))


def city_name(city_id: str, tables: TaxTables) -> Optional[str]:
    city = get_city(city_id, tables)
    return city.name if city else None


def cities_by_state(state_code: str, tables: TaxTables) -> list[dict]:
    """Cities with a local income tax in a state, sorted by name."""
    if not state_code:
        return []
    cities = [
        {"id": city_id, "name": city.name}
        for city_id, city in tables.cities.items()
        if city.state == state_code and city.has_local_tax
    ]
    return sorted(cities, key=lambda c: c["name"])


def all_major_cities(tables: TaxTables) -> list[dict]:
    """Every city with a local income tax, sorted by name."""
    cities = [
        {"id": city_id, "name": city.name, "state": city.state}
        for city_id, city in tables.cities.items()
        if city.has_local_tax
    ]
    return sorted(cities, key=lambda c: c["name"])

"""Tax rules loading from tax_rules/<year>.yaml."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..config import get_tax_rules_dir, get_tax_year
from .schemas import TaxTables

logger = logging.getLogger(__name__)


class TaxRulesError(Exception):
    """Raised when a tax rules file is missing or invalid."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


def get_available_years(rules_dir: Optional[Path] = None) -> list[str]:
    """Get sorted list of available tax rule years (descending)."""
    rules_dir = Path(rules_dir) if rules_dir else get_tax_rules_dir()
    years = [p.stem for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


@lru_cache(maxsize=None)
def _load_tables(config_file: str) -> TaxTables:
    path = Path(config_file)
    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TaxRulesError(f"Invalid YAML in {path}: {e}", path)

    if not isinstance(raw, dict):
        raise TaxRulesError(f"Expected a mapping in {path}", path)

    try:
        tables = TaxTables.model_validate(raw)
    except ValidationError as e:
        raise TaxRulesError(f"Invalid tax rules in {path}:\n{e}", path)

    logger.debug(
        f"Loaded {tables.tax_year} tax rules from {path}: "
        f"{len(tables.states)} states, {len(tables.cities)} cities"
    )
    return tables


def load_tax_tables(
    year: Optional[Union[str, int]] = None,
    rules_dir: Optional[Path] = None,
) -> TaxTables:
    """Load and validate tax tables for a year.

    Tables are loaded once per file and shared afterwards; they are
    immutable, so callers can pass them around freely.

    Args:
        year: Tax year (defaults to the configured tax_year setting)
        rules_dir: Directory holding <year>.yaml (defaults to get_tax_rules_dir())

    Returns:
        Validated TaxTables

    Raises:
        TaxRulesError: If the file is missing, unparsable or fails validation
    """
    year = str(year) if year is not None else get_tax_year()
    rules_dir = Path(rules_dir) if rules_dir else get_tax_rules_dir()
    config_file = rules_dir / f"{year}.yaml"

    if not config_file.exists():
        available = ", ".join(get_available_years(rules_dir)) or "none"
        raise TaxRulesError(
            f"Tax rules file not found for year {year}: {config_file} (available: {available})",
            config_file,
        )

    return _load_tables(str(config_file.resolve()))


def clear_tax_tables_cache() -> None:
    """Forget loaded tables (e.g. after editing a rules file)."""
    _load_tables.cache_clear()

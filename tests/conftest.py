"""Shared fixtures: isolated settings and the packaged tax tables."""

import copy
from pathlib import Path

import pytest
import yaml

import takehome
from takehome.sdk.taxes import TaxTables, load_tax_tables

RULES_DIR = Path(takehome.__file__).parent / "tax_rules"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point settings.json at a temp dir so user settings never leak in."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TAKE_HOME_CONFIG_PATH", str(config_dir))
    monkeypatch.delenv("TAKE_HOME_TAX_RULES_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return config_dir


@pytest.fixture
def tables():
    """The 2025 tables shipped with the package."""
    return load_tax_tables("2025", rules_dir=RULES_DIR)


@pytest.fixture
def raw_rules():
    """A mutable copy of the 2025 rules as parsed from YAML."""
    with open(RULES_DIR / "2025.yaml", "r") as f:
        return copy.deepcopy(yaml.safe_load(f))


@pytest.fixture
def make_tables(raw_rules):
    """Build TaxTables from the 2025 rules with some states replaced or added."""
    def _make(states=None, cities=None):
        raw = copy.deepcopy(raw_rules)
        raw["states"].update(states or {})
        raw["cities"].update(cities or {})
        return TaxTables.model_validate(raw)
    return _make

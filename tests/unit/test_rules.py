"""Tests for loading and validating tax_rules/<year>.yaml."""

import pytest
import yaml

from takehome.sdk.config import get_tax_rules_dir
from takehome.sdk.taxes import TaxRulesError, get_available_years, load_tax_tables
from takehome.sdk.taxes.rules import clear_tax_tables_cache


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_tax_tables_cache()
    yield
    clear_tax_tables_cache()


def write_rules(rules_dir, raw, year="2099"):
    rules_dir.mkdir(parents=True, exist_ok=True)
    path = rules_dir / f"{year}.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(raw, f)
    return path


class TestPackagedRules:
    def test_loads_2025(self, tables):
        assert tables.tax_year == 2025
        assert len(tables.states) == 51
        assert "DC" in tables.states

    def test_available_years(self):
        assert "2025" in get_available_years(get_tax_rules_dir())

    def test_default_year_from_settings(self):
        assert load_tax_tables().tax_year == 2025

    def test_tables_are_cached(self):
        assert load_tax_tables("2025") is load_tax_tables("2025")

    def test_rules_dir_env_override(self, tmp_path, monkeypatch, raw_rules):
        raw_rules["tax_year"] = 2099
        write_rules(tmp_path / "rules", raw_rules)
        monkeypatch.setenv("TAKE_HOME_TAX_RULES_DIR", str(tmp_path / "rules"))
        assert load_tax_tables("2099").tax_year == 2099


class TestInvalidRules:
    def test_missing_year(self, tmp_path):
        with pytest.raises(TaxRulesError, match="not found for year 1999"):
            load_tax_tables("1999", rules_dir=get_tax_rules_dir())

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "2099.yaml").write_text("federal: [unclosed\n")
        with pytest.raises(TaxRulesError, match="Invalid YAML"):
            load_tax_tables("2099", rules_dir=tmp_path)

    def test_not_a_mapping(self, tmp_path):
        (tmp_path / "2099.yaml").write_text("- just\n- a list\n")
        with pytest.raises(TaxRulesError, match="Expected a mapping"):
            load_tax_tables("2099", rules_dir=tmp_path)

    def test_brackets_must_increase(self, tmp_path, raw_rules):
        raw_rules["states"]["IL"]["brackets"] = [
            {"max": 50000, "rate": 3},
            {"max": 40000, "rate": 4},
            {"max": float("inf"), "rate": 5},
        ]
        write_rules(tmp_path, raw_rules)
        with pytest.raises(TaxRulesError) as exc_info:
            load_tax_tables("2099", rules_dir=tmp_path)
        assert exc_info.value.path.name == "2099.yaml"

    def test_last_bracket_must_be_unbounded(self, tmp_path, raw_rules):
        raw_rules["states"]["IL"]["brackets"] = [{"max": 50000, "rate": 3}]
        write_rules(tmp_path, raw_rules)
        with pytest.raises(TaxRulesError):
            load_tax_tables("2099", rules_dir=tmp_path)

    def test_bracketed_state_needs_brackets(self, tmp_path, raw_rules):
        del raw_rules["states"]["IL"]["brackets"]
        write_rules(tmp_path, raw_rules)
        with pytest.raises(TaxRulesError):
            load_tax_tables("2099", rules_dir=tmp_path)

    def test_city_needs_one_of_rate_or_brackets(self, tmp_path, raw_rules):
        raw_rules["cities"]["detroit"]["brackets"] = raw_rules["cities"]["nyc"]["brackets"]
        write_rules(tmp_path, raw_rules)
        with pytest.raises(TaxRulesError):
            load_tax_tables("2099", rules_dir=tmp_path)

    def test_city_state_must_exist(self, tmp_path, raw_rules):
        raw_rules["cities"]["detroit"]["state"] = "ZZ"
        write_rules(tmp_path, raw_rules)
        with pytest.raises(TaxRulesError):
            load_tax_tables("2099", rules_dir=tmp_path)

    def test_flat_threshold_needs_rate(self, tmp_path, raw_rules):
        raw_rules["states"]["WA"]["capital_gains"] = {"kind": "flat_threshold", "threshold": 250000}
        write_rules(tmp_path, raw_rules)
        with pytest.raises(TaxRulesError):
            load_tax_tables("2099", rules_dir=tmp_path)

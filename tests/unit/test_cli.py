"""Tests for the take-home CLI."""

import json

import pytest
from click.testing import CliRunner

from takehome.cli.__main__ import cli
from takehome.sdk import set_setting


@pytest.fixture
def runner():
    return CliRunner()


def run_json(runner, *args):
    result = runner.invoke(cli, ["calc", "--format", "json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestCalc:
    def test_json_output(self, runner):
        data = run_json(runner, "--wages", "100000")
        assert data["result"]["federal"] == pytest.approx(13449.00)
        assert data["result"]["fica"] == pytest.approx(7650.00)
        assert data["input"]["wages"] == 100000
        assert data["helpers"]["state"] == "Select a state to see your state taxes"

    def test_text_output(self, runner):
        result = runner.invoke(cli, ["calc", "--wages", "100000", "--state", "ny", "--city", "nyc"])
        assert result.exit_code == 0, result.output
        assert "Total tax" in result.output
        assert "New York City, New York" in result.output

    def test_hourly_shows_periods(self, runner):
        result = runner.invoke(cli, ["calc", "--wages", "50", "--wages-period", "hourly"])
        assert result.exit_code == 0, result.output
        assert "Per period" in result.output
        assert "Hourly" in result.output

    def test_deduction_flags(self, runner):
        data = run_json(runner, "--wages", "100000", "--no-federal-deduction")
        assert data["result"]["standard_deduction_applied"] == 0

    def test_deduction_flag_overrides_stored_default(self, runner):
        result = runner.invoke(cli, ["settings", "default", "use_federal_deduction", "false"])
        assert result.exit_code == 0, result.output

        data = run_json(runner, "--wages", "100000")
        assert data["result"]["standard_deduction_applied"] == 0

        data = run_json(runner, "--wages", "100000", "--federal-deduction")
        assert data["result"]["standard_deduction_applied"] == 15750

    def test_state_deduction_flag_overrides_stored_default(self, runner):
        set_setting("defaults", {"state": "CA", "use_state_deduction": False})
        data = run_json(runner, "--wages", "100000", "--state-deduction")
        assert data["result"]["state_standard_deduction_applied"] == 5540
        data = run_json(runner, "--wages", "100000")
        assert data["result"]["state_standard_deduction_applied"] == 0

    def test_unknown_state(self, runner):
        result = runner.invoke(cli, ["calc", "--wages", "100000", "--state", "ZZ"])
        assert result.exit_code == 2
        assert "Unknown state" in result.output

    def test_missing_year(self, runner):
        result = runner.invoke(cli, ["calc", "--wages", "100000", "--year", "1999"])
        assert result.exit_code == 1
        assert "not found for year 1999" in result.output

    def test_settings_defaults_apply(self, runner):
        set_setting("defaults", {"state": "CA", "filing_status": "married"})
        data = run_json(runner, "--wages", "100000")
        assert data["result"]["state_code"] == "CA"
        assert data["result"]["filing_status"] == "married"

    def test_options_override_defaults(self, runner):
        set_setting("defaults", {"state": "CA"})
        data = run_json(runner, "--wages", "100000", "--state", "TX")
        assert data["result"]["state_code"] == "TX"


class TestCompare:
    def test_states_top(self, runner):
        result = runner.invoke(cli, ["compare", "states", "--wages", "100000", "--top", "5"])
        assert result.exit_code == 0, result.output
        assert "Texas" not in result.output

    def test_states_marks_selected(self, runner):
        result = runner.invoke(cli, ["compare", "states", "--wages", "100000", "--state", "CA"])
        assert result.exit_code == 0, result.output
        assert "California" in result.output
        assert "Same" in result.output

    def test_cities(self, runner):
        result = runner.invoke(cli, ["compare", "cities", "--wages", "100000"])
        assert result.exit_code == 0, result.output
        assert "New York City" in result.output


class TestCities:
    def test_lists_cities(self, runner):
        result = runner.invoke(cli, ["cities", "oh"])
        assert result.exit_code == 0, result.output
        assert "columbus" in result.output
        assert "Cleveland" in result.output

    def test_no_cities(self, runner):
        result = runner.invoke(cli, ["cities", "TX"])
        assert result.exit_code == 0
        assert "No cities with a local income tax in Texas." in result.output

    def test_unknown_state(self, runner):
        result = runner.invoke(cli, ["cities", "ZZ"])
        assert result.exit_code == 2


class TestSettings:
    def test_set_and_get(self, runner):
        result = runner.invoke(cli, ["settings", "set", "tax_year", "2025"])
        assert result.exit_code == 0, result.output
        result = runner.invoke(cli, ["settings", "get", "tax_year"])
        assert "tax_year: 2025" in result.output

    def test_invalid_year(self, runner):
        result = runner.invoke(cli, ["settings", "set", "tax_year", "25"])
        assert result.exit_code == 2

    def test_rules_dir_must_exist(self, runner, tmp_path):
        result = runner.invoke(cli, ["settings", "set", "tax_rules_dir", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "Not a directory" in result.output

    def test_default_is_normalized(self, runner):
        result = runner.invoke(cli, ["settings", "default", "state", "ny"])
        assert result.exit_code == 0, result.output
        assert "Set default state: NY" in result.output
        result = runner.invoke(cli, ["settings", "show"])
        assert "state: NY" in result.output

    def test_unset(self, runner):
        runner.invoke(cli, ["settings", "default", "city", "nyc"])
        result = runner.invoke(cli, ["settings", "unset", "defaults"])
        assert "Cleared defaults setting." in result.output
        result = runner.invoke(cli, ["settings", "unset", "defaults"])
        assert "defaults was not set." in result.output

    def test_corrupt_settings(self, runner, isolated_config):
        isolated_config.mkdir(parents=True)
        (isolated_config / "settings.json").write_text("{oops")
        result = runner.invoke(cli, ["settings", "show"])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

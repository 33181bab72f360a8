"""Tests for FICA and self-employment (SECA) taxes."""

import pytest

from takehome.sdk.taxes.payroll import (
    calc_fica,
    calc_self_employment_tax,
    fica_helper,
    se_taxable_amount,
    self_employment_helper,
)


class TestFica:
    def test_under_wage_base(self, tables):
        fica = calc_fica(100000, "single", tables)
        assert fica.social_security == pytest.approx(6200.00)
        assert fica.medicare == pytest.approx(1450.00)
        assert fica.additional_medicare == 0
        assert fica.total == pytest.approx(7650.00)

    def test_over_wage_base_and_threshold(self, tables):
        fica = calc_fica(250000, "single", tables)
        assert fica.social_security == pytest.approx(10918.20)
        assert fica.medicare == pytest.approx(3625.00)
        assert fica.additional_medicare == pytest.approx(450.00)
        assert fica.total == pytest.approx(14993.20)

    def test_married_threshold(self, tables):
        assert calc_fica(250000, "married", tables).additional_medicare == 0

    def test_no_wages(self, tables):
        assert calc_fica(0, "single", tables).total == 0

    def test_total_is_sum_of_rounded_components(self, tables):
        fica = calc_fica(123456.789, "single", tables)
        assert fica.total == pytest.approx(
            fica.social_security + fica.medicare + fica.additional_medicare, abs=0.001
        )


class TestSelfEmployment:
    def test_se_taxable_amount(self, tables):
        assert se_taxable_amount(300000, tables) == pytest.approx(277050)

    def test_business_only_over_wage_base(self, tables):
        se = calc_self_employment_tax(300000, 0, "single", tables)
        assert se.social_security == pytest.approx(21836.40)
        assert se.medicare == pytest.approx(8034.45)
        assert se.additional_medicare == pytest.approx(693.45)
        assert se.total == pytest.approx(30564.30)

    def test_wages_consume_wage_base_first(self, tables):
        se = calc_self_employment_tax(100000, 150000, "single", tables)
        # Only 26,100 of the wage base is left after 150k of wages
        assert se.social_security == pytest.approx(3236.40)
        assert se.medicare == pytest.approx(2678.15)
        # 150k + 92,350 is 42,350 over the threshold, all of it SE earnings
        assert se.additional_medicare == pytest.approx(381.15)

    def test_wages_over_threshold(self, tables):
        se = calc_self_employment_tax(100000, 250000, "single", tables)
        assert se.social_security == 0
        assert se.additional_medicare == pytest.approx(831.15)
        assert se.total == pytest.approx(3509.30)

    def test_no_profit(self, tables):
        assert calc_self_employment_tax(0, 50000, "single", tables).total == 0
        assert calc_self_employment_tax(-100, 0, "single", tables).total == 0


class TestHelpers:
    def test_fica_helper(self, tables):
        assert fica_helper(250000, "single", tables) == (
            "SS 6.2% on $176,100; Medicare 1.45% on $250,000; +0.9% on $50,000"
        )

    def test_fica_helper_without_additional(self, tables):
        assert fica_helper(100000, "single", tables) == "SS 6.2% on $100,000; Medicare 1.45% on $100,000"

    def test_self_employment_helper(self, tables):
        assert self_employment_helper(300000, 0, "single", tables) == (
            "92.35% of profit = $277,050; SS 12.4% on $176,100; "
            "Medicare 2.9% on $277,050; +0.9% on $77,050"
        )

    def test_helpers_empty_without_income(self, tables):
        assert fica_helper(0, "single", tables) == "—"
        assert self_employment_helper(0, 0, "single", tables) == "—"

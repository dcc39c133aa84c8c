"""
Unit tests for services/metrics (figures, ratios, estimates).
"""

import pytest

from acra_statements.services.metrics import (
    FinancialFigures,
    calculate_financial_ratios,
    calculate_ratio,
    extract_figures,
)
from acra_statements.services.metrics.estimates import (
    estimate_cost_of_sales,
    estimate_gross_profit,
    estimate_operating_profit,
)
from acra_statements.services.metrics.ratios import payables_days, quick_ratio, receivables_days


# calculate_ratio null-safety
@pytest.mark.parametrize(
    "numerator, denominator",
    [
        (None, 100),
        (100, None),
        (100, 0),
        ("100", 10),
        (100, "10"),
        (True, 10),
        (float("nan"), 10),
        (10**400, 3),
        (3, -(10**400)),
        (1e308, 1e-10),
        (-1e308, 1e-10),
    ],
)
def test_calculate_ratio_returns_none(numerator, denominator):
    assert calculate_ratio(numerator, denominator) is None


def test_calculate_ratio_rounds():
    assert calculate_ratio(1, 3) == 0.3333
    assert calculate_ratio(1, 3, decimal_places=2) == 0.33
    assert calculate_ratio(-50, 200) == -0.25


def test_quick_ratio_without_inventories():
    assert quick_ratio(1000, None, 500) == 2.0
    assert quick_ratio(None, 100, 500) is None


def test_days_ratios():
    assert receivables_days(100, 365) == 100.0
    assert payables_days(50, 730, days=360) == round(50 * 360 / 730, 4)


# Figures
def test_extract_figures(filing):
    fig = extract_figures(filing)

    assert fig.revenue == 2000000
    assert fig.net_profit == 249000
    assert fig.total_equity == 1282156
    assert fig.inventories == 100000
    assert fig.borrowings == 200000
    assert fig.operating_cash_flow == 250000
    assert fig.investment_properties is None
    assert fig.fair_value_financial_assets is None


def test_extract_figures_from_envelopes(balance_sheet, income_statement):
    fig = extract_figures([balance_sheet, income_statement])

    assert fig.total_assets == 1835156
    assert fig.finance_costs == 10000
    assert fig.operating_cash_flow is None


def test_extract_figures_from_garbage():
    assert extract_figures(None) == FinancialFigures()


# Grouped ratios
def test_calculate_financial_ratios(filing):
    ratios = calculate_financial_ratios(filing)

    assert set(ratios) == {"profitability", "liquidity", "solvency", "efficiency", "cashFlow", "estimated"}
    assert ratios["profitability"]["profitMargin"] == 0.1245
    assert ratios["profitability"]["returnOnAssets"] == round(249000 / 1835156, 4)
    assert ratios["profitability"]["effectiveTaxRate"] == 0.17
    assert ratios["liquidity"]["currentRatio"] == round(835156 / 353000, 4)
    assert ratios["liquidity"]["quickRatio"] == round(735156 / 353000, 4)
    assert ratios["solvency"]["debtToEquity"] == round(553000 / 1282156, 4)
    assert ratios["efficiency"]["receivablesDays"] == round(335156 * 365 / 2000000, 4)
    assert ratios["cashFlow"]["operatingCashFlowToSales"] == 0.125
    assert ratios["cashFlow"]["cashFlowToDebt"] == 1.25


def test_estimates_are_flagged(filing):
    estimated = calculate_financial_ratios(filing)["estimated"]

    for record in estimated.values():
        assert record["isEstimate"] is True
        assert record["method"]
    assert estimated["operatingProfit"]["value"] == 310000
    assert estimated["costOfSales"]["value"] == pytest.approx(1200000)
    assert estimated["grossMargin"]["value"] == 0.4
    assert estimated["interestCoverage"]["value"] == 31.0


def test_ratios_for_empty_document_are_none():
    ratios = calculate_financial_ratios({})

    for group, values in ratios.items():
        for name, value in values.items():
            if group == "estimated":
                assert value["value"] is None, name
            else:
                assert value is None, name


def test_zero_equity_gives_none(filing):
    filing["statementOfFinancialPosition"]["equity"]["Equity"] = 0

    ratios = calculate_financial_ratios(filing)

    assert ratios["profitability"]["returnOnEquity"] is None
    assert ratios["solvency"]["debtToEquity"] is None


# Estimates
def test_estimate_operating_profit_without_finance_costs():
    record = estimate_operating_profit(1000, None)

    assert record == {"value": 1000, "isEstimate": True, "method": "profitLossBeforeTaxation + financeCosts"}


def test_estimate_cost_of_sales_fraction():
    assert estimate_cost_of_sales(1000, fraction=0.5)["value"] == 500
    assert estimate_cost_of_sales(1000, fraction=0.5)["method"] == "revenue x 0.5"
    assert estimate_gross_profit(None)["value"] is None


def test_overflowing_ratio_inputs_give_none(filing):
    """Quotients beyond float range are not reported as inf."""
    filing["incomeStatement"]["Revenue"] = 1e308
    filing["statementOfFinancialPosition"]["Assets"] = 1e-300

    ratios = calculate_financial_ratios(filing)

    assert ratios["efficiency"]["assetTurnover"] is None
    assert ratios["estimated"]["costOfSales"]["value"] == pytest.approx(0.6e308)


def test_oversized_int_figures_are_ignored(filing):
    filing["incomeStatement"]["Revenue"] = 10**400

    figures = extract_figures(filing)
    ratios = calculate_financial_ratios(filing)

    assert figures.revenue is None
    assert ratios["profitability"]["profitMargin"] is None
    assert ratios["estimated"]["costOfSales"] == {
        "value": None,
        "isEstimate": True,
        "method": "revenue x 0.6",
    }


def test_estimate_overflow_is_reported_as_none():
    record = estimate_operating_profit(1.7e308, 1.7e308)

    assert record["value"] is None
    assert record["isEstimate"] is True


def test_ratios_for_malformed_envelope_never_raise():
    envelope = {"statementType": "currentNonCurrent", "assets": [1, 2], "liabilities": None, "equity": "x"}

    ratios = calculate_financial_ratios(envelope)

    assert ratios["solvency"]["debtRatio"] is None

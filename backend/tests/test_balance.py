"""
Unit tests for validation/balance.py
"""

import pytest

from acra_statements.validation.balance import (
    BALANCE_RULE_PATH,
    balance_error,
    check_accounting_equation,
    check_component_sums,
)
from acra_statements.validation.errors import ErrorCategory


def test_balanced_equation():
    check = check_accounting_equation(1835156, 553000, 1282156)

    assert check.balanced is True
    assert check.difference == 0
    assert check.tolerance == pytest.approx(1835.156)


def test_tolerance_uses_absolute_total_assets():
    """Negative totals (deficit positions) still get a positive tolerance."""
    check = check_accounting_equation(-100000, -150000, 50050)

    assert check.tolerance == pytest.approx(100)
    assert check.difference == pytest.approx(50)
    assert check.balanced is True


def test_equation_skipped_when_a_total_is_missing():
    assert check_accounting_equation(1000, None, 1000) is None
    assert check_accounting_equation("1000", 0, 1000) is None
    assert check_accounting_equation(True, 0, 1) is None


def test_balance_error_details():
    check = check_accounting_equation(1835156, 553000, 1200000)

    error = balance_error(check, ("totalAssets", "totalLiabilities", "totalEquity"))

    assert error.path == BALANCE_RULE_PATH
    assert error.category == ErrorCategory.BUSINESS_RULE
    assert "totalAssets (1,835,156.00)" in error.message
    assert error.details["liabilitiesPlusEquity"] == 1753000
    assert "82,156.00" in error.guidance


def test_component_sums_reconcile(balance_sheet):
    assert check_component_sums(balance_sheet) == []


def test_component_sums_report_discrepancy(balance_sheet):
    balance_sheet["liabilities"]["nonCurrentLiabilities"]["totalNonCurrentLiabilities"] = 250000

    discrepancies = check_component_sums(balance_sheet)

    paths = [d.path for d in discrepancies]
    assert "liabilities.nonCurrentLiabilities.totalNonCurrentLiabilities" in paths
    # the liabilities total no longer reconciles with its sub-totals either
    assert "liabilities.totalLiabilities" in paths
    first = discrepancies[paths.index("liabilities.nonCurrentLiabilities.totalNonCurrentLiabilities")]
    assert first.computed == 200000
    assert first.difference == 50000


def test_bare_totals_are_not_discrepancies():
    statement = {
        "statementType": "revenueNote",
        "consolidatedAndSeparate": "Separate",
        "totalRevenue": 500000,
    }

    assert check_component_sums(statement) == []


def test_income_statement_profit_rule(income_statement):
    income_statement["totalProfitLoss"] = 260000
    income_statement["profitLossAttributableTo"] = {"ownersOfCompany": 260000}

    discrepancies = check_component_sums(income_statement)

    assert len(discrepancies) == 1
    assert discrepancies[0].path == "totalProfitLoss"
    assert discrepancies[0].computed == 249000


def test_unknown_input_has_no_rules():
    assert check_component_sums(None) == []
    assert check_component_sums({"statementType": "somethingElse"}) == []

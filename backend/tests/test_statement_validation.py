"""
Unit tests for validation/validator.py (statement envelopes).
"""

import copy

import pytest

from acra_statements.schema.balance_sheet import CurrentNonCurrentBalanceSheet, OrderOfLiquidityBalanceSheet
from acra_statements.schema.envelope import STATEMENT_TYPES
from acra_statements.schema.income_statement import IncomeStatement
from acra_statements.validation import ErrorCategory, ValidationFailure, ValidationSuccess, validate_statement


# Scenario A / B: accounting equation
def test_balanced_balance_sheet_passes(balance_sheet):
    """Assets equal liabilities plus equity exactly."""
    result = validate_statement(balance_sheet)

    assert isinstance(result, ValidationSuccess)
    assert result.success is True
    assert isinstance(result.data, CurrentNonCurrentBalanceSheet)
    assert result.data.assets.total_assets == 1835156
    assert result.warnings == []


def test_unbalanced_balance_sheet_fails(balance_sheet):
    """Difference of 82,156 is far above the 0.1% tolerance (1,835.156)."""
    balance_sheet["equity"]["totalEquity"] = 1200000

    result = validate_statement(balance_sheet)

    assert isinstance(result, ValidationFailure)
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.path == "accountingEquation"
    assert "not balanced" in error.message
    assert error.category == ErrorCategory.BUSINESS_RULE
    assert error.details["difference"] == 82156
    assert error.details["tolerance"] == pytest.approx(1835.156)


def test_difference_within_tolerance_passes(balance_sheet):
    """A rounding difference below 0.1% of total assets is accepted."""
    balance_sheet["equity"]["totalEquity"] = 1282156 + 1000
    balance_sheet["equity"]["accumulatedProfitsLosses"] = 282156 + 1000

    result = validate_statement(balance_sheet)

    assert result.success is True


def test_tolerance_override(balance_sheet):
    """An explicit tolerance ratio replaces the configured one."""
    balance_sheet["equity"]["totalEquity"] = 1282156 + 1000

    assert validate_statement(balance_sheet).success is True
    assert validate_statement(balance_sheet, tolerance_ratio=0.0001).success is False


def test_zero_total_assets_is_accepted_with_warning():
    statement = {
        "statementType": "currentNonCurrent",
        "consolidatedAndSeparate": "Separate",
        "assets": {"totalAssets": 0},
        "liabilities": {"totalLiabilities": 0},
        "equity": {"shareCapital": 0, "accumulatedProfitsLosses": 0, "totalEquity": 0},
    }

    result = validate_statement(statement)

    assert result.success is True
    assert any("totalAssets is 0" in warning for warning in result.warnings)


def test_component_discrepancy_is_a_warning(balance_sheet):
    """Sub-totals that disagree with their line items never gate validation."""
    balance_sheet["assets"]["currentAssets"]["cashAndBankBalances"] = 300000

    result = validate_statement(balance_sheet)

    assert result.success is True
    assert len(result.warnings) == 1
    assert result.warnings[0].startswith("assets.currentAssets.totalCurrentAssets")


def test_liquidity_balance_sheet_keeps_additional_values(liquidity_balance_sheet):
    result = validate_statement(liquidity_balance_sheet)

    assert result.success is True
    assert isinstance(result.data, OrderOfLiquidityBalanceSheet)
    dumped = result.to_dict()["data"]
    assert dumped["assets"]["loansToCustomers"] == {"secured": 400000, "unsecured": 200000}
    assert dumped["liabilities"]["depositsFromCustomers"] == 1000000


# Scenario C: required fields
def test_income_statement_missing_profit_before_tax(income_statement):
    del income_statement["profitLossBeforeTaxation"]

    result = validate_statement(income_statement)

    assert isinstance(result, ValidationFailure)
    assert "profitLossBeforeTaxation" in result.paths
    error = next(e for e in result.errors if e.path == "profitLossBeforeTaxation")
    assert error.message == "Required"
    assert error.category == ErrorCategory.STRUCTURAL


def test_income_statement_passes(income_statement):
    result = validate_statement(income_statement)

    assert result.success is True
    assert isinstance(result.data, IncomeStatement)
    assert result.warnings == []


# Discriminator
def test_missing_statement_type(balance_sheet):
    del balance_sheet["statementType"]

    result = validate_statement(balance_sheet)

    assert result.success is False
    assert result.errors[0].path == "statementType"
    assert result.errors[0].message == "Required"
    assert result.errors[0].category == ErrorCategory.DISCRIMINATOR


def test_unknown_statement_type_lists_valid_options(balance_sheet):
    balance_sheet["statementType"] = "cashFlowStatement"

    result = validate_statement(balance_sheet)

    error = result.errors[0]
    assert error.path == "statementType"
    assert error.message.startswith("Invalid discriminator value")
    assert "received 'cashFlowStatement'" in error.message
    assert error.details["validOptions"] == list(STATEMENT_TYPES)


@pytest.mark.parametrize("candidate", [None, 42, "statement", [1, 2]])
def test_non_object_input_never_raises(candidate):
    result = validate_statement(candidate)

    assert result.success is False
    assert result.errors[0].path == "statementType"


def test_every_statement_type_has_a_model():
    """Each declared tag parses to its own variant."""
    from acra_statements.schema.envelope import STATEMENT_MODELS

    assert set(STATEMENT_MODELS) == set(STATEMENT_TYPES)
    assert len(STATEMENT_TYPES) == 6


# Structural errors
def test_invalid_enum_value(income_statement):
    income_statement["consolidatedAndSeparate"] = "Group"

    result = validate_statement(income_statement)

    error = next(e for e in result.errors if e.path == "consolidatedAndSeparate")
    assert error.message.startswith("Invalid enum value")
    assert error.details["validOptions"] == ["Consolidated", "Separate"]
    assert error.details["received"] == "Group"


def test_total_assets_as_text_is_rejected(balance_sheet):
    balance_sheet["assets"]["totalAssets"] = "1,835,156"

    result = validate_statement(balance_sheet)

    assert result.paths == ["assets.totalAssets"]
    assert result.errors[0].message == "Expected number, received string"


def test_line_item_as_text_is_rejected(balance_sheet):
    balance_sheet["assets"]["currentAssets"]["cashAndBankBalances"] = "400000"

    result = validate_statement(balance_sheet)

    assert result.success is False
    error = result.errors[0]
    assert error.path == "assets.currentAssets.cashAndBankBalances"
    assert error.message == "Expected number, received string"
    assert "plain number" in error.guidance


def test_missing_balance_sheet_section(balance_sheet):
    del balance_sheet["liabilities"]

    result = validate_statement(balance_sheet)

    assert result.paths == ["liabilities"]
    assert result.errors[0].message == "Required"


def test_invalid_period_date(income_statement):
    income_statement["periodDate"] = "31/12/2024"

    result = validate_statement(income_statement)

    error = result.errors[0]
    assert error.path == "periodDate"
    assert "YYYY-MM-DD" in error.guidance


def test_negative_amounts_are_allowed(income_statement):
    income_statement["profitLossBeforeTaxation"] = -120000
    income_statement["incomeTaxExpenseBenefit"] = 0
    income_statement["totalProfitLoss"] = -120000
    income_statement["profitLossAttributableTo"] = {"ownersOfCompany": -120000}

    assert validate_statement(income_statement).success is True


def test_failure_to_dict_shape(income_statement):
    del income_statement["revenue"]

    body = validate_statement(income_statement).to_dict()

    assert body["success"] is False
    assert body["errors"][0]["path"] == "revenue"
    assert body["errors"][0]["category"] == "structural"
    assert body["guidance"].startswith("Validation failed at 'revenue'")


# Note envelopes
NOTE_ENVELOPES = {
    "tradeAndOtherReceivablesNote": {
        "statementType": "tradeAndOtherReceivablesNote",
        "consolidatedAndSeparate": "Separate",
        "tradeReceivablesDueFromThirdParties": 300000,
        "nonTradeReceivables": 35156,
        "totalTradeAndOtherReceivables": 335156,
    },
    "tradeAndOtherPayablesNote": {
        "statementType": "tradeAndOtherPayablesNote",
        "consolidatedAndSeparate": "Separate",
        "tradePayablesDueToThirdParties": 353000,
        "totalTradeAndOtherPayables": 353000,
    },
    "revenueNote": {
        "statementType": "revenueNote",
        "consolidatedAndSeparate": "Consolidated",
        "revenueRecognisedAtPointInTimeGoods": 1500000,
        "revenueRecognisedOverTimeServices": 500000,
        "totalRevenue": 2000000,
    },
}

NOTE_TOTALS = {
    "tradeAndOtherReceivablesNote": "totalTradeAndOtherReceivables",
    "tradeAndOtherPayablesNote": "totalTradeAndOtherPayables",
    "revenueNote": "totalRevenue",
}


@pytest.mark.parametrize("statement_type", sorted(NOTE_ENVELOPES))
def test_note_envelopes_pass(statement_type):
    """Each note variant is selected by its statementType tag."""
    result = validate_statement(copy.deepcopy(NOTE_ENVELOPES[statement_type]))

    assert result.success is True
    assert result.data.statement_type == statement_type
    assert result.warnings == []


@pytest.mark.parametrize("statement_type, total", sorted(NOTE_TOTALS.items()))
def test_note_without_total_reports_its_path(statement_type, total):
    note = copy.deepcopy(NOTE_ENVELOPES[statement_type])
    del note[total]

    result = validate_statement(note)

    assert result.success is False
    assert result.paths == [total]
    assert result.errors[0].message == "Required"


def test_missing_share_capital_path(balance_sheet):
    del balance_sheet["equity"]["shareCapital"]

    result = validate_statement(balance_sheet)

    assert result.success is False
    assert "equity.shareCapital" in result.paths
    assert next(e for e in result.errors if e.path == "equity.shareCapital").message == "Required"


def test_liquidity_sheet_missing_total_liabilities_path(liquidity_balance_sheet):
    del liquidity_balance_sheet["liabilities"]["totalLiabilities"]

    result = validate_statement(liquidity_balance_sheet)

    assert result.success is False
    assert "liabilities.totalLiabilities" in result.paths


# Amounts outside float range
@pytest.mark.parametrize("amount", [10**400, -(10**400), float("inf"), float("nan")])
def test_out_of_range_total_assets_is_a_failure(balance_sheet, amount):
    balance_sheet["assets"]["totalAssets"] = amount

    result = validate_statement(balance_sheet)

    assert isinstance(result, ValidationFailure)
    assert result.paths == ["assets.totalAssets"]
    assert result.errors[0].message == "Number out of range"


def test_out_of_range_line_item_is_a_failure(income_statement):
    income_statement["profitLossAttributableTo"]["ownersOfCompany"] = 10**400

    result = validate_statement(income_statement)

    assert result.paths == ["profitLossAttributableTo.ownersOfCompany"]


def test_totals_too_large_to_compare_never_raise(balance_sheet):
    """Liabilities plus equity overflows a float; the equation is not evaluated."""
    balance_sheet["assets"]["totalAssets"] = 1.5e308
    balance_sheet["liabilities"]["totalLiabilities"] = 1e308
    balance_sheet["equity"]["totalEquity"] = 1e308

    result = validate_statement(balance_sheet)

    assert isinstance(result, (ValidationSuccess, ValidationFailure))
    assert "accountingEquation" not in getattr(result, "paths", [])

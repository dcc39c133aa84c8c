"""
Unit tests for validate_filing and the envelope -> filing lifting.
"""

import pytest

from acra_statements.schema.filing import FilingDocument
from acra_statements.schema.taxonomy import as_filing_document, merge_statements, to_filing_document
from acra_statements.validation import ErrorCategory, validate_filing, validate_statement


def test_valid_filing(filing):
    result = validate_filing(filing)

    assert result.success is True
    assert isinstance(result.data, FilingDocument)
    assert result.data.statementOfFinancialPosition.Assets == 1835156
    assert result.warnings == []


def test_unbalanced_filing(filing):
    filing["statementOfFinancialPosition"]["Liabilities"] = 600000

    result = validate_filing(filing)

    assert result.success is False
    assert result.errors[0].path == "accountingEquation"
    assert result.errors[0].category == ErrorCategory.BUSINESS_RULE
    assert "Assets (1,835,156.00)" in result.errors[0].message


def test_unknown_statement_element_is_reported(filing):
    filing["statementOfFinancialPosition"]["currentAssets"]["CashInHand"] = 10

    result = validate_filing(filing)

    assert result.success is False
    error = result.errors[0]
    assert error.path == "statementOfFinancialPosition.currentAssets.CashInHand"
    assert error.message == "Unrecognized key"


def test_invalid_unique_entity_number(filing):
    filing["filingInformation"]["UniqueEntityNumber"] = "ABC"

    result = validate_filing(filing)

    error = result.errors[0]
    assert error.path == "filingInformation.UniqueEntityNumber"
    assert error.message == "Invalid format"
    assert "Unique Entity Number" in error.guidance


def test_principal_activities_length(filing):
    filing["filingInformation"]["DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities"] = "Trading"

    result = validate_filing(filing)

    error = result.errors[0]
    assert error.path == "filingInformation.DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities"
    assert "at least 20" in error.message


def test_missing_sections_are_listed(filing):
    del filing["auditReport"]
    del filing["notes"]

    result = validate_filing(filing)

    assert set(result.paths) == {"auditReport", "notes"}
    assert "2 required field(s) missing" in result.guidance


def test_non_object_filing():
    result = validate_filing(["not", "a", "filing"])

    assert result.success is False
    assert result.paths == ["filingInformation"]


def test_zero_assets_warning(filing):
    position = filing["statementOfFinancialPosition"]
    position["Assets"] = 0
    position["Liabilities"] = 0
    position["equity"] = {"ShareCapital": 0, "AccumulatedProfitsLosses": 0, "Equity": 0}

    result = validate_filing(filing)

    assert result.success is True
    assert result.warnings == ["Assets is 0; the filing is accepted as a degenerate (zero-value) filing"]


# Lifting
def test_lift_balance_sheet(balance_sheet):
    document = to_filing_document(balance_sheet)

    position = document["statementOfFinancialPosition"]
    assert position["Assets"] == 1835156
    assert position["currentAssets"]["Inventories"] == 100000
    assert position["nonCurrentLiabilities"]["NoncurrentLoansAndBorrowings"] == 200000
    assert position["equity"]["Equity"] == 1282156
    assert document["filingInformation"] == {
        "NatureOfFinancialStatementsCompanyLevelOrConsolidated": "Company",
        "CurrentPeriodEndDate": "2024-12-31",
        "TypeOfStatementOfFinancialPosition": "Classified",
    }


def test_lift_parsed_model_matches_raw(balance_sheet):
    parsed = validate_statement(balance_sheet).data

    lifted = to_filing_document(parsed)

    assert lifted["statementOfFinancialPosition"]["Assets"] == 1835156
    assert lifted["statementOfFinancialPosition"]["currentAssets"]["CashAndBankBalances"] == 400000


def test_lift_liquidity_keeps_other_values(liquidity_balance_sheet):
    position = to_filing_document(liquidity_balance_sheet)["statementOfFinancialPosition"]

    assert position["otherAssets"]["loansToCustomers"] == {"secured": 400000, "unsecured": 200000}
    assert position["otherLiabilities"] == {"depositsFromCustomers": 1000000}
    assert position["Liabilities"] == 1000000


def test_merge_statements(balance_sheet, income_statement):
    document = merge_statements([balance_sheet, income_statement])

    assert document["statementOfFinancialPosition"]["Assets"] == 1835156
    assert document["incomeStatement"]["ProfitLoss"] == 249000
    assert document["incomeStatement"]["FinanceCosts"] == 10000
    assert document["incomeStatement"]["ProfitLossAttributableToOwnersOfCompany"] == 249000


def test_as_filing_document_copies(filing):
    document = as_filing_document(filing)

    document["statementOfFinancialPosition"]["Assets"] = 1
    assert filing["statementOfFinancialPosition"]["Assets"] == 1835156
    assert as_filing_document("nonsense") == {}


@pytest.mark.parametrize("amount", [10**400, float("nan")])
def test_out_of_range_filing_amount_is_a_failure(filing, amount):
    filing["statementOfFinancialPosition"]["Assets"] = amount

    result = validate_filing(filing)

    assert result.success is False
    assert result.paths == ["statementOfFinancialPosition.Assets"]
    assert result.errors[0].message == "Number out of range"

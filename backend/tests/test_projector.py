"""
Unit tests for services/projection (framework views and dispatch).
"""

import copy
import math

import pytest

from acra_statements.schema.filing import FilingDocument
from acra_statements.services.projection import list_frameworks, project, project_all, resolve_framework_id
from acra_statements.services.projection.analytical import business_scale
from acra_statements.services.projection.common import METADATA_KEY
from acra_statements.services.projection.compliance import compliance_metrics
from acra_statements.services.projection.frameworks import FRAMEWORK_IDS
from acra_statements.services.metrics import extract_figures


# Dispatch
def test_resolve_framework_id():
    assert resolve_framework_id("sfrs-full") == "sfrs-full"
    assert resolve_framework_id(" Full-ACRA ") == "sfrs-full"
    assert resolve_framework_id("simplified") == "sfrs-simplified"
    assert resolve_framework_id("compliance") == "compliance-focused"
    assert resolve_framework_id("no-such-framework") == "default"
    assert resolve_framework_id(None) == "default"


def test_list_frameworks():
    frameworks = list_frameworks()

    assert [f["id"] for f in frameworks] == list(FRAMEWORK_IDS)
    assert {"id", "label", "description", "aliases"} <= set(frameworks[0])


@pytest.mark.parametrize("framework_id", FRAMEWORK_IDS)
def test_every_framework_projects(filing, framework_id):
    view = project(filing, framework_id)

    metadata = view[METADATA_KEY]
    assert metadata["name"] != "Error Processing Framework"
    assert metadata["sections"] == [key for key in view if key != METADATA_KEY]


@pytest.mark.parametrize("framework_id", FRAMEWORK_IDS)
def test_projection_does_not_mutate_input(filing, framework_id):
    original = copy.deepcopy(filing)

    view = project(filing, framework_id)
    view.setdefault("statementOfFinancialPosition", {})["Assets"] = -1

    assert filing == original


@pytest.mark.parametrize("framework_id", FRAMEWORK_IDS)
def test_projection_is_repeatable(filing, framework_id):
    assert project(filing, framework_id) == project(filing, framework_id)


def test_unknown_framework_uses_default(filing):
    view = project(filing, "made-up")

    assert view[METADATA_KEY]["name"] == "Default ACRA View"
    assert view["incomeStatement"] == filing["incomeStatement"]


def test_parsed_model_input(filing):
    document = FilingDocument.model_validate(filing)

    view = project(document, "financial-statements")

    assert view["statementOfFinancialPosition"]["Assets"] == 1835156


def test_envelope_input(balance_sheet, income_statement):
    view = project([balance_sheet, income_statement], "analytical")

    assert view["financialSummary"]["totalAssets"] == 1835156
    assert view["financialSummary"]["netProfit"] == 249000


def test_invalid_input_gives_error_view():
    view = project("not a document", "analytical")

    metadata = view[METADATA_KEY]
    assert metadata["name"] == "Error Processing Framework"
    assert "analytical" in metadata["description"]
    assert metadata["error"]


def test_failing_view_returns_annotated_copy():
    """Compliance needs at least one of its three source sections."""
    document = {"incomeStatement": {"Revenue": 100}}

    view = project(document, "compliance-focused")

    assert view[METADATA_KEY]["name"] == "Error Processing Framework"
    assert view["incomeStatement"] == {"Revenue": 100}
    assert view[METADATA_KEY]["sections"] == ["incomeStatement"]
    assert METADATA_KEY not in document


def test_project_all(filing):
    views = project_all(filing, ["sfrs-full", "analytical"])

    assert set(views) == {"sfrs-full", "analytical"}
    assert views["analytical"][METADATA_KEY]["name"] == "Analytical Framework"


# Financial statements
def test_financial_statements_view(filing):
    view = project(filing, "financial-statements")

    assert set(view) == {
        "filingInformation",
        "statementOfFinancialPosition",
        "incomeStatement",
        "statementOfCashFlows",
        "notes",
        METADATA_KEY,
    }
    assert view[METADATA_KEY]["name"] == "Financial Statements"
    assert view["filingInformation"] == {
        "NameOfCompany": "Acme Components Pte. Ltd.",
        "UniqueEntityNumber": "201912345K",
        "CurrentPeriodStartDate": "2024-01-01",
        "CurrentPeriodEndDate": "2024-12-31",
        "DescriptionOfPresentationCurrency": "SGD",
        "LevelOfRoundingUsedInFinancialStatements": "Units",
    }


def test_financial_statements_view_includes_changes_in_equity(filing):
    filing["statementOfChangesInEquity"] = {"Equity": 1282156}

    view = project(filing, "financial-statements")

    assert view["statementOfChangesInEquity"] == {"Equity": 1282156}


# SFRS full / simplified
def test_sfrs_full_fills_missing_elements(filing):
    view = project(filing, "full-acra")

    assert view[METADATA_KEY]["standard"] == "SFRS Full"
    current_assets = view["statementOfFinancialPosition"]["currentAssets"]
    assert list(current_assets)[0] == "CashAndBankBalances"
    assert current_assets["CashAndBankBalances"] == 400000
    assert current_assets["DevelopmentProperties"] is None
    assert view["complianceStatements"]["auditReport"]["TypeOfAuditOpinionInIndependentAuditorsReport"] == "Unqualified"


def test_simplified_view(filing):
    view = project(filing, "sfrs-simplified")

    assert view[METADATA_KEY]["standard"] == "SFRS for Small Entities"
    assert view["statementOfFinancialPosition"]["currentAssets"] == {
        "CashAndBankBalances": 400000,
        "TradeAndOtherReceivablesCurrent": 335156,
        "Inventories": 100000,
        "CurrentAssets": 835156,
    }
    assert view["notes"]["revenue"] == {"Revenue": 2000000}


def test_simplified_view_missing_sections():
    view = project({"filingInformation": {"NameOfCompany": "X"}}, "sfrs-simplified")

    assert view["statementOfFinancialPosition"] is None
    assert view["incomeStatement"] is None
    assert view["notes"] is None


# Regulatory
def test_regulatory_order(filing):
    position = filing["statementOfFinancialPosition"]
    filing["statementOfFinancialPosition"] = dict(reversed(list(position.items())))

    view = project(filing, "regulatory-reporting")

    ordered = view["financialStatements"]["financialPosition"]
    assert list(ordered) == [
        "currentAssets",
        "nonCurrentAssets",
        "Assets",
        "currentLiabilities",
        "nonCurrentLiabilities",
        "Liabilities",
        "equity",
    ]
    assert view[METADATA_KEY]["regulatoryCompliant"] is True


# Compliance
def test_compliance_score_full_marks(filing):
    view = project(filing, "compliance-focused")

    metrics = view["complianceMetrics"]
    assert metrics["complianceScore"] == 10
    assert metrics["maxPoints"] == 10
    assert metrics["compliancePercentage"] == 100
    assert metrics["complianceLevel"] == "High"
    assert metrics["keyIssues"] == []
    assert view["auditInformation"]["auditAssessment"]["qualifiedOrUnqualified"] == "Unqualified"


def test_compliance_score_with_issues(filing):
    filing["auditReport"]["TypeOfAuditOpinionInIndependentAuditorsReport"] = "Qualified"
    filing["auditReport"]["WhetherThereIsAnyMaterialUncertaintyRelatingToGoingConcern"] = True

    metrics = compliance_metrics(filing)

    assert metrics["complianceScore"] == 5
    assert metrics["compliancePercentage"] == 50
    assert metrics["complianceLevel"] == "Low"
    assert metrics["keyIssues"] == [
        "Audit opinion is not unqualified",
        "Material uncertainty related to going concern",
    ]


def test_compliance_medium_level(filing):
    filing["directorsStatement"][
        "WhetherThereAreReasonableGroundsToBelieveThatCompanyWillBeAbleToPayItsDebtsAsAndWhenTheyFallDueAtDateOfStatement"
    ] = False

    metrics = compliance_metrics(filing)

    assert metrics["compliancePercentage"] == 80
    assert metrics["complianceLevel"] == "Medium"
    assert metrics["keyIssues"] == ["Solvency concerns noted in directors statement"]


# Analytical / business profile / industry
def test_analytical_view(filing):
    view = project(filing, "analytical")

    assert view["companyInfo"]["ReportingPeriod"] == "2024-01-01 to 2024-12-31"
    assert "estimated" not in view["keyRatios"]
    assert view["estimatedFigures"]["operatingProfit"]["isEstimate"] is True
    assert view["trendAnalysis"]["revenue"] == {"current": 2000000, "previousYear": None, "trend": "N/A"}
    assert view["complianceStatus"]["auditCompliance"]["auditOpinion"] == "Unqualified"


def test_business_profile(filing):
    view = project(filing, "business-profile")

    assert view["industry"] == {"tag": "retail", "label": "Retail and Trading"}
    assert view["scale"]["sizeCategory"] == "Small"
    assert view[METADATA_KEY]["industry"] == "retail"


def test_business_scale_uses_rounding_level(filing):
    filing["filingInformation"]["LevelOfRoundingUsedInFinancialStatements"] = "Thousands"
    filing["filingInformation"][
        "WhetherCompanyOrGroupIfConsolidatedAccountsArePreparedHasMoreThan50Employees"
    ] = True

    scale = business_scale(filing, extract_figures(filing))

    assert scale["criteria"] == {
        "revenueWithinLimit": False,
        "assetsWithinLimit": False,
        "employeesWithinLimit": False,
    }
    assert scale["sizeCategory"] == "Large"


def test_industry_specific_view(filing):
    view = project(filing, "industry-specific")

    assert view["industryClassification"]["tag"] == "retail"
    assert view[METADATA_KEY]["name"] == "Industry-Specific Framework"
    assert view[METADATA_KEY]["description"] == "Specialized view for Retail and Trading"
    assert "industryItems" in view and "industryMetrics" in view


def test_banking_view(filing):
    view = project(filing, "industry-banking")

    items = view["bankingSpecificItems"]
    assert items["assets"]["cashAndBalancesWithCentralBanks"] == 400000
    assert items["assets"]["investmentSecurities"] is None
    assert view["keyBankingMetrics"]["assetQuality"]["nonPerformingLoanRatio"] == "N/A"
    assert view["keyBankingMetrics"]["capitalAdequacy"]["equityToAssets"] == round(1282156 / 1835156, 4)


def test_banking_proxy_metrics_are_flagged_estimates(filing):
    """No interest or loan/deposit lines in simplified filings: both figures are proxies."""
    metrics = project(filing, "industry-banking")["keyBankingMetrics"]

    margin = metrics["earnings"]["netInterestMargin"]
    assert margin["isEstimate"] is True
    assert margin["value"] == round(2000000 / 1835156, 4)
    assert margin["method"] == "revenue / totalAssets"

    loan_to_deposit = metrics["liquidity"]["loanToDepositRatio"]
    assert loan_to_deposit["isEstimate"] is True
    assert loan_to_deposit["value"] == round(335156 / 353000, 4)

    assert isinstance(metrics["earnings"]["returnOnAssets"], float)


def test_insurance_view(filing):
    view = project(filing, "industry-insurance")

    assert view["insuranceSpecificItems"]["liabilities"]["insuranceContractLiabilities"] == "N/A"
    assert view["keyInsuranceMetrics"]["liquidity"]["liquidAssetsToTotalAssets"] == round(400000 / 1835156, 4)
    assert view[METADATA_KEY]["industry"] == "Insurance"


# Malformed input never raises
MALFORMED_ENVELOPES = [
    {"statementType": "currentNonCurrent", "assets": [1, 2], "liabilities": {}, "equity": {}},
    {"statementType": "currentNonCurrent", "assets": {"totalAssets": 1}, "liabilities": "none", "equity": 5},
    {"statementType": "orderOfLiquidity", "assets": [1, 2], "liabilities": [3], "equity": None},
    {"statementType": "incomeStatement", "profitLossAttributableTo": [249000]},
    {"statementType": ["currentNonCurrent"], "consolidatedAndSeparate": ["Separate"]},
    {"statementOfFinancialPosition": {"currentAssets": [1], "Assets": "many"}, "incomeStatement": 7},
]


@pytest.mark.parametrize("framework_id", FRAMEWORK_IDS)
@pytest.mark.parametrize("document", MALFORMED_ENVELOPES)
def test_malformed_sections_never_raise(document, framework_id):
    original = copy.deepcopy(document)

    view = project(document, framework_id)

    assert METADATA_KEY in view
    assert document == original


def test_list_assets_degrade_to_empty_sections():
    """A non-object assets section lifts as an empty one instead of failing the view."""
    document = {
        "statementType": "currentNonCurrent",
        "assets": [1, 2],
        "liabilities": {"totalLiabilities": 100},
        "equity": {"totalEquity": 50},
    }

    view = project(document, "analytical")

    assert view[METADATA_KEY]["name"] == "Analytical Framework"
    assert view["financialSummary"]["totalAssets"] is None
    assert view["financialSummary"]["totalLiabilities"] == 100


def test_error_view_does_not_relift_input(monkeypatch, balance_sheet):
    """The error view is a plain copy of the input, so a lifting failure cannot escape."""
    from acra_statements.services.projection import projector

    def broken_lift(candidate):
        raise AttributeError("lifting failed")

    monkeypatch.setattr(projector, "as_filing_document", broken_lift)

    view = project(balance_sheet, "analytical")

    assert view[METADATA_KEY]["name"] == "Error Processing Framework"
    assert view[METADATA_KEY]["error"] == "lifting failed"
    assert view["statementType"] == "currentNonCurrent"
    assert view["assets"]["totalAssets"] == 1835156
    assert METADATA_KEY not in balance_sheet


def test_error_view_for_envelope_list(monkeypatch, balance_sheet, income_statement):
    from acra_statements.services.projection import projector

    def broken_lift(candidate):
        raise ValueError("lifting failed")

    monkeypatch.setattr(projector, "as_filing_document", broken_lift)

    view = project([balance_sheet, income_statement], "sfrs-full")

    assert view[METADATA_KEY]["sections"] == ["statements"]
    assert [s["statementType"] for s in view["statements"]] == ["currentNonCurrent", "incomeStatement"]


@pytest.mark.parametrize("amount", [1e308, 10**400, float("inf")])
def test_huge_amounts_never_raise(filing, amount):
    filing["incomeStatement"]["Revenue"] = amount
    filing["statementOfFinancialPosition"]["Assets"] = 1e-300

    for framework_id in FRAMEWORK_IDS:
        view = project(filing, framework_id)
        assert METADATA_KEY in view

    ratios = project(filing, "analytical")["keyRatios"]
    assert all(value is None or math.isfinite(value) for group in ratios.values() for value in group.values())

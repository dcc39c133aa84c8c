"""
Unit tests for services/classification (industry classifier and keyword tables).
"""

import json

import pytest

from acra_statements.services.classification import (
    DEFAULT_KEYWORD_TABLE,
    IndustryKeywordTable,
    KeywordTableError,
    classify_industry,
    load_keyword_table,
)
from acra_statements.services.classification.industry import _label_contains, _normalize_label


def _with_activities(filing, description):
    filing["filingInformation"]["DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities"] = description
    return filing


def test_normalize_label():
    assert _normalize_label("  Retail Of Groceries ") == "retail of groceries"
    assert _normalize_label(None) == ""
    assert _normalize_label(123) == ""


def test_label_contains():
    assert _label_contains("Manufacturing of plastic parts", ["manufactur"]) is True
    assert _label_contains("Consulting services", ["manufactur", "retail"]) is False
    assert _label_contains(None, ["bank"]) is False


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Wholesale of electronic components and accessories", "retail"),
        ("Investment holding and fund management services", "financial-services"),
        ("Development and leasing of commercial real estate", "real-estate"),
        ("Manufacture of precision machined parts for aerospace", "manufacturing"),
        ("Provision of management consultancy services", "manufacturing"),
    ],
)
def test_keyword_classification(filing, description, expected):
    """Consultancy falls through to the shape pass: inventories with PP&E."""
    assert classify_industry(_with_activities(filing, description)) == expected


def test_priority_order(filing):
    """Financial services outrank real estate when both match."""
    description = "Property financing and real estate investment"

    assert classify_industry(_with_activities(filing, description)) == "financial-services"


def test_shape_fallbacks(filing):
    _with_activities(filing, "Provision of management consultancy services")
    position = filing["statementOfFinancialPosition"]

    position["nonCurrentAssets"]["InvestmentProperties"] = 5000000
    assert classify_industry(filing) == "real-estate"

    position["currentAssets"]["CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"] = 400000
    assert classify_industry(filing) == "financial-services"


def test_incidental_fair_value_assets_do_not_sway_shape(filing):
    """A fair-value balance under 5% of total assets is not an investment-holding signal."""
    _with_activities(filing, "Provision of management consultancy services")
    position = filing["statementOfFinancialPosition"]
    position["currentAssets"]["CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"] = 10

    assert classify_industry(filing) == "manufacturing"

    position["nonCurrentAssets"]["NoncurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"] = 91000
    assert classify_industry(filing) == "manufacturing"

    position["nonCurrentAssets"]["NoncurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"] = 92000
    assert classify_industry(filing) == "financial-services"


def test_fair_value_assets_count_when_total_assets_unknown():
    document = {
        "statementOfFinancialPosition": {
            "currentAssets": {"CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss": 10},
        },
    }

    assert classify_industry(document) == "financial-services"


def test_inventories_only_is_retail(filing):
    _with_activities(filing, "Provision of management consultancy services")
    del filing["statementOfFinancialPosition"]["nonCurrentAssets"]["PropertyPlantAndEquipment"]

    assert classify_industry(filing) == "retail"


def test_generic_when_nothing_matches():
    document = {
        "filingInformation": {
            "DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities": "Provision of consultancy services",
        },
        "statementOfFinancialPosition": {"Assets": 100},
    }

    assert classify_industry(document) == "generic"


@pytest.mark.parametrize("candidate", [None, 42, "text", {}, []])
def test_garbage_is_generic(candidate):
    assert classify_industry(candidate) == "generic"


def test_classify_envelope(liquidity_balance_sheet):
    """Envelopes carry no principal activities; the shape decides."""
    assert classify_industry(liquidity_balance_sheet) == "generic"


def test_injected_keyword_table(filing):
    table = IndustryKeywordTable.model_validate({"retail": [], "manufacturing": ["  ELECTRONIC "]})

    assert table.manufacturing == ("electronic",)
    assert classify_industry(filing, keyword_table=table) == "manufacturing"


def test_default_table_is_read_only():
    with pytest.raises(Exception):
        DEFAULT_KEYWORD_TABLE.retail = ("shop",)


def test_load_keyword_table(tmp_path):
    path = tmp_path / "keywords.json"
    path.write_text(json.dumps({"financial-services": ["Bank"], "real-estate": ["property"]}), encoding="utf-8")

    table = load_keyword_table(path)

    assert table.financial_services == ("bank",)
    assert table.manufacturing == ()


def test_load_keyword_table_errors(tmp_path):
    with pytest.raises(KeywordTableError):
        load_keyword_table(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"mining": ["ore"]}), encoding="utf-8")
    with pytest.raises(KeywordTableError):
        load_keyword_table(bad)

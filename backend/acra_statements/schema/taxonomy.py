"""
taxonomy.py — Envelope field names to ACRA taxonomy element names.

Purpose:
- Lift a StatementEnvelope (camelCase wire shape) into the partial filing
  document shape (taxonomy element names) read by the framework views.
- Merge several lifted envelopes (balance sheet + income statement + notes)
  into one document.

The element tables are declared once here and nowhere else.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import BaseModel

from acra_statements.core.logging import get_logger
from acra_statements.schema.envelope import BALANCE_SHEET_TYPES, STATEMENT_TYPES, statement_to_dict
from acra_statements.utils.tree import deep_copy, deep_merge

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# Element tables: envelope key -> taxonomy element
# -----------------------------------------------------------------------------

CURRENT_ASSETS_ELEMENTS: Dict[str, str] = {
    "cashAndBankBalances": "CashAndBankBalances",
    "tradeAndOtherReceivables": "TradeAndOtherReceivablesCurrent",
    "leaseReceivables": "CurrentFinanceLeaseReceivables",
    "financialAssetsDerivatives": "CurrentDerivativeFinancialAssets",
    "financialAssetsFairValueThroughProfitOrLoss": "CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss",
    "otherFinancialAssets": "OtherCurrentFinancialAssets",
    "inventoriesDevelopmentProperties": "DevelopmentProperties",
    "inventoriesOthers": "Inventories",
    "otherNonFinancialAssets": "OtherCurrentNonfinancialAssets",
    "nonCurrentAssetsHeldForSale": (
        "NoncurrentAssetsOrDisposalGroupsClassifiedAsHeldForSaleOrAsHeldForDistributionToOwners"
    ),
    "totalCurrentAssets": "CurrentAssets",
}

NON_CURRENT_ASSETS_ELEMENTS: Dict[str, str] = {
    "tradeAndOtherReceivables": "TradeAndOtherReceivablesNoncurrent",
    "leaseReceivables": "NoncurrentFinanceLeaseReceivables",
    "financialAssetsDerivatives": "NoncurrentDerivativeFinancialAssets",
    "financialAssetsFairValueThroughProfitOrLoss": "NoncurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss",
    "otherFinancialAssets": "OtherNoncurrentFinancialAssets",
    "propertyPlantAndEquipment": "PropertyPlantAndEquipment",
    "investmentProperties": "InvestmentProperties",
    "goodwill": "Goodwill",
    "intangibleAssets": "IntangibleAssetsOtherThanGoodwill",
    "investmentsInSubsidiariesJointVenturesAndAssociates": "InvestmentsInSubsidiariesAssociatesOrJointVentures",
    "deferredTaxAssets": "DeferredTaxAssets",
    "otherNonFinancialAssets": "OtherNoncurrentNonfinancialAssets",
    "totalNonCurrentAssets": "NoncurrentAssets",
}

CURRENT_LIABILITIES_ELEMENTS: Dict[str, str] = {
    "tradeAndOtherPayables": "TradeAndOtherPayablesCurrent",
    "loansAndBorrowings": "CurrentLoansAndBorrowings",
    "financialLiabilitiesDerivativesAndFairValue": "CurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss",
    "leaseliabilities": "CurrentFinanceLeaseLiabilities",
    "otherFinancialLiabilities": "OtherCurrentFinancialLiabilities",
    "incomeTaxLiabilities": "CurrentIncomeTaxLiabilities",
    "provisions": "CurrentProvisions",
    "otherNonFinancialLiabilities": "OtherCurrentNonfinancialLiabilities",
    "liabilitiesInDisposalGroups": "LiabilitiesClassifiedAsHeldForSale",
    "totalCurrentLiabilities": "CurrentLiabilities",
}

NON_CURRENT_LIABILITIES_ELEMENTS: Dict[str, str] = {
    "tradeAndOtherPayables": "TradeAndOtherPayablesNoncurrent",
    "loansAndBorrowings": "NoncurrentLoansAndBorrowings",
    "financialLiabilitiesDerivativesAndFairValue": (
        "NoncurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss"
    ),
    "leaseliabilities": "NoncurrentFinanceLeaseLiabilities",
    "otherFinancialLiabilities": "OtherNoncurrentFinancialLiabilities",
    "deferredTaxLiabilities": "DeferredTaxLiabilities",
    "provisions": "NoncurrentProvisions",
    "otherNonFinancialLiabilities": "OtherNoncurrentNonfinancialLiabilities",
    "totalNonCurrentLiabilities": "NoncurrentLiabilities",
}

EQUITY_ELEMENTS: Dict[str, str] = {
    "shareCapital": "ShareCapital",
    "treasuryShares": "TreasuryShares",
    "accumulatedProfitsLosses": "AccumulatedProfitsLosses",
    "otherReservesAttributableToOwnersOfCompany": "ReservesOtherThanAccumulatedProfitsLosses",
    "nonControllingInterests": "NoncontrollingInterests",
    "totalEquity": "Equity",
}

INCOME_STATEMENT_ELEMENTS: Dict[str, str] = {
    "revenue": "Revenue",
    "otherIncome": "OtherIncome",
    "employeeBenefitsExpense": "EmployeeBenefitsExpense",
    "depreciationExpense": "DepreciationExpense",
    "amortisationExpense": "AmortisationExpense",
    "repairsAndMaintenanceExpense": "RepairsAndMaintenanceExpense",
    "salesAndMarketingExpense": "SalesAndMarketingExpense",
    "otherExpenses": "OtherExpensesByNature",
    "otherGainsLosses": "OtherGainsLosses",
    "financeNetCosts": "FinanceCosts",
    "shareOfProfitLossOfAssociatesAndJointVentures": (
        "ShareOfProfitLossOfAssociatesAndJointVenturesAccountedForUsingEquityMethod"
    ),
    "profitLossBeforeTaxation": "ProfitLossBeforeTaxation",
    "incomeTaxExpenseBenefit": "TaxExpenseBenefitContinuingOperations",
    "profitLossFromDiscontinuedOperations": "ProfitLossFromDiscontinuedOperations",
    "totalProfitLoss": "ProfitLoss",
}

PROFIT_ATTRIBUTION_ELEMENTS: Dict[str, str] = {
    "ownersOfCompany": "ProfitLossAttributableToOwnersOfCompany",
    "nonControllingInterests": "ProfitLossAttributableToNoncontrollingInterests",
}

RECEIVABLES_NOTE_ELEMENTS: Dict[str, str] = {
    "tradeReceivablesDueFromThirdParties": "TradeAndOtherReceivablesDueFromThirdParties",
    "tradeReceivablesDueFromRelatedParties": "TradeAndOtherReceivablesDueFromRelatedParties",
    "contractAssets": "UnbilledReceivables",
    "nonTradeReceivables": "OtherReceivables",
    "totalTradeAndOtherReceivables": "TradeAndOtherReceivables",
}

PAYABLES_NOTE_ELEMENTS: Dict[str, str] = {
    "tradePayablesDueToThirdParties": "TradeAndOtherPayablesDueToThirdParties",
    "tradePayablesDueToRelatedParties": "TradeAndOtherPayablesDueToRelatedParties",
    "contractLiabilities": "DeferredIncome",
    "nonTradePayables": "OtherPayables",
    "totalTradeAndOtherPayables": "TradeAndOtherPayables",
}

REVENUE_NOTE_ELEMENTS: Dict[str, str] = {
    "revenueRecognisedAtPointInTimeProperties": "RevenueFromPropertyTransferredAtPointInTime",
    "revenueRecognisedAtPointInTimeGoods": "RevenueFromGoodsTransferredAtPointInTime",
    "revenueRecognisedAtPointInTimeServices": "RevenueFromServicesTransferredAtPointInTime",
    "revenueRecognisedOverTimeProperties": "RevenueFromPropertyTransferredOverTime",
    "revenueRecognisedOverTimeConstructionContracts": "RevenueFromConstructionContractsOverTime",
    "revenueRecognisedOverTimeServices": "RevenueFromServicesTransferredOverTime",
    "revenueOthers": "OtherRevenue",
    "totalRevenue": "Revenue",
}

# Note envelope tag -> (notes section, element table)
NOTE_SECTIONS: Dict[str, tuple] = {
    "tradeAndOtherReceivablesNote": ("tradeAndOtherReceivables", RECEIVABLES_NOTE_ELEMENTS),
    "tradeAndOtherPayablesNote": ("tradeAndOtherPayables", PAYABLES_NOTE_ELEMENTS),
    "revenueNote": ("revenue", REVENUE_NOTE_ELEMENTS),
}

NATURE_OF_STATEMENTS = {
    "Consolidated": "Consolidated",
    "Separate": "Company",
}

# Every envelope tag must be liftable
_LIFTABLE = set(BALANCE_SHEET_TYPES) | {"incomeStatement"} | set(NOTE_SECTIONS)
if _LIFTABLE != set(STATEMENT_TYPES):
    raise RuntimeError(f"taxonomy lifting does not cover: {sorted(set(STATEMENT_TYPES) - _LIFTABLE)}")


# -----------------------------------------------------------------------------
# Lifting
# -----------------------------------------------------------------------------

def _rename(section: Any, elements: Mapping[str, str], keep_unknown: bool = False) -> Dict[str, Any]:
    """
    Rename envelope keys to taxonomy elements.

    Args:
        section: Envelope sub-section (dict or None)
        elements: Envelope key -> element table
        keep_unknown: Keep keys with no table entry under their own name

    Returns:
        New dict holding only the keys present in section
    """
    if not isinstance(section, Mapping):
        return {}
    renamed: Dict[str, Any] = {}
    for key, value in section.items():
        if key in elements:
            renamed[elements[key]] = value
        elif keep_unknown:
            renamed[key] = value
    return renamed


def _group(value: Any) -> Mapping[str, Any]:
    """A sub-tree that is not an object counts as empty."""
    return value if isinstance(value, Mapping) else {}


def _lift_classified_position(data: Mapping[str, Any]) -> Dict[str, Any]:
    assets = _group(data.get("assets"))
    liabilities = _group(data.get("liabilities"))
    return {
        "currentAssets": _rename(assets.get("currentAssets"), CURRENT_ASSETS_ELEMENTS),
        "nonCurrentAssets": _rename(assets.get("nonCurrentAssets"), NON_CURRENT_ASSETS_ELEMENTS),
        "Assets": assets.get("totalAssets"),
        "currentLiabilities": _rename(liabilities.get("currentLiabilities"), CURRENT_LIABILITIES_ELEMENTS),
        "nonCurrentLiabilities": _rename(
            liabilities.get("nonCurrentLiabilities"), NON_CURRENT_LIABILITIES_ELEMENTS
        ),
        "Liabilities": liabilities.get("totalLiabilities"),
        "equity": _rename(data.get("equity"), EQUITY_ELEMENTS),
    }


def _lift_liquidity_position(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Liquidity-ordered sheets carry open maps. Known sub-section names are
    renamed through the classified tables; other values are kept as-is under
    otherAssets / otherLiabilities.
    """
    assets = _group(data.get("assets"))
    liabilities = _group(data.get("liabilities"))
    position: Dict[str, Any] = {
        "Assets": assets.get("totalAssets"),
        "Liabilities": liabilities.get("totalLiabilities"),
        "equity": _rename(data.get("equity"), EQUITY_ELEMENTS),
    }

    sub_tables = {
        "currentAssets": CURRENT_ASSETS_ELEMENTS,
        "nonCurrentAssets": NON_CURRENT_ASSETS_ELEMENTS,
        "currentLiabilities": CURRENT_LIABILITIES_ELEMENTS,
        "nonCurrentLiabilities": NON_CURRENT_LIABILITIES_ELEMENTS,
    }
    for group, totals_key, other_key in (
        (assets, "totalAssets", "otherAssets"),
        (liabilities, "totalLiabilities", "otherLiabilities"),
    ):
        others: Dict[str, Any] = {}
        for key, value in group.items():
            if key == totals_key:
                continue
            if key in sub_tables and isinstance(value, Mapping):
                position[key] = _rename(value, sub_tables[key], keep_unknown=True)
            else:
                others[key] = value
        if others:
            position[other_key] = others
    return position


def _lift_income_statement(data: Mapping[str, Any]) -> Dict[str, Any]:
    lifted = _rename(data, INCOME_STATEMENT_ELEMENTS)
    lifted.update(_rename(data.get("profitLossAttributableTo"), PROFIT_ATTRIBUTION_ELEMENTS))
    return lifted


def _filing_information(data: Mapping[str, Any]) -> Dict[str, Any]:
    info: Dict[str, Any] = {}
    consolidation = data.get("consolidatedAndSeparate")
    nature = NATURE_OF_STATEMENTS.get(consolidation) if isinstance(consolidation, str) else None
    if nature:
        info["NatureOfFinancialStatementsCompanyLevelOrConsolidated"] = nature
    if data.get("periodDate"):
        info["CurrentPeriodEndDate"] = data["periodDate"]
    if data.get("statementType") in BALANCE_SHEET_TYPES:
        info["TypeOfStatementOfFinancialPosition"] = (
            "Classified" if data["statementType"] == "currentNonCurrent" else "Liquidity-based"
        )
    return info


def to_filing_document(envelope: Any) -> Dict[str, Any]:
    """
    Lift one statement envelope into the partial filing document shape.

    Args:
        envelope: Parsed envelope model or its camelCase dict form

    Returns:
        New dict with the sections this envelope populates, e.g.
        {"filingInformation": {...}, "statementOfFinancialPosition": {...}}.
        Unknown statement types yield only what filing information can be read.
    """
    data = statement_to_dict(envelope) if isinstance(envelope, BaseModel) else envelope
    if not isinstance(data, Mapping):
        return {}

    statement_type = data.get("statementType")
    if not isinstance(statement_type, str):
        statement_type = None
    document: Dict[str, Any] = {}
    info = _filing_information(data)
    if info:
        document["filingInformation"] = info

    if statement_type == "currentNonCurrent":
        document["statementOfFinancialPosition"] = _lift_classified_position(data)
    elif statement_type == "orderOfLiquidity":
        document["statementOfFinancialPosition"] = _lift_liquidity_position(data)
    elif statement_type == "incomeStatement":
        document["incomeStatement"] = _lift_income_statement(data)
    elif statement_type in NOTE_SECTIONS:
        section, elements = NOTE_SECTIONS[statement_type]
        document["notes"] = {section: _rename(data, elements)}
    else:
        logger.debug(f"No taxonomy lifting for statementType={statement_type!r}")

    return document


def merge_statements(envelopes: Iterable[Any], base: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Lift several envelopes and merge them into one filing document.

    Later envelopes win on conflicting elements; None never overwrites.
    """
    document: Dict[str, Any] = dict(base or {})
    for envelope in envelopes:
        document = deep_merge(document, to_filing_document(envelope))
    return document


def is_envelope(candidate: Any) -> bool:
    """True when candidate looks like a statement envelope rather than a filing document."""
    if isinstance(candidate, BaseModel):
        return "statement_type" in type(candidate).model_fields
    return isinstance(candidate, Mapping) and "statementType" in candidate


def as_filing_document(candidate: Any) -> Dict[str, Any]:
    """
    Coerce any supported input into a filing document dict.

    Accepts a FilingDocument model, a statement envelope (model or dict), a
    list of envelopes, or a filing document dict. Anything else yields {}.
    The result never aliases the input.
    """
    if isinstance(candidate, BaseModel):
        if is_envelope(candidate):
            return to_filing_document(candidate)
        return candidate.model_dump(mode="json")
    if isinstance(candidate, (list, tuple)):
        return merge_statements(candidate)
    if isinstance(candidate, Mapping):
        if is_envelope(candidate):
            return deep_copy(to_filing_document(candidate))
        return deep_copy(dict(candidate))
    return {}

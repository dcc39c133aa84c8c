"""
statements.py — Statement-oriented framework views.

Views:
- sfrs_full_view: every section, null-filled templates for missing elements
- financial_statements_view: the primary statements present plus minimal
  filing information
- simplified_view: key lines for small entities
- regulatory_view: fixed presentation order for ACRA submission
- default_view: the document as-is
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from acra_statements.core.normalized_order import (
    AUDIT_REPORT_ORDER,
    CASH_FLOWS_ORDER,
    CHANGES_IN_EQUITY_ORDER,
    CURRENT_ASSETS_ORDER,
    CURRENT_LIABILITIES_ORDER,
    DIRECTORS_STATEMENT_ORDER,
    EQUITY_ORDER,
    FILING_INFORMATION_ORDER,
    FINANCIAL_POSITION_SECTION_ORDER,
    INCOME_STATEMENT_ORDER,
    MINIMAL_FILING_INFORMATION_ORDER,
    NON_CURRENT_ASSETS_ORDER,
    NON_CURRENT_LIABILITIES_ORDER,
    NOTES_ORDER,
    SIMPLIFIED_FILING_INFORMATION_ORDER,
    SIMPLIFIED_INCOME_STATEMENT_ORDER,
)
from acra_statements.services.projection.common import add_metadata, section
from acra_statements.utils.tree import fill_template, get_in, pick

FINANCIAL_POSITION_TEMPLATE: Dict[str, Any] = {
    "currentAssets": CURRENT_ASSETS_ORDER,
    "nonCurrentAssets": NON_CURRENT_ASSETS_ORDER,
    "Assets": None,
    "currentLiabilities": CURRENT_LIABILITIES_ORDER,
    "nonCurrentLiabilities": NON_CURRENT_LIABILITIES_ORDER,
    "Liabilities": None,
    "equity": EQUITY_ORDER,
}

PRIMARY_STATEMENTS = (
    "statementOfFinancialPosition",
    "incomeStatement",
    "statementOfCashFlows",
    "statementOfChangesInEquity",
    "notes",
)

# Key lines kept by the simplified view, per financial position section
SIMPLIFIED_POSITION_LINES: Dict[str, Any] = {
    "currentAssets": ["CashAndBankBalances", "TradeAndOtherReceivablesCurrent", "Inventories", "CurrentAssets"],
    "nonCurrentAssets": ["PropertyPlantAndEquipment", "NoncurrentAssets"],
    "Assets": None,
    "currentLiabilities": ["TradeAndOtherPayablesCurrent", "CurrentLoansAndBorrowings", "CurrentLiabilities"],
    "nonCurrentLiabilities": ["NoncurrentLoansAndBorrowings", "NoncurrentLiabilities"],
    "Liabilities": None,
    "equity": ["ShareCapital", "AccumulatedProfitsLosses", "Equity"],
}

NOTE_TOTALS = {
    "tradeAndOtherReceivables": "TradeAndOtherReceivables",
    "tradeAndOtherPayables": "TradeAndOtherPayables",
    "revenue": "Revenue",
}


# -----------------------------------------------------------------------------
# SFRS Full
# -----------------------------------------------------------------------------

def sfrs_full_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    notes = document.get("notes")
    view = {
        "filingInformation": fill_template(FILING_INFORMATION_ORDER, document.get("filingInformation")),
        "statementOfFinancialPosition": fill_template(
            FINANCIAL_POSITION_TEMPLATE, document.get("statementOfFinancialPosition")
        ),
        "incomeStatement": fill_template(INCOME_STATEMENT_ORDER, document.get("incomeStatement")),
        "statementOfCashFlows": fill_template(CASH_FLOWS_ORDER, document.get("statementOfCashFlows")),
        "statementOfChangesInEquity": fill_template(
            CHANGES_IN_EQUITY_ORDER, document.get("statementOfChangesInEquity")
        ),
        "notes": fill_template(NOTES_ORDER, notes),
        "complianceStatements": {
            "directorsStatement": fill_template(DIRECTORS_STATEMENT_ORDER, document.get("directorsStatement")),
            "auditReport": fill_template(AUDIT_REPORT_ORDER, document.get("auditReport")),
        },
    }
    return add_metadata(
        view,
        "SFRS Full XBRL Framework",
        "Complete representation with all disclosures according to Singapore Financial Reporting Standards",
        standard="SFRS Full",
    )


# -----------------------------------------------------------------------------
# Financial Statements
# -----------------------------------------------------------------------------

def financial_statements_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    view: Dict[str, Any] = {}
    info = section(document, "filingInformation")
    if info is not None:
        view["filingInformation"] = pick(info, MINIMAL_FILING_INFORMATION_ORDER)
    for key in PRIMARY_STATEMENTS:
        if document.get(key) is not None:
            view[key] = document[key]
    return add_metadata(
        view,
        "Financial Statements",
        "Statement of Financial Position, Income Statement, Cash Flows, and Changes in Equity",
    )


# -----------------------------------------------------------------------------
# SFRS Simplified
# -----------------------------------------------------------------------------

def _simplified_position(position: Any) -> Any:
    if not isinstance(position, Mapping):
        return None
    simplified: Dict[str, Any] = {}
    for key, lines in SIMPLIFIED_POSITION_LINES.items():
        if lines is None:
            simplified[key] = position.get(key)
        else:
            simplified[key] = pick(position.get(key), lines)
    return simplified


def _simplified_notes(notes: Any) -> Any:
    if not isinstance(notes, Mapping):
        return None
    return {
        name: {total: get_in(notes, [name, total])}
        for name, total in NOTE_TOTALS.items()
    }


def simplified_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    info = section(document, "filingInformation")
    income = section(document, "incomeStatement")
    view = {
        "filingInformation": pick(info, SIMPLIFIED_FILING_INFORMATION_ORDER) if info is not None else None,
        "statementOfFinancialPosition": _simplified_position(document.get("statementOfFinancialPosition")),
        "incomeStatement": pick(income, SIMPLIFIED_INCOME_STATEMENT_ORDER) if income is not None else None,
        "notes": _simplified_notes(document.get("notes")),
    }
    return add_metadata(
        view,
        "SFRS Simplified XBRL Framework",
        "Simplified financial reporting framework for small entities",
        standard="SFRS for Small Entities",
    )


# -----------------------------------------------------------------------------
# Regulatory Reporting
# -----------------------------------------------------------------------------

def order_financial_position(position: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Re-order the statement of financial position into presentation order.

    Values are not recalculated; keys outside the fixed sequence (such as
    otherAssets of a liquidity-ordered sheet) follow it unchanged.
    """
    ordered = {key: position.get(key) for key in FINANCIAL_POSITION_SECTION_ORDER}
    for key, value in position.items():
        if key not in ordered:
            ordered[key] = value
    return ordered


def regulatory_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    position = section(document, "statementOfFinancialPosition")
    view = {
        "filingInformation": document.get("filingInformation"),
        "financialStatements": {
            "incomeStatement": document.get("incomeStatement"),
            "financialPosition": order_financial_position(position) if position is not None else None,
            "changesInEquity": document.get("statementOfChangesInEquity"),
            "cashFlows": document.get("statementOfCashFlows"),
        },
        "complianceDocumentation": {
            "directorsStatement": document.get("directorsStatement"),
            "auditReport": document.get("auditReport"),
        },
        "notes": document.get("notes"),
    }
    return add_metadata(
        view,
        "Regulatory Reporting Framework",
        "XBRL format optimized for ACRA regulatory submission requirements",
        regulatoryCompliant=True,
    )


def default_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    return add_metadata(dict(document), "Default ACRA View", "Standard view of the XBRL data")

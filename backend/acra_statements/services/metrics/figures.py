"""
figures.py — Read the totals every ratio needs from a filing document.

Purpose:
- extract_figures(document): one flat FinancialFigures record from a
  FilingDocument, a statement envelope (or list of envelopes), or a filing
  document dict.
- Missing or non-numeric values are None, never 0.

This module does NOT:
- Compute ratios (see ratios.py).
- Estimate undisclosed figures (see estimates.py).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from acra_statements.schema.taxonomy import as_filing_document
from acra_statements.utils.numeric import as_number, is_number
from acra_statements.utils.tree import get_in


@dataclass(frozen=True)
class FinancialFigures:
    """Flat view of the statement totals used by ratios and framework views."""
    revenue: Optional[float] = None
    profit_before_tax: Optional[float] = None
    income_tax: Optional[float] = None
    net_profit: Optional[float] = None
    finance_costs: Optional[float] = None
    total_assets: Optional[float] = None
    total_liabilities: Optional[float] = None
    total_equity: Optional[float] = None
    current_assets: Optional[float] = None
    current_liabilities: Optional[float] = None
    cash: Optional[float] = None
    inventories: Optional[float] = None
    trade_receivables: Optional[float] = None
    trade_payables: Optional[float] = None
    borrowings: Optional[float] = None
    property_plant_equipment: Optional[float] = None
    investment_properties: Optional[float] = None
    fair_value_financial_assets: Optional[float] = None
    operating_cash_flow: Optional[float] = None
    cash_at_end: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _optional_sum(*values: Any) -> Optional[float]:
    """Sum of the numeric values, or None when none of them is numeric."""
    present = [value for value in values if is_number(value)]
    if not present:
        return None
    return sum(present)


def extract_figures(document: Any) -> FinancialFigures:
    """
    Extract ratio inputs from any supported document shape.

    Args:
        document: FilingDocument / envelope model, list of envelopes, or dict

    Returns:
        FinancialFigures (all None for unusable input)
    """
    doc = as_filing_document(document)
    position = doc.get("statementOfFinancialPosition")
    income = doc.get("incomeStatement")
    cash_flows = doc.get("statementOfCashFlows")

    def number(tree: Any, path: str) -> Optional[float]:
        return as_number(get_in(tree, path))

    return FinancialFigures(
        revenue=number(income, "Revenue"),
        profit_before_tax=number(income, "ProfitLossBeforeTaxation"),
        income_tax=number(income, "TaxExpenseBenefitContinuingOperations"),
        net_profit=number(income, "ProfitLoss"),
        finance_costs=number(income, "FinanceCosts"),
        total_assets=number(position, "Assets"),
        total_liabilities=number(position, "Liabilities"),
        total_equity=number(position, "equity.Equity"),
        current_assets=number(position, "currentAssets.CurrentAssets"),
        current_liabilities=number(position, "currentLiabilities.CurrentLiabilities"),
        cash=number(position, "currentAssets.CashAndBankBalances"),
        inventories=_optional_sum(
            get_in(position, "currentAssets.Inventories"),
            get_in(position, "currentAssets.DevelopmentProperties"),
        ),
        trade_receivables=number(position, "currentAssets.TradeAndOtherReceivablesCurrent"),
        trade_payables=number(position, "currentLiabilities.TradeAndOtherPayablesCurrent"),
        borrowings=_optional_sum(
            get_in(position, "currentLiabilities.CurrentLoansAndBorrowings"),
            get_in(position, "nonCurrentLiabilities.NoncurrentLoansAndBorrowings"),
        ),
        property_plant_equipment=number(position, "nonCurrentAssets.PropertyPlantAndEquipment"),
        investment_properties=number(position, "nonCurrentAssets.InvestmentProperties"),
        fair_value_financial_assets=_optional_sum(
            get_in(position, "currentAssets.CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"),
            get_in(position, "nonCurrentAssets.NoncurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"),
        ),
        operating_cash_flow=number(cash_flows, "NetCashFromOperatingActivities"),
        cash_at_end=number(cash_flows, "CashAndCashEquivalentsAtEndOfPeriod"),
    )

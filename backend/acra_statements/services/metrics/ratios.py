"""
ratios.py — Null-safe financial ratio calculator.

Purpose:
- calculate_ratio(n, d): the single division primitive. None when either
  operand is missing/non-numeric or the denominator is 0; otherwise n / d
  rounded to settings.RATIO_DECIMAL_PLACES.
- Named wrappers for each ratio the framework views show.
- calculate_financial_ratios(document): grouped ratios plus a separate
  "estimated" group.

This module does NOT:
- Raise on bad input. Every ratio degrades to None.
- Treat estimates as reported figures.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from acra_statements.core.config import settings
from acra_statements.core.logging import get_logger
from acra_statements.services.metrics.estimates import (
    estimate_cost_of_sales,
    estimate_gross_profit,
    estimate_operating_profit,
    estimate_record,
)
from acra_statements.services.metrics.figures import FinancialFigures, extract_figures
from acra_statements.utils.numeric import is_number

logger = get_logger(__name__)


def calculate_ratio(numerator: Any, denominator: Any, decimal_places: Optional[int] = None) -> Optional[float]:
    """
    Divide two figures safely.

    Args:
        numerator: Any value (non-numbers give None)
        denominator: Any value (non-numbers or 0 give None)
        decimal_places: Rounding override (default settings.RATIO_DECIMAL_PLACES)

    Returns:
        Rounded quotient, or None when it cannot be represented as a finite float
    """
    if not is_number(numerator) or not is_number(denominator) or denominator == 0:
        return None
    try:
        quotient = numerator / denominator
    except OverflowError:
        return None
    if not is_number(quotient):
        return None
    places = settings.RATIO_DECIMAL_PLACES if decimal_places is None else decimal_places
    return round(quotient, places)


# -----------------------------------------------------------------------------
# Profitability
# -----------------------------------------------------------------------------

def profit_margin(net_profit: Any, revenue: Any) -> Optional[float]:
    return calculate_ratio(net_profit, revenue)


def return_on_assets(net_profit: Any, total_assets: Any) -> Optional[float]:
    return calculate_ratio(net_profit, total_assets)


def return_on_equity(net_profit: Any, total_equity: Any) -> Optional[float]:
    return calculate_ratio(net_profit, total_equity)


def effective_tax_rate(income_tax: Any, profit_before_tax: Any) -> Optional[float]:
    return calculate_ratio(income_tax, profit_before_tax)


# -----------------------------------------------------------------------------
# Liquidity
# -----------------------------------------------------------------------------

def current_ratio(current_assets: Any, current_liabilities: Any) -> Optional[float]:
    return calculate_ratio(current_assets, current_liabilities)


def quick_ratio(current_assets: Any, inventories: Any, current_liabilities: Any) -> Optional[float]:
    """(current assets - inventories) / current liabilities; missing inventories count as 0."""
    if not is_number(current_assets):
        return None
    stock = inventories if is_number(inventories) else 0.0
    return calculate_ratio(current_assets - stock, current_liabilities)


def cash_ratio(cash: Any, current_liabilities: Any) -> Optional[float]:
    return calculate_ratio(cash, current_liabilities)


# -----------------------------------------------------------------------------
# Solvency
# -----------------------------------------------------------------------------

def debt_to_equity(total_liabilities: Any, total_equity: Any) -> Optional[float]:
    return calculate_ratio(total_liabilities, total_equity)


def debt_ratio(total_liabilities: Any, total_assets: Any) -> Optional[float]:
    return calculate_ratio(total_liabilities, total_assets)


def equity_ratio(total_equity: Any, total_assets: Any) -> Optional[float]:
    return calculate_ratio(total_equity, total_assets)


def interest_coverage(operating_profit: Any, finance_costs: Any) -> Optional[float]:
    return calculate_ratio(operating_profit, finance_costs)


# -----------------------------------------------------------------------------
# Efficiency
# -----------------------------------------------------------------------------

def asset_turnover(revenue: Any, total_assets: Any) -> Optional[float]:
    return calculate_ratio(revenue, total_assets)


def inventory_turnover(cost_of_sales: Any, inventories: Any) -> Optional[float]:
    return calculate_ratio(cost_of_sales, inventories)


def _days(balance: Any, flow: Any, days: Optional[int]) -> Optional[float]:
    if not is_number(balance):
        return None
    period = settings.DAYS_IN_PERIOD if days is None else days
    return calculate_ratio(balance * period, flow)


def receivables_days(trade_receivables: Any, revenue: Any, days: Optional[int] = None) -> Optional[float]:
    return _days(trade_receivables, revenue, days)


def payables_days(trade_payables: Any, cost_of_sales: Any, days: Optional[int] = None) -> Optional[float]:
    return _days(trade_payables, cost_of_sales, days)


# -----------------------------------------------------------------------------
# Cash flow
# -----------------------------------------------------------------------------

def operating_cash_flow_to_sales(operating_cash_flow: Any, revenue: Any) -> Optional[float]:
    return calculate_ratio(operating_cash_flow, revenue)


def cash_flow_to_debt(operating_cash_flow: Any, borrowings: Any) -> Optional[float]:
    return calculate_ratio(operating_cash_flow, borrowings)


# =============================================================================
# GROUPED RATIOS
# =============================================================================

def _estimated_group(fig: FinancialFigures) -> Dict[str, Any]:
    operating_profit = estimate_operating_profit(fig.profit_before_tax, fig.finance_costs)
    cost_of_sales = estimate_cost_of_sales(fig.revenue)
    gross_profit = estimate_gross_profit(fig.revenue)
    return {
        "operatingProfit": operating_profit,
        "costOfSales": cost_of_sales,
        "grossProfit": gross_profit,
        "grossMargin": estimate_record(
            calculate_ratio(gross_profit["value"], fig.revenue),
            f"grossProfit / revenue, grossProfit = {gross_profit['method']}",
        ),
        "interestCoverage": estimate_record(
            interest_coverage(operating_profit["value"], fig.finance_costs),
            f"({operating_profit['method']}) / financeCosts",
        ),
        "inventoryTurnover": estimate_record(
            inventory_turnover(cost_of_sales["value"], fig.inventories),
            f"({cost_of_sales['method']}) / inventories",
        ),
        "payablesDays": estimate_record(
            payables_days(fig.trade_payables, cost_of_sales["value"]),
            f"tradePayables x days / ({cost_of_sales['method']})",
        ),
    }


def calculate_financial_ratios(document: Any) -> Dict[str, Any]:
    """
    Compute all ratios for a document.

    Args:
        document: Any shape accepted by extract_figures

    Returns:
        {"profitability": {...}, "liquidity": {...}, "solvency": {...},
         "efficiency": {...}, "cashFlow": {...}, "estimated": {...}}
    """
    fig = document if isinstance(document, FinancialFigures) else extract_figures(document)

    ratios = {
        "profitability": {
            "profitMargin": profit_margin(fig.net_profit, fig.revenue),
            "returnOnAssets": return_on_assets(fig.net_profit, fig.total_assets),
            "returnOnEquity": return_on_equity(fig.net_profit, fig.total_equity),
            "effectiveTaxRate": effective_tax_rate(fig.income_tax, fig.profit_before_tax),
        },
        "liquidity": {
            "currentRatio": current_ratio(fig.current_assets, fig.current_liabilities),
            "quickRatio": quick_ratio(fig.current_assets, fig.inventories, fig.current_liabilities),
            "cashRatio": cash_ratio(fig.cash, fig.current_liabilities),
        },
        "solvency": {
            "debtToEquity": debt_to_equity(fig.total_liabilities, fig.total_equity),
            "debtRatio": debt_ratio(fig.total_liabilities, fig.total_assets),
            "equityRatio": equity_ratio(fig.total_equity, fig.total_assets),
        },
        "efficiency": {
            "assetTurnover": asset_turnover(fig.revenue, fig.total_assets),
            "receivablesDays": receivables_days(fig.trade_receivables, fig.revenue),
        },
        "cashFlow": {
            "operatingCashFlowToSales": operating_cash_flow_to_sales(fig.operating_cash_flow, fig.revenue),
            "cashFlowToDebt": cash_flow_to_debt(fig.operating_cash_flow, fig.borrowings),
        },
        "estimated": _estimated_group(fig),
    }

    computed = sum(
        1 for group, values in ratios.items() if group != "estimated" for value in values.values() if value is not None
    )
    logger.debug(f"Computed {computed} reported ratios")
    return ratios

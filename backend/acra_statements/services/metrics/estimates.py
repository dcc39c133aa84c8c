"""
estimates.py — Flagged estimates for figures a filing does not disclose.

ACRA simplified statements classify expenses by nature, so operating
profit, cost of sales and gross profit are not reported. The estimates here
are always returned as records that say so:

    {"value": 150000.0, "isEstimate": True, "method": "revenue x 0.6"}

Estimates are never mixed into the reported ratio groups.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from acra_statements.core.config import settings
from acra_statements.utils.numeric import is_number

EstimateRecord = Dict[str, Any]


def estimate_record(value: Optional[float], method: str) -> EstimateRecord:
    """Flagged estimate; values that overflowed to inf/NaN are reported as None."""
    return {"value": value if is_number(value) else None, "isEstimate": True, "method": method}


def estimate_operating_profit(profit_before_tax: Any, finance_costs: Any) -> EstimateRecord:
    """Operating profit approximated as profit before tax plus finance costs."""
    method = "profitLossBeforeTaxation + financeCosts"
    if not is_number(profit_before_tax):
        return estimate_record(None, method)
    costs = finance_costs if is_number(finance_costs) else 0.0
    return estimate_record(profit_before_tax + costs, method)


def estimate_cost_of_sales(revenue: Any, fraction: Optional[float] = None) -> EstimateRecord:
    """Cost of sales approximated as a fixed fraction of revenue."""
    fraction = settings.COGS_REVENUE_FRACTION if fraction is None else fraction
    method = f"revenue x {fraction}"
    if not is_number(revenue):
        return estimate_record(None, method)
    return estimate_record(revenue * fraction, method)


def estimate_gross_profit(revenue: Any, fraction: Optional[float] = None) -> EstimateRecord:
    """Gross profit as revenue minus the estimated cost of sales."""
    cost_of_sales = estimate_cost_of_sales(revenue, fraction)
    method = f"revenue - ({cost_of_sales['method']})"
    if cost_of_sales["value"] is None:
        return estimate_record(None, method)
    return estimate_record(revenue - cost_of_sales["value"], method)

"""
metrics — financial ratios and flagged estimates from statement totals.
"""

from acra_statements.services.metrics.estimates import (
    estimate_cost_of_sales,
    estimate_gross_profit,
    estimate_operating_profit,
)
from acra_statements.services.metrics.figures import FinancialFigures, extract_figures
from acra_statements.services.metrics.ratios import calculate_financial_ratios, calculate_ratio

__all__ = [
    "FinancialFigures",
    "calculate_financial_ratios",
    "calculate_ratio",
    "estimate_cost_of_sales",
    "estimate_gross_profit",
    "estimate_operating_profit",
    "extract_figures",
]

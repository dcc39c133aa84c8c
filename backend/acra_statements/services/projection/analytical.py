"""
analytical.py — Analytical and business-profile framework views.

Purpose:
- analytical_view: financial summary, grouped ratios, flagged estimates,
  trend placeholders (single period) and compliance status.
- business_profile_view: company overview with detected industry, size
  category, core financials and highlighted ratios.

Estimates stay in their own "estimatedFigures" section.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from acra_statements.services.classification.industry import classify_industry
from acra_statements.services.classification.keywords import IndustryKeywordTable
from acra_statements.services.metrics.figures import FinancialFigures, extract_figures
from acra_statements.services.metrics.ratios import (
    calculate_financial_ratios,
    current_ratio,
    profit_margin,
    return_on_assets,
    return_on_equity,
)
from acra_statements.services.projection.common import add_metadata, company_info, section
from acra_statements.services.projection.compliance import compliance_status

INDUSTRY_LABELS: Dict[str, str] = {
    "financial-services": "Financial Services",
    "real-estate": "Real Estate",
    "manufacturing": "Manufacturing",
    "retail": "Retail and Trading",
    "generic": "General Business",
}

# Singapore small-company criteria (any two of three)
SMALL_COMPANY_REVENUE_LIMIT = 10_000_000
SMALL_COMPANY_ASSETS_LIMIT = 10_000_000

ROUNDING_MULTIPLIERS = {
    "Units": 1,
    "Thousands": 1_000,
    "Millions": 1_000_000,
}

TREND_FIGURES = {
    "revenue": "revenue",
    "netIncome": "net_profit",
    "totalAssets": "total_assets",
    "totalLiabilities": "total_liabilities",
    "totalEquity": "total_equity",
}


# -----------------------------------------------------------------------------
# Analytical
# -----------------------------------------------------------------------------

def financial_summary(fig: FinancialFigures) -> Dict[str, Any]:
    return {
        "revenue": fig.revenue,
        "profitBeforeTax": fig.profit_before_tax,
        "netProfit": fig.net_profit,
        "totalAssets": fig.total_assets,
        "totalLiabilities": fig.total_liabilities,
        "totalEquity": fig.total_equity,
        "cashAtEndOfPeriod": fig.cash_at_end,
        "operatingCashFlow": fig.operating_cash_flow,
    }


def trend_analysis(fig: FinancialFigures) -> Dict[str, Any]:
    # Filings carry one period; prior-year values are not available.
    return {
        name: {"current": getattr(fig, attr), "previousYear": None, "trend": "N/A"}
        for name, attr in TREND_FIGURES.items()
    }


def analytical_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    fig = extract_figures(document)
    ratios = calculate_financial_ratios(fig)
    estimated = ratios.pop("estimated")

    view: Dict[str, Any] = {}
    info = company_info(document)
    if info is not None:
        view["companyInfo"] = info
    view["financialSummary"] = financial_summary(fig)
    view["keyRatios"] = ratios
    view["estimatedFigures"] = estimated
    view["trendAnalysis"] = trend_analysis(fig)
    view["complianceStatus"] = compliance_status(document)

    return add_metadata(
        view,
        "Analytical Framework",
        "Financial Ratios, Trend Analysis, Performance Metrics",
        standard="Financial Analysis",
    )


# -----------------------------------------------------------------------------
# Business profile
# -----------------------------------------------------------------------------

def core_financials(fig: FinancialFigures) -> Dict[str, Any]:
    return {
        "revenue": fig.revenue,
        "netProfit": fig.net_profit,
        "totalAssets": fig.total_assets,
        "totalEquity": fig.total_equity,
        "cashAndEquivalents": fig.cash,
        "operatingCashFlow": fig.operating_cash_flow,
    }


def key_highlights(fig: FinancialFigures) -> Dict[str, Any]:
    highlights: Dict[str, Any] = {
        "profitMargin": {
            "value": profit_margin(fig.net_profit, fig.revenue),
            "description": "Net profit margin shows the percentage of revenue that translates to net profit",
        },
        "returnOnEquity": {
            "value": return_on_equity(fig.net_profit, fig.total_equity),
            "description": "Return on equity indicates how effectively the company uses shareholder funds",
        },
        "returnOnAssets": {
            "value": return_on_assets(fig.net_profit, fig.total_assets),
            "description": "Return on assets shows how efficiently the company uses its assets to generate profit",
        },
        "currentRatio": None,
    }
    if fig.current_assets is not None and fig.current_liabilities is not None:
        highlights["currentRatio"] = {
            "value": current_ratio(fig.current_assets, fig.current_liabilities),
            "description": "Current ratio measures the company's ability to pay short-term obligations",
        }
    return highlights


def business_scale(document: Mapping[str, Any], fig: FinancialFigures) -> Dict[str, Any]:
    """
    Size category from the small-company criteria.

    Amounts are scaled by the filing's rounding level before comparison.
    A category needs two criteria decided the same way; otherwise it is
    "Undetermined".
    """
    info = section(document, "filingInformation") or {}
    multiplier = ROUNDING_MULTIPLIERS.get(info.get("LevelOfRoundingUsedInFinancialStatements"), 1)
    more_than_50 = info.get("WhetherCompanyOrGroupIfConsolidatedAccountsArePreparedHasMoreThan50Employees")

    criteria: Dict[str, Optional[bool]] = {
        "revenueWithinLimit": None if fig.revenue is None else fig.revenue * multiplier <= SMALL_COMPANY_REVENUE_LIMIT,
        "assetsWithinLimit": (
            None if fig.total_assets is None else fig.total_assets * multiplier <= SMALL_COMPANY_ASSETS_LIMIT
        ),
        "employeesWithinLimit": None if more_than_50 is None else not more_than_50,
    }
    met = sum(1 for value in criteria.values() if value is True)
    failed = sum(1 for value in criteria.values() if value is False)
    if met >= 2:
        category = "Small"
    elif failed >= 2:
        category = "Large"
    else:
        category = "Undetermined"

    return {
        "sizeCategory": category,
        "criteria": criteria,
        "hasMoreThan50Employees": more_than_50,
        "roundingLevel": info.get("LevelOfRoundingUsedInFinancialStatements"),
    }


def business_profile_view(
    document: Mapping[str, Any],
    keyword_table: Optional[IndustryKeywordTable] = None,
) -> Dict[str, Any]:
    fig = extract_figures(document)
    industry = classify_industry(document, keyword_table)
    view = {
        "companyInfo": company_info(document),
        "industry": {"tag": industry, "label": INDUSTRY_LABELS[industry]},
        "scale": business_scale(document, fig),
        "coreFinancials": core_financials(fig),
        "keyHighlights": key_highlights(fig),
    }
    return add_metadata(
        view,
        "Business Profile",
        "Company overview with industry, scale, core financials and key highlights",
        industry=industry,
    )

"""
industry.py — Industry framework views.

Purpose:
- banking_view / insurance_view: fixed sector views.
- industry_specific_view: classify the filing, then build the sector
  section for financial-services, real-estate, manufacturing, retail or
  generic.

Sector line items are read from the general taxonomy elements that carry
them in simplified filings (e.g. customer deposits are reported within
trade and other payables). Elements the taxonomy does not carry are
reported as "N/A".
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from acra_statements.services.classification.industry import classify_industry
from acra_statements.services.classification.keywords import IndustryKeywordTable
from acra_statements.services.metrics.estimates import estimate_cost_of_sales, estimate_gross_profit, estimate_record
from acra_statements.services.metrics.figures import FinancialFigures, extract_figures
from acra_statements.services.metrics.ratios import (
    asset_turnover,
    calculate_financial_ratios,
    calculate_ratio,
    current_ratio,
    debt_to_equity,
    inventory_turnover,
    payables_days,
    receivables_days,
    return_on_assets,
    return_on_equity,
)
from acra_statements.services.projection.analytical import INDUSTRY_LABELS
from acra_statements.services.projection.common import add_metadata, company_info, income_value, position_value

NOT_AVAILABLE = "N/A"

STANDARD_REGULATORY_INFO = {
    "regulatoryCompliance": "Standard",
    "riskManagement": "Standard",
}


# -----------------------------------------------------------------------------
# Banking / financial services
# -----------------------------------------------------------------------------

def banking_items(document: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "assets": {
            "cashAndBalancesWithCentralBanks": position_value(document, "currentAssets.CashAndBankBalances"),
            "loansAndAdvancesToCustomers": position_value(document, "currentAssets.TradeAndOtherReceivablesCurrent"),
            "investmentSecurities": position_value(
                document, "currentAssets.CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"
            ),
        },
        "liabilities": {
            "depositsFromCustomers": position_value(document, "currentLiabilities.TradeAndOtherPayablesCurrent"),
            "debtSecuritiesIssued": position_value(document, "currentLiabilities.CurrentLoansAndBorrowings"),
            "subordinatedLiabilities": position_value(
                document, "nonCurrentLiabilities.NoncurrentLoansAndBorrowings"
            ),
        },
    }


def banking_metrics(fig: FinancialFigures) -> Dict[str, Any]:
    """
    Simplified filings carry no interest income or loan and deposit lines, so
    net interest margin and loan-to-deposit are flagged proxy estimates.
    """
    return {
        "capitalAdequacy": {
            "equityToAssets": calculate_ratio(fig.total_equity, fig.total_assets),
        },
        "assetQuality": {
            "nonPerformingLoanRatio": NOT_AVAILABLE,
        },
        "earnings": {
            "returnOnAssets": return_on_assets(fig.net_profit, fig.total_assets),
            "netInterestMargin": estimate_record(
                calculate_ratio(fig.revenue, fig.total_assets),
                "revenue / totalAssets",
            ),
        },
        "liquidity": {
            "loanToDepositRatio": estimate_record(
                calculate_ratio(fig.trade_receivables, fig.trade_payables),
                "tradeAndOtherReceivables / tradeAndOtherPayables",
            ),
        },
    }


def banking_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    view = {
        "companyInfo": company_info(document),
        "bankingSpecificItems": banking_items(document),
        "keyBankingMetrics": banking_metrics(extract_figures(document)),
        "regulatoryCompliance": dict(STANDARD_REGULATORY_INFO),
    }
    return add_metadata(
        view,
        "Banking Industry Framework",
        "Specialized view for financial institutions including banking-specific metrics",
        industry="Banking and Financial Services",
    )


# -----------------------------------------------------------------------------
# Insurance
# -----------------------------------------------------------------------------

def insurance_items(document: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "assets": {
            "financialAssets": position_value(
                document, "currentAssets.CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss"
            ),
            "investmentProperties": position_value(document, "nonCurrentAssets.InvestmentProperties"),
            "reinsuranceAssets": NOT_AVAILABLE,
        },
        "liabilities": {
            "insuranceContractLiabilities": NOT_AVAILABLE,
            "investmentContractLiabilities": NOT_AVAILABLE,
            "insurancePayables": position_value(document, "currentLiabilities.TradeAndOtherPayablesCurrent"),
        },
    }


def insurance_metrics(fig: FinancialFigures) -> Dict[str, Any]:
    return {
        "solvency": {
            "equityToAssets": calculate_ratio(fig.total_equity, fig.total_assets),
        },
        "profitability": {
            "returnOnEquity": return_on_equity(fig.net_profit, fig.total_equity),
            "combinedRatio": NOT_AVAILABLE,
        },
        "liquidity": {
            "liquidAssetsToTotalAssets": calculate_ratio(fig.cash, fig.total_assets),
        },
    }


def insurance_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    view = {
        "companyInfo": company_info(document),
        "insuranceSpecificItems": insurance_items(document),
        "keyInsuranceMetrics": insurance_metrics(extract_figures(document)),
        "regulatoryCompliance": dict(STANDARD_REGULATORY_INFO),
    }
    return add_metadata(
        view,
        "Insurance Industry Framework",
        "Specialized view for insurance companies including insurance-specific metrics",
        industry="Insurance",
    )


# -----------------------------------------------------------------------------
# Industry-specific sections
# -----------------------------------------------------------------------------

def _financial_services_section(document: Mapping[str, Any], fig: FinancialFigures) -> Dict[str, Any]:
    return {
        "industryItems": banking_items(document),
        "industryMetrics": banking_metrics(fig),
    }


def _real_estate_section(document: Mapping[str, Any], fig: FinancialFigures) -> Dict[str, Any]:
    return {
        "industryItems": {
            "investmentProperties": fig.investment_properties,
            "developmentProperties": position_value(document, "currentAssets.DevelopmentProperties"),
            "propertyPlantAndEquipment": fig.property_plant_equipment,
            "borrowings": fig.borrowings,
        },
        "industryMetrics": {
            "investmentPropertiesToAssets": calculate_ratio(fig.investment_properties, fig.total_assets),
            "borrowingsToEquity": calculate_ratio(fig.borrowings, fig.total_equity),
            "debtToEquity": debt_to_equity(fig.total_liabilities, fig.total_equity),
            "returnOnAssets": return_on_assets(fig.net_profit, fig.total_assets),
        },
    }


def _manufacturing_section(document: Mapping[str, Any], fig: FinancialFigures) -> Dict[str, Any]:
    cost_of_sales = estimate_cost_of_sales(fig.revenue)
    return {
        "industryItems": {
            "propertyPlantAndEquipment": fig.property_plant_equipment,
            "inventories": fig.inventories,
            "depreciationExpense": income_value(document, "DepreciationExpense"),
        },
        "industryMetrics": {
            "assetTurnover": asset_turnover(fig.revenue, fig.total_assets),
            "fixedAssetTurnover": calculate_ratio(fig.revenue, fig.property_plant_equipment),
            "returnOnAssets": return_on_assets(fig.net_profit, fig.total_assets),
            "inventoryTurnover": estimate_record(
                inventory_turnover(cost_of_sales["value"], fig.inventories),
                f"({cost_of_sales['method']}) / inventories",
            ),
        },
    }


def _retail_section(document: Mapping[str, Any], fig: FinancialFigures) -> Dict[str, Any]:
    cost_of_sales = estimate_cost_of_sales(fig.revenue)
    gross_profit = estimate_gross_profit(fig.revenue)
    return {
        "industryItems": {
            "inventories": fig.inventories,
            "tradeReceivables": fig.trade_receivables,
            "tradePayables": fig.trade_payables,
            "cashAndBankBalances": fig.cash,
        },
        "industryMetrics": {
            "currentRatio": current_ratio(fig.current_assets, fig.current_liabilities),
            "receivablesDays": receivables_days(fig.trade_receivables, fig.revenue),
            "payablesDays": estimate_record(
                payables_days(fig.trade_payables, cost_of_sales["value"]),
                f"tradePayables x days / ({cost_of_sales['method']})",
            ),
            "inventoryTurnover": estimate_record(
                inventory_turnover(cost_of_sales["value"], fig.inventories),
                f"({cost_of_sales['method']}) / inventories",
            ),
            "grossMargin": estimate_record(
                calculate_ratio(gross_profit["value"], fig.revenue),
                f"grossProfit / revenue, grossProfit = {gross_profit['method']}",
            ),
        },
    }


def _generic_section(document: Mapping[str, Any], fig: FinancialFigures) -> Dict[str, Any]:
    ratios = calculate_financial_ratios(fig)
    ratios.pop("estimated")
    return {
        "industryItems": None,
        "industryMetrics": ratios,
    }


INDUSTRY_SECTIONS: Dict[str, Callable[[Mapping[str, Any], FinancialFigures], Dict[str, Any]]] = {
    "financial-services": _financial_services_section,
    "real-estate": _real_estate_section,
    "manufacturing": _manufacturing_section,
    "retail": _retail_section,
    "generic": _generic_section,
}


def industry_specific_view(
    document: Mapping[str, Any],
    keyword_table: Optional[IndustryKeywordTable] = None,
) -> Dict[str, Any]:
    industry = classify_industry(document, keyword_table)
    label = INDUSTRY_LABELS[industry]
    view: Dict[str, Any] = {
        "companyInfo": company_info(document),
        "industryClassification": {"tag": industry, "label": label},
    }
    view.update(INDUSTRY_SECTIONS[industry](document, extract_figures(document)))
    return add_metadata(
        view,
        "Industry-Specific Framework",
        f"Specialized view for {label}",
        industry=industry,
    )

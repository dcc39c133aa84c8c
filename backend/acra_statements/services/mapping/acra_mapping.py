"""
acra_mapping.py — Mapping-service payload <-> filing document.

Purpose:
- normalize_acra_data(api_response): {"data": {<snake_case sections>}} into
  the filing document shape (taxonomy element names).
- denormalize_acra_data(document): the reverse, wrapped as
  {"mapped_data": {"id": "", ...}}.

Both directions read one declared table (MAPPING_SECTIONS). A section is
only converted when it is present in the input; keys absent from a present
section stay absent. Missing input gives an empty skeleton, never an error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, NamedTuple, Tuple

from acra_statements.core.logging import get_logger
from acra_statements.core.normalized_order import CHANGES_IN_EQUITY_ORDER
from acra_statements.utils.tree import camel_to_snake, deep_copy, get_in

logger = get_logger(__name__)

NOT_AVAILABLE = "N/A"

# Free-text elements where the UI writes "N/A" for "not applicable"
NULL_WHEN_NOT_AVAILABLE = {
    "NameOfParentEntity",
    "NameOfUltimateParentOfGroup",
    "AuditingStandardsUsedToConductTheAudit",
}


class MappingSection(NamedTuple):
    document_path: Tuple[str, ...]
    api_path: Tuple[str, ...]
    fields: Dict[str, str]  # taxonomy element -> mapping-service key


# =============================================================================
# FIELD TABLE
# =============================================================================

FILING_INFORMATION_FIELDS = {
    "NameOfCompany": "company_name",
    "UniqueEntityNumber": "unique_entity_number",
    "CurrentPeriodStartDate": "current_period_start",
    "CurrentPeriodEndDate": "current_period_end",
    "PriorPeriodStartDate": "prior_period_start",
    "TypeOfXBRLFiling": "xbrl_filing_type",
    "NatureOfFinancialStatementsCompanyLevelOrConsolidated": "financial_statement_type",
    "TypeOfAccountingStandardUsedToPrepareFinancialStatements": "accounting_standard",
    "DateOfAuthorisationForIssueOfFinancialStatements": "authorisation_date",
    "TypeOfStatementOfFinancialPosition": "financial_position_type",
    "WhetherTheFinancialStatementsArePreparedOnGoingConcernBasis": "is_going_concern",
    "WhetherThereAreAnyChangesToComparativeAmounts": "has_comparative_changes",
    "DescriptionOfPresentationCurrency": "presentation_currency",
    "DescriptionOfFunctionalCurrency": "functional_currency",
    "LevelOfRoundingUsedInFinancialStatements": "rounding_level",
    "DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities": "entity_operations_description",
    "PrincipalPlaceOfBusinessIfDifferentFromRegisteredOffice": "principal_place_of_business",
    "WhetherCompanyOrGroupIfConsolidatedAccountsArePreparedHasMoreThan50Employees": "has_more_than_50_employees",
    "NameOfParentEntity": "parent_entity_name",
    "NameOfUltimateParentOfGroup": "ultimate_parent_name",
    "TaxonomyVersion": "taxonomy_version",
    "NameAndVersionOfSoftwareUsedToGenerateXBRLFile": "xbrl_software",
    "HowWasXBRLFilePrepared": "xbrl_preparation_method",
}

DIRECTORS_STATEMENT_FIELDS = {
    "WhetherInDirectorsOpinionFinancialStatementsAreDrawnUpSoAsToExhibitATrueAndFairView": (
        "directors_opinion_true_fair_view"
    ),
    "WhetherThereAreReasonableGroundsToBelieveThatCompanyWillBeAbleToPayItsDebtsAsAndWhenTheyFallDueAtDateOfStatement": (
        "reasonable_grounds_company_debts"
    ),
}

AUDIT_REPORT_FIELDS = {
    "TypeOfAuditOpinionInIndependentAuditorsReport": "audit_opinion",
    "AuditingStandardsUsedToConductTheAudit": "auditing_standards",
    "WhetherThereIsAnyMaterialUncertaintyRelatingToGoingConcern": "material_uncertainty_going_concern",
    "WhetherInAuditorsOpinionAccountingAndOtherRecordsRequiredAreProperlyKept": "proper_accounting_records",
}

CURRENT_ASSETS_FIELDS = {
    "CashAndBankBalances": "cash_and_bank_balances",
    "TradeAndOtherReceivablesCurrent": "trade_and_other_receivables",
    "CurrentFinanceLeaseReceivables": "current_finance_lease_receivables",
    "CurrentDerivativeFinancialAssets": "current_derivative_financial_assets",
    "CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss": "current_financial_assets_at_fair_value",
    "OtherCurrentFinancialAssets": "other_current_financial_assets",
    "DevelopmentProperties": "development_properties",
    "Inventories": "inventories",
    "OtherCurrentNonfinancialAssets": "other_current_nonfinancial_assets",
    "NoncurrentAssetsOrDisposalGroupsClassifiedAsHeldForSaleOrAsHeldForDistributionToOwners": "held_for_sale_assets",
    "CurrentAssets": "total_current_assets",
}

NON_CURRENT_ASSETS_FIELDS = {
    "TradeAndOtherReceivablesNoncurrent": "trade_and_other_receivables",
    "NoncurrentFinanceLeaseReceivables": "noncurrent_finance_lease_receivables",
    "NoncurrentDerivativeFinancialAssets": "noncurrent_derivative_financial_assets",
    "NoncurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss": "noncurrent_financial_assets_at_fair_value",
    "OtherNoncurrentFinancialAssets": "other_noncurrent_financial_assets",
    "PropertyPlantAndEquipment": "property_plant_equipment",
    "InvestmentProperties": "investment_properties",
    "Goodwill": "goodwill",
    "IntangibleAssetsOtherThanGoodwill": "intangible_assets",
    "InvestmentsInSubsidiariesAssociatesOrJointVentures": "investments_in_entities",
    "DeferredTaxAssets": "deferred_tax_assets",
    "OtherNoncurrentNonfinancialAssets": "other_noncurrent_nonfinancial_assets",
    "NoncurrentAssets": "total_noncurrent_assets",
}

CURRENT_LIABILITIES_FIELDS = {
    "TradeAndOtherPayablesCurrent": "trade_and_other_payables",
    "CurrentLoansAndBorrowings": "current_loans_and_borrowings",
    "CurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss": "current_financial_liabilities_at_fair_value",
    "CurrentFinanceLeaseLiabilities": "current_finance_lease_liabilities",
    "OtherCurrentFinancialLiabilities": "other_current_financial_liabilities",
    "CurrentIncomeTaxLiabilities": "current_income_tax_liabilities",
    "CurrentProvisions": "current_provisions",
    "OtherCurrentNonfinancialLiabilities": "other_current_nonfinancial_liabilities",
    "LiabilitiesClassifiedAsHeldForSale": "liabilities_held_for_sale",
    "CurrentLiabilities": "total_current_liabilities",
}

NON_CURRENT_LIABILITIES_FIELDS = {
    "TradeAndOtherPayablesNoncurrent": "trade_and_other_payables",
    "NoncurrentLoansAndBorrowings": "noncurrent_loans_and_borrowings",
    "NoncurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss": (
        "noncurrent_financial_liabilities_at_fair_value"
    ),
    "NoncurrentFinanceLeaseLiabilities": "noncurrent_finance_lease_liabilities",
    "OtherNoncurrentFinancialLiabilities": "other_noncurrent_financial_liabilities",
    "DeferredTaxLiabilities": "deferred_tax_liabilities",
    "NoncurrentProvisions": "noncurrent_provisions",
    "OtherNoncurrentNonfinancialLiabilities": "other_noncurrent_nonfinancial_liabilities",
    "NoncurrentLiabilities": "total_noncurrent_liabilities",
}

EQUITY_FIELDS = {
    "ShareCapital": "share_capital",
    "TreasuryShares": "treasury_shares",
    "AccumulatedProfitsLosses": "accumulated_profits_losses",
    "ReservesOtherThanAccumulatedProfitsLosses": "other_reserves",
    "NoncontrollingInterests": "noncontrolling_interests",
    "Equity": "total_equity",
}

POSITION_TOTAL_FIELDS = {
    "Assets": "total_assets",
    "Liabilities": "total_liabilities",
}

INCOME_STATEMENT_FIELDS = {
    "Revenue": "revenue",
    "OtherIncome": "other_income",
    "EmployeeBenefitsExpense": "employee_expenses",
    "DepreciationExpense": "depreciation_expense",
    "AmortisationExpense": "amortisation_expense",
    "RepairsAndMaintenanceExpense": "repairs_and_maintenance_expense",
    "SalesAndMarketingExpense": "sales_and_marketing_expense",
    "OtherExpensesByNature": "other_expenses_by_nature",
    "OtherGainsLosses": "other_gains_losses",
    "FinanceCosts": "finance_costs",
    "ShareOfProfitLossOfAssociatesAndJointVenturesAccountedForUsingEquityMethod": (
        "share_of_profit_loss_of_associates_and_joint_ventures_accounted_for_using_equity_method"
    ),
    "ProfitLossBeforeTaxation": "profit_loss_before_taxation",
    "TaxExpenseBenefitContinuingOperations": "tax_expense_benefit_continuing_operations",
    "ProfitLossFromDiscontinuedOperations": "profit_loss_from_discontinued_operations",
    "ProfitLoss": "profit_loss",
    "ProfitLossAttributableToOwnersOfCompany": "profit_loss_attributable_to_owners_of_company",
    "ProfitLossAttributableToNoncontrollingInterests": "profit_loss_attributable_to_noncontrolling_interests",
}

CASH_FLOWS_FIELDS = {
    "NetCashFromOperatingActivities": "cash_flows_from_used_in_operating_activities",
    "NetCashFromInvestingActivities": "cash_flows_from_used_in_investing_activities",
    "NetCashFromFinancingActivities": "cash_flows_from_used_in_financing_activities",
}

# The mapping service uses the snake_case form of each element name
CHANGES_IN_EQUITY_FIELDS = {element: camel_to_snake(element) for element in CHANGES_IN_EQUITY_ORDER}

RECEIVABLES_NOTE_FIELDS = {
    "TradeAndOtherReceivablesDueFromThirdParties": "receivables_from_third_parties",
    "TradeAndOtherReceivablesDueFromRelatedParties": "receivables_from_related_parties",
    "UnbilledReceivables": "unbilled_receivables",
    "OtherReceivables": "other_receivables",
    "TradeAndOtherReceivables": "total_trade_and_other_receivables",
}

PAYABLES_NOTE_FIELDS = {
    "TradeAndOtherPayablesDueToThirdParties": "payables_to_third_parties",
    "TradeAndOtherPayablesDueToRelatedParties": "payables_to_related_parties",
    "DeferredIncome": "deferred_income",
    "OtherPayables": "other_payables",
    "TradeAndOtherPayables": "total_trade_and_other_payables",
}

REVENUE_NOTE_FIELDS = {
    "RevenueFromPropertyTransferredAtPointInTime": "revenue_from_property_point_in_time",
    "RevenueFromGoodsTransferredAtPointInTime": "revenue_from_goods_point_in_time",
    "RevenueFromServicesTransferredAtPointInTime": "revenue_from_services_point_in_time",
    "RevenueFromPropertyTransferredOverTime": "revenue_from_property_over_time",
    "RevenueFromConstructionContractsOverTime": "revenue_from_construction_over_time",
    "RevenueFromServicesTransferredOverTime": "revenue_from_services_over_time",
    "OtherRevenue": "other_revenue",
    "Revenue": "total_revenue",
}

_POSITION = ("statementOfFinancialPosition",)
_API_POSITION = ("statement_of_financial_position",)

MAPPING_SECTIONS: List[MappingSection] = [
    MappingSection(("filingInformation",), ("filing_information",), FILING_INFORMATION_FIELDS),
    MappingSection(("directorsStatement",), ("directors_statement",), DIRECTORS_STATEMENT_FIELDS),
    MappingSection(("auditReport",), ("audit_report",), AUDIT_REPORT_FIELDS),
    MappingSection(_POSITION + ("currentAssets",), _API_POSITION + ("current_assets",), CURRENT_ASSETS_FIELDS),
    MappingSection(
        _POSITION + ("nonCurrentAssets",), _API_POSITION + ("noncurrent_assets",), NON_CURRENT_ASSETS_FIELDS
    ),
    MappingSection(
        _POSITION + ("currentLiabilities",), _API_POSITION + ("current_liabilities",), CURRENT_LIABILITIES_FIELDS
    ),
    MappingSection(
        _POSITION + ("nonCurrentLiabilities",),
        _API_POSITION + ("noncurrent_liabilities",),
        NON_CURRENT_LIABILITIES_FIELDS,
    ),
    MappingSection(_POSITION + ("equity",), _API_POSITION + ("equity",), EQUITY_FIELDS),
    MappingSection(_POSITION, _API_POSITION, POSITION_TOTAL_FIELDS),
    MappingSection(("incomeStatement",), ("income_statement",), INCOME_STATEMENT_FIELDS),
    MappingSection(("statementOfCashFlows",), ("statement_of_cash_flows",), CASH_FLOWS_FIELDS),
    MappingSection(("statementOfChangesInEquity",), ("statement_of_changes_in_equity",), CHANGES_IN_EQUITY_FIELDS),
    MappingSection(("notes", "tradeAndOtherReceivables"), ("notes", "trade_and_other_receivables"), RECEIVABLES_NOTE_FIELDS),
    MappingSection(("notes", "tradeAndOtherPayables"), ("notes", "trade_and_other_payables"), PAYABLES_NOTE_FIELDS),
    MappingSection(("notes", "revenue"), ("notes", "revenue"), REVENUE_NOTE_FIELDS),
]


# -----------------------------------------------------------------------------
# Skeletons
# -----------------------------------------------------------------------------

def _skeleton(paths: List[Tuple[str, ...]]) -> Dict[str, Any]:
    """Nested empty dicts for every section path."""
    root: Dict[str, Any] = {}
    for path in paths:
        node = root
        for key in path:
            node = node.setdefault(key, {})
    return root


def empty_document() -> Dict[str, Any]:
    return _skeleton([section.document_path for section in MAPPING_SECTIONS])


def empty_mapped_data() -> Dict[str, Any]:
    mapped = {"id": ""}
    mapped.update(_skeleton([section.api_path for section in MAPPING_SECTIONS]))
    return mapped


def _node(root: Dict[str, Any], path: Tuple[str, ...]) -> Dict[str, Any]:
    node = root
    for key in path:
        node = node[key]
    return node


def _convert(source_root: Any, target_root: Dict[str, Any], to_document: bool) -> None:
    for section in MAPPING_SECTIONS:
        source_path = section.api_path if to_document else section.document_path
        target_path = section.document_path if to_document else section.api_path
        source = get_in(source_root, source_path)
        if not isinstance(source, Mapping):
            continue
        target = _node(target_root, target_path)
        for element, api_key in section.fields.items():
            source_key, target_key = (api_key, element) if to_document else (element, api_key)
            if source_key not in source:
                continue
            value = deep_copy(source[source_key])
            if not to_document and element in NULL_WHEN_NOT_AVAILABLE and value == NOT_AVAILABLE:
                value = None
            target[target_key] = value


# =============================================================================
# PUBLIC API
# =============================================================================

def normalize_acra_data(api_response: Any) -> Dict[str, Any]:
    """
    Convert a mapping-service response into a filing document.

    Args:
        api_response: {"data": {"filing_information": {...}, ...}}

    Returns:
        Filing document with every section present (empty when not supplied)
    """
    document = empty_document()
    data = api_response.get("data") if isinstance(api_response, Mapping) else None
    if not isinstance(data, Mapping):
        logger.warning("Invalid mapping-service response for normalization, returning empty document")
        return document
    _convert(data, document, to_document=True)
    return document


def denormalize_acra_data(document: Any) -> Dict[str, Any]:
    """
    Convert a filing document back into the mapping-service payload.

    Args:
        document: Filing document dict

    Returns:
        {"mapped_data": {"id": "", "filing_information": {...}, ...}};
        {"mapped_data": {}} for unusable input
    """
    if not isinstance(document, Mapping) or not document:
        logger.warning("Invalid filing document for denormalization")
        return {"mapped_data": {}}
    mapped = empty_mapped_data()
    _convert(document, mapped, to_document=False)
    return {"mapped_data": mapped}

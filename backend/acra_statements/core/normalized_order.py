"""
normalized_order.py — Canonical ordering of ACRA simplified-XBRL elements.

Defines the standard order of elements in each filing section. The lists are
used to build null-filled templates for full-taxonomy views, to keep element
order stable in projected output, and by the regulatory presentation order.
"""

from typing import Dict, List

# Filing information - order of the ACRA filing form
FILING_INFORMATION_ORDER = [
    "NameOfCompany",
    "UniqueEntityNumber",
    "CurrentPeriodStartDate",
    "CurrentPeriodEndDate",
    "PriorPeriodStartDate",
    "TypeOfXBRLFiling",
    "NatureOfFinancialStatementsCompanyLevelOrConsolidated",
    "TypeOfAccountingStandardUsedToPrepareFinancialStatements",
    "DateOfAuthorisationForIssueOfFinancialStatements",
    "TypeOfStatementOfFinancialPosition",
    "WhetherTheFinancialStatementsArePreparedOnGoingConcernBasis",
    "WhetherThereAreAnyChangesToComparativeAmounts",
    "DescriptionOfPresentationCurrency",
    "DescriptionOfFunctionalCurrency",
    "LevelOfRoundingUsedInFinancialStatements",
    "DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities",
    "PrincipalPlaceOfBusinessIfDifferentFromRegisteredOffice",
    "WhetherCompanyOrGroupIfConsolidatedAccountsArePreparedHasMoreThan50Employees",
    "NameOfParentEntity",
    "NameOfUltimateParentOfGroup",
    "TaxonomyVersion",
    "NameAndVersionOfSoftwareUsedToGenerateXBRLFile",
    "HowWasXBRLFilePrepared",
]

# Subset kept by the simplified (small entities) view
SIMPLIFIED_FILING_INFORMATION_ORDER = [
    "NameOfCompany",
    "UniqueEntityNumber",
    "CurrentPeriodStartDate",
    "CurrentPeriodEndDate",
    "TypeOfXBRLFiling",
    "TypeOfAccountingStandardUsedToPrepareFinancialStatements",
    "WhetherTheFinancialStatementsArePreparedOnGoingConcernBasis",
    "DescriptionOfPresentationCurrency",
    "LevelOfRoundingUsedInFinancialStatements",
    "DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities",
    "TaxonomyVersion",
    "HowWasXBRLFilePrepared",
]

# Subset kept by the financial statements view
MINIMAL_FILING_INFORMATION_ORDER = [
    "NameOfCompany",
    "UniqueEntityNumber",
    "CurrentPeriodStartDate",
    "CurrentPeriodEndDate",
    "DescriptionOfPresentationCurrency",
    "LevelOfRoundingUsedInFinancialStatements",
]

DIRECTORS_STATEMENT_ORDER = [
    "WhetherInDirectorsOpinionFinancialStatementsAreDrawnUpSoAsToExhibitATrueAndFairView",
    "WhetherThereAreReasonableGroundsToBelieveThatCompanyWillBeAbleToPayItsDebtsAsAndWhenTheyFallDueAtDateOfStatement",
]

AUDIT_REPORT_ORDER = [
    "TypeOfAuditOpinionInIndependentAuditorsReport",
    "AuditingStandardsUsedToConductTheAudit",
    "WhetherThereIsAnyMaterialUncertaintyRelatingToGoingConcern",
    "WhetherInAuditorsOpinionAccountingAndOtherRecordsRequiredAreProperlyKept",
]

# Balance Sheet - ordered: Assets, Liabilities, Equity
CURRENT_ASSETS_ORDER = [
    "CashAndBankBalances",
    "TradeAndOtherReceivablesCurrent",
    "CurrentFinanceLeaseReceivables",
    "CurrentDerivativeFinancialAssets",
    "CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss",
    "OtherCurrentFinancialAssets",
    "DevelopmentProperties",
    "Inventories",
    "OtherCurrentNonfinancialAssets",
    "NoncurrentAssetsOrDisposalGroupsClassifiedAsHeldForSaleOrAsHeldForDistributionToOwners",
    "CurrentAssets",
]

NON_CURRENT_ASSETS_ORDER = [
    "TradeAndOtherReceivablesNoncurrent",
    "NoncurrentFinanceLeaseReceivables",
    "NoncurrentDerivativeFinancialAssets",
    "NoncurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss",
    "OtherNoncurrentFinancialAssets",
    "PropertyPlantAndEquipment",
    "InvestmentProperties",
    "Goodwill",
    "IntangibleAssetsOtherThanGoodwill",
    "InvestmentsInSubsidiariesAssociatesOrJointVentures",
    "DeferredTaxAssets",
    "OtherNoncurrentNonfinancialAssets",
    "NoncurrentAssets",
]

CURRENT_LIABILITIES_ORDER = [
    "TradeAndOtherPayablesCurrent",
    "CurrentLoansAndBorrowings",
    "CurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss",
    "CurrentFinanceLeaseLiabilities",
    "OtherCurrentFinancialLiabilities",
    "CurrentIncomeTaxLiabilities",
    "CurrentProvisions",
    "OtherCurrentNonfinancialLiabilities",
    "LiabilitiesClassifiedAsHeldForSale",
    "CurrentLiabilities",
]

NON_CURRENT_LIABILITIES_ORDER = [
    "TradeAndOtherPayablesNoncurrent",
    "NoncurrentLoansAndBorrowings",
    "NoncurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss",
    "NoncurrentFinanceLeaseLiabilities",
    "OtherNoncurrentFinancialLiabilities",
    "DeferredTaxLiabilities",
    "NoncurrentProvisions",
    "OtherNoncurrentNonfinancialLiabilities",
    "NoncurrentLiabilities",
]

EQUITY_ORDER = [
    "ShareCapital",
    "TreasuryShares",
    "AccumulatedProfitsLosses",
    "ReservesOtherThanAccumulatedProfitsLosses",
    "NoncontrollingInterests",
    "Equity",
]

# Presentation sequence of the statement of financial position.
# Sub-sections are dicts, totals are scalars.
FINANCIAL_POSITION_SECTION_ORDER = [
    "currentAssets",
    "nonCurrentAssets",
    "Assets",
    "currentLiabilities",
    "nonCurrentLiabilities",
    "Liabilities",
    "equity",
]

FINANCIAL_POSITION_SUBSECTIONS: Dict[str, List[str]] = {
    "currentAssets": CURRENT_ASSETS_ORDER,
    "nonCurrentAssets": NON_CURRENT_ASSETS_ORDER,
    "currentLiabilities": CURRENT_LIABILITIES_ORDER,
    "nonCurrentLiabilities": NON_CURRENT_LIABILITIES_ORDER,
    "equity": EQUITY_ORDER,
}

# Income Statement - ordered from top to bottom
INCOME_STATEMENT_ORDER = [
    "Revenue",
    "OtherIncome",
    "EmployeeBenefitsExpense",
    "DepreciationExpense",
    "AmortisationExpense",
    "RepairsAndMaintenanceExpense",
    "SalesAndMarketingExpense",
    "OtherExpensesByNature",
    "OtherGainsLosses",
    "FinanceCosts",
    "ShareOfProfitLossOfAssociatesAndJointVenturesAccountedForUsingEquityMethod",
    "ProfitLossBeforeTaxation",
    "TaxExpenseBenefitContinuingOperations",
    "ProfitLossFromDiscontinuedOperations",
    "ProfitLoss",
    "ProfitLossAttributableToOwnersOfCompany",
    "ProfitLossAttributableToNoncontrollingInterests",
]

SIMPLIFIED_INCOME_STATEMENT_ORDER = [
    "Revenue",
    "OtherIncome",
    "ProfitLossBeforeTaxation",
    "TaxExpenseBenefitContinuingOperations",
    "ProfitLoss",
]

# Cash Flow Statement - operating, investing, financing
CASH_FLOWS_ORDER = [
    "ProfitLossBeforeTaxation",
    "AdjustmentsForDepreciation",
    "AdjustmentsForAmortisation",
    "AdjustmentsForImpairment",
    "AdjustmentsForProvisions",
    "AdjustmentsForOtherNonCashItems",
    "ChangesInWorkingCapital",
    "CashGeneratedFromOperations",
    "InterestPaid",
    "IncomeTaxesPaid",
    "NetCashFromOperatingActivities",
    "PurchaseOfPropertyPlantEquipment",
    "ProceedsFromSaleOfPropertyPlantEquipment",
    "PurchaseOfIntangibleAssets",
    "ProceedsFromSaleOfIntangibleAssets",
    "PurchaseOfInvestments",
    "ProceedsFromSaleOfInvestments",
    "NetCashFromInvestingActivities",
    "ProceedsFromIssueOfShareCapital",
    "PurchaseOfTreasuryShares",
    "ProceedsFromBorrowings",
    "RepaymentOfBorrowings",
    "PaymentOfLeaseLiabilities",
    "DividendsPaid",
    "NetCashFromFinancingActivities",
    "NetIncreaseDecreaseInCashAndCashEquivalents",
    "CashAndCashEquivalentsAtBeginningOfPeriod",
    "CashAndCashEquivalentsAtEndOfPeriod",
]

CHANGES_IN_EQUITY_ORDER = [
    "ShareCapitalAtBeginning",
    "TreasurySharesAtBeginning",
    "AccumulatedProfitsLossesAtBeginning",
    "OtherReservesAtBeginning",
    "NoncontrollingInterestsAtBeginning",
    "TotalEquityAtBeginning",
    "IssueOfShareCapital",
    "PurchaseOfTreasuryShares",
    "ProfitLossForPeriod",
    "OtherComprehensiveIncome",
    "TotalComprehensiveIncome",
    "DividendsDeclared",
    "TransfersToFromReserves",
    "ChangesInNoncontrollingInterests",
    "ShareCapitalAtEnd",
    "TreasurySharesAtEnd",
    "AccumulatedProfitsLossesAtEnd",
    "OtherReservesAtEnd",
    "NoncontrollingInterestsAtEnd",
    "TotalEquityAtEnd",
]

# Notes
TRADE_AND_OTHER_RECEIVABLES_ORDER = [
    "TradeAndOtherReceivablesDueFromThirdParties",
    "TradeAndOtherReceivablesDueFromRelatedParties",
    "UnbilledReceivables",
    "OtherReceivables",
    "TradeAndOtherReceivables",
]

TRADE_AND_OTHER_PAYABLES_ORDER = [
    "TradeAndOtherPayablesDueToThirdParties",
    "TradeAndOtherPayablesDueToRelatedParties",
    "DeferredIncome",
    "OtherPayables",
    "TradeAndOtherPayables",
]

REVENUE_NOTE_ORDER = [
    "RevenueFromPropertyTransferredAtPointInTime",
    "RevenueFromGoodsTransferredAtPointInTime",
    "RevenueFromServicesTransferredAtPointInTime",
    "RevenueFromPropertyTransferredOverTime",
    "RevenueFromConstructionContractsOverTime",
    "RevenueFromServicesTransferredOverTime",
    "OtherRevenue",
    "Revenue",
]

NOTES_ORDER: Dict[str, List[str]] = {
    "tradeAndOtherReceivables": TRADE_AND_OTHER_RECEIVABLES_ORDER,
    "tradeAndOtherPayables": TRADE_AND_OTHER_PAYABLES_ORDER,
    "revenue": REVENUE_NOTE_ORDER,
}

# Top-level sections of a filing document
FILING_SECTION_ORDER = [
    "filingInformation",
    "directorsStatement",
    "auditReport",
    "statementOfFinancialPosition",
    "incomeStatement",
    "statementOfCashFlows",
    "statementOfChangesInEquity",
    "notes",
]


def get_normalized_order(section: str) -> List[str]:
    """
    Get the normalized order array for a filing section.

    Args:
        section: Section key, e.g. "incomeStatement" or "currentAssets"

    Returns:
        List of element names in canonical order (empty list if unknown)
    """
    mapping: Dict[str, List[str]] = {
        "filingInformation": FILING_INFORMATION_ORDER,
        "directorsStatement": DIRECTORS_STATEMENT_ORDER,
        "auditReport": AUDIT_REPORT_ORDER,
        "incomeStatement": INCOME_STATEMENT_ORDER,
        "statementOfCashFlows": CASH_FLOWS_ORDER,
        "statementOfChangesInEquity": CHANGES_IN_EQUITY_ORDER,
        **FINANCIAL_POSITION_SUBSECTIONS,
        **NOTES_ORDER,
    }
    return mapping.get(section, [])

"""
filing.py — Full simplified-XBRL filing document.

Purpose:
- Model a complete ACRA filing (filing information, directors' statement,
  audit report, primary statements and notes) using the taxonomy element
  names as keys. This is the shape the framework views read.
- Statement sections are strict: unknown elements are reported, not dropped.

Amounts may be negative (losses, treasury shares, net finance income).

This module does NOT:
- Check the accounting equation (see validation.balance).
"""

from __future__ import annotations

from typing import Annotated, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from acra_statements.schema.fields import (
    CurrencyCode,
    DateISO8601,
    MonetaryAmount,
    OptionalMonetaryAmount,
    optional_amount,
)

UEN_PATTERN = r"^\d{8,9}[A-Z]$"

AccountingStandard = Literal["SFRS", "SFRS for SE", "IFRS", "Other"]
AuditOpinion = Literal["Unqualified", "Qualified", "Adverse", "Disclaimer"]


class _FilingSection(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class _StrictStatementSection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# FILING INFORMATION
# =============================================================================

class FilingInformation(_FilingSection):
    """Basic information about the entity and the filing."""
    NameOfCompany: Annotated[str, Field(min_length=1)]
    UniqueEntityNumber: Annotated[str, Field(pattern=UEN_PATTERN)]
    CurrentPeriodStartDate: DateISO8601
    CurrentPeriodEndDate: DateISO8601
    PriorPeriodStartDate: Optional[DateISO8601] = None
    TypeOfXBRLFiling: Literal["Full", "Partial"]
    NatureOfFinancialStatementsCompanyLevelOrConsolidated: Literal["Company", "Consolidated"]
    TypeOfAccountingStandardUsedToPrepareFinancialStatements: AccountingStandard
    DateOfAuthorisationForIssueOfFinancialStatements: DateISO8601
    TypeOfStatementOfFinancialPosition: Literal["Classified", "Liquidity-based"]
    WhetherTheFinancialStatementsArePreparedOnGoingConcernBasis: bool
    WhetherThereAreAnyChangesToComparativeAmounts: Optional[bool] = None
    DescriptionOfPresentationCurrency: CurrencyCode
    DescriptionOfFunctionalCurrency: CurrencyCode
    LevelOfRoundingUsedInFinancialStatements: Literal["Thousands", "Millions", "Units"]
    DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities: Annotated[
        str, Field(min_length=20, max_length=100)
    ]
    PrincipalPlaceOfBusinessIfDifferentFromRegisteredOffice: str
    WhetherCompanyOrGroupIfConsolidatedAccountsArePreparedHasMoreThan50Employees: bool
    NameOfParentEntity: Optional[str] = None
    NameOfUltimateParentOfGroup: Optional[str] = None
    TaxonomyVersion: Literal["2022.2"]
    NameAndVersionOfSoftwareUsedToGenerateXBRLFile: str
    HowWasXBRLFilePrepared: Literal["Automated", "Manual", "Hybrid"] = "Automated"


class DirectorsStatement(_FilingSection):
    WhetherInDirectorsOpinionFinancialStatementsAreDrawnUpSoAsToExhibitATrueAndFairView: bool
    WhetherThereAreReasonableGroundsToBelieveThatCompanyWillBeAbleToPayItsDebtsAsAndWhenTheyFallDueAtDateOfStatement: bool


class AuditReport(_FilingSection):
    TypeOfAuditOpinionInIndependentAuditorsReport: AuditOpinion
    AuditingStandardsUsedToConductTheAudit: Optional[str] = None
    WhetherThereIsAnyMaterialUncertaintyRelatingToGoingConcern: Optional[bool] = None
    WhetherInAuditorsOpinionAccountingAndOtherRecordsRequiredAreProperlyKept: Optional[bool] = None


# =============================================================================
# STATEMENT OF FINANCIAL POSITION
# =============================================================================

class FilingCurrentAssets(_StrictStatementSection):
    CashAndBankBalances: OptionalMonetaryAmount = optional_amount()
    TradeAndOtherReceivablesCurrent: OptionalMonetaryAmount = optional_amount()
    CurrentFinanceLeaseReceivables: OptionalMonetaryAmount = optional_amount()
    CurrentDerivativeFinancialAssets: OptionalMonetaryAmount = optional_amount()
    CurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss: OptionalMonetaryAmount = optional_amount()
    OtherCurrentFinancialAssets: OptionalMonetaryAmount = optional_amount()
    DevelopmentProperties: OptionalMonetaryAmount = optional_amount()
    Inventories: OptionalMonetaryAmount = optional_amount()
    OtherCurrentNonfinancialAssets: OptionalMonetaryAmount = optional_amount()
    NoncurrentAssetsOrDisposalGroupsClassifiedAsHeldForSaleOrAsHeldForDistributionToOwners: OptionalMonetaryAmount = (
        optional_amount()
    )
    CurrentAssets: MonetaryAmount


class FilingNonCurrentAssets(_StrictStatementSection):
    TradeAndOtherReceivablesNoncurrent: OptionalMonetaryAmount = optional_amount()
    NoncurrentFinanceLeaseReceivables: OptionalMonetaryAmount = optional_amount()
    NoncurrentDerivativeFinancialAssets: OptionalMonetaryAmount = optional_amount()
    NoncurrentFinancialAssetsMeasuredAtFairValueThroughProfitOrLoss: OptionalMonetaryAmount = optional_amount()
    OtherNoncurrentFinancialAssets: OptionalMonetaryAmount = optional_amount()
    PropertyPlantAndEquipment: OptionalMonetaryAmount = optional_amount()
    InvestmentProperties: OptionalMonetaryAmount = optional_amount()
    Goodwill: OptionalMonetaryAmount = optional_amount()
    IntangibleAssetsOtherThanGoodwill: OptionalMonetaryAmount = optional_amount()
    InvestmentsInSubsidiariesAssociatesOrJointVentures: OptionalMonetaryAmount = optional_amount()
    DeferredTaxAssets: OptionalMonetaryAmount = optional_amount()
    OtherNoncurrentNonfinancialAssets: OptionalMonetaryAmount = optional_amount()
    NoncurrentAssets: MonetaryAmount


class FilingCurrentLiabilities(_StrictStatementSection):
    TradeAndOtherPayablesCurrent: OptionalMonetaryAmount = optional_amount()
    CurrentLoansAndBorrowings: OptionalMonetaryAmount = optional_amount()
    CurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss: OptionalMonetaryAmount = optional_amount()
    CurrentFinanceLeaseLiabilities: OptionalMonetaryAmount = optional_amount()
    OtherCurrentFinancialLiabilities: OptionalMonetaryAmount = optional_amount()
    CurrentIncomeTaxLiabilities: OptionalMonetaryAmount = optional_amount()
    CurrentProvisions: OptionalMonetaryAmount = optional_amount()
    OtherCurrentNonfinancialLiabilities: OptionalMonetaryAmount = optional_amount()
    LiabilitiesClassifiedAsHeldForSale: OptionalMonetaryAmount = optional_amount()
    CurrentLiabilities: MonetaryAmount


class FilingNonCurrentLiabilities(_StrictStatementSection):
    TradeAndOtherPayablesNoncurrent: OptionalMonetaryAmount = optional_amount()
    NoncurrentLoansAndBorrowings: OptionalMonetaryAmount = optional_amount()
    NoncurrentFinancialLiabilitiesMeasuredAtFairValueThroughProfitOrLoss: OptionalMonetaryAmount = optional_amount()
    NoncurrentFinanceLeaseLiabilities: OptionalMonetaryAmount = optional_amount()
    OtherNoncurrentFinancialLiabilities: OptionalMonetaryAmount = optional_amount()
    DeferredTaxLiabilities: OptionalMonetaryAmount = optional_amount()
    NoncurrentProvisions: OptionalMonetaryAmount = optional_amount()
    OtherNoncurrentNonfinancialLiabilities: OptionalMonetaryAmount = optional_amount()
    NoncurrentLiabilities: MonetaryAmount


class FilingEquity(_StrictStatementSection):
    ShareCapital: MonetaryAmount
    TreasuryShares: OptionalMonetaryAmount = optional_amount()
    AccumulatedProfitsLosses: MonetaryAmount
    ReservesOtherThanAccumulatedProfitsLosses: OptionalMonetaryAmount = optional_amount()
    NoncontrollingInterests: OptionalMonetaryAmount = optional_amount()
    Equity: MonetaryAmount


class StatementOfFinancialPosition(_StrictStatementSection):
    currentAssets: FilingCurrentAssets
    nonCurrentAssets: FilingNonCurrentAssets
    Assets: MonetaryAmount
    currentLiabilities: FilingCurrentLiabilities
    nonCurrentLiabilities: FilingNonCurrentLiabilities
    Liabilities: MonetaryAmount
    equity: FilingEquity


# =============================================================================
# INCOME STATEMENT AND NOTES
# =============================================================================

class FilingIncomeStatement(_StrictStatementSection):
    Revenue: MonetaryAmount
    OtherIncome: OptionalMonetaryAmount = optional_amount()
    EmployeeBenefitsExpense: OptionalMonetaryAmount = optional_amount()
    DepreciationExpense: OptionalMonetaryAmount = optional_amount()
    AmortisationExpense: OptionalMonetaryAmount = optional_amount()
    RepairsAndMaintenanceExpense: OptionalMonetaryAmount = optional_amount()
    SalesAndMarketingExpense: OptionalMonetaryAmount = optional_amount()
    OtherExpensesByNature: OptionalMonetaryAmount = optional_amount()
    OtherGainsLosses: OptionalMonetaryAmount = optional_amount()
    FinanceCosts: OptionalMonetaryAmount = optional_amount()
    ShareOfProfitLossOfAssociatesAndJointVenturesAccountedForUsingEquityMethod: OptionalMonetaryAmount = (
        optional_amount()
    )
    ProfitLossBeforeTaxation: MonetaryAmount
    TaxExpenseBenefitContinuingOperations: MonetaryAmount
    ProfitLossFromDiscontinuedOperations: OptionalMonetaryAmount = optional_amount()
    ProfitLoss: MonetaryAmount
    ProfitLossAttributableToOwnersOfCompany: MonetaryAmount
    ProfitLossAttributableToNoncontrollingInterests: OptionalMonetaryAmount = optional_amount()


class FilingReceivablesNote(_StrictStatementSection):
    TradeAndOtherReceivablesDueFromThirdParties: OptionalMonetaryAmount = optional_amount()
    TradeAndOtherReceivablesDueFromRelatedParties: OptionalMonetaryAmount = optional_amount()
    UnbilledReceivables: OptionalMonetaryAmount = optional_amount()
    OtherReceivables: OptionalMonetaryAmount = optional_amount()
    TradeAndOtherReceivables: MonetaryAmount


class FilingPayablesNote(_StrictStatementSection):
    TradeAndOtherPayablesDueToThirdParties: OptionalMonetaryAmount = optional_amount()
    TradeAndOtherPayablesDueToRelatedParties: OptionalMonetaryAmount = optional_amount()
    DeferredIncome: OptionalMonetaryAmount = optional_amount()
    OtherPayables: OptionalMonetaryAmount = optional_amount()
    TradeAndOtherPayables: MonetaryAmount


class FilingRevenueNote(_StrictStatementSection):
    RevenueFromPropertyTransferredAtPointInTime: OptionalMonetaryAmount = optional_amount()
    RevenueFromGoodsTransferredAtPointInTime: OptionalMonetaryAmount = optional_amount()
    RevenueFromServicesTransferredAtPointInTime: OptionalMonetaryAmount = optional_amount()
    RevenueFromPropertyTransferredOverTime: OptionalMonetaryAmount = optional_amount()
    RevenueFromConstructionContractsOverTime: OptionalMonetaryAmount = optional_amount()
    RevenueFromServicesTransferredOverTime: OptionalMonetaryAmount = optional_amount()
    OtherRevenue: OptionalMonetaryAmount = optional_amount()
    Revenue: MonetaryAmount


class FilingNotes(_FilingSection):
    tradeAndOtherReceivables: FilingReceivablesNote
    tradeAndOtherPayables: FilingPayablesNote
    revenue: FilingRevenueNote


# =============================================================================
# DOCUMENT
# =============================================================================

class FilingDocument(BaseModel):
    """Comprehensive filing compliant with Singapore simplified XBRL requirements."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    filingInformation: FilingInformation
    directorsStatement: DirectorsStatement
    auditReport: AuditReport
    statementOfFinancialPosition: StatementOfFinancialPosition
    incomeStatement: FilingIncomeStatement
    notes: FilingNotes
    statementOfCashFlows: Optional[Dict[str, OptionalMonetaryAmount]] = None
    statementOfChangesInEquity: Optional[Dict[str, OptionalMonetaryAmount]] = None

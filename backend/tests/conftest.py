"""
Shared statement and filing fixtures.

The balance sheet figures reconcile exactly:
    assets 1,835,156 = liabilities 553,000 + equity 1,282,156
"""

from typing import Any, Dict

import pytest


@pytest.fixture
def balance_sheet() -> Dict[str, Any]:
    """Classified (current/non-current) balance sheet envelope."""
    return {
        "statementType": "currentNonCurrent",
        "consolidatedAndSeparate": "Separate",
        "periodDate": "2024-12-31",
        "assets": {
            "currentAssets": {
                "cashAndBankBalances": 400000,
                "tradeAndOtherReceivables": 335156,
                "inventoriesOthers": 100000,
                "totalCurrentAssets": 835156,
            },
            "nonCurrentAssets": {
                "propertyPlantAndEquipment": 1000000,
                "totalNonCurrentAssets": 1000000,
            },
            "totalAssets": 1835156,
        },
        "liabilities": {
            "currentLiabilities": {
                "tradeAndOtherPayables": 353000,
                "totalCurrentLiabilities": 353000,
            },
            "nonCurrentLiabilities": {
                "loansAndBorrowings": 200000,
                "totalNonCurrentLiabilities": 200000,
            },
            "totalLiabilities": 553000,
        },
        "equity": {
            "shareCapital": 1000000,
            "accumulatedProfitsLosses": 282156,
            "totalEquity": 1282156,
        },
    }


@pytest.fixture
def liquidity_balance_sheet() -> Dict[str, Any]:
    """Balance sheet presented in order of liquidity, with open asset/liability maps."""
    return {
        "statementType": "orderOfLiquidity",
        "consolidatedAndSeparate": "Consolidated",
        "assets": {
            "cashAndBankBalances": 900000,
            "loansToCustomers": {"secured": 400000, "unsecured": 200000},
            "totalAssets": 1500000,
        },
        "liabilities": {
            "depositsFromCustomers": 1000000,
            "totalLiabilities": 1000000,
        },
        "equity": {
            "shareCapital": 300000,
            "accumulatedProfitsLosses": 200000,
            "totalEquity": 500000,
        },
    }


@pytest.fixture
def income_statement() -> Dict[str, Any]:
    return {
        "statementType": "incomeStatement",
        "consolidatedAndSeparate": "Separate",
        "periodDate": "2024-12-31",
        "revenue": 2000000,
        "financeNetCosts": 10000,
        "profitLossBeforeTaxation": 300000,
        "incomeTaxExpenseBenefit": 51000,
        "totalProfitLoss": 249000,
        "profitLossAttributableTo": {"ownersOfCompany": 249000},
    }


@pytest.fixture
def filing() -> Dict[str, Any]:
    """Complete filing document using taxonomy element names."""
    return {
        "filingInformation": {
            "NameOfCompany": "Acme Components Pte. Ltd.",
            "UniqueEntityNumber": "201912345K",
            "CurrentPeriodStartDate": "2024-01-01",
            "CurrentPeriodEndDate": "2024-12-31",
            "TypeOfXBRLFiling": "Full",
            "NatureOfFinancialStatementsCompanyLevelOrConsolidated": "Company",
            "TypeOfAccountingStandardUsedToPrepareFinancialStatements": "SFRS",
            "DateOfAuthorisationForIssueOfFinancialStatements": "2025-03-15",
            "TypeOfStatementOfFinancialPosition": "Classified",
            "WhetherTheFinancialStatementsArePreparedOnGoingConcernBasis": True,
            "WhetherThereAreAnyChangesToComparativeAmounts": False,
            "DescriptionOfPresentationCurrency": "SGD",
            "DescriptionOfFunctionalCurrency": "SGD",
            "LevelOfRoundingUsedInFinancialStatements": "Units",
            "DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities": (
                "Wholesale of electronic components and accessories"
            ),
            "PrincipalPlaceOfBusinessIfDifferentFromRegisteredOffice": "Same as registered office",
            "WhetherCompanyOrGroupIfConsolidatedAccountsArePreparedHasMoreThan50Employees": False,
            "NameOfParentEntity": None,
            "NameOfUltimateParentOfGroup": None,
            "TaxonomyVersion": "2022.2",
            "NameAndVersionOfSoftwareUsedToGenerateXBRLFile": "acra-statements 0.1.0",
            "HowWasXBRLFilePrepared": "Automated",
        },
        "directorsStatement": {
            "WhetherInDirectorsOpinionFinancialStatementsAreDrawnUpSoAsToExhibitATrueAndFairView": True,
            "WhetherThereAreReasonableGroundsToBelieveThatCompanyWillBeAbleToPayItsDebtsAsAndWhenTheyFallDueAtDateOfStatement": True,
        },
        "auditReport": {
            "TypeOfAuditOpinionInIndependentAuditorsReport": "Unqualified",
            "AuditingStandardsUsedToConductTheAudit": "Singapore Standards on Auditing",
            "WhetherThereIsAnyMaterialUncertaintyRelatingToGoingConcern": False,
            "WhetherInAuditorsOpinionAccountingAndOtherRecordsRequiredAreProperlyKept": True,
        },
        "statementOfFinancialPosition": {
            "currentAssets": {
                "CashAndBankBalances": 400000,
                "TradeAndOtherReceivablesCurrent": 335156,
                "Inventories": 100000,
                "CurrentAssets": 835156,
            },
            "nonCurrentAssets": {
                "PropertyPlantAndEquipment": 1000000,
                "NoncurrentAssets": 1000000,
            },
            "Assets": 1835156,
            "currentLiabilities": {
                "TradeAndOtherPayablesCurrent": 353000,
                "CurrentLiabilities": 353000,
            },
            "nonCurrentLiabilities": {
                "NoncurrentLoansAndBorrowings": 200000,
                "NoncurrentLiabilities": 200000,
            },
            "Liabilities": 553000,
            "equity": {
                "ShareCapital": 1000000,
                "AccumulatedProfitsLosses": 282156,
                "Equity": 1282156,
            },
        },
        "incomeStatement": {
            "Revenue": 2000000,
            "FinanceCosts": 10000,
            "ProfitLossBeforeTaxation": 300000,
            "TaxExpenseBenefitContinuingOperations": 51000,
            "ProfitLoss": 249000,
            "ProfitLossAttributableToOwnersOfCompany": 249000,
        },
        "statementOfCashFlows": {
            "NetCashFromOperatingActivities": 250000,
            "NetCashFromInvestingActivities": -50000,
            "NetCashFromFinancingActivities": -20000,
        },
        "notes": {
            "tradeAndOtherReceivables": {"TradeAndOtherReceivables": 335156},
            "tradeAndOtherPayables": {"TradeAndOtherPayables": 353000},
            "revenue": {
                "RevenueFromGoodsTransferredAtPointInTime": 2000000,
                "Revenue": 2000000,
            },
        },
    }

"""
compliance.py — Compliance-focused framework view.

Purpose:
- Filing information, directors' statement and audit report side by side.
- A simple compliance score out of 10 points:

    Audit opinion unqualified ................ 3
    Prepared on going concern basis .......... 1
    No material going-concern uncertainty .... 2
    Proper accounting records kept ........... 1
    Directors: true and fair view ............ 1
    Directors: company can pay its debts ..... 2

  Level: High (>= 90%), Medium (>= 70%), Low otherwise.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from acra_statements.core.normalized_order import (
    AUDIT_REPORT_ORDER,
    DIRECTORS_STATEMENT_ORDER,
    FILING_INFORMATION_ORDER,
)
from acra_statements.services.projection.common import add_metadata, section
from acra_statements.services.projection.frameworks import FrameworkError
from acra_statements.utils.tree import fill_template

AUDIT_OPINION = "TypeOfAuditOpinionInIndependentAuditorsReport"
AUDITING_STANDARDS = "AuditingStandardsUsedToConductTheAudit"
GOING_CONCERN_UNCERTAINTY = "WhetherThereIsAnyMaterialUncertaintyRelatingToGoingConcern"
RECORDS_KEPT = "WhetherInAuditorsOpinionAccountingAndOtherRecordsRequiredAreProperlyKept"
TRUE_AND_FAIR = "WhetherInDirectorsOpinionFinancialStatementsAreDrawnUpSoAsToExhibitATrueAndFairView"
SOLVENCY = (
    "WhetherThereAreReasonableGroundsToBelieveThatCompanyWillBeAbleToPayItsDebtsAsAndWhenTheyFallDueAtDateOfStatement"
)
GOING_CONCERN_BASIS = "WhetherTheFinancialStatementsArePreparedOnGoingConcernBasis"

HIGH_COMPLIANCE_PERCENT = 90
MEDIUM_COMPLIANCE_PERCENT = 70


def compliance_statements(document: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "directorsStatement": fill_template(DIRECTORS_STATEMENT_ORDER, document.get("directorsStatement")),
        "auditReport": fill_template(AUDIT_REPORT_ORDER, document.get("auditReport")),
    }


def audit_information(audit_report: Mapping[str, Any]) -> Dict[str, Any]:
    info = fill_template(AUDIT_REPORT_ORDER, audit_report)
    info["auditAssessment"] = {
        "qualifiedOrUnqualified": (
            "Unqualified" if audit_report.get(AUDIT_OPINION) == "Unqualified" else "Qualified or Other"
        ),
        "hasGoingConcernIssue": audit_report.get(GOING_CONCERN_UNCERTAINTY),
        "properRecordsKept": audit_report.get(RECORDS_KEPT),
    }
    return info


def compliance_issues(document: Mapping[str, Any]) -> List[str]:
    """Plain-language list of compliance concerns found in the filing."""
    audit_report = section(document, "auditReport") or {}
    directors = section(document, "directorsStatement") or {}

    issues: List[str] = []
    if audit_report.get(AUDIT_OPINION) != "Unqualified":
        issues.append("Audit opinion is not unqualified")
    if audit_report.get(GOING_CONCERN_UNCERTAINTY):
        issues.append("Material uncertainty related to going concern")
    if audit_report.get(RECORDS_KEPT) is False:
        issues.append("Accounting and other records not properly kept")
    if directors.get(TRUE_AND_FAIR) is False:
        issues.append("Directors opinion does not confirm true and fair view")
    if directors.get(SOLVENCY) is False:
        issues.append("Solvency concerns noted in directors statement")
    return issues


def compliance_metrics(document: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Score the filing's compliance indicators.

    Returns:
        {"complianceScore", "maxPoints", "compliancePercentage",
         "complianceLevel", "keyIssues"}
    """
    info = section(document, "filingInformation") or {}
    audit_report = section(document, "auditReport") or {}
    directors = section(document, "directorsStatement") or {}

    # (points, condition)
    checks = [
        (3, audit_report.get(AUDIT_OPINION) == "Unqualified"),
        (1, bool(info.get(GOING_CONCERN_BASIS))),
        (2, audit_report.get(GOING_CONCERN_UNCERTAINTY) is False),
        (1, bool(audit_report.get(RECORDS_KEPT))),
        (1, bool(directors.get(TRUE_AND_FAIR))),
        (2, bool(directors.get(SOLVENCY))),
    ]
    score = sum(points for points, passed in checks if passed)
    max_points = sum(points for points, _ in checks)
    percentage = int(score * 100 / max_points + 0.5) if max_points else 0

    if percentage >= HIGH_COMPLIANCE_PERCENT:
        level = "High"
    elif percentage >= MEDIUM_COMPLIANCE_PERCENT:
        level = "Medium"
    else:
        level = "Low"

    return {
        "complianceScore": score,
        "maxPoints": max_points,
        "compliancePercentage": percentage,
        "complianceLevel": level,
        "keyIssues": compliance_issues(document),
    }


def compliance_status(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Compliance indicators grouped by source, used by the analytical view."""
    info = section(document, "filingInformation") or {}
    audit_report = section(document, "auditReport") or {}
    directors = section(document, "directorsStatement") or {}
    return {
        "filingCompliance": {
            "filingType": info.get("TypeOfXBRLFiling"),
            "accountingStandards": info.get("TypeOfAccountingStandardUsedToPrepareFinancialStatements"),
            "goingConcern": info.get(GOING_CONCERN_BASIS),
            "comparativeChanges": info.get("WhetherThereAreAnyChangesToComparativeAmounts"),
            "taxonomyVersion": info.get("TaxonomyVersion"),
            "preparationMethod": info.get("HowWasXBRLFilePrepared"),
        },
        "auditCompliance": {
            "auditOpinion": audit_report.get(AUDIT_OPINION),
            "auditingStandards": audit_report.get(AUDITING_STANDARDS),
            "goingConcernIssue": audit_report.get(GOING_CONCERN_UNCERTAINTY),
            "properRecordsKept": audit_report.get(RECORDS_KEPT),
        },
        "directorsCompliance": {
            "trueFairView": directors.get(TRUE_AND_FAIR),
            "solvencyStatement": directors.get(SOLVENCY),
        },
    }


def compliance_view(document: Mapping[str, Any]) -> Dict[str, Any]:
    info = section(document, "filingInformation")
    audit_report = section(document, "auditReport")
    directors = section(document, "directorsStatement")
    if info is None and audit_report is None and directors is None:
        raise FrameworkError("no filing information, directors' statement or audit report to assess")

    view = {
        "filingInformation": fill_template(FILING_INFORMATION_ORDER, info),
        "complianceStatements": compliance_statements(document),
        "auditInformation": audit_information(audit_report or {}),
        "complianceMetrics": compliance_metrics(document),
    }
    return add_metadata(
        view,
        "Compliance-Focused Framework",
        "Directors' Statement, Auditor's Report, Regulatory Disclosures",
        standard="Regulatory Compliance",
    )

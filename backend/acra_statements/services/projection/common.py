"""
common.py — Helpers shared by the framework views.

Every helper reads defensively: a missing or malformed sub-tree gives None
leaves, never an exception.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from acra_statements.utils.tree import get_in

METADATA_KEY = "_frameworkMetadata"


def add_metadata(view: Dict[str, Any], name: str, description: str, **extra: Any) -> Dict[str, Any]:
    """
    Attach _frameworkMetadata to a view.

    Args:
        view: Projected sections
        name: Framework display name
        description: One-line description
        **extra: Additional metadata (standard, industry, ...)

    Returns:
        The same view, with sections listing its keys
    """
    view[METADATA_KEY] = {
        "name": name,
        "description": description,
        "sections": [key for key in view if key != METADATA_KEY],
        **extra,
    }
    return view


def section(document: Mapping[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """Top-level section if it is a mapping, else None."""
    value = document.get(key)
    return value if isinstance(value, Mapping) else None


def company_info(document: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Minimal company identification, or None when there is no filing information."""
    info = section(document, "filingInformation")
    if info is None:
        return None
    return {
        "NameOfCompany": info.get("NameOfCompany"),
        "UniqueEntityNumber": info.get("UniqueEntityNumber"),
        "ReportingPeriod": f"{info.get('CurrentPeriodStartDate') or ''} to {info.get('CurrentPeriodEndDate') or ''}",
        "PresentationCurrency": info.get("DescriptionOfPresentationCurrency"),
        "AccountingStandard": info.get("TypeOfAccountingStandardUsedToPrepareFinancialStatements"),
        "PrincipalActivities": info.get("DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities"),
    }


def position_value(document: Mapping[str, Any], path: str) -> Any:
    return get_in(document, f"statementOfFinancialPosition.{path}")


def income_value(document: Mapping[str, Any], key: str) -> Any:
    return get_in(document, f"incomeStatement.{key}")

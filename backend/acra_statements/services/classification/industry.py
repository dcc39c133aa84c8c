"""
industry.py — Heuristic industry classifier.

Purpose:
- classify_industry(statement): map the principal-activities text and the
  balance-sheet shape of a filing to one industry tag.

Algorithm:
1. Keyword pass over the lower-cased principal-activities description,
   in priority order financial-services -> real-estate -> manufacturing
   -> retail. First match wins.
2. Shape pass in the same order: material fair-value financial assets ->
   financial-services; material investment properties -> real-estate; inventories
   and PP&E -> manufacturing; inventories alone -> retail.
3. Otherwise "generic".

This module does NOT:
- Raise. Anything unexpected degrades to "generic".
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Sequence, Tuple

from acra_statements.core.config import settings
from acra_statements.core.logging import get_logger
from acra_statements.schema.taxonomy import as_filing_document
from acra_statements.services.classification.keywords import IndustryKeywordTable, get_keyword_table
from acra_statements.services.metrics.figures import FinancialFigures, extract_figures
from acra_statements.utils.tree import get_in

logger = get_logger(__name__)

IndustryTag = Literal["financial-services", "real-estate", "manufacturing", "retail", "generic"]

INDUSTRY_TAGS: Tuple[str, ...] = ("financial-services", "real-estate", "manufacturing", "retail", "generic")

PRINCIPAL_ACTIVITIES_PATH = "filingInformation.DescriptionOfNatureOfEntitysOperationsAndPrincipalActivities"


def _normalize_label(label: Optional[str]) -> str:
    """Normalize free text for matching (lowercase, strip)."""
    if not label or not isinstance(label, str):
        return ""
    return label.lower().strip()


def _label_contains(label: Optional[str], keywords: Sequence[str]) -> bool:
    """True if the normalized label contains any keyword."""
    normalized = _normalize_label(label)
    if not normalized:
        return False
    return any(keyword in normalized for keyword in keywords)


def _non_zero(value: Optional[float]) -> bool:
    return value is not None and value != 0


def _classify_by_keywords(description: Optional[str], table: IndustryKeywordTable) -> Optional[str]:
    for tag, keywords in table.in_priority_order():
        if _label_contains(description, keywords):
            return tag
    return None


def _material(value: Optional[float], total_assets: Optional[float], ratio: float) -> bool:
    """Non-zero and at least ratio x |total_assets| (any non-zero value when assets are unknown)."""
    if not _non_zero(value):
        return False
    if not _non_zero(total_assets):
        return True
    return abs(value) >= abs(total_assets) * ratio


def _classify_by_shape(fig: FinancialFigures) -> Optional[str]:
    ratio = settings.INDUSTRY_SHAPE_MATERIALITY_RATIO
    if _material(fig.fair_value_financial_assets, fig.total_assets, ratio):
        return "financial-services"
    if _material(fig.investment_properties, fig.total_assets, ratio):
        return "real-estate"
    if _non_zero(fig.inventories) and _non_zero(fig.property_plant_equipment):
        return "manufacturing"
    if _non_zero(fig.inventories):
        return "retail"
    return None


def classify_industry(statement: Any, keyword_table: Optional[IndustryKeywordTable] = None) -> IndustryTag:
    """
    Classify a statement or filing document into an industry tag.

    Args:
        statement: Filing document (model or dict), envelope, or list of envelopes
        keyword_table: Keyword lists to use (default: settings-selected table)

    Returns:
        One of INDUSTRY_TAGS
    """
    try:
        table = keyword_table or get_keyword_table()
        document = as_filing_document(statement)

        tag = _classify_by_keywords(get_in(document, PRINCIPAL_ACTIVITIES_PATH), table)
        if tag:
            logger.debug(f"Industry from principal activities: {tag}")
            return tag

        tag = _classify_by_shape(extract_figures(document))
        if tag:
            logger.debug(f"Industry from balance sheet shape: {tag}")
            return tag
    except Exception as exc:
        logger.warning(f"Industry classification failed, using generic: {exc}")
    return "generic"

"""
projector.py — Dispatch a canonical statement to a framework view.

Purpose:
- project(canonical, framework_id): deep-copy the input (any shape accepted
  by as_filing_document), resolve the framework id, run its view.

Rules:
- The caller's object is never mutated; every call works on a private copy.
- Unknown ids fall back to the default view (with a warning).
- Any exception inside a view is logged and turned into the copied input
  annotated with an "Error Processing Framework" _frameworkMetadata.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import BaseModel

from acra_statements.core.logging import get_logger
from acra_statements.schema.taxonomy import as_filing_document
from acra_statements.services.classification.keywords import IndustryKeywordTable
from acra_statements.services.projection.analytical import analytical_view, business_profile_view
from acra_statements.services.projection.common import METADATA_KEY
from acra_statements.services.projection.compliance import compliance_view
from acra_statements.services.projection.frameworks import FRAMEWORK_IDS, FrameworkError, resolve_framework_id
from acra_statements.services.projection.industry import banking_view, industry_specific_view, insurance_view
from acra_statements.services.projection.statements import (
    default_view,
    financial_statements_view,
    regulatory_view,
    sfrs_full_view,
    simplified_view,
)
from acra_statements.utils.numeric import type_name
from acra_statements.utils.tree import deep_copy

logger = get_logger(__name__)

ViewFn = Callable[..., Dict[str, Any]]

VIEWS: Dict[str, ViewFn] = {
    "sfrs-full": sfrs_full_view,
    "financial-statements": financial_statements_view,
    "sfrs-simplified": simplified_view,
    "compliance-focused": compliance_view,
    "analytical": analytical_view,
    "business-profile": business_profile_view,
    "industry-specific": industry_specific_view,
    "industry-banking": banking_view,
    "industry-insurance": insurance_view,
    "regulatory-reporting": regulatory_view,
    "default": default_view,
}

# Views that take the classifier keyword table
CLASSIFYING_VIEWS = {"business-profile", "industry-specific"}

if set(VIEWS) != set(FRAMEWORK_IDS):
    raise RuntimeError(f"framework views out of sync: {sorted(set(VIEWS) ^ set(FRAMEWORK_IDS))}")


def error_view(document: Dict[str, Any], framework_id: Any, exc: Exception) -> Dict[str, Any]:
    """The copied input annotated with the failure."""
    view = dict(document)
    view[METADATA_KEY] = {
        "name": "Error Processing Framework",
        "description": f"An error occurred while processing the {framework_id} framework. Showing original data.",
        "sections": [key for key in view if key != METADATA_KEY],
        "error": str(exc),
    }
    return view


def _raw_copy(canonical: Any) -> Dict[str, Any]:
    """The input as a plain dict, without lifting envelopes."""
    if isinstance(canonical, BaseModel):
        return canonical.model_dump(by_alias=True, mode="json")
    if isinstance(canonical, Mapping):
        return deep_copy(dict(canonical))
    if isinstance(canonical, (list, tuple)):
        return {"statements": deep_copy(list(canonical))}
    return {}


def _check_input(canonical: Any) -> None:
    if not isinstance(canonical, (Mapping, BaseModel, list, tuple)):
        raise FrameworkError(f"cannot project {type_name(canonical)} input")


def project(
    canonical: Any,
    framework_id: Any,
    keyword_table: Optional[IndustryKeywordTable] = None,
) -> Dict[str, Any]:
    """
    Reshape a canonical statement into a framework view.

    Args:
        canonical: FilingDocument / envelope model, list of envelopes, or dict
        framework_id: Framework id or alias (see frameworks.list_frameworks)
        keyword_table: Classifier keywords for the industry-aware views

    Returns:
        New dict with the view's sections and _frameworkMetadata
    """
    resolved = resolve_framework_id(framework_id)
    try:
        _check_input(canonical)
        document = as_filing_document(canonical)
        view_fn = VIEWS[resolved]
        if resolved in CLASSIFYING_VIEWS:
            view = view_fn(document, keyword_table)
        else:
            view = view_fn(document)
    except Exception as exc:
        logger.exception(f"Framework {resolved} failed: {exc}")
        return error_view(_raw_copy(canonical), framework_id, exc)

    logger.debug(f"Projected {resolved} with sections {view[METADATA_KEY]['sections']}")
    return view


def project_all(
    canonical: Any,
    framework_ids: Optional[List[str]] = None,
    keyword_table: Optional[IndustryKeywordTable] = None,
) -> Dict[str, Dict[str, Any]]:
    """Project one document into several frameworks (all by default), keyed by id."""
    ids = framework_ids or list(FRAMEWORK_IDS)
    return {framework_id: project(canonical, framework_id, keyword_table) for framework_id in ids}

"""
statements.py — Statement Envelope API Endpoints

Purpose:
- Validate a single statement envelope (tagged by `statementType`).
- Classify a statement or filing into an industry tag.
- Compute financial ratios for a filing document.

Endpoints:
- POST /statements/validate → ValidationSuccess (200) or ValidationFailure (422)
- POST /statements/classify → {"industry": tag}
- POST /statements/ratios   → grouped ratio payload

This file should be thin; validation, classification and ratio logic live
in the validation and services packages.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query
from pydantic import BaseModel

from acra_statements.api.v1._responses import validation_response
from acra_statements.core.logging import get_logger
from acra_statements.services.classification import IndustryTag, classify_industry
from acra_statements.services.metrics import calculate_financial_ratios
from acra_statements.validation import validate_statement

logger = get_logger(__name__)

router = APIRouter(
    prefix="/statements",
    tags=["statements"]
)

# -----------------------------------------------------------------------------
# Schemas
# -----------------------------------------------------------------------------

class IndustryResponse(BaseModel):
    """Response schema for the industry classifier."""
    industry: IndustryTag

    class Config:
        json_schema_extra = {
            "example": {"industry": "real-estate"}
        }


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@router.post("/validate")
async def post_validate_statement(
    payload: Any = Body(..., description="Statement envelope with a statementType tag"),
    tolerance: Optional[float] = Query(None, gt=0, description="Balance tolerance ratio (default from settings)"),
):
    """
    POST /statements/validate

    Returns 200 with {success, data, warnings} when the envelope parses and
    balances, otherwise 422 with {success, errors, guidance}.
    """
    result = validate_statement(payload, tolerance_ratio=tolerance)
    return validation_response(result)


@router.post("/classify", response_model=IndustryResponse)
async def post_classify(payload: Any = Body(...)):
    """POST /statements/classify"""
    industry = classify_industry(payload)
    logger.info(f"Classified statement as {industry}")
    return IndustryResponse(industry=industry)


@router.post("/ratios")
async def post_ratios(payload: Any = Body(...)) -> Dict[str, Any]:
    """
    POST /statements/ratios

    Accepts a filing document, an envelope, or a list of envelopes. Ratios
    that cannot be computed are returned as null.
    """
    return calculate_financial_ratios(payload)

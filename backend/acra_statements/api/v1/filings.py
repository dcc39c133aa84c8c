"""
filings.py — Filing Document API Endpoints

Purpose:
- Validate a complete filing document (filing information, directors'
  statement, audit report, primary statements and notes).
- Convert between the mapping service's snake_case payload and the filing
  document shape.

Endpoints:
- POST /filings/validate    → ValidationSuccess (200) or ValidationFailure (422)
- POST /filings/normalize   → filing document from {"data": {...}}
- POST /filings/denormalize → {"mapped_data": {...}} from a filing document
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Query

from acra_statements.api.v1._responses import validation_response
from acra_statements.services.mapping import denormalize_acra_data, normalize_acra_data
from acra_statements.validation import validate_filing

router = APIRouter(
    prefix="/filings",
    tags=["filings"]
)


@router.post("/validate")
async def post_validate_filing(
    payload: Any = Body(...),
    tolerance: Optional[float] = Query(None, gt=0),
):
    """POST /filings/validate"""
    return validation_response(validate_filing(payload, tolerance_ratio=tolerance))


@router.post("/normalize")
async def post_normalize(payload: Any = Body(...)) -> Dict[str, Any]:
    """POST /filings/normalize: an invalid payload yields the empty document."""
    return normalize_acra_data(payload)


@router.post("/denormalize")
async def post_denormalize(payload: Any = Body(...)) -> Dict[str, Any]:
    """POST /filings/denormalize"""
    return denormalize_acra_data(payload)

"""
frameworks.py — Framework Projection API Endpoints

Purpose:
- List the presentation frameworks a filing can be projected into.
- Project a filing (or statement envelopes) into one framework view.

Endpoints:
- GET  /frameworks                       → [FrameworkInfoResponse]
- POST /frameworks/{framework_id}/project → framework view

Projection never fails the request: unknown ids fall back to the default
view and a failing framework returns an annotated error view with 200.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body
from pydantic import BaseModel

from acra_statements.core.logging import get_logger
from acra_statements.services.projection import list_frameworks, project

logger = get_logger(__name__)

router = APIRouter(
    prefix="/frameworks",
    tags=["frameworks"]
)

# -----------------------------------------------------------------------------
# Schemas
# -----------------------------------------------------------------------------

class FrameworkInfoResponse(BaseModel):
    """Response schema for one available framework."""
    id: str
    label: str
    description: str
    aliases: List[str]

    class Config:
        json_schema_extra = {
            "example": {
                "id": "sfrs-full",
                "label": "SFRS Full",
                "description": "Complete ACRA filing in SFRS presentation order",
                "aliases": ["full-acra"]
            }
        }


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------

@router.get("", response_model=List[FrameworkInfoResponse])
async def get_frameworks():
    """GET /frameworks"""
    return list_frameworks()


@router.post("/{framework_id}/project")
async def post_project(framework_id: str, payload: Any = Body(...)) -> Dict[str, Any]:
    """
    POST /frameworks/{framework_id}/project

    Args:
        framework_id: Framework id or alias (e.g. sfrs-full, compliance)
        payload: Filing document, statement envelope, or list of envelopes

    Returns:
        View dict including `_frameworkMetadata`
    """
    logger.info(f"Projecting into framework {framework_id}")
    return project(payload, framework_id)

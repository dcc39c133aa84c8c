"""
_responses.py — Shared response helpers for the v1 routers.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from acra_statements.validation import ValidationFailure, ValidationResult


def validation_response(result: ValidationResult) -> JSONResponse:
    """200 with the success body, 422 with the failure body."""
    if isinstance(result, ValidationFailure):
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=result.to_dict())
    return JSONResponse(status_code=status.HTTP_200_OK, content=result.to_dict())

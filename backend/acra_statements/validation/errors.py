"""
errors.py — Validation result types and error taxonomy.

Purpose:
- FieldError: one actionable problem at a dot-joined path.
- ValidationSuccess / ValidationFailure: the only values the validators
  return. Nothing in validation raises to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """Where a validation error came from."""
    STRUCTURAL = "structural"  # type, required, enum, pattern, length
    DISCRIMINATOR = "discriminator"  # missing or unknown statementType
    BUSINESS_RULE = "business_rule"  # accounting equation
    FRAMEWORK = "framework"  # projection problems reported through results


@dataclass
class FieldError:
    """
    One validation problem.

    Attributes:
        path: Dot-joined field path, e.g. "assets.totalAssets"
        message: Short message, e.g. "Required"
        guidance: How to fix it (optional)
        category: ErrorCategory of the problem
        details: Machine-readable extras (operands of a failed rule, valid options)
    """
    path: str
    message: str
    guidance: Optional[str] = None
    category: ErrorCategory = ErrorCategory.STRUCTURAL
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "path": self.path,
            "message": self.message,
            "category": self.category.value,
        }
        if self.guidance is not None:
            payload["guidance"] = self.guidance
        if self.details is not None:
            payload["details"] = self.details
        return payload


@dataclass
class ValidationSuccess:
    data: Any
    warnings: List[str] = field(default_factory=list)
    success: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        data = self.data
        if isinstance(data, BaseModel):
            data = data.model_dump(by_alias=True, mode="json")
        return {"success": True, "data": data, "warnings": list(self.warnings)}


@dataclass
class ValidationFailure:
    errors: List[FieldError]
    guidance: str
    success: bool = field(default=False, init=False)

    @property
    def paths(self) -> List[str]:
        return [error.path for error in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "errors": [error.to_dict() for error in self.errors],
            "guidance": self.guidance,
        }


ValidationResult = Union[ValidationSuccess, ValidationFailure]

"""
normalization.py — Explicit defaulting step for parsed statements.

Validation leaves absent optional amounts as None. This step returns a new
model in which every optional amount declared with `optional_amount()` is 0,
which is the strict full-taxonomy shape. Open maps (liquidity-ordered
sections) are left as they are.
"""

from __future__ import annotations

from typing import Any, Dict, TypeVar

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from acra_statements.schema.fields import ZERO_WHEN_ABSENT

ModelT = TypeVar("ModelT", bound=BaseModel)


def _defaults_to_zero(info: FieldInfo) -> bool:
    extra = info.json_schema_extra
    return isinstance(extra, dict) and bool(extra.get(ZERO_WHEN_ABSENT))


def normalize_statement(statement: ModelT) -> ModelT:
    """
    Fill declared optional amounts with 0.

    Args:
        statement: Parsed envelope or filing model (not modified)

    Returns:
        The same model if nothing needed filling, otherwise a new copy
    """
    updates: Dict[str, Any] = {}
    for name, info in type(statement).model_fields.items():
        value = getattr(statement, name)
        if isinstance(value, BaseModel):
            filled = normalize_statement(value)
            if filled is not value:
                updates[name] = filled
        elif value is None and _defaults_to_zero(info):
            updates[name] = 0.0
    if not updates:
        return statement
    return statement.model_copy(update=updates)

"""
fields.py — Shared field kinds for statement and filing models.

Purpose:
- MonetaryAmount: any finite real number. Ints are accepted, strings,
  booleans, NaN and infinities are rejected (no silent coercion of
  "1,000" style text coming out of extraction).
- OptionalMonetaryAmount: same, may be absent. Fields declared with
  `optional_amount()` are filled with 0 by the normalization step.
- DateISO8601, CurrencyCode: pattern-constrained strings.

This module does NOT:
- Attach a currency to amounts (currency is fixed at the filing level).
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Marker stored in json_schema_extra; read by validation.normalization
ZERO_WHEN_ABSENT = "zeroWhenAbsent"

MonetaryAmount = Annotated[
    float,
    Field(strict=True, allow_inf_nan=False, description="Monetary amount in presentation currency"),
]
OptionalMonetaryAmount = Optional[MonetaryAmount]

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
DateISO8601 = Annotated[str, Field(pattern=DATE_PATTERN, description="ISO 8601 date (YYYY-MM-DD)")]

CurrencyCode = Annotated[
    str,
    Field(min_length=3, max_length=3, pattern=r"^[A-Z]{3}$", description="ISO 4217 currency code"),
]

ConsolidatedAndSeparate = Literal["Consolidated", "Separate"]


def optional_amount(description: Optional[str] = None, alias: Optional[str] = None) -> Any:
    """Declare an optional monetary field that defaults to 0 in the normalized shape."""
    kwargs = {"description": description, "json_schema_extra": {ZERO_WHEN_ABSENT: True}}
    if alias is not None:
        kwargs["alias"] = alias
    return Field(None, **kwargs)


class EnvelopeSection(BaseModel):
    """
    Base for closed envelope sections.

    Keys on the wire are camelCase; unknown keys are dropped.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class OpenEnvelopeSection(EnvelopeSection):
    """Envelope section that keeps additional named values (liquidity-ordered layout)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

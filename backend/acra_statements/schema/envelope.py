"""
envelope.py — StatementEnvelope tagged union.

Purpose:
- Bind the six statement variants into one union discriminated by
  `statementType`.
- Expose a module-level TypeAdapter so every caller parses the same way.

Adding a variant means: define the model, add it to `StatementEnvelope`
and `STATEMENT_MODELS`. The validator, lifting table and projector read
`STATEMENT_MODELS`, so a missing entry fails at import time.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Tuple, Type, Union

from pydantic import BaseModel, Field, TypeAdapter

from acra_statements.schema.balance_sheet import (
    CurrentNonCurrentBalanceSheet,
    OrderOfLiquidityBalanceSheet,
)
from acra_statements.schema.income_statement import IncomeStatement
from acra_statements.schema.notes import (
    RevenueNote,
    TradeAndOtherPayablesNote,
    TradeAndOtherReceivablesNote,
)

StatementEnvelope = Annotated[
    Union[
        CurrentNonCurrentBalanceSheet,
        OrderOfLiquidityBalanceSheet,
        IncomeStatement,
        TradeAndOtherReceivablesNote,
        TradeAndOtherPayablesNote,
        RevenueNote,
    ],
    Field(discriminator="statement_type"),
]

STATEMENT_MODELS: Dict[str, Type[BaseModel]] = {
    "currentNonCurrent": CurrentNonCurrentBalanceSheet,
    "orderOfLiquidity": OrderOfLiquidityBalanceSheet,
    "incomeStatement": IncomeStatement,
    "tradeAndOtherReceivablesNote": TradeAndOtherReceivablesNote,
    "tradeAndOtherPayablesNote": TradeAndOtherPayablesNote,
    "revenueNote": RevenueNote,
}

STATEMENT_TYPES: Tuple[str, ...] = tuple(STATEMENT_MODELS)
BALANCE_SHEET_TYPES: Tuple[str, ...] = ("currentNonCurrent", "orderOfLiquidity")

STATEMENT_ADAPTER: TypeAdapter = TypeAdapter(StatementEnvelope)


def _check_registry() -> None:
    for tag, model in STATEMENT_MODELS.items():
        literal = model.model_fields["statement_type"].annotation
        if tag not in getattr(literal, "__args__", ()):
            raise TypeError(f"{model.__name__} is registered under '{tag}' but declares {literal}")


_check_registry()


def parse_statement(candidate: Any) -> BaseModel:
    """Parse a raw envelope; raises pydantic.ValidationError on failure."""
    return STATEMENT_ADAPTER.validate_python(candidate)


def statement_to_dict(statement: BaseModel) -> Dict[str, Any]:
    """Dump a parsed envelope back to its camelCase wire shape."""
    return statement.model_dump(by_alias=True, mode="json")

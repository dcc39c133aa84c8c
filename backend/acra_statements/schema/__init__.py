"""
schema — pydantic models for ACRA statement envelopes and full XBRL filings.

The envelope is a tagged union on `statementType`; the filing document mirrors
the simplified-XBRL taxonomy element names used by the framework views.
"""

from acra_statements.schema.envelope import (
    STATEMENT_ADAPTER,
    STATEMENT_MODELS,
    STATEMENT_TYPES,
    BALANCE_SHEET_TYPES,
    StatementEnvelope,
)
from acra_statements.schema.filing import FilingDocument

__all__ = [
    "STATEMENT_ADAPTER",
    "STATEMENT_MODELS",
    "STATEMENT_TYPES",
    "BALANCE_SHEET_TYPES",
    "StatementEnvelope",
    "FilingDocument",
]

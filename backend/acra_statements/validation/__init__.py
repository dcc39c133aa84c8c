"""
validation — statement and filing validators with field-level guidance.

Provides the validation gate for extracted statements: structural checks,
the accounting equation business rule, component-sum reconciliation and
the explicit normalization (defaulting) step.
"""

from acra_statements.validation.balance import check_accounting_equation, check_component_sums
from acra_statements.validation.errors import (
    ErrorCategory,
    FieldError,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from acra_statements.validation.normalization import normalize_statement
from acra_statements.validation.validator import validate_filing, validate_statement

__all__ = [
    "check_accounting_equation",
    "check_component_sums",
    "ErrorCategory",
    "FieldError",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "normalize_statement",
    "validate_filing",
    "validate_statement",
]

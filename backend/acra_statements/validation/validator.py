"""
validator.py — Structural + business-rule validation of extracted statements.

Purpose:
- validate_statement(candidate): gate raw extraction output (untrusted JSON)
  into a parsed StatementEnvelope, or a ValidationFailure with field-level
  guidance.
- validate_filing(candidate): the same contract for a full filing document.

Order of checks (short-circuiting):
1. Shape gate (input must be an object)
2. Discriminator (statementType present and known)
3. Amount range check (NaN, infinity, ints beyond float range), then the
   balance-sheet pre-check (assets / liabilities / equity objects, numeric
   assets.totalAssets) for friendlier first errors
4. Accounting equation, when all three totals are numbers
5. Full structural validation (pydantic), translated to FieldErrors

This module does NOT:
- Raise. Every problem is returned as a ValidationFailure.
- Fill defaults (see validation.normalization).
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from acra_statements.core.logging import get_logger
from acra_statements.schema.envelope import BALANCE_SHEET_TYPES, STATEMENT_ADAPTER, STATEMENT_TYPES
from acra_statements.schema.filing import FilingDocument
from acra_statements.utils.numeric import is_number, is_out_of_range, type_name
from acra_statements.utils.tree import walk
from acra_statements.validation.balance import balance_error, check_accounting_equation, check_component_sums
from acra_statements.validation.errors import (
    ErrorCategory,
    FieldError,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from acra_statements.validation.guidance import summarize, translate_validation_error

logger = get_logger(__name__)

VALID_TYPES_TEXT = ", ".join(STATEMENT_TYPES)

BALANCE_SHEET_SECTIONS = {
    "assets": "an 'assets' object with currentAssets, nonCurrentAssets and totalAssets",
    "liabilities": "a 'liabilities' object with currentLiabilities, nonCurrentLiabilities and totalLiabilities",
    "equity": "an 'equity' object with shareCapital, accumulatedProfitsLosses and totalEquity",
}


def _fail(errors: List[FieldError]) -> ValidationFailure:
    failure = ValidationFailure(errors=errors, guidance=summarize(errors))
    logger.info(f"Validation failed: {len(errors)} error(s) at {', '.join(failure.paths)}")
    return failure


# -----------------------------------------------------------------------------
# Steps 1-3
# -----------------------------------------------------------------------------

def _check_discriminator(candidate: Any) -> Optional[FieldError]:
    if not isinstance(candidate, Mapping):
        return FieldError(
            path="statementType",
            message="Required",
            guidance=(
                f"Expected a statement object, received {type_name(candidate)}. "
                f"Provide an object with 'statementType' set to one of: {VALID_TYPES_TEXT}."
            ),
            category=ErrorCategory.DISCRIMINATOR,
            details={"validOptions": list(STATEMENT_TYPES)},
        )

    statement_type = candidate.get("statementType")
    if statement_type is None:
        return FieldError(
            path="statementType",
            message="Required",
            guidance=f"Set 'statementType' to one of: {VALID_TYPES_TEXT}.",
            category=ErrorCategory.DISCRIMINATOR,
            details={"validOptions": list(STATEMENT_TYPES)},
        )

    if statement_type not in STATEMENT_TYPES:
        return FieldError(
            path="statementType",
            message=f"Invalid discriminator value. Expected one of {VALID_TYPES_TEXT}, received '{statement_type}'",
            guidance=f"Valid statement types: {VALID_TYPES_TEXT}.",
            category=ErrorCategory.DISCRIMINATOR,
            details={"validOptions": list(STATEMENT_TYPES), "received": statement_type},
        )
    return None


def _precheck_balance_sheet(candidate: Mapping[str, Any]) -> List[FieldError]:
    """Friendly first errors for the three balance-sheet sections and totalAssets."""
    errors: List[FieldError] = []
    for section, expectation in BALANCE_SHEET_SECTIONS.items():
        if section not in candidate:
            errors.append(FieldError(
                path=section,
                message="Required",
                guidance=f"A balance sheet needs {expectation}.",
            ))
        elif not isinstance(candidate[section], Mapping):
            errors.append(FieldError(
                path=section,
                message=f"Expected object, received {type_name(candidate[section])}",
                guidance=f"A balance sheet needs {expectation}.",
            ))
    if errors:
        return errors

    assets = candidate["assets"]
    if "totalAssets" not in assets:
        errors.append(FieldError(
            path="assets.totalAssets",
            message="Required",
            guidance="Provide totalAssets, the total of current and non-current assets, as a number.",
        ))
    elif not is_number(assets["totalAssets"]):
        errors.append(FieldError(
            path="assets.totalAssets",
            message=f"Expected number, received {type_name(assets['totalAssets'])}",
            guidance="Enter totalAssets as a plain number without currency symbols or thousands separators.",
        ))
    return errors


def _check_number_ranges(candidate: Any) -> List[FieldError]:
    """NaN, infinity and ints beyond float range cannot be amounts."""
    return [
        FieldError(
            path=node.dotted_path,
            message="Number out of range",
            guidance="Enter a finite amount within the range of a double-precision number.",
        )
        for node in walk(candidate)
        if is_out_of_range(node.value)
    ]


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def validate_statement(candidate: Any, tolerance_ratio: Optional[float] = None) -> ValidationResult:
    """
    Validate one extracted statement envelope.

    Args:
        candidate: Untrusted JSON value (usually a dict)
        tolerance_ratio: Override for the accounting equation tolerance

    Returns:
        ValidationSuccess with the parsed envelope (and advisory warnings),
        or ValidationFailure with FieldErrors and overall guidance
    """
    discriminator_error = _check_discriminator(candidate)
    if discriminator_error is not None:
        return _fail([discriminator_error])

    statement_type = candidate["statementType"]

    range_errors = _check_number_ranges(candidate)
    if range_errors:
        return _fail(range_errors)

    if statement_type in BALANCE_SHEET_TYPES:
        precheck_errors = _precheck_balance_sheet(candidate)
        if precheck_errors:
            return _fail(precheck_errors)

        check = check_accounting_equation(
            candidate["assets"].get("totalAssets"),
            candidate["liabilities"].get("totalLiabilities"),
            candidate["equity"].get("totalEquity"),
            tolerance_ratio,
        )
        if check is not None and not check.balanced:
            return _fail([balance_error(check, ("totalAssets", "totalLiabilities", "totalEquity"))])

    try:
        statement = STATEMENT_ADAPTER.validate_python(candidate)
    except ValidationError as exc:
        return _fail(translate_validation_error(exc, statement_tag=statement_type))

    warnings: List[str] = []
    if statement_type in BALANCE_SHEET_TYPES and statement.assets.total_assets == 0:
        warnings.append("totalAssets is 0; the statement is accepted as a degenerate (zero-value) filing")
    warnings.extend(discrepancy.describe() for discrepancy in check_component_sums(statement, tolerance_ratio))

    logger.debug(f"Validated {statement_type} with {len(warnings)} warning(s)")
    return ValidationSuccess(data=statement, warnings=warnings)


def validate_filing(candidate: Any, tolerance_ratio: Optional[float] = None) -> ValidationResult:
    """
    Validate a full filing document (taxonomy element names).

    Args:
        candidate: Untrusted JSON value
        tolerance_ratio: Override for the accounting equation tolerance

    Returns:
        ValidationSuccess with a FilingDocument, or ValidationFailure
    """
    if not isinstance(candidate, Mapping):
        return _fail([FieldError(
            path="filingInformation",
            message="Required",
            guidance=f"Expected a filing document object, received {type_name(candidate)}.",
        )])

    range_errors = _check_number_ranges(candidate)
    if range_errors:
        return _fail(range_errors)

    position = candidate.get("statementOfFinancialPosition")
    if isinstance(position, Mapping):
        equity = position.get("equity")
        check = check_accounting_equation(
            position.get("Assets"),
            position.get("Liabilities"),
            equity.get("Equity") if isinstance(equity, Mapping) else None,
            tolerance_ratio,
        )
        if check is not None and not check.balanced:
            return _fail([balance_error(check)])

    try:
        document = FilingDocument.model_validate(candidate)
    except ValidationError as exc:
        return _fail(translate_validation_error(exc))

    warnings: List[str] = []
    if document.statementOfFinancialPosition.Assets == 0:
        warnings.append("Assets is 0; the filing is accepted as a degenerate (zero-value) filing")
    return ValidationSuccess(data=document, warnings=warnings)

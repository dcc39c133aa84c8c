"""
guidance.py — Translate pydantic validation errors into FieldErrors.

Purpose:
- Turn each pydantic error into a FieldError whose path is the dot-joined
  wire path and whose message/guidance is specialised for the common cases:
  missing fields, numbers received as text, invalid enum values, pattern and
  length violations, unrecognized keys.
- Build the overall guidance sentence of a ValidationFailure.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from acra_statements.schema.fields import DATE_PATTERN
from acra_statements.schema.filing import UEN_PATTERN
from acra_statements.utils.numeric import type_name
from acra_statements.validation.errors import ErrorCategory, FieldError

NUMBER_ERROR_TYPES = {"float_type", "float_parsing", "int_type", "int_parsing", "int_from_float"}
OBJECT_ERROR_TYPES = {"model_type", "model_attributes_type", "dict_type"}
BOOL_ERROR_TYPES = {"bool_type", "bool_parsing"}
STRING_ERROR_TYPES = {"string_type"}

PATTERN_GUIDANCE: Dict[str, str] = {
    DATE_PATTERN: "Use the ISO 8601 date format YYYY-MM-DD (e.g. 2024-12-31).",
    UEN_PATTERN: "A Unique Entity Number is 8 or 9 digits followed by one uppercase letter (e.g. 201912345K).",
    r"^[A-Z]{3}$": "Use a three-letter ISO 4217 currency code in upper case (e.g. SGD).",
}

NUMBER_GUIDANCE = (
    "Enter the amount as a plain number without currency symbols, thousands separators "
    "or brackets (e.g. -15000, not \"(15,000)\")."
)

# Union member labels pydantic inserts into loc, e.g. "float" or "dict[str,nullable[float]]"
_UNION_MEMBER_LOC = re.compile(r"^(float|int|str|bool|none|nullable\[.*\]|dict\[.*\]|list\[.*\]|function-.*)$")
_QUOTED = re.compile(r"'([^']*)'")


def clean_loc(loc: Sequence[Any], statement_tag: Optional[str] = None) -> Tuple[Any, ...]:
    """
    Drop the union tag and union-member labels pydantic adds to error locations.

    Args:
        loc: pydantic error location
        statement_tag: statementType of the validated envelope; a leading
            loc element equal to it is the tagged-union branch label
    """
    parts = list(loc)
    if statement_tag is not None and parts and parts[0] == statement_tag:
        parts = parts[1:]
    return tuple(part for part in parts if not (isinstance(part, str) and _UNION_MEMBER_LOC.match(part)))


def _has_union_member(loc: Sequence[Any]) -> bool:
    return any(isinstance(part, str) and _UNION_MEMBER_LOC.match(part) for part in loc)


def join_path(loc: Iterable[Any]) -> str:
    return ".".join(str(part) for part in loc)


def _expected_options(error: Dict[str, Any]) -> List[str]:
    expected = (error.get("ctx") or {}).get("expected", "")
    return _QUOTED.findall(str(expected))


def translate_error(error: Dict[str, Any], statement_tag: Optional[str] = None) -> FieldError:
    """
    Translate one pydantic error dict into a FieldError.

    Args:
        error: One entry of ValidationError.errors()
        statement_tag: statementType of the validated envelope, if any

    Returns:
        FieldError with a specialised message and guidance
    """
    path = join_path(clean_loc(error.get("loc", ()), statement_tag))
    error_type = error.get("type", "")
    value = error.get("input")
    ctx = error.get("ctx") or {}
    field_name = path.rsplit(".", 1)[-1] if path else "value"

    if error_type == "missing":
        return FieldError(
            path=path,
            message="Required",
            guidance=f"'{field_name}' is required for this statement. Provide it as a number or object as declared.",
        )

    if error_type in NUMBER_ERROR_TYPES:
        return FieldError(
            path=path,
            message=f"Expected number, received {type_name(value)}",
            guidance=NUMBER_GUIDANCE,
        )

    if error_type == "finite_number":
        return FieldError(
            path=path,
            message="Expected a finite number",
            guidance="NaN and infinite values are not valid amounts.",
        )

    if error_type in ("literal_error", "enum"):
        options = _expected_options(error)
        return FieldError(
            path=path,
            message=f"Invalid enum value. Expected {ctx.get('expected', 'one of the declared options')}, received '{value}'",
            guidance=f"Valid options for '{field_name}': {', '.join(options)}." if options else None,
            details={"validOptions": options, "received": value},
        )

    if error_type == "string_pattern_mismatch":
        pattern = ctx.get("pattern", "")
        return FieldError(
            path=path,
            message="Invalid format",
            guidance=PATTERN_GUIDANCE.get(pattern, f"Value must match the pattern {pattern}."),
            details={"pattern": pattern},
        )

    if error_type == "string_too_short":
        minimum = ctx.get("min_length")
        return FieldError(
            path=path,
            message=f"String must contain at least {minimum} character(s)",
            guidance=f"Provide a more detailed value for '{field_name}' (at least {minimum} characters).",
        )

    if error_type == "string_too_long":
        maximum = ctx.get("max_length")
        return FieldError(
            path=path,
            message=f"String must contain at most {maximum} character(s)",
            guidance=f"Shorten '{field_name}' to {maximum} characters or fewer.",
        )

    if error_type in OBJECT_ERROR_TYPES:
        return FieldError(
            path=path,
            message=f"Expected object, received {type_name(value)}",
            guidance=f"'{field_name}' must be an object of named line items.",
        )

    if error_type in BOOL_ERROR_TYPES:
        return FieldError(
            path=path,
            message=f"Expected boolean, received {type_name(value)}",
            guidance="Use true or false.",
        )

    if error_type in STRING_ERROR_TYPES:
        return FieldError(path=path, message=f"Expected string, received {type_name(value)}")

    if error_type == "extra_forbidden":
        return FieldError(
            path=path,
            message="Unrecognized key",
            guidance=f"'{field_name}' is not an element of this section. Remove it or map it to a taxonomy element.",
        )

    if error_type in ("union_tag_invalid", "union_tag_not_found"):
        return FieldError(
            path=path or "statementType",
            message=error.get("msg", "Invalid discriminator value"),
            category=ErrorCategory.DISCRIMINATOR,
        )

    return FieldError(path=path, message=error.get("msg", "Invalid value"))


def translate_validation_error(exc: ValidationError, statement_tag: Optional[str] = None) -> List[FieldError]:
    """
    Translate every error of a pydantic ValidationError, dropping duplicates
    produced by union members failing at the same path.
    """
    seen = set()
    translated: List[FieldError] = []
    for error in exc.errors(include_url=False):
        field_error = translate_error(error, statement_tag)
        # one error per path when several union members rejected the same value
        if _has_union_member(error.get("loc", ())):
            key = (field_error.path, None)
        else:
            key = (field_error.path, field_error.message)
        if key in seen:
            continue
        seen.add(key)
        translated.append(field_error)
    return translated


def summarize(errors: Sequence[FieldError]) -> str:
    """One-sentence guidance for a failure."""
    if not errors:
        return "Validation failed."
    if len(errors) == 1:
        only = errors[0]
        where = f" at '{only.path}'" if only.path else ""
        return f"Validation failed{where}: {only.message}. " + (only.guidance or "Fix the field and resubmit.")
    required = sum(1 for error in errors if error.message == "Required")
    parts = [f"Validation failed with {len(errors)} errors"]
    if required:
        parts.append(f"{required} required field(s) missing")
    return "; ".join(parts) + ". Fix the fields listed in errors and resubmit."

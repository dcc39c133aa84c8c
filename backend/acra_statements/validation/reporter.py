"""
reporter.py — Report generation for validation results.

Produces both console output (tables) and JSON reports.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from acra_statements.validation.errors import ValidationFailure, ValidationResult

WIDTH = 100


def format_console_table(result: ValidationResult, title: str = "STATEMENT VALIDATION REPORT") -> str:
    """
    Format a validation result as a console table.

    Args:
        result: ValidationSuccess or ValidationFailure
        title: Banner line

    Returns:
        Formatted table string
    """
    lines = []
    lines.append("=" * WIDTH)
    lines.append(title)
    lines.append("=" * WIDTH)
    lines.append("")

    if isinstance(result, ValidationFailure):
        lines.append(f"{'Path':<40} {'Category':<15} {'Message':<43}")
        lines.append("-" * WIDTH)
        for error in result.errors:
            path = error.path if len(error.path) <= 38 else error.path[:35] + "..."
            message = error.message if len(error.message) <= 43 else error.message[:40] + "..."
            lines.append(f"{path:<40} {error.category.value:<15} {message:<43}")
            if error.guidance:
                lines.append(f"  -> {error.guidance}")
        lines.append("")
        lines.append("=" * WIDTH)
        lines.append(f"SUMMARY: FAILED with {len(result.errors)} error(s)")
        lines.append(result.guidance)
    else:
        for warning in result.warnings:
            lines.append(f"  [WARN] {warning}")
        if result.warnings:
            lines.append("")
        lines.append("=" * WIDTH)
        lines.append(f"SUMMARY: PASSED with {len(result.warnings)} warning(s)")
    lines.append("=" * WIDTH)

    return "\n".join(lines)


def generate_json_report(
    result: ValidationResult,
    output_path: str | Path,
    metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Generate JSON report file.

    Args:
        result: Validation result
        output_path: Path to save JSON report
        metadata: Optional metadata to include in report

    Returns:
        The report written to disk
    """
    body = result.to_dict()
    report = {
        "metadata": {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            **(metadata or {}),
        },
        "summary": {
            "success": body["success"],
            "errors": len(body.get("errors", [])),
            "warnings": len(body.get("warnings", [])),
        },
        "result": body,
    }

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False)
    return report

"""
validate_statement.py — Validate a statement envelope or full filing JSON file.

Prints a console report and optionally writes a JSON report. Exits 1 when
validation fails.

Usage:
    python scripts/validate_statement.py `
        --input-json samples/balance_sheet.json `
        --output-json outputs/balance_sheet_report.json

    python scripts/validate_statement.py --input-json samples/filing.json --filing
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from acra_statements.core.logging import configure_logging
from acra_statements.validation import validate_filing, validate_statement
from acra_statements.validation.reporter import format_console_table, generate_json_report


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Validate an ACRA statement envelope or filing document"
    )
    parser.add_argument(
        "--input-json",
        type=str,
        required=True,
        help="Path to the statement or filing JSON file",
    )
    parser.add_argument(
        "--filing",
        action="store_true",
        help="Validate as a complete filing document instead of a single envelope",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Balance tolerance ratio (default from settings, 0.001)",
    )
    parser.add_argument(
        "--output-json",
        type=str,
        default=None,
        help="Optional path for a JSON report",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default from settings)",
    )

    args = parser.parse_args()
    configure_logging(args.log_level)

    try:
        with Path(args.input_json).open("r", encoding="utf-8") as f:
            candidate = json.load(f)
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"ERROR: {args.input_json} is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)

    if args.filing:
        result = validate_filing(candidate, tolerance_ratio=args.tolerance)
        title = "FILING VALIDATION REPORT"
    else:
        result = validate_statement(candidate, tolerance_ratio=args.tolerance)
        title = "STATEMENT VALIDATION REPORT"

    print(format_console_table(result, title=title))

    if args.output_json:
        output_path = Path(args.output_json)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        generate_json_report(result, output_path, metadata={"input": args.input_json})
        print(f"\nReport written to {args.output_json}")

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()

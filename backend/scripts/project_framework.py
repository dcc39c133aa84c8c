"""
project_framework.py — Project a filing JSON file into presentation frameworks.

Usage:
    python scripts/project_framework.py `
        --input-json samples/filing.json `
        --framework analytical `
        --output-json outputs/filing_analytical.json

    python scripts/project_framework.py --input-json samples/filing.json --all
    python scripts/project_framework.py --list
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from acra_statements.core.config import settings
from acra_statements.core.logging import configure_logging
from acra_statements.services.classification import KeywordTableError, load_keyword_table
from acra_statements.services.projection import list_frameworks, project, project_all


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Project an ACRA filing into one or all presentation frameworks"
    )
    parser.add_argument(
        "--input-json",
        type=str,
        help="Path to the filing (or envelope) JSON file",
    )
    parser.add_argument(
        "--framework",
        type=str,
        default=settings.DEFAULT_FRAMEWORK,
        help=f"Framework id or alias (default: {settings.DEFAULT_FRAMEWORK})",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Project into every framework, keyed by id",
    )
    parser.add_argument(
        "--keywords-json",
        type=str,
        default=None,
        help="Industry keyword table override for the industry-aware views",
    )
    parser.add_argument(
        "--output-json",
        type=str,
        default=None,
        help="Write the view here instead of printing it",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available frameworks and exit",
    )

    args = parser.parse_args()
    configure_logging()

    if args.list:
        for info in list_frameworks():
            aliases = f" (aliases: {', '.join(info['aliases'])})" if info["aliases"] else ""
            print(f"  {info['id']:<24} {info['label']}{aliases}")
        return

    if not args.input_json:
        parser.error("--input-json is required unless --list is given")

    try:
        with Path(args.input_json).open("r", encoding="utf-8") as f:
            document = json.load(f)
        keyword_table = load_keyword_table(args.keywords_json) if args.keywords_json else None
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    except (json.JSONDecodeError, KeywordTableError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.all:
        view = project_all(document, keyword_table=keyword_table)
    else:
        view = project(document, args.framework, keyword_table=keyword_table)

    rendered = json.dumps(view, indent=2, ensure_ascii=False)
    if args.output_json:
        output_path = Path(args.output_json)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered, encoding="utf-8")
        print(f"Wrote projection to {args.output_json}")
    else:
        print(rendered)


if __name__ == "__main__":
    main()

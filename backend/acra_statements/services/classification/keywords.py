"""
keywords.py — Industry keyword tables for the classifier.

Purpose:
- IndustryKeywordTable: read-only keyword lists per industry, in the
  classifier's priority order.
- load_keyword_table(path): load a JSON override, e.g.

    {
      "financial-services": ["bank", "insurance"],
      "real-estate": ["property"],
      "manufacturing": ["manufactur"],
      "retail": ["retail"]
    }

- get_keyword_table(): the table selected by settings.INDUSTRY_KEYWORDS_FILE
  (built-in table when empty), loaded once per path.

This module does NOT:
- Classify anything (see industry.py).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from acra_statements.core.config import settings
from acra_statements.core.logging import get_logger

logger = get_logger(__name__)

# Loaded override tables, keyed by resolved path
_table_cache: Dict[str, "IndustryKeywordTable"] = {}


class KeywordTableError(Exception):
    """Raised when a keyword override file is missing or malformed."""
    pass


class IndustryKeywordTable(BaseModel):
    """Keyword lists per industry tag. Keywords are matched as lower-case substrings."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    financial_services: Tuple[str, ...] = Field(default=(), alias="financial-services")
    real_estate: Tuple[str, ...] = Field(default=(), alias="real-estate")
    manufacturing: Tuple[str, ...] = ()
    retail: Tuple[str, ...] = ()

    @field_validator("financial_services", "real_estate", "manufacturing", "retail", mode="after")
    @classmethod
    def lower_keywords(cls, v):
        """Normalize keywords to stripped lower case and drop blanks."""
        return tuple(keyword.strip().lower() for keyword in v if keyword.strip())

    def in_priority_order(self) -> List[Tuple[str, Tuple[str, ...]]]:
        """(industry tag, keywords) pairs, highest priority first."""
        return [
            ("financial-services", self.financial_services),
            ("real-estate", self.real_estate),
            ("manufacturing", self.manufacturing),
            ("retail", self.retail),
        ]


DEFAULT_KEYWORD_TABLE = IndustryKeywordTable(
    financial_services=(
        "bank",
        "financial services",
        "finance",
        "financing",
        "insurance",
        "reinsurance",
        "fund management",
        "asset management",
        "wealth management",
        "securities",
        "brokerage",
        "lending",
        "money lending",
        "payment services",
    ),
    real_estate=(
        "real estate",
        "property",
        "properties",
        "realty",
        "land development",
        "estate management",
    ),
    manufacturing=(
        "manufactur",
        "fabricat",
        "factory",
        "production of",
        "assembly of",
        "processing of",
        "industrial",
    ),
    retail=(
        "retail",
        "wholesale",
        "trading of",
        "general trading",
        "supermarket",
        "shop",
        "store",
        "e-commerce",
        "distribution of",
    ),
)


def load_keyword_table(path: str | Path) -> IndustryKeywordTable:
    """
    Load an IndustryKeywordTable from a JSON file.

    Args:
        path: JSON file mapping industry tag -> list of keywords

    Returns:
        Frozen IndustryKeywordTable

    Raises:
        KeywordTableError: If the file cannot be read or does not match the table shape
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise KeywordTableError(f"Cannot read keyword table {path}: {exc}") from exc

    try:
        table = IndustryKeywordTable.model_validate(raw)
    except ValidationError as exc:
        raise KeywordTableError(f"Invalid keyword table {path}: {exc.error_count()} error(s)") from exc

    logger.info(f"Loaded industry keyword table from {path}")
    return table


def get_keyword_table() -> IndustryKeywordTable:
    """Table selected by settings.INDUSTRY_KEYWORDS_FILE (built-in when unset)."""
    configured = settings.INDUSTRY_KEYWORDS_FILE.strip()
    if not configured:
        return DEFAULT_KEYWORD_TABLE

    key = str(Path(configured).resolve())
    if key not in _table_cache:
        _table_cache[key] = load_keyword_table(configured)
    return _table_cache[key]

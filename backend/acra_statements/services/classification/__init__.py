"""
classification — heuristic industry classifier for the industry-specific view.
"""

from acra_statements.services.classification.industry import INDUSTRY_TAGS, IndustryTag, classify_industry
from acra_statements.services.classification.keywords import (
    DEFAULT_KEYWORD_TABLE,
    IndustryKeywordTable,
    KeywordTableError,
    load_keyword_table,
)

__all__ = [
    "DEFAULT_KEYWORD_TABLE",
    "INDUSTRY_TAGS",
    "IndustryKeywordTable",
    "IndustryTag",
    "KeywordTableError",
    "classify_industry",
    "load_keyword_table",
]

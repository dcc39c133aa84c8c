"""
frameworks.py — Framework identifiers, aliases and descriptions.

The set of frameworks is closed: every id listed here has exactly one view
function in projector.py, and unknown ids resolve to "default".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from acra_statements.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FRAMEWORK_ID = "default"


class FrameworkError(Exception):
    """Raised inside a framework view that cannot be built from its input."""
    pass


@dataclass(frozen=True)
class FrameworkInfo:
    id: str
    label: str
    description: str
    aliases: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "description": self.description,
            "aliases": list(self.aliases),
        }


FRAMEWORKS: Tuple[FrameworkInfo, ...] = (
    FrameworkInfo(
        "sfrs-full",
        "SFRS Full XBRL",
        "Complete representation with all disclosures",
        aliases=("full-acra",),
    ),
    FrameworkInfo(
        "sfrs-simplified",
        "SFRS Simplified",
        "Simplified XBRL for Small Entities",
        aliases=("simplified",),
    ),
    FrameworkInfo(
        "regulatory-reporting",
        "Regulatory Reporting",
        "XBRL format optimized for ACRA submission",
    ),
    FrameworkInfo(
        "financial-statements",
        "Financial Statements",
        "Balance Sheet, Income Statement, Cash Flow, Equity",
    ),
    FrameworkInfo(
        "analytical",
        "Analytical View",
        "Financial Ratios, Trend Analysis, Metrics",
    ),
    FrameworkInfo(
        "business-profile",
        "Business Profile",
        "Company overview, industry, scale and key highlights",
    ),
    FrameworkInfo(
        "industry-specific",
        "Industry-Specific",
        "View selected by the detected industry",
    ),
    FrameworkInfo(
        "industry-banking",
        "Banking Industry",
        "Specialized view for financial institutions",
    ),
    FrameworkInfo(
        "industry-insurance",
        "Insurance Industry",
        "Specialized view for insurance companies",
    ),
    FrameworkInfo(
        "compliance-focused",
        "Compliance Focus",
        "Directors' Statement, Auditor's Report, Disclosures",
        aliases=("compliance",),
    ),
    FrameworkInfo(
        DEFAULT_FRAMEWORK_ID,
        "Default ACRA View",
        "Standard view of the XBRL data",
    ),
)

FRAMEWORK_IDS: Tuple[str, ...] = tuple(info.id for info in FRAMEWORKS)

_ALIASES: Dict[str, str] = {alias: info.id for info in FRAMEWORKS for alias in info.aliases}


def resolve_framework_id(framework_id: Any) -> str:
    """
    Canonicalise a framework id.

    Args:
        framework_id: Id or alias (case and surrounding whitespace ignored)

    Returns:
        Canonical id; DEFAULT_FRAMEWORK_ID for unknown ids
    """
    normalized = str(framework_id or "").strip().lower()
    if normalized in FRAMEWORK_IDS:
        return normalized
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    logger.warning(f"Unknown framework id {framework_id!r}, using {DEFAULT_FRAMEWORK_ID}")
    return DEFAULT_FRAMEWORK_ID


def list_frameworks() -> List[Dict[str, Any]]:
    """All frameworks as JSON-ready dicts, in selector order."""
    return [info.to_dict() for info in FRAMEWORKS]

"""
balance.py — Accounting equation and component-sum checks.

Purpose:
- check_accounting_equation: the gating business rule
  |Assets - (Liabilities + Equity)| <= tolerance_ratio * |Assets|.
  Evaluated only when all three totals are numbers.
- check_component_sums: advisory reconciliation of sub-totals against their
  line items (absent items count as 0). Never gates validation.

Rules read the camelCase wire shape of an envelope, so they work on parsed
models and on raw dicts alike.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel

from acra_statements.core.config import settings
from acra_statements.core.logging import get_logger
from acra_statements.schema.envelope import statement_to_dict
from acra_statements.schema.taxonomy import (
    CURRENT_ASSETS_ELEMENTS,
    CURRENT_LIABILITIES_ELEMENTS,
    EQUITY_ELEMENTS,
    NON_CURRENT_ASSETS_ELEMENTS,
    NON_CURRENT_LIABILITIES_ELEMENTS,
    PAYABLES_NOTE_ELEMENTS,
    RECEIVABLES_NOTE_ELEMENTS,
    REVENUE_NOTE_ELEMENTS,
)
from acra_statements.utils.numeric import is_number
from acra_statements.utils.tree import get_in
from acra_statements.validation.errors import ErrorCategory, FieldError

logger = get_logger(__name__)

BALANCE_RULE_PATH = "accountingEquation"


# -----------------------------------------------------------------------------
# Accounting equation
# -----------------------------------------------------------------------------

@dataclass
class EquationCheck:
    total_assets: float
    total_liabilities: float
    total_equity: float
    difference: float
    tolerance: float
    balanced: bool

    def details(self) -> Dict[str, Any]:
        return {
            "totalAssets": self.total_assets,
            "totalLiabilities": self.total_liabilities,
            "totalEquity": self.total_equity,
            "liabilitiesPlusEquity": self.total_liabilities + self.total_equity,
            "difference": self.difference,
            "tolerance": self.tolerance,
        }


def check_accounting_equation(
    total_assets: Any,
    total_liabilities: Any,
    total_equity: Any,
    tolerance_ratio: Optional[float] = None,
) -> Optional[EquationCheck]:
    """
    Compare total assets with liabilities plus equity.

    Args:
        total_assets: Reported total assets
        total_liabilities: Reported total liabilities
        total_equity: Reported total equity
        tolerance_ratio: Allowed deviation as a fraction of |total_assets|
            (defaults to settings.BALANCE_TOLERANCE_RATIO)

    Returns:
        EquationCheck, or None when any total is missing or not a number, or
        the totals are too large to compare
    """
    if not (is_number(total_assets) and is_number(total_liabilities) and is_number(total_equity)):
        return None
    ratio = settings.BALANCE_TOLERANCE_RATIO if tolerance_ratio is None else tolerance_ratio
    difference = abs(total_assets - (total_liabilities + total_equity))
    tolerance = abs(total_assets) * ratio
    if not (is_number(difference) and is_number(tolerance)):
        return None
    return EquationCheck(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        total_equity=total_equity,
        difference=difference,
        tolerance=tolerance,
        balanced=difference <= tolerance,
    )


def balance_error(check: EquationCheck, labels: Tuple[str, str, str] = ("Assets", "Liabilities", "Equity")) -> FieldError:
    """FieldError for an unbalanced EquationCheck."""
    assets_label, liabilities_label, equity_label = labels
    combined = check.total_liabilities + check.total_equity
    return FieldError(
        path=BALANCE_RULE_PATH,
        message=(
            f"Accounting equation not balanced: {assets_label} ({check.total_assets:,.2f}) "
            f"!= {liabilities_label} + {equity_label} ({combined:,.2f})"
        ),
        guidance=(
            f"The difference of {check.difference:,.2f} exceeds the allowed tolerance of "
            f"{check.tolerance:,.2f}. Check the reported totals and any line items that were "
            f"missed or double-counted during extraction."
        ),
        category=ErrorCategory.BUSINESS_RULE,
        details=check.details(),
    )


# -----------------------------------------------------------------------------
# Component sums
# -----------------------------------------------------------------------------

@dataclass
class Discrepancy:
    """
    A sub-total that does not match its line items.

    Attributes:
        path: Path of the reported total
        reported: Reported total
        computed: Sum of the components (absent items as 0)
        difference: reported - computed
        components: Paths that were summed
    """
    path: str
    reported: float
    computed: float
    difference: float
    components: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def describe(self) -> str:
        return (
            f"{self.path} is {self.reported:,.2f} but its components sum to "
            f"{self.computed:,.2f} (difference {self.difference:,.2f})"
        )


# A rule is (total path, [(component path, sign), ...])
Rule = Tuple[str, Sequence[Tuple[str, int]]]


def _components(prefix: str, elements: Mapping[str, str], total_key: str) -> List[Tuple[str, int]]:
    base = f"{prefix}." if prefix else ""
    return [(f"{base}{key}", 1) for key in elements if key != total_key]


_EQUITY_RULE: Rule = ("equity.totalEquity", _components("equity", EQUITY_ELEMENTS, "totalEquity"))

COMPONENT_RULES: Dict[str, List[Rule]] = {
    "currentNonCurrent": [
        (
            "assets.currentAssets.totalCurrentAssets",
            _components("assets.currentAssets", CURRENT_ASSETS_ELEMENTS, "totalCurrentAssets"),
        ),
        (
            "assets.nonCurrentAssets.totalNonCurrentAssets",
            _components("assets.nonCurrentAssets", NON_CURRENT_ASSETS_ELEMENTS, "totalNonCurrentAssets"),
        ),
        (
            "assets.totalAssets",
            [
                ("assets.currentAssets.totalCurrentAssets", 1),
                ("assets.nonCurrentAssets.totalNonCurrentAssets", 1),
            ],
        ),
        (
            "liabilities.currentLiabilities.totalCurrentLiabilities",
            _components(
                "liabilities.currentLiabilities", CURRENT_LIABILITIES_ELEMENTS, "totalCurrentLiabilities"
            ),
        ),
        (
            "liabilities.nonCurrentLiabilities.totalNonCurrentLiabilities",
            _components(
                "liabilities.nonCurrentLiabilities", NON_CURRENT_LIABILITIES_ELEMENTS, "totalNonCurrentLiabilities"
            ),
        ),
        (
            "liabilities.totalLiabilities",
            [
                ("liabilities.currentLiabilities.totalCurrentLiabilities", 1),
                ("liabilities.nonCurrentLiabilities.totalNonCurrentLiabilities", 1),
            ],
        ),
        _EQUITY_RULE,
    ],
    "orderOfLiquidity": [_EQUITY_RULE],
    "incomeStatement": [
        (
            "totalProfitLoss",
            [
                ("profitLossBeforeTaxation", 1),
                ("incomeTaxExpenseBenefit", -1),
                ("profitLossFromDiscontinuedOperations", 1),
            ],
        ),
        (
            "totalProfitLoss",
            [
                ("profitLossAttributableTo.ownersOfCompany", 1),
                ("profitLossAttributableTo.nonControllingInterests", 1),
            ],
        ),
    ],
    "tradeAndOtherReceivablesNote": [
        (
            "totalTradeAndOtherReceivables",
            _components("", RECEIVABLES_NOTE_ELEMENTS, "totalTradeAndOtherReceivables"),
        ),
    ],
    "tradeAndOtherPayablesNote": [
        (
            "totalTradeAndOtherPayables",
            _components("", PAYABLES_NOTE_ELEMENTS, "totalTradeAndOtherPayables"),
        ),
    ],
    "revenueNote": [
        ("totalRevenue", _components("", REVENUE_NOTE_ELEMENTS, "totalRevenue")),
    ],
}


def _evaluate_rule(data: Mapping[str, Any], rule: Rule, tolerance_ratio: float) -> Optional[Discrepancy]:
    total_path, components = rule
    reported = get_in(data, total_path)
    if not is_number(reported):
        return None
    present = [(path, sign, get_in(data, path)) for path, sign in components]
    if not any(is_number(value) for _, _, value in present):
        # nothing itemised; a bare total is not a discrepancy
        return None
    computed = sum(sign * value for _, sign, value in present if is_number(value))
    difference = reported - computed
    if abs(difference) <= abs(reported) * tolerance_ratio:
        return None
    return Discrepancy(
        path=total_path,
        reported=reported,
        computed=computed,
        difference=difference,
        components=[path for path, _ in components],
    )


def check_component_sums(statement: Any, tolerance_ratio: Optional[float] = None) -> List[Discrepancy]:
    """
    Reconcile reported sub-totals with their line items.

    Args:
        statement: Parsed envelope model or camelCase dict
        tolerance_ratio: Allowed deviation as a fraction of the reported total

    Returns:
        List of Discrepancy (empty when everything reconciles or the
        statement type has no rules)
    """
    data = statement_to_dict(statement) if isinstance(statement, BaseModel) else statement
    if not isinstance(data, Mapping):
        return []
    ratio = settings.BALANCE_TOLERANCE_RATIO if tolerance_ratio is None else tolerance_ratio
    discrepancies = []
    for rule in COMPONENT_RULES.get(data.get("statementType"), []):
        found = _evaluate_rule(data, rule, ratio)
        if found is not None:
            discrepancies.append(found)
    if discrepancies:
        logger.debug(f"{len(discrepancies)} component-sum discrepancies in {data.get('statementType')}")
    return discrepancies

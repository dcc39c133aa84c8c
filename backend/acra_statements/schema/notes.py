"""
notes.py — Note disclosure envelopes.

Each note is a flat mapping of optional components plus one required total.
"""

from __future__ import annotations

from typing import Literal, Optional

from acra_statements.schema.fields import (
    ConsolidatedAndSeparate,
    DateISO8601,
    EnvelopeSection,
    MonetaryAmount,
    OptionalMonetaryAmount,
    optional_amount,
)


class TradeAndOtherReceivablesNote(EnvelopeSection):
    statement_type: Literal["tradeAndOtherReceivablesNote"]
    consolidated_and_separate: ConsolidatedAndSeparate
    period_date: Optional[DateISO8601] = None

    trade_receivables_due_from_third_parties: OptionalMonetaryAmount = optional_amount()
    trade_receivables_due_from_related_parties: OptionalMonetaryAmount = optional_amount()
    contract_assets: OptionalMonetaryAmount = optional_amount("Unbilled receivables")
    non_trade_receivables: OptionalMonetaryAmount = optional_amount()
    total_trade_and_other_receivables: MonetaryAmount


class TradeAndOtherPayablesNote(EnvelopeSection):
    statement_type: Literal["tradeAndOtherPayablesNote"]
    consolidated_and_separate: ConsolidatedAndSeparate
    period_date: Optional[DateISO8601] = None

    trade_payables_due_to_third_parties: OptionalMonetaryAmount = optional_amount()
    trade_payables_due_to_related_parties: OptionalMonetaryAmount = optional_amount()
    contract_liabilities: OptionalMonetaryAmount = optional_amount("Deferred income")
    non_trade_payables: OptionalMonetaryAmount = optional_amount()
    total_trade_and_other_payables: MonetaryAmount


class RevenueNote(EnvelopeSection):
    statement_type: Literal["revenueNote"]
    consolidated_and_separate: ConsolidatedAndSeparate
    period_date: Optional[DateISO8601] = None

    revenue_recognised_at_point_in_time_properties: OptionalMonetaryAmount = optional_amount()
    revenue_recognised_at_point_in_time_goods: OptionalMonetaryAmount = optional_amount()
    revenue_recognised_at_point_in_time_services: OptionalMonetaryAmount = optional_amount()
    revenue_recognised_over_time_properties: OptionalMonetaryAmount = optional_amount()
    revenue_recognised_over_time_construction_contracts: OptionalMonetaryAmount = optional_amount()
    revenue_recognised_over_time_services: OptionalMonetaryAmount = optional_amount()
    revenue_others: OptionalMonetaryAmount = optional_amount()
    total_revenue: MonetaryAmount

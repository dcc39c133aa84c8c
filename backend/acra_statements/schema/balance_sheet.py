"""
balance_sheet.py — Statement of financial position envelopes.

Two presentation styles share the same equity section:
- currentNonCurrent: closed current/non-current sub-sections with declared
  line items and sub-totals.
- orderOfLiquidity: closed core (the mandated totals) plus an open map of
  additional named values, each a number or a one-level mapping of numbers.

The accounting equation is not enforced here; see validation.balance.
"""

from __future__ import annotations

from typing import Dict, Literal, Optional, Union

from pydantic import Field

from acra_statements.schema.fields import (
    ConsolidatedAndSeparate,
    DateISO8601,
    EnvelopeSection,
    MonetaryAmount,
    OpenEnvelopeSection,
    OptionalMonetaryAmount,
    optional_amount,
)

# Additional values allowed in liquidity-ordered sections
LiquidityValue = Optional[Union[MonetaryAmount, Dict[str, Optional[MonetaryAmount]]]]


# =============================================================================
# ASSETS
# =============================================================================

class CurrentAssets(EnvelopeSection):
    cash_and_bank_balances: OptionalMonetaryAmount = optional_amount("Cash and bank balances")
    trade_and_other_receivables: OptionalMonetaryAmount = optional_amount(
        "Trade and other receivables (including contract assets)"
    )
    lease_receivables: OptionalMonetaryAmount = optional_amount("Financial assets - lease receivables")
    financial_assets_derivatives: OptionalMonetaryAmount = optional_amount("Financial assets - derivatives")
    financial_assets_fair_value_through_profit_or_loss: OptionalMonetaryAmount = optional_amount(
        "Financial assets - at fair value through profit or loss"
    )
    other_financial_assets: OptionalMonetaryAmount = optional_amount("Other financial assets")
    inventories_development_properties: OptionalMonetaryAmount = optional_amount(
        "Inventories - development properties"
    )
    inventories_others: OptionalMonetaryAmount = optional_amount("Inventories - others")
    other_non_financial_assets: OptionalMonetaryAmount = optional_amount("Other non-financial assets")
    non_current_assets_held_for_sale: OptionalMonetaryAmount = optional_amount(
        "Non-current assets or disposal groups held for sale"
    )
    total_current_assets: OptionalMonetaryAmount = optional_amount("Total current assets")


class NonCurrentAssets(EnvelopeSection):
    trade_and_other_receivables: OptionalMonetaryAmount = optional_amount(
        "Trade and other receivables, non-current"
    )
    lease_receivables: OptionalMonetaryAmount = optional_amount("Lease receivables, non-current")
    financial_assets_derivatives: OptionalMonetaryAmount = optional_amount("Derivatives, non-current")
    financial_assets_fair_value_through_profit_or_loss: OptionalMonetaryAmount = optional_amount(
        "Financial assets at fair value through profit or loss, non-current"
    )
    other_financial_assets: OptionalMonetaryAmount = optional_amount("Other financial assets, non-current")
    property_plant_and_equipment: OptionalMonetaryAmount = optional_amount("Property, plant and equipment")
    investment_properties: OptionalMonetaryAmount = optional_amount("Investment properties")
    goodwill: OptionalMonetaryAmount = optional_amount("Goodwill")
    intangible_assets: OptionalMonetaryAmount = optional_amount("Intangible assets other than goodwill")
    investments_in_subsidiaries_joint_ventures_and_associates: OptionalMonetaryAmount = optional_amount(
        "Investments in subsidiaries, joint ventures and associates"
    )
    deferred_tax_assets: OptionalMonetaryAmount = optional_amount("Deferred tax assets")
    other_non_financial_assets: OptionalMonetaryAmount = optional_amount(
        "Other non-financial assets, non-current"
    )
    total_non_current_assets: OptionalMonetaryAmount = optional_amount("Total non-current assets")


class ClassifiedAssets(EnvelopeSection):
    current_assets: CurrentAssets = Field(default_factory=CurrentAssets)
    non_current_assets: NonCurrentAssets = Field(default_factory=NonCurrentAssets)
    total_assets: MonetaryAmount


class LiquidityAssets(OpenEnvelopeSection):
    __pydantic_extra__: Dict[str, LiquidityValue]

    total_assets: MonetaryAmount


# =============================================================================
# LIABILITIES
# =============================================================================

class CurrentLiabilities(EnvelopeSection):
    trade_and_other_payables: OptionalMonetaryAmount = optional_amount(
        "Trade and other payables (including contract liabilities)"
    )
    loans_and_borrowings: OptionalMonetaryAmount = optional_amount("Loans and borrowings")
    financial_liabilities_derivatives_and_fair_value: OptionalMonetaryAmount = optional_amount(
        "Financial liabilities - derivatives and at fair value through profit or loss"
    )
    lease_liabilities: OptionalMonetaryAmount = optional_amount(
        "Financial liabilities - lease liabilities", alias="leaseliabilities"
    )
    other_financial_liabilities: OptionalMonetaryAmount = optional_amount("Other financial liabilities")
    income_tax_liabilities: OptionalMonetaryAmount = optional_amount("Income tax liabilities")
    provisions: OptionalMonetaryAmount = optional_amount("Provisions (excluding income tax)")
    other_non_financial_liabilities: OptionalMonetaryAmount = optional_amount(
        "Other non-financial liabilities"
    )
    liabilities_in_disposal_groups: OptionalMonetaryAmount = optional_amount(
        "Liabilities included in disposal groups held for sale"
    )
    total_current_liabilities: OptionalMonetaryAmount = optional_amount("Total current liabilities")


class NonCurrentLiabilities(EnvelopeSection):
    trade_and_other_payables: OptionalMonetaryAmount = optional_amount(
        "Trade and other payables, non-current"
    )
    loans_and_borrowings: OptionalMonetaryAmount = optional_amount("Loans and borrowings, non-current")
    financial_liabilities_derivatives_and_fair_value: OptionalMonetaryAmount = optional_amount(
        "Derivatives and fair value liabilities, non-current"
    )
    lease_liabilities: OptionalMonetaryAmount = optional_amount(
        "Lease liabilities, non-current", alias="leaseliabilities"
    )
    other_financial_liabilities: OptionalMonetaryAmount = optional_amount(
        "Other financial liabilities, non-current"
    )
    deferred_tax_liabilities: OptionalMonetaryAmount = optional_amount("Deferred tax liabilities")
    provisions: OptionalMonetaryAmount = optional_amount("Provisions, non-current")
    other_non_financial_liabilities: OptionalMonetaryAmount = optional_amount(
        "Other non-financial liabilities, non-current"
    )
    total_non_current_liabilities: OptionalMonetaryAmount = optional_amount(
        "Total non-current liabilities"
    )


class ClassifiedLiabilities(EnvelopeSection):
    current_liabilities: CurrentLiabilities = Field(default_factory=CurrentLiabilities)
    non_current_liabilities: NonCurrentLiabilities = Field(default_factory=NonCurrentLiabilities)
    total_liabilities: MonetaryAmount


class LiquidityLiabilities(OpenEnvelopeSection):
    __pydantic_extra__: Dict[str, LiquidityValue]

    total_liabilities: MonetaryAmount


# =============================================================================
# EQUITY
# =============================================================================

class Equity(EnvelopeSection):
    share_capital: MonetaryAmount
    treasury_shares: OptionalMonetaryAmount = optional_amount("Treasury shares (signed)")
    accumulated_profits_losses: MonetaryAmount
    other_reserves_attributable_to_owners_of_company: OptionalMonetaryAmount = optional_amount(
        "Reserves other than accumulated profits/losses"
    )
    non_controlling_interests: OptionalMonetaryAmount = optional_amount("Non-controlling interests")
    total_equity: MonetaryAmount


# =============================================================================
# ENVELOPES
# =============================================================================

class CurrentNonCurrentBalanceSheet(EnvelopeSection):
    """Balance sheet presented in current/non-current (classified) order."""
    statement_type: Literal["currentNonCurrent"]
    consolidated_and_separate: ConsolidatedAndSeparate
    period_date: Optional[DateISO8601] = None
    assets: ClassifiedAssets
    liabilities: ClassifiedLiabilities
    equity: Equity


class OrderOfLiquidityBalanceSheet(EnvelopeSection):
    """Balance sheet presented in order of liquidity."""
    statement_type: Literal["orderOfLiquidity"]
    consolidated_and_separate: ConsolidatedAndSeparate
    period_date: Optional[DateISO8601] = None
    assets: LiquidityAssets
    liabilities: LiquidityLiabilities
    equity: Equity

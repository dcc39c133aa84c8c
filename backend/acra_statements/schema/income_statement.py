"""
income_statement.py — Income statement envelope.

Required: revenue, profitLossBeforeTaxation, incomeTaxExpenseBenefit.
Everything else is an optional line item.
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


class ProfitLossAttribution(EnvelopeSection):
    owners_of_company: OptionalMonetaryAmount = optional_amount("Portion attributable to owners of the company")
    non_controlling_interests: OptionalMonetaryAmount = optional_amount(
        "Portion attributable to non-controlling interests"
    )


class IncomeStatement(EnvelopeSection):
    """Statement of profit or loss."""
    statement_type: Literal["incomeStatement"]
    consolidated_and_separate: ConsolidatedAndSeparate
    period_date: Optional[DateISO8601] = None

    revenue: MonetaryAmount
    other_income: OptionalMonetaryAmount = optional_amount("Other income")
    employee_benefits_expense: OptionalMonetaryAmount = optional_amount("Employee benefits expense")
    depreciation_expense: OptionalMonetaryAmount = optional_amount("Depreciation of PP&E")
    amortisation_expense: OptionalMonetaryAmount = optional_amount("Amortisation of intangible assets")
    repairs_and_maintenance_expense: OptionalMonetaryAmount = optional_amount("Repairs and maintenance")
    sales_and_marketing_expense: OptionalMonetaryAmount = optional_amount("Sales and marketing")
    other_expenses: OptionalMonetaryAmount = optional_amount("Other expenses by nature")
    other_gains_losses: OptionalMonetaryAmount = optional_amount("Other gains/(losses)")
    finance_net_costs: OptionalMonetaryAmount = optional_amount("Net finance costs")
    share_of_profit_loss_of_associates_and_joint_ventures: OptionalMonetaryAmount = optional_amount(
        "Share of profit/(loss) of associates and joint ventures"
    )
    profit_loss_before_taxation: MonetaryAmount
    income_tax_expense_benefit: MonetaryAmount
    profit_loss_from_discontinued_operations: OptionalMonetaryAmount = optional_amount(
        "Profit/(loss) from discontinued operations"
    )
    total_profit_loss: OptionalMonetaryAmount = optional_amount("Profit/(loss) for the period")
    profit_loss_attributable_to: Optional[ProfitLossAttribution] = None

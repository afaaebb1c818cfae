"""
Ledger Result Models

Aggregate views derived from the ledger. These are snapshots: they are
computed on request and never updated when the ledger changes.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryTotal(BaseModel):
    """Total expense amount for one category."""
    model_config = ConfigDict(frozen=True)

    category: str
    amount: Decimal = Field(ge=0)


class LedgerSummary(BaseModel):
    """
    Headline totals for the ledger.

    net_savings may be negative when expenses exceed income.
    """
    model_config = ConfigDict(frozen=True)

    total_income: Decimal = Field(
        ...,
        ge=0,
        description="Sum of all income transactions"
    )
    total_expenses: Decimal = Field(
        ...,
        ge=0,
        description="Sum of all expense transactions"
    )
    net_savings: Decimal = Field(
        ...,
        description="Income minus expenses"
    )
    transaction_count: int = Field(
        ...,
        ge=0,
        description="Number of transactions in the ledger"
    )


class SpendingAnalytics(BaseModel):
    """
    Category breakdown of expenses.

    category_spending preserves the order in which categories were first
    seen; most_spent is None when there are no expenses.
    """
    model_config = ConfigDict(frozen=True)

    category_spending: dict[str, Decimal] = Field(
        default_factory=dict,
        description="Expense total per category"
    )
    most_spent: Optional[CategoryTotal] = Field(
        default=None,
        description="Category with the highest expense total"
    )

    @property
    def has_expenses(self) -> bool:
        return self.most_spent is not None

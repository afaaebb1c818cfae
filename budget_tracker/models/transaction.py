"""
Core Transaction Models for Personal Budget Tracker

These models define the schemas for everything the user enters.
They are designed to:
1. Enforce type safety at runtime
2. Be immutable once created (a recorded transaction is a fact)
3. Keep display formatting separate from stored values

DESIGN DECISION: The transaction kind is stored as the text that was
recorded, not coerced into an enum. Aggregations compare it
case-insensitively against TransactionKind, so unknown kinds are simply
left out of income/expense totals instead of breaking the ledger.
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_CURRENCY_SYMBOL = "₱"
DEFAULT_DATE_DISPLAY_FORMAT = "%m/%d/%Y"


def format_amount(amount: Decimal, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render an amount with its currency prefix, e.g. ₱1,250.00."""
    return f"{currency_symbol}{amount:,.2f}"


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """
    The two kinds of transaction the ledger aggregates.

    Matching is case-insensitive: "Income", "INCOME" and "income"
    all count as income.
    """
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        """Display label ("Income" / "Expense")."""
        return self.value.capitalize()

    @classmethod
    def from_text(cls, text: Optional[str]) -> Optional["TransactionKind"]:
        """Return the kind matching ``text`` case-insensitively, or None."""
        if text is None:
            return None
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    One recorded ledger entry.

    CRITICAL: Transactions are frozen. The ledger may reorder them
    but nothing may edit one after it is created.
    """
    model_config = ConfigDict(frozen=True)

    description: str = Field(
        ...,
        description="What the transaction was for"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Transaction amount (always non-negative)"
    )
    kind: str = Field(
        ...,
        description="Income or Expense (compared case-insensitively)"
    )
    category: str = Field(
        ...,
        description="Free-form category label"
    )
    date: datetime.date = Field(
        ...,
        description="Calendar date of the transaction"
    )

    @property
    def kind_enum(self) -> Optional[TransactionKind]:
        """
        The recognised kind, or None for anything else.

        Case is ignored; surrounding whitespace is not.
        """
        lowered = self.kind.lower()
        for kind in TransactionKind:
            if lowered == kind.value:
                return kind
        return None

    @property
    def is_income(self) -> bool:
        return self.kind_enum is TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind_enum is TransactionKind.EXPENSE

    def format(
        self,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        date_format: str = DEFAULT_DATE_DISPLAY_FORMAT,
    ) -> str:
        """
        Render the transaction as a single display line.

        Example: "01/05/2024 - Expense - Food - Lunch: ₱150.00"
        """
        return (
            f"{self.date.strftime(date_format)} - {self.kind} - "
            f"{self.category} - {self.description}: "
            f"{format_amount(self.amount, currency_symbol)}"
        )

    def __str__(self) -> str:
        return self.format()


# =============================================================================
# PARSING MODELS
# =============================================================================

class ParseIssue(BaseModel):
    """A single problem found while parsing user input."""

    field: str = Field(
        ...,
        description="Input field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'invalid_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


class TransactionParseResult(BaseModel):
    """
    Result of turning raw prompt answers into a Transaction.

    Either success with a transaction, or failure with the reasons.
    Warnings may accompany a successful parse.
    """

    success: bool = Field(
        ...,
        description="Was a transaction produced?"
    )
    transaction: Optional[Transaction] = Field(
        default=None,
        description="The parsed transaction (only on success)"
    )
    issues: list[ParseIssue] = Field(
        default_factory=list,
        description="All issues found while parsing"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def warnings(self) -> list[str]:
        return [issue.message for issue in self.issues if issue.severity == "warning"]

"""
Sort policy for the ledger.

All orderings are stable: transactions with equal keys keep their
relative order. Amount is the only descending ordering.
"""

from enum import Enum
from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field

from budget_tracker.ledger.errors import InvalidSortCriterionError
from budget_tracker.models.transaction import Transaction


class SortCriterion(str, Enum):
    """Orderings the ledger supports."""
    DATE = "date"
    AMOUNT = "amount"
    CATEGORY = "category"

    @classmethod
    def from_text(cls, text: Union[str, "SortCriterion", None]) -> "SortCriterion":
        """
        Resolve a criterion case-insensitively.

        Raises:
            InvalidSortCriterionError: If text names no known criterion
        """
        if isinstance(text, cls):
            return text
        if text is None:
            raise InvalidSortCriterionError("")
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise InvalidSortCriterionError(text) from None

    @classmethod
    def choices(cls) -> str:
        """Criteria as shown in the sort prompt: date/amount/category."""
        return "/".join(member.value for member in cls)


class SortOutcome(BaseModel):
    """Result of a sort request. A rejected request leaves the order untouched."""

    applied: bool = Field(
        ...,
        description="Was the ledger reordered?"
    )
    criterion: Optional[SortCriterion] = Field(
        default=None,
        description="Criterion used (None when rejected)"
    )
    requested: str = Field(
        ...,
        description="Criterion as the caller supplied it"
    )
    message: str = Field(
        ...,
        description="Human-readable outcome"
    )


def sort_transactions(
    transactions: Iterable[Transaction],
    criterion: SortCriterion,
) -> list[Transaction]:
    """Return a new list ordered by criterion (stable)."""
    if criterion is SortCriterion.DATE:
        return sorted(transactions, key=lambda t: t.date)
    elif criterion is SortCriterion.AMOUNT:
        # reverse=True keeps equal amounts in their current relative order
        return sorted(transactions, key=lambda t: t.amount, reverse=True)
    elif criterion is SortCriterion.CATEGORY:
        return sorted(transactions, key=lambda t: t.category)
    raise InvalidSortCriterionError(str(criterion))

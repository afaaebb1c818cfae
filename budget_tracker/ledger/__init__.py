"""Ledger package."""

from budget_tracker.ledger.errors import InvalidSortCriterionError, LedgerError
from budget_tracker.ledger.sorting import SortCriterion, SortOutcome
from budget_tracker.ledger.tracker import BudgetLedger

__all__ = [
    "BudgetLedger",
    "InvalidSortCriterionError",
    "LedgerError",
    "SortCriterion",
    "SortOutcome",
]

"""Input parsing package."""

from budget_tracker.validation.parser import TransactionParser

__all__ = ["TransactionParser"]

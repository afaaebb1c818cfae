"""Ledger exceptions."""


class LedgerError(Exception):
    """Base exception for ledger operations."""
    pass


class InvalidSortCriterionError(LedgerError):
    """Sort requested with a criterion the ledger does not support."""

    def __init__(self, requested: str):
        self.requested = requested
        super().__init__(f"Invalid sort option: {requested!r}")

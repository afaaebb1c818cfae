"""
Data Models Package

This package contains all Pydantic models used in the Personal Budget Tracker.
All data entering the ledger must conform to these schemas.
"""

from budget_tracker.models.transaction import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_DATE_DISPLAY_FORMAT,
    ParseIssue,
    Transaction,
    TransactionKind,
    TransactionParseResult,
    format_amount,
)
from budget_tracker.models.ledger import (
    CategoryTotal,
    LedgerSummary,
    SpendingAnalytics,
)
from budget_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Transaction models
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_DATE_DISPLAY_FORMAT",
    "ParseIssue",
    "Transaction",
    "TransactionKind",
    "TransactionParseResult",
    "format_amount",
    # Ledger result models
    "CategoryTotal",
    "LedgerSummary",
    "SpendingAnalytics",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]

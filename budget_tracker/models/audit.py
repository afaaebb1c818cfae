"""
Audit Models for Personal Budget Tracker

Every user action on the ledger is logged for audit purposes.
This provides:
1. A trail of what was added, rejected and reordered
2. Debugging information when input goes wrong
3. Ability to reconstruct a session

DESIGN DECISION: Audit trails are append-only. We never delete or modify events.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Ledger changes
    TRANSACTION_ADDED = "transaction_added"
    TRANSACTION_REJECTED = "transaction_rejected"
    LEDGER_SORTED = "ledger_sorted"
    SORT_REJECTED = "sort_rejected"

    # Read-only views
    SUMMARY_VIEWED = "summary_viewed"
    ANALYTICS_VIEWED = "analytics_viewed"

    # Shell
    MENU_SELECTION_INVALID = "menu_selection_invalid"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Correlation - for tracking events from one shell session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added("Lunch", "Expense", "150.00", 3)
        event = AuditEventBuilder.sort_rejected("bogus")
    """

    @staticmethod
    def session_started(correlation_id: Optional[UUID] = None) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            correlation_id=correlation_id,
            description="Budget tracker session started",
        )

    @staticmethod
    def session_ended(
        transaction_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            correlation_id=correlation_id,
            description=f"Session ended with {transaction_count} transactions",
            details={"transaction_count": transaction_count},
            is_user_action=True,
        )

    @staticmethod
    def transaction_added(
        description: str,
        kind: str,
        amount: str,
        ledger_size: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            correlation_id=correlation_id,
            description=f"Transaction added: {description}",
            details={
                "kind": kind,
                "amount": amount,
                "ledger_size": ledger_size,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_rejected(
        issues: list[dict],
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Transaction rejected with {len(issues)} issues",
            details={"issues": issues},
            is_user_action=True,
        )

    @staticmethod
    def ledger_sorted(
        criterion: str,
        ledger_size: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SORTED,
            correlation_id=correlation_id,
            description=f"Ledger sorted by {criterion}",
            details={
                "criterion": criterion,
                "ledger_size": ledger_size,
            },
            is_user_action=True,
        )

    @staticmethod
    def sort_rejected(
        requested: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SORT_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Invalid sort option: {requested!r}",
            details={"requested": requested},
            is_user_action=True,
        )

    @staticmethod
    def summary_viewed(
        net_savings: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SUMMARY_VIEWED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description="Summary viewed",
            details={"net_savings": net_savings},
            is_user_action=True,
        )

    @staticmethod
    def analytics_viewed(
        category_count: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ANALYTICS_VIEWED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Spending analytics viewed ({category_count} categories)",
            details={"category_count": category_count},
            is_user_action=True,
        )

    @staticmethod
    def menu_selection_invalid(
        selection: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MENU_SELECTION_INVALID,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description="Invalid menu selection",
            details={"selection": selection},
            is_user_action=True,
        )

"""
Audit Logger

DESIGN DECISION: Every user action on the ledger is logged.
This provides:
1. Complete traceability of a session
2. Debugging capability when input is rejected
3. A record the user can review before exiting

The audit logger:
- Is synchronous (the whole application is single-threaded)
- Gracefully handles failures (doesn't crash the shell if logging fails)
- Supports correlation IDs to trace the events of one session
"""

import logging
import sys
from typing import Optional
from uuid import UUID, uuid4

import structlog

from budget_tracker.models.audit import AuditEvent, AuditEventBuilder


def _configure_structlog(renderer) -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Route structlog through stdlib logging from the first import, so debug
# events are filtered by the root level and never reach stdout.
_configure_structlog(structlog.processors.JSONRenderer())


def configure_logging(level: int = logging.WARNING, json_output: bool = False) -> None:
    """
    Configure structlog on top of stdlib logging.

    Logs go to stderr so they never interleave with menu output on stdout.
    Call once at process start.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    _configure_structlog(renderer)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory, append-only trail (for review within the session)
    """

    def __init__(self, correlation_id: Optional[UUID] = None):
        """
        Initialize audit logger.

        Args:
            correlation_id: ID stamped on every event of this session.
                            A new one is created if not given.
        """
        self._correlation_id = correlation_id or create_correlation_id()
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger("budget_tracker.audit")

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    @property
    def events(self) -> tuple[AuditEvent, ...]:
        """All events logged so far, oldest first."""
        return tuple(self._events)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always records the event in the trail. Returns False if the
        local log write failed.
        """
        self._events.append(event)

        log_dict = event.to_log_dict()
        try:
            if event.severity.value == "error":
                self._logger.error("audit_event", **log_dict)
            elif event.severity.value == "warning":
                self._logger.warning("audit_event", **log_dict)
            elif event.severity.value == "debug":
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception:
            # Logging must never take the shell down
            return False

        return True

    def log_session_started(self) -> None:
        """Log the start of a shell session."""
        self.log(AuditEventBuilder.session_started(
            correlation_id=self._correlation_id,
        ))

    def log_session_ended(self, transaction_count: int) -> None:
        """Log the end of a shell session."""
        self.log(AuditEventBuilder.session_ended(
            transaction_count=transaction_count,
            correlation_id=self._correlation_id,
        ))

    def log_transaction_added(
        self,
        description: str,
        kind: str,
        amount: str,
        ledger_size: int,
    ) -> None:
        """Log a transaction being appended to the ledger."""
        self.log(AuditEventBuilder.transaction_added(
            description=description,
            kind=kind,
            amount=amount,
            ledger_size=ledger_size,
            correlation_id=self._correlation_id,
        ))

    def log_transaction_rejected(self, issues: list[dict]) -> None:
        """Log a transaction discarded because its input did not parse."""
        self.log(AuditEventBuilder.transaction_rejected(
            issues=issues,
            correlation_id=self._correlation_id,
        ))

    def log_ledger_sorted(self, criterion: str, ledger_size: int) -> None:
        """Log an in-place reorder of the ledger."""
        self.log(AuditEventBuilder.ledger_sorted(
            criterion=criterion,
            ledger_size=ledger_size,
            correlation_id=self._correlation_id,
        ))

    def log_sort_rejected(self, requested: str) -> None:
        """Log a sort request with an unknown criterion."""
        self.log(AuditEventBuilder.sort_rejected(
            requested=requested,
            correlation_id=self._correlation_id,
        ))

    def log_summary_viewed(self, net_savings: str) -> None:
        self.log(AuditEventBuilder.summary_viewed(
            net_savings=net_savings,
            correlation_id=self._correlation_id,
        ))

    def log_analytics_viewed(self, category_count: int) -> None:
        self.log(AuditEventBuilder.analytics_viewed(
            category_count=category_count,
            correlation_id=self._correlation_id,
        ))

    def log_menu_selection_invalid(self, selection: str) -> None:
        self.log(AuditEventBuilder.menu_selection_invalid(
            selection=selection,
            correlation_id=self._correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a shell session.
    """
    return uuid4()

"""
Audit Logger

DESIGN DECISION: Every change to the expense list is logged.
This provides:
1. Traceability of creates, updates and deletes
2. Debugging capability when input is rejected
3. A recent-history view for the UI

The audit logger:
- Is synchronous, like the rest of the engine
- Emits every event to structlog at the event's severity
- Keeps a bounded in-memory trail (nothing is persisted)
"""

import logging
import sys
from collections import deque
from typing import Optional

import structlog

from expense_tracker.config import AppSettings, get_settings
from expense_tracker.models.audit import AuditEvent, AuditEventBuilder
from expense_tracker.models.expense import ExpenseRecord


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Configure structlog on top of the standard library logger.

    JSON output by default; a console renderer when log_format is "console".
    """
    settings = settings or get_settings().app

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=settings.effective_log_level,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer()
    )

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


configure_logging()


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An in-memory trail (for the UI's history view)
    """

    def __init__(self, history_size: Optional[int] = None):
        """
        Initialize audit logger.

        Args:
            history_size: How many events to keep. Defaults to the
                          audit_history_size setting.
        """
        size = history_size or get_settings().app.audit_history_size
        self._events: deque[AuditEvent] = deque(maxlen=size)
        self._logger = structlog.get_logger("expense_tracker.audit")

    def log(self, event: AuditEvent) -> None:
        """
        Log an audit event.

        Always logs locally and appends to the trail.
        """
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._events.append(event)

    def log_expense_created(self, record: ExpenseRecord) -> None:
        """Log a new expense."""
        self.log(AuditEventBuilder.expense_created(
            expense_id=record.id,
            category=record.category,
            amount=record.amount,
        ))

    def log_expense_updated(
        self,
        before: ExpenseRecord,
        after: ExpenseRecord,
    ) -> None:
        """Log an update, noting which fields changed."""
        changed = [
            name for name in ("amount", "category", "description", "date")
            if getattr(before, name) != getattr(after, name)
        ]
        self.log(AuditEventBuilder.expense_updated(
            expense_id=after.id,
            changed_fields=changed,
        ))

    def log_expense_deleted(self, expense_id: int) -> None:
        """Log a delete that removed a record."""
        self.log(AuditEventBuilder.expense_deleted(expense_id))

    def log_delete_not_found(self, expense_id: int) -> None:
        """Log a delete of a missing id (a no-op)."""
        self.log(AuditEventBuilder.delete_not_found(expense_id))

    def log_update_not_found(self, expense_id: int) -> None:
        """Log an update of a missing id."""
        self.log(AuditEventBuilder.update_not_found(expense_id))

    def log_validation_failed(
        self,
        field: str,
        error_message: str,
        expense_id: Optional[int] = None,
    ) -> None:
        """Log rejected input."""
        self.log(AuditEventBuilder.validation_failed(
            field=field,
            error_message=error_message,
            expense_id=expense_id,
        ))

    def recent_events(self, limit: int = 50) -> list[AuditEvent]:
        """Most recent events, newest first."""
        events = list(self._events)
        events.reverse()
        return events[:limit]

    def events_for(self, expense_id: int) -> list[AuditEvent]:
        """Every retained event about one expense, oldest first."""
        return [e for e in self._events if e.expense_id == expense_id]

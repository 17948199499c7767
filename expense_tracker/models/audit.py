"""
Audit Models for Expense Tracker

Every change to the expense list is recorded as an audit event.
This provides:
1. Traceability of every create, update and delete
2. Debugging information when input is rejected
3. A recent-history view for the UI

DESIGN DECISION: Audit events are append-only. Nothing is persisted;
the trail lives as long as the tracker does.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Each CRUD outcome has its own event type.
    """
    EXPENSE_CREATED = "expense_created"
    EXPENSE_UPDATED = "expense_updated"
    EXPENSE_DELETED = "expense_deleted"

    # Rejected or no-op requests
    VALIDATION_FAILED = "validation_failed"
    UPDATE_NOT_FOUND = "update_not_found"
    DELETE_NOT_FOUND = "delete_not_found"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


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

    # Which expense is this about, if any
    expense_id: Optional[int] = Field(
        default=None,
        description="ID of the expense this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )

    # Additional data (event-specific)
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "expense_id": self.expense_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_created(record)
        event = AuditEventBuilder.delete_not_found(expense_id)
    """

    @staticmethod
    def expense_created(
        expense_id: int,
        category: str,
        amount: float,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_CREATED,
            expense_id=expense_id,
            description=f"Expense {expense_id} created: {category} {amount:.2f}",
            details={
                "category": category,
                "amount": amount,
            },
        )

    @staticmethod
    def expense_updated(
        expense_id: int,
        changed_fields: list[str],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_UPDATED,
            expense_id=expense_id,
            description=f"Expense {expense_id} updated",
            details={
                "changed_fields": changed_fields,
            },
        )

    @staticmethod
    def expense_deleted(expense_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            expense_id=expense_id,
            description=f"Expense {expense_id} deleted",
        )

    @staticmethod
    def validation_failed(
        field: str,
        error_message: str,
        expense_id: Optional[int] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            expense_id=expense_id,
            description=f"Expense input rejected: invalid {field}",
            details={
                "field": field,
            },
            error_message=error_message,
        )

    @staticmethod
    def update_not_found(expense_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.UPDATE_NOT_FOUND,
            severity=AuditSeverity.WARNING,
            expense_id=expense_id,
            description=f"Update requested for missing expense {expense_id}",
        )

    @staticmethod
    def delete_not_found(expense_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DELETE_NOT_FOUND,
            expense_id=expense_id,
            description=f"Delete requested for missing expense {expense_id} (no-op)",
        )

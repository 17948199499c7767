"""
Data Models Package

This package contains all Pydantic models used by the Expense Tracker.
All data flowing through the engine must conform to these schemas.
"""

from expense_tracker.models.expense import (
    DEFAULT_CATEGORIES,
    FALLBACK_COLOR,
    CategoryBreakdownEntry,
    CategorySet,
    DailyPoint,
    ExpenseData,
    ExpenseDraft,
    ExpenseQuery,
    ExpenseRecord,
    Insight,
    SummaryStats,
    ValidationIssue,
    ValidationResult,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "DEFAULT_CATEGORIES",
    "FALLBACK_COLOR",
    "CategoryBreakdownEntry",
    "CategorySet",
    "DailyPoint",
    "ExpenseData",
    "ExpenseDraft",
    "ExpenseQuery",
    "ExpenseRecord",
    "Insight",
    "SummaryStats",
    "ValidationIssue",
    "ValidationResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]

"""Shared fixtures for the Expense Tracker tests."""

from datetime import date

import pytest

from expense_tracker.audit import AuditLogger
from expense_tracker.config import AppSettings, get_settings
from expense_tracker.models.expense import ExpenseRecord
from expense_tracker.store import InMemoryExpenseStore
from expense_tracker.tracker import ExpenseTracker
from expense_tracker.validation import ExpenseValidator


# A Wednesday, mid-month
REFERENCE_DATE = date(2024, 5, 15)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def audit_logger() -> AuditLogger:
    return AuditLogger(history_size=100)


@pytest.fixture
def tracker(settings, audit_logger) -> ExpenseTracker:
    return ExpenseTracker(
        store=InMemoryExpenseStore(),
        validator=ExpenseValidator(settings=settings),
        audit_logger=audit_logger,
        settings=settings,
    )


@pytest.fixture
def make_record():
    """Build records directly, bypassing the store."""
    def _make(
        expense_id: int,
        amount: float,
        category: str = "Food",
        expense_date: date = REFERENCE_DATE,
        description: str = "",
    ) -> ExpenseRecord:
        return ExpenseRecord(
            id=expense_id,
            amount=amount,
            category=category,
            description=description,
            date=expense_date,
        )
    return _make

"""
Expense Tracker Facade

This module ties the components together and is the only surface the
UI talks to:
1. CRUD (draft -> validate -> store -> audit)
2. Aggregates (store snapshot -> analytics)
3. Filter/search (store snapshot -> queries)

DESIGN DECISION: The tracker is an explicitly constructed object.
There is no module-level store or counter; every UI session builds
its own tracker and passes it around.

The tracker holds no presentation state. Which record is being edited
or deleted is the UI's business.
"""

from datetime import date
from typing import Optional, Union

import structlog

from expense_tracker.analytics import (
    build_insights,
    category_breakdown,
    daily_series,
    summary_stats,
)
from expense_tracker.audit import AuditLogger
from expense_tracker.config import AppSettings, get_settings
from expense_tracker.models.expense import (
    DEFAULT_CATEGORIES,
    CategoryBreakdownEntry,
    CategorySet,
    DailyPoint,
    ExpenseDraft,
    ExpenseRecord,
    Insight,
    SummaryStats,
    ValidationResult,
)
from expense_tracker.queries import filter_expenses
from expense_tracker.store import (
    ExpenseStoreInterface,
    InMemoryExpenseStore,
    NotFoundError,
)
from expense_tracker.validation import ExpenseValidationError, ExpenseValidator


logger = structlog.get_logger(__name__)

Draft = Union[ExpenseDraft, dict]


class ExpenseTracker:
    """
    The engine's public interface.

    Flow for every write:
    1. Coerce → ExpenseValidator turns the draft into ExpenseData
    2. Store → the store assigns/keeps the id
    3. Audit → the outcome is logged

    Rejected input raises InvalidAmount / InvalidCategory / InvalidDate.
    Updating a missing id raises NotFoundError. Deleting a missing id
    returns False.
    """

    def __init__(
        self,
        store: Optional[ExpenseStoreInterface] = None,
        validator: Optional[ExpenseValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        categories: CategorySet = DEFAULT_CATEGORIES,
        settings: Optional[AppSettings] = None,
    ):
        self._settings = settings or get_settings().app
        self._categories = categories
        self._store = store if store is not None else InMemoryExpenseStore()
        self._validator = validator or ExpenseValidator(categories, self._settings)
        self._audit_logger = audit_logger

    @property
    def categories(self) -> CategorySet:
        return self._categories

    @property
    def audit_logger(self) -> Optional[AuditLogger]:
        return self._audit_logger

    # =========================================================================
    # CRUD
    # =========================================================================

    def create_expense(self, draft: Draft) -> ExpenseRecord:
        """Validate a draft and store it as a new expense."""
        data = self._coerce(draft)
        record = self._store.create(data)

        if self._audit_logger:
            self._audit_logger.log_expense_created(record)

        return record

    def update_expense(self, expense_id: int, draft: Draft) -> ExpenseRecord:
        """
        Replace every field of an expense except its id.

        Raises:
            NotFoundError: If no expense has this id
        """
        before = self._store.get(expense_id)
        if before is None:
            if self._audit_logger:
                self._audit_logger.log_update_not_found(expense_id)
            raise NotFoundError(expense_id)

        data = self._coerce(draft, expense_id=expense_id)
        record = self._store.update(expense_id, data)

        if self._audit_logger:
            self._audit_logger.log_expense_updated(before, record)

        return record

    def delete_expense(self, expense_id: int) -> bool:
        """Remove an expense. Returns False if it was not there."""
        removed = self._store.remove(expense_id)

        if self._audit_logger:
            if removed:
                self._audit_logger.log_expense_deleted(expense_id)
            else:
                self._audit_logger.log_delete_not_found(expense_id)

        return removed

    def get_expense(self, expense_id: int) -> Optional[ExpenseRecord]:
        return self._store.get(expense_id)

    def list_expenses(self) -> tuple[ExpenseRecord, ...]:
        """Every expense in insertion order."""
        return self._store.all()

    def validate_draft(
        self,
        draft: Draft,
        reference_date: Optional[date] = None,
    ) -> ValidationResult:
        """Check a draft without saving it (for form feedback)."""
        return self._validator.validate(draft, reference_date)

    # =========================================================================
    # AGGREGATES
    # =========================================================================

    def summary_stats(self, reference_date: Optional[date] = None) -> SummaryStats:
        return summary_stats(self._store.all(), reference_date or date.today())

    def category_breakdown(self) -> list[CategoryBreakdownEntry]:
        return category_breakdown(self._store.all(), self._categories)

    def daily_series(self, reference_date: Optional[date] = None) -> list[DailyPoint]:
        return daily_series(self._store.all(), reference_date or date.today())

    def insights(self, reference_date: Optional[date] = None) -> list[Insight]:
        """Insights from the current stats and breakdown."""
        return build_insights(
            self.summary_stats(reference_date),
            self.category_breakdown(),
            self._settings.currency_symbol,
        )

    # =========================================================================
    # FILTER / SEARCH
    # =========================================================================

    def filter_expenses(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[ExpenseRecord]:
        return filter_expenses(self._store.all(), category, search)

    def _coerce(self, draft: Draft, expense_id: Optional[int] = None):
        try:
            return self._validator.coerce(draft)
        except ExpenseValidationError as e:
            logger.info("expense_rejected", field=e.field, error=str(e))
            if self._audit_logger:
                self._audit_logger.log_validation_failed(
                    field=e.field,
                    error_message=str(e),
                    expense_id=expense_id,
                )
            raise


def create_tracker(
    settings: Optional[AppSettings] = None,
    categories: CategorySet = DEFAULT_CATEGORIES,
) -> ExpenseTracker:
    """
    Create a tracker with a fresh store, validator and audit logger.

    Call once per UI session.
    """
    settings = settings or get_settings().app
    return ExpenseTracker(
        store=InMemoryExpenseStore(),
        validator=ExpenseValidator(categories, settings),
        audit_logger=AuditLogger(settings.audit_history_size),
        categories=categories,
        settings=settings,
    )

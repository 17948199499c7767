"""
Expense Input Validation

DESIGN DECISION: Form input is coerced in one place, and bad input is
rejected with a typed error instead of being stored.

ERRORS (block saving):
- Amount that is missing, not a number, not finite, or not positive
- Category outside the tracker's CategorySet
- Date that is missing or not a YYYY-MM-DD calendar date
- Description that is not text

WARNINGS (never block):
- Unusually large amounts
- Dates in the future

IMPORTANT: Validation NEVER silently fixes issues. "12abc" is not 12.
"""

import math
import re
from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from expense_tracker.config import AppSettings, get_settings
from expense_tracker.models.expense import (
    DEFAULT_CATEGORIES,
    CategorySet,
    ExpenseData,
    ExpenseDraft,
    ValidationIssue,
    ValidationResult,
)


_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ExpenseValidationError(ValueError):
    """Base exception for rejected expense input."""

    field = "expense"

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__(message)


class InvalidAmount(ExpenseValidationError):
    """Amount is missing or not a positive finite number."""
    field = "amount"


class InvalidCategory(ExpenseValidationError):
    """Category is not one of the configured categories."""
    field = "category"


class InvalidDate(ExpenseValidationError):
    """Date is missing or not an ISO calendar date."""
    field = "date"


class InvalidDescription(ExpenseValidationError):
    """Description is not text."""
    field = "description"


class ExpenseValidator:
    """
    Coerces raw drafts into ExpenseData.

    coerce() raises on the first problem (amount, category, date, description).
    validate() collects every issue at once for form feedback.
    """

    def __init__(
        self,
        categories: CategorySet = DEFAULT_CATEGORIES,
        settings: Optional[AppSettings] = None,
    ):
        """
        Initialize validator.

        Args:
            categories: The category set drafts are checked against.
            settings: Thresholds for warnings. Defaults to app settings.
        """
        self._categories = categories
        self._settings = settings or get_settings().app

    @property
    def categories(self) -> CategorySet:
        return self._categories

    def parse_amount(self, raw: Any) -> float:
        """Parse an amount from text or a number."""
        if raw is None:
            raise InvalidAmount("Amount is required", raw)
        if isinstance(raw, bool) or not isinstance(raw, (str, int, float, Decimal)):
            raise InvalidAmount(f"Amount must be a number, got {type(raw).__name__}", raw)

        text = raw.strip() if isinstance(raw, str) else str(raw)
        if not text:
            raise InvalidAmount("Amount is required", raw)

        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidAmount(f"Amount '{raw}' is not a number", raw) from None

        if not value.is_finite():
            raise InvalidAmount(f"Amount '{raw}' is not a finite number", raw)
        if value <= 0:
            raise InvalidAmount("Amount must be greater than zero", raw)

        amount = float(value)
        # Decimal range is wider than float's
        if amount == 0 or math.isinf(amount):
            raise InvalidAmount(f"Amount '{raw}' is out of range", raw)
        return amount

    def check_category(self, raw: Any) -> str:
        """Ensure the category belongs to the configured set."""
        if raw is None or raw == "":
            raise InvalidCategory("Category is required", raw)
        if not isinstance(raw, str):
            raise InvalidCategory(f"Category must be text, got {type(raw).__name__}", raw)
        if raw not in self._categories:
            raise InvalidCategory(f"Unknown category: {raw}", raw)
        return raw

    def parse_date(self, raw: Any) -> date:
        """Parse a YYYY-MM-DD date, or pass a date object through."""
        if isinstance(raw, datetime):
            return raw.date()
        if isinstance(raw, date):
            return raw
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            raise InvalidDate("Date is required", raw)
        if isinstance(raw, str):
            text = raw.strip()
            if _ISO_DATE.match(text):
                try:
                    return date.fromisoformat(text)
                except ValueError:
                    pass
        raise InvalidDate(f"Date '{raw}' is not a valid YYYY-MM-DD date", raw)

    @staticmethod
    def format_amount(amount: float) -> str:
        """
        Render a stored amount as form text.

        Uses the shortest exact representation, so parse_amount gives
        back the same value. Never rounds to cents.
        """
        return repr(float(amount))

    @staticmethod
    def parse_description(raw: Any) -> str:
        """Missing description means empty text."""
        if raw is None:
            return ""
        if not isinstance(raw, str):
            raise InvalidDescription(f"Description must be text, got {type(raw).__name__}", raw)
        return raw

    def coerce(self, draft: Union[ExpenseDraft, dict]) -> ExpenseData:
        """
        Turn a draft into storable fields.

        Raises:
            InvalidAmount, InvalidCategory, InvalidDate, InvalidDescription
        """
        draft = self._as_draft(draft)
        amount = self.parse_amount(draft.amount)
        category = self.check_category(draft.category)
        expense_date = self.parse_date(draft.date)
        return ExpenseData(
            amount=amount,
            category=category,
            description=self.parse_description(draft.description),
            date=expense_date,
        )

    def validate(
        self,
        draft: Union[ExpenseDraft, dict],
        reference_date: Optional[date] = None,
    ) -> ValidationResult:
        """
        Check every field and report all issues.

        Args:
            draft: Raw form input
            reference_date: "Today" for the future-date warning

        Returns:
            ValidationResult; data is set only when there are no errors
        """
        draft = self._as_draft(draft)
        issues = []

        amount = self._collect(issues, self.parse_amount, draft.amount)
        category = self._collect(issues, self.check_category, draft.category)
        expense_date = self._collect(issues, self.parse_date, draft.date)
        description = self._collect(issues, self.parse_description, draft.description)

        if issues:
            return ValidationResult(is_valid=False, issues=issues)

        issues.extend(self._semantic_warnings(amount, expense_date, reference_date))

        return ValidationResult(
            is_valid=True,
            issues=issues,
            data=ExpenseData(
                amount=amount,
                category=category,
                description=description,
                date=expense_date,
            ),
        )

    def get_user_friendly_summary(self, result: ValidationResult) -> str:
        """
        Generate a short summary of validation results for the form.
        """
        if result.is_valid and not result.warnings:
            return "All checks passed."

        lines = []

        if result.has_errors:
            lines.append("Please fix the following:")
            for issue in result.issues:
                if issue.severity == "error":
                    lines.append(f"   • {issue.message}")

        if result.warnings:
            lines.append("Please double-check:")
            for warning in result.warnings:
                lines.append(f"   • {warning}")

        return "\n".join(lines)

    def _semantic_warnings(
        self,
        amount: float,
        expense_date: date,
        reference_date: Optional[date],
    ) -> list[ValidationIssue]:
        issues = []

        if amount > self._settings.max_expense_amount:
            issues.append(ValidationIssue(
                field="amount",
                issue_type="suspicious_value",
                message=f"Amount ({amount:,.2f}) seems unusually high",
                severity="warning",
            ))

        today = reference_date or date.today()
        latest = today + timedelta(days=self._settings.future_date_tolerance_days)
        if expense_date > latest:
            issues.append(ValidationIssue(
                field="date",
                issue_type="future_date",
                message=f"Date ({expense_date.isoformat()}) is in the future",
                severity="warning",
            ))

        return issues

    @staticmethod
    def _collect(issues: list[ValidationIssue], parse, raw: Any):
        try:
            return parse(raw)
        except ExpenseValidationError as e:
            issues.append(ValidationIssue(
                field=e.field,
                issue_type="missing" if raw in (None, "") else "invalid_value",
                message=str(e),
                severity="error",
            ))
            return None

    @staticmethod
    def _as_draft(draft: Union[ExpenseDraft, dict]) -> ExpenseDraft:
        if isinstance(draft, ExpenseDraft):
            return draft
        return ExpenseDraft.model_validate(draft)

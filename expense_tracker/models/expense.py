"""
Core Data Models for Expense Tracker

These models define the schemas for all data flowing through the engine.
They are designed to:
1. Separate raw form input from validated, storable data
2. Hand out immutable records so readers cannot mutate the store
3. Keep aggregate outputs as plain data, free of any formatting

DESIGN DECISION: Records are frozen pydantic models. The store replaces
a record wholesale on update instead of mutating it in place.
"""

import datetime as dt
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)


FALLBACK_COLOR = "#000000"


# =============================================================================
# CATEGORIES
# =============================================================================

class CategorySet(BaseModel):
    """
    Fixed, ordered set of category names.

    Each name is paired by position with a display color.
    Not user-extensible: a tracker is built with one set and keeps it.
    """
    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Category names in display order"
    )
    colors: tuple[str, ...] = Field(
        ...,
        description="Display color per category, same order as names"
    )

    @model_validator(mode='after')
    def validate_pairing(self) -> 'CategorySet':
        """Names and colors must line up one to one."""
        if len(self.names) != len(self.colors):
            raise ValueError("Every category needs exactly one color")
        if len(set(self.names)) != len(self.names):
            raise ValueError("Category names must be unique")
        return self

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)

    def color_for(self, name: str) -> str:
        """Color paired with a category, or the fallback for unknown names."""
        try:
            return self.colors[self.names.index(name)]
        except ValueError:
            return FALLBACK_COLOR


DEFAULT_CATEGORIES = CategorySet(
    names=(
        "Food",
        "Transportation",
        "Housing",
        "Utilities",
        "Entertainment",
        "Healthcare",
        "Shopping",
        "Travel",
        "Education",
        "Other",
    ),
    colors=(
        "#1FB8CD",
        "#FFC185",
        "#B4413C",
        "#ECEBD5",
        "#5D878F",
        "#DB4545",
        "#D2BA4C",
        "#964325",
        "#944454",
        "#13343B",
    ),
)


# =============================================================================
# EXPENSE MODELS
# =============================================================================

class ExpenseDraft(BaseModel):
    """
    Raw expense input as a form submits it.

    CRITICAL: This is UNVALIDATED data. Amount may be text, the date may
    be text, the category may not exist. It must go through
    ExpenseValidator before it reaches the store.
    """

    amount: Any = None
    category: Any = None
    description: Any = ""
    date: Any = None


class ExpenseData(BaseModel):
    """
    Validated expense fields, ready for the store.

    Everything except the id, which only the store assigns.
    """
    model_config = ConfigDict(frozen=True)

    amount: float = Field(
        ...,
        gt=0,
        description="Parsed amount"
    )
    category: str = Field(
        ...,
        min_length=1,
        description="Category name from the tracker's CategorySet"
    )
    description: str = Field(
        default="",
        description="Free text, may be empty"
    )
    date: dt.date = Field(
        ...,
        description="Calendar date of the expense"
    )


class ExpenseRecord(ExpenseData):
    """
    A stored expense.

    The id is assigned by the store, is unique, and is never reused.
    """

    id: int = Field(
        ...,
        ge=1,
        description="Store-assigned identifier"
    )


# =============================================================================
# AGGREGATE MODELS
# =============================================================================

class SummaryStats(BaseModel):
    """Headline numbers for the dashboard cards."""

    total_expenses: float = Field(
        default=0.0,
        description="Sum of amounts in the reference month"
    )
    total_transactions: int = Field(
        default=0,
        ge=0,
        description="Count of all records, any date"
    )
    avg_daily: float = Field(
        default=0.0,
        description="Last-7-days total divided by 7"
    )
    top_category: str = Field(
        default="-",
        description="Highest-spend category this month, '-' if none"
    )


class CategoryBreakdownEntry(BaseModel):
    """One category's share of all spending."""

    category: str
    amount: float
    percentage: float = Field(
        ...,
        description="Share of the grand total, rounded to 1 decimal"
    )
    color: str


class DailyPoint(BaseModel):
    """Spending on a single day of the weekly series."""

    date: dt.date
    amount: float = 0.0
    label: str = Field(
        ...,
        description="Short weekday name (Mon..Sun)"
    )


class Insight(BaseModel):
    """A short human-readable statement about spending."""

    title: str
    description: str


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single validation issue found."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_format', 'suspicious_value')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning)$",
        description="Issue severity"
    )


class ValidationResult(BaseModel):
    """
    Result of validating an ExpenseDraft.

    Errors block saving. Warnings are shown but never block.
    """

    is_valid: bool = Field(
        ...,
        description="True when there are no error-level issues"
    )
    issues: list[ValidationIssue] = Field(
        default_factory=list,
        description="All validation issues found"
    )
    data: Optional[ExpenseData] = Field(
        default=None,
        description="Coerced fields when the draft is valid"
    )

    @property
    def has_errors(self) -> bool:
        """Check if there are any error-level issues."""
        return any(issue.severity == "error" for issue in self.issues)

    @property
    def error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def warnings(self) -> list[str]:
        """Messages of warning-level issues."""
        return [issue.message for issue in self.issues if issue.severity == "warning"]


# =============================================================================
# QUERY MODELS
# =============================================================================

class ExpenseQuery(BaseModel):
    """
    Display filter for the expenses list.

    Both predicates are optional; empty text counts as absent.
    """

    category: Optional[str] = None
    search: Optional[str] = None

    @property
    def has_category(self) -> bool:
        return bool(self.category)

    @property
    def has_search(self) -> bool:
        return bool(self.search)

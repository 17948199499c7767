"""Validation package."""

from expense_tracker.validation.validator import (
    ExpenseValidationError,
    ExpenseValidator,
    InvalidAmount,
    InvalidCategory,
    InvalidDate,
    InvalidDescription,
)

__all__ = [
    "ExpenseValidationError",
    "ExpenseValidator",
    "InvalidAmount",
    "InvalidCategory",
    "InvalidDate",
    "InvalidDescription",
]

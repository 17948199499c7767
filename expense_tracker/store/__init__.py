"""
Store Package

Provides the abstract store interface and the in-memory implementation
that holds expense records for the lifetime of a session.
"""

from expense_tracker.store.interface import (
    ExpenseStoreInterface,
    NotFoundError,
    StorageError,
)
from expense_tracker.store.memory import InMemoryExpenseStore

__all__ = [
    # Interface
    "ExpenseStoreInterface",
    # Exceptions
    "NotFoundError",
    "StorageError",
    # In-memory implementation
    "InMemoryExpenseStore",
]

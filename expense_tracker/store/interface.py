"""
Abstract Store Interface

DESIGN DECISION: We define an abstract interface for record storage.
This allows us to:
1. Keep the tracker decoupled from how records are held
2. Use the in-memory store everywhere today
3. Add a durable backend later without touching the engine

The interface is intentionally small - just the operations the
tracker needs. Calls are synchronous; nothing here ever blocks.
"""

from abc import ABC, abstractmethod
from typing import Optional

from expense_tracker.models.expense import ExpenseData, ExpenseRecord


class ExpenseStoreInterface(ABC):
    """
    Abstract interface for expense record storage.

    Implementations own the id counter. Ids are unique, strictly
    increasing, and never reused, even after deletion.
    """

    @abstractmethod
    def create(self, data: ExpenseData) -> ExpenseRecord:
        """
        Store a new expense.

        Args:
            data: Validated expense fields

        Returns:
            The stored record, carrying its newly assigned id
        """
        pass

    @abstractmethod
    def get(self, expense_id: int) -> Optional[ExpenseRecord]:
        """
        Retrieve an expense by id.

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    def update(self, expense_id: int, data: ExpenseData) -> ExpenseRecord:
        """
        Replace every field of an existing expense except its id.

        Args:
            expense_id: The expense to update
            data: Validated replacement fields

        Returns:
            The updated record

        Raises:
            NotFoundError: If no expense has this id
        """
        pass

    @abstractmethod
    def remove(self, expense_id: int) -> bool:
        """
        Remove an expense by id.

        Idempotent: removing a missing id is a no-op.

        Returns:
            True if a record was removed
        """
        pass

    @abstractmethod
    def all(self) -> tuple[ExpenseRecord, ...]:
        """
        Snapshot of every record in insertion order.
        """
        pass

    @property
    @abstractmethod
    def next_id(self) -> int:
        """The id the next created record will receive."""
        pass

    def __len__(self) -> int:
        return len(self.all())


class StorageError(Exception):
    """Base exception for store operations."""
    pass


class NotFoundError(StorageError):
    """Expense not found in the store."""

    def __init__(self, expense_id: int):
        self.expense_id = expense_id
        super().__init__(f"Expense {expense_id} not found")

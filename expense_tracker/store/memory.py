"""
In-Memory Expense Store

Holds the ordered record list and the next-id counter for the
lifetime of one tracker. There is no persistence.
"""

from typing import Optional

import structlog

from expense_tracker.models.expense import ExpenseData, ExpenseRecord
from expense_tracker.store.interface import ExpenseStoreInterface, NotFoundError


logger = structlog.get_logger(__name__)


class InMemoryExpenseStore(ExpenseStoreInterface):
    """
    List-backed store.

    Records keep insertion order. Updates replace the frozen record at
    the same position, so readers holding an older snapshot are
    unaffected.
    """

    def __init__(self, start_id: int = 1):
        if start_id < 1:
            raise ValueError("start_id must be at least 1")
        self._records: list[ExpenseRecord] = []
        self._next_id = start_id

    @property
    def next_id(self) -> int:
        return self._next_id

    def create(self, data: ExpenseData) -> ExpenseRecord:
        record = ExpenseRecord(id=self._next_id, **data.model_dump())
        self._next_id += 1
        self._records.append(record)
        logger.debug("record_created", expense_id=record.id, next_id=self._next_id)
        return record

    def get(self, expense_id: int) -> Optional[ExpenseRecord]:
        index = self._index_of(expense_id)
        if index is None:
            return None
        return self._records[index]

    def update(self, expense_id: int, data: ExpenseData) -> ExpenseRecord:
        index = self._index_of(expense_id)
        if index is None:
            raise NotFoundError(expense_id)

        record = ExpenseRecord(id=expense_id, **data.model_dump())
        self._records[index] = record
        logger.debug("record_updated", expense_id=expense_id)
        return record

    def remove(self, expense_id: int) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.id != expense_id]
        removed = len(self._records) < before
        logger.debug("record_removed", expense_id=expense_id, removed=removed)
        return removed

    def all(self) -> tuple[ExpenseRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, expense_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == expense_id:
                return index
        return None

"""Tests for the in-memory expense store."""

from datetime import date

import pytest

from expense_tracker.models.expense import ExpenseData
from expense_tracker.store import InMemoryExpenseStore, NotFoundError, StorageError


def _data(amount: float = 10.0, category: str = "Food", description: str = "") -> ExpenseData:
    return ExpenseData(
        amount=amount,
        category=category,
        description=description,
        date=date(2024, 5, 1),
    )


class TestCreate:
    """Tests for id assignment on create."""

    def test_first_id_is_one(self):
        """Test that a fresh store starts counting at 1."""
        store = InMemoryExpenseStore()
        record = store.create(_data())
        assert record.id == 1
        assert store.next_id == 2

    def test_ids_strictly_increase(self):
        """Test that ids are unique and increasing."""
        store = InMemoryExpenseStore()
        ids = [store.create(_data()).id for _ in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_ids_never_reused_after_delete(self):
        """Test that deleting records does not free their ids."""
        store = InMemoryExpenseStore()
        first = store.create(_data())
        second = store.create(_data())
        store.remove(second.id)
        store.remove(first.id)

        third = store.create(_data())
        assert third.id == 3
        assert len(store) == 1

    def test_insertion_order_kept(self):
        """Test that all() returns records in insertion order."""
        store = InMemoryExpenseStore()
        store.create(_data(description="a"))
        store.create(_data(description="b"))
        store.create(_data(description="c"))
        assert [r.description for r in store.all()] == ["a", "b", "c"]

    def test_custom_start_id(self):
        """Test that the counter can start elsewhere."""
        store = InMemoryExpenseStore(start_id=100)
        assert store.create(_data()).id == 100

    def test_start_id_must_be_positive(self):
        """Test that a zero start id is rejected."""
        with pytest.raises(ValueError):
            InMemoryExpenseStore(start_id=0)


class TestUpdate:
    """Tests for update."""

    def test_update_replaces_fields_keeps_id(self):
        """Test that update changes everything but the id."""
        store = InMemoryExpenseStore()
        record = store.create(_data(amount=10.0, category="Food", description="lunch"))

        updated = store.update(record.id, _data(amount=25.0, category="Travel", description="taxi"))

        assert updated.id == record.id
        assert updated.amount == 25.0
        assert updated.category == "Travel"
        assert updated.description == "taxi"
        assert store.get(record.id) == updated

    def test_update_keeps_position(self):
        """Test that an updated record stays where it was."""
        store = InMemoryExpenseStore()
        store.create(_data(description="a"))
        middle = store.create(_data(description="b"))
        store.create(_data(description="c"))

        store.update(middle.id, _data(description="B"))
        assert [r.description for r in store.all()] == ["a", "B", "c"]

    def test_update_missing_raises_not_found(self):
        """Test that updating an unknown id raises NotFoundError."""
        store = InMemoryExpenseStore()
        with pytest.raises(NotFoundError) as exc_info:
            store.update(99, _data())
        assert exc_info.value.expense_id == 99
        assert isinstance(exc_info.value, StorageError)

    def test_old_snapshot_unaffected_by_update(self):
        """Test that records handed out earlier do not change."""
        store = InMemoryExpenseStore()
        record = store.create(_data(amount=10.0))
        snapshot = store.all()

        store.update(record.id, _data(amount=99.0))
        assert snapshot[0].amount == 10.0


class TestRemove:
    """Tests for remove."""

    def test_remove_twice(self):
        """Test that remove returns True then False."""
        store = InMemoryExpenseStore()
        record = store.create(_data())
        store.create(_data())

        assert store.remove(record.id) is True
        assert len(store) == 1
        assert store.remove(record.id) is False
        assert len(store) == 1

    def test_remove_missing_is_noop(self):
        """Test that removing an unknown id is not an error."""
        store = InMemoryExpenseStore()
        store.create(_data())
        assert store.remove(42) is False
        assert len(store) == 1

    def test_get_missing_returns_none(self):
        """Test get on an unknown id."""
        assert InMemoryExpenseStore().get(1) is None

"""
Filter and search over expense records.

filter_expenses() only subsets: output keeps the input's insertion order.
Sorting for display is a separate step (newest_first).
"""

from typing import Optional, Sequence

from expense_tracker.models.expense import ExpenseQuery, ExpenseRecord


def matches_search(record: ExpenseRecord, term: str) -> bool:
    """Case-insensitive substring match on description or category."""
    term = term.lower()
    return term in record.description.lower() or term in record.category.lower()


def filter_expenses(
    records: Sequence[ExpenseRecord],
    category: Optional[str] = None,
    search: Optional[str] = None,
) -> list[ExpenseRecord]:
    """
    Records matching an exact category AND a search term.

    A missing or empty predicate passes everything.
    """
    query = ExpenseQuery(category=category, search=search)
    return apply_query(records, query)


def apply_query(
    records: Sequence[ExpenseRecord],
    query: ExpenseQuery,
) -> list[ExpenseRecord]:
    """Apply an ExpenseQuery: category first, then search."""
    result = list(records)

    if query.has_category:
        result = [r for r in result if r.category == query.category]

    if query.has_search:
        result = [r for r in result if matches_search(r, query.search)]

    return result


def newest_first(records: Sequence[ExpenseRecord]) -> list[ExpenseRecord]:
    """Display order: date descending, ties keep their relative order."""
    return sorted(records, key=lambda r: r.date, reverse=True)

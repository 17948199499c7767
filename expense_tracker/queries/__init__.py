"""Filter and search package."""

from expense_tracker.queries.filters import (
    apply_query,
    filter_expenses,
    matches_search,
    newest_first,
)

__all__ = ["apply_query", "filter_expenses", "matches_search", "newest_first"]

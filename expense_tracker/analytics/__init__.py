"""Aggregation engine package."""

from expense_tracker.analytics.insights import build_insights, format_currency
from expense_tracker.analytics.summary import (
    NO_CATEGORY,
    WEEK_DAYS,
    category_breakdown,
    daily_series,
    in_month,
    last_week_dates,
    summary_stats,
    totals_by_category,
    weekday_label,
)

__all__ = [
    "NO_CATEGORY",
    "WEEK_DAYS",
    "build_insights",
    "category_breakdown",
    "daily_series",
    "format_currency",
    "in_month",
    "last_week_dates",
    "summary_stats",
    "totals_by_category",
    "weekday_label",
]

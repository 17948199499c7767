"""
Aggregation Engine

DESIGN DECISION: Aggregation is PURE and DETERMINISTIC.
Every function takes a sequence of records and a reference date and
returns fresh plain-data models. Nothing is cached or incremental;
callers recompute after every change.

The reference date is the caller's "today". The engine never reads
the clock itself, which keeps results reproducible in tests.
"""

from datetime import date, timedelta
from typing import Iterable, Sequence

from expense_tracker.models.expense import (
    DEFAULT_CATEGORIES,
    CategoryBreakdownEntry,
    CategorySet,
    DailyPoint,
    ExpenseRecord,
    SummaryStats,
)


WEEK_DAYS = 7
NO_CATEGORY = "-"

_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


# =============================================================================
# DATE WINDOWS
# =============================================================================

def last_week_dates(reference_date: date) -> list[date]:
    """The 7 calendar days ending at reference_date, oldest first."""
    return [
        reference_date - timedelta(days=offset)
        for offset in range(WEEK_DAYS - 1, -1, -1)
    ]


def in_month(record: ExpenseRecord, reference_date: date) -> bool:
    """True when the record falls in the reference date's calendar month."""
    return (
        record.date.year == reference_date.year
        and record.date.month == reference_date.month
    )


def weekday_label(day: date) -> str:
    """Short English weekday name, independent of the process locale."""
    return _WEEKDAY_LABELS[day.weekday()]


# =============================================================================
# AGGREGATES
# =============================================================================

def totals_by_category(records: Iterable[ExpenseRecord]) -> dict[str, float]:
    """
    Sum amounts per category.

    Keys appear in order of first encounter.
    """
    totals: dict[str, float] = {}
    for record in records:
        totals[record.category] = totals.get(record.category, 0.0) + record.amount
    return totals


def summary_stats(
    records: Sequence[ExpenseRecord],
    reference_date: date,
) -> SummaryStats:
    """
    Headline numbers relative to reference_date.

    - total_expenses: spend in the reference month
    - total_transactions: every record, any date
    - avg_daily: last-7-days spend over a fixed divisor of 7
    - top_category: biggest category this month, first encountered wins ties
    """
    month_records = [r for r in records if in_month(r, reference_date)]
    week = set(last_week_dates(reference_date))
    week_total = sum(r.amount for r in records if r.date in week)

    month_totals = totals_by_category(month_records)
    # max() keeps the first of equal keys, which is first encounter here
    top_category = (
        max(month_totals, key=month_totals.__getitem__)
        if month_totals
        else NO_CATEGORY
    )

    return SummaryStats(
        total_expenses=sum(r.amount for r in month_records),
        total_transactions=len(records),
        avg_daily=week_total / WEEK_DAYS,
        top_category=top_category,
    )


def category_breakdown(
    records: Sequence[ExpenseRecord],
    categories: CategorySet = DEFAULT_CATEGORIES,
) -> list[CategoryBreakdownEntry]:
    """
    Spending per category across all dates, largest first.

    Categories with no records are left out. Percentages are shares of
    the grand total rounded to one decimal, 0 when the total is 0.
    """
    totals = totals_by_category(records)
    grand_total = sum(totals.values())

    entries = [
        CategoryBreakdownEntry(
            category=category,
            amount=amount,
            percentage=round(amount / grand_total * 100, 1) if grand_total > 0 else 0.0,
            color=categories.color_for(category),
        )
        for category, amount in totals.items()
    ]
    # sorted() is stable: equal amounts keep first-encounter order
    return sorted(entries, key=lambda entry: entry.amount, reverse=True)


def daily_series(
    records: Sequence[ExpenseRecord],
    reference_date: date,
) -> list[DailyPoint]:
    """
    Spend per day for the week ending at reference_date.

    Always exactly 7 points, oldest first. Days without records are 0.
    """
    days = last_week_dates(reference_date)
    totals = {day: 0.0 for day in days}

    for record in records:
        if record.date in totals:
            totals[record.date] += record.amount

    return [
        DailyPoint(date=day, amount=totals[day], label=weekday_label(day))
        for day in days
    ]

"""Tests for the aggregation engine."""

from datetime import date, timedelta

import pytest

from expense_tracker.analytics import (
    build_insights,
    category_breakdown,
    daily_series,
    format_currency,
    last_week_dates,
    summary_stats,
    totals_by_category,
    weekday_label,
)
from expense_tracker.models.expense import (
    FALLBACK_COLOR,
    CategoryBreakdownEntry,
    SummaryStats,
)


class TestDateWindows:
    """Tests for the week and month windows."""

    def test_last_week_dates(self, reference_date):
        """Test the 7 days ending at the reference date, oldest first."""
        days = last_week_dates(reference_date)
        assert len(days) == 7
        assert days[0] == date(2024, 5, 9)
        assert days[-1] == reference_date

    def test_week_crosses_month_boundary(self):
        days = last_week_dates(date(2024, 3, 2))
        assert days[0] == date(2024, 2, 25)
        assert date(2024, 2, 29) in days

    def test_weekday_labels(self):
        assert weekday_label(date(2024, 5, 13)) == "Mon"
        assert weekday_label(date(2024, 5, 19)) == "Sun"


class TestSummaryStats:
    """Tests for summary_stats."""

    def test_empty(self, reference_date):
        """Test the empty-store summary."""
        stats = summary_stats([], reference_date)
        assert stats == SummaryStats(
            total_expenses=0,
            total_transactions=0,
            avg_daily=0,
            top_category="-",
        )

    def test_month_total_only_counts_reference_month(self, make_record, reference_date):
        """Test that other months are left out of the monthly total."""
        records = [
            make_record(1, 50.0, expense_date=date(2024, 5, 1)),
            make_record(2, 30.0, expense_date=date(2024, 5, 31)),
            make_record(3, 99.0, expense_date=date(2024, 4, 30)),
            make_record(4, 11.0, expense_date=date(2023, 5, 15)),
        ]
        stats = summary_stats(records, reference_date)
        assert stats.total_expenses == 80.0
        assert stats.total_transactions == 4

    def test_avg_daily_uses_fixed_divisor(self, make_record, reference_date):
        """Test that one spending day is still divided by 7."""
        records = [make_record(1, 70.0, expense_date=reference_date - timedelta(days=3))]
        stats = summary_stats(records, reference_date)
        assert stats.avg_daily == 10.0

    def test_avg_daily_window_edges(self, make_record, reference_date):
        """Test that day 0 and day -6 count but day -7 does not."""
        records = [
            make_record(1, 7.0, expense_date=reference_date),
            make_record(2, 14.0, expense_date=reference_date - timedelta(days=6)),
            make_record(3, 700.0, expense_date=reference_date - timedelta(days=7)),
            make_record(4, 700.0, expense_date=reference_date + timedelta(days=1)),
        ]
        stats = summary_stats(records, reference_date)
        assert stats.avg_daily == pytest.approx(3.0)

    def test_avg_daily_spans_previous_month(self, make_record):
        """Test that the week window ignores month boundaries."""
        reference = date(2024, 5, 2)
        records = [make_record(1, 21.0, expense_date=date(2024, 4, 28))]
        stats = summary_stats(records, reference)
        assert stats.avg_daily == pytest.approx(3.0)
        assert stats.total_expenses == 0
        assert stats.top_category == "-"

    def test_top_category(self, make_record, reference_date):
        """Test the biggest category this month."""
        records = [
            make_record(1, 20.0, "Food"),
            make_record(2, 45.0, "Travel"),
            make_record(3, 30.0, "Food"),
            make_record(4, 500.0, "Housing", expense_date=date(2024, 4, 1)),
        ]
        assert summary_stats(records, reference_date).top_category == "Food"

    def test_top_category_tie_goes_to_first_encountered(self, make_record, reference_date):
        records = [
            make_record(1, 50.0, "Shopping"),
            make_record(2, 50.0, "Food"),
        ]
        assert summary_stats(records, reference_date).top_category == "Shopping"


class TestCategoryBreakdown:
    """Tests for category_breakdown."""

    def test_single_category(self, make_record):
        """Test two records in one category."""
        records = [
            make_record(1, 50.0, "Food", expense_date=date(2024, 5, 1)),
            make_record(2, 30.0, "Food", expense_date=date(2024, 5, 2)),
        ]
        assert category_breakdown(records) == [
            CategoryBreakdownEntry(category="Food", amount=80.0, percentage=100.0, color="#1FB8CD"),
        ]

    def test_sorted_descending_and_omits_empty(self, make_record):
        """Test ordering and that unused categories are left out."""
        records = [
            make_record(1, 10.0, "Other"),
            make_record(2, 60.0, "Food"),
            make_record(3, 30.0, "Travel"),
        ]
        breakdown = category_breakdown(records)
        assert [e.category for e in breakdown] == ["Food", "Travel", "Other"]
        assert [e.percentage for e in breakdown] == [60.0, 30.0, 10.0]
        assert len(breakdown) == 3

    def test_no_date_filter(self, make_record):
        """Test that every record counts regardless of date."""
        records = [
            make_record(1, 10.0, "Food", expense_date=date(2020, 1, 1)),
            make_record(2, 10.0, "Food", expense_date=date(2030, 1, 1)),
        ]
        assert category_breakdown(records)[0].amount == 20.0

    def test_totals_match_records(self, make_record):
        """Test that breakdown amounts add up to the record total."""
        amounts = [12.34, 0.1, 0.2, 99.99, 5.55, 1000.01]
        categories = ["Food", "Travel", "Food", "Housing", "Other", "Travel"]
        records = [
            make_record(i + 1, amount, category)
            for i, (amount, category) in enumerate(zip(amounts, categories))
        ]
        breakdown = category_breakdown(records)
        assert sum(e.amount for e in breakdown) == pytest.approx(sum(amounts))

    def test_percentages(self, make_record):
        """Test rounding to one decimal and the near-100 sum."""
        records = [
            make_record(1, 10.0, "Food"),
            make_record(2, 10.0, "Travel"),
            make_record(3, 10.0, "Other"),
        ]
        breakdown = category_breakdown(records)
        assert [e.percentage for e in breakdown] == [33.3, 33.3, 33.3]
        assert sum(e.percentage for e in breakdown) == pytest.approx(100, abs=0.05 * len(breakdown))

    def test_equal_amounts_keep_first_encounter_order(self, make_record):
        records = [
            make_record(1, 5.0, "Travel"),
            make_record(2, 5.0, "Food"),
        ]
        assert [e.category for e in category_breakdown(records)] == ["Travel", "Food"]

    def test_unknown_category_gets_fallback_color(self, make_record):
        """Test records whose category is outside the set."""
        breakdown = category_breakdown([make_record(1, 5.0, "Pets")])
        assert breakdown[0].color == FALLBACK_COLOR

    def test_empty(self):
        assert category_breakdown([]) == []

    def test_totals_by_category_order(self, make_record):
        records = [
            make_record(1, 1.0, "Travel"),
            make_record(2, 2.0, "Food"),
            make_record(3, 3.0, "Travel"),
        ]
        assert totals_by_category(records) == {"Travel": 4.0, "Food": 2.0}
        assert list(totals_by_category(records)) == ["Travel", "Food"]


class TestDailySeries:
    """Tests for daily_series."""

    def test_empty_still_seven_points(self, reference_date):
        """Test that the series length does not depend on data."""
        series = daily_series([], reference_date)
        assert len(series) == 7
        assert all(point.amount == 0 for point in series)

    def test_order_and_labels(self, reference_date):
        """Test ascending dates ending at the reference date."""
        series = daily_series([], reference_date)
        assert [p.date for p in series] == sorted(p.date for p in series)
        assert series[-1].date == reference_date
        assert [p.label for p in series] == ["Thu", "Fri", "Sat", "Sun", "Mon", "Tue", "Wed"]

    def test_sums_per_day(self, make_record, reference_date):
        """Test that records on the same day add up and others are skipped."""
        records = [
            make_record(1, 5.0, expense_date=reference_date),
            make_record(2, 7.5, expense_date=reference_date),
            make_record(3, 3.0, expense_date=reference_date - timedelta(days=2)),
            make_record(4, 100.0, expense_date=reference_date - timedelta(days=8)),
        ]
        amounts = [p.amount for p in daily_series(records, reference_date)]
        assert amounts == [0.0, 0.0, 0.0, 0.0, 3.0, 0.0, 12.5]

    def test_many_records(self, make_record, reference_date):
        records = [
            make_record(i, 1.0, expense_date=reference_date - timedelta(days=i % 10))
            for i in range(1, 101)
        ]
        series = daily_series(records, reference_date)
        assert len(series) == 7
        assert sum(p.amount for p in series) == 70.0


class TestInsights:
    """Tests for build_insights and currency formatting."""

    def test_format_currency(self):
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(0) == "$0.00"
        assert format_currency(3, "€") == "€3.00"
        assert format_currency(-2.5) == "-$2.50"

    def test_no_insights_when_empty(self):
        assert build_insights(SummaryStats(), []) == []

    def test_all_three_in_order(self):
        """Test that insights come in a fixed order."""
        stats = SummaryStats(
            total_expenses=80.0,
            total_transactions=2,
            avg_daily=10.0,
            top_category="Food",
        )
        breakdown = [
            CategoryBreakdownEntry(category="Food", amount=80.0, percentage=100.0, color="#1FB8CD"),
        ]
        insights = build_insights(stats, breakdown)

        assert [i.title for i in insights] == [
            "Highest Spending Category",
            "Daily Average",
            "Monthly Progress",
        ]
        assert insights[0].description == (
            "You spent the most on Food with $80.00 (100.0% of total)"
        )
        assert insights[1].description == (
            "Your average daily spending over the last week is $10.00"
        )
        assert insights[2].description == (
            "You've spent $80.00 this month across 2 transactions"
        )

    def test_only_breakdown_insight_for_old_spending(self):
        """Test old records produce only the category insight."""
        stats = SummaryStats(total_transactions=1)
        breakdown = [
            CategoryBreakdownEntry(category="Travel", amount=40.0, percentage=100.0, color="#964325"),
        ]
        insights = build_insights(stats, breakdown)
        assert [i.title for i in insights] == ["Highest Spending Category"]

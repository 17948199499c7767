"""
Spending insights.

Short statements derived from SummaryStats and the category breakdown.
At most three, always in the same order.
"""

from typing import Sequence

from expense_tracker.models.expense import CategoryBreakdownEntry, Insight, SummaryStats


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format an amount with a currency symbol and two decimals."""
    if amount < 0:
        return f"-{symbol}{abs(amount):,.2f}"
    return f"{symbol}{amount:,.2f}"


def build_insights(
    stats: SummaryStats,
    breakdown: Sequence[CategoryBreakdownEntry],
    currency_symbol: str = "$",
) -> list[Insight]:
    """
    Derive up to three insights.

    Order: highest spending category (if any breakdown), daily average
    (if positive), monthly progress (if this month's total is positive).
    """
    insights = []

    if breakdown:
        top = breakdown[0]
        insights.append(Insight(
            title="Highest Spending Category",
            description=(
                f"You spent the most on {top.category} with "
                f"{format_currency(top.amount, currency_symbol)} "
                f"({top.percentage:.1f}% of total)"
            ),
        ))

    if stats.avg_daily > 0:
        insights.append(Insight(
            title="Daily Average",
            description=(
                "Your average daily spending over the last week is "
                f"{format_currency(stats.avg_daily, currency_symbol)}"
            ),
        ))

    if stats.total_expenses > 0:
        insights.append(Insight(
            title="Monthly Progress",
            description=(
                f"You've spent {format_currency(stats.total_expenses, currency_symbol)} "
                f"this month across {stats.total_transactions} transactions"
            ),
        ))

    return insights

"""
Streamlit Frontend for Expense Tracker

This is the presentation layer around the engine. It owns everything
the engine does not:
1. Tabs, forms and tables
2. Charts
3. Which expense is being edited or deleted
4. Turning engine errors into messages

Every render asks the tracker for fresh data. Nothing is cached here.
"""

from datetime import date

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from expense_tracker.analytics import format_currency
from expense_tracker.config import get_settings
from expense_tracker.models.expense import CategoryBreakdownEntry, ExpenseDraft, ExpenseRecord
from expense_tracker.queries import newest_first
from expense_tracker.store import NotFoundError
from expense_tracker.tracker import ExpenseTracker, create_tracker
from expense_tracker.validation import ExpenseValidationError, ExpenseValidator


# Page configuration
st.set_page_config(
    page_title="Expense Tracker",
    page_icon="💸",
    layout="wide",
)

st.markdown("""
<style>
    .category-swatch {
        display: inline-block;
        width: 12px;
        height: 12px;
        border-radius: 3px;
        margin-right: 8px;
    }
    .insight-item {
        padding: 12px 16px;
        background-color: #f3f4f6;
        border-radius: 8px;
        margin: 8px 0;
    }
</style>
""", unsafe_allow_html=True)


def get_tracker() -> ExpenseTracker:
    """One tracker per browser session; state lives as long as the page."""
    if "tracker" not in st.session_state:
        st.session_state.tracker = create_tracker()
    return st.session_state.tracker


def money(amount: float) -> str:
    return format_currency(amount, get_settings().app.currency_symbol)


def category_chart(breakdown: list[CategoryBreakdownEntry]) -> go.Figure:
    """Doughnut of category totals in each category's own color."""
    fig = go.Figure(
        go.Pie(
            labels=[entry.category for entry in breakdown],
            values=[entry.amount for entry in breakdown],
            marker={"colors": [entry.color for entry in breakdown]},
            hole=0.5,
            sort=False,
        )
    )
    fig.update_layout(margin={"t": 10, "b": 10, "l": 10, "r": 10})
    return fig


def main():
    """Main application entry point."""
    tracker = get_tracker()

    # UI-only state: which record the form edits, which one awaits deletion
    if "edit_id" not in st.session_state:
        st.session_state.edit_id = None
    if "delete_id" not in st.session_state:
        st.session_state.delete_id = None

    st.title("💸 Expense Tracker")

    dashboard_tab, expenses_tab, summary_tab = st.tabs(
        ["📊 Dashboard", "🧾 Expenses", "📈 Summary"]
    )

    with dashboard_tab:
        render_dashboard(tracker)
    with expenses_tab:
        render_expenses(tracker)
    with summary_tab:
        render_summary(tracker)


def render_dashboard(tracker: ExpenseTracker):
    """Summary cards plus the category and weekly charts."""
    stats = tracker.summary_stats()

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("This Month", money(stats.total_expenses))
    col2.metric("Transactions", stats.total_transactions)
    col3.metric("Daily Average (7 days)", money(stats.avg_daily))
    col4.metric("Top Category", stats.top_category)

    if not tracker.list_expenses():
        st.info('No expenses yet. Add one in the Expenses tab to begin tracking your spending.')
        return

    chart_col1, chart_col2 = st.columns(2)

    with chart_col1:
        st.subheader("Spending by Category")
        st.plotly_chart(category_chart(tracker.category_breakdown()), use_container_width=True)

    with chart_col2:
        st.subheader("Last 7 Days")
        series = tracker.daily_series()
        if any(point.amount > 0 for point in series):
            st.bar_chart(
                pd.DataFrame(
                    {"Spending": [point.amount for point in series]},
                    index=[f"{point.label} {point.date.day}" for point in series],
                )
            )
        else:
            st.caption("No spending in the last 7 days.")


def render_expenses(tracker: ExpenseTracker):
    """Filterable expense list with add, edit and delete."""
    render_expense_form(tracker)

    st.markdown("---")

    col1, col2 = st.columns([1, 2])
    with col1:
        category = st.selectbox(
            "Category",
            options=[""] + list(tracker.categories.names),
            format_func=lambda name: name or "All Categories",
            key="filter_category",
        )
    with col2:
        search = st.text_input(
            "Search",
            placeholder="Search description or category...",
            key="filter_search",
        )

    filtered = tracker.filter_expenses(category or None, search or None)
    is_filtered = bool(category or search)

    if not filtered:
        if is_filtered:
            st.info("No expenses found. Try adjusting your search or filters.")
        else:
            st.info("No expenses added yet. Use the form above to add one.")
        return

    for record in newest_first(filtered):
        render_expense_row(tracker, record)


def render_expense_row(tracker: ExpenseTracker, record: ExpenseRecord):
    col1, col2, col3, col4, col5, col6 = st.columns([2, 2, 4, 2, 1, 1])
    col1.write(record.date.strftime("%b %d, %Y"))
    col2.write(record.category)
    col3.write(record.description or "-")
    col4.write(money(record.amount))

    if col5.button("Edit", key=f"edit_{record.id}"):
        st.session_state.edit_id = record.id
        st.rerun()

    if col6.button("Delete", key=f"delete_{record.id}"):
        st.session_state.delete_id = record.id
        st.rerun()

    if st.session_state.delete_id == record.id:
        st.warning("Delete this expense? This cannot be undone.")
        confirm_col, cancel_col = st.columns(2)
        if confirm_col.button("Confirm Delete", key=f"confirm_delete_{record.id}", type="primary"):
            tracker.delete_expense(record.id)
            st.session_state.delete_id = None
            if st.session_state.edit_id == record.id:
                st.session_state.edit_id = None
            st.rerun()
        if cancel_col.button("Cancel", key=f"cancel_delete_{record.id}"):
            st.session_state.delete_id = None
            st.rerun()


def render_expense_form(tracker: ExpenseTracker):
    """Add form, or edit form when an edit target is set."""
    editing = (
        tracker.get_expense(st.session_state.edit_id)
        if st.session_state.edit_id is not None
        else None
    )
    if st.session_state.edit_id is not None and editing is None:
        # Target was deleted elsewhere
        st.session_state.edit_id = None

    st.subheader("Edit Expense" if editing else "Add Expense")
    for warning in st.session_state.pop("form_warnings", []):
        st.warning(warning)
    categories = list(tracker.categories.names)

    with st.form("expense_form", clear_on_submit=editing is None):
        col1, col2 = st.columns(2)
        with col1:
            amount = st.text_input(
                "Amount *",
                value=ExpenseValidator.format_amount(editing.amount) if editing else "",
                placeholder="0.00",
            )
            category = st.selectbox(
                "Category *",
                options=categories,
                index=categories.index(editing.category) if editing else 0,
            )
        with col2:
            expense_date = st.date_input(
                "Date *",
                value=editing.date if editing else date.today(),
            )
            description = st.text_input(
                "Description",
                value=editing.description if editing else "",
            )

        submitted = st.form_submit_button("Save", type="primary")

    if editing and st.button("Cancel Edit"):
        st.session_state.edit_id = None
        st.rerun()

    if not submitted:
        return

    draft = ExpenseDraft(
        amount=amount,
        category=category,
        description=description,
        date=expense_date,
    )

    validation = tracker.validate_draft(draft)

    try:
        if editing:
            tracker.update_expense(editing.id, draft)
            st.session_state.edit_id = None
        else:
            tracker.create_expense(draft)
    except ExpenseValidationError as e:
        st.error(f"Could not save: {e}")
        return
    except NotFoundError:
        st.session_state.edit_id = None
        st.error("This expense no longer exists.")
        return

    st.session_state.form_warnings = validation.warnings
    st.rerun()


def render_summary(tracker: ExpenseTracker):
    """Category breakdown list and spending insights."""
    st.subheader("Category Breakdown")
    breakdown = tracker.category_breakdown()

    if not breakdown:
        st.info("No category data available yet. Add expenses to see your category breakdown.")
    else:
        for entry in breakdown:
            col1, col2, col3 = st.columns([4, 2, 1])
            col1.markdown(
                f'<span class="category-swatch" style="background-color: {entry.color}"></span>'
                f"{entry.category}",
                unsafe_allow_html=True,
            )
            col2.write(money(entry.amount))
            col3.write(f"{entry.percentage:.1f}%")

    st.subheader("Spending Insights")
    if not tracker.list_expenses():
        st.info("Start tracking your expenses to see insights here.")
        return

    for insight in tracker.insights():
        st.markdown(f"""
        <div class="insight-item">
            <strong>{insight.title}</strong><br/>
            {insight.description}
        </div>
        """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()

"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from finsight.application.ports.export_sink import ExportSinkPort
from finsight.application.use_cases.get_monthly_overview import (
    GetMonthlyOverviewUseCase,
    MonthlyOverview,
)
from finsight.application.use_cases.get_period_report import (
    GetPeriodReportUseCase,
    PeriodReport,
)
from finsight.application.use_cases.get_planning_summary import (
    GetPlanningSummaryUseCase,
    PlanningSummary,
)
from finsight.application.use_cases.get_savings_trend import (
    GetSavingsTrendUseCase,
)
from finsight.adapters.interface.streamlit.trend_chart import (
    build_trend_figure,
    build_trend_series,
)
from finsight.domain.constants import CSV_FORMAT, XLS_FORMAT, resolve_icon
from finsight.domain.models import (
    CategorySpending,
    MonthlyTrendPoint,
    Transaction,
)
from finsight.domain.policies.transaction_filters import (
    ALL,
    TransactionFilter,
    filter_transactions,
)
from finsight.domain.services.export import build_export_payload
from finsight.domain.services.periods import MONTHLY, YEARLY
from finsight.domain.services.planning import build_reminders
from finsight.infrastructure.container import (
    build_planning_repository,
    build_transaction_repository,
)
from finsight.infrastructure.settings import FinSightSettings

CURRENCY_SYMBOLS = {"INR": "₹", "USD": "$", "EUR": "€", "GBP": "£"}


class StreamlitDownloadSink(ExportSinkPort):
    """Sink rendering a download button for the exported payload."""

    def __init__(self, label: str) -> None:
        self._label = label

    def deliver(self, content: str, mime_type: str, filename: str) -> None:
        st.download_button(
            self._label,
            data=content.encode("utf-8"),
            file_name=filename,
            mime=mime_type,
        )


def _fetch_overview(user_id: str, year: int, month: int) -> MonthlyOverview:
    """Fetch the monthly dashboard overview."""
    use_case = GetMonthlyOverviewUseCase(
        transaction_repository=build_transaction_repository(),
        planning_repository=build_planning_repository(),
    )
    return use_case.execute(user_id, year, month)


@st.cache_data(show_spinner=False)
def _load_overview(user_id: str, year: int, month: int) -> MonthlyOverview:
    """Cached wrapper around _fetch_overview."""
    return _fetch_overview(user_id, year, month)


def _fetch_savings_trend(
    user_id: str,
    today: date,
) -> list[MonthlyTrendPoint]:
    """Fetch the six-month savings trend."""
    use_case = GetSavingsTrendUseCase(
        transaction_repository=build_transaction_repository(),
    )
    return use_case.execute(user_id, today)


@st.cache_data(show_spinner=False)
def _load_savings_trend(
    user_id: str,
    today: date,
) -> list[MonthlyTrendPoint]:
    """Cached wrapper around _fetch_savings_trend."""
    return _fetch_savings_trend(user_id, today)


def _fetch_report(
    user_id: str,
    period: str,
    year: int,
    month: int,
) -> PeriodReport:
    """Fetch a monthly or yearly report."""
    use_case = GetPeriodReportUseCase(
        transaction_repository=build_transaction_repository(),
    )
    return use_case.execute(user_id, period, year, month)


@st.cache_data(show_spinner=False)
def _load_report(
    user_id: str,
    period: str,
    year: int,
    month: int,
) -> PeriodReport:
    """Cached wrapper around _fetch_report."""
    return _fetch_report(user_id, period, year, month)


def _fetch_transactions(user_id: str) -> list[Transaction]:
    """Fetch every transaction of the user."""
    return build_transaction_repository().fetch_transactions(
        user_id,
        None,
        None,
    )


@st.cache_data(show_spinner=False)
def _load_transactions(user_id: str) -> list[Transaction]:
    """Cached wrapper around _fetch_transactions."""
    return _fetch_transactions(user_id)


def _fetch_planning(user_id: str) -> PlanningSummary:
    """Fetch loans and savings goals."""
    use_case = GetPlanningSummaryUseCase(
        planning_repository=build_planning_repository(),
    )
    return use_case.execute(user_id)


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, f"{currency_code} ")
    return f"{symbol}{value:,.2f}"


def _format_change(percent: Decimal) -> str:
    """Format a period-over-period change for display."""
    sign = "+" if percent >= 0 else ""
    return f"{sign}{percent:.1f}% vs last"


def _prepare_donut_chart_data(
    spending: Sequence[CategorySpending],
    currency_code: str,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        spending: Category spending sorted by amount.
        currency_code: Currency used for labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Altair-ready rows with category, amount, color and labels.
    """
    top_items = list(spending[:max_categories])
    other_items = spending[max_categories:]
    rows: list[dict[str, str | float]] = [
        {
            "category": item.category.name,
            "amount": float(item.amount),
            "color": item.category.color,
            "amount_label": _format_currency(item.amount, currency_code),
            "share_label": f"{item.percentage:.1f}%",
        }
        for item in top_items
    ]
    if other_items:
        other_amount = sum(
            (item.amount for item in other_items),
            start=Decimal("0"),
        )
        other_share = sum(
            (item.percentage for item in other_items),
            start=Decimal("0"),
        )
        rows.append(
            {
                "category": "Other",
                "amount": float(other_amount),
                "color": "#6b7280",
                "amount_label": _format_currency(other_amount, currency_code),
                "share_label": f"{other_share:.1f}%",
            }
        )
    return rows


def _render_category_chart(
    spending: Sequence[CategorySpending],
    currency_code: str,
    title: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of spending by category."""
    st.subheader(title)
    if not spending:
        st.info("No categorized expenses for this period.")
        return
    data = _prepare_donut_chart_data(spending, currency_code)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.35,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.altair_chart(chart, use_container_width=True)


def _render_trend(points: list[MonthlyTrendPoint], title: str) -> None:
    series = build_trend_series(points)
    st.subheader(title)
    if series.is_empty:
        st.info("No transactions in this range.")
        return
    st.plotly_chart(build_trend_figure(series), use_container_width=True)


def _render_dashboard(user_id: str, currency_code: str) -> None:
    today = date.today()
    year = st.sidebar.number_input(
        "Year", min_value=2000, max_value=2100, value=today.year, step=1
    )
    month = st.sidebar.selectbox(
        "Month", list(range(1, 13)), index=today.month - 1
    )
    overview = _load_overview(user_id, int(year), int(month))
    currency_code = overview.currency_code or currency_code
    comparison = overview.comparison

    income_col, expense_col, balance_col, budget_col = st.columns(4)
    income_col.metric(
        "Income",
        _format_currency(overview.income, currency_code),
        _format_change(comparison.income_change),
    )
    expense_col.metric(
        "Expenses",
        _format_currency(overview.summary.total_expense, currency_code),
        _format_change(comparison.expense_change),
        delta_color="inverse",
    )
    balance_col.metric(
        "Balance",
        _format_currency(overview.balance, currency_code),
    )
    budget_col.metric(
        "Budget used",
        f"{overview.budget.used_percentage:.0f}%",
        _format_currency(overview.budget.remaining, currency_code),
    )
    for alert in overview.alerts:
        st.warning(f"{alert.title}: {alert.message}")
    for reminder in build_reminders(_load_transactions(user_id), today):
        st.info(f"{reminder.title}: {reminder.message}")

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_category_chart(
            overview.summary.categories,
            currency_code,
            "Spending by Category",
        )
    with chart_right:
        _render_trend(
            _load_savings_trend(user_id, today),
            "Savings Trend (6 months)",
        )

    for group in overview.groups:
        st.markdown(
            f"**{group.group.title()}**: "
            f"{_format_currency(group.total, currency_code)}"
        )
        st.dataframe(
            [
                {
                    "Category": (
                        f"{resolve_icon(item.category.icon)} "
                        f"{item.category.name}"
                    ),
                    "Amount": float(item.amount),
                    "Share": f"{item.percentage:.1f}%",
                }
                for item in group.categories
            ],
            use_container_width=True,
            hide_index=True,
        )


def _render_transactions(user_id: str) -> None:
    transactions = _load_transactions(user_id)
    search = st.text_input("Search", placeholder="Description or category")
    kind = st.selectbox("Type", [ALL, "income", "expense"])
    categories = {
        t.category.id: t.category.name
        for t in transactions
        if t.category is not None
    }
    category_id = st.selectbox(
        "Category",
        [ALL, *categories],
        format_func=lambda key: "All" if key == ALL else categories[key],
    )
    criteria = TransactionFilter(search=search, kind=kind, category_id=category_id)
    filtered = filter_transactions(transactions, criteria)
    st.caption(
        f"{len(filtered)} transaction{'s' if len(filtered) != 1 else ''}"
    )
    if not filtered:
        st.warning(
            "No transactions match your filters"
            if criteria.is_active
            else "No transactions yet"
        )
        return
    st.dataframe(
        [
            {
                "Date": t.date.isoformat(),
                "Type": t.kind,
                "Category": t.category.name if t.category else "Uncategorized",
                "Amount": float(t.amount),
                "Description": t.description or "",
            }
            for t in filtered
        ],
        use_container_width=True,
        hide_index=True,
    )
    _render_export_buttons(filtered)


def _render_export_buttons(transactions: Sequence[Transaction]) -> None:
    """Offer CSV and Excel downloads of the rows already on screen."""
    csv_col, xls_col = st.columns(2)
    for column, fmt, label in (
        (csv_col, CSV_FORMAT, "Export CSV"),
        (xls_col, XLS_FORMAT, "Export Excel"),
    ):
        payload = build_export_payload(transactions, fmt)
        if payload is None:
            continue
        with column:
            StreamlitDownloadSink(label).deliver(
                payload.content,
                payload.mime_type,
                payload.filename,
            )


def _render_reports(user_id: str, currency_code: str) -> None:
    today = date.today()
    period = st.sidebar.radio("Period", [MONTHLY, YEARLY])
    year = st.sidebar.number_input(
        "Year", min_value=2000, max_value=2100, value=today.year, step=1
    )
    month = today.month
    if period == MONTHLY:
        month = st.sidebar.selectbox(
            "Month", list(range(1, 13)), index=today.month - 1
        )
    report = _load_report(user_id, period, int(year), int(month))
    summary = report.comparison.current

    income_col, expense_col, savings_col = st.columns(3)
    income_col.metric(
        "Total Income",
        _format_currency(summary.total_income, currency_code),
        _format_change(report.comparison.income_change),
    )
    expense_col.metric(
        "Total Expenses",
        _format_currency(summary.total_expense, currency_code),
        _format_change(report.comparison.expense_change),
        delta_color="inverse",
    )
    savings_col.metric(
        "Net Savings",
        _format_currency(summary.net, currency_code),
    )
    _render_category_chart(
        summary.categories,
        currency_code,
        "Expense Breakdown",
    )
    if report.trend:
        _render_trend(report.trend, "Monthly Trend")
    st.subheader("Compared with the previous period")
    st.dataframe(
        [
            {
                "Category": item.name,
                "Current": float(item.current),
                "Previous": float(item.previous),
                "Change": f"{item.change:+.1f}%",
            }
            for item in report.categories
        ],
        use_container_width=True,
        hide_index=True,
    )


def _render_planning(user_id: str, currency_code: str) -> None:
    planning = _fetch_planning(user_id)
    emi_col, debt_col, saved_col = st.columns(3)
    emi_col.metric(
        "Monthly EMI",
        _format_currency(planning.portfolio.total_emi, currency_code),
    )
    debt_col.metric(
        "Total Debt",
        _format_currency(planning.portfolio.total_debt, currency_code),
    )
    saved_col.metric(
        "Total Saved",
        _format_currency(planning.progress.total_saved, currency_code),
        f"{planning.progress.overall_progress:.0f}% of target",
    )
    for goal in planning.goals:
        target = goal.target_amount or Decimal("1")
        st.progress(
            min(float(goal.current_amount / target), 1.0),
            text=f"{resolve_icon(goal.icon)} {goal.name}",
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="FinSight", layout="wide")
    st.title("FinSight")

    settings = FinSightSettings.from_env()
    if settings.user_id is None:
        st.warning("Set FINSIGHT_USER_ID to load your data.")
        return

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Transactions", "Reports", "Planning"],
    )
    if page == "Dashboard":
        _render_dashboard(settings.user_id, settings.currency)
    elif page == "Transactions":
        _render_transactions(settings.user_id)
    elif page == "Reports":
        _render_reports(settings.user_id, settings.currency)
    else:
        _render_planning(settings.user_id, settings.currency)


if __name__ == "__main__":  # pragma: no cover
    main()

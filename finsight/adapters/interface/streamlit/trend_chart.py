"""Monthly income/expense trend presentation logic for the Streamlit UI.

This module turns ``MonthlyTrendPoint`` lists produced by the report and
savings-trend use cases into chart series and a Plotly figure. It performs
no IO; the UI loads the points and renders the returned figure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from finsight.domain.models import MonthlyTrendPoint

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


INCOME_COLOR = "#16a34a"
EXPENSE_COLOR = "#dc2626"
SAVINGS_COLOR = "#6366f1"


@dataclass(frozen=True)
class TrendSeries:
    """Chart-ready series aligned on month labels."""

    labels: list[str]
    income: list[float]
    expenses: list[float]
    savings: list[float]

    @property
    def is_empty(self) -> bool:
        """Return True when every value of every series is zero."""
        return not any(self.income) and not any(self.expenses)


def build_trend_series(points: list[MonthlyTrendPoint]) -> TrendSeries:
    """Convert trend points into float series for plotting.

    Args:
        points: Trend points in chronological order.

    Returns:
        TrendSeries: Labels and income/expense/savings values.
    """
    return TrendSeries(
        labels=[point.label for point in points],
        income=[float(point.income) for point in points],
        expenses=[float(point.expense) for point in points],
        savings=[float(point.savings) for point in points],
    )


def build_trend_figure(
    series: TrendSeries,
    show_savings: bool = True,
) -> "go.Figure":
    """Build a grouped bar chart with an optional savings line.

    Args:
        series: Series returned by ``build_trend_series``.
        show_savings: Whether to overlay the savings line.

    Returns:
        Plotly figure ready for ``st.plotly_chart``.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(
                name="Income",
                x=series.labels,
                y=series.income,
                marker_color=INCOME_COLOR,
            ),
            go.Bar(
                name="Expenses",
                x=series.labels,
                y=series.expenses,
                marker_color=EXPENSE_COLOR,
            ),
        ]
    )
    if show_savings:
        fig.add_trace(
            go.Scatter(
                name="Savings",
                x=series.labels,
                y=series.savings,
                mode="lines+markers",
                line=dict(color=SAVINGS_COLOR, width=2),
            )
        )
    fig.update_layout(
        barmode="group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=360,
        legend=dict(orientation="h"),
    )
    return fig


__all__ = [
    "TrendSeries",
    "build_trend_series",
    "build_trend_figure",
]

"""Domain services package."""

from .aggregation import (
    aggregate,
    compare_categories,
    compare_periods,
    effective_income,
    group_by_category_group,
    monthly_trend,
    percent_change,
)
from .export import (
    build_export_payload,
    escape_delimited_field,
    escape_markup_text,
    to_delimited_text,
    to_spreadsheet_markup,
)
from .planning import (
    apply_loan_payment,
    budget_status,
    build_alerts,
    build_reminders,
    contribute_to_goal,
    summarize_goals,
    summarize_loans,
)

__all__ = [
    "aggregate",
    "compare_categories",
    "compare_periods",
    "effective_income",
    "group_by_category_group",
    "monthly_trend",
    "percent_change",
    "build_export_payload",
    "escape_delimited_field",
    "escape_markup_text",
    "to_delimited_text",
    "to_spreadsheet_markup",
    "apply_loan_payment",
    "budget_status",
    "build_alerts",
    "build_reminders",
    "contribute_to_goal",
    "summarize_goals",
    "summarize_loans",
]

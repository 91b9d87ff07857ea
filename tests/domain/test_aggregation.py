"""Tests for the aggregation domain services."""

from datetime import date
from decimal import Decimal

from finsight.domain.models import Category, Transaction
from finsight.domain.services.aggregation import (
    aggregate,
    compare_categories,
    compare_periods,
    effective_income,
    group_by_category_group,
    monthly_trend,
    percent_change,
)

FOOD = Category(id="food", user_id="u1", name="Food", color="#f97316")
RENT = Category(
    id="rent", user_id="u1", name="Rent", color="#ef4444", group="fixed"
)
SALARY = Category(id="salary", user_id="u1", name="Salary", kind="income")


def _tx(
    tx_id: str,
    amount: str,
    kind: str = "expense",
    category: Category | None = None,
    day: date = date(2024, 3, 10),
) -> Transaction:
    return Transaction(
        id=tx_id,
        user_id="u1",
        amount=Decimal(amount),
        kind=kind,
        date=day,
        category_id=category.id if category else None,
        category=category,
    )


def test_aggregate_computes_totals_and_breakdown() -> None:
    """Food 60 + Rent 40 expenses and 200 salary give a 60/40 split."""
    summary = aggregate(
        [
            _tx("1", "60", category=FOOD),
            _tx("2", "40", category=RENT),
            _tx("3", "200", kind="income", category=SALARY),
        ]
    )

    assert summary.total_income == Decimal("200")
    assert summary.total_expense == Decimal("100")
    assert summary.net == Decimal("100")
    assert [item.category.name for item in summary.categories] == [
        "Food",
        "Rent",
    ]
    assert [item.amount for item in summary.categories] == [
        Decimal("60"),
        Decimal("40"),
    ]
    assert [item.percentage for item in summary.categories] == [
        Decimal("60.0"),
        Decimal("40.0"),
    ]
    assert summary.transaction_count == 3


def test_aggregate_empty_input_returns_zero_summary() -> None:
    """No transactions means zero totals and no categories."""
    summary = aggregate([])

    assert summary.total_income == 0
    assert summary.total_expense == 0
    assert summary.net == 0
    assert summary.categories == []


def test_percentages_are_zero_when_total_expense_is_zero() -> None:
    """A zero expense total never divides by zero."""
    summary = aggregate([_tx("1", "0", category=FOOD)])

    assert summary.categories[0].percentage == 0


def test_uncategorized_expenses_count_in_total_only() -> None:
    """Uncategorized expenses reduce the breakdown share of categories."""
    summary = aggregate(
        [
            _tx("1", "30", category=FOOD),
            _tx("2", "70"),
        ]
    )

    assert summary.total_expense == Decimal("100")
    assert len(summary.categories) == 1
    assert summary.categories[0].percentage == Decimal("30")
    breakdown_total = sum(item.amount for item in summary.categories)
    assert breakdown_total <= summary.total_expense


def test_income_is_excluded_from_category_breakdown() -> None:
    """Only expense transactions are grouped by category."""
    summary = aggregate([_tx("1", "500", kind="income", category=SALARY)])

    assert summary.categories == []


def test_breakdown_ties_keep_first_seen_order() -> None:
    """Equal amounts keep the order their categories first appeared."""
    travel = Category(id="travel", user_id="u1", name="Travel")
    summary = aggregate(
        [
            _tx("1", "10", category=RENT),
            _tx("2", "25", category=FOOD),
            _tx("3", "10", category=travel),
            _tx("4", "15", category=FOOD),
        ]
    )

    assert [item.category.id for item in summary.categories] == [
        "food",
        "rent",
        "travel",
    ]
    assert summary.categories[0].amount == Decimal("40")


def test_breakdown_uses_last_seen_category_metadata() -> None:
    """The group keeps the most recent name and color of its category."""
    renamed = Category(id="food", user_id="u1", name="Groceries", color="#000")
    summary = aggregate(
        [
            _tx("1", "5", category=FOOD),
            _tx("2", "5", category=renamed),
        ]
    )

    assert summary.categories[0].category.name == "Groceries"
    assert summary.categories[0].category.color == "#000"


def test_negative_amounts_pass_through_unvalidated() -> None:
    """Malformed amounts are summed as-is."""
    summary = aggregate(
        [
            _tx("1", "-5", category=FOOD),
            _tx("2", "15", category=RENT),
        ]
    )

    assert summary.total_expense == Decimal("10")
    assert summary.net == Decimal("-10")


def test_nan_amount_propagates_into_totals() -> None:
    """NaN amounts are not intercepted and sort after real amounts."""
    summary = aggregate(
        [
            _tx("1", "NaN", category=FOOD),
            _tx("2", "15", category=RENT),
        ]
    )

    assert summary.total_expense.is_nan()
    assert [item.category.id for item in summary.categories] == [
        "rent",
        "food",
    ]
    assert summary.categories[1].amount.is_nan()


def test_percent_change_handles_zero_baseline() -> None:
    assert percent_change(Decimal("150"), Decimal("100")) == Decimal("50")
    assert percent_change(Decimal("50"), Decimal("100")) == Decimal("-50")
    assert percent_change(Decimal("50"), Decimal("0")) == 0


def test_compare_periods_reports_changes_and_deltas() -> None:
    """Income and expense changes are relative to the previous period."""
    comparison = compare_periods(
        [
            _tx("1", "300", kind="income"),
            _tx("2", "90", category=FOOD),
        ],
        [
            _tx("3", "200", kind="income"),
            _tx("4", "120", category=FOOD),
        ],
    )

    assert comparison.income_change == Decimal("50")
    assert comparison.expense_change == Decimal("-25")
    assert comparison.income_delta == Decimal("100")
    assert comparison.expense_delta == Decimal("-30")
    assert comparison.net_delta == Decimal("130")


def test_compare_categories_merges_both_periods() -> None:
    """Categories present in either period appear, sorted by current."""
    comparisons = compare_categories(
        [_tx("1", "50", category=RENT)],
        [_tx("2", "25", category=RENT), _tx("3", "10", category=FOOD)],
    )

    assert [item.name for item in comparisons] == ["Rent", "Food"]
    assert comparisons[0].change == Decimal("100")
    assert comparisons[1].current == 0
    assert comparisons[1].previous == Decimal("10")
    assert comparisons[1].change == Decimal("-100")


def test_compare_categories_applies_limit() -> None:
    categories = [
        Category(id=f"c{i}", user_id="u1", name=f"C{i}") for i in range(10)
    ]
    comparisons = compare_categories(
        [_tx(str(i), str(i + 1), category=c) for i, c in enumerate(categories)],
        [],
        limit=3,
    )

    assert [item.name for item in comparisons] == ["C9", "C8", "C7"]


def test_monthly_trend_covers_twelve_months() -> None:
    """Each month of the year gets a point, empty months are zero."""
    trend = monthly_trend(
        [
            _tx("1", "100", kind="income", day=date(2024, 1, 5)),
            _tx("2", "40", day=date(2024, 1, 20)),
            _tx("3", "70", day=date(2024, 6, 1)),
            _tx("4", "999", day=date(2023, 6, 1)),
        ],
        2024,
    )

    assert len(trend) == 12
    assert trend[0].label == "Jan"
    assert trend[0].savings == Decimal("60")
    assert trend[5].expense == Decimal("70")
    assert trend[1].income == 0 and trend[1].expense == 0


def test_group_by_category_group_buckets_expenses() -> None:
    """Fixed and variable categories are reported separately."""
    unknown = Category(id="misc", user_id="u1", name="Misc", group=None)
    groups = group_by_category_group(
        [
            _tx("1", "30", category=FOOD),
            _tx("2", "100", category=RENT),
            _tx("3", "10", category=unknown),
        ]
    )

    assert [group.group for group in groups] == ["fixed", "variable"]
    assert groups[0].total == Decimal("100")
    assert groups[1].total == Decimal("40")
    assert [item.category.name for item in groups[1].categories] == [
        "Food",
        "Misc",
    ]
    assert groups[1].categories[0].percentage == Decimal("75")


def test_effective_income_prefers_declared_amount() -> None:
    assert effective_income(Decimal("100"), Decimal("250")) == Decimal("250")
    assert effective_income(Decimal("100"), Decimal("0")) == Decimal("100")
    assert effective_income(Decimal("100"), None) == Decimal("100")

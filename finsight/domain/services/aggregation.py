"""Domain services aggregating transactions into summaries.

All functions are pure: they read the provided transactions and return new
result objects. Amounts are not validated; negative values and ``NaN`` flow
through the arithmetic unchanged.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from finsight.domain.constants import (
    CATEGORY_GROUPS,
    FALLBACK_CATEGORY_COLOR,
)
from finsight.domain.models import (
    EXPENSE,
    INCOME,
    VARIABLE,
    Category,
    CategoryComparison,
    CategoryGroupBreakdown,
    CategorySpending,
    MonthlyTrendPoint,
    PeriodComparison,
    Transaction,
    TransactionSummary,
)
from finsight.utils.decimal_utils import coerce_decimal, is_nan

HUNDRED = Decimal("100")
ZERO = Decimal("0")

MONTH_LABELS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def aggregate(transactions: Sequence[Transaction]) -> TransactionSummary:
    """Compute income, expense and the expense breakdown by category.

    Args:
        transactions: Transactions of the period, in display order.

    Returns:
        TransactionSummary: Totals and the category breakdown sorted by
        amount (descending, first-seen order on ties).
    """
    total_income, total_expense = compute_totals(transactions)
    return TransactionSummary(
        total_income=total_income,
        total_expense=total_expense,
        categories=compute_category_spending(transactions, total_expense),
        transaction_count=len(transactions),
    )


def compute_totals(
    transactions: Iterable[Transaction],
) -> tuple[Decimal, Decimal]:
    """Return the (income, expense) sums of the transactions."""
    total_income = ZERO
    total_expense = ZERO
    for transaction in transactions:
        if transaction.kind == INCOME:
            total_income += coerce_decimal(transaction.amount)
        elif transaction.kind == EXPENSE:
            total_expense += coerce_decimal(transaction.amount)
    return total_income, total_expense


def compute_category_spending(
    transactions: Iterable[Transaction],
    total_expense: Decimal,
) -> list[CategorySpending]:
    """Group categorized expenses by category.

    Args:
        transactions: Transactions to group.
        total_expense: Denominator for the percentage of each category.

    Returns:
        list[CategorySpending]: One entry per category, sorted descending.
    """
    totals, metadata = _sum_expenses_by_category(transactions)
    spending = [
        CategorySpending(
            category=metadata[key],
            amount=amount,
            percentage=share_of(amount, total_expense),
        )
        for key, amount in totals.items()
    ]
    return sorted(spending, key=_amount_sort_key, reverse=True)


def share_of(amount: Decimal, total: Decimal) -> Decimal:
    """Return ``amount`` as a percentage of ``total``, 0 for a zero total."""
    if total == 0:
        return ZERO
    return HUNDRED * amount / total


def percent_change(current: Decimal, previous: Decimal) -> Decimal:
    """Return the change from ``previous`` to ``current`` in percent.

    A non-positive previous value yields 0.
    """
    if is_nan(previous):
        return previous
    if previous <= 0:
        return ZERO
    return (current - previous) / previous * HUNDRED


def compare_periods(
    current: Sequence[Transaction],
    previous: Sequence[Transaction],
) -> PeriodComparison:
    """Summarize two periods and the relative change between them."""
    current_summary = aggregate(current)
    previous_summary = aggregate(previous)
    return PeriodComparison(
        current=current_summary,
        previous=previous_summary,
        income_change=percent_change(
            current_summary.total_income,
            previous_summary.total_income,
        ),
        expense_change=percent_change(
            current_summary.total_expense,
            previous_summary.total_expense,
        ),
    )


def compare_categories(
    current: Iterable[Transaction],
    previous: Iterable[Transaction],
    limit: int = 8,
) -> list[CategoryComparison]:
    """Compare category spending between two periods.

    Args:
        current: Transactions of the selected period.
        previous: Transactions of the preceding period.
        limit: Maximum number of categories to return.

    Returns:
        list[CategoryComparison]: Categories sorted by current spending.
    """
    current_totals, current_meta = _sum_expenses_by_category(current)
    previous_totals, previous_meta = _sum_expenses_by_category(previous)

    keys = list(current_totals)
    keys.extend(key for key in previous_totals if key not in current_totals)

    comparisons = []
    for key in keys:
        category = current_meta.get(key) or previous_meta[key]
        current_amount = current_totals.get(key, ZERO)
        previous_amount = previous_totals.get(key, ZERO)
        comparisons.append(
            CategoryComparison(
                name=category.name or "Other",
                color=category.color or FALLBACK_CATEGORY_COLOR,
                current=current_amount,
                previous=previous_amount,
                change=percent_change(current_amount, previous_amount),
            )
        )
    comparisons.sort(
        key=lambda item: _decimal_sort_key(item.current),
        reverse=True,
    )
    return comparisons[:limit]


def monthly_trend(
    transactions: Iterable[Transaction],
    year: int,
) -> list[MonthlyTrendPoint]:
    """Return twelve income/expense points for the given calendar year."""
    return trend_for_months(
        transactions,
        [(year, month) for month in range(1, 13)],
    )


def trend_for_months(
    transactions: Iterable[Transaction],
    months: Sequence[tuple[int, int]],
) -> list[MonthlyTrendPoint]:
    """Return income/expense totals for each (year, month) requested."""
    buckets: dict[tuple[int, int], list[Transaction]] = {
        key: [] for key in months
    }
    for transaction in transactions:
        key = (transaction.date.year, transaction.date.month)
        if key in buckets:
            buckets[key].append(transaction)

    points = []
    for year, month in months:
        income, expense = compute_totals(buckets[(year, month)])
        points.append(
            MonthlyTrendPoint(
                year=year,
                month=month,
                label=MONTH_LABELS[month - 1],
                income=income,
                expense=expense,
            )
        )
    return points


def group_by_category_group(
    transactions: Iterable[Transaction],
) -> list[CategoryGroupBreakdown]:
    """Bucket categorized expenses into fixed, variable and transfers.

    Categories without a known group are treated as variable. Percentages
    are relative to the group total. Empty groups are omitted.
    """
    totals, metadata = _sum_expenses_by_category(transactions, keep_first=True)
    by_group: dict[str, dict[str, Decimal]] = {
        group: {} for group in CATEGORY_GROUPS
    }
    for key, amount in totals.items():
        group = metadata[key].group
        if group not in by_group:
            group = VARIABLE
        by_group[group][key] = amount

    breakdowns = []
    for group in CATEGORY_GROUPS:
        members = by_group[group]
        if not members:
            continue
        group_total = sum(members.values(), ZERO)
        breakdowns.append(
            CategoryGroupBreakdown(
                group=group,
                categories=[
                    CategorySpending(
                        category=metadata[key],
                        amount=amount,
                        percentage=share_of(amount, group_total),
                    )
                    for key, amount in members.items()
                ],
                total=group_total,
            )
        )
    return breakdowns


def effective_income(
    transaction_income: Decimal,
    declared_income: Decimal | None,
) -> Decimal:
    """Return the declared monthly income when set, else the recorded one."""
    declared = coerce_decimal(declared_income)
    if not is_nan(declared) and declared > 0:
        return declared
    return transaction_income


def _sum_expenses_by_category(
    transactions: Iterable[Transaction],
    keep_first: bool = False,
) -> tuple[dict[str, Decimal], dict[str, Category]]:
    totals: dict[str, Decimal] = {}
    metadata: dict[str, Category] = {}
    for transaction in transactions:
        if transaction.kind != EXPENSE or transaction.category is None:
            continue
        key = transaction.category_id or transaction.category.id
        amount = coerce_decimal(transaction.amount)
        if key in totals:
            totals[key] += amount
        else:
            totals[key] = amount
        if not keep_first or key not in metadata:
            metadata[key] = transaction.category
    return totals, metadata


def _decimal_sort_key(value: Decimal) -> tuple[int, Decimal]:
    # NaN cannot be ordered; rank it below every number.
    if is_nan(value):
        return (0, ZERO)
    return (1, value)


def _amount_sort_key(item: CategorySpending) -> tuple[int, Decimal]:
    return _decimal_sort_key(item.amount)


__all__ = [
    "aggregate",
    "compute_totals",
    "compute_category_spending",
    "share_of",
    "percent_change",
    "compare_periods",
    "compare_categories",
    "monthly_trend",
    "trend_for_months",
    "group_by_category_group",
    "effective_income",
]

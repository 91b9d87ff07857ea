"""Domain models for derived financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from .records import Category


@dataclass(frozen=True)
class CategorySpending:
    """Expense total for a single category.

    Attributes:
        category: Last-seen category metadata for the group.
        amount: Summed expense amount.
        percentage: Share of total expenses, 0 when total expense is 0.
    """

    category: Category
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class TransactionSummary:
    """Totals and category breakdown for a set of transactions."""

    total_income: Decimal
    total_expense: Decimal
    categories: list[CategorySpending] = field(default_factory=list)
    transaction_count: int = 0

    @property
    def net(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class PeriodComparison:
    """Current period summary compared with the preceding period."""

    current: TransactionSummary
    previous: TransactionSummary
    income_change: Decimal
    expense_change: Decimal

    @property
    def income_delta(self) -> Decimal:
        return self.current.total_income - self.previous.total_income

    @property
    def expense_delta(self) -> Decimal:
        return self.current.total_expense - self.previous.total_expense

    @property
    def net_delta(self) -> Decimal:
        return self.current.net - self.previous.net


@dataclass(frozen=True)
class CategoryComparison:
    """Per-category spending across two periods."""

    name: str
    color: str
    current: Decimal
    previous: Decimal
    change: Decimal


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Income and expense totals for one month."""

    year: int
    month: int
    label: str
    income: Decimal
    expense: Decimal

    @property
    def savings(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryGroupBreakdown:
    """Expense spending of a category group (fixed, variable, transfers)."""

    group: str
    categories: list[CategorySpending]
    total: Decimal


@dataclass(frozen=True)
class BudgetStatus:
    """Spending measured against a budget."""

    budget: Decimal
    spent: Decimal
    remaining: Decimal
    used_percentage: Decimal

    @property
    def exceeded(self) -> bool:
        return self.budget > 0 and self.spent > self.budget


@dataclass(frozen=True)
class LoanPortfolio:
    """Totals across active loans and credit cards."""

    total_emi: Decimal
    total_debt: Decimal
    loan_count: int
    credit_card_count: int


@dataclass(frozen=True)
class SavingsProgress:
    """Aggregate progress across savings goals."""

    total_saved: Decimal
    total_target: Decimal
    completed_count: int
    goal_count: int
    overall_progress: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.total_target - self.total_saved


@dataclass(frozen=True)
class Alert:
    """User-facing notice derived from the monthly figures."""

    kind: str
    title: str
    message: str | None = None


@dataclass(frozen=True)
class ExportPayload:
    """Serialized export ready to hand to a sink."""

    content: str
    mime_type: str
    filename: str


__all__ = [
    "CategorySpending",
    "TransactionSummary",
    "PeriodComparison",
    "CategoryComparison",
    "MonthlyTrendPoint",
    "CategoryGroupBreakdown",
    "BudgetStatus",
    "LoanPortfolio",
    "SavingsProgress",
    "Alert",
    "ExportPayload",
]

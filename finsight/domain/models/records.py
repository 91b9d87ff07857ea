"""Domain models for persisted FinSight records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

INCOME = "income"
EXPENSE = "expense"

FIXED = "fixed"
VARIABLE = "variable"
TRANSFERS = "transfers"


@dataclass(frozen=True)
class Category:
    """User-owned transaction category.

    Attributes:
        id: Category identifier.
        user_id: Owning user.
        name: Display name.
        icon: Icon tag resolved through ``ICON_VARIANTS``.
        color: Hex color string.
        kind: ``income`` or ``expense``.
        group: ``fixed``, ``variable`` or ``transfers``.
        is_default: True for system-seeded categories.
    """

    id: str
    user_id: str
    name: str
    icon: str = "tag"
    color: str = "#6366f1"
    kind: str = EXPENSE
    group: str | None = VARIABLE
    is_default: bool = False


@dataclass(frozen=True)
class Transaction:
    """Income or expense record.

    ``amount`` is a non-negative magnitude; the direction is carried by
    ``kind``.
    """

    id: str
    user_id: str
    amount: Decimal
    kind: str
    date: date
    category_id: str | None = None
    description: str | None = None
    is_recurring: bool = False
    recurring_frequency: str | None = None
    next_occurrence: date | None = None
    reminder_enabled: bool = False
    reminder_days_before: int = 3
    category: Category | None = None


@dataclass(frozen=True)
class Budget:
    """Monthly spending budget, optionally scoped to a category."""

    id: str
    user_id: str
    amount: Decimal
    month: int
    year: int
    category_id: str | None = None
    category: Category | None = None


@dataclass(frozen=True)
class Loan:
    """Loan or credit card balance with its monthly EMI."""

    id: str
    user_id: str
    name: str
    total_amount: Decimal
    monthly_emi: Decimal
    remaining_balance: Decimal
    start_date: date
    loan_type: str = "loan"
    is_active: bool = True


@dataclass(frozen=True)
class SavingsGoal:
    """Savings target tracked towards completion."""

    id: str
    user_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    deadline: date | None = None
    icon: str = "target"
    color: str = "#10b981"
    is_completed: bool = False


@dataclass(frozen=True)
class MonthlyIncome:
    """Declared income for a calendar month."""

    id: str
    user_id: str
    amount: Decimal
    month: int
    year: int


@dataclass(frozen=True)
class Profile:
    """Per-user preferences used by dashboards and alerts."""

    user_id: str
    full_name: str | None = None
    currency: str = "INR"
    monthly_budget: Decimal = Decimal("0")
    low_fund_threshold: Decimal = Decimal("100")


__all__ = [
    "INCOME",
    "EXPENSE",
    "FIXED",
    "VARIABLE",
    "TRANSFERS",
    "Category",
    "Transaction",
    "Budget",
    "Loan",
    "SavingsGoal",
    "MonthlyIncome",
    "Profile",
]

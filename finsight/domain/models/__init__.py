"""Domain models package."""

from .finance import (
    Alert,
    BudgetStatus,
    CategoryComparison,
    CategoryGroupBreakdown,
    CategorySpending,
    ExportPayload,
    LoanPortfolio,
    MonthlyTrendPoint,
    PeriodComparison,
    SavingsProgress,
    TransactionSummary,
)
from .records import (
    EXPENSE,
    FIXED,
    INCOME,
    TRANSFERS,
    VARIABLE,
    Budget,
    Category,
    Loan,
    MonthlyIncome,
    Profile,
    SavingsGoal,
    Transaction,
)

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
    "Alert",
    "BudgetStatus",
    "CategoryComparison",
    "CategoryGroupBreakdown",
    "CategorySpending",
    "ExportPayload",
    "LoanPortfolio",
    "MonthlyTrendPoint",
    "PeriodComparison",
    "SavingsProgress",
    "TransactionSummary",
]

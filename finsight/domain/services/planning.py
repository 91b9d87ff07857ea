"""Domain services for loans, savings goals, budgets and alerts."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date
from decimal import Decimal

from finsight.domain.models import (
    Alert,
    BudgetStatus,
    Loan,
    LoanPortfolio,
    Profile,
    SavingsGoal,
    SavingsProgress,
    Transaction,
    TransactionSummary,
)
from finsight.domain.services.aggregation import share_of
from finsight.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")


def apply_loan_payment(loan: Loan, amount: Decimal) -> Loan:
    """Return the loan with ``amount`` deducted from its remaining balance.

    The balance never drops below zero.

    Raises:
        ValueError: If the payment amount is not positive.
    """
    payment = coerce_decimal(amount)
    if payment.is_nan() or payment <= 0:
        raise ValueError(f"Payment amount must be positive: {amount}")
    remaining = coerce_decimal(loan.remaining_balance) - payment
    return replace(loan, remaining_balance=max(remaining, ZERO))


def summarize_loans(loans: Iterable[Loan]) -> LoanPortfolio:
    """Aggregate EMI and outstanding debt across active loans."""
    total_emi = ZERO
    total_debt = ZERO
    loan_count = 0
    credit_card_count = 0
    for loan in loans:
        if not loan.is_active:
            continue
        total_emi += coerce_decimal(loan.monthly_emi)
        total_debt += coerce_decimal(loan.remaining_balance)
        if loan.loan_type == "credit_card":
            credit_card_count += 1
        else:
            loan_count += 1
    return LoanPortfolio(
        total_emi=total_emi,
        total_debt=total_debt,
        loan_count=loan_count,
        credit_card_count=credit_card_count,
    )


def contribute_to_goal(goal: SavingsGoal, amount: Decimal) -> SavingsGoal:
    """Return the goal with ``amount`` added, completed once the target is met.

    Raises:
        ValueError: If the contribution is not positive.
    """
    contribution = coerce_decimal(amount)
    if contribution.is_nan() or contribution <= 0:
        raise ValueError(f"Contribution must be positive: {amount}")
    current = coerce_decimal(goal.current_amount) + contribution
    return replace(
        goal,
        current_amount=current,
        is_completed=goal.is_completed
        or current >= coerce_decimal(goal.target_amount),
    )


def summarize_goals(goals: Iterable[SavingsGoal]) -> SavingsProgress:
    """Aggregate saved and target amounts across goals."""
    goals = list(goals)
    total_saved = sum(
        (coerce_decimal(goal.current_amount) for goal in goals),
        ZERO,
    )
    total_target = sum(
        (coerce_decimal(goal.target_amount) for goal in goals),
        ZERO,
    )
    return SavingsProgress(
        total_saved=total_saved,
        total_target=total_target,
        completed_count=sum(1 for goal in goals if goal.is_completed),
        goal_count=len(goals),
        overall_progress=share_of(total_saved, total_target),
    )


def budget_status(spent: Decimal, budget: Decimal) -> BudgetStatus:
    """Measure spending against a budget."""
    budget = coerce_decimal(budget)
    return BudgetStatus(
        budget=budget,
        spent=spent,
        remaining=budget - spent,
        used_percentage=share_of(spent, budget),
    )


def build_alerts(
    summary: TransactionSummary,
    profile: Profile,
    income: Decimal | None = None,
) -> list[Alert]:
    """Derive low-fund and budget alerts from a monthly summary.

    Args:
        summary: Summary of the month.
        profile: Profile holding the budget and low-fund threshold.
        income: Effective income overriding the summary income.

    Returns:
        list[Alert]: Alerts to display, possibly empty.
    """
    alerts: list[Alert] = []
    if summary.total_expense.is_nan():
        return alerts
    resolved_income = summary.total_income if income is None else income
    balance = resolved_income - summary.total_expense
    threshold = coerce_decimal(profile.low_fund_threshold)
    if not balance.is_nan() and balance < threshold:
        alerts.append(
            Alert(
                kind="low_fund",
                title="Low funds",
                message=f"Balance {balance} is below {threshold}.",
            )
        )
    status = budget_status(summary.total_expense, profile.monthly_budget)
    if status.exceeded:
        alerts.append(
            Alert(
                kind="budget_exceeded",
                title="Budget exceeded",
                message=(
                    f"Spent {status.spent} of a {status.budget} budget."
                ),
            )
        )
    return alerts


def build_reminders(
    transactions: Iterable[Transaction],
    today: date,
) -> list[Alert]:
    """Return reminder alerts for recurring transactions due soon.

    A transaction is due soon when reminders are enabled and its next
    occurrence falls between today and ``reminder_days_before`` days ahead.
    """
    due: list[tuple[date, Alert]] = []
    for transaction in transactions:
        if not (transaction.is_recurring and transaction.reminder_enabled):
            continue
        if transaction.next_occurrence is None:
            continue
        days_left = (transaction.next_occurrence - today).days
        if 0 <= days_left <= transaction.reminder_days_before:
            label = transaction.description or (
                transaction.category.name if transaction.category else None
            ) or transaction.kind.title()
            due.append(
                (
                    transaction.next_occurrence,
                    Alert(
                        kind="reminder",
                        title=f"Upcoming: {label}",
                        message=(
                            f"{transaction.amount} due on "
                            f"{transaction.next_occurrence.isoformat()}"
                        ),
                    ),
                )
            )
    due.sort(key=lambda item: item[0])
    return [alert for _, alert in due]


__all__ = [
    "apply_loan_payment",
    "summarize_loans",
    "contribute_to_goal",
    "summarize_goals",
    "budget_status",
    "build_alerts",
    "build_reminders",
]

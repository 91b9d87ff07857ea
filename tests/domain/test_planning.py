"""Tests for loan, savings, budget and alert services."""

from datetime import date
from decimal import Decimal

import pytest

from finsight.domain.models import (
    Loan,
    Profile,
    SavingsGoal,
    Transaction,
    TransactionSummary,
)
from finsight.domain.services.planning import (
    apply_loan_payment,
    budget_status,
    build_alerts,
    build_reminders,
    contribute_to_goal,
    summarize_goals,
    summarize_loans,
)


def _loan(
    loan_id: str = "l1",
    remaining: str = "1000",
    loan_type: str = "loan",
    is_active: bool = True,
) -> Loan:
    return Loan(
        id=loan_id,
        user_id="u1",
        name=f"Loan {loan_id}",
        total_amount=Decimal("5000"),
        monthly_emi=Decimal("250"),
        remaining_balance=Decimal(remaining),
        start_date=date(2023, 1, 1),
        loan_type=loan_type,
        is_active=is_active,
    )


def _goal(current: str, target: str, completed: bool = False) -> SavingsGoal:
    return SavingsGoal(
        id="g1",
        user_id="u1",
        name="Trip",
        target_amount=Decimal(target),
        current_amount=Decimal(current),
        is_completed=completed,
    )


def test_apply_loan_payment_reduces_balance() -> None:
    updated = apply_loan_payment(_loan(), Decimal("300"))

    assert updated.remaining_balance == Decimal("700")
    assert updated.is_active is True


def test_apply_loan_payment_floors_at_zero() -> None:
    """Overpaying clears the balance without going negative."""
    updated = apply_loan_payment(_loan(remaining="100"), Decimal("250"))

    assert updated.remaining_balance == 0


@pytest.mark.parametrize("amount", ["0", "-5", "NaN"])
def test_apply_loan_payment_rejects_non_positive(amount: str) -> None:
    with pytest.raises(ValueError):
        apply_loan_payment(_loan(), Decimal(amount))


def test_summarize_loans_skips_inactive() -> None:
    portfolio = summarize_loans(
        [
            _loan("a"),
            _loan("b", remaining="300", loan_type="credit_card"),
            _loan("c", is_active=False),
        ]
    )

    assert portfolio.total_emi == Decimal("500")
    assert portfolio.total_debt == Decimal("1300")
    assert portfolio.loan_count == 1
    assert portfolio.credit_card_count == 1


def test_contribute_to_goal_marks_completion() -> None:
    partial = contribute_to_goal(_goal("100", "500"), Decimal("150"))
    reached = contribute_to_goal(_goal("400", "500"), Decimal("100"))

    assert partial.current_amount == Decimal("250")
    assert partial.is_completed is False
    assert reached.is_completed is True


def test_contribute_to_goal_rejects_non_positive() -> None:
    with pytest.raises(ValueError, match="Contribution must be positive"):
        contribute_to_goal(_goal("0", "100"), Decimal("0"))


def test_summarize_goals_reports_overall_progress() -> None:
    progress = summarize_goals(
        [_goal("250", "500"), _goal("500", "500", completed=True)]
    )

    assert progress.total_saved == Decimal("750")
    assert progress.total_target == Decimal("1000")
    assert progress.remaining == Decimal("250")
    assert progress.completed_count == 1
    assert progress.goal_count == 2
    assert progress.overall_progress == Decimal("75")


def test_summarize_goals_without_goals() -> None:
    progress = summarize_goals([])

    assert progress.overall_progress == 0
    assert progress.goal_count == 0


def test_budget_status_flags_overspending() -> None:
    status = budget_status(Decimal("1200"), Decimal("1000"))

    assert status.exceeded is True
    assert status.remaining == Decimal("-200")
    assert status.used_percentage == Decimal("120")


def test_budget_status_without_budget_is_never_exceeded() -> None:
    status = budget_status(Decimal("50"), Decimal("0"))

    assert status.exceeded is False
    assert status.used_percentage == 0


def test_build_alerts_reports_low_funds_and_budget() -> None:
    summary = TransactionSummary(
        total_income=Decimal("1000"),
        total_expense=Decimal("950"),
    )
    profile = Profile(
        user_id="u1",
        monthly_budget=Decimal("900"),
        low_fund_threshold=Decimal("100"),
    )

    alerts = build_alerts(summary, profile)

    assert [alert.kind for alert in alerts] == [
        "low_fund",
        "budget_exceeded",
    ]


def test_build_alerts_uses_effective_income() -> None:
    """A declared income above spending keeps funds out of alert range."""
    summary = TransactionSummary(
        total_income=Decimal("0"),
        total_expense=Decimal("300"),
    )
    profile = Profile(user_id="u1")

    assert build_alerts(summary, profile, income=Decimal("2000")) == []
    assert [a.kind for a in build_alerts(summary, profile)] == ["low_fund"]


def test_build_alerts_ignores_nan_totals() -> None:
    summary = TransactionSummary(
        total_income=Decimal("0"),
        total_expense=Decimal("NaN"),
    )

    assert build_alerts(summary, Profile(user_id="u1")) == []


def _recurring(tx_id: str, due: date, **kwargs) -> Transaction:
    values = {
        "id": tx_id,
        "user_id": "u1",
        "amount": Decimal("49.99"),
        "kind": "expense",
        "date": date(2024, 2, 1),
        "is_recurring": True,
        "recurring_frequency": "monthly",
        "next_occurrence": due,
        "reminder_enabled": True,
    }
    values.update(kwargs)
    return Transaction(**values)


def test_build_reminders_lists_due_soon_in_date_order() -> None:
    """Only enabled reminders inside their notice window are returned."""
    today = date(2024, 3, 1)
    reminders = build_reminders(
        [
            _recurring("late", date(2024, 3, 4), description="Gym"),
            _recurring("soon", date(2024, 3, 1), description="Netflix"),
            _recurring("far", date(2024, 3, 10), description="Rent"),
            _recurring("past", date(2024, 2, 28), description="Water"),
            _recurring(
                "off",
                date(2024, 3, 2),
                description="Phone",
                reminder_enabled=False,
            ),
            _recurring(
                "wide",
                date(2024, 3, 8),
                description="Insurance",
                reminder_days_before=7,
            ),
        ],
        today,
    )

    assert [alert.title for alert in reminders] == [
        "Upcoming: Netflix",
        "Upcoming: Gym",
        "Upcoming: Insurance",
    ]
    assert reminders[0].kind == "reminder"
    assert reminders[0].message == "49.99 due on 2024-03-01"


def test_build_reminders_labels_fall_back_to_kind() -> None:
    reminders = build_reminders(
        [_recurring("1", date(2024, 3, 2), kind="income")],
        date(2024, 3, 1),
    )

    assert reminders[0].title == "Upcoming: Income"

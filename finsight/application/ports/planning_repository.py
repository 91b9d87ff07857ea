"""Port for profile, income, loan and savings goal records."""

from decimal import Decimal
from typing import Protocol

from finsight.domain.models import Loan, MonthlyIncome, Profile, SavingsGoal


class PlanningRepositoryPort(Protocol):
    """Port exposing the planning records of a user."""

    def fetch_profile(self, user_id: str) -> Profile:
        """Return the user's profile, defaults when none is stored."""

    def fetch_monthly_income(
        self,
        user_id: str,
        year: int,
        month: int,
    ) -> MonthlyIncome | None:
        """Return the declared income of a month, if any."""

    def save_monthly_income(
        self,
        user_id: str,
        year: int,
        month: int,
        amount: Decimal,
    ) -> None:
        """Insert or update the declared income of a month."""

    def fetch_loans(self, user_id: str) -> list[Loan]:
        """Return the user's loans and credit cards."""

    def fetch_loan(self, user_id: str, loan_id: str) -> Loan:
        """Return a single loan.

        Raises:
            LookupError: If the loan does not exist for the user.
        """

    def update_loan_balance(
        self,
        user_id: str,
        loan_id: str,
        remaining_balance: Decimal,
    ) -> None:
        """Persist a new remaining balance."""

    def fetch_savings_goals(self, user_id: str) -> list[SavingsGoal]:
        """Return the user's savings goals."""

    def fetch_savings_goal(self, user_id: str, goal_id: str) -> SavingsGoal:
        """Return a single savings goal.

        Raises:
            LookupError: If the goal does not exist for the user.
        """

    def update_savings_goal(self, goal: SavingsGoal) -> None:
        """Persist the goal's current amount and completion flag."""


__all__ = ["PlanningRepositoryPort"]

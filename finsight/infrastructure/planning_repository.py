"""SQLAlchemy-backed repository for profiles, income, loans and goals."""

from decimal import Decimal

from sqlalchemy import text

from finsight.application.ports.database import DatabaseEnginePort
from finsight.application.ports.planning_repository import (
    PlanningRepositoryPort,
)
from finsight.domain.models import Loan, MonthlyIncome, Profile, SavingsGoal
from finsight.utils.decimal_utils import coerce_decimal

SELECT_PROFILE_SQL = text(
    """
    SELECT user_id, full_name, currency, monthly_budget, low_fund_threshold
    FROM profiles
    WHERE user_id = :user_id
    LIMIT 1
    """
)

SELECT_MONTHLY_INCOME_SQL = text(
    """
    SELECT id, user_id, amount, month, year
    FROM monthly_income
    WHERE user_id = :user_id AND year = :year AND month = :month
    LIMIT 1
    """
)

UPSERT_MONTHLY_INCOME_SQL = text(
    """
    INSERT INTO monthly_income (user_id, amount, month, year)
    VALUES (:user_id, :amount, :month, :year)
    ON CONFLICT (user_id, month, year)
    DO UPDATE SET amount = EXCLUDED.amount, updated_at = now()
    """
)

SELECT_LOANS_SQL = """
SELECT id, user_id, name, total_amount, monthly_emi, remaining_balance,
       loan_type, is_active, start_date
FROM loans
WHERE user_id = :user_id
"""

UPDATE_LOAN_BALANCE_SQL = text(
    """
    UPDATE loans
    SET remaining_balance = :remaining_balance, updated_at = now()
    WHERE user_id = :user_id AND id = :loan_id
    """
)

SELECT_GOALS_SQL = """
SELECT id, user_id, name, target_amount, current_amount, deadline,
       icon, color, is_completed
FROM savings_goals
WHERE user_id = :user_id
"""

UPDATE_GOAL_SQL = text(
    """
    UPDATE savings_goals
    SET current_amount = :current_amount,
        is_completed = :is_completed,
        updated_at = now()
    WHERE user_id = :user_id AND id = :goal_id
    """
)


class SqlAlchemyPlanningRepository(PlanningRepositoryPort):
    """Repository backed by SQLAlchemy for planning records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the FinSight engine.
        """
        self._db_port = db_port

    def fetch_profile(self, user_id: str) -> Profile:
        row = self._first(SELECT_PROFILE_SQL, {"user_id": user_id})
        if not row:
            return Profile(user_id=user_id)
        return Profile(
            user_id=str(row.user_id),
            full_name=row.full_name,
            currency=row.currency or "INR",
            monthly_budget=coerce_decimal(row.monthly_budget),
            low_fund_threshold=(
                coerce_decimal(row.low_fund_threshold)
                if row.low_fund_threshold is not None
                else Decimal("100")
            ),
        )

    def fetch_monthly_income(
        self,
        user_id: str,
        year: int,
        month: int,
    ) -> MonthlyIncome | None:
        row = self._first(
            SELECT_MONTHLY_INCOME_SQL,
            {"user_id": user_id, "year": year, "month": month},
        )
        if not row:
            return None
        return MonthlyIncome(
            id=str(row.id),
            user_id=str(row.user_id),
            amount=coerce_decimal(row.amount),
            month=row.month,
            year=row.year,
        )

    def save_monthly_income(
        self,
        user_id: str,
        year: int,
        month: int,
        amount: Decimal,
    ) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                UPSERT_MONTHLY_INCOME_SQL,
                {
                    "user_id": user_id,
                    "amount": amount,
                    "month": month,
                    "year": year,
                },
            )

    def fetch_loans(self, user_id: str) -> list[Loan]:
        query = text(SELECT_LOANS_SQL + " ORDER BY start_date, name")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id}).all()
        return [self._to_loan(row) for row in rows]

    def fetch_loan(self, user_id: str, loan_id: str) -> Loan:
        row = self._first(
            text(SELECT_LOANS_SQL + " AND id = :loan_id"),
            {"user_id": user_id, "loan_id": loan_id},
        )
        if not row:
            raise LookupError(f"Missing loan: {loan_id}")
        return self._to_loan(row)

    def update_loan_balance(
        self,
        user_id: str,
        loan_id: str,
        remaining_balance: Decimal,
    ) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                UPDATE_LOAN_BALANCE_SQL,
                {
                    "user_id": user_id,
                    "loan_id": loan_id,
                    "remaining_balance": remaining_balance,
                },
            )

    def fetch_savings_goals(self, user_id: str) -> list[SavingsGoal]:
        query = text(SELECT_GOALS_SQL + " ORDER BY name")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id}).all()
        return [self._to_goal(row) for row in rows]

    def fetch_savings_goal(self, user_id: str, goal_id: str) -> SavingsGoal:
        row = self._first(
            text(SELECT_GOALS_SQL + " AND id = :goal_id"),
            {"user_id": user_id, "goal_id": goal_id},
        )
        if not row:
            raise LookupError(f"Missing savings goal: {goal_id}")
        return self._to_goal(row)

    def update_savings_goal(self, goal: SavingsGoal) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                UPDATE_GOAL_SQL,
                {
                    "user_id": goal.user_id,
                    "goal_id": goal.id,
                    "current_amount": goal.current_amount,
                    "is_completed": goal.is_completed,
                },
            )

    def _first(self, query, params: dict[str, object]):
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).first()

    @staticmethod
    def _to_loan(row) -> Loan:
        return Loan(
            id=str(row.id),
            user_id=str(row.user_id),
            name=row.name,
            total_amount=coerce_decimal(row.total_amount),
            monthly_emi=coerce_decimal(row.monthly_emi),
            remaining_balance=coerce_decimal(row.remaining_balance),
            start_date=row.start_date,
            loan_type=row.loan_type or "loan",
            is_active=bool(row.is_active),
        )

    @staticmethod
    def _to_goal(row) -> SavingsGoal:
        return SavingsGoal(
            id=str(row.id),
            user_id=str(row.user_id),
            name=row.name,
            target_amount=coerce_decimal(row.target_amount),
            current_amount=coerce_decimal(row.current_amount),
            deadline=row.deadline,
            icon=row.icon or "target",
            color=row.color or "#10b981",
            is_completed=bool(row.is_completed),
        )


__all__ = ["SqlAlchemyPlanningRepository"]

"""SQLAlchemy-backed repository for transactions."""

from datetime import date

from sqlalchemy import text

from finsight.application.ports.database import DatabaseEnginePort
from finsight.application.ports.transactions_repository import (
    TransactionRepositoryPort,
)
from finsight.domain.models import Category, Transaction
from finsight.utils.decimal_utils import coerce_decimal

class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository reading transactions joined with their category."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the FinSight engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Transaction]:
        """Return the user's transactions within the optional date range."""
        query = self._build_query(start_date, end_date)
        params = self._build_params(user_id, start_date, end_date)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_transaction(row) for row in rows]

    @staticmethod
    def _build_query(
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = """
        SELECT t.id AS id,
               t.user_id AS user_id,
               t.category_id AS category_id,
               t.amount AS amount,
               t.type AS kind,
               t.description AS description,
               t.date AS date,
               t.is_recurring AS is_recurring,
               t.recurring_frequency AS recurring_frequency,
               t.next_occurrence AS next_occurrence,
               t.reminder_enabled AS reminder_enabled,
               t.reminder_days_before AS reminder_days_before,
               c.name AS category_name,
               c.icon AS category_icon,
               c.color AS category_color,
               c.type AS category_kind,
               c.category_group AS category_group,
               c.is_default AS category_is_default
        FROM transactions t
        LEFT JOIN categories c ON c.id = t.category_id
        WHERE t.user_id = :user_id
        """
        if start_date:
            base_sql += " AND t.date >= :start_date"
        if end_date:
            base_sql += " AND t.date <= :end_date"
        base_sql += " ORDER BY t.date ASC, t.created_at ASC"
        return text(base_sql)

    @staticmethod
    def _build_params(
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, object]:
        params: dict[str, object] = {"user_id": user_id}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        return params

    @staticmethod
    def _to_transaction(row) -> Transaction:
        category = None
        if row.category_id is not None and row.category_name is not None:
            category = Category(
                id=str(row.category_id),
                user_id=str(row.user_id),
                name=row.category_name,
                icon=row.category_icon or "tag",
                color=row.category_color or "#6366f1",
                kind=row.category_kind,
                group=row.category_group,
                is_default=bool(row.category_is_default),
            )
        return Transaction(
            id=str(row.id),
            user_id=str(row.user_id),
            category_id=(
                str(row.category_id) if row.category_id is not None else None
            ),
            amount=coerce_decimal(row.amount),
            kind=row.kind,
            description=row.description,
            date=row.date,
            is_recurring=bool(row.is_recurring),
            recurring_frequency=row.recurring_frequency,
            next_occurrence=row.next_occurrence,
            reminder_enabled=bool(row.reminder_enabled),
            reminder_days_before=(
                row.reminder_days_before
                if row.reminder_days_before is not None
                else 3
            ),
            category=category,
        )


__all__ = ["SqlAlchemyTransactionRepository"]

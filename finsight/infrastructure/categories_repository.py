"""SQLAlchemy-backed repository for categories."""

from sqlalchemy import text

from finsight.application.ports.categories_repository import (
    CategoryRepositoryPort,
)
from finsight.application.ports.database import DatabaseEnginePort
from finsight.domain.models import Category

SELECT_CATEGORIES_SQL = """
SELECT id, user_id, name, icon, color, type AS kind,
       category_group, is_default
FROM categories
WHERE user_id = :user_id
"""

DETACH_CATEGORY_SQL = text(
    """
    UPDATE transactions
    SET category_id = NULL
    WHERE user_id = :user_id AND category_id = :category_id
    """
)

DELETE_CATEGORY_SQL = text(
    """
    DELETE FROM categories
    WHERE user_id = :user_id AND id = :category_id AND is_default = false
    """
)


class SqlAlchemyCategoryRepository(CategoryRepositoryPort):
    """Repository backed by SQLAlchemy for user categories."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the FinSight engine.
        """
        self._db_port = db_port

    def fetch_categories(self, user_id: str) -> list[Category]:
        """Return the user's categories ordered by name."""
        query = text(SELECT_CATEGORIES_SQL + " ORDER BY name")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id}).all()
        return [self._to_category(row) for row in rows]

    def fetch_category(self, user_id: str, category_id: str) -> Category:
        query = text(SELECT_CATEGORIES_SQL + " AND id = :category_id")
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                query,
                {"user_id": user_id, "category_id": category_id},
            ).first()
        if not row:
            raise LookupError(f"Missing category: {category_id}")
        return self._to_category(row)

    def delete_category(self, user_id: str, category_id: str) -> int:
        """Detach the category's transactions and delete the category.

        Both statements share one transaction, so a failed delete rolls
        the detach back. Default categories are detached but kept.

        Returns:
            int: Number of transactions detached.
        """
        params = {"user_id": user_id, "category_id": category_id}
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            detached = conn.execute(DETACH_CATEGORY_SQL, params).rowcount
            conn.execute(DELETE_CATEGORY_SQL, params)
        return detached

    @staticmethod
    def _to_category(row) -> Category:
        return Category(
            id=str(row.id),
            user_id=str(row.user_id),
            name=row.name,
            icon=row.icon or "tag",
            color=row.color or "#6366f1",
            kind=row.kind,
            group=row.category_group,
            is_default=bool(row.is_default),
        )


__all__ = ["SqlAlchemyCategoryRepository"]

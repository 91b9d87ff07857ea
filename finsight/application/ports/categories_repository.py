"""Port for category records."""

from typing import Protocol

from finsight.domain.models import Category


class CategoryRepositoryPort(Protocol):
    """Port exposing the user's categories."""

    def fetch_categories(self, user_id: str) -> list[Category]:
        """Return the user's categories ordered by name."""

    def fetch_category(self, user_id: str, category_id: str) -> Category:
        """Return a single category.

        Raises:
            LookupError: If the category does not exist for the user.
        """

    def delete_category(self, user_id: str, category_id: str) -> int:
        """Detach the category's transactions and remove non-default rows.

        Both changes are applied atomically.

        Returns:
            int: Number of transactions detached.
        """


__all__ = ["CategoryRepositoryPort"]

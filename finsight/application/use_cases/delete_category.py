"""Use case to remove a category without deleting its transactions."""

from dataclasses import dataclass

from finsight.application.ports.categories_repository import (
    CategoryRepositoryPort,
)
from finsight.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DeleteCategoryResult:
    """Result of a category deletion.

    Attributes:
        detached_count: Transactions whose category reference was cleared.
        deleted: False when the category is a default one and was kept.
    """

    detached_count: int
    deleted: bool


class DeleteCategoryUseCase:
    """Detach transactions from a category and delete it if allowed.

    Default (system-seeded) categories are never removed; only their
    transactions are detached.
    """

    def __init__(
        self,
        category_repository: CategoryRepositoryPort,
        logger=None,
    ) -> None:
        self._category_repository = category_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, category_id: str) -> DeleteCategoryResult:
        """Delete or detach the category.

        Raises:
            LookupError: If the category does not exist.
        """
        category = self._category_repository.fetch_category(
            user_id,
            category_id,
        )
        detached = self._category_repository.delete_category(
            user_id,
            category_id,
        )
        if category.is_default:
            self._logger.warning(
                f"Category {category.name} is a default category; "
                f"detached {detached} transactions and kept the category"
            )
            return DeleteCategoryResult(detached_count=detached, deleted=False)
        self._logger.info(
            f"Deleted category {category.name}, detached {detached} transactions"
        )
        return DeleteCategoryResult(detached_count=detached, deleted=True)


__all__ = ["DeleteCategoryUseCase", "DeleteCategoryResult"]

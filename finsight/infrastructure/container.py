"""Composition root for wiring infrastructure adapters."""

from finsight.application.ports.categories_repository import (
    CategoryRepositoryPort,
)
from finsight.application.ports.database import DatabaseEnginePort
from finsight.application.ports.planning_repository import (
    PlanningRepositoryPort,
)
from finsight.application.ports.transactions_repository import (
    TransactionRepositoryPort,
)
from finsight.infrastructure.categories_repository import (
    SqlAlchemyCategoryRepository,
)
from finsight.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finsight.infrastructure.file_sink import FileExportSink
from finsight.infrastructure.planning_repository import (
    SqlAlchemyPlanningRepository,
)
from finsight.infrastructure.settings import FinSightSettings
from finsight.infrastructure.transactions_repository import (
    SqlAlchemyTransactionRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db)


def build_category_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoryRepositoryPort:
    """Return the categories repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoryRepository(resolved_db)


def build_planning_repository(
    db_port: DatabaseEnginePort | None = None,
) -> PlanningRepositoryPort:
    """Return the profile, income, loan and goal repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyPlanningRepository(resolved_db)


def build_export_sink(
    settings: FinSightSettings | None = None,
) -> FileExportSink:
    """Return the file sink writing to the configured export directory."""
    resolved_settings = settings or FinSightSettings.from_env()
    return FileExportSink(resolved_settings.export_dir)


__all__ = [
    "build_database_adapter",
    "build_transaction_repository",
    "build_category_repository",
    "build_planning_repository",
    "build_export_sink",
]

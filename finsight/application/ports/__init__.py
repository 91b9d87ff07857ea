"""Application ports package."""

from .categories_repository import CategoryRepositoryPort
from .database import DatabaseEnginePort
from .export_sink import ExportSinkPort
from .planning_repository import PlanningRepositoryPort
from .transactions_repository import TransactionRepositoryPort

__all__ = [
    "CategoryRepositoryPort",
    "DatabaseEnginePort",
    "ExportSinkPort",
    "PlanningRepositoryPort",
    "TransactionRepositoryPort",
]

"""Domain package for business rules and core models."""

from .constants import DEFAULT_CATEGORIES, EXPORT_COLUMNS
from .models import Category, Transaction, TransactionSummary
from .policies import TransactionFilter, filter_transactions
from .services import aggregate, build_export_payload

__all__ = [
    "DEFAULT_CATEGORIES",
    "EXPORT_COLUMNS",
    "Category",
    "Transaction",
    "TransactionSummary",
    "TransactionFilter",
    "filter_transactions",
    "aggregate",
    "build_export_payload",
]

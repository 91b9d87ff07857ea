"""Domain policies package."""

from .transaction_filters import TransactionFilter, filter_transactions

__all__ = ["TransactionFilter", "filter_transactions"]

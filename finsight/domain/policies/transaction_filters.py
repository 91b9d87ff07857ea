"""Domain policies for filtering transaction lists."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from finsight.domain.models import Transaction

ALL = "all"


@dataclass(frozen=True)
class TransactionFilter:
    """Criteria applied to a transaction list.

    Attributes:
        search: Case-insensitive text matched against description and
            category name.
        kind: ``all``, ``income`` or ``expense``.
        category_id: ``all`` or a category identifier.
        date_from: Inclusive lower bound.
        date_to: Inclusive upper bound.
    """

    search: str = ""
    kind: str = ALL
    category_id: str = ALL
    date_from: date | None = None
    date_to: date | None = None

    @property
    def is_active(self) -> bool:
        return bool(
            self.search.strip()
            or self.kind != ALL
            or self.category_id != ALL
            or self.date_from
            or self.date_to
        )


def matches_filter(transaction: Transaction, criteria: TransactionFilter) -> bool:
    """Return True when the transaction satisfies every criterion."""
    query = criteria.search.strip().lower()
    if query:
        description = (transaction.description or "").lower()
        category_name = (
            transaction.category.name.lower() if transaction.category else ""
        )
        if query not in description and query not in category_name:
            return False
    if criteria.kind != ALL and transaction.kind != criteria.kind:
        return False
    if (criteria.category_id != ALL
            and transaction.category_id != criteria.category_id):
        return False
    if criteria.date_from and transaction.date < criteria.date_from:
        return False
    if criteria.date_to and transaction.date > criteria.date_to:
        return False
    return True


def filter_transactions(
    transactions: Iterable[Transaction],
    criteria: TransactionFilter | None,
) -> list[Transaction]:
    """Return the transactions matching the criteria, order preserved."""
    if criteria is None:
        return list(transactions)
    return [
        transaction
        for transaction in transactions
        if matches_filter(transaction, criteria)
    ]


__all__ = [
    "ALL",
    "TransactionFilter",
    "matches_filter",
    "filter_transactions",
]

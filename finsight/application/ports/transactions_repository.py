"""Port for reading transactions."""

from datetime import date
from typing import Protocol

from finsight.domain.models import Transaction


class TransactionRepositoryPort(Protocol):
    """Port exposing user transactions with their joined category."""

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Transaction]:
        """Return the user's transactions ordered by date."""


__all__ = ["TransactionRepositoryPort"]

"""Use case to compute the recent monthly savings trend."""

from datetime import date

from finsight.application.ports.transactions_repository import (
    TransactionRepositoryPort,
)
from finsight.domain.models import MonthlyTrendPoint
from finsight.domain.services.aggregation import trend_for_months
from finsight.domain.services.periods import last_n_months, month_bounds
from finsight.infrastructure.logging.logger import get_app_logger


class GetSavingsTrendUseCase:
    """Income, expense and savings for the last months."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        today: date,
        months: int = 6,
    ) -> list[MonthlyTrendPoint]:
        """Return one point per month, oldest first, ending with today's month."""
        window = last_n_months(today, months)
        start_date, _ = month_bounds(*window[0])
        _, end_date = month_bounds(*window[-1])
        transactions = self._transaction_repository.fetch_transactions(
            user_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for the "
            f"{months}-month savings trend"
        )
        return trend_for_months(transactions, window)


__all__ = ["GetSavingsTrendUseCase"]

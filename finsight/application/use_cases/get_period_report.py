"""Use case to build monthly or yearly reports."""

from dataclasses import dataclass
from datetime import date

from finsight.application.ports.transactions_repository import (
    TransactionRepositoryPort,
)
from finsight.domain.models import (
    CategoryComparison,
    MonthlyTrendPoint,
    PeriodComparison,
    Transaction,
)
from finsight.domain.services.aggregation import (
    compare_categories,
    compare_periods,
    monthly_trend,
)
from finsight.domain.services.periods import (
    YEARLY,
    period_bounds,
    previous_period,
)
from finsight.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PeriodReport:
    """Report of a period compared with the preceding one."""

    period: str
    start_date: date
    end_date: date
    comparison: PeriodComparison
    categories: list[CategoryComparison]
    trend: list[MonthlyTrendPoint]
    transactions: list[Transaction]


class GetPeriodReportUseCase:
    """Compute a report for a month or a year."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
        category_limit: int = 8,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing the user's transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            category_limit: Number of categories kept in the comparison.
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()
        self._category_limit = category_limit

    def execute(
        self,
        user_id: str,
        period: str,
        year: int,
        month: int = 1,
    ) -> PeriodReport:
        """Return the report of the selected period.

        Args:
            user_id: Owner of the transactions.
            period: ``monthly`` or ``yearly``.
            year: Selected year.
            month: Selected month, ignored for yearly reports.

        Returns:
            PeriodReport: Totals, changes, category comparison and, for
            yearly reports, the month-by-month trend.

        Raises:
            ValueError: If the period is not supported.
        """
        start_date, end_date = period_bounds(period, year, month)
        prev_start, prev_end = previous_period(period, year, month)
        transactions = self._transaction_repository.fetch_transactions(
            user_id,
            start_date,
            end_date,
        )
        previous = self._transaction_repository.fetch_transactions(
            user_id,
            prev_start,
            prev_end,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for {period} report "
            f"{start_date}..{end_date}"
        )
        comparison = compare_periods(transactions, previous)
        return PeriodReport(
            period=period,
            start_date=start_date,
            end_date=end_date,
            comparison=comparison,
            categories=compare_categories(
                transactions,
                previous,
                limit=self._category_limit,
            ),
            trend=monthly_trend(transactions, year) if period == YEARLY else [],
            transactions=list(transactions),
        )


__all__ = ["GetPeriodReportUseCase", "PeriodReport"]

"""Use case to compute the monthly dashboard overview."""

from dataclasses import dataclass
from decimal import Decimal

from finsight.application.ports.planning_repository import (
    PlanningRepositoryPort,
)
from finsight.application.ports.transactions_repository import (
    TransactionRepositoryPort,
)
from finsight.domain.models import (
    Alert,
    BudgetStatus,
    CategoryGroupBreakdown,
    PeriodComparison,
    TransactionSummary,
)
from finsight.domain.services.aggregation import (
    compare_periods,
    effective_income,
    group_by_category_group,
)
from finsight.domain.services.periods import month_bounds, shift_month
from finsight.domain.services.planning import budget_status, build_alerts
from finsight.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class MonthlyOverview:
    """Dashboard figures for one month.

    Attributes:
        year: Calendar year of the month.
        month: Calendar month (1-12).
        summary: Totals and category spending of the month.
        income: Declared monthly income when set, else recorded income.
        budget: Spending against the profile's monthly budget.
        groups: Expense spending by category group.
        comparison: Month compared with the previous month.
        alerts: Low-fund and budget alerts.
        currency_code: Display currency from the profile.
    """

    year: int
    month: int
    summary: TransactionSummary
    income: Decimal
    budget: BudgetStatus
    groups: list[CategoryGroupBreakdown]
    comparison: PeriodComparison
    alerts: list[Alert]
    currency_code: str

    @property
    def balance(self) -> Decimal:
        """Return the effective income minus expenses."""
        return self.income - self.summary.total_expense


class GetMonthlyOverviewUseCase:
    """Assemble the dashboard overview for a month."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        planning_repository: PlanningRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing the user's transactions.
            planning_repository: Port providing profile and income records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_repository = transaction_repository
        self._planning_repository = planning_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, year: int, month: int) -> MonthlyOverview:
        """Return the overview of the month.

        Args:
            user_id: Owner of the records.
            year: Calendar year.
            month: Calendar month (1-12).

        Returns:
            MonthlyOverview: Dashboard figures.
        """
        start_date, end_date = month_bounds(year, month)
        prev_start, prev_end = month_bounds(*shift_month(year, month, -1))
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
            f"Fetched {len(transactions)} transactions for {year}-{month:02d} "
            f"and {len(previous)} for the previous month"
        )

        profile = self._planning_repository.fetch_profile(user_id)
        declared = self._planning_repository.fetch_monthly_income(
            user_id,
            year,
            month,
        )
        comparison = compare_periods(transactions, previous)
        summary = comparison.current
        income = effective_income(
            summary.total_income,
            declared.amount if declared else None,
        )
        overview = MonthlyOverview(
            year=year,
            month=month,
            summary=summary,
            income=income,
            budget=budget_status(
                summary.total_expense,
                profile.monthly_budget,
            ),
            groups=group_by_category_group(transactions),
            comparison=comparison,
            alerts=build_alerts(summary, profile, income=income),
            currency_code=profile.currency,
        )
        self._logger.info(
            f"Monthly overview computed: income={overview.income}, "
            f"expense={summary.total_expense}, alerts={len(overview.alerts)}"
        )
        return overview


__all__ = ["GetMonthlyOverviewUseCase", "MonthlyOverview"]

"""Use case to summarize loans and savings goals."""

from dataclasses import dataclass

from finsight.application.ports.planning_repository import (
    PlanningRepositoryPort,
)
from finsight.domain.models import (
    Loan,
    LoanPortfolio,
    SavingsGoal,
    SavingsProgress,
)
from finsight.domain.services.planning import summarize_goals, summarize_loans
from finsight.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PlanningSummary:
    """Loans and savings goals with their aggregates."""

    loans: list[Loan]
    portfolio: LoanPortfolio
    goals: list[SavingsGoal]
    progress: SavingsProgress


class GetPlanningSummaryUseCase:
    """Load loans and savings goals and aggregate them."""

    def __init__(
        self,
        planning_repository: PlanningRepositoryPort,
        logger=None,
    ) -> None:
        self._planning_repository = planning_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> PlanningSummary:
        loans = self._planning_repository.fetch_loans(user_id)
        goals = self._planning_repository.fetch_savings_goals(user_id)
        self._logger.info(
            f"Fetched {len(loans)} loans and {len(goals)} savings goals"
        )
        return PlanningSummary(
            loans=loans,
            portfolio=summarize_loans(loans),
            goals=goals,
            progress=summarize_goals(goals),
        )


__all__ = ["GetPlanningSummaryUseCase", "PlanningSummary"]

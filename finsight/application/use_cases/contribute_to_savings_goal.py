"""Use case to add money to a savings goal."""

from decimal import Decimal

from finsight.application.ports.planning_repository import (
    PlanningRepositoryPort,
)
from finsight.domain.models import SavingsGoal
from finsight.domain.services.planning import contribute_to_goal
from finsight.infrastructure.logging.logger import get_app_logger


class ContributeToSavingsGoalUseCase:
    """Increase a goal's saved amount and mark it completed when reached."""

    def __init__(
        self,
        planning_repository: PlanningRepositoryPort,
        logger=None,
    ) -> None:
        self._planning_repository = planning_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        goal_id: str,
        amount: Decimal,
    ) -> SavingsGoal:
        """Apply the contribution and persist the goal.

        Raises:
            ValueError: If the amount is not positive.
            LookupError: If the goal does not exist.
        """
        goal = self._planning_repository.fetch_savings_goal(user_id, goal_id)
        updated = contribute_to_goal(goal, amount)
        self._planning_repository.update_savings_goal(updated)
        if updated.is_completed and not goal.is_completed:
            self._logger.info(f"Savings goal {goal.name} completed")
        return updated


__all__ = ["ContributeToSavingsGoalUseCase"]

"""Use case to declare the income of a month."""

from decimal import Decimal

from finsight.application.ports.planning_repository import (
    PlanningRepositoryPort,
)
from finsight.infrastructure.logging.logger import get_app_logger
from finsight.utils.decimal_utils import coerce_decimal


class SetMonthlyIncomeUseCase:
    """Store the declared income that overrides recorded income."""

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
        year: int,
        month: int,
        amount: Decimal,
    ) -> Decimal:
        """Persist the income of the month.

        Raises:
            ValueError: If the amount is negative or not a number.
        """
        value = coerce_decimal(amount)
        if value.is_nan() or value < 0:
            raise ValueError(f"Monthly income must be non-negative: {amount}")
        self._planning_repository.save_monthly_income(
            user_id,
            year,
            month,
            value,
        )
        self._logger.info(f"Monthly income for {year}-{month:02d} set to {value}")
        return value


__all__ = ["SetMonthlyIncomeUseCase"]

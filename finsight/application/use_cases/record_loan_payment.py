"""Use case to record a payment against a loan."""

from decimal import Decimal

from finsight.application.ports.planning_repository import (
    PlanningRepositoryPort,
)
from finsight.domain.models import Loan
from finsight.domain.services.planning import apply_loan_payment
from finsight.infrastructure.logging.logger import get_app_logger


class RecordLoanPaymentUseCase:
    """Decrease a loan's remaining balance by a payment."""

    def __init__(
        self,
        planning_repository: PlanningRepositoryPort,
        logger=None,
    ) -> None:
        self._planning_repository = planning_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, loan_id: str, amount: Decimal) -> Loan:
        """Apply the payment and persist the new balance.

        Args:
            user_id: Owner of the loan.
            loan_id: Loan receiving the payment.
            amount: Positive payment amount.

        Returns:
            Loan: Loan with its updated balance, floored at zero.

        Raises:
            ValueError: If the amount is not positive.
            LookupError: If the loan does not exist.
        """
        loan = self._planning_repository.fetch_loan(user_id, loan_id)
        updated = apply_loan_payment(loan, amount)
        self._planning_repository.update_loan_balance(
            user_id,
            loan_id,
            updated.remaining_balance,
        )
        self._logger.info(
            f"Recorded payment of {amount} on loan {loan_id}: "
            f"remaining={updated.remaining_balance}"
        )
        return updated


__all__ = ["RecordLoanPaymentUseCase"]

"""Use case to export a user's transactions to a sink."""

from datetime import date

from finsight.application.ports.export_sink import ExportSinkPort
from finsight.application.ports.transactions_repository import (
    TransactionRepositoryPort,
)
from finsight.domain.models import ExportPayload
from finsight.domain.policies.transaction_filters import (
    TransactionFilter,
    filter_transactions,
)
from finsight.domain.services.export import build_export_payload
from finsight.infrastructure.logging.logger import get_app_logger


class ExportTransactionsUseCase:
    """Fetch, filter, serialize and deliver transactions."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        sink: ExportSinkPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing the user's transactions.
            sink: Port receiving the serialized file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_repository = transaction_repository
        self._sink = sink
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        fmt: str = "csv",
        start_date: date | None = None,
        end_date: date | None = None,
        criteria: TransactionFilter | None = None,
        filename: str | None = None,
    ) -> ExportPayload | None:
        """Export the matching transactions.

        Args:
            user_id: Owner of the transactions.
            fmt: ``csv`` or ``xls``.
            start_date: Optional lower bound for transaction dates.
            end_date: Optional upper bound for transaction dates.
            criteria: Optional filter applied after fetching.
            filename: Optional filename override.

        Returns:
            ExportPayload | None: The delivered payload, or None when there
            was nothing to export (the sink is not called).
        """
        transactions = self._transaction_repository.fetch_transactions(
            user_id,
            start_date,
            end_date,
        )
        selected = filter_transactions(transactions, criteria)
        self._logger.info(
            f"Exporting {len(selected)} of {len(transactions)} "
            f"transactions as {fmt}"
        )
        payload = build_export_payload(selected, fmt, filename=filename)
        if payload is None:
            self._logger.warning("No transactions to export")
            return None
        self._sink.deliver(
            payload.content,
            payload.mime_type,
            payload.filename,
        )
        self._logger.info(f"Export delivered as {payload.filename}")
        return payload


__all__ = ["ExportTransactionsUseCase"]

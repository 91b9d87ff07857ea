"""CLI adapter exporting transactions to a CSV or XLS file.

Configuration is read from environment variables:

* ``FINSIGHT_USER_ID``: owner of the transactions (required);
* ``EXPORT_FORMAT``: ``csv`` (default) or ``xls``;
* ``EXPORT_START_DATE`` / ``EXPORT_END_DATE``: optional ISO date bounds;
* ``EXPORT_FILENAME``: optional filename override.
"""

import os

from finsight.application.use_cases.export_transactions import (
    ExportTransactionsUseCase,
)
from finsight.adapters.cli_utils import parse_date
from finsight.infrastructure.container import (
    build_export_sink,
    build_transaction_repository,
)
from finsight.infrastructure.logging.logger import get_app_logger
from finsight.infrastructure.settings import FinSightSettings


def main() -> None:
    """Run the export use case and report the written file."""
    logger = get_app_logger()
    settings = FinSightSettings.from_env()
    if settings.user_id is None:
        logger.warning("FINSIGHT_USER_ID is required to export transactions.")
        return

    fmt = os.getenv("EXPORT_FORMAT", "csv").strip().lower()
    start_date = parse_date(os.getenv("EXPORT_START_DATE"), logger)
    end_date = parse_date(os.getenv("EXPORT_END_DATE"), logger)
    filename = os.getenv("EXPORT_FILENAME") or None

    sink = build_export_sink(settings)
    use_case = ExportTransactionsUseCase(
        transaction_repository=build_transaction_repository(),
        sink=sink,
        logger=logger,
    )
    try:
        payload = use_case.execute(
            settings.user_id,
            fmt=fmt,
            start_date=start_date,
            end_date=end_date,
            filename=filename,
        )
    except ValueError as exc:
        logger.error(str(exc))
        return

    if payload is None:
        print("No transactions to export.")
        return
    print(
        f"Exported transactions to {sink.last_path} "
        f"({payload.mime_type})."
    )


if __name__ == "__main__":  # pragma: no cover
    main()

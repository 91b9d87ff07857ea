"""CLI adapter printing a monthly or yearly report.

Configuration is read from environment variables ``FINSIGHT_USER_ID``,
``REPORT_PERIOD`` (``monthly`` or ``yearly``), ``REPORT_YEAR`` and
``REPORT_MONTH`` (defaults to the current month).
"""

from datetime import date
import os

from finsight.adapters.cli_utils import parse_int
from finsight.application.use_cases.get_period_report import (
    GetPeriodReportUseCase,
)
from finsight.infrastructure.container import build_transaction_repository
from finsight.infrastructure.logging.logger import get_app_logger
from finsight.infrastructure.settings import FinSightSettings


def main() -> None:
    """Run the report use case and print its figures."""
    logger = get_app_logger()
    settings = FinSightSettings.from_env()
    if settings.user_id is None:
        logger.warning("FINSIGHT_USER_ID is required to build a report.")
        return

    today = date.today()
    period = os.getenv("REPORT_PERIOD", "monthly").strip().lower()
    year = parse_int(os.getenv("REPORT_YEAR"), today.year, logger)
    month = parse_int(os.getenv("REPORT_MONTH"), today.month, logger)

    use_case = GetPeriodReportUseCase(
        transaction_repository=build_transaction_repository(),
        logger=logger,
    )
    try:
        report = use_case.execute(settings.user_id, period, year, month)
    except ValueError as exc:
        logger.error(str(exc))
        return

    comparison = report.comparison
    summary = comparison.current
    print(
        f"Report {report.period} {report.start_date} to {report.end_date} "
        f"({settings.currency})"
    )
    print(
        f"Income: {summary.total_income} ({comparison.income_change:+.1f}%), "
        f"Expenses: {summary.total_expense} "
        f"({comparison.expense_change:+.1f}%), "
        f"Savings: {summary.net}"
    )
    for item in summary.categories:
        print(f"  {item.category.name}: {item.amount} ({item.percentage:.1f}%)")
    for point in report.trend:
        print(
            f"  {point.label}: income={point.income}, "
            f"expenses={point.expense}, savings={point.savings}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()

"""Application use cases package."""

from .contribute_to_savings_goal import ContributeToSavingsGoalUseCase
from .delete_category import DeleteCategoryResult, DeleteCategoryUseCase
from .export_transactions import ExportTransactionsUseCase
from .get_monthly_overview import GetMonthlyOverviewUseCase, MonthlyOverview
from .get_period_report import GetPeriodReportUseCase, PeriodReport
from .get_planning_summary import GetPlanningSummaryUseCase, PlanningSummary
from .get_savings_trend import GetSavingsTrendUseCase
from .record_loan_payment import RecordLoanPaymentUseCase
from .set_monthly_income import SetMonthlyIncomeUseCase

__all__ = [
    "ContributeToSavingsGoalUseCase",
    "DeleteCategoryResult",
    "DeleteCategoryUseCase",
    "ExportTransactionsUseCase",
    "GetMonthlyOverviewUseCase",
    "MonthlyOverview",
    "GetPeriodReportUseCase",
    "PeriodReport",
    "GetPlanningSummaryUseCase",
    "PlanningSummary",
    "GetSavingsTrendUseCase",
    "RecordLoanPaymentUseCase",
    "SetMonthlyIncomeUseCase",
]

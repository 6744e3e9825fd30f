"""Application use cases package."""

from .get_balance_summary import GetBalanceSummaryUseCase
from .get_cashflow_overview import GetCashflowOverviewUseCase
from .get_monthly_series import GetMonthlySeriesUseCase
from .get_projections import GetProjectionsUseCase
from .ledger_queries import fetch_payable
from .record_report_snapshot import RecordReportSnapshotUseCase

__all__ = [
    "GetBalanceSummaryUseCase",
    "GetCashflowOverviewUseCase",
    "GetMonthlySeriesUseCase",
    "GetProjectionsUseCase",
    "RecordReportSnapshotUseCase",
    "fetch_payable",
]

"""Use case to build a report snapshot and hand it to the recorder."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.report_recorder import ReportRecorderPort
from src.application.use_cases.get_balance_summary import (
    GetBalanceSummaryUseCase,
)
from src.domain.models import PeriodSelector, ReportSnapshot, TenantScope
from src.domain.services.periods import describe_selector, resolve_period
from src.domain.services.reports import build_report_snapshot
from src.infrastructure.logging.logger import get_app_logger


class RecordReportSnapshotUseCase:
    """Snapshot the balances of a period for report history.

    Persistence, timestamps and caller identity storage belong to the
    recorder; this use case only produces the payload.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        report_recorder: ReportRecorderPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger range queries.
            report_recorder: Port persisting report snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._report_recorder = report_recorder
        self._logger = logger or get_app_logger()

    def execute(
        self,
        tenant_scope: TenantScope,
        selector: PeriodSelector | None,
        today: date,
        recorded_by: str,
    ) -> ReportSnapshot:
        """Build the snapshot for the period and pass it to the recorder.

        Args:
            tenant_scope: Tenant filter, or the all-tenants wildcard.
            selector: Period preset or explicit bounds.
            today: Reference date for period resolution.
            recorded_by: Identity of the caller requesting the report.

        Returns:
            ReportSnapshot: The payload handed to the recorder.
        """
        window = resolve_period(selector, today)
        summary = GetBalanceSummaryUseCase(
            self._ledger_repository,
            logger=self._logger,
        ).execute(tenant_scope, window)
        snapshot = build_report_snapshot(
            tenant_scope,
            window,
            summary,
            period_label=describe_selector(selector),
        )
        self._report_recorder.record(snapshot, recorded_by)
        self._logger.info(
            f"Report snapshot recorded for tenant={tenant_scope} "
            f"window={window.start}..{window.end} by {recorded_by}"
        )
        return snapshot


__all__ = ["RecordReportSnapshotUseCase", "ReportSnapshot"]

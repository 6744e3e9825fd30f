"""Use case to build the trailing monthly cash-flow series."""

from src.application.ports.ledger_repository import (
    EntryFilter,
    LedgerRepositoryPort,
)
from src.application.use_cases.ledger_queries import fetch_payable
from src.domain.constants import DEFAULT_TRAILING_MONTHS
from src.domain.models import (
    LedgerKind,
    MonthKey,
    MonthlyBucket,
    TenantScope,
)
from src.domain.services.time_series import (
    build_monthly_series,
    trailing_months_window,
)
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlySeriesUseCase:
    """Bucket eligible entries into calendar months for charting."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger range queries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        tenant_scope: TenantScope,
        reference_month: MonthKey,
        trailing_months: int = DEFAULT_TRAILING_MONTHS,
    ) -> list[MonthlyBucket]:
        """Return ``trailing_months`` buckets ending at reference_month.

        Args:
            tenant_scope: Tenant filter, or the all-tenants wildcard.
            reference_month: Most recent month of the series.
            trailing_months: Number of monthly buckets.

        Returns:
            list[MonthlyBucket]: Buckets ordered oldest first.
        """
        window = trailing_months_window(trailing_months, reference_month)
        entry_filter = EntryFilter(due_between=window)
        inflows = fetch_payable(
            self._ledger_repository,
            LedgerKind.INFLOW,
            tenant_scope,
            entry_filter,
        )
        outflows = fetch_payable(
            self._ledger_repository,
            LedgerKind.OUTFLOW,
            tenant_scope,
            entry_filter,
        )
        series = build_monthly_series(
            inflows,
            outflows,
            trailing_months,
            reference_month,
        )
        self._logger.info(
            f"Monthly series built for tenant={tenant_scope}: "
            f"{len(series)} months ending {reference_month}"
        )
        return series


__all__ = ["GetMonthlySeriesUseCase", "MonthlyBucket"]

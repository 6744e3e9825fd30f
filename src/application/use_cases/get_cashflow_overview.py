"""Use case assembling the cash-flow dashboard for a period."""

from datetime import date

from src.application.ports.ledger_repository import (
    EntryFilter,
    LedgerRepositoryPort,
)
from src.application.use_cases.ledger_queries import fetch_payable
from src.domain.constants import (
    DEFAULT_TRAILING_MONTHS,
    TOP_CATEGORY_LIMIT,
)
from src.domain.models import (
    AggregationResult,
    LedgerKind,
    MonthKey,
    PayableOccurrence,
    PeriodSelector,
    TenantScope,
)
from src.domain.services.balances import compute_balance_summary
from src.domain.services.categories import (
    build_category_index,
    top_categories,
)
from src.domain.services.periods import resolve_period
from src.domain.services.reports import recent_entries
from src.domain.services.time_series import (
    build_monthly_series,
    trailing_months_window,
)
from src.infrastructure.logging.logger import get_app_logger


class GetCashflowOverviewUseCase:
    """Compute balances, chart series and breakdowns for the dashboard.

    Two windows are involved: the selected period drives balances, the
    category breakdown and recent entries, while the monthly series always
    covers the trailing months ending with the month of ``today``.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        trailing_months: int = DEFAULT_TRAILING_MONTHS,
        category_limit: int = TOP_CATEGORY_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger range queries.
            logger: Optional logger compatible with logging.Logger-like API.
            trailing_months: Number of months in the chart series.
            category_limit: Number of outflow categories kept.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._trailing_months = trailing_months
        self._category_limit = category_limit

    def execute(
        self,
        tenant_scope: TenantScope,
        selector: PeriodSelector | None,
        today: date,
    ) -> AggregationResult:
        """Return the aggregation result for the selected period.

        Args:
            tenant_scope: Tenant filter, or the all-tenants wildcard.
            selector: Period preset or explicit bounds.
            today: Reference date for period resolution and the series.

        Returns:
            AggregationResult: Balances, monthly series, category breakdown
            and recent entries.
        """
        window = resolve_period(selector, today)
        history_filter = EntryFilter(due_before=window.start)
        period_filter = EntryFilter(due_between=window)

        history_in, history_out = self._fetch_both(
            tenant_scope,
            history_filter,
        )
        period_in, period_out = self._fetch_both(tenant_scope, period_filter)
        self._logger.info(
            f"Fetched {len(period_in)} inflows and {len(period_out)} outflows "
            f"for tenant={tenant_scope} window={window.start}..{window.end}"
        )
        balance = compute_balance_summary(
            [*history_in, *period_in],
            [*history_out, *period_out],
            window,
        )

        reference_month = MonthKey.of(today)
        series_filter = EntryFilter(
            due_between=trailing_months_window(
                self._trailing_months,
                reference_month,
            )
        )
        series_in, series_out = self._fetch_both(tenant_scope, series_filter)
        monthly_series = build_monthly_series(
            series_in,
            series_out,
            self._trailing_months,
            reference_month,
        )

        category_labels = build_category_index(
            self._ledger_repository.fetch_categories(tenant_scope)
        )
        breakdown = top_categories(
            period_out,
            category_labels,
            limit=self._category_limit,
            logger=self._logger,
        )
        recent = recent_entries(
            period_in,
            period_out,
            category_labels,
            logger=self._logger,
        )

        self._logger.info(
            f"Cash-flow overview computed: opening={balance.opening_balance}, "
            f"in={balance.period_inflows}, out={balance.period_outflows}, "
            f"closing={balance.closing_balance}"
        )
        return AggregationResult(
            tenant_scope=tenant_scope,
            as_of=window,
            balance=balance,
            monthly_series=monthly_series,
            category_breakdown=breakdown,
            recent_entries=recent,
        )

    def _fetch_both(
        self,
        tenant_scope: TenantScope,
        entry_filter: EntryFilter,
    ) -> tuple[list[PayableOccurrence], list[PayableOccurrence]]:
        return tuple(
            fetch_payable(
                self._ledger_repository,
                kind,
                tenant_scope,
                entry_filter,
            )
            for kind in (LedgerKind.INFLOW, LedgerKind.OUTFLOW)
        )


__all__ = ["GetCashflowOverviewUseCase", "AggregationResult"]

"""Use case to compute opening, period and closing balances."""

from src.application.ports.ledger_repository import (
    EntryFilter,
    LedgerRepositoryPort,
)
from src.application.use_cases.ledger_queries import fetch_payable
from src.domain.models import (
    BalanceSummary,
    LedgerKind,
    PeriodWindow,
    TenantScope,
)
from src.domain.services.balances import compute_balance_summary
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceSummaryUseCase:
    """Compute the running balance of a tenant scope over a window.

    The opening balance is recomputed from the full history on every call.
    """

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
        window: PeriodWindow,
    ) -> BalanceSummary:
        """Return balances for the window.

        Args:
            tenant_scope: Tenant filter, or the all-tenants wildcard.
            window: Inclusive balance window.

        Returns:
            BalanceSummary: Opening, period and closing figures.
        """
        history_filter = EntryFilter(due_before=window.start)
        period_filter = EntryFilter(due_between=window)
        inflows = [
            *self._fetch(LedgerKind.INFLOW, tenant_scope, history_filter),
            *self._fetch(LedgerKind.INFLOW, tenant_scope, period_filter),
        ]
        outflows = [
            *self._fetch(LedgerKind.OUTFLOW, tenant_scope, history_filter),
            *self._fetch(LedgerKind.OUTFLOW, tenant_scope, period_filter),
        ]
        summary = compute_balance_summary(inflows, outflows, window)
        self._logger.info(
            f"Balance computed for tenant={tenant_scope} "
            f"window={window.start}..{window.end}: "
            f"opening={summary.opening_balance}, "
            f"closing={summary.closing_balance}"
        )
        return summary

    def _fetch(self, kind, tenant_scope, entry_filter):
        return fetch_payable(
            self._ledger_repository,
            kind,
            tenant_scope,
            entry_filter,
        )


__all__ = ["GetBalanceSummaryUseCase", "BalanceSummary"]

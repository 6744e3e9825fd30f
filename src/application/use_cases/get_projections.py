"""Use case to project not-yet-due entries into horizons."""

from datetime import date

from src.application.ports.ledger_repository import (
    EntryFilter,
    LedgerRepositoryPort,
)
from src.application.use_cases.ledger_queries import fetch_payable
from src.domain.models import LedgerKind, ProjectionResult, TenantScope
from src.domain.services.projections import compute_projection
from src.infrastructure.logging.logger import get_app_logger


class GetProjectionsUseCase:
    """Compute 30/60/90-day and unbounded projections as of a date.

    Projections do not depend on the selected dashboard period.
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
        today: date,
    ) -> ProjectionResult:
        """Return projections of both ledgers.

        Args:
            tenant_scope: Tenant filter, or the all-tenants wildcard.
            today: Reference date; entries due on it are not projected.

        Returns:
            ProjectionResult: Buckets per ledger and horizon.
        """
        upcoming = EntryFilter(due_after=today)
        inflows = fetch_payable(
            self._ledger_repository,
            LedgerKind.INFLOW,
            tenant_scope,
            upcoming,
        )
        outflows = fetch_payable(
            self._ledger_repository,
            LedgerKind.OUTFLOW,
            tenant_scope,
            upcoming,
        )
        result = compute_projection(inflows, outflows, today)
        self._logger.info(
            f"Projections computed for tenant={tenant_scope} as of {today}: "
            f"inflows={result.inflows.unbounded.total} "
            f"({result.inflows.unbounded.count}), "
            f"outflows={result.outflows.unbounded.total} "
            f"({result.outflows.unbounded.count})"
        )
        return result


__all__ = ["GetProjectionsUseCase", "ProjectionResult"]

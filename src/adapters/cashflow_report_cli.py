"""CLI adapter printing the cash-flow overview and projections.

The tenant and backend come from DashboardSettings; the period is read from
CASHFLOW_PERIOD or from the CASHFLOW_START_DATE/CASHFLOW_END_DATE pair.
"""

from datetime import date
import os

from src.application.use_cases.get_cashflow_overview import (
    GetCashflowOverviewUseCase,
)
from src.application.use_cases.get_projections import GetProjectionsUseCase
from src.domain.errors import InvalidPeriod
from src.domain.models import (
    AggregationResult,
    ExplicitPeriod,
    PeriodSelector,
    ProjectionResult,
)
from src.infrastructure.container import (
    build_ledger_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _read_selector() -> PeriodSelector | None:
    """Return the period selector configured in the environment."""
    start = os.getenv("CASHFLOW_START_DATE")
    end = os.getenv("CASHFLOW_END_DATE")
    if start or end:
        return ExplicitPeriod(start=start, end=end)
    return os.getenv("CASHFLOW_PERIOD") or None


def _print_overview(result: AggregationResult) -> None:
    print(
        f"Cash flow for tenant={result.tenant_scope} "
        f"({result.as_of.start} to {result.as_of.end})"
    )
    print(
        f"opening={result.opening_balance}, "
        f"inflows={result.period_inflows}, "
        f"outflows={result.period_outflows}, "
        f"net={result.period_net}, "
        f"closing={result.closing_balance}"
    )
    for bucket in result.monthly_series:
        print(
            f"{bucket.month.label}: in={bucket.inflows}, "
            f"out={bucket.outflows}, net={bucket.net}"
        )
    for category in result.category_breakdown:
        print(f"{category.category}: {category.total}")


def _horizon_label(horizon_days: int | None) -> str:
    return "all" if horizon_days is None else f"{horizon_days}d"


def _print_projections(result: ProjectionResult) -> None:
    print(f"Projections as of {result.as_of}")
    for projection in (result.inflows, result.outflows):
        horizons = ", ".join(
            f"{_horizon_label(bucket.horizon_days)}={bucket.total} "
            f"({bucket.count})"
            for bucket in projection.buckets
        )
        print(f"{projection.kind.value}: {horizons}")


def main() -> None:
    """Print the overview and projections for the configured tenant."""
    logger = get_app_logger()
    settings = build_settings()
    try:
        tenant_scope = settings.tenant_scope()
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    raw_today = os.getenv("CASHFLOW_TODAY")
    today = _parse_date(raw_today, logger)
    if today is None:
        if raw_today:
            logger.error(f"CASHFLOW_TODAY is not a valid date: {raw_today}")
            return
        today = date.today()
    repository = build_ledger_repository(settings=settings)
    overview_use_case = GetCashflowOverviewUseCase(
        repository,
        logger=logger,
        trailing_months=settings.trailing_months,
        category_limit=settings.top_categories,
    )
    try:
        overview = overview_use_case.execute(
            tenant_scope,
            _read_selector(),
            today,
        )
    except InvalidPeriod as exc:
        logger.error(str(exc))
        return
    projections = GetProjectionsUseCase(repository, logger=logger).execute(
        tenant_scope,
        today,
    )

    _print_overview(overview)
    _print_projections(projections)


if __name__ == "__main__":  # pragma: no cover
    main()

"""Forward projections of not-yet-due entries."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from src.domain.constants import PROJECTION_HORIZONS
from src.domain.models.cashflow import (
    LedgerProjection,
    ProjectionBucket,
    ProjectionResult,
)
from src.domain.models.ledger import LedgerKind, PayableOccurrence
from src.domain.services.balances import sum_amounts


def project_horizon(
    entries: Iterable[PayableOccurrence],
    today: date,
    horizon_days: int | None,
) -> ProjectionBucket:
    """Collect entries due after today and within the horizon.

    An N-day horizon spans the N days starting with ``today``, so the cutoff
    date ``today + N`` is itself outside it. The cutoff day stays excluded
    even though it is exactly N days away: the 60-day horizon from
    2024-01-01 stops before 2024-03-01. An entry due on ``today`` is not
    projected. The unbounded horizon (``None``) has no upper cutoff.

    Args:
        entries: Payable entries of one ledger.
        today: Reference date.
        horizon_days: Horizon length in days, or None for unbounded.

    Returns:
        ProjectionBucket: Total, count and the items ordered by due date.
    """
    cutoff = (
        today + timedelta(days=horizon_days)
        if horizon_days is not None
        else None
    )
    items = sorted(
        (
            entry
            for entry in entries
            if entry.due_date > today
            and (cutoff is None or entry.due_date < cutoff)
        ),
        key=lambda entry: (entry.due_date, entry.id),
    )
    return ProjectionBucket(
        horizon_days=horizon_days,
        total=sum_amounts(items),
        count=len(items),
        items=tuple(items),
    )


def project_ledger(
    kind: LedgerKind,
    entries: Sequence[PayableOccurrence],
    today: date,
    horizons: Iterable[int | None] = PROJECTION_HORIZONS,
) -> LedgerProjection:
    """Build every horizon of one ledger independently."""
    return LedgerProjection(
        kind=kind,
        buckets=tuple(
            project_horizon(entries, today, horizon) for horizon in horizons
        ),
    )


def compute_projection(
    inflows: Sequence[PayableOccurrence],
    outflows: Sequence[PayableOccurrence],
    today: date,
) -> ProjectionResult:
    """Project both ledgers as of today."""
    return ProjectionResult(
        as_of=today,
        inflows=project_ledger(LedgerKind.INFLOW, inflows, today),
        outflows=project_ledger(LedgerKind.OUTFLOW, outflows, today),
    )


__all__ = ["project_horizon", "project_ledger", "compute_projection"]

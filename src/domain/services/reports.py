"""Report snapshot payloads and recent-entry listings."""

from collections.abc import Iterable, Mapping
from logging import Logger

from src.domain.constants import (
    RECENT_ENTRIES_LIMIT,
    RECENT_ENTRIES_PER_LEDGER,
)
from src.domain.models.cashflow import (
    BalanceSummary,
    EntryCounts,
    RecentEntry,
    ReportSnapshot,
)
from src.domain.models.ledger import PayableOccurrence, TenantScope
from src.domain.models.period import PeriodWindow
from src.domain.services.categories import label_or_placeholder


def build_report_snapshot(
    tenant_scope: TenantScope,
    window: PeriodWindow,
    summary: BalanceSummary,
    period_label: str | None = None,
) -> ReportSnapshot:
    """Build the immutable payload persisted by the report recorder."""
    return ReportSnapshot(
        tenant_scope=tenant_scope,
        period=window,
        opening_balance=summary.opening_balance,
        period_inflows=summary.period_inflows,
        period_outflows=summary.period_outflows,
        closing_balance=summary.closing_balance,
        entry_counts=EntryCounts(
            inflows=summary.period_inflow_count,
            outflows=summary.period_outflow_count,
        ),
        period_label=period_label,
    )


def recent_entries(
    inflows: Iterable[PayableOccurrence],
    outflows: Iterable[PayableOccurrence],
    category_labels: Mapping[str, str],
    *,
    per_ledger: int = RECENT_ENTRIES_PER_LEDGER,
    limit: int = RECENT_ENTRIES_LIMIT,
    logger: Logger | None = None,
) -> list[RecentEntry]:
    """Return the latest entries of both ledgers, newest first.

    The latest ``per_ledger`` entries of each ledger are merged, then the
    merged list is truncated to ``limit``.
    """
    latest: list[PayableOccurrence] = []
    for entries in (inflows, outflows):
        latest.extend(_newest_first(entries)[:per_ledger])
    return [
        RecentEntry(
            id=entry.id,
            kind=entry.kind,
            due_date=entry.due_date,
            amount=entry.amount,
            description=entry.description,
            category=label_or_placeholder(
                entry.category_id,
                category_labels,
                logger,
            ),
        )
        for entry in _newest_first(latest)[:limit]
    ]


def _newest_first(
    entries: Iterable[PayableOccurrence],
) -> list[PayableOccurrence]:
    return sorted(
        entries,
        key=lambda entry: (entry.due_date, entry.id),
        reverse=True,
    )


__all__ = ["build_report_snapshot", "recent_entries"]

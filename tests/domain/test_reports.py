"""Tests for report snapshots and recent entries."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    BalanceSummary,
    LedgerKind,
    PayableOccurrence,
    PeriodWindow,
    TenantScope,
)
from src.domain.services.reports import build_report_snapshot, recent_entries


def _entry(
    entry_id: str,
    kind: LedgerKind,
    due_date: date,
    category_id: str | None = None,
) -> PayableOccurrence:
    return PayableOccurrence(
        id=entry_id,
        kind=kind,
        tenant_id="t1",
        amount=Decimal("10.00"),
        due_date=due_date,
        category_id=category_id,
        description=f"entry {entry_id}",
    )


def test_build_report_snapshot_payload() -> None:
    """The snapshot copies balances and entry counts verbatim."""
    summary = BalanceSummary(
        opening_balance=Decimal("0.00"),
        period_inflows=Decimal("1000.00"),
        period_outflows=Decimal("400.00"),
        period_net=Decimal("600.00"),
        closing_balance=Decimal("600.00"),
        period_inflow_count=1,
        period_outflow_count=1,
    )
    window = PeriodWindow(date(2024, 1, 1), date(2024, 1, 31))

    snapshot = build_report_snapshot(
        TenantScope.for_tenant("t1"),
        window,
        summary,
        period_label="custom",
    )

    assert snapshot.to_payload() == {
        "tenant_scope": "t1",
        "period": {"start": "2024-01-01", "end": "2024-01-31"},
        "period_label": "custom",
        "opening_balance": "0.00",
        "period_inflows": "1000.00",
        "period_outflows": "400.00",
        "closing_balance": "600.00",
        "entry_counts": {"inflows": 1, "outflows": 1},
    }


def test_recent_entries_merges_latest_of_each_ledger() -> None:
    """Five per ledger are kept, then merged newest first."""
    inflows = [
        _entry(f"in-{day:02d}", LedgerKind.INFLOW, date(2024, 1, day))
        for day in range(1, 8)
    ]
    outflows = [
        _entry(f"out-{day:02d}", LedgerKind.OUTFLOW, date(2024, 2, day))
        for day in range(1, 3)
    ]

    result = recent_entries(inflows, outflows, {})

    assert [entry.id for entry in result] == [
        "out-02",
        "out-01",
        "in-07",
        "in-06",
        "in-05",
        "in-04",
        "in-03",
    ]
    assert result[0].category == "Uncategorized"


def test_recent_entries_respects_limit_and_labels() -> None:
    """The merged list is truncated and category labels resolved."""
    inflows = [
        _entry("in", LedgerKind.INFLOW, date(2024, 1, 5), "salary"),
    ]
    outflows = [
        _entry("out", LedgerKind.OUTFLOW, date(2024, 1, 6), "gone"),
    ]

    result = recent_entries(
        inflows,
        outflows,
        {"salary": "Salary"},
        limit=1,
    )

    assert len(result) == 1
    assert result[0].id == "out"
    assert result[0].category == "Unknown category"
    assert result[0].description == "entry out"

"""Tests for the RecordReportSnapshotUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.record_report_snapshot import (
    RecordReportSnapshotUseCase,
)
from src.domain.models import (
    EntryCounts,
    ExplicitPeriod,
    LedgerEntryRecord,
    LedgerKind,
    TenantScope,
)
from src.infrastructure.memory_ledger_repository import (
    InMemoryLedgerRepository,
)


def test_execute_hands_snapshot_to_recorder() -> None:
    """The recorder receives the snapshot and the caller identity."""
    repository = InMemoryLedgerRepository(
        [
            LedgerEntryRecord(
                id="in",
                kind=LedgerKind.INFLOW,
                tenant_id="t1",
                amount=Decimal("1000.00"),
                due_date=date(2024, 1, 15),
            ),
            LedgerEntryRecord(
                id="out",
                kind=LedgerKind.OUTFLOW,
                tenant_id="t1",
                amount=Decimal("400.00"),
                due_date=date(2024, 1, 20),
            ),
        ]
    )
    recorder = MagicMock()
    use_case = RecordReportSnapshotUseCase(
        repository,
        recorder,
        logger=MagicMock(),
    )

    snapshot = use_case.execute(
        TenantScope.for_tenant("t1"),
        ExplicitPeriod(start="2024-01-01", end="2024-01-31"),
        date(2024, 2, 10),
        recorded_by="alice",
    )

    recorder.record.assert_called_once_with(snapshot, "alice")
    assert snapshot.closing_balance == Decimal("600.00")
    assert snapshot.entry_counts == EntryCounts(inflows=1, outflows=1)
    assert snapshot.period_label == "custom"
    assert snapshot.to_payload()["period"] == {
        "start": "2024-01-01",
        "end": "2024-01-31",
    }


def test_execute_labels_preset_periods() -> None:
    """Preset selectors are stored under their tag."""
    recorder = MagicMock()
    use_case = RecordReportSnapshotUseCase(
        InMemoryLedgerRepository([]),
        recorder,
        logger=MagicMock(),
    )

    snapshot = use_case.execute(
        TenantScope.all_tenants(),
        "last-3-months",
        date(2024, 5, 31),
        recorded_by="bob",
    )

    assert snapshot.period_label == "last-3-months"
    assert snapshot.period.start == date(2024, 3, 2)
    assert snapshot.opening_balance == Decimal("0")
    assert recorder.record.call_count == 1

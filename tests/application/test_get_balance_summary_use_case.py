"""Tests for the GetBalanceSummaryUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.ledger_repository import EntryFilter
from src.application.use_cases.get_balance_summary import (
    GetBalanceSummaryUseCase,
)
from src.domain.errors import StoreUnavailable
from src.domain.models import (
    LedgerEntryRecord,
    LedgerKind,
    PeriodWindow,
    TenantScope,
)
from src.infrastructure.memory_ledger_repository import (
    InMemoryLedgerRepository,
)

TENANT = TenantScope.for_tenant("t1")
JANUARY = PeriodWindow(date(2024, 1, 1), date(2024, 1, 31))
FEBRUARY = PeriodWindow(date(2024, 2, 1), date(2024, 2, 29))


def _record(
    entry_id: str,
    kind: LedgerKind,
    amount: str,
    due_date: date,
    tenant_id: str = "t1",
    **extra,
) -> LedgerEntryRecord:
    return LedgerEntryRecord(
        id=entry_id,
        kind=kind,
        tenant_id=tenant_id,
        amount=Decimal(amount),
        due_date=due_date,
        **extra,
    )


def _repository() -> InMemoryLedgerRepository:
    return InMemoryLedgerRepository(
        [
            _record("in-1", LedgerKind.INFLOW, "1000.00", date(2024, 1, 15)),
            _record("out-1", LedgerKind.OUTFLOW, "400.00", date(2024, 1, 20)),
            _record(
                "plan",
                LedgerKind.OUTFLOW,
                "9999.00",
                date(2024, 1, 5),
                is_installment_plan=True,
            ),
            _record(
                "other",
                LedgerKind.INFLOW,
                "50.00",
                date(2024, 1, 10),
                tenant_id="t2",
            ),
        ]
    )


def test_execute_computes_january_balances() -> None:
    """Period activity produces the closing balance."""
    use_case = GetBalanceSummaryUseCase(_repository(), logger=MagicMock())

    summary = use_case.execute(TENANT, JANUARY)

    assert summary.opening_balance == Decimal("0.00")
    assert summary.period_inflows == Decimal("1000.00")
    assert summary.period_outflows == Decimal("400.00")
    assert summary.closing_balance == Decimal("600.00")


def test_execute_carries_history_into_opening_balance() -> None:
    """The next window opens with the previous closing balance."""
    use_case = GetBalanceSummaryUseCase(_repository(), logger=MagicMock())

    january = use_case.execute(TENANT, JANUARY)
    february = use_case.execute(TENANT, FEBRUARY)

    assert february.opening_balance == january.closing_balance
    assert february.period_inflows == Decimal("0")
    assert february.period_outflows == Decimal("0")
    assert february.closing_balance == Decimal("600.00")


def test_execute_all_tenants_scope_includes_every_tenant() -> None:
    """The wildcard scope sums entries of all tenants."""
    use_case = GetBalanceSummaryUseCase(_repository(), logger=MagicMock())

    summary = use_case.execute(TenantScope.all_tenants(), JANUARY)

    assert summary.period_inflows == Decimal("1050.00")
    assert summary.period_inflow_count == 2


def test_execute_returns_zero_for_unknown_tenant() -> None:
    """A tenant without history gets all-zero balances."""
    use_case = GetBalanceSummaryUseCase(_repository(), logger=MagicMock())

    summary = use_case.execute(TenantScope.for_tenant("nobody"), JANUARY)

    assert summary.opening_balance == Decimal("0")
    assert summary.closing_balance == Decimal("0")


def test_execute_queries_history_and_period_per_ledger() -> None:
    """Both ledgers are read for the history and the window."""
    repository = MagicMock()
    repository.fetch_entries.return_value = []
    use_case = GetBalanceSummaryUseCase(repository, logger=MagicMock())

    use_case.execute(TENANT, JANUARY)

    calls = [call.args for call in repository.fetch_entries.call_args_list]
    assert (
        LedgerKind.INFLOW,
        TENANT,
        EntryFilter(due_before=date(2024, 1, 1)),
    ) in calls
    assert (
        LedgerKind.OUTFLOW,
        TENANT,
        EntryFilter(due_between=JANUARY),
    ) in calls
    assert len(calls) == 4


def test_execute_propagates_store_failures() -> None:
    """Store errors surface instead of partial balances."""
    repository = MagicMock()
    repository.fetch_entries.side_effect = StoreUnavailable("down")
    use_case = GetBalanceSummaryUseCase(repository, logger=MagicMock())

    with pytest.raises(StoreUnavailable):
        use_case.execute(TENANT, JANUARY)

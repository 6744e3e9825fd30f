"""Shared ledger reads used by the cash-flow use cases."""

from src.application.ports.ledger_repository import (
    EntryFilter,
    LedgerRepositoryPort,
)
from src.domain.models import LedgerKind, PayableOccurrence, TenantScope
from src.domain.services.installments import payable_occurrences


def fetch_payable(
    ledger_repository: LedgerRepositoryPort,
    kind: LedgerKind,
    tenant_scope: TenantScope,
    entry_filter: EntryFilter,
) -> list[PayableOccurrence]:
    """Fetch one ledger and keep only payable occurrences.

    Plan templates are dropped here, before any arithmetic sees them.
    """
    entries = ledger_repository.fetch_entries(
        kind,
        tenant_scope,
        entry_filter,
    )
    return payable_occurrences(entries)


__all__ = ["fetch_payable"]

"""Port for read access to the inflow and outflow ledgers."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from src.domain.models import (
    CategoryLabel,
    LedgerEntry,
    LedgerKind,
    PeriodWindow,
    TenantScope,
)


@dataclass(frozen=True)
class EntryFilter:
    """Due-date filter for ledger queries.

    Attributes:
        due_before: Keep entries due strictly before this date.
        due_after: Keep entries due strictly after this date.
        due_between: Keep entries due inside this inclusive window.
    """

    due_before: date | None = None
    due_after: date | None = None
    due_between: PeriodWindow | None = None

    def matches(self, due_date: date) -> bool:
        """Return True when a due date passes every bound."""
        if self.due_before is not None and not due_date < self.due_before:
            return False
        if self.due_after is not None and not due_date > self.due_after:
            return False
        if self.due_between is not None and not self.due_between.contains(
            due_date
        ):
            return False
        return True


class LedgerRepositoryPort(Protocol):
    """Port exposing ledger range queries and category labels.

    Implementations raise StoreUnavailable when the backing store fails.
    """

    def fetch_entries(
        self,
        kind: LedgerKind,
        tenant_scope: TenantScope,
        entry_filter: EntryFilter,
    ) -> list[LedgerEntry]:
        """Return classified entries of one ledger matching the filter."""

    def fetch_categories(
        self,
        tenant_scope: TenantScope,
    ) -> list[CategoryLabel]:
        """Return the category labels visible to the tenant scope."""


__all__ = ["EntryFilter", "LedgerRepositoryPort"]

"""Domain models for ledger entries and tenant scoping."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import ALL_TENANTS_TOKENS


class LedgerKind(str, Enum):
    """The two append-only ledgers."""

    INFLOW = "inflow"
    OUTFLOW = "outflow"


@dataclass(frozen=True)
class TenantScope:
    """Tenant filter applied to every ledger query.

    Attributes:
        tenant_id: Owning tenant, or None for the privileged wildcard.
    """

    tenant_id: str | None

    @classmethod
    def for_tenant(cls, tenant_id: str) -> "TenantScope":
        """Return a scope restricted to one tenant."""
        if not tenant_id:
            raise ValueError("tenant_id must be a non-empty string")
        return cls(tenant_id=tenant_id)

    @classmethod
    def all_tenants(cls) -> "TenantScope":
        """Return the privileged scope spanning every tenant."""
        return cls(tenant_id=None)

    @classmethod
    def parse(cls, raw: str | None) -> "TenantScope":
        """Build a scope from configuration text.

        Args:
            raw: Tenant id, or one of the wildcard tokens (all, *).

        Returns:
            TenantScope: Parsed scope.
        """
        cleaned = (raw or "").strip()
        if not cleaned:
            raise ValueError("Tenant scope is required")
        if cleaned.lower() in ALL_TENANTS_TOKENS:
            return cls.all_tenants()
        return cls.for_tenant(cleaned)

    @property
    def is_all(self) -> bool:
        return self.tenant_id is None

    def includes(self, tenant_id: str) -> bool:
        """Return True when an entry owned by tenant_id is in scope."""
        return self.is_all or self.tenant_id == tenant_id

    def __str__(self) -> str:
        return "all" if self.is_all else str(self.tenant_id)


@dataclass(frozen=True)
class LedgerEntryRecord:
    """Raw ledger row as stored, before installment classification."""

    id: str
    kind: LedgerKind
    tenant_id: str
    amount: Decimal
    due_date: date
    category_id: str | None = None
    description: str = ""
    installment_parent_id: str | None = None
    is_installment_plan: bool = False


@dataclass(frozen=True)
class PlanTemplate:
    """Abstract multi-installment charge that only groups its children.

    Templates never take part in balances, series, categories or
    projections.
    """

    id: str
    kind: LedgerKind
    tenant_id: str
    amount: Decimal
    due_date: date
    category_id: str | None = None
    description: str = ""


@dataclass(frozen=True)
class PayableOccurrence:
    """Leaf-level entry that is individually due.

    Either a standalone entry or one concrete installment of a plan.
    """

    id: str
    kind: LedgerKind
    tenant_id: str
    amount: Decimal
    due_date: date
    category_id: str | None = None
    description: str = ""
    installment_parent_id: str | None = None

    @property
    def is_installment(self) -> bool:
        return self.installment_parent_id is not None


LedgerEntry = PlanTemplate | PayableOccurrence


@dataclass(frozen=True)
class CategoryLabel:
    """Display label for a category id."""

    id: str
    label: str


__all__ = [
    "LedgerKind",
    "TenantScope",
    "LedgerEntryRecord",
    "PlanTemplate",
    "PayableOccurrence",
    "LedgerEntry",
    "CategoryLabel",
]

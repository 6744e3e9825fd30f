"""Domain models for cash-flow aggregates and projections."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models.ledger import LedgerKind, PayableOccurrence, TenantScope
from src.domain.models.period import MonthKey, PeriodWindow


@dataclass(frozen=True)
class BalanceSummary:
    """Running balance for a window.

    Attributes:
        opening_balance: Net of all eligible entries due before the window.
        period_inflows: Inflows due inside the window.
        period_outflows: Outflows due inside the window.
        period_net: period_inflows minus period_outflows.
        closing_balance: opening_balance plus period_net.
        period_inflow_count: Number of inflow entries inside the window.
        period_outflow_count: Number of outflow entries inside the window.
    """

    opening_balance: Decimal
    period_inflows: Decimal
    period_outflows: Decimal
    period_net: Decimal
    closing_balance: Decimal
    period_inflow_count: int = 0
    period_outflow_count: int = 0


@dataclass(frozen=True)
class MonthlyBucket:
    """Inflow/outflow totals for one calendar month."""

    month: MonthKey
    inflows: Decimal
    outflows: Decimal

    @property
    def net(self) -> Decimal:
        return self.inflows - self.outflows


@dataclass(frozen=True)
class CategoryTotal:
    """Outflow total for a category label."""

    category: str
    total: Decimal


@dataclass(frozen=True)
class RecentEntry:
    """Latest movement shown next to the balances."""

    id: str
    kind: LedgerKind
    due_date: date
    amount: Decimal
    description: str
    category: str


@dataclass(frozen=True)
class AggregationResult:
    """Balances, chart series and breakdowns for a tenant and window."""

    tenant_scope: TenantScope
    as_of: PeriodWindow
    balance: BalanceSummary
    monthly_series: list[MonthlyBucket]
    category_breakdown: list[CategoryTotal]
    recent_entries: list[RecentEntry] = field(default_factory=list)

    @property
    def opening_balance(self) -> Decimal:
        return self.balance.opening_balance

    @property
    def period_inflows(self) -> Decimal:
        return self.balance.period_inflows

    @property
    def period_outflows(self) -> Decimal:
        return self.balance.period_outflows

    @property
    def period_net(self) -> Decimal:
        return self.balance.period_net

    @property
    def closing_balance(self) -> Decimal:
        return self.balance.closing_balance


@dataclass(frozen=True)
class ProjectionBucket:
    """Not-yet-due entries inside one horizon.

    Attributes:
        horizon_days: Day count of the horizon, None when unbounded.
        total: Sum of the item amounts.
        count: Number of items.
        items: The summed entries, ordered by due date.
    """

    horizon_days: int | None
    total: Decimal
    count: int
    items: tuple[PayableOccurrence, ...]


@dataclass(frozen=True)
class LedgerProjection:
    """Projection buckets for one ledger."""

    kind: LedgerKind
    buckets: tuple[ProjectionBucket, ...]

    def bucket(self, horizon_days: int | None) -> ProjectionBucket:
        for bucket in self.buckets:
            if bucket.horizon_days == horizon_days:
                return bucket
        raise KeyError(f"No projection horizon of {horizon_days} days")

    @property
    def days_30(self) -> ProjectionBucket:
        return self.bucket(30)

    @property
    def days_60(self) -> ProjectionBucket:
        return self.bucket(60)

    @property
    def days_90(self) -> ProjectionBucket:
        return self.bucket(90)

    @property
    def unbounded(self) -> ProjectionBucket:
        return self.bucket(None)


@dataclass(frozen=True)
class ProjectionResult:
    """Forward-looking projections for both ledgers as of a date."""

    as_of: date
    inflows: LedgerProjection
    outflows: LedgerProjection

    def for_kind(self, kind: LedgerKind) -> LedgerProjection:
        return self.inflows if kind is LedgerKind.INFLOW else self.outflows


@dataclass(frozen=True)
class EntryCounts:
    """Number of period entries per ledger."""

    inflows: int
    outflows: int


@dataclass(frozen=True)
class ReportSnapshot:
    """Immutable payload handed to the report recorder."""

    tenant_scope: TenantScope
    period: PeriodWindow
    opening_balance: Decimal
    period_inflows: Decimal
    period_outflows: Decimal
    closing_balance: Decimal
    entry_counts: EntryCounts
    period_label: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Return a plain mapping suitable for persistence.

        Amounts are rendered as strings to keep their exact decimal value.
        """
        return {
            "tenant_scope": str(self.tenant_scope),
            "period": {
                "start": self.period.start.isoformat(),
                "end": self.period.end.isoformat(),
            },
            "period_label": self.period_label,
            "opening_balance": str(self.opening_balance),
            "period_inflows": str(self.period_inflows),
            "period_outflows": str(self.period_outflows),
            "closing_balance": str(self.closing_balance),
            "entry_counts": {
                "inflows": self.entry_counts.inflows,
                "outflows": self.entry_counts.outflows,
            },
        }


__all__ = [
    "BalanceSummary",
    "MonthlyBucket",
    "CategoryTotal",
    "RecentEntry",
    "AggregationResult",
    "ProjectionBucket",
    "LedgerProjection",
    "ProjectionResult",
    "EntryCounts",
    "ReportSnapshot",
]

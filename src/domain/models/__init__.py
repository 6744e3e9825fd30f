"""Domain models package."""

from .cashflow import (
    AggregationResult,
    BalanceSummary,
    CategoryTotal,
    EntryCounts,
    LedgerProjection,
    MonthlyBucket,
    ProjectionBucket,
    ProjectionResult,
    RecentEntry,
    ReportSnapshot,
)
from .ledger import (
    CategoryLabel,
    LedgerEntry,
    LedgerEntryRecord,
    LedgerKind,
    PayableOccurrence,
    PlanTemplate,
    TenantScope,
)
from .period import (
    ExplicitPeriod,
    MonthKey,
    PeriodPreset,
    PeriodSelector,
    PeriodWindow,
)

__all__ = [
    "AggregationResult",
    "BalanceSummary",
    "CategoryTotal",
    "EntryCounts",
    "LedgerProjection",
    "MonthlyBucket",
    "ProjectionBucket",
    "ProjectionResult",
    "RecentEntry",
    "ReportSnapshot",
    "CategoryLabel",
    "LedgerEntry",
    "LedgerEntryRecord",
    "LedgerKind",
    "PayableOccurrence",
    "PlanTemplate",
    "TenantScope",
    "ExplicitPeriod",
    "MonthKey",
    "PeriodPreset",
    "PeriodSelector",
    "PeriodWindow",
]

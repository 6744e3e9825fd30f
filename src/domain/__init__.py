"""Domain package for business rules and core models."""

from .errors import (
    CashflowError,
    InvalidPeriod,
    StoreUnavailable,
    UnknownCategory,
)
from .models import (
    AggregationResult,
    BalanceSummary,
    CategoryLabel,
    CategoryTotal,
    ExplicitPeriod,
    LedgerEntry,
    LedgerEntryRecord,
    LedgerKind,
    MonthKey,
    MonthlyBucket,
    PayableOccurrence,
    PeriodPreset,
    PeriodWindow,
    PlanTemplate,
    ProjectionResult,
    ReportSnapshot,
    TenantScope,
)
from .services import (
    build_monthly_series,
    classify_entry,
    compute_balance_summary,
    compute_projection,
    payable_occurrences,
    resolve_period,
    top_categories,
)

__all__ = [
    "CashflowError",
    "InvalidPeriod",
    "StoreUnavailable",
    "UnknownCategory",
    "AggregationResult",
    "BalanceSummary",
    "CategoryLabel",
    "CategoryTotal",
    "ExplicitPeriod",
    "LedgerEntry",
    "LedgerEntryRecord",
    "LedgerKind",
    "MonthKey",
    "MonthlyBucket",
    "PayableOccurrence",
    "PeriodPreset",
    "PeriodWindow",
    "PlanTemplate",
    "ProjectionResult",
    "ReportSnapshot",
    "TenantScope",
    "build_monthly_series",
    "classify_entry",
    "compute_balance_summary",
    "compute_projection",
    "payable_occurrences",
    "resolve_period",
    "top_categories",
]

"""Domain services package."""

from .balances import compute_balance_summary, sum_amounts
from .categories import (
    build_category_index,
    label_or_placeholder,
    resolve_category_label,
    top_categories,
)
from .installments import (
    classify_entry,
    is_leaf_eligible,
    payable_occurrences,
)
from .periods import (
    describe_selector,
    parse_date,
    parse_preset,
    resolve_period,
)
from .projections import compute_projection, project_horizon, project_ledger
from .reports import build_report_snapshot, recent_entries
from .time_series import (
    build_monthly_series,
    month_range,
    trailing_months_window,
)

__all__ = [
    "compute_balance_summary",
    "sum_amounts",
    "build_category_index",
    "label_or_placeholder",
    "resolve_category_label",
    "top_categories",
    "classify_entry",
    "is_leaf_eligible",
    "payable_occurrences",
    "describe_selector",
    "parse_date",
    "parse_preset",
    "resolve_period",
    "compute_projection",
    "project_horizon",
    "project_ledger",
    "build_report_snapshot",
    "recent_entries",
    "build_monthly_series",
    "month_range",
    "trailing_months_window",
]

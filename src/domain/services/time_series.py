"""Monthly time series for the cash-flow chart."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.cashflow import MonthlyBucket
from src.domain.models.ledger import PayableOccurrence
from src.domain.models.period import MonthKey, PeriodWindow
from src.utils.decimal_utils import coerce_decimal


def trailing_months_window(
    trailing_months: int,
    reference_month: MonthKey,
) -> PeriodWindow:
    """Return the date window covered by the trailing month buckets."""
    first_month = month_range(trailing_months, reference_month)[0]
    return PeriodWindow(
        start=first_month.first_day,
        end=reference_month.last_day,
    )


def month_range(
    trailing_months: int,
    reference_month: MonthKey,
) -> list[MonthKey]:
    """Return consecutive months ending at reference_month, oldest first."""
    if trailing_months < 1:
        raise ValueError(
            f"trailing_months must be at least 1, got {trailing_months}"
        )
    return [
        reference_month.shift(-offset)
        for offset in range(trailing_months - 1, -1, -1)
    ]


def build_monthly_series(
    inflows: Iterable[PayableOccurrence],
    outflows: Iterable[PayableOccurrence],
    trailing_months: int,
    reference_month: MonthKey,
) -> list[MonthlyBucket]:
    """Bucket entries into calendar-month totals.

    Every month of the trailing range is emitted, including empty ones.
    Entries outside the range are ignored.

    Args:
        inflows: Payable inflow entries.
        outflows: Payable outflow entries.
        trailing_months: Number of buckets to emit.
        reference_month: Last (most recent) bucket.

    Returns:
        list[MonthlyBucket]: Buckets ordered oldest first.
    """
    months = month_range(trailing_months, reference_month)
    inflow_totals = {month: Decimal("0") for month in months}
    outflow_totals = {month: Decimal("0") for month in months}

    for totals, entries in (
        (inflow_totals, inflows),
        (outflow_totals, outflows),
    ):
        for entry in entries:
            month = MonthKey.of(entry.due_date)
            if month in totals:
                totals[month] += coerce_decimal(entry.amount)

    return [
        MonthlyBucket(
            month=month,
            inflows=inflow_totals[month],
            outflows=outflow_totals[month],
        )
        for month in months
    ]


__all__ = [
    "trailing_months_window",
    "month_range",
    "build_monthly_series",
]

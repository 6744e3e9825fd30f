"""Domain services for running balances."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.cashflow import BalanceSummary
from src.domain.models.ledger import PayableOccurrence
from src.domain.models.period import PeriodWindow
from src.utils.decimal_utils import coerce_decimal


def sum_amounts(entries: Iterable[PayableOccurrence]) -> Decimal:
    """Return the exact decimal sum of entry amounts."""
    return sum(
        (coerce_decimal(entry.amount) for entry in entries),
        Decimal("0"),
    )


def compute_balance_summary(
    inflows: Iterable[PayableOccurrence],
    outflows: Iterable[PayableOccurrence],
    window: PeriodWindow,
) -> BalanceSummary:
    """Compute opening, period and closing balances for a window.

    Entries due before ``window.start`` feed the opening balance, entries due
    inside the window feed the period totals, later entries are ignored.

    Args:
        inflows: Payable inflow entries.
        outflows: Payable outflow entries.
        window: Inclusive balance window.

    Returns:
        BalanceSummary: Balances satisfying opening + net == closing.
    """
    history_in, period_in = _split_by_window(inflows, window)
    history_out, period_out = _split_by_window(outflows, window)

    opening_balance = sum_amounts(history_in) - sum_amounts(history_out)
    period_inflows = sum_amounts(period_in)
    period_outflows = sum_amounts(period_out)
    period_net = period_inflows - period_outflows
    closing_balance = opening_balance + period_net
    assert closing_balance - opening_balance == period_net

    return BalanceSummary(
        opening_balance=opening_balance,
        period_inflows=period_inflows,
        period_outflows=period_outflows,
        period_net=period_net,
        closing_balance=closing_balance,
        period_inflow_count=len(period_in),
        period_outflow_count=len(period_out),
    )


def _split_by_window(
    entries: Iterable[PayableOccurrence],
    window: PeriodWindow,
) -> tuple[list[PayableOccurrence], list[PayableOccurrence]]:
    history: list[PayableOccurrence] = []
    inside: list[PayableOccurrence] = []
    for entry in entries:
        if entry.due_date < window.start:
            history.append(entry)
        elif entry.due_date <= window.end:
            inside.append(entry)
    return history, inside


__all__ = ["sum_amounts", "compute_balance_summary"]

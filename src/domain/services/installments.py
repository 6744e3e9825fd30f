"""Installment-chain classification for ledger entries.

A recurring or parceled charge is stored as a template record flagged as an
installment plan, plus one child record per installment pointing back at the
template. Only leaf-level occurrences are ever summed.
"""

from collections.abc import Iterable

from src.domain.models.ledger import (
    LedgerEntry,
    LedgerEntryRecord,
    PayableOccurrence,
    PlanTemplate,
)


def is_leaf_eligible(
    installment_parent_id: str | None,
    is_installment_plan: bool,
) -> bool:
    """Return True when a stored row is a payable occurrence."""
    return installment_parent_id is not None or not is_installment_plan


def classify_entry(record: LedgerEntryRecord) -> LedgerEntry:
    """Turn a stored row into a PlanTemplate or a PayableOccurrence.

    Args:
        record: Raw ledger row.

    Returns:
        LedgerEntry: PlanTemplate for parentless plan rows, otherwise a
        PayableOccurrence.
    """
    if not is_leaf_eligible(
        record.installment_parent_id,
        record.is_installment_plan,
    ):
        return PlanTemplate(
            id=record.id,
            kind=record.kind,
            tenant_id=record.tenant_id,
            amount=record.amount,
            due_date=record.due_date,
            category_id=record.category_id,
            description=record.description,
        )
    return PayableOccurrence(
        id=record.id,
        kind=record.kind,
        tenant_id=record.tenant_id,
        amount=record.amount,
        due_date=record.due_date,
        category_id=record.category_id,
        description=record.description,
        installment_parent_id=record.installment_parent_id,
    )


def payable_occurrences(
    entries: Iterable[LedgerEntry],
) -> list[PayableOccurrence]:
    """Keep only the entries that take part in ledger arithmetic."""
    return [entry for entry in entries if isinstance(entry, PayableOccurrence)]


__all__ = ["is_leaf_eligible", "classify_entry", "payable_occurrences"]

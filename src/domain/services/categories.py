"""Outflow breakdown by category label."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    TOP_CATEGORY_LIMIT,
    UNCATEGORIZED_LABEL,
    UNKNOWN_CATEGORY_LABEL,
)
from src.domain.errors import UnknownCategory
from src.domain.models.cashflow import CategoryTotal
from src.domain.models.ledger import CategoryLabel, PayableOccurrence
from src.utils.decimal_utils import coerce_decimal


def build_category_index(
    categories: Iterable[CategoryLabel],
) -> dict[str, str]:
    """Map category ids to display labels."""
    return {category.id: category.label for category in categories}


def resolve_category_label(
    category_id: str | None,
    category_labels: Mapping[str, str],
) -> str:
    """Return the display label for a category id.

    Args:
        category_id: Category reference of an entry, None if uncategorized.
        category_labels: Mapping of category ids to labels.

    Returns:
        str: The label, or the uncategorized sentinel.

    Raises:
        UnknownCategory: When the id has no matching label.
    """
    if not category_id:
        return UNCATEGORIZED_LABEL
    try:
        return category_labels[category_id]
    except KeyError as exc:
        raise UnknownCategory(category_id) from exc


def label_or_placeholder(
    category_id: str | None,
    category_labels: Mapping[str, str],
    logger: Logger | None = None,
) -> str:
    """Resolve a label, falling back to the unknown-category placeholder."""
    try:
        return resolve_category_label(category_id, category_labels)
    except UnknownCategory as exc:
        if logger is not None:
            logger.warning(
                f"Unknown category id {exc.category_id}; "
                f"using '{UNKNOWN_CATEGORY_LABEL}'"
            )
        return UNKNOWN_CATEGORY_LABEL


def top_categories(
    outflow_entries: Iterable[PayableOccurrence],
    category_labels: Mapping[str, str] | Iterable[CategoryLabel],
    limit: int = TOP_CATEGORY_LIMIT,
    logger: Logger | None = None,
) -> list[CategoryTotal]:
    """Rank outflow totals per category label.

    Args:
        outflow_entries: Payable outflow entries to group.
        category_labels: Id to label mapping, or CategoryLabel records.
        limit: Maximum number of categories to return.
        logger: Optional logger for unknown-category warnings.

    Returns:
        list[CategoryTotal]: Totals by descending amount, ties broken by
        ascending label, truncated to ``limit``.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    labels = (
        category_labels
        if isinstance(category_labels, Mapping)
        else build_category_index(category_labels)
    )
    totals: dict[str, Decimal] = {}
    for entry in outflow_entries:
        label = label_or_placeholder(entry.category_id, labels, logger)
        totals[label] = totals.get(label, Decimal("0")) + coerce_decimal(
            entry.amount
        )

    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        CategoryTotal(category=label, total=total)
        for label, total in ranked[:limit]
    ]


__all__ = [
    "build_category_index",
    "resolve_category_label",
    "label_or_placeholder",
    "top_categories",
]

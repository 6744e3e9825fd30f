"""In-memory ledger repository and its JSON export loader."""

from decimal import Decimal
import json
from pathlib import Path
from typing import Iterable

from src.application.ports.ledger_repository import (
    EntryFilter,
    LedgerRepositoryPort,
)
from src.domain.errors import StoreUnavailable
from src.domain.models import (
    CategoryLabel,
    LedgerEntry,
    LedgerEntryRecord,
    LedgerKind,
    TenantScope,
)
from src.domain.services import classify_entry, parse_date
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

_LEDGER_KEYS = {
    LedgerKind.INFLOW: "inflows",
    LedgerKind.OUTFLOW: "outflows",
}


class InMemoryLedgerRepository(LedgerRepositoryPort):
    """Repository serving ledger records held in memory.

    Categories are shared by every tenant.
    """

    def __init__(
        self,
        records: Iterable[LedgerEntryRecord],
        categories: Iterable[CategoryLabel] = (),
    ) -> None:
        self._records = list(records)
        self._categories = list(categories)

    def fetch_entries(
        self,
        kind: LedgerKind,
        tenant_scope: TenantScope,
        entry_filter: EntryFilter,
    ) -> list[LedgerEntry]:
        matches = [
            record
            for record in self._records
            if record.kind == kind
            and tenant_scope.includes(record.tenant_id)
            and entry_filter.matches(record.due_date)
        ]
        matches.sort(key=lambda record: (record.due_date, record.id))
        return [classify_entry(record) for record in matches]

    def fetch_categories(
        self,
        tenant_scope: TenantScope,
    ) -> list[CategoryLabel]:
        return sorted(self._categories, key=lambda category: category.id)


class JsonLedgerRepository(LedgerRepositoryPort):
    """Repository backed by a JSON export of both ledgers.

    The file is read on the first query and kept in memory afterwards.
    Expected layout::

        {
          "inflows": [{"id": "...", "tenant_id": "...", "amount": "10.00",
                       "due_date": "2024-01-15", ...}],
          "outflows": [...],
          "categories": [{"id": "...", "label": "..."}]
        }
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._delegate: InMemoryLedgerRepository | None = None

    def fetch_entries(
        self,
        kind: LedgerKind,
        tenant_scope: TenantScope,
        entry_filter: EntryFilter,
    ) -> list[LedgerEntry]:
        return self._load().fetch_entries(kind, tenant_scope, entry_filter)

    def fetch_categories(
        self,
        tenant_scope: TenantScope,
    ) -> list[CategoryLabel]:
        return self._load().fetch_categories(tenant_scope)

    def _load(self) -> InMemoryLedgerRepository:
        if self._delegate is None:
            records, categories = load_ledger_export(self._path)
            self._logger.info(
                f"Loaded {len(records)} ledger entries and "
                f"{len(categories)} categories from {self._path}"
            )
            self._delegate = InMemoryLedgerRepository(records, categories)
        return self._delegate


def load_ledger_export(
    path: Path | str,
) -> tuple[list[LedgerEntryRecord], list[CategoryLabel]]:
    """Read ledger records and categories from a JSON export.

    Args:
        path: Path to the JSON export.

    Returns:
        tuple: Ledger records of both kinds and the category labels.

    Raises:
        StoreUnavailable: When the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            payload = json.load(handle, parse_float=Decimal)
        records = [
            _record_from_dict(kind, item)
            for kind, key in _LEDGER_KEYS.items()
            for item in payload.get(key, [])
        ]
        categories = [
            CategoryLabel(id=str(item["id"]), label=str(item["label"]))
            for item in payload.get("categories", [])
        ]
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
        raise StoreUnavailable(
            f"Unable to load ledger export {path}: {exc}"
        ) from exc
    return records, categories


def _record_from_dict(kind: LedgerKind, item: dict) -> LedgerEntryRecord:
    parent_id = item.get("installment_parent_id")
    category_id = item.get("category_id")
    return LedgerEntryRecord(
        id=str(item["id"]),
        kind=kind,
        tenant_id=str(item["tenant_id"]),
        amount=coerce_decimal(item["amount"]),
        due_date=parse_date(item["due_date"], "due_date"),
        category_id=str(category_id) if category_id is not None else None,
        description=item.get("description") or "",
        installment_parent_id=(
            str(parent_id) if parent_id is not None else None
        ),
        is_installment_plan=_parse_flag(
            item.get("is_installment_plan", False),
            "is_installment_plan",
        ),
    )


_FLAG_STRINGS = {"true": True, "false": False}


def _parse_flag(value, field_name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _FLAG_STRINGS:
        return _FLAG_STRINGS[value.strip().lower()]
    raise ValueError(f"Invalid {field_name} flag: {value!r}")


__all__ = [
    "InMemoryLedgerRepository",
    "JsonLedgerRepository",
    "load_ledger_export",
]

"""SQLAlchemy repository reading the inflow and outflow ledgers."""

from datetime import date, datetime

from sqlalchemy import Date, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
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
from src.domain.services import classify_entry
from src.utils.decimal_utils import coerce_decimal

LEDGER_TABLES = {
    LedgerKind.INFLOW: "inflow_entries",
    LedgerKind.OUTFLOW: "outflow_entries",
}
CATEGORIES_TABLE = "categories"


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository that queries ledger tables with plain SQL.

    Installment plan templates are filtered out in the query itself; the
    remaining rows are still classified so callers receive typed entries.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_entries(
        self,
        kind: LedgerKind,
        tenant_scope: TenantScope,
        entry_filter: EntryFilter,
    ) -> list[LedgerEntry]:
        """Return leaf-eligible entries of one ledger.

        Args:
            kind: Ledger to read.
            tenant_scope: Tenant filter; the wildcard reads every tenant.
            entry_filter: Due-date bounds applied in SQL.

        Returns:
            list[LedgerEntry]: Entries ordered by due date then id.

        Raises:
            StoreUnavailable: When the database query fails.
        """
        table = LEDGER_TABLES[kind]
        query, params = self._build_entries_query(
            table, tenant_scope, entry_filter
        )
        rows = self._execute(query, params, table)
        return [
            classify_entry(self._row_to_record(kind, row)) for row in rows
        ]

    def fetch_categories(
        self,
        tenant_scope: TenantScope,
    ) -> list[CategoryLabel]:
        """Return category labels shared globally or owned by the tenant.

        Args:
            tenant_scope: Tenant filter for tenant-owned categories.

        Returns:
            list[CategoryLabel]: Labels ordered by id.
        """
        sql = f"SELECT id, label FROM {CATEGORIES_TABLE} WHERE 1=1"
        params: dict[str, object] = {}
        if not tenant_scope.is_all:
            sql += " AND (tenant_id IS NULL OR tenant_id = :tenant_id)"
            params["tenant_id"] = tenant_scope.tenant_id
        sql += " ORDER BY id"
        rows = self._execute(text(sql), params, CATEGORIES_TABLE)
        return [
            CategoryLabel(id=str(row.id), label=row.label) for row in rows
        ]

    @staticmethod
    def _build_entries_query(
        table: str,
        tenant_scope: TenantScope,
        entry_filter: EntryFilter,
    ):
        """Build the ledger query and its bound parameters.

        Args:
            table: Ledger table name.
            tenant_scope: Tenant filter.
            entry_filter: Due-date bounds.

        Returns:
            tuple: SQLAlchemy text clause and parameter dict.
        """
        sql = f"""
            SELECT id,
                   tenant_id,
                   amount,
                   due_date,
                   category_id,
                   description,
                   installment_parent_id,
                   is_installment_plan
            FROM {table}
            WHERE (
                installment_parent_id IS NOT NULL
                OR COALESCE(is_installment_plan, FALSE) = FALSE
            )
            """
        params: dict[str, object] = {}
        date_params: dict[str, date] = {}
        if not tenant_scope.is_all:
            sql += " AND tenant_id = :tenant_id"
            params["tenant_id"] = tenant_scope.tenant_id
        if entry_filter.due_before is not None:
            sql += " AND due_date < :due_before"
            date_params["due_before"] = entry_filter.due_before
        if entry_filter.due_after is not None:
            sql += " AND due_date > :due_after"
            date_params["due_after"] = entry_filter.due_after
        if entry_filter.due_between is not None:
            sql += " AND due_date >= :window_start"
            sql += " AND due_date <= :window_end"
            date_params["window_start"] = entry_filter.due_between.start
            date_params["window_end"] = entry_filter.due_between.end
        sql += " ORDER BY due_date, id"
        query = text(sql).bindparams(
            *(bindparam(name, type_=Date) for name in date_params)
        )
        return query, {**params, **date_params}

    def _execute(self, query, params: dict, source: str) -> list:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise StoreUnavailable(
                f"Query against {source} failed: {exc}"
            ) from exc

    @staticmethod
    def _row_to_record(kind: LedgerKind, row) -> LedgerEntryRecord:
        """Map a result row to a raw ledger record."""
        parent_id = row.installment_parent_id
        category_id = row.category_id
        return LedgerEntryRecord(
            id=str(row.id),
            kind=kind,
            tenant_id=str(row.tenant_id),
            amount=coerce_decimal(row.amount),
            due_date=_coerce_date(row.due_date),
            category_id=str(category_id) if category_id is not None else None,
            description=row.description or "",
            installment_parent_id=(
                str(parent_id) if parent_id is not None else None
            ),
            is_installment_plan=bool(row.is_installment_plan),
        )


def _coerce_date(value) -> date:
    """Normalize driver date values (date, datetime or ISO text)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["SqlAlchemyLedgerRepository", "LEDGER_TABLES", "CATEGORIES_TABLE"]

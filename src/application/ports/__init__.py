"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import EntryFilter, LedgerRepositoryPort
from .report_recorder import ReportRecorderPort

__all__ = [
    "DatabaseEnginePort",
    "EntryFilter",
    "LedgerRepositoryPort",
    "ReportRecorderPort",
]

"""Port for persisting report snapshots."""

from typing import Protocol

from src.domain.models import ReportSnapshot


class ReportRecorderPort(Protocol):
    """Port persisting aggregation snapshots for history and audit.

    The recorder stamps the snapshot with its own timestamp.
    """

    def record(self, snapshot: ReportSnapshot, recorded_by: str) -> None:
        """Persist the snapshot verbatim along with the caller identity."""


__all__ = ["ReportRecorderPort"]

"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.domain.constants import DEFAULT_TRAILING_MONTHS, TOP_CATEGORY_LIMIT
from src.domain.models import TenantScope
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the ledger backend and the dashboard defaults.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        json_file: Optional path to the JSON ledger export.
        tenant: Raw tenant scope value (tenant id, or all).
        trailing_months: Number of months in the monthly series.
        top_categories: Number of outflow categories to rank.
    """

    backend: str = "sqlalchemy"
    json_file: Optional[Path] = None
    tenant: Optional[str] = None
    trailing_months: int = DEFAULT_TRAILING_MONTHS
    top_categories: int = TOP_CATEGORY_LIMIT

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        backend = os.getenv("LEDGER_BACKEND", "sqlalchemy").strip().lower()
        raw_json = os.getenv("LEDGER_JSON_FILE")
        logger = get_app_logger()
        if raw_json:
            json_file = cls._normalize_path(raw_json, logger=logger)
        else:
            json_file = cls._default_json_file(logger=logger)
        tenant = (os.getenv("DASHBOARD_TENANT") or "").strip() or None
        return cls(
            backend=backend,
            json_file=json_file,
            tenant=tenant,
            trailing_months=cls._positive_int(
                "DASHBOARD_TRAILING_MONTHS", DEFAULT_TRAILING_MONTHS, logger
            ),
            top_categories=cls._positive_int(
                "DASHBOARD_TOP_CATEGORIES", TOP_CATEGORY_LIMIT, logger
            ),
        )

    def tenant_scope(self) -> TenantScope:
        """Return the configured tenant scope.

        Raises:
            RuntimeError: When DASHBOARD_TENANT is not set.
        """
        if not self.tenant:
            raise RuntimeError(
                "Missing environment variable: DASHBOARD_TENANT"
            )
        return TenantScope.parse(self.tenant)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the JSON export path or file URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Normalized filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger export does not exist at {path}")
        return path

    @staticmethod
    def _default_json_file(logger) -> Path | None:
        """Return a default JSON export path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set LEDGER_JSON_FILE to choose one."
            )
        return None

    @staticmethod
    def _positive_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid {name} '{raw}'. Using {default}.")
            return default
        if value < 1:
            logger.warning(f"{name} must be positive. Using {default}.")
            return default
        return value


__all__ = ["DashboardSettings"]

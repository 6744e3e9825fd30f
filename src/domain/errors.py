"""Domain error taxonomy for ledger aggregation."""


class CashflowError(Exception):
    """Base class for errors raised by the aggregation engine."""


class InvalidPeriod(CashflowError, ValueError):
    """Raised when a period selector cannot produce a valid window."""


class StoreUnavailable(CashflowError):
    """Raised when the ledger store fails to answer a query."""


class UnknownCategory(CashflowError, KeyError):
    """Raised when a category id has no matching label."""

    def __init__(self, category_id: str) -> None:
        super().__init__(category_id)
        self.category_id = category_id


__all__ = [
    "CashflowError",
    "InvalidPeriod",
    "StoreUnavailable",
    "UnknownCategory",
]

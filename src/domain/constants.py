"""Domain constants for cash-flow analytics."""

DEFAULT_TRAILING_MONTHS = 6

TOP_CATEGORY_LIMIT = 8

RECENT_ENTRIES_LIMIT = 10
RECENT_ENTRIES_PER_LEDGER = 5

PROJECTION_HORIZONS = (30, 60, 90, None)

UNCATEGORIZED_LABEL = "Uncategorized"
UNKNOWN_CATEGORY_LABEL = "Unknown category"

ALL_TENANTS_TOKENS = ("all", "*")


__all__ = [
    "DEFAULT_TRAILING_MONTHS",
    "TOP_CATEGORY_LIMIT",
    "RECENT_ENTRIES_LIMIT",
    "RECENT_ENTRIES_PER_LEDGER",
    "PROJECTION_HORIZONS",
    "UNCATEGORIZED_LABEL",
    "UNKNOWN_CATEGORY_LABEL",
    "ALL_TENANTS_TOKENS",
]

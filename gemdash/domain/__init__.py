"""Domain package for business rules and core models."""

from .constants import CANONICAL_CURRENCY, OVERDUE_BALANCE_THRESHOLD
from .models import (
    ClearingStatus,
    DashboardResult,
    InventoryStatus,
    LedgerKind,
)
from .services import to_canonical

__all__ = [
    "CANONICAL_CURRENCY",
    "OVERDUE_BALANCE_THRESHOLD",
    "ClearingStatus",
    "DashboardResult",
    "InventoryStatus",
    "LedgerKind",
    "to_canonical",
]

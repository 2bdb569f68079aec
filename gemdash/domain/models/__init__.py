"""Domain models package."""

from .finance import (
    ClearingStatus,
    CurrencyAmounts,
    CurrencyShare,
    CustomerSummary,
    DashboardResult,
    InventoryProfit,
    ModuleExpenseTotal,
    OutstandingReport,
    PaymentSourceSummary,
    TitleBreakdown,
    VarietyStat,
)
from .records import (
    EXPENSE_KINDS,
    CapitalRecord,
    ExpenseRecord,
    InventoryItem,
    InventoryStatus,
    LedgerKind,
    LedgerRecord,
    PurchaseRecord,
)

__all__ = [
    "ClearingStatus",
    "CurrencyAmounts",
    "CurrencyShare",
    "CustomerSummary",
    "DashboardResult",
    "InventoryProfit",
    "ModuleExpenseTotal",
    "OutstandingReport",
    "PaymentSourceSummary",
    "TitleBreakdown",
    "VarietyStat",
    "EXPENSE_KINDS",
    "CapitalRecord",
    "ExpenseRecord",
    "InventoryItem",
    "InventoryStatus",
    "LedgerKind",
    "LedgerRecord",
    "PurchaseRecord",
]

"""Typed views over the raw records stored per ledger tab."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class LedgerKind(Enum):
    """Record kinds and the storage key prefixes they were saved under.

    Prefixes are ordered: the first one holding a readable list wins. Later
    entries are legacy names kept for stores written by older releases.
    """

    UNIFIED_EXPENSE = ("unified_expense", "expense", "unified_expenses")
    CUT_POLISH = ("cut_polish_expenses",)
    TICKETS_VISA = ("tickets_visa", "ticket_visa", "tickets")
    HOTEL_ACCOMMODATION = (
        "hotel_accommodation",
        "hotel",
        "accommodation",
    )
    EXPORT_CHARGES = ("unified_export", "export", "unified_export_records")
    PAYMENT_LEDGER = ("unified_payment_ledger", "payment_ledger", "payment")
    PURCHASING = ("unified_purchasing", "purchasing", "purchase")
    CAPITAL = ("unified_capital", "capital", "unified_capital_management")
    STATEMENT = ("unified_statement", "statement")
    INVENTORY = ("inventory", "stones")

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self.value


EXPENSE_KINDS = (
    LedgerKind.UNIFIED_EXPENSE,
    LedgerKind.CUT_POLISH,
    LedgerKind.TICKETS_VISA,
    LedgerKind.HOTEL_ACCOMMODATION,
    LedgerKind.EXPORT_CHARGES,
)


class InventoryStatus(Enum):
    """Closed set of stone statuses after normalization."""

    IN_STOCK = "In Stock"
    SOLD = "Sold"
    EXPORT = "Export"
    MEMO = "Memo/Other"


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense-like charge (general, cut & polish, ticket, hotel, export)."""

    kind: LedgerKind
    amount: Decimal
    converted_amount: Decimal | None = None
    currency: str = "LKR"
    exchange_rate: Decimal | None = None
    date: str = ""
    category: str = ""
    description: str = ""
    route: str = ""
    location: str = ""
    authority: str = ""


@dataclass(frozen=True)
class LedgerRecord:
    """Receivable or payment ledger line."""

    invoice_amount: Decimal
    paid_amount: Decimal
    outstanding_amount: Decimal | None = None
    currency: str = "LKR"
    exchange_rate: Decimal | None = None
    date: str = ""
    payment_date: str = ""
    due_date: str = ""
    title: str = ""
    customer_name: str = ""
    status: str = ""
    source_tab: str = ""

    @property
    def outstanding(self) -> Decimal:
        """Stored outstanding amount, else invoice minus paid."""
        if self.outstanding_amount is not None:
            return self.outstanding_amount
        return self.invoice_amount - self.paid_amount


@dataclass(frozen=True)
class InventoryItem:
    """Stone held in an inventory tab."""

    code: str
    variety: str
    cost: Decimal
    final_price: Decimal
    status: InventoryStatus
    price_rmb: Decimal = Decimal("0")
    weight: Decimal = Decimal("0")
    source_tab: str = ""


@dataclass(frozen=True)
class PurchaseRecord:
    """Stone purchase owed to a supplier."""

    supplier: str
    amount: Decimal
    paid_amount: Decimal
    currency: str = "LKR"
    exchange_rate: Decimal | None = None
    status: str = ""


@dataclass(frozen=True)
class CapitalRecord:
    """Capital movement or partner share payment."""

    amount: Decimal
    converted_amount: Decimal | None = None
    name: str = ""


__all__ = [
    "LedgerKind",
    "EXPENSE_KINDS",
    "InventoryStatus",
    "ExpenseRecord",
    "LedgerRecord",
    "InventoryItem",
    "PurchaseRecord",
    "CapitalRecord",
]

"""Parsers turning raw stored dictionaries into typed records."""

from gemdash.domain.models.records import (
    CapitalRecord,
    ExpenseRecord,
    InventoryItem,
    LedgerKind,
    LedgerRecord,
    PurchaseRecord,
)
from gemdash.domain.services.normalization import (
    normalize_currency,
    normalize_status,
    normalize_text,
    normalize_title,
)
from gemdash.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


def _first_present(raw: dict, *names: str):
    """Return the first non-empty value among several field names."""
    for name in names:
        value = raw.get(name)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _positive_rate(raw: dict):
    rate = coerce_optional_decimal(raw.get("exchangeRate"))
    if rate is None or rate <= 0:
        return None
    return rate


def parse_expense(raw: dict, kind: LedgerKind) -> ExpenseRecord:
    """Build an ExpenseRecord from a stored expense-like entry."""
    return ExpenseRecord(
        kind=kind,
        amount=coerce_decimal(raw.get("amount")),
        converted_amount=coerce_optional_decimal(raw.get("convertedAmount")),
        currency=normalize_currency(raw.get("currency")),
        exchange_rate=_positive_rate(raw),
        date=normalize_text(raw.get("date")),
        category=normalize_text(raw.get("category"), "Other"),
        description=normalize_text(
            _first_present(raw, "description", "vendorName", "name")
        ),
        route=normalize_text(raw.get("route"), "Other"),
        location=normalize_text(raw.get("location"), "Other"),
        authority=normalize_text(
            _first_present(raw, "authority", "name"),
            "Other",
        ),
    )


def parse_ledger(raw: dict, source_tab: str = "") -> LedgerRecord:
    """Build a LedgerRecord from a stored payment or customer ledger line.

    The invoice falls back to ``finalAmount`` when ``invoiceAmount`` is
    missing. ``outstandingAmount`` stays None when absent so callers can
    derive it from invoice and paid amounts.
    """
    return LedgerRecord(
        invoice_amount=coerce_decimal(
            _first_present(raw, "invoiceAmount", "finalAmount")
        ),
        paid_amount=coerce_decimal(raw.get("paidAmount")),
        outstanding_amount=coerce_optional_decimal(
            raw.get("outstandingAmount")
        ),
        currency=normalize_currency(raw.get("currency")),
        exchange_rate=_positive_rate(raw),
        date=normalize_text(raw.get("date")),
        payment_date=normalize_text(raw.get("paymentDate")),
        due_date=normalize_text(raw.get("dueDate")),
        title=normalize_title(raw.get("title")),
        customer_name=normalize_text(raw.get("customerName"), "Unknown"),
        status=normalize_text(raw.get("status")),
        source_tab=source_tab,
    )


def parse_inventory(raw: dict, source_tab: str = "") -> InventoryItem:
    """Build an InventoryItem, accepting app and spreadsheet column names."""
    return InventoryItem(
        code=normalize_text(_first_present(raw, "codeNo", "Code No.", "code")),
        variety=normalize_text(
            _first_present(raw, "variety", "Variety"),
            "Other",
        ),
        cost=coerce_decimal(_first_present(raw, "slCost", "cost", "SL Cost")),
        final_price=coerce_decimal(
            _first_present(raw, "finalPrice", "amountLKR", "sellingPrice")
        ),
        status=normalize_status(_first_present(raw, "status", "Status")),
        price_rmb=coerce_decimal(raw.get("priceRMB")),
        weight=coerce_decimal(
            _first_present(raw, "weight", "C & P Weight")
        ),
        source_tab=source_tab,
    )


def parse_purchase(raw: dict) -> PurchaseRecord:
    """Build a PurchaseRecord from a stored purchasing entry."""
    return PurchaseRecord(
        supplier=normalize_text(
            _first_present(raw, "supplier", "supplierName", "name"),
            "Unknown",
        ),
        amount=coerce_decimal(
            _first_present(raw, "amount", "totalAmount", "cost")
        ),
        paid_amount=coerce_decimal(raw.get("paidAmount")),
        currency=normalize_currency(raw.get("currency")),
        exchange_rate=_positive_rate(raw),
        status=normalize_text(raw.get("status")),
    )


def parse_capital(raw: dict) -> CapitalRecord:
    """Build a CapitalRecord from a stored capital entry."""
    return CapitalRecord(
        amount=coerce_decimal(raw.get("amount")),
        converted_amount=coerce_optional_decimal(raw.get("convertedAmount")),
        name=normalize_text(_first_present(raw, "name", "description")),
    )


__all__ = [
    "parse_expense",
    "parse_ledger",
    "parse_inventory",
    "parse_purchase",
    "parse_capital",
]

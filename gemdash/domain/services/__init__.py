"""Domain services package."""

from .expenses import expense_amount, group_expenses, sum_expenses
from .fx import PURCHASE_RATES, RECEIVABLES_RATES, resolve_rate, to_canonical
from .inventory import compute_inventory_profit
from .normalization import (
    normalize_currency,
    normalize_status,
    normalize_tab_id,
    normalize_tab_name,
    normalize_title,
)
from .outstanding import (
    build_currency_breakdown,
    classify_balance,
    reconcile_titles,
    summarize_customer,
    summarize_ledger_totals,
    summarize_payment_source,
)
from .payables import summarize_purchases
from .validation import validate_ledger_record

__all__ = [
    "expense_amount",
    "group_expenses",
    "sum_expenses",
    "PURCHASE_RATES",
    "RECEIVABLES_RATES",
    "resolve_rate",
    "to_canonical",
    "compute_inventory_profit",
    "normalize_currency",
    "normalize_status",
    "normalize_tab_id",
    "normalize_tab_name",
    "normalize_title",
    "build_currency_breakdown",
    "classify_balance",
    "reconcile_titles",
    "summarize_customer",
    "summarize_ledger_totals",
    "summarize_payment_source",
    "summarize_purchases",
    "validate_ledger_record",
]

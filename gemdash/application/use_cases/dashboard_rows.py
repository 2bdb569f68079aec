"""Shape domain aggregates into dashboard breakdown rows.

Rows are plain dicts keyed the way the dashboard charts and tables read
them. Amounts stay Decimal; serialization happens at the adapter edge.
"""

from collections.abc import Iterable
from decimal import Decimal

from gemdash.domain.constants import STATUS_COLORS
from gemdash.domain.models.finance import (
    CurrencyShare,
    CustomerSummary,
    InventoryProfit,
    PaymentSourceSummary,
    TitleBreakdown,
)
from gemdash.domain.models.records import (
    ExpenseRecord,
    InventoryItem,
    LedgerRecord,
)
from gemdash.domain.services.expenses import expense_amount
from gemdash.domain.services.normalization import normalize_tab_id


def customer_row(customer: CustomerSummary) -> dict:
    return {
        "id": f"cust-{normalize_tab_id(customer.name).lower()}",
        "name": customer.name,
        "slAmount": customer.invoice_total,
        "lkr": customer.lkr,
        "rmb": customer.rmb,
        "bath": customer.thb,
        "usd": customer.usd,
        "finalAmount": customer.invoice_total,
        "received": customer.paid_total,
        "balance": customer.balance,
        "status": customer.status.value,
    }


def payment_row(source: PaymentSourceSummary) -> dict:
    return {
        "source": source.source,
        "total": source.total,
        "count": source.count,
        "lastDate": source.last_date,
    }


def currency_row(share: CurrencyShare) -> dict:
    return {"name": share.name, "value": share.value, "color": share.color}


def transaction_row(record: LedgerRecord) -> dict:
    return {
        "sourceTab": record.source_tab,
        "customerName": record.customer_name,
        "date": record.date,
        "dueDate": record.due_date,
        "currency": record.currency,
        "invoiceAmount": record.invoice_amount,
        "paidAmount": record.paid_amount,
        "outstanding": record.outstanding,
    }


def title_row(title: TitleBreakdown) -> dict:
    """Shape a reconciled title with its per-currency sub-totals.

    Args:
        title: Title group built from the sales tabs.

    Returns:
        dict: Row with native amounts per currency and canonical totals.
    """
    lkr = title.amounts_for("LKR")
    usd = title.amounts_for("USD")
    thb = title.amounts_for("THB")
    rmb = title.amounts_for("RMB")
    return {
        "title": title.title,
        "slAmount": lkr.total,
        "slOutstanding": lkr.outstanding,
        "usd": usd.total,
        "usdOutstanding": usd.outstanding,
        "bath": thb.total,
        "bathOutstanding": thb.outstanding,
        "rmb": rmb.total,
        "rmbOutstanding": rmb.outstanding,
        "finalAmount": title.final_amount,
        "receivedPayments": title.received_payments,
        "outstanding": title.outstanding,
        "cleared": title.status.value,
        "transactionCount": title.transaction_count,
        "sourceTabs": list(title.source_tabs),
        "transactions": [transaction_row(r) for r in title.transactions],
    }


def item_row(item: InventoryItem) -> dict:
    return {
        "code": item.code,
        "variety": item.variety,
        "cost": item.cost,
        "weight": item.weight,
        "status": item.status.value,
        "sourceTab": item.source_tab,
    }


def inventory_rows(profit: InventoryProfit) -> dict[str, list[dict]]:
    """Return the variety, status and top-item breakdowns of an inventory."""
    return {
        "varieties": [
            {
                "name": stat.variety,
                "cost": stat.cost,
                "sales": stat.sales,
                "weight": stat.weight,
                "count": stat.count,
            }
            for stat in profit.varieties
        ],
        "statusDist": [
            {
                "name": status,
                "value": count,
                "color": STATUS_COLORS.get(status, "#6B7280"),
            }
            for status, count in profit.status_counts.items()
        ],
        "topItems": [item_row(item) for item in profit.top_items],
    }


def pair_rows(pairs: Iterable[tuple[str, Decimal]]) -> list[dict]:
    """Turn (label, value) pairs into chart rows, dropping zero values."""
    return [{"name": name, "value": value} for name, value in pairs if value]


def activity_row(record: ExpenseRecord) -> dict:
    return {
        "kind": record.kind.name,
        "date": record.date,
        "description": record.description or record.category,
        "amount": expense_amount(record),
    }


__all__ = [
    "customer_row",
    "payment_row",
    "currency_row",
    "transaction_row",
    "title_row",
    "item_row",
    "inventory_rows",
    "pair_rows",
    "activity_row",
]

"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from gemdash.domain.models.records import InventoryItem, LedgerRecord


class ClearingStatus(Enum):
    """Clearing state of a customer balance or a title."""

    CLEARED = "Cleared"
    PENDING = "Pending"
    OVERDUE = "Overdue"


@dataclass
class CurrencyAmounts:
    """Native-currency invoice total and outstanding pair."""

    total: Decimal = Decimal("0")
    outstanding: Decimal = Decimal("0")


@dataclass(frozen=True)
class PaymentSourceSummary:
    """Payments received through one payment-tracking tab."""

    source: str
    total: Decimal
    count: int
    last_date: str


@dataclass(frozen=True)
class CustomerSummary:
    """Balance of one customer ledger tab.

    Attributes:
        name: Customer tab identifier.
        invoice_total: Invoiced amount in canonical currency.
        paid_total: Paid amount in canonical currency.
        balance: Outstanding amount in canonical currency.
        lkr: Outstanding of canonical-currency records.
        usd: Outstanding of USD records, in USD.
        thb: Outstanding of THB records, in THB.
        rmb: Outstanding of RMB records, in RMB.
        status: Clearing status derived from the balance.
    """

    name: str
    invoice_total: Decimal
    paid_total: Decimal
    balance: Decimal
    lkr: Decimal
    usd: Decimal
    thb: Decimal
    rmb: Decimal
    status: ClearingStatus


@dataclass(frozen=True)
class CurrencyShare:
    """Share of the outstanding total held in one currency."""

    name: str
    value: Decimal
    color: str


@dataclass(frozen=True)
class TitleBreakdown:
    """Transactions sharing a title across several sales tabs."""

    title: str
    currencies: dict[str, CurrencyAmounts]
    final_amount: Decimal
    received_payments: Decimal
    outstanding: Decimal
    status: ClearingStatus
    transactions: list[LedgerRecord]
    source_tabs: list[str]

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    def amounts_for(self, currency: str) -> CurrencyAmounts:
        """Return the native amounts held in a currency bucket."""
        return self.currencies.get(currency, CurrencyAmounts())


@dataclass(frozen=True)
class ModuleExpenseTotal:
    """Total expenses of a module with per-kind and per-tab splits."""

    module_id: str
    total: Decimal
    by_kind: dict[str, Decimal] = field(default_factory=dict)
    by_tab: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class VarietyStat:
    """Inventory aggregate for one stone variety."""

    variety: str
    cost: Decimal
    sales: Decimal
    weight: Decimal
    count: int


@dataclass(frozen=True)
class InventoryProfit:
    """Profit proxy from inventory tabs.

    Cost covers every item while revenue covers sold items only; the profit
    is not a matched cost-of-goods-sold figure.
    """

    sales_revenue: Decimal
    inventory_cost: Decimal
    profit: Decimal
    sales_rmb: Decimal = Decimal("0")
    total_weight: Decimal = Decimal("0")
    item_count: int = 0
    varieties: list[VarietyStat] = field(default_factory=list)
    status_counts: dict[str, int] = field(default_factory=dict)
    top_items: list[InventoryItem] = field(default_factory=list)


@dataclass(frozen=True)
class OutstandingReport:
    """Receivables reconciliation across payment and customer tabs."""

    total_received: Decimal
    payment_sources: list[PaymentSourceSummary]
    customers: list[CustomerSummary]
    currency_breakdown: list[CurrencyShare]
    titles: list[TitleBreakdown]

    @property
    def total_outstanding(self) -> Decimal:
        return sum((c.balance for c in self.customers), Decimal("0"))

    @property
    def total_outstanding_usd(self) -> Decimal:
        return sum((c.usd for c in self.customers), Decimal("0"))

    @property
    def active_customer_count(self) -> int:
        return sum(1 for c in self.customers if c.balance > 0)

    @property
    def has_data(self) -> bool:
        return any(
            (
                self.payment_sources,
                self.customers,
                self.currency_breakdown,
                self.titles,
            )
        )


@dataclass(frozen=True)
class DashboardResult:
    """Metrics and named breakdown lists for one dashboard."""

    metrics: dict[str, Decimal | int | str | bool]
    breakdowns: dict[str, list[dict]] = field(default_factory=dict)


__all__ = [
    "ClearingStatus",
    "CurrencyAmounts",
    "PaymentSourceSummary",
    "CustomerSummary",
    "CurrencyShare",
    "TitleBreakdown",
    "ModuleExpenseTotal",
    "VarietyStat",
    "InventoryProfit",
    "OutstandingReport",
    "DashboardResult",
]

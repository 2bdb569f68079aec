"""Use case to assemble the metrics and breakdowns of one dashboard."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from gemdash.application.use_cases.dashboard_rows import (
    activity_row,
    currency_row,
    customer_row,
    inventory_rows,
    pair_rows,
    payment_row,
    title_row,
)
from gemdash.application.use_cases.get_inventory_profit import (
    GetInventoryProfitUseCase,
)
from gemdash.application.use_cases.get_module_expenses import (
    GetModuleExpensesUseCase,
)
from gemdash.application.use_cases.ledger_reader import LedgerReader
from gemdash.application.use_cases.reconcile_outstanding import (
    ReconcileOutstandingUseCase,
)
from gemdash.domain.constants import (
    BKK_MODULE_ID,
    BKK_TABS,
    KENYA_COMMISSION_RATE,
    PARTNER_SHARE_RATIO,
    RECENT_ACTIVITY_LIMIT,
    SPINEL_GALLERY_TABS,
    VISION_GEMS_TABS,
)
from gemdash.domain.dashboards import (
    find_dashboard_config,
    get_dashboard_config,
)
from gemdash.domain.models.finance import DashboardResult
from gemdash.domain.models.records import LedgerKind
from gemdash.domain.modules import INVENTORY_MODULE_TYPES, get_module
from gemdash.domain.policies import is_instock_tab, record_tabs
from gemdash.domain.services.expenses import group_expenses, sum_expenses
from gemdash.domain.services.outstanding import summarize_ledger_totals
from gemdash.domain.services.payables import summarize_purchases
from gemdash.infrastructure.logging.logger import get_app_logger

ZERO = Decimal("0")

_REGIONAL_KEYS = (
    "dada_dashboard",
    "vgtz_dashboard",
    "kenya_dashboard",
    "vgrz_dashboard",
    "madagascar_dashboard",
)


class AssembleDashboardUseCase:
    """Compose aggregators into the result a dashboard tab displays.

    Each recipe is keyed by the ``data_key`` of a dashboard configuration.
    Unknown keys fall back to a generic recipe driven by the module type.
    """

    def __init__(
        self,
        reader: LedgerReader,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            reader: Reader providing typed records from the store.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock used by the receivables reconciliation.
        """
        self._reader = reader
        self._logger = logger or get_app_logger()
        self._expenses = GetModuleExpensesUseCase(reader, logger=self._logger)
        self._inventory = GetInventoryProfitUseCase(
            reader, logger=self._logger
        )
        self._outstanding = ReconcileOutstandingUseCase(
            reader, logger=self._logger, today=today
        )
        self._recipes: dict[str, Callable[[str], DashboardResult]] = {
            "outstanding_dashboard": self._outstanding_dashboard,
            "vision_gems_dashboard": self._vision_gems_dashboard,
            "spinel_main_dashboard": self._spinel_dashboard,
            "spinel_dash": self._spinel_dashboard,
            "bkk_dashboard": self._bkk_dashboard,
            "all_expenses_dashboard": self._all_expenses_dashboard,
            "payable_dashboard": self._payable_dashboard,
        }
        for key in _REGIONAL_KEYS:
            self._recipes[key] = self._regional_dashboard

    def execute(
        self,
        config_id: str,
        module_id: str | None = None,
    ) -> DashboardResult:
        """Assemble a dashboard by recipe identifier.

        Args:
            config_id: Dashboard ``data_key``.
            module_id: Module to aggregate; defaults to the module that
                registers the dashboard.

        Returns:
            DashboardResult: Metrics and breakdowns, ``hasData`` always set.
        """
        if module_id is None:
            config = find_dashboard_config(config_id)
            module_id = config.module if config is not None else ""

        recipe = self._recipes.get(config_id)
        if recipe is None:
            self._logger.info(
                f"No recipe for {config_id}; using generic for {module_id}"
            )
            return self._generic_dashboard(module_id)

        result = recipe(module_id)
        self._logger.info(
            f"Dashboard assembled: config={config_id}, module={module_id}, "
            f"hasData={result.metrics['hasData']}"
        )
        return result

    def execute_for_tab(
        self,
        module_id: str,
        tab_name: str,
    ) -> DashboardResult:
        """Assemble the dashboard hosted on a module tab."""
        config = get_dashboard_config(module_id, tab_name)
        if config is None:
            self._logger.warning(
                f"No dashboard registered for {module_id}/{tab_name}"
            )
            return self._generic_dashboard(module_id)
        return self.execute(config.data_key, module_id)

    def _outstanding_dashboard(self, module_id: str) -> DashboardResult:
        report = self._outstanding.execute()
        metrics = {
            "totalOutstandingLKR": report.total_outstanding,
            "totalOutstandingUSD": report.total_outstanding_usd,
            "customerCount": report.active_customer_count,
            "totalReceived": report.total_received,
            "titleCount": len(report.titles),
            "hasData": report.has_data,
        }
        breakdowns = {
            "customerSummary": [customer_row(c) for c in report.customers],
            "paymentTracking": [
                payment_row(s) for s in report.payment_sources
            ],
            "currencyBreakdown": [
                currency_row(s) for s in report.currency_breakdown
            ],
            "titleBreakdown": [title_row(t) for t in report.titles],
        }
        return DashboardResult(metrics=metrics, breakdowns=breakdowns)

    def _vision_gems_dashboard(self, module_id: str) -> DashboardResult:
        profit = self._inventory.execute(module_id, VISION_GEMS_TABS)
        expenses = self._expenses.total_expenses(module_id)
        metrics = {
            "cost": profit.inventory_cost,
            "rsSales": profit.sales_revenue,
            "rmbSales": profit.sales_rmb,
            "profit": profit.profit,
            "netProfit": profit.profit - expenses,
            "weight": profit.total_weight,
            "count": profit.item_count,
        }
        return _finish(metrics, inventory_rows(profit))

    def _spinel_dashboard(self, module_id: str) -> DashboardResult:
        profit = self._inventory.execute(module_id, SPINEL_GALLERY_TABS)
        outstanding, received = self._ledger_totals(module_id)
        each_share = profit.profit * PARTNER_SHARE_RATIO
        metrics = {
            "totalCost": profit.inventory_cost,
            "totalSales": profit.sales_revenue,
            "totalProfit": profit.profit,
            "eachShare": each_share,
            "outstanding": outstanding,
            "received": received,
        }
        breakdowns = inventory_rows(profit)
        breakdowns["shares"] = pair_rows(
            [("Partner A", each_share), ("Partner B", each_share)]
        )
        return _finish(metrics, breakdowns)

    def _regional_dashboard(self, module_id: str) -> DashboardResult:
        module = get_module(module_id)
        tabs = module.tabs if module is not None else ()
        profit = self._inventory.execute(
            module_id, [tab for tab in tabs if is_instock_tab(tab)]
        )
        outstanding, received = self._ledger_totals(module_id)
        expenses = self._expenses.total_expenses(module_id)
        net_profit = profit.profit - expenses
        metrics = {
            "inStockCost": profit.inventory_cost,
            "totalSales": profit.sales_revenue,
            "outstanding": outstanding,
            "received": received,
            "profit": profit.profit,
            "expenses": expenses,
            "netProfit": net_profit,
        }
        breakdowns = inventory_rows(profit)
        if module_id == "kenya":
            commission = profit.sales_revenue * KENYA_COMMISSION_RATE
            net_profit -= commission
            metrics["commission"] = commission
            metrics["netProfit"] = net_profit
            share = net_profit * PARTNER_SHARE_RATIO
            breakdowns["shares"] = pair_rows(
                [("VG", share), ("Partner", share)]
            )
        return _finish(metrics, breakdowns)

    def _bkk_dashboard(self, module_id: str) -> DashboardResult:
        module_id = module_id or BKK_MODULE_ID
        read = self._reader
        expenses = read.load_expenses(
            LedgerKind.UNIFIED_EXPENSE, module_id, BKK_TABS["expenses"]
        )
        tickets = read.load_expenses(
            LedgerKind.TICKETS_VISA, module_id, BKK_TABS["tickets"]
        )
        export = read.load_expenses(
            LedgerKind.EXPORT_CHARGES, module_id, BKK_TABS["export"]
        )
        apartment = read.load_expenses(
            LedgerKind.HOTEL_ACCOMMODATION, module_id, BKK_TABS["apartment"]
        )
        statements = read.load_expenses(
            LedgerKind.STATEMENT, module_id, BKK_TABS["statements"]
        )
        capital = read.load_capital(module_id, BKK_TABS["capital"])
        outstanding, received = summarize_ledger_totals(
            read.load_ledger(module_id, BKK_TABS["payments"]), self._logger
        )

        expense_total = sum_expenses(expenses)
        ticket_total = sum_expenses(tickets)
        export_total = sum_expenses(export)
        apartment_total = sum_expenses(apartment)
        metrics = {
            "totalExpenses": (
                expense_total + ticket_total + export_total + apartment_total
            ),
            "tickets": ticket_total,
            "apartment": apartment_total,
            "export": export_total,
            "capital": sum_expenses(capital),
            "payments": received,
            "outstanding": outstanding,
            "statements": sum_expenses(statements),
        }

        activity = sorted(
            [*expenses, *tickets, *export, *apartment],
            key=lambda record: record.date,
            reverse=True,
        )
        breakdowns = {
            "expenses": pair_rows(group_expenses(expenses, "category")),
            "tickets": pair_rows(group_expenses(tickets, "route")),
            "export": pair_rows(group_expenses(export, "authority")),
            "apartment": pair_rows(group_expenses(apartment, "location")),
            "recent": [
                activity_row(r) for r in activity[:RECENT_ACTIVITY_LIMIT]
            ],
        }
        return _finish(metrics, breakdowns)

    def _all_expenses_dashboard(self, module_id: str) -> DashboardResult:
        totals = self._expenses.execute(module_id)
        travel = totals.by_kind.get(
            LedgerKind.TICKETS_VISA.name, ZERO
        ) + totals.by_kind.get(LedgerKind.HOTEL_ACCOMMODATION.name, ZERO)

        module = get_module(module_id)
        capital = []
        for tab in record_tabs(module.tabs if module is not None else ()):
            capital.extend(self._reader.load_capital(module_id, tab))
        shares: dict[str, Decimal] = {}
        for record in capital:
            name = record.name or "Other"
            shares[name] = shares.get(name, ZERO) + sum_expenses([record])

        metrics = {
            "totalExpenses": totals.total,
            "travelExpenses": travel,
            "operationalExpenses": totals.total - travel,
            "sharesPaid": sum_expenses(capital),
            "activeCategories": sum(
                1 for value in totals.by_tab.values() if value > 0
            ),
        }
        breakdowns = {
            "categories": pair_rows(
                sorted(totals.by_tab.items(), key=lambda i: (-i[1], i[0]))
            ),
            "kinds": pair_rows(totals.by_kind.items()),
            "shares": pair_rows(
                sorted(shares.items(), key=lambda i: (-i[1], i[0]))
            ),
        }
        return _finish(metrics, breakdowns)

    def _payable_dashboard(self, module_id: str) -> DashboardResult:
        module = get_module(module_id)
        purchases = []
        for tab in record_tabs(module.tabs if module is not None else ()):
            purchases.extend(self._reader.load_purchases(module_id, tab))
        total, paid, suppliers = summarize_purchases(purchases, self._logger)

        rows = sorted(
            (
                {"name": name, "amount": v["amount"], "payable": v["payable"]}
                for name, v in suppliers.items()
            ),
            key=lambda row: (-row["payable"], row["name"]),
        )
        metrics = {
            "totalPurchasing": total,
            "paidAmount": paid,
            "payableAmount": total - paid,
            "activeSuppliers": sum(1 for row in rows if row["payable"] > 0),
        }
        return _finish(metrics, {"suppliers": rows})

    def _generic_dashboard(self, module_id: str) -> DashboardResult:
        module = get_module(module_id)
        if module is None or module.type not in INVENTORY_MODULE_TYPES:
            self._logger.warning(
                f"No aggregation available for module {module_id!r}"
            )
            return DashboardResult(
                metrics={
                    "inStockCost": ZERO,
                    "totalSales": ZERO,
                    "outstanding": ZERO,
                    "received": ZERO,
                    "hasData": False,
                }
            )

        profit = self._inventory.execute(module_id, record_tabs(module.tabs))
        outstanding, received = self._ledger_totals(module_id)
        metrics = {
            "inStockCost": profit.inventory_cost,
            "totalSales": profit.sales_revenue,
            "outstanding": outstanding,
            "received": received,
            "profit": profit.profit,
        }
        return _finish(metrics, inventory_rows(profit))

    def _ledger_totals(self, module_id: str) -> tuple[Decimal, Decimal]:
        module = get_module(module_id)
        records = []
        for tab in record_tabs(module.tabs if module is not None else ()):
            records.extend(self._reader.load_ledger(module_id, tab))
        return summarize_ledger_totals(records, self._logger)


def _finish(
    metrics: dict,
    breakdowns: dict[str, list[dict]],
) -> DashboardResult:
    """Set ``hasData`` from breakdown rows and non-zero metrics."""
    metrics["hasData"] = any(breakdowns.values()) or any(
        value != 0 for value in metrics.values()
    )
    return DashboardResult(metrics=metrics, breakdowns=breakdowns)


__all__ = ["AssembleDashboardUseCase"]

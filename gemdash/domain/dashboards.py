"""Static registry of KPI dashboards and the cards they display."""

from dataclasses import dataclass

from gemdash.domain.services.normalization import normalize_tab_name


@dataclass(frozen=True)
class KpiCard:
    """A KPI card and the metrics key it reads."""

    title: str
    key: str
    currency: str | None = None
    trend: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class DashboardConfig:
    """Dashboard tab configuration.

    Attributes:
        tab_name: Tab hosting the dashboard.
        module: Module identifier.
        dashboard_type: inventory, financial, expenses or payable.
        theme_color: Hex theme color.
        data_key: Recipe identifier used by the assembler.
        kpi_cards: Cards whose keys the assembler must populate.
        location: Optional operating location label.
    """

    tab_name: str
    module: str
    dashboard_type: str
    theme_color: str
    data_key: str
    kpi_cards: tuple[KpiCard, ...]
    location: str | None = None

    @property
    def metric_keys(self) -> tuple[str, ...]:
        return tuple(card.key for card in self.kpi_cards)


_INVENTORY_CARDS = (
    KpiCard("In Stock Cost", "inStockCost", currency="LKR"),
    KpiCard("Total Sales", "totalSales", currency="LKR"),
    KpiCard("Outstanding", "outstanding", currency="LKR"),
    KpiCard("Payment Received", "received", currency="LKR"),
    KpiCard("Net Profit", "netProfit", currency="LKR", trend="auto"),
)


DASHBOARD_CONFIGS: tuple[DashboardConfig, ...] = (
    DashboardConfig(
        "Dashboard",
        "dada",
        "inventory",
        "#7C3AED",
        "dada_dashboard",
        _INVENTORY_CARDS,
        location="Tanzania Mahenge",
    ),
    DashboardConfig(
        "VG.T Dashboard",
        "vgtz",
        "inventory",
        "#7C3AED",
        "vgtz_dashboard",
        _INVENTORY_CARDS,
        location="Tanzania",
    ),
    DashboardConfig(
        "KDashboard",
        "kenya",
        "inventory",
        "#7C3AED",
        "kenya_dashboard",
        (
            KpiCard("In Stock Cost", "inStockCost", currency="LKR"),
            KpiCard("Total Sales", "totalSales", currency="LKR"),
            KpiCard("Payment Received", "received", currency="LKR"),
            KpiCard("VG Commission", "commission", currency="LKR", note="10%"),
            KpiCard("Net Profit", "netProfit", currency="LKR", trend="auto"),
        ),
        location="Kenya",
    ),
    DashboardConfig(
        "VGRZ.Dashboard",
        "vg-ramazan",
        "inventory",
        "#7C3AED",
        "vgrz_dashboard",
        _INVENTORY_CARDS,
        location="VG Ramazan",
    ),
    DashboardConfig(
        "MDashboard",
        "madagascar",
        "inventory",
        "#7C3AED",
        "madagascar_dashboard",
        _INVENTORY_CARDS,
        location="Madagascar",
    ),
    DashboardConfig(
        "DashboardGEMS",
        "spinel-gallery",
        "financial",
        "#059669",
        "spinel_main_dashboard",
        (
            KpiCard("Total Cost", "totalCost"),
            KpiCard("Total Sales", "totalSales"),
            KpiCard("Total Profit", "totalProfit", trend="up"),
            KpiCard("Each Share", "eachShare", note="50/50 split"),
        ),
    ),
    DashboardConfig(
        "Dash",
        "spinel-gallery",
        "financial",
        "#059669",
        "spinel_dash",
        (
            KpiCard("Revenue", "totalSales"),
            KpiCard("Expenses", "totalCost"),
            KpiCard("Outstanding", "outstanding"),
            KpiCard("Profit", "totalProfit", trend="up"),
        ),
    ),
    DashboardConfig(
        "DashboardGems",
        "vision-gems",
        "financial",
        "#059669",
        "vision_gems_dashboard",
        (
            KpiCard("Inventory Cost", "cost", currency="LKR"),
            KpiCard("Sales Revenue", "rsSales", currency="LKR"),
            KpiCard("Est. Profit", "profit", currency="LKR", trend="up"),
            KpiCard("Net Profit", "netProfit", currency="LKR", trend="auto"),
            KpiCard("Volume", "weight", note="Total Carats"),
        ),
    ),
    DashboardConfig(
        "Dashboard",
        "outstanding",
        "financial",
        "#6366F1",
        "outstanding_dashboard",
        (
            KpiCard("Total Outstanding (LKR)", "totalOutstandingLKR"),
            KpiCard("Total Outstanding (USD)", "totalOutstandingUSD"),
            KpiCard("Customers with Balance", "customerCount"),
            KpiCard("Total Payments Received", "totalReceived"),
        ),
    ),
    DashboardConfig(
        "ExDashboard",
        "all-expenses",
        "expenses",
        "#DC2626",
        "all_expenses_dashboard",
        (
            KpiCard("Total Expenses", "totalExpenses"),
            KpiCard("Travel", "travelExpenses"),
            KpiCard("Shares Paid", "sharesPaid"),
            KpiCard("Operational", "operationalExpenses"),
        ),
    ),
    DashboardConfig(
        "Dashboard",
        "bkk",
        "expenses",
        "#DC2626",
        "bkk_dashboard",
        (
            KpiCard("Total Expenses", "totalExpenses"),
            KpiCard("Tickets", "tickets"),
            KpiCard("Apartment", "apartment"),
            KpiCard("Export", "export"),
        ),
    ),
    DashboardConfig(
        "Dashboard",
        "payable",
        "payable",
        "#F59E0B",
        "payable_dashboard",
        (
            KpiCard("Total Buying", "totalPurchasing"),
            KpiCard("Amount Owed", "payableAmount", trend="up"),
            KpiCard("Amount Paid", "paidAmount"),
            KpiCard("Active Suppliers", "activeSuppliers"),
        ),
    ),
)


def get_dashboard_config(
    module_id: str,
    tab_name: str,
) -> DashboardConfig | None:
    """Return the dashboard hosted on a module tab.

    Tab names match case-insensitively with collapsed whitespace.

    Args:
        module_id: Module identifier.
        tab_name: Tab name as displayed.

    Returns:
        DashboardConfig | None: Matching configuration, if any.
    """
    wanted = normalize_tab_name(tab_name)
    for config in DASHBOARD_CONFIGS:
        if (
            config.module == module_id
            and normalize_tab_name(config.tab_name) == wanted
        ):
            return config
    return None


def find_dashboard_config(data_key: str) -> DashboardConfig | None:
    """Return the dashboard registered under a recipe identifier."""
    for config in DASHBOARD_CONFIGS:
        if config.data_key == data_key:
            return config
    return None


__all__ = [
    "KpiCard",
    "DashboardConfig",
    "DASHBOARD_CONFIGS",
    "get_dashboard_config",
    "find_dashboard_config",
]

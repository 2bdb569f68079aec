"""Registry of business modules and the ledger tabs they group."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleConfig:
    """A business unit and its tabs.

    Attributes:
        id: Module identifier used in storage keys.
        name: Display name.
        type: Module type (inventory, mixed, financial, receivable, ...).
        tabs: Tab names in display order.
    """

    id: str
    name: str
    type: str
    tabs: tuple[str, ...]


INVENTORY_MODULE_TYPES = ("inventory", "mixed")


APP_MODULES: tuple[ModuleConfig, ...] = (
    ModuleConfig(
        "vg-exporting",
        "VG Exporting",
        "export",
        ("Export", "Export -invoice"),
    ),
    ModuleConfig(
        "vision-gems",
        "Vision Gems SL",
        "inventory",
        (
            "DashboardGems",
            "veriety",
            "spinel",
            "tsv",
            "mandarin.garnet",
            "garnet",
            "ruby",
            "blue.sapphire",
            "green.sapphire",
            "chrysoberyl",
            "Approval",
            "Z",
            "V G Old stock",
            "Cut.polish",
        ),
    ),
    ModuleConfig(
        "in-stocks",
        "In Stocks",
        "inventory",
        ("Dashboard", "All Stones", "Sold"),
    ),
    ModuleConfig(
        "spinel-gallery",
        "SpinelGallery",
        "readonly",
        (
            "DashboardGEMS",
            "Dash",
            "Mahenge",
            "Spinel",
            "Blue.Sapphire",
            "Cut.polish",
            "SL.Expenses",
            "BKkticket",
            "BKKExport",
            "BKKExpenses",
            "BKKHotel",
            "Purchasing",
            "Capital",
            "TExpenses",
            "Important",
        ),
    ),
    ModuleConfig(
        "all-expenses",
        "AllExpenses",
        "financial",
        (
            "ExDashboard",
            "VGExpenses",
            "Cut.polish",
            "Personal Expenses",
            "Ticket and Visa",
            "Office",
            "Expenses",
        ),
    ),
    ModuleConfig(
        "outstanding",
        "Outstanding",
        "receivable",
        (
            "Dashboard",
            "Payment Received",
            "Srilanka Sales",
            "Outstanding Receivables",
            "BangkokSales",
            "ChinaSales",
        ),
    ),
    ModuleConfig(
        "payable",
        "Payable",
        "payable",
        (
            "Dashboard",
            "Payment Due Date",
            "Buying.Payments.Paid",
            "Capital",
            "BKK.Capital",
            "Beruwala",
            "Colombo",
            "Galle",
            "Kisu",
            "Bangkok",
        ),
    ),
    ModuleConfig(
        "bkk",
        "BKK Operations",
        "financial",
        (
            "Dashboard",
            "BKK",
            "BKKTickets",
            "BkkExpenses",
            "Export.Charge",
            "Apartment",
            "Bkkcapital",
            "BKK.Payment",
            "BKK.statement",
        ),
    ),
    ModuleConfig(
        "kenya",
        "Kenya",
        "mixed",
        (
            "KDashboard",
            "Instock",
            "CutPolish",
            "Export",
            "Traveling.EX",
            "BkkExpenses",
            "BkkHotel",
            "KPurchasing",
            "KExpenses",
            "Capital",
        ),
    ),
    ModuleConfig(
        "vgtz",
        "Mahenge (VGTZ)",
        "mixed",
        (
            "VG.T Dashboard",
            "VG.T.Instock",
            "Purchase",
            "TZ.Expenses",
            "T.Capital",
            "Azeem",
            "T.export",
            "Cut.and.polish",
            "Tickets.visa",
            "SLExpenses",
        ),
    ),
    ModuleConfig(
        "madagascar",
        "Madagascar",
        "mixed",
        (
            "MDashboard",
            "Instock",
            "MPurchasing",
            "MExpenses",
            "MCapital",
            "MExport",
            "Cut.polish",
            "Tickets.visa",
            "SLExpenses",
            "Invoice",
            "Invoice bkk",
        ),
    ),
    ModuleConfig(
        "dada",
        "Dada",
        "mixed",
        (
            "Dashboard",
            "Instock",
            "Purchase",
            "T.Expense",
            "Capital",
            "T.export",
            "Tickets.visa",
            "202412Capital",
            "202412TExpense",
            "202412",
            "202412 (2)",
        ),
    ),
    ModuleConfig(
        "vg-ramazan",
        "VG Ramazan",
        "mixed",
        (
            "VGRZ.Dashboard",
            "Instock",
            "VGR.purchase",
            "Cut.polish",
            "T.Expenses",
            "T.export",
            "T.Capital",
        ),
    ),
    ModuleConfig(
        "accounts",
        "Accounts",
        "financial",
        ("Shares", "Investment"),
    ),
)


def get_module(module_id: str) -> ModuleConfig | None:
    """Return the module registered under an identifier.

    Args:
        module_id: Module identifier.

    Returns:
        ModuleConfig | None: Matching module, if any.
    """
    for module in APP_MODULES:
        if module.id == module_id:
            return module
    return None


__all__ = [
    "ModuleConfig",
    "INVENTORY_MODULE_TYPES",
    "APP_MODULES",
    "get_module",
]

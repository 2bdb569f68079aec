"""Domain constants for receivables and dashboard aggregation."""

from decimal import Decimal

CANONICAL_CURRENCY = "LKR"

# Customers owing more than this (canonical currency) are flagged Overdue.
OVERDUE_BALANCE_THRESHOLD = Decimal("5000000")

DASHBOARD_TAB_MARKER = "dashboard"

OUTSTANDING_MODULE_ID = "outstanding"

PAYMENT_TABS = (
    "SG.Payment.Received",
    "Madagascar.Payment.Received",
    "K.Payment.Received",
    "VG.R.payment.received",
    "VG.Payment.Received",
    "VG.T.Payment.Received",
    "Payment.received",
)

CUSTOMER_TABS = (
    "Zahran",
    "RuzaikSales",
    "BeruwalaSales",
    "SajithOnline",
    "Ziyam",
    "InfazHaji",
    "NusrathAli",
    "Binara",
    "MikdarHaji",
    "RameesNana",
    "Shimar",
    "Ruqshan",
    "FaizeenHaj",
    "SharikHaj",
    "Fazeel",
    "AzeemColo",
    "Kadarhaj.colo",
    "AlthafHaj",
    "BangkokSales",
    "Sadam bkk",
    "ChinaSales",
    "Eleven",
    "AndyBuyer",
    "FlightBuyer",
    "Bangkok",
    "Name",
    "Name1",
)

SALES_TABS = (
    "RuzaikSales",
    "BeruwalaSales",
    "SajithOnline",
    "BangkokSales",
    "ChinaSales",
)

VISION_GEMS_TABS = (
    "spinel",
    "tsv",
    "mandarin.garnet",
    "garnet",
    "ruby",
    "blue.sapphire",
    "green.sapphire",
    "chrysoberyl",
)

SPINEL_GALLERY_TABS = ("Mahenge", "Spinel", "Blue.Sapphire")

BKK_MODULE_ID = "bkk"
BKK_TABS = {
    "expenses": "BkkExpenses",
    "tickets": "BKKTickets",
    "export": "Export.Charge",
    "apartment": "Apartment",
    "capital": "Bkkcapital",
    "payments": "BKK.Payment",
    "statements": "BKK.statement",
}

CURRENCY_COLORS = {
    "LKR": "#3B82F6",
    "USD": "#10B981",
    "RMB": "#EF4444",
    "THB": "#F59E0B",
}

STATUS_COLORS = {
    "In Stock": "#10B981",
    "Sold": "#3B82F6",
    "Export": "#F59E0B",
    "Memo/Other": "#6B7280",
}

PARTNER_SHARE_RATIO = Decimal("0.5")
KENYA_COMMISSION_RATE = Decimal("0.10")
TOP_ITEMS_LIMIT = 5
RECENT_ACTIVITY_LIMIT = 10


__all__ = [
    "CANONICAL_CURRENCY",
    "OVERDUE_BALANCE_THRESHOLD",
    "DASHBOARD_TAB_MARKER",
    "OUTSTANDING_MODULE_ID",
    "PAYMENT_TABS",
    "CUSTOMER_TABS",
    "SALES_TABS",
    "VISION_GEMS_TABS",
    "SPINEL_GALLERY_TABS",
    "BKK_MODULE_ID",
    "BKK_TABS",
    "CURRENCY_COLORS",
    "STATUS_COLORS",
    "PARTNER_SHARE_RATIO",
    "KENYA_COMMISSION_RATE",
    "TOP_ITEMS_LIMIT",
    "RECENT_ACTIVITY_LIMIT",
]

"""Tests for the AssembleDashboardUseCase."""

import json
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from gemdash.application.use_cases.assemble_dashboard import (
    AssembleDashboardUseCase,
)
from gemdash.application.use_cases.ledger_reader import LedgerReader
from gemdash.domain.dashboards import DASHBOARD_CONFIGS


class _FakeStore:
    def __init__(self, values: dict) -> None:
        self.values = {k: json.dumps(v) for k, v in values.items()}

    def get(self, key: str):
        return self.values.get(key)


def _assembler(values: dict, logger=None) -> AssembleDashboardUseCase:
    logger = logger or MagicMock()
    return AssembleDashboardUseCase(
        LedgerReader(_FakeStore(values), logger=logger),
        logger=logger,
        today=lambda: date(2024, 6, 1),
    )


@pytest.mark.parametrize(
    "config",
    DASHBOARD_CONFIGS,
    ids=[config.data_key for config in DASHBOARD_CONFIGS],
)
def test_empty_store_yields_zero_metrics(config) -> None:
    """Every dashboard reports zeros and no data on an empty store."""
    result = _assembler({}).execute(config.data_key, config.module)

    assert result.metrics["hasData"] is False
    for key, value in result.metrics.items():
        if key == "hasData":
            continue
        assert value == 0, key
    for key in config.metric_keys:
        assert key in result.metrics


def test_outstanding_dashboard_shapes_rows() -> None:
    """The receivables dashboard exposes metrics and four breakdowns."""
    result = _assembler(
        {
            "unified_payment_ledger_outstanding_Sadam_bkk": [
                {"invoiceAmount": 1000, "paidAmount": 200}
            ],
            "unified_payment_ledger_outstanding_SGPaymentReceived": [
                {"paidAmount": 200, "paymentDate": "2024-05-01"}
            ],
            "unified_payment_ledger_outstanding_RuzaikSales": [
                {"invoiceAmount": 1000, "title": "Order-17"}
            ],
            "unified_payment_ledger_outstanding_ChinaSales": [
                {
                    "invoiceAmount": 10,
                    "currency": "USD",
                    "exchangeRate": 300,
                    "title": "Order-17",
                    "dueDate": "2024-01-01",
                }
            ],
        }
    ).execute("outstanding_dashboard")

    metrics = result.metrics
    assert metrics["totalOutstandingLKR"] == Decimal("4800")
    assert metrics["totalOutstandingUSD"] == Decimal("10")
    assert metrics["customerCount"] == 3
    assert metrics["totalReceived"] == Decimal("200")
    assert metrics["titleCount"] == 1
    assert metrics["hasData"] is True

    rows = {row["name"]: row for row in result.breakdowns["customerSummary"]}
    assert rows["Sadam bkk"]["id"] == "cust-sadam_bkk"
    assert rows["Sadam bkk"]["status"] == "Pending"
    assert rows["ChinaSales"]["usd"] == Decimal("10")
    assert rows["Sadam bkk"]["slAmount"] == Decimal("1000")
    assert rows["Sadam bkk"]["finalAmount"] == Decimal("1000")
    assert rows["Sadam bkk"]["lkr"] == Decimal("800")

    title = result.breakdowns["titleBreakdown"][0]
    assert title["finalAmount"] == Decimal("4000")
    assert title["usdOutstanding"] == Decimal("10")
    assert title["cleared"] == "Overdue"
    assert title["transactionCount"] == 2
    assert len(title["transactions"]) == 2
    assert result.breakdowns["paymentTracking"][0] == {
        "source": "SG.Payment.Received",
        "total": Decimal("200"),
        "count": 1,
        "lastDate": "2024-05-01",
    }
    assert {row["name"] for row in result.breakdowns["currencyBreakdown"]} == {
        "LKR",
        "USD",
    }


def test_vision_gems_dashboard_nets_module_expenses() -> None:
    """Net profit subtracts the module expenses from inventory profit."""
    result = _assembler(
        {
            "inventory_vision-gems_spinel": [
                {
                    "cost": 100,
                    "finalPrice": 300,
                    "status": "Sold",
                    "priceRMB": 50,
                    "weight": 1.5,
                }
            ],
            "inventory_vision-gems_ruby": [
                {"cost": 40, "status": "In Stock", "weight": "0.5"}
            ],
            "unified_expense_vision-gems_Cutpolish": [{"amount": 60}],
        }
    ).execute("vision_gems_dashboard")

    assert result.metrics["cost"] == Decimal("140")
    assert result.metrics["rsSales"] == Decimal("300")
    assert result.metrics["rmbSales"] == Decimal("50")
    assert result.metrics["profit"] == Decimal("160")
    assert result.metrics["netProfit"] == Decimal("100")
    assert result.metrics["weight"] == Decimal("2.0")
    assert result.metrics["count"] == 2
    assert [row["code"] for row in result.breakdowns["topItems"]] == [""]
    assert {row["name"] for row in result.breakdowns["statusDist"]} == {
        "Sold",
        "In Stock",
    }


def test_kenya_dashboard_applies_commission() -> None:
    """Kenya deducts a ten percent commission on sales."""
    values = {
        "inventory_kenya_Instock": [
            {"cost": 1000, "finalPrice": 3000, "status": "Sold"},
            {"cost": 500, "status": "In Stock"},
        ],
        "unified_expense_kenya_KExpenses": [{"amount": 200}],
        "unified_payment_ledger_kenya_Export": [
            {"invoiceAmount": 3000, "paidAmount": 1000}
        ],
    }
    assembler = _assembler(values)

    result = assembler.execute("kenya_dashboard")

    assert result.metrics["inStockCost"] == Decimal("1500")
    assert result.metrics["totalSales"] == Decimal("3000")
    assert result.metrics["outstanding"] == Decimal("2000")
    assert result.metrics["received"] == Decimal("1000")
    assert result.metrics["expenses"] == Decimal("200")
    assert result.metrics["commission"] == Decimal("300")
    assert result.metrics["netProfit"] == Decimal("1000")
    assert [row["value"] for row in result.breakdowns["shares"]] == [
        Decimal("500"),
        Decimal("500"),
    ]
    assert assembler.execute_for_tab("kenya", " kdashboard ") == result


def test_regional_dashboard_without_commission() -> None:
    """Other regional dashboards net profit against expenses only."""
    result = _assembler(
        {
            "inventory_vgtz_VGTInstock": [
                {"cost": 10, "finalPrice": 50, "status": "sold"}
            ],
            "tickets_visa_vgtz_Ticketsvisa": [{"amount": 5}],
        }
    ).execute("vgtz_dashboard")

    assert result.metrics["netProfit"] == Decimal("35")
    assert "commission" not in result.metrics
    assert "shares" not in result.breakdowns


def test_spinel_dashboard_splits_profit() -> None:
    """Spinel Gallery profit is shared evenly between partners."""
    result = _assembler(
        {
            "inventory_spinel-gallery_Mahenge": [
                {"cost": 100, "finalPrice": 500, "status": "Sold"}
            ],
            "unified_payment_ledger_spinel-gallery_Important": [
                {"invoiceAmount": 500, "paidAmount": 450}
            ],
        }
    ).execute("spinel_main_dashboard")

    assert result.metrics["totalProfit"] == Decimal("400")
    assert result.metrics["eachShare"] == Decimal("200")
    assert result.metrics["outstanding"] == Decimal("50")
    assert result.metrics["received"] == Decimal("450")


def test_bkk_dashboard_totals_and_recent_activity() -> None:
    """BKK totals each kind and lists the newest activity first."""
    result = _assembler(
        {
            "unified_expense_bkk_BkkExpenses": [
                {"amount": 100, "category": "Food", "date": "2024-01-02"},
                {"amount": 50, "category": "Taxi", "date": "2024-01-05"},
            ],
            "tickets_visa_bkk_BKKTickets": [
                {
                    "amount": 10,
                    "convertedAmount": 3000,
                    "route": "CMB-BKK",
                    "date": "2024-01-01",
                }
            ],
            "unified_export_bkk_ExportCharge": [
                {"amount": 40, "authority": "Customs", "date": "2024-01-03"}
            ],
            "hotel_accommodation_bkk_Apartment": [
                {"amount": 500, "location": "Sukhumvit", "date": "2024-01-04"}
            ],
            "unified_capital_bkk_Bkkcapital": [{"amount": 1000}],
            "unified_payment_ledger_bkk_BKKPayment": [
                {"invoiceAmount": 800, "paidAmount": 300}
            ],
            "unified_statement_bkk_BKKstatement": [{"amount": 25}],
        }
    ).execute("bkk_dashboard")

    assert result.metrics == {
        "totalExpenses": Decimal("3690"),
        "tickets": Decimal("3000"),
        "apartment": Decimal("500"),
        "export": Decimal("40"),
        "capital": Decimal("1000"),
        "payments": Decimal("300"),
        "outstanding": Decimal("500"),
        "statements": Decimal("25"),
        "hasData": True,
    }
    assert [row["name"] for row in result.breakdowns["expenses"]] == [
        "Food",
        "Taxi",
    ]
    assert result.breakdowns["tickets"][0]["name"] == "CMB-BKK"
    assert [row["date"] for row in result.breakdowns["recent"]] == [
        "2024-01-05",
        "2024-01-04",
        "2024-01-03",
        "2024-01-02",
        "2024-01-01",
    ]


def test_bkk_dashboard_reads_tabs_saved_under_display_names() -> None:
    """Statement and export keys written with dotted tab names count."""
    result = _assembler(
        {
            "unified_export_bkk_Export.Charge": [{"amount": 40}],
            "unified_statement_bkk_BKK.statement": [{"amount": 25}],
        }
    ).execute("bkk_dashboard")

    assert result.metrics["export"] == Decimal("40")
    assert result.metrics["totalExpenses"] == Decimal("40")
    assert result.metrics["statements"] == Decimal("25")


def test_all_expenses_dashboard_splits_travel() -> None:
    """Travel covers tickets and accommodation; capital is shares paid."""
    result = _assembler(
        {
            "unified_expense_all-expenses_VGExpenses": [{"amount": 100}],
            "tickets_visa_all-expenses_Ticket_and_Visa": [{"amount": 300}],
            "hotel_accommodation_all-expenses_Office": [{"amount": 50}],
            "unified_capital_all-expenses_Expenses": [
                {"amount": 1000, "name": "Partner A"},
                {"amount": 500, "name": "Partner B"},
            ],
        }
    ).execute("all_expenses_dashboard")

    assert result.metrics["totalExpenses"] == Decimal("450")
    assert result.metrics["travelExpenses"] == Decimal("350")
    assert result.metrics["operationalExpenses"] == Decimal("100")
    assert result.metrics["sharesPaid"] == Decimal("1500")
    assert result.metrics["activeCategories"] == 3
    assert [row["name"] for row in result.breakdowns["categories"]] == [
        "Ticket and Visa",
        "VGExpenses",
        "Office",
    ]
    assert result.breakdowns["shares"][0] == {
        "name": "Partner A",
        "value": Decimal("1000"),
    }


def test_payable_dashboard_tracks_suppliers() -> None:
    """Purchases use purchase rates; only purchase records count as paid."""
    result = _assembler(
        {
            "unified_purchasing_payable_Kisu": [
                {
                    "supplier": "Kisu Mine",
                    "amount": 1000,
                    "paidAmount": 400,
                    "currency": "KES",
                }
            ],
            "unified_purchasing_payable_Colombo": [
                {"supplier": "Colombo Lapidary", "amount": 500, "paidAmount": 500}
            ],
            "unified_payment_ledger_payable_BuyingPaymentsPaid": [
                {"paidAmount": 100}
            ],
        }
    ).execute("payable_dashboard")

    assert result.metrics["totalPurchasing"] == Decimal("2830")
    assert result.metrics["paidAmount"] == Decimal("1432")
    assert result.metrics["payableAmount"] == Decimal("1398")
    assert result.metrics["activeSuppliers"] == 1
    suppliers = result.breakdowns["suppliers"]
    assert suppliers[0]["name"] == "Kisu Mine"
    assert sum(row["payable"] for row in suppliers) == (
        result.metrics["payableAmount"]
    )


def test_unknown_recipe_uses_generic_inventory() -> None:
    """Inventory modules without a recipe get the generic inventory view."""
    result = _assembler(
        {
            "inventory_in-stocks_All_Stones": [
                {"cost": 10, "finalPrice": 25, "status": "Sold"}
            ]
        }
    ).execute("in_stocks_dashboard", "in-stocks")

    assert result.metrics["inStockCost"] == Decimal("10")
    assert result.metrics["totalSales"] == Decimal("25")
    assert result.metrics["hasData"] is True


def test_unknown_recipe_for_financial_module_is_zeroed() -> None:
    """Modules with no aggregation report zeros and warn."""
    logger = MagicMock()

    result = _assembler({}, logger=logger).execute_for_tab("accounts", "Shares")

    assert result.metrics == {
        "inStockCost": Decimal("0"),
        "totalSales": Decimal("0"),
        "outstanding": Decimal("0"),
        "received": Decimal("0"),
        "hasData": False,
    }
    assert logger.warning.call_count == 2


def test_assembly_is_repeatable() -> None:
    """The same store snapshot always yields the same result."""
    assembler = _assembler(
        {
            "unified_payment_ledger_outstanding_Ziyam": [
                {"invoiceAmount": 10, "currency": "THB"}
            ]
        }
    )

    assert assembler.execute("outstanding_dashboard") == assembler.execute(
        "outstanding_dashboard"
    )

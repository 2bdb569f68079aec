"""Tests for expense totals and supplier payables."""

from decimal import Decimal
from unittest.mock import MagicMock

from gemdash.domain.models.records import (
    CapitalRecord,
    ExpenseRecord,
    LedgerKind,
    PurchaseRecord,
)
from gemdash.domain.services.expenses import (
    expense_amount,
    group_expenses,
    sum_expenses,
)
from gemdash.domain.services.payables import summarize_purchases


def _expense(amount, converted=None, category=""):
    return ExpenseRecord(
        kind=LedgerKind.UNIFIED_EXPENSE,
        amount=Decimal(amount),
        converted_amount=None if converted is None else Decimal(converted),
        category=category,
    )


def test_expense_amount_prefers_converted_value() -> None:
    """A recorded converted amount wins over the raw amount."""
    assert expense_amount(_expense("10", "3025")) == Decimal("3025")
    assert expense_amount(_expense("10")) == Decimal("10")
    assert expense_amount(
        CapitalRecord(amount=Decimal("5"), converted_amount=Decimal("0"))
    ) == Decimal("0")


def test_sum_expenses_is_order_independent() -> None:
    """The total does not depend on record order."""
    records = [_expense("1"), _expense("2", "20"), _expense("3")]

    assert sum_expenses(records) == Decimal("24")
    assert sum_expenses(reversed(records)) == Decimal("24")
    assert sum_expenses([]) == Decimal("0")


def test_group_expenses_sorts_by_total() -> None:
    """Groups are labelled, blank labels become Other."""
    groups = group_expenses(
        [
            _expense("5", category="Food"),
            _expense("10", category="Rent"),
            _expense("7", category="Food"),
            _expense("1"),
        ],
        "category",
    )

    assert groups == [
        ("Food", Decimal("12")),
        ("Rent", Decimal("10")),
        ("Other", Decimal("1")),
    ]


def test_summarize_purchases_uses_purchase_rates() -> None:
    """Purchases convert with the purchase-side defaults."""
    logger = MagicMock()
    total, paid, suppliers = summarize_purchases(
        [
            PurchaseRecord(
                supplier="Kisu",
                amount=Decimal("1000"),
                paid_amount=Decimal("400"),
                currency="KES",
            ),
            PurchaseRecord(
                supplier="Galle",
                amount=Decimal("2"),
                paid_amount=Decimal("2"),
                currency="USD",
            ),
        ],
        logger,
    )

    assert total == Decimal("2330") + Decimal("605")
    assert paid == Decimal("932") + Decimal("605")
    assert suppliers["Kisu"]["payable"] == Decimal("1398")
    assert suppliers["Galle"]["payable"] == Decimal("0")
    logger.warning.assert_not_called()

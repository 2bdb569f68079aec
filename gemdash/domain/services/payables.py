"""Domain services for supplier payables."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from gemdash.domain.models.records import PurchaseRecord
from gemdash.domain.services.fx import PURCHASE_RATES, to_canonical


def summarize_purchases(
    records: Iterable[PurchaseRecord],
    logger: Logger | None = None,
) -> tuple[Decimal, Decimal, dict[str, dict[str, Decimal]]]:
    """Total purchases, payments and per-supplier balances.

    Purchases are converted with the purchase-side default rates, which
    is where the records were entered.

    Args:
        records: Purchase records across payable tabs.
        logger: Optional logger for conversion warnings.

    Returns:
        tuple: (total purchased, total paid, supplier -> {amount, payable}).
    """
    total = Decimal("0")
    paid = Decimal("0")
    suppliers: dict[str, dict[str, Decimal]] = {}
    for record in records:
        amount = to_canonical(
            record.amount,
            record.currency,
            record.exchange_rate,
            PURCHASE_RATES,
            logger,
        )
        settled = to_canonical(
            record.paid_amount,
            record.currency,
            record.exchange_rate,
            PURCHASE_RATES,
            logger,
        )
        total += amount
        paid += settled
        entry = suppliers.setdefault(
            record.supplier,
            {"amount": Decimal("0"), "payable": Decimal("0")},
        )
        entry["amount"] += amount
        entry["payable"] += amount - settled
    return total, paid, suppliers


__all__ = ["summarize_purchases"]

"""Domain services for expense totals."""

from collections.abc import Iterable
from decimal import Decimal

from gemdash.domain.models.records import CapitalRecord, ExpenseRecord


def expense_amount(record: ExpenseRecord | CapitalRecord) -> Decimal:
    """Return the converted amount when recorded, else the raw amount."""
    if record.converted_amount is not None:
        return record.converted_amount
    return record.amount


def sum_expenses(records: Iterable[ExpenseRecord | CapitalRecord]) -> Decimal:
    """Sum expense amounts; the order of records does not matter."""
    return sum((expense_amount(record) for record in records), Decimal("0"))


def group_expenses(
    records: Iterable[ExpenseRecord],
    attribute: str,
) -> list[tuple[str, Decimal]]:
    """Group expense amounts by a record attribute, largest first.

    Args:
        records: Expense records to group.
        attribute: Grouping field (category, route, location, authority).

    Returns:
        list[tuple[str, Decimal]]: (label, total) pairs sorted by total desc.
    """
    totals: dict[str, Decimal] = {}
    for record in records:
        label = getattr(record, attribute) or "Other"
        totals[label] = totals.get(label, Decimal("0")) + expense_amount(
            record
        )
    return sorted(totals.items(), key=lambda item: (-item[1], item[0]))


__all__ = ["expense_amount", "sum_expenses", "group_expenses"]

"""Domain services for inventory profit."""

from collections.abc import Iterable
from decimal import Decimal

from gemdash.domain.constants import TOP_ITEMS_LIMIT
from gemdash.domain.models.finance import InventoryProfit, VarietyStat
from gemdash.domain.models.records import InventoryItem, InventoryStatus


def compute_inventory_profit(
    items: Iterable[InventoryItem],
    top_limit: int = TOP_ITEMS_LIMIT,
) -> InventoryProfit:
    """Compute the inventory profit proxy.

    Every item adds its cost; only sold items add their final price to
    revenue. Profit nets the cost of all stock against sold revenue.

    Args:
        items: Inventory items across the requested tabs.
        top_limit: Number of in-stock items listed by cost.

    Returns:
        InventoryProfit: Revenue, cost, profit and breakdowns.
    """
    sales_revenue = Decimal("0")
    inventory_cost = Decimal("0")
    sales_rmb = Decimal("0")
    total_weight = Decimal("0")
    item_count = 0
    varieties: dict[str, dict] = {}
    status_counts = {status.value: 0 for status in InventoryStatus}
    in_stock: list[InventoryItem] = []

    for item in items:
        item_count += 1
        inventory_cost += item.cost
        total_weight += item.weight
        sales_rmb += item.price_rmb
        sold = item.status is InventoryStatus.SOLD
        if sold:
            sales_revenue += item.final_price
        status_counts[item.status.value] += 1
        if item.status is InventoryStatus.IN_STOCK:
            in_stock.append(item)

        stats = varieties.setdefault(
            item.variety,
            {
                "cost": Decimal("0"),
                "sales": Decimal("0"),
                "weight": Decimal("0"),
                "count": 0,
            },
        )
        stats["cost"] += item.cost
        stats["weight"] += item.weight
        stats["count"] += 1
        if sold:
            stats["sales"] += item.final_price

    variety_stats = sorted(
        (
            VarietyStat(
                variety=variety,
                cost=stats["cost"],
                sales=stats["sales"],
                weight=stats["weight"],
                count=stats["count"],
            )
            for variety, stats in varieties.items()
        ),
        key=lambda stat: (-stat.cost, stat.variety),
    )
    top_items = sorted(in_stock, key=lambda item: item.cost, reverse=True)

    return InventoryProfit(
        sales_revenue=sales_revenue,
        inventory_cost=inventory_cost,
        profit=sales_revenue - inventory_cost,
        sales_rmb=sales_rmb,
        total_weight=total_weight,
        item_count=item_count,
        varieties=variety_stats,
        status_counts={k: v for k, v in status_counts.items() if v > 0},
        top_items=top_items[:top_limit],
    )


__all__ = ["compute_inventory_profit"]

"""Use case to compute the inventory profit proxy for module tabs."""

from collections.abc import Iterable

from gemdash.application.use_cases.ledger_reader import LedgerReader
from gemdash.domain.models.finance import InventoryProfit
from gemdash.domain.services.inventory import compute_inventory_profit
from gemdash.infrastructure.logging.logger import get_app_logger


class GetInventoryProfitUseCase:
    """Compute revenue, cost and profit from inventory tabs."""

    def __init__(self, reader: LedgerReader, logger=None) -> None:
        """Initialize the use case.

        Args:
            reader: Reader providing typed records from the store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reader = reader
        self._logger = logger or get_app_logger()

    def execute(self, module_id: str, tabs: Iterable[str]) -> InventoryProfit:
        """Return the inventory profit for the listed tabs of a module.

        Args:
            module_id: Module identifier.
            tabs: Inventory tab names to scan.

        Returns:
            InventoryProfit: Sold revenue, total cost and their difference.
        """
        items = []
        for tab in tabs:
            items.extend(self._reader.load_inventory(module_id, tab))
        result = compute_inventory_profit(items)
        self._logger.info(
            f"Inventory profit computed: module={module_id}, "
            f"items={result.item_count}, revenue={result.sales_revenue}, "
            f"cost={result.inventory_cost}"
        )
        return result

    def profit_from_inventory(
        self,
        module_id: str,
        tabs: Iterable[str],
    ) -> InventoryProfit:
        return self.execute(module_id, tabs)


__all__ = ["GetInventoryProfitUseCase"]

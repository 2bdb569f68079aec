"""Use case to total the expenses recorded across a module's tabs."""

from decimal import Decimal

from gemdash.application.use_cases.ledger_reader import LedgerReader
from gemdash.domain.models.finance import ModuleExpenseTotal
from gemdash.domain.models.records import EXPENSE_KINDS
from gemdash.domain.modules import get_module
from gemdash.domain.policies import record_tabs
from gemdash.domain.services.expenses import sum_expenses
from gemdash.infrastructure.logging.logger import get_app_logger


class GetModuleExpensesUseCase:
    """Sum every expense-like record of every tab of a module."""

    def __init__(self, reader: LedgerReader, logger=None) -> None:
        """Initialize the use case.

        Args:
            reader: Reader providing typed records from the store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._reader = reader
        self._logger = logger or get_app_logger()

    def execute(self, module_id: str) -> ModuleExpenseTotal:
        """Return the module's expense total with per-kind and per-tab splits.

        Dashboard tabs are skipped. Each remaining tab contributes general
        expenses, cut & polish charges, tickets and visas, accommodation and
        export charges.

        Args:
            module_id: Module identifier.

        Returns:
            ModuleExpenseTotal: Totals in canonical currency.
        """
        module = get_module(module_id)
        if module is None:
            self._logger.warning(f"Unknown module for expenses: {module_id}")
            return ModuleExpenseTotal(module_id=module_id, total=Decimal("0"))

        total = Decimal("0")
        by_kind = {kind.name: Decimal("0") for kind in EXPENSE_KINDS}
        by_tab: dict[str, Decimal] = {}
        for tab in record_tabs(module.tabs):
            tab_total = Decimal("0")
            for kind in EXPENSE_KINDS:
                amount = sum_expenses(
                    self._reader.load_expenses(kind, module_id, tab)
                )
                by_kind[kind.name] += amount
                tab_total += amount
            by_tab[tab] = tab_total
            total += tab_total

        self._logger.info(
            f"Module expenses computed: module={module_id}, total={total}"
        )
        return ModuleExpenseTotal(
            module_id=module_id,
            total=total,
            by_kind=by_kind,
            by_tab=by_tab,
        )

    def total_expenses(self, module_id: str) -> Decimal:
        """Return only the module's expense total."""
        return self.execute(module_id).total


__all__ = ["GetModuleExpensesUseCase"]

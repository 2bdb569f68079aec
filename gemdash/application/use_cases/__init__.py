"""Application use cases package."""

from .ledger_reader import LedgerReader, build_storage_key
from .get_module_expenses import GetModuleExpensesUseCase
from .get_inventory_profit import GetInventoryProfitUseCase
from .reconcile_outstanding import ReconcileOutstandingUseCase
from .assemble_dashboard import AssembleDashboardUseCase

__all__ = [
    "LedgerReader",
    "build_storage_key",
    "GetModuleExpensesUseCase",
    "GetInventoryProfitUseCase",
    "ReconcileOutstandingUseCase",
    "AssembleDashboardUseCase",
]

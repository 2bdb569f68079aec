"""Composition root for wiring infrastructure adapters."""

from gemdash.application.ports.database import DatabaseEnginePort
from gemdash.application.ports.record_store import RecordStorePort
from gemdash.application.use_cases.assemble_dashboard import (
    AssembleDashboardUseCase,
)
from gemdash.application.use_cases.ledger_reader import LedgerReader
from gemdash.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from gemdash.infrastructure.logging.logger import get_app_logger
from gemdash.infrastructure.record_store import (
    JsonFileRecordStore,
    SqlAlchemyRecordStore,
)
from gemdash.infrastructure.settings import StoreSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
    settings: StoreSettings | None = None,
) -> RecordStorePort:
    """Return the configured record store."""
    resolved = settings or StoreSettings.from_env()
    if resolved.backend == "json":
        if resolved.json_file is None:
            raise RuntimeError(
                "JSON store backend requires a GEMDASH_STORE_FILE value."
            )
        return JsonFileRecordStore(resolved.json_file, logger=get_app_logger())
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordStore(resolved_db, table_name=resolved.table)


def build_ledger_reader(store: RecordStorePort | None = None) -> LedgerReader:
    """Return a ledger reader over the configured store."""
    return LedgerReader(store or build_record_store(), logger=get_app_logger())


def build_dashboard_assembler(
    store: RecordStorePort | None = None,
) -> AssembleDashboardUseCase:
    """Return the dashboard assembler wired to the configured store."""
    return AssembleDashboardUseCase(
        build_ledger_reader(store),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_ledger_reader",
    "build_dashboard_assembler",
]

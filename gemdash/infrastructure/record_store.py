"""Record store adapters backing the ledger reader.

Every adapter answers ``get(key)`` with the stored value or None. Values
are JSON strings as written by the spreadsheet front end; the JSON export
may also hold already-decoded lists.
"""

import json
from pathlib import Path

from sqlalchemy import column, select, table

from gemdash.application.ports.database import DatabaseEnginePort
from gemdash.application.ports.record_store import RecordStorePort
from gemdash.infrastructure.logging.logger import get_app_logger


class InMemoryRecordStore(RecordStorePort):
    """Dict-backed store."""

    def __init__(self, values: dict | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str):
        return self._values.get(key)


class JsonFileRecordStore(RecordStorePort):
    """Store reading a JSON object exported from the browser storage.

    The file is loaded once, on first access.
    """

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the store.

        Args:
            path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._store: InMemoryRecordStore | None = None

    def get(self, key: str):
        return self._load().get(key)

    def _load(self) -> InMemoryRecordStore:
        if self._store is None:
            with self._path.open(encoding="utf-8") as handle:
                payload = json.load(handle)
            if not isinstance(payload, dict):
                raise ValueError(
                    f"Store file {self._path} must hold a JSON object"
                )
            self._store = InMemoryRecordStore(payload)
            self._logger.info(
                f"Loaded {len(payload)} keys from {self._path}"
            )
        return self._store


class SqlAlchemyRecordStore(RecordStorePort):
    """Store backed by a key/value table reached through SQLAlchemy."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        table_name: str = "record_store",
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the record store engine.
            table_name: Table holding ``key`` and ``value`` columns.
        """
        self._db_port = db_port
        self._table = table(table_name, column("key"), column("value"))

    def get(self, key: str):
        query = select(self._table.c.value).where(self._table.c.key == key)
        engine = self._db_port.get_store_engine()
        with engine.connect() as conn:
            return conn.execute(query).scalar_one_or_none()


__all__ = [
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "SqlAlchemyRecordStore",
]

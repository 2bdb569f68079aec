"""Database ports for the gem dashboard.

This module defines the application-layer protocol for accessing the
database engine backing the record store. Infrastructure implementations
provide concrete adapters that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the record store database."""

    def get_store_engine(self) -> Engine:
        """Get the engine for the record store database.

        Returns:
            Engine: SQLAlchemy engine connected to the record store.
        """


__all__ = ["DatabaseEnginePort"]

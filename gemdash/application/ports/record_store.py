"""Port for the key/value store holding ledger tabs."""

from typing import Protocol


class RecordStorePort(Protocol):
    """Read-only access to the per-tab blob store.

    Values are JSON-encoded lists of records. The engine never writes to
    the store.
    """

    def get(self, key: str) -> str | None:
        """Return the raw value stored under a key, or None when absent."""


__all__ = ["RecordStorePort"]

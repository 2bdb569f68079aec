"""Reader turning stored tab payloads into record lists."""

import json

from gemdash.application.ports.record_store import RecordStorePort
from gemdash.domain.models.records import (
    CapitalRecord,
    ExpenseRecord,
    InventoryItem,
    LedgerKind,
    LedgerRecord,
    PurchaseRecord,
)
from gemdash.domain.services.normalization import normalize_tab_id
from gemdash.domain.services.records import (
    parse_capital,
    parse_expense,
    parse_inventory,
    parse_ledger,
    parse_purchase,
)
from gemdash.infrastructure.logging.logger import get_app_logger


def build_storage_key(prefix: str, module_id: str, tab_id: str) -> str:
    """Build the store key for a kind prefix, module and tab.

    Args:
        prefix: Kind-specific key prefix.
        module_id: Module identifier.
        tab_id: Tab name as displayed; normalized before use.

    Returns:
        str: Key in the form ``<prefix>_<module>_<tab>``.
    """
    return f"{prefix}_{module_id}_{normalize_tab_id(tab_id)}"


def _candidate_keys(kind: LedgerKind, module_id: str, tab_id: str):
    for prefix in kind.prefixes:
        key = build_storage_key(prefix, module_id, tab_id)
        yield key
        raw_key = f"{prefix}_{module_id}_{tab_id}"
        if raw_key != key:
            yield raw_key


class LedgerReader:
    """Read record lists for (kind, module, tab) triples.

    Missing keys are an ordinary empty state. Malformed payloads are logged
    and skipped, so a broken tab never stops the aggregation of others.
    """

    def __init__(self, store: RecordStorePort, logger=None) -> None:
        """Initialize the reader.

        Args:
            store: Port providing raw values from the record store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def load_tab(
        self,
        kind: LedgerKind,
        module_id: str,
        tab_id: str,
    ) -> list[dict]:
        """Return the raw records stored for a tab.

        Legacy key prefixes are tried in order. Under each prefix the
        normalized tab id is tried before the tab name as displayed, which
        older writers used verbatim. The first key holding a readable JSON
        list wins.

        Args:
            kind: Record kind selecting the key prefixes.
            module_id: Module identifier.
            tab_id: Tab name.

        Returns:
            list[dict]: Stored records, or an empty list.
        """
        for key in _candidate_keys(kind, module_id, tab_id):
            raw = self._store.get(key)
            if raw is None:
                continue
            records = self._decode(key, raw)
            if records is not None:
                return records
        return []

    def load_expenses(
        self,
        kind: LedgerKind,
        module_id: str,
        tab_id: str,
    ) -> list[ExpenseRecord]:
        return [
            parse_expense(raw, kind)
            for raw in self.load_tab(kind, module_id, tab_id)
        ]

    def load_ledger(
        self,
        module_id: str,
        tab_id: str,
        kind: LedgerKind = LedgerKind.PAYMENT_LEDGER,
    ) -> list[LedgerRecord]:
        return [
            parse_ledger(raw, source_tab=tab_id)
            for raw in self.load_tab(kind, module_id, tab_id)
        ]

    def load_inventory(
        self,
        module_id: str,
        tab_id: str,
    ) -> list[InventoryItem]:
        return [
            parse_inventory(raw, source_tab=tab_id)
            for raw in self.load_tab(LedgerKind.INVENTORY, module_id, tab_id)
        ]

    def load_purchases(
        self,
        module_id: str,
        tab_id: str,
    ) -> list[PurchaseRecord]:
        return [
            parse_purchase(raw)
            for raw in self.load_tab(LedgerKind.PURCHASING, module_id, tab_id)
        ]

    def load_capital(
        self,
        module_id: str,
        tab_id: str,
    ) -> list[CapitalRecord]:
        return [
            parse_capital(raw)
            for raw in self.load_tab(LedgerKind.CAPITAL, module_id, tab_id)
        ]

    def _decode(self, key: str, raw) -> list[dict] | None:
        if isinstance(raw, list):
            payload = raw
        else:
            try:
                payload = json.loads(raw)
            except (TypeError, ValueError, RecursionError) as exc:
                self._logger.warning(f"Failed to parse {key}: {exc}")
                return None
        if not isinstance(payload, list):
            self._logger.warning(
                f"Ignoring {key}: expected a list, got "
                f"{type(payload).__name__}"
            )
            return None
        records = [item for item in payload if isinstance(item, dict)]
        dropped = len(payload) - len(records)
        if dropped:
            self._logger.warning(
                f"Dropped {dropped} non-record entries from {key}"
            )
        return records


__all__ = ["LedgerReader", "build_storage_key"]

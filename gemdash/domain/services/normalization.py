"""Domain normalization helpers."""

import re

from gemdash.domain.constants import CANONICAL_CURRENCY
from gemdash.domain.models.records import InventoryStatus


_WHITESPACE = re.compile(r"\s+")
_NON_KEY_CHARS = re.compile(r"[^A-Za-z0-9_]")

_CURRENCY_ALIASES = {
    "BATH": "THB",
    "BAHT": "THB",
    "CNY": "RMB",
    "KSH": "KES",
    "RS": "LKR",
    "SLR": "LKR",
}


def normalize_tab_id(tab_id: str) -> str:
    """Normalize a tab name into the form used inside storage keys.

    Whitespace runs become underscores and every other character outside
    ``[A-Za-z0-9_]`` is dropped. Case is preserved.

    Args:
        tab_id: Tab name as displayed.

    Returns:
        str: Key-safe tab identifier.
    """
    collapsed = _WHITESPACE.sub("_", tab_id.strip())
    return _NON_KEY_CHARS.sub("", collapsed)


def normalize_tab_name(tab_name: str) -> str:
    """Normalize a tab name for case-insensitive registry lookups."""
    return _WHITESPACE.sub(" ", tab_name.strip().lower())


def normalize_currency(currency) -> str:
    """Normalize a currency code, defaulting to the canonical currency.

    Args:
        currency: Raw currency value from a record.

    Returns:
        str: Upper-cased code with known aliases resolved.
    """
    if not isinstance(currency, str):
        return CANONICAL_CURRENCY
    cleaned = currency.strip().upper()
    if not cleaned:
        return CANONICAL_CURRENCY
    return _CURRENCY_ALIASES.get(cleaned, cleaned)


def normalize_status(status) -> InventoryStatus:
    """Collapse free-text stone statuses into an InventoryStatus.

    Any status mentioning "sold" counts as sold, so variants such as
    "sold out" or "Sold - paid" are recognised.

    Args:
        status: Raw status value from an inventory record.

    Returns:
        InventoryStatus: Normalized status.
    """
    if not isinstance(status, str) or not status.strip():
        return InventoryStatus.IN_STOCK
    lowered = status.lower()
    if "sold" in lowered:
        return InventoryStatus.SOLD
    if "stock" in lowered:
        return InventoryStatus.IN_STOCK
    if "export" in lowered:
        return InventoryStatus.EXPORT
    return InventoryStatus.MEMO


def normalize_text(value, default: str = "") -> str:
    """Return a trimmed string field, falling back to a default."""
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def normalize_title(title) -> str:
    """Return the trimmed title as text; numeric titles are kept."""
    return normalize_text(title)


__all__ = [
    "normalize_tab_id",
    "normalize_tab_name",
    "normalize_currency",
    "normalize_status",
    "normalize_title",
    "normalize_text",
]

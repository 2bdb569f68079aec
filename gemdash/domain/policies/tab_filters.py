"""Tab selection rules shared by the aggregators."""

from gemdash.domain.constants import DASHBOARD_TAB_MARKER


def is_dashboard_tab(tab_name: str) -> bool:
    """Return True when a tab hosts a dashboard rather than records.

    Args:
        tab_name: Tab name as registered on the module.

    Returns:
        bool: True for dashboard tabs, which aggregators skip.
    """
    return DASHBOARD_TAB_MARKER in tab_name.lower()


def is_instock_tab(tab_name: str) -> bool:
    """Return True when a tab holds stones currently in stock."""
    return "instock" in tab_name.lower().replace(" ", "")


def record_tabs(tabs) -> list[str]:
    """Return the tabs that hold records, keeping their order."""
    return [tab for tab in tabs if not is_dashboard_tab(tab)]


__all__ = ["is_dashboard_tab", "is_instock_tab", "record_tabs"]

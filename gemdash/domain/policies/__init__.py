"""Domain policies package."""

from .tab_filters import is_dashboard_tab, is_instock_tab, record_tabs

__all__ = ["is_dashboard_tab", "is_instock_tab", "record_tabs"]

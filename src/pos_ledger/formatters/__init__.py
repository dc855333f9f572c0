"""Output formatters for sales data."""

from pos_ledger.formatters.console import (
    format_dashboard,
    format_money,
    format_sales_history,
    kpi_cards,
)

__all__ = ["format_dashboard", "format_money", "format_sales_history", "kpi_cards"]

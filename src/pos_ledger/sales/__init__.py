"""Sales domain module.

This module provides the sale record types, the ledger that mutates and
persists the collection, and the aggregation functions over it:

- **SalesLedger**: record_sale / delete_sale / clear_all, each followed by a
  save of the whole collection.
- **compute_kpis**: count, revenue, average order value, top product and
  top category.
- **compute_chart_series**: summed quantity per product, first-seen order.

Example:
    >>> from pos_ledger.sales import SaleInput, SalesLedger, compute_kpis
    >>> from pos_ledger.storage import InMemoryStore
    >>>
    >>> ledger = SalesLedger(InMemoryStore())
    >>> ledger.load()
    >>> ledger.record_sale(SaleInput("Widget", "Tools", "9.99", 3))
    >>> compute_kpis(ledger.sales).top_product
    'Widget'
"""

from pos_ledger.sales.aggregate import (
    compute_chart_series,
    compute_kpis,
    quantity_by,
    sales_frame,
)
from pos_ledger.sales.ledger import SalesLedger, validate_sale_input
from pos_ledger.sales.models import ChartPoint, KPISummary, SaleInput, SaleRecord

__all__ = [
    "ChartPoint",
    "KPISummary",
    "SaleInput",
    "SaleRecord",
    "SalesLedger",
    "compute_chart_series",
    "compute_kpis",
    "quantity_by",
    "sales_frame",
    "validate_sale_input",
]

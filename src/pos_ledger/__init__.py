"""POS Ledger - Point of sale record keeping and sales KPIs.

This package records manually entered sales, persists them as a single
JSON snapshot, and derives summary metrics and a chart series:

- **Records**: SaleRecord, one immutable row per completed sale
- **Ledger**: SalesLedger, record/delete/clear with a save after each
- **Aggregates**: KPIs and per-product quantity series

Module Structure:
    pos_ledger.sales: Sale types, ledger and aggregation
    pos_ledger.storage: Snapshot codec and stores (JSON file, in-memory)
    pos_ledger.formatters: Console formatting (money rounding, dashboard)
    pos_ledger.config: LedgerPaths configuration

Quick Start:
    >>> from pos_ledger import LedgerPaths, SaleInput, SalesLedger
    >>> from pos_ledger.storage import JsonFileStore
    >>>
    >>> paths = LedgerPaths.from_root("data")
    >>> ledger = SalesLedger(JsonFileStore.from_paths(paths))
    >>> ledger.load()
    >>>
    >>> ledger.record_sale(SaleInput("Widget", "Tools", "9.99", 3))
    >>> ledger.record_sale(SaleInput("Widget", "Tools", "9.99", 2))
    >>>
    >>> kpis = ledger.kpis()
    >>> kpis.total_revenue, kpis.top_product
    (Decimal('49.95'), 'Widget')
"""

__version__ = "0.1.0"

from pos_ledger.config import LedgerPaths
from pos_ledger.exceptions import (
    LedgerStateError,
    PersistenceCorruptionError,
    PersistenceError,
    PersistenceWriteError,
    PosLedgerError,
    ValidationError,
)
from pos_ledger.sales import (
    ChartPoint,
    KPISummary,
    SaleInput,
    SaleRecord,
    SalesLedger,
    compute_chart_series,
    compute_kpis,
)

__all__ = [
    "ChartPoint",
    "KPISummary",
    "LedgerPaths",
    "LedgerStateError",
    "PersistenceCorruptionError",
    "PersistenceError",
    "PersistenceWriteError",
    "PosLedgerError",
    "SaleInput",
    "SaleRecord",
    "SalesLedger",
    "ValidationError",
    "__version__",
    "compute_chart_series",
    "compute_kpis",
]

"""Example: Record sales and print the dashboard

This example records a few sales into a JSON snapshot under data/, prints
the KPI dashboard, then deletes one sale and clears the ledger.

Run it twice to see the collection survive a restart (comment out the
clear_all() call at the end first).
"""

import logging
from pathlib import Path

from pos_ledger import LedgerPaths, SaleInput, SalesLedger
from pos_ledger.formatters import format_dashboard
from pos_ledger.storage import JsonFileStore

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Set up configuration
paths = LedgerPaths.from_root(Path("data"))
paths.ensure_dirs()

ledger = SalesLedger(JsonFileStore.from_paths(paths))
sales = ledger.load()
print(f"Loaded {len(sales)} sale(s) from {paths.sales_slot}")

# Record a few sales
ledger.record_sale(SaleInput("Widget", "Tools", "9.99", 3))
ledger.record_sale(SaleInput("Widget", "Tools", "9.99", 2))
gadget = ledger.record_sale(SaleInput("Gadget", "Toys", "14.50", 1))

print()
print(format_dashboard(ledger.sales))

# Delete one sale
ledger.delete_sale(gadget.id)
print(f"\nAfter deleting sale {gadget.id}:")
for point in ledger.chart_series():
    print(f"  {point.name}: {point.sales}")

# Clear everything
ledger.clear_all()
print(f"\nAfter clear_all: {ledger.kpis().total_sales} sale(s)")

"""Console output formatting utilities.

Money is rounded to 2 decimals here and only here.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from pos_ledger.sales.aggregate import compute_chart_series, compute_kpis
from pos_ledger.sales.models import KPISummary, SaleRecord

CENT = Decimal("0.01")

# Widest chart bar, in characters
BAR_WIDTH = 40

HISTORY_HEADERS = ["Date", "Product", "Category", "Price", "Qty", "Total", "ID"]


def format_money(value: Decimal | int) -> str:
    """Format a money value as dollars with 2 decimals.

    Args:
        value: Amount at full precision.

    Returns:
        String like "$1,234.50".

    Examples:
        >>> format_money(Decimal("24.975"))
        '$24.98'

    """
    rounded = Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"${rounded:,.2f}"


def kpi_cards(kpis: KPISummary) -> list[tuple[str, str]]:
    """Labelled KPI values in display order."""
    return [
        ("Total Revenue", format_money(kpis.total_revenue)),
        ("Total Sales", str(kpis.total_sales)),
        ("Avg. Order Value", format_money(kpis.avg_order_value)),
        ("Top Product", kpis.top_product),
        ("Top Category", kpis.top_category),
    ]


def format_sales_history(sales: Sequence[SaleRecord]) -> str:
    """Build a plain-text listing of recorded sales, oldest first.

    Args:
        sales: Sale collection.

    Returns:
        Column-aligned text, or "No sales recorded yet" if empty.

    """
    if not sales:
        return "No sales recorded yet"

    rows = [HISTORY_HEADERS]
    for sale in sales:
        rows.append(
            [
                sale.date.isoformat(),
                sale.product_name,
                sale.category,
                format_money(sale.price),
                str(sale.quantity),
                format_money(sale.total),
                str(sale.id),
            ]
        )

    widths = [max(len(row[i]) for row in rows) for i in range(len(HISTORY_HEADERS))]
    lines = ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows]
    lines.insert(1, "-" * len(lines[0]))
    return "\n".join(lines)


def format_dashboard(sales: Sequence[SaleRecord]) -> str:
    """Build the full text dashboard: KPIs, product chart and history.

    Args:
        sales: Sale collection.

    Returns:
        Human-readable text for console output.

    """
    lines = ["Point of Sale System", "=" * 60, ""]

    cards = kpi_cards(compute_kpis(sales))
    label_width = max(len(label) for label, _ in cards)
    for label, value in cards:
        lines.append(f"{label.ljust(label_width)}  {value}")
    lines.append("")

    lines.append("Product Sales:")
    lines.append("-" * 60)
    series = compute_chart_series(sales)
    if series:
        peak = max(point.sales for point in series)
        name_width = max(len(point.name) for point in series)
        for point in series:
            bar = "#" * max(1, round(point.sales * BAR_WIDTH / peak))
            lines.append(f"{point.name.ljust(name_width)}  {bar} {point.sales}")
    else:
        lines.append("No product sales")
    lines.append("")

    lines.append("Sales History:")
    lines.append("-" * 60)
    lines.append(format_sales_history(sales))

    return "\n".join(lines)

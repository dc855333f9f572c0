"""Aggregation engine: KPIs and chart series over a sale collection.

All functions here are pure. They build a DataFrame view of the collection
on every call and never mutate or cache anything.

Grouping rules:
    - Product and category grouping is by exact string match.
    - Groups keep the order in which their key first appears in the
      collection (``groupby(sort=False)``).
    - Ties for the top product/category go to the key seen first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

import pandas as pd

from pos_ledger.config import EMPTY_LABEL
from pos_ledger.sales.models import ChartPoint, KPISummary, SaleRecord

logger = logging.getLogger(__name__)

SALES_COLUMNS = ["id", "date", "product_name", "category", "price", "quantity", "total"]

GROUP_KEYS = ("product_name", "category")


def sales_frame(sales: Iterable[SaleRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per sale, in collection order.

    Money columns hold ``Decimal`` objects so no precision is lost.

    Args:
        sales: Sale collection.

    Returns:
        DataFrame with SALES_COLUMNS. Empty (with those columns) when there
        are no sales.

    """
    rows = [
        {
            "id": sale.id,
            "date": sale.date,
            "product_name": sale.product_name,
            "category": sale.category,
            "price": sale.price,
            "quantity": sale.quantity,
            "total": sale.total,
        }
        for sale in sales
    ]

    if not rows:
        return pd.DataFrame(columns=SALES_COLUMNS)

    return pd.DataFrame(rows, columns=SALES_COLUMNS)


def _quantity_by_frame(df: pd.DataFrame, key: str) -> pd.Series:
    if key not in GROUP_KEYS:
        raise ValueError(f"Invalid group key '{key}'. Must be one of {GROUP_KEYS}.")

    if df.empty:
        return pd.Series(dtype="int64", name="quantity")

    return df.groupby(key, sort=False)["quantity"].sum()


def quantity_by(sales: Iterable[SaleRecord], key: str) -> pd.Series:
    """Sum quantity per product or category.

    Args:
        sales: Sale collection.
        key: "product_name" or "category".

    Returns:
        Series indexed by the group key, in first-seen order.

    Raises:
        ValueError: If key is not a supported grouping column.

    Examples:
        >>> quantity_by(sales, "category")
        category
        Tools    5
        Name: quantity, dtype: int64

    """
    return _quantity_by_frame(sales_frame(sales), key)


def _top_label(totals: pd.Series) -> str:
    """Label with the greatest total; first occurrence wins ties."""
    if totals.empty:
        return EMPTY_LABEL
    return str(totals.idxmax())


def compute_kpis(sales: Iterable[SaleRecord]) -> KPISummary:
    """Compute the summary KPIs for a sale collection.

    Args:
        sales: Sale collection.

    Returns:
        KPISummary. For an empty collection every numeric field is 0 and the
        top product/category are "None".

    Examples:
        >>> kpis = compute_kpis(ledger.sales)
        >>> kpis.total_revenue
        Decimal('49.95')

    """
    df = sales_frame(sales)

    if df.empty:
        return KPISummary(
            total_sales=0,
            total_revenue=Decimal("0"),
            avg_order_value=Decimal("0"),
            top_product=EMPTY_LABEL,
            top_category=EMPTY_LABEL,
        )

    total_sales = len(df)
    total_revenue = sum(df["total"], Decimal("0"))
    avg_order_value = total_revenue / total_sales

    top_product = _top_label(_quantity_by_frame(df, "product_name"))
    top_category = _top_label(_quantity_by_frame(df, "category"))

    logger.debug(
        "Computed KPIs over %d sale(s): top product %r, top category %r",
        total_sales,
        top_product,
        top_category,
    )

    return KPISummary(
        total_sales=total_sales,
        total_revenue=total_revenue,
        avg_order_value=avg_order_value,
        top_product=top_product,
        top_category=top_category,
    )


def compute_chart_series(sales: Iterable[SaleRecord]) -> list[ChartPoint]:
    """Build the per-product chart series.

    Args:
        sales: Sale collection.

    Returns:
        One ChartPoint per distinct product name with its summed quantity,
        in the order products first appear. Empty list for no sales.

    """
    totals = quantity_by(sales, "product_name")
    return [ChartPoint(name=str(name), sales=int(qty)) for name, qty in totals.items()]

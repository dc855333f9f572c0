"""Sale record and aggregate result types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class SaleInput:
    """A sale as entered at the till, before validation.

    Attributes:
        product_name: Free-text product name.
        category: Free-text category.
        price: Unit price (Decimal, int, float or numeric string).
        quantity: Units sold (int or integral string).
    """

    product_name: str
    category: str
    price: object
    quantity: object


@dataclass(frozen=True)
class SaleRecord:
    """One completed transaction.

    Records are immutable once created. ``total`` is stored rather than
    derived on read; it equals ``price * quantity`` at creation time and is
    never re-checked afterwards.

    Attributes:
        id: Unique, increasing identifier.
        date: Calendar date the sale was recorded.
        product_name: Product name (grouping is by exact match).
        category: Category name (grouping is by exact match).
        price: Unit price.
        quantity: Units sold.
        total: Stored line total.
    """

    id: int
    date: date
    product_name: str
    category: str
    price: Decimal
    quantity: int
    total: Decimal

    @classmethod
    def create(
        cls,
        sale_id: int,
        sale_date: date,
        product_name: str,
        category: str,
        price: Decimal,
        quantity: int,
    ) -> SaleRecord:
        """Build a new record, computing ``total`` from price and quantity."""
        total = price * quantity
        record = cls(
            id=sale_id,
            date=sale_date,
            product_name=product_name,
            category=category,
            price=price,
            quantity=quantity,
            total=total,
        )
        assert record.total == record.price * record.quantity
        return record


@dataclass(frozen=True)
class KPISummary:
    """Summary statistics over a sale collection.

    Money fields carry full Decimal precision; rounding for display happens
    in ``pos_ledger.formatters``.
    """

    total_sales: int
    total_revenue: Decimal
    avg_order_value: Decimal
    top_product: str
    top_category: str


@dataclass(frozen=True)
class ChartPoint:
    """Summed quantity sold for one product."""

    name: str
    sales: int

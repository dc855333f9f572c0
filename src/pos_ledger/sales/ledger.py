"""Mutation controller for the sale collection.

``SalesLedger`` owns the in-memory collection. Every mutation is followed
by one save of the full collection through the injected store.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from pos_ledger.exceptions import (
    LedgerStateError,
    PersistenceCorruptionError,
    ValidationError,
)
from pos_ledger.sales.aggregate import compute_chart_series, compute_kpis
from pos_ledger.sales.models import ChartPoint, KPISummary, SaleInput, SaleRecord
from pos_ledger.utils import to_decimal, to_int

if TYPE_CHECKING:
    from pos_ledger.storage.base import SalesStore

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string, got {value!r}")
    return value.strip()


def validate_sale_input(sale_input: SaleInput) -> tuple[str, str, Decimal, int]:
    """Check a sale input and normalize its values.

    Args:
        sale_input: Sale as entered.

    Returns:
        Tuple of (product_name, category, price, quantity). Text is stripped,
        price is a Decimal, quantity an int.

    Raises:
        ValidationError: If any field is empty, non-numeric or not positive.

    """
    product_name = _require_text(sale_input.product_name, "product_name")
    category = _require_text(sale_input.category, "category")

    try:
        price = to_decimal(sale_input.price)
    except ValueError as e:
        raise ValidationError(f"price is invalid: {e}") from e
    if price <= 0:
        raise ValidationError(f"price must be positive, got {price}")

    try:
        quantity = to_int(sale_input.quantity)
    except ValueError as e:
        raise ValidationError(f"quantity is invalid: {e}") from e
    if quantity <= 0:
        raise ValidationError(f"quantity must be positive, got {quantity}")

    return product_name, category, price, quantity


class SalesLedger:
    """Append/delete/clear operations over a persisted sale collection.

    The ledger starts uninitialized; call ``load()`` once before using it.

    Example:
        >>> from pos_ledger import LedgerPaths, SaleInput, SalesLedger
        >>> from pos_ledger.storage import JsonFileStore
        >>>
        >>> store = JsonFileStore.from_paths(LedgerPaths.from_root("data"))
        >>> ledger = SalesLedger(store)
        >>> ledger.load()
        >>> sale = ledger.record_sale(SaleInput("Widget", "Tools", "9.99", 3))
        >>> sale.total
        Decimal('29.97')

    """

    def __init__(
        self,
        store: SalesStore,
        *,
        today: Callable[[], date] | None = None,
        clock_ms: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the ledger.

        Args:
            store: Persistence backend for the collection.
            today: Returns the date stamped on new sales (default: date.today).
            clock_ms: Returns the current time in milliseconds, used to
                generate sale ids (default: wall clock).

        """
        self.store = store
        self._today = today or date.today
        self._clock_ms = clock_ms or _now_ms
        self._sales: list[SaleRecord] | None = None
        self._last_id = 0

    @property
    def loaded(self) -> bool:
        """Whether load() has run and the collection is available."""
        return self._sales is not None

    @property
    def sales(self) -> tuple[SaleRecord, ...]:
        """Current collection, oldest first."""
        return tuple(self._require_loaded())

    def _require_loaded(self) -> list[SaleRecord]:
        if self._sales is None:
            raise LedgerStateError("Sales ledger has not been loaded; call load() first")
        return self._sales

    def load(self, *, strict: bool = False) -> tuple[SaleRecord, ...]:
        """Load the collection from the store.

        Args:
            strict: If True, a corrupt snapshot raises. Otherwise the ledger
                logs a warning and starts with an empty collection.

        Returns:
            The loaded collection.

        Raises:
            PersistenceCorruptionError: If strict and the snapshot is corrupt.
            PersistenceError: If the slot cannot be read. This is never replaced
                by an empty collection.

        """
        try:
            sales = self.store.load()
        except PersistenceCorruptionError as e:
            if strict:
                raise
            logger.warning("Stored sales snapshot is corrupt, starting empty: %s", e)
            sales = []

        self._sales = list(sales)
        self._last_id = max((s.id for s in self._sales), default=0)
        logger.info("Loaded %d sale(s)", len(self._sales))
        return tuple(self._sales)

    def _next_id(self) -> int:
        self._last_id = max(self._clock_ms(), self._last_id + 1)
        return self._last_id

    def _persist(self) -> None:
        self.store.save(self._require_loaded())

    def record_sale(self, sale_input: SaleInput) -> SaleRecord:
        """Validate, append and persist a new sale.

        Args:
            sale_input: Sale as entered.

        Returns:
            The created record.

        Raises:
            ValidationError: If the input is invalid (nothing is changed).
            PersistenceWriteError: If saving fails (the sale stays in memory).

        """
        sales = self._require_loaded()
        product_name, category, price, quantity = validate_sale_input(sale_input)

        record = SaleRecord.create(
            sale_id=self._next_id(),
            sale_date=self._today(),
            product_name=product_name,
            category=category,
            price=price,
            quantity=quantity,
        )
        sales.append(record)
        logger.info(
            "Recorded sale %d: %s x%d (%s)",
            record.id,
            record.product_name,
            record.quantity,
            record.total,
        )

        self._persist()
        return record

    def delete_sale(self, sale_id: int) -> None:
        """Remove the sale with ``sale_id`` and persist; no-op if absent."""
        sales = self._require_loaded()
        remaining = [s for s in sales if s.id != sale_id]

        if len(remaining) == len(sales):
            logger.debug("No sale with id %s to delete", sale_id)
        else:
            logger.info("Deleted sale %s", sale_id)
        self._sales = remaining

        self._persist()

    def clear_all(self) -> None:
        """Remove every sale and persist the empty collection."""
        sales = self._require_loaded()
        logger.info("Clearing %d sale(s)", len(sales))
        self._sales = []

        self._persist()

    def kpis(self) -> KPISummary:
        """KPIs over the current collection."""
        return compute_kpis(self._require_loaded())

    def chart_series(self) -> list[ChartPoint]:
        """Per-product chart series over the current collection."""
        return compute_chart_series(self._require_loaded())

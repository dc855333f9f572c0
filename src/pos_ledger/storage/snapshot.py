"""Snapshot codec for the sale collection.

The snapshot is a JSON array with one object per sale::

    [
      {
        "id": 1736937000000,
        "date": "2025-01-15",
        "productName": "Widget",
        "price": 9.99,
        "quantity": 3,
        "category": "Tools",
        "total": 29.97
      }
    ]

Money is written as the exact ``Decimal`` text and numbers are read back as
``Decimal``. The format carries no version tag.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from pos_ledger.config import SNAPSHOT_FIELDS
from pos_ledger.exceptions import PersistenceCorruptionError
from pos_ledger.sales.models import SaleRecord
from pos_ledger.utils import parse_date

logger = logging.getLogger(__name__)


def _json_value(value: Any) -> str:
    # Decimal text is already a valid JSON number
    if isinstance(value, Decimal):
        return str(value)
    return json.dumps(value)


def record_to_dict(sale: SaleRecord) -> dict[str, Any]:
    """Map a record to its persisted key layout."""
    return {
        "id": sale.id,
        "date": sale.date.isoformat(),
        "productName": sale.product_name,
        "price": sale.price,
        "quantity": sale.quantity,
        "category": sale.category,
        "total": sale.total,
    }


def dump_snapshot(sales: Sequence[SaleRecord]) -> str:
    """Serialize the whole collection to snapshot text.

    Money is written as exact JSON numbers (``str(Decimal)``), so
    ``parse_snapshot(dump_snapshot(sales)) == sales`` for any precision.
    """
    if not sales:
        return "[]"

    objects = []
    for sale in sales:
        fields = [
            f"    {json.dumps(key)}: {_json_value(value)}"
            for key, value in record_to_dict(sale).items()
        ]
        objects.append("  {\n" + ",\n".join(fields) + "\n  }")
    return "[\n" + ",\n".join(objects) + "\n]"


def _require_int(entry: dict[str, Any], key: str, index: int) -> int:
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise PersistenceCorruptionError(
            f"Sale #{index}: field '{key}' must be an integer, got {value!r}"
        )
    return value


def _require_decimal(entry: dict[str, Any], key: str, index: int) -> Decimal:
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise PersistenceCorruptionError(
            f"Sale #{index}: field '{key}' must be a number, got {value!r}"
        )
    return Decimal(value)


def _require_str_field(entry: dict[str, Any], key: str, index: int) -> str:
    value = entry[key]
    if not isinstance(value, str):
        raise PersistenceCorruptionError(
            f"Sale #{index}: field '{key}' must be a string, got {value!r}"
        )
    return value


def record_from_dict(entry: Any, index: int = 0) -> SaleRecord:
    """Rebuild a record from one persisted object.

    The stored ``total`` is taken as-is.

    Raises:
        PersistenceCorruptionError: If fields are missing or mistyped.

    """
    if not isinstance(entry, dict):
        raise PersistenceCorruptionError(f"Sale #{index} is not an object: {entry!r}")

    missing = [key for key in SNAPSHOT_FIELDS if key not in entry]
    if missing:
        raise PersistenceCorruptionError(f"Sale #{index} is missing fields: {missing}")

    date_text = _require_str_field(entry, "date", index)
    try:
        sale_date = parse_date(date_text)
    except ValueError as e:
        raise PersistenceCorruptionError(f"Sale #{index}: invalid date {date_text!r}") from e

    return SaleRecord(
        id=_require_int(entry, "id", index),
        date=sale_date,
        product_name=_require_str_field(entry, "productName", index),
        category=_require_str_field(entry, "category", index),
        price=_require_decimal(entry, "price", index),
        quantity=_require_int(entry, "quantity", index),
        total=_require_decimal(entry, "total", index),
    )


def parse_snapshot(text: str) -> list[SaleRecord]:
    """Parse snapshot text into a sale collection.

    Args:
        text: Snapshot JSON text.

    Returns:
        Sale records in stored order.

    Raises:
        PersistenceCorruptionError: If the text is not a valid snapshot.

    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except ValueError as e:
        raise PersistenceCorruptionError(f"Snapshot is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PersistenceCorruptionError(
            f"Snapshot must be a JSON array, got {type(data).__name__}"
        )

    sales = [record_from_dict(entry, i) for i, entry in enumerate(data)]
    logger.debug("Parsed snapshot with %d sale(s)", len(sales))
    return sales

"""Shared utilities for POS Ledger.

This module provides the small parsing helpers used by both the ledger
(validating user input) and the snapshot codec (reading stored data):

- Date parsing: standardized YYYY-MM-DD parsing
- Decimal coercion: money values as exact decimals

Examples:
    >>> from pos_ledger.utils import parse_date, to_decimal
    >>> parse_date("2025-01-15")
    datetime.date(2025, 1, 15)
    >>> to_decimal(9.99)
    Decimal('9.99')

"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation


def parse_date(s: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Args:
        s: Date string in ISO format (YYYY-MM-DD).

    Returns:
        Parsed date object.

    Raises:
        ValueError: If the date string is not in YYYY-MM-DD format.

    Examples:
        >>> parse_date("2023-01-15")
        datetime.date(2023, 1, 15)

    """
    return datetime.strptime(s, "%Y-%m-%d").date()


def to_decimal(value: object) -> Decimal:
    """Coerce a numeric value to a finite Decimal.

    Floats go through ``str()`` so ``9.99`` becomes ``Decimal("9.99")`` rather
    than its binary expansion.

    Args:
        value: Decimal, int, float or numeric string.

    Returns:
        Finite Decimal.

    Raises:
        ValueError: If the value is a bool, not numeric, or not finite.

    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a number, got bool {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a decimal number: {value!r}") from e
    else:
        raise ValueError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def to_int(value: object) -> int:
    """Coerce a value to an int, accepting integral strings and decimals.

    Raises:
        ValueError: If the value is a bool or has a fractional part.

    """
    if isinstance(value, bool):
        raise ValueError(f"Expected an integer, got bool {value!r}")
    if isinstance(value, int):
        return value
    number = to_decimal(value)
    if number != number.to_integral_value():
        raise ValueError(f"Not an integer: {value!r}")
    return int(number)

"""Helpers for Decimal normalization."""

import re
from decimal import Decimal, InvalidOperation


_NUMBER = re.compile(r"-?\d[\d,]*(?:\.\d+)?")


def coerce_decimal(value) -> Decimal:
    """Normalize loosely-typed numeric values to Decimal.

    Store payloads are user-edited, so amounts arrive as numbers, numeric
    strings with currency decorations ("Rs. 1,250.50"), empty strings, or
    not at all. Strings yield their first number with thousands separators
    removed. Anything that cannot be read as a finite number is zero.

    Args:
        value: Raw numeric value from a stored record.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        candidate = str(value)
    elif isinstance(value, str):
        match = _NUMBER.search(value)
        candidate = match.group().replace(",", "") if match else ""
    else:
        return Decimal("0")
    if not candidate:
        return Decimal("0")
    try:
        result = Decimal(candidate)
    except InvalidOperation:
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def coerce_optional_decimal(value) -> Decimal | None:
    """Return None for absent values, otherwise a coerced Decimal.

    Args:
        value: Raw numeric value that may be missing.

    Returns:
        Decimal | None: None when the field is absent or blank.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return coerce_decimal(value)


__all__ = ["coerce_decimal", "coerce_optional_decimal"]

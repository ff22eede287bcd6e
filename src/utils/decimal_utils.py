"""Helpers for Decimal normalization and display."""

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON, SQL or user input.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_amount(value: Decimal, places: int = 2) -> str:
    """Format an amount with a fixed number of decimal places.

    Args:
        value: Amount to format.
        places: Number of digits after the decimal point.

    Returns:
        str: Amount rounded half-up, e.g. ``"500.00"``.
    """
    exponent = Decimal(1).scaleb(-places)
    return f"{coerce_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)}"


def to_cents(value) -> Decimal:
    """Return the value rounded to cents."""
    return coerce_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "format_amount", "to_cents"]

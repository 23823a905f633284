"""Decimal helpers for amounts kept at the currency's minor unit."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def quantize_money(value: Decimal) -> Decimal:
    """Round half-up to two decimal places."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_money(value: Any) -> Optional[Decimal]:
    """
    Convert a stored or user-supplied value to a cent-precision Decimal.

    Floats go through ``str`` so 0.1 becomes Decimal("0.10") rather than
    its binary expansion.

    Returns:
        The amount, or None if the value is missing or not numeric
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None

    if not amount.is_finite():
        return None

    return quantize_money(amount)

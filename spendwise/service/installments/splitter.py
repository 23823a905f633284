"""
Installment Splitting for the Spendwise installment engine.

Splits a purchase into N equal-ish installments without losing or
creating a single cent: every installment gets the half-up rounded
share and installment #1 absorbs whatever rounding left over.

Example:
    100.00 in 3 -> 33.34, 33.33, 33.33
"""

from datetime import date
from decimal import Decimal
from typing import Any, List

from spendwise.domain.entities import Installment, quantize_money
from spendwise.domain.exceptions import InvalidInstallmentCountException

from .billing_cycle import resolve_statement_due_date


def validate_installment_count(count: Any) -> int:
    """
    Check that an installment count is an integer >= 1.

    Booleans are rejected even though they are ints in Python.

    Raises:
        InvalidInstallmentCountException: If the count is not valid
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidInstallmentCountException(count)
    return count


def split_amount(amount: Decimal, count: int) -> List[Decimal]:
    """
    Split an amount into ``count`` cent-precision parts summing to it exactly.

    Args:
        amount: Total to split
        count: Number of parts (>= 1)

    Returns:
        The parts, first one carrying the rounding remainder
    """
    count = validate_installment_count(count)
    total = quantize_money(amount)

    base = quantize_money(total / count)
    remainder = quantize_money(total - base * count)

    return [base + remainder] + [base] * (count - 1)


def split_installments(
    amount: Decimal,
    count: int,
    purchase_date: date,
    closing_day: int,
    due_day: int,
) -> List[Installment]:
    """
    Build the dated installment schedule of a purchase.

    Args:
        amount: Purchase total
        count: Number of installments (>= 1)
        purchase_date: Date of the purchase
        closing_day: Card closing day
        due_day: Card due day

    Returns:
        Installments numbered from 1, one month apart

    Raises:
        InvalidInstallmentCountException: If count is not an integer >= 1
        InvalidBillingCycleException: If the cycle days are out of range
    """
    parts = split_amount(amount, count)

    return [
        Installment(
            installment_number=index + 1,
            amount=part,
            due_date=resolve_statement_due_date(
                purchase_date, closing_day, due_day, installment_offset=index
            ),
        )
        for index, part in enumerate(parts)
    ]

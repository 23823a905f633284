"""
Transaction Materialization for the Spendwise installment engine.

Turns the fields of a create/update request into the stored Transaction
record. Credit-card purchases in more than one installment get their
schedule attached here; everything else is stored as entered.

The function is pure: the same inputs always give the same record, so
an update simply materializes again from scratch.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from spendwise.domain.entities import Category, PaymentMethod, Transaction, quantize_money

from .billing_cycle import year_month
from .settings import BillingCycleSettings, billing_settings
from .splitter import split_installments, validate_installment_count


def materialize_transaction(
    transaction_id: str,
    description: str,
    amount: Decimal,
    purchase_date: date,
    category: Category,
    payment_method: Optional[PaymentMethod] = None,
    installment_count: Any = None,
    settings: BillingCycleSettings = billing_settings,
) -> Transaction:
    """
    Build the stored record for a transaction.

    Args:
        transaction_id: Id to give the record
        description: User description, stored unchanged
        amount: Purchase total
        purchase_date: Date of the purchase
        category: Spending category
        payment_method: Resolved payment method, if the request named one
        installment_count: Requested installments (None means 1)
        settings: Default billing cycle for cards without their own

    Returns:
        The Transaction, with installment fields only for split credit purchases

    Raises:
        InvalidInstallmentCountException: If the count is not an integer >= 1
        InvalidBillingCycleException: If the card's cycle days are out of range
    """
    count = 1 if installment_count is None else validate_installment_count(installment_count)
    amount = quantize_money(amount)
    payment_method_id = payment_method.id if payment_method else None

    if payment_method is None or not payment_method.is_credit or count <= 1:
        return Transaction(
            id=transaction_id,
            description=description,
            amount=amount,
            date=purchase_date,
            category=category,
            payment_method_id=payment_method_id,
        )

    closing_day = payment_method.closing_day or settings.closing_day
    due_day = payment_method.due_day or settings.due_day

    installments = split_installments(
        amount=amount,
        count=count,
        purchase_date=purchase_date,
        closing_day=closing_day,
        due_day=due_day,
    )

    return Transaction(
        id=transaction_id,
        description=description,
        amount=amount,
        date=purchase_date,
        category=category,
        payment_method_id=payment_method_id,
        due_month=year_month(installments[0].due_date),
        installments=installments,
        installment_amount=installments[0].amount,
        total_amount=amount,
        installment_count=count,
    )

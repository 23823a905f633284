"""Data transfer objects for transaction and payment method operations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from spendwise.domain.entities import Category, PaymentMethodKind


@dataclass(frozen=True)
class TransactionRequest:
    """Input data for creating or replacing a transaction."""

    description: str
    amount: Decimal
    date: date
    category: Category = Category.OTHER
    payment_method_id: Optional[str] = None
    installment_count: Optional[int] = None


@dataclass(frozen=True)
class PaymentMethodRequest:
    """Input data for creating a payment method."""

    name: str
    kind: PaymentMethodKind
    color: Optional[str] = None
    closing_day: Optional[int] = None
    due_day: Optional[int] = None

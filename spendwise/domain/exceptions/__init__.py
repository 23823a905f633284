"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .installment import (
    InvalidBillingCycleException,
    InvalidInstallmentCountException,
    InvalidYearMonthException,
    MalformedInstallmentRecordException,
)
from .payment_method import (
    PaymentMethodInUseException,
    PaymentMethodNotFoundException,
)
from .persistence import PersistenceException
from .transaction import TransactionNotFoundException

__all__ = [
    "DomainException",
    "InvalidBillingCycleException",
    "InvalidInstallmentCountException",
    "InvalidYearMonthException",
    "MalformedInstallmentRecordException",
    "PaymentMethodInUseException",
    "PaymentMethodNotFoundException",
    "PersistenceException",
    "TransactionNotFoundException",
]

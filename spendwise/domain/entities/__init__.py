"""Domain Entities - Core business objects."""

from .money import CENT, ZERO, parse_money, quantize_money
from .payment_method import DEFAULT_PAYMENT_METHODS, PaymentMethod, PaymentMethodKind
from .transaction import Category, Installment, Transaction

__all__ = [
    "CENT",
    "ZERO",
    "parse_money",
    "quantize_money",
    "DEFAULT_PAYMENT_METHODS",
    "PaymentMethod",
    "PaymentMethodKind",
    "Category",
    "Installment",
    "Transaction",
]

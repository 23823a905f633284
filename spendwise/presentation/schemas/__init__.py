"""Pydantic schemas for request/response validation."""

from .error import ErrorResponseSchema
from .payment_method import PaymentMethodRequestSchema, PaymentMethodResponseSchema
from .report import (
    CategoryShareSchema,
    DashboardSchema,
    MonthlySeriesSchema,
    MonthlyTotalSchema,
    SpendingSummarySchema,
)
from .transaction import (
    InstallmentSchema,
    TransactionRequestSchema,
    TransactionResponseSchema,
)

__all__ = [
    "ErrorResponseSchema",
    "PaymentMethodRequestSchema",
    "PaymentMethodResponseSchema",
    "CategoryShareSchema",
    "DashboardSchema",
    "MonthlySeriesSchema",
    "MonthlyTotalSchema",
    "SpendingSummarySchema",
    "InstallmentSchema",
    "TransactionRequestSchema",
    "TransactionResponseSchema",
]

"""Data Transfer Objects for application layer."""

from .report import CategoryShare, Dashboard, MonthlyTotal, ReportRange, SpendingSummary
from .transaction import PaymentMethodRequest, TransactionRequest

__all__ = [
    "CategoryShare",
    "Dashboard",
    "MonthlyTotal",
    "ReportRange",
    "SpendingSummary",
    "PaymentMethodRequest",
    "TransactionRequest",
]

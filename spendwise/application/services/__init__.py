"""Application services (use cases)."""

from .transaction_store import TransactionStore
from .report_service import ReportService

__all__ = [
    "TransactionStore",
    "ReportService",
]

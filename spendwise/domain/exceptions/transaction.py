"""Transaction-related domain exceptions."""

from .base import DomainException


class TransactionNotFoundException(DomainException):
    """Raised when a transaction cannot be found."""

    def __init__(self, transaction_id: str):
        super().__init__(
            message=f"Transaction not found: {transaction_id}",
            code="TRANSACTION_NOT_FOUND",
        )
        self.transaction_id = transaction_id

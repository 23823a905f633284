"""Persistence domain exceptions."""

from .base import DomainException


class PersistenceException(DomainException):
    """Raised when a state collection cannot be read from or written to storage."""

    def __init__(self, collection: str, reason: str):
        super().__init__(
            message=f"Failed to persist '{collection}': {reason}",
            code="PERSISTENCE_ERROR",
        )
        self.collection = collection
        self.reason = reason

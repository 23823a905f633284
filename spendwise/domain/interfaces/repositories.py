"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional


class StateRepository(ABC):
    """
    Abstract key-value store for the application's state collections.

    The service keeps two collections, ``transactions`` and
    ``payment_methods``, each written as a whole ordered list of
    entity records. Writes replace the previous value (last write wins).

    Implementations may use SQLite, PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def load(self, collection: str) -> Optional[List[dict]]:
        """
        Read a collection.

        Args:
            collection: Collection key, e.g. "transactions"

        Returns:
            The stored records in order, or None if never written

        Raises:
            PersistenceException: If the backend cannot be read
        """
        ...

    @abstractmethod
    async def save(self, collection: str, records: List[dict]) -> None:
        """
        Replace a collection with the given records.

        Args:
            collection: Collection key, e.g. "payment_methods"
            records: Serialized entity records, in order

        Raises:
            PersistenceException: If the backend cannot be written
        """
        ...

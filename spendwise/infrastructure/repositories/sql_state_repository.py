"""SQLAlchemy repository implementation for state collections."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from spendwise.domain.exceptions import PersistenceException
from spendwise.domain.interfaces import StateRepository
from spendwise.infrastructure.database import DatabaseSessionManager
from spendwise.infrastructure.database.models import StateRecordModel


class SqlStateRepository(StateRepository):
    """
    SQL-backed key-value repository.

    Each collection is one row keyed by its name. The store outlives any
    single request, so every call opens its own session from the manager.
    """

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def load(self, collection: str) -> Optional[List[dict]]:
        try:
            async with self._db.session() as session:
                model = await session.get(StateRecordModel, collection)
        except SQLAlchemyError as exc:
            raise PersistenceException(collection, str(exc)) from exc

        if model is None:
            return None

        return list(model.value)

    async def save(self, collection: str, records: List[dict]) -> None:
        try:
            async with self._db.session() as session:
                await session.merge(
                    StateRecordModel(
                        key=collection,
                        value=records,
                        updated_at=datetime.now(timezone.utc),
                    )
                )
                await session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceException(collection, str(exc)) from exc

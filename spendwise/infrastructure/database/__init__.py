"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager
from .models import Base, StateRecordModel

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "Base",
    "StateRecordModel",
]

"""Repository implementations."""

from .memory_state_repository import InMemoryStateRepository
from .sql_state_repository import SqlStateRepository

__all__ = [
    "InMemoryStateRepository",
    "SqlStateRepository",
]

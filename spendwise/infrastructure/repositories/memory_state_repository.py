"""In-memory repository implementation for state collections."""

import copy
from typing import Dict, List, Optional

from spendwise.domain.interfaces import StateRepository


class InMemoryStateRepository(StateRepository):
    """
    Dict-backed repository, used by tests and throwaway sessions.

    Records are deep-copied on the way in and out so callers cannot
    mutate what is "stored".
    """

    def __init__(self, initial: Optional[Dict[str, List[dict]]] = None):
        self._data: Dict[str, List[dict]] = copy.deepcopy(initial or {})
        self.save_count = 0

    async def load(self, collection: str) -> Optional[List[dict]]:
        if collection not in self._data:
            return None
        return copy.deepcopy(self._data[collection])

    async def save(self, collection: str, records: List[dict]) -> None:
        self._data[collection] = copy.deepcopy(records)
        self.save_count += 1

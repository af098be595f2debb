"""
In-memory repository.

Keeps entities in an immutable tuple that is rebuilt on every mutation.
Readers never lock: they always see a complete tuple published by the last
finished mutation. Writers are serialized by an asyncio.Lock so two
concurrent add/update calls cannot both rebuild from the same snapshot.

Every mutation is O(n) in the number of stored entities, which is fine for
the small seeded dataset this service holds.
"""

import asyncio
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from promocode_factory.core.logging_config import get_logger
from promocode_factory.repositories.base import Repository, T


logger = get_logger(__name__)


class InMemoryRepository(Repository[T]):
    """
    Repository backed by process memory.

    Attributes:
        entity_name: Name used in log records (e.g. "Employee")
    """

    def __init__(self, data: Optional[Iterable[T]] = None, entity_name: str = "Entity"):
        """
        Initialize repository with optional initial data.

        Args:
            data: Entities the repository starts with
            entity_name: Name used in log records
        """
        self._data: Tuple[T, ...] = tuple(data or ())
        self._lock = asyncio.Lock()
        self.entity_name = entity_name

    async def get_all(self) -> List[T]:
        return list(self._data)

    async def get_by_id(self, entity_id: UUID) -> Optional[T]:
        return next((item for item in self._data if item.id == entity_id), None)

    async def get_by_ids(self, entity_ids: Optional[Iterable[UUID]]) -> List[T]:
        if not entity_ids:
            return []

        wanted = set(entity_ids)
        return [item for item in self._data if item.id in wanted]

    async def add(self, entity: T) -> None:
        async with self._lock:
            self._data = self._data + (entity,)

        logger.debug(
            f"{self.entity_name} added",
            extra={"entity_id": str(entity.id), "entity_count": len(self._data)}
        )

    async def update(self, entity: T) -> None:
        async with self._lock:
            self._data = tuple(
                entity if item.id == entity.id else item
                for item in self._data
            )

        logger.debug(
            f"{self.entity_name} updated",
            extra={"entity_id": str(entity.id)}
        )

    async def delete(self, entity: T) -> None:
        async with self._lock:
            self._data = tuple(item for item in self._data if item.id != entity.id)

        logger.debug(
            f"{self.entity_name} deleted",
            extra={"entity_id": str(entity.id), "entity_count": len(self._data)}
        )

    def __len__(self) -> int:
        return len(self._data)

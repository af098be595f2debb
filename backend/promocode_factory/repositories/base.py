"""
Repository Interface

Abstract base class defining the storage contract shared by every entity
kind. The contract knows nothing about the business meaning of an entity;
it only relies on the ``id`` attribute of BaseEntity.

Implementation guide:
- All methods must be async
- update/delete on an unknown id are silent no-ops; callers that need
  "not found" semantics check with get_by_id first
- add does not check for duplicate ids
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar
from uuid import UUID

from promocode_factory.models.base import BaseEntity


T = TypeVar("T", bound=BaseEntity)


class Repository(ABC, Generic[T]):
    """
    Abstract repository for entities of a single type.

    Type parameter:
        T: Entity type, must derive from BaseEntity
    """

    @abstractmethod
    async def get_all(self) -> List[T]:
        """
        Return a snapshot of every entity currently held.

        Returns:
            List of entities in insertion order. Mutating the list does not
            affect the repository.
        """
        pass

    @abstractmethod
    async def get_by_id(self, entity_id: UUID) -> Optional[T]:
        """
        Look up a single entity.

        Args:
            entity_id: Identifier to look for

        Returns:
            The entity whose id equals entity_id, or None
        """
        pass

    @abstractmethod
    async def get_by_ids(self, entity_ids: Optional[Iterable[UUID]]) -> List[T]:
        """
        Return every entity whose id is in entity_ids.

        Args:
            entity_ids: Identifiers to look for. None or empty yields [].

        Returns:
            Matching entities in repository order. Unknown ids are skipped.
        """
        pass

    @abstractmethod
    async def add(self, entity: T) -> None:
        """
        Append an entity.

        Args:
            entity: Entity to store. Duplicate ids are not checked.
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> None:
        """
        Replace the entity that has the same id.

        Args:
            entity: New value. If no stored entity has its id, nothing changes.
        """
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """
        Remove the entity that has the same id.

        Args:
            entity: Entity to remove. No-op if it is not stored.
        """
        pass

"""
Base entity shared by every record kept in a repository.

Entities are immutable pydantic models: a change is expressed by building a
new value with ``model_copy(update=...)`` that carries the same ``id``.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class BaseEntity(BaseModel):
    """
    Record with a unique identifier.

    Attributes:
        id: UUID identifier, generated on creation and never changed
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique identifier"
    )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"

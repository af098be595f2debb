"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating storage from business logic.
"""

from promocode_factory.repositories.base import Repository
from promocode_factory.repositories.in_memory import InMemoryRepository

__all__ = [
    "Repository",
    "InMemoryRepository",
]

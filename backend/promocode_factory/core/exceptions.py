"""
Domain exceptions raised by the service layer.

The HTTP layer maps these onto responses in ``promocode_factory.main``:
EntityValidationError -> 400, EntityNotFoundError -> 404.
"""

from typing import Iterable, Optional, Tuple
from uuid import UUID


class PromoCodeFactoryError(Exception):
    """Base exception for PromoCode Factory"""
    pass


class EntityValidationError(PromoCodeFactoryError):
    """Raised when request data for an entity fails validation"""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.message = message
        self.fields: Tuple[str, ...] = tuple(fields or ())


class EntityNotFoundError(PromoCodeFactoryError):
    """Raised when no entity with the requested id exists"""

    def __init__(self, entity_name: str, entity_id: UUID):
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.message = f"{entity_name} with id {entity_id} not found"
        super().__init__(self.message)

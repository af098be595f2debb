"""
Domain entities for PromoCode Factory.

Import entities from this module rather than from the individual files.
"""

from promocode_factory.models.base import BaseEntity
from promocode_factory.models.role import Role
from promocode_factory.models.employee import Employee

__all__ = [
    "BaseEntity",
    "Role",
    "Employee",
]

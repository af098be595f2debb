"""
Employee entity.

An employee references zero or more roles. The role values are embedded in
the employee record as a tuple, so replacing the role sequence means
building a new employee value.
"""

from typing import Tuple

from pydantic import Field

from promocode_factory.models.base import BaseEntity
from promocode_factory.models.role import Role


class Employee(BaseEntity):
    """
    Employee record.

    Attributes:
        first_name: Given name
        last_name: Family name
        email: Contact email
        roles: Ordered roles attached to the employee
        applied_promocodes_count: Number of promo codes the employee applied
    """

    first_name: str
    last_name: str
    email: str
    roles: Tuple[Role, ...] = ()
    applied_promocodes_count: int = Field(default=0, ge=0)

    @property
    def full_name(self) -> str:
        """First and last name joined by a single space."""
        return f"{self.first_name} {self.last_name}"

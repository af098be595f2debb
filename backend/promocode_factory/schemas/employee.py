"""
Pydantic schemas for employee endpoints.

Defines the request bodies for create/update and the short and full
employee views returned by the API.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from promocode_factory.models import Employee
from promocode_factory.schemas.base import CamelModel
from promocode_factory.schemas.role import RoleItemResponse


class EmployeeShortResponse(CamelModel):
    """
    Short employee view used by the list endpoint.

    Attributes:
        id: Employee UUID
        email: Contact email
        full_name: First and last name
    """
    id: UUID
    email: str
    full_name: str

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeShortResponse":
        return cls(id=employee.id, email=employee.email, full_name=employee.full_name)


class EmployeeResponse(CamelModel):
    """
    Full employee view.

    Attributes:
        id: Employee UUID
        email: Contact email
        full_name: First and last name
        roles: Attached roles
        applied_promocodes_count: Number of promo codes the employee applied
    """
    id: UUID
    email: str
    full_name: str
    roles: List[RoleItemResponse] = Field(default_factory=list)
    applied_promocodes_count: int = 0

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            email=employee.email,
            full_name=employee.full_name,
            roles=[RoleItemResponse.model_validate(role) for role in employee.roles],
            applied_promocodes_count=employee.applied_promocodes_count,
        )

    model_config = CamelModel.model_config | {
        "json_schema_extra": {
            "example": {
                "id": "451533d5-d8d5-4a11-9c7b-eb9f14e1a32f",
                "email": "owner@somemail.ru",
                "fullName": "Ivan Sergeev",
                "roles": [
                    {
                        "id": "53729686-a368-4eeb-8bfa-cc69b6050d02",
                        "name": "Admin",
                        "description": "Administrator"
                    }
                ],
                "appliedPromocodesCount": 5
            }
        }
    }


class EmployeeCreateRequest(CamelModel):
    """
    Request schema for creating an employee.

    Required fields are checked by the service so that a missing or blank
    value produces a 400 naming every missing field.
    """
    first_name: Optional[str] = Field(default=None, description="Given name (required)")
    last_name: Optional[str] = Field(default=None, description="Family name (required)")
    email: Optional[str] = Field(default=None, description="Contact email (required)")
    role_ids: Optional[List[UUID]] = Field(
        default=None,
        description="Ids of roles to attach; unknown ids are ignored"
    )

    model_config = CamelModel.model_config | {
        "json_schema_extra": {
            "example": {
                "firstName": "Anna",
                "lastName": "Ivanova",
                "email": "ivanova@somemail.ru",
                "roleIds": ["b0ae7aac-5493-45cd-ad16-87426a5e7665"]
            }
        }
    }


class EmployeeUpdateRequest(CamelModel):
    """
    Request schema for a partial employee update.

    Omitted or null fields keep their stored value. A supplied roleIds list
    replaces the employee's roles; an empty list clears them.
    """
    first_name: Optional[str] = Field(default=None, description="New given name")
    last_name: Optional[str] = Field(default=None, description="New family name")
    email: Optional[str] = Field(default=None, description="New contact email")
    role_ids: Optional[List[UUID]] = Field(
        default=None,
        description="Replacement role ids; unknown ids are ignored"
    )

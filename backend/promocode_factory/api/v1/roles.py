"""
Role endpoints.

Roles are read-only through the API; they are seeded at startup and
referenced by id from employee requests.
"""

from typing import List

from fastapi import APIRouter

from promocode_factory.api.dependencies import EmployeeServiceDep
from promocode_factory.schemas.role import RoleItemResponse

router = APIRouter(tags=["roles"])


@router.get(
    "/roles",
    response_model=List[RoleItemResponse],
    summary="List roles",
    description="Returns every role employees can be assigned.",
)
async def list_roles(service: EmployeeServiceDep) -> List[RoleItemResponse]:
    roles = await service.list_roles()
    return [RoleItemResponse.model_validate(role) for role in roles]

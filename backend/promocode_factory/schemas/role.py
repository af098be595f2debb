from uuid import UUID

from pydantic import Field

from promocode_factory.schemas.base import CamelModel


class RoleItemResponse(CamelModel):
    """Role as embedded in an employee view or listed by /roles."""
    id: UUID = Field(..., description="Role UUID")
    name: str = Field(..., description="Role name")
    description: str = Field(..., description="Role description")

from pydantic import Field

from promocode_factory.models.base import BaseEntity


class Role(BaseEntity):
    """Employee role, e.g. Admin or PartnerManager."""

    name: str = Field(description="Role name")
    description: str = Field(default="", description="Human-readable role description")

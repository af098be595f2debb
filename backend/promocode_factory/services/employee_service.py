"""
Employee Service

Endpoint logic for employee management, kept free of HTTP concerns.

Key features:
- Required-field validation on create
- Role resolution by id through the role repository
- Explicit-presence partial updates: None keeps the stored value,
  a supplied blank string is rejected
- Existence checks before update/delete; the repository itself stays
  permissive and treats unknown ids as no-ops

Errors are raised as EntityValidationError / EntityNotFoundError and mapped
to HTTP responses by the application exception handlers.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID, uuid4

from promocode_factory.core.exceptions import EntityNotFoundError, EntityValidationError
from promocode_factory.models import Employee, Role
from promocode_factory.repositories.base import Repository

logger = logging.getLogger(__name__)


# Required employee fields and how they are named in error messages
REQUIRED_FIELDS = {
    "first_name": "first name",
    "last_name": "last name",
    "email": "email",
}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class EmployeeService:
    """
    Employee CRUD operations over an employee and a role repository.

    The service holds no state of its own; every method is a single
    request/response unit of work.
    """

    def __init__(
        self,
        employee_repository: Repository[Employee],
        role_repository: Repository[Role]
    ):
        """
        Initialize employee service.

        Args:
            employee_repository: Store holding employees
            role_repository: Store used to resolve role ids
        """
        self.employee_repository = employee_repository
        self.role_repository = role_repository

    async def list_employees(self) -> List[Employee]:
        return await self.employee_repository.get_all()

    async def list_roles(self) -> List[Role]:
        return await self.role_repository.get_all()

    async def get_employee(self, employee_id: UUID) -> Employee:
        """
        Fetch a single employee.

        Raises:
            EntityNotFoundError: If no employee has this id
        """
        employee = await self.employee_repository.get_by_id(employee_id)
        if employee is None:
            raise EntityNotFoundError("Employee", employee_id)
        return employee

    async def create_employee(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        role_ids: Optional[Sequence[UUID]] = None
    ) -> Employee:
        """
        Create and store a new employee.

        Args:
            first_name: Required, non-blank
            last_name: Required, non-blank
            email: Required, non-blank
            role_ids: Roles to attach. Ids with no matching role are dropped.

        Returns:
            The stored employee with a freshly generated id

        Raises:
            EntityValidationError: If any required field is missing or blank.
                The message names every missing field.
        """
        values = {"first_name": first_name, "last_name": last_name, "email": email}
        missing = [field for field, value in values.items() if _is_blank(value)]
        if missing:
            raise EntityValidationError(
                "Required fields are missing or blank: "
                + ", ".join(REQUIRED_FIELDS[field] for field in missing),
                fields=missing,
            )

        roles = await self._resolve_roles(role_ids) if role_ids is not None else ()

        employee = Employee(
            id=uuid4(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            roles=roles,
        )
        await self.employee_repository.add(employee)

        logger.info(
            f"Employee created: {employee.full_name}",
            extra={"entity_id": str(employee.id), "role_count": len(roles)}
        )
        return employee

    async def update_employee(
        self,
        employee_id: UUID,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        role_ids: Optional[Sequence[UUID]] = None
    ) -> Employee:
        """
        Apply a partial update to an employee.

        Fields passed as None keep their stored value. A supplied value
        must not be blank. When role_ids is not None the role sequence is
        replaced wholesale; an empty list clears it.

        Returns:
            The updated employee

        Raises:
            EntityNotFoundError: If no employee has this id
            EntityValidationError: If a supplied field is blank

        Note:
            The repository is left untouched when an error is raised.
        """
        employee = await self.get_employee(employee_id)

        supplied = {"first_name": first_name, "last_name": last_name, "email": email}
        blank = [field for field, value in supplied.items() if value is not None and _is_blank(value)]
        if blank:
            raise EntityValidationError(
                "Fields cannot be set to blank values: "
                + ", ".join(REQUIRED_FIELDS[field] for field in blank),
                fields=blank,
            )

        changes: Dict[str, object] = {
            field: value for field, value in supplied.items() if value is not None
        }
        if role_ids is not None:
            changes["roles"] = await self._resolve_roles(role_ids)

        updated = employee.model_copy(update=changes)
        await self.employee_repository.update(updated)

        logger.info(
            f"Employee updated: {updated.full_name}",
            extra={"entity_id": str(updated.id), "changed_fields": sorted(changes)}
        )
        return updated

    async def delete_employee(self, employee_id: UUID) -> None:
        """
        Remove an employee.

        Raises:
            EntityNotFoundError: If no employee has this id
        """
        employee = await self.get_employee(employee_id)
        await self.employee_repository.delete(employee)

        logger.info(
            f"Employee deleted: {employee.full_name}",
            extra={"entity_id": str(employee.id)}
        )

    async def _resolve_roles(self, role_ids: Sequence[UUID]) -> Tuple[Role, ...]:
        requested = set(role_ids)
        roles = tuple(await self.role_repository.get_by_ids(requested))
        if len(roles) != len(requested):
            logger.debug(
                "Unknown role ids dropped",
                extra={"requested": len(requested), "resolved": len(roles)}
            )
        return roles

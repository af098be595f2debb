"""
FastAPI dependency functions.

The repositories and the employee service are created once per application
in ``create_app`` and stored on ``app.state``; these dependencies hand them
to route functions.
"""

from typing import Annotated

from fastapi import Depends, Request

from promocode_factory.models import Employee, Role
from promocode_factory.repositories.base import Repository
from promocode_factory.services.employee_service import EmployeeService


def get_employee_repository(request: Request) -> Repository[Employee]:
    """Return the employee repository of the running application."""
    return request.app.state.employee_repository


def get_role_repository(request: Request) -> Repository[Role]:
    """Return the role repository of the running application."""
    return request.app.state.role_repository


def get_employee_service(
    employee_repository: Annotated[Repository[Employee], Depends(get_employee_repository)],
    role_repository: Annotated[Repository[Role], Depends(get_role_repository)],
) -> EmployeeService:
    """
    Dependency to inject EmployeeService.

    Args:
        employee_repository: Employee store from application state
        role_repository: Role store from application state

    Returns:
        EmployeeService bound to both stores
    """
    return EmployeeService(employee_repository, role_repository)


# Type aliases for dependency injection
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]

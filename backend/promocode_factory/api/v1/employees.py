"""
Employee endpoints.

Provides list/get/create/update/delete for employee records. Domain errors
raised by EmployeeService are turned into 400/404 responses by the
application exception handlers.
"""

from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Response, status

from promocode_factory.api.dependencies import EmployeeServiceDep
from promocode_factory.schemas.employee import (
    EmployeeCreateRequest,
    EmployeeResponse,
    EmployeeShortResponse,
    EmployeeUpdateRequest,
)


router = APIRouter(tags=["employees"])


@router.get(
    "/employees",
    response_model=List[EmployeeShortResponse],
    summary="List employees",
    description="Returns id, email and full name of every employee.",
)
async def list_employees(service: EmployeeServiceDep) -> List[EmployeeShortResponse]:
    employees = await service.list_employees()
    return [EmployeeShortResponse.from_entity(e) for e in employees]


@router.get(
    "/employees/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get employee by ID",
    description="Returns the full employee view including roles.",
)
async def get_employee(employee_id: UUID, service: EmployeeServiceDep) -> EmployeeResponse:
    """
    Get a single employee by ID.

    Raises:
        HTTPException 404: If employee not found
    """
    employee = await service.get_employee(employee_id)
    return EmployeeResponse.from_entity(employee)


@router.post(
    "/employees",
    response_model=EmployeeResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a new employee",
    description="Create an employee with a new id; roleIds are resolved against existing roles.",
)
async def create_employee(
    service: EmployeeServiceDep,
    request: Annotated[Optional[EmployeeCreateRequest], Body()] = None,
) -> EmployeeResponse:
    """
    Create a new employee.

    Args:
        request: First name, last name, email and optional role ids
        service: EmployeeService (from dependency)

    Returns:
        Full view of the created employee

    Raises:
        HTTPException 400: If first name, last name or email is missing or blank
        HTTPException 400: If the body is malformed (e.g. a roleIds entry is not a UUID)
    """
    # A missing body is treated like {} so the 400 names every required field
    if request is None:
        request = EmployeeCreateRequest()
    employee = await service.create_employee(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        role_ids=request.role_ids,
    )
    return EmployeeResponse.from_entity(employee)


@router.put(
    "/employees/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update an employee",
    description="Partially update an employee; omitted fields keep their values.",
)
async def update_employee(
    employee_id: UUID,
    request: EmployeeUpdateRequest,
    service: EmployeeServiceDep,
) -> EmployeeResponse:
    """
    Update an employee.

    Raises:
        HTTPException 400: If a supplied field is blank
        HTTPException 404: If employee not found
    """
    employee = await service.update_employee(
        employee_id,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        role_ids=request.role_ids,
    )
    return EmployeeResponse.from_entity(employee)


@router.delete(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an employee",
)
async def delete_employee(employee_id: UUID, service: EmployeeServiceDep) -> Response:
    """
    Delete an employee.

    Raises:
        HTTPException 404: If employee not found
    """
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

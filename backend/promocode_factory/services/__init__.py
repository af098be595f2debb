"""Business services built on top of the repositories."""

from promocode_factory.services.employee_service import EmployeeService

__all__ = ["EmployeeService"]

"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- Repositories, service and application fixtures
- An httpx AsyncClient bound to the application
"""

import os
import sys
from pathlib import Path
from uuid import UUID

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_JSON"] = "true"
os.environ["SEED_DATA"] = "true"

# Add backend directory to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))


ROLE_5_ID = UUID("00000000-0000-0000-0000-000000000005")
ROLE_6_ID = UUID("00000000-0000-0000-0000-000000000006")
EMPLOYEE_1_ID = UUID("00000000-0000-0000-0000-000000000001")


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture
def roles():
    from promocode_factory.models import Role

    return [
        Role(id=ROLE_5_ID, name="Admin", description="Administrator"),
        Role(id=ROLE_6_ID, name="PartnerManager", description="Partner manager"),
    ]


@pytest.fixture
def employee():
    from promocode_factory.models import Employee

    return Employee(
        id=EMPLOYEE_1_ID,
        first_name="Ivan",
        last_name="Ivanov",
        email="ivanov@somemail.ru",
        roles=[],
    )


@pytest.fixture
def role_repository(roles):
    from promocode_factory.repositories import InMemoryRepository

    return InMemoryRepository(roles, entity_name="Role")


@pytest.fixture
def employee_repository(employee):
    from promocode_factory.repositories import InMemoryRepository

    return InMemoryRepository([employee], entity_name="Employee")


@pytest.fixture
def employee_service(employee_repository, role_repository):
    from promocode_factory.services import EmployeeService

    return EmployeeService(employee_repository, role_repository)


@pytest.fixture
def app(employee_repository, role_repository):
    """
    Application wired to the test repositories.

    Each test gets its own app so state never leaks between tests.
    """
    from promocode_factory.core.config import Settings
    from promocode_factory.main import create_app

    return create_app(
        Settings(seed_data=False),
        employee_repository=employee_repository,
        role_repository=role_repository,
    )


@pytest.fixture
async def client(app):
    """Provide an httpx AsyncClient talking to the app in-process."""
    from httpx import AsyncClient, ASGITransport

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

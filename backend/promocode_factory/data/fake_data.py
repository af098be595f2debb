"""
Seed records loaded into the in-memory repositories at startup.

Ids are fixed so that clients and manual tests can address the seeded
records across restarts.
"""

from typing import List
from uuid import UUID

from promocode_factory.models import Employee, Role


ADMIN_ROLE_ID = UUID("53729686-a368-4eeb-8bfa-cc69b6050d02")
PARTNER_MANAGER_ROLE_ID = UUID("b0ae7aac-5493-45cd-ad16-87426a5e7665")

ADMIN_EMPLOYEE_ID = UUID("451533d5-d8d5-4a11-9c7b-eb9f14e1a32f")
PARTNER_MANAGER_EMPLOYEE_ID = UUID("f766e2bf-340a-46ea-bff3-f1700b435895")


def fake_roles() -> List[Role]:
    """Build the Admin and PartnerManager roles."""
    return [
        Role(
            id=ADMIN_ROLE_ID,
            name="Admin",
            description="Administrator",
        ),
        Role(
            id=PARTNER_MANAGER_ROLE_ID,
            name="PartnerManager",
            description="Partner manager",
        ),
    ]


def fake_employees() -> List[Employee]:
    """Build one employee per seeded role."""
    roles = {role.id: role for role in fake_roles()}
    return [
        Employee(
            id=ADMIN_EMPLOYEE_ID,
            first_name="Ivan",
            last_name="Sergeev",
            email="owner@somemail.ru",
            roles=[roles[ADMIN_ROLE_ID]],
            applied_promocodes_count=5,
        ),
        Employee(
            id=PARTNER_MANAGER_EMPLOYEE_ID,
            first_name="Petr",
            last_name="Andreev",
            email="andreev@somemail.ru",
            roles=[roles[PARTNER_MANAGER_ROLE_ID]],
            applied_promocodes_count=10,
        ),
    ]

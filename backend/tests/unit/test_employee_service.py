"""
Unit tests for EmployeeService.

Covers validation on create, explicit-presence updates, role resolution
and not-found handling. Tests follow AAA (Arrange, Act, Assert) pattern.
"""

from uuid import uuid4

import pytest

from promocode_factory.core.exceptions import EntityNotFoundError, EntityValidationError

from tests.conftest import EMPLOYEE_1_ID, ROLE_5_ID, ROLE_6_ID


class TestGetAndList:

    @pytest.mark.anyio
    async def test_list_employees(self, employee_service, employee):
        assert await employee_service.list_employees() == [employee]

    @pytest.mark.anyio
    async def test_list_roles(self, employee_service, roles):
        assert await employee_service.list_roles() == roles

    @pytest.mark.anyio
    async def test_get_employee(self, employee_service, employee):
        assert await employee_service.get_employee(EMPLOYEE_1_ID) == employee

    @pytest.mark.anyio
    async def test_get_missing_employee(self, employee_service):
        missing_id = uuid4()

        with pytest.raises(EntityNotFoundError) as exc_info:
            await employee_service.get_employee(missing_id)

        assert exc_info.value.entity_id == missing_id
        assert str(missing_id) in str(exc_info.value)


class TestCreate:

    @pytest.mark.anyio
    async def test_create_with_roles(self, employee_service, employee_repository, roles):
        # Act
        created = await employee_service.create_employee(
            first_name="Petr",
            last_name="Andreev",
            email="andreev@somemail.ru",
            role_ids=[ROLE_5_ID],
        )

        # Assert
        assert created.id != EMPLOYEE_1_ID
        assert created.full_name == "Petr Andreev"
        assert created.roles == (roles[0],)
        assert await employee_repository.get_by_id(created.id) == created

    @pytest.mark.anyio
    async def test_create_drops_unknown_role_ids(self, employee_service, roles):
        created = await employee_service.create_employee(
            "Petr", "Andreev", "andreev@somemail.ru", role_ids=[uuid4(), ROLE_6_ID]
        )

        assert created.roles == (roles[1],)

    @pytest.mark.anyio
    async def test_create_without_roles(self, employee_service):
        created = await employee_service.create_employee("Petr", "Andreev", "andreev@somemail.ru")

        assert created.roles == ()

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "first_name, last_name, email, missing",
        [
            ("", "Ivanov", "a@b.c", ("first_name",)),
            ("Ivan", "   ", "a@b.c", ("last_name",)),
            ("Ivan", "Ivanov", None, ("email",)),
            (None, None, None, ("first_name", "last_name", "email")),
        ],
    )
    async def test_create_blank_required_field(
        self, employee_service, employee_repository, first_name, last_name, email, missing
    ):
        # Act
        with pytest.raises(EntityValidationError) as exc_info:
            await employee_service.create_employee(first_name, last_name, email, role_ids=[ROLE_5_ID])

        # Assert
        assert exc_info.value.fields == missing
        assert len(await employee_repository.get_all()) == 1

    @pytest.mark.anyio
    async def test_create_error_names_missing_fields(self, employee_service):
        with pytest.raises(EntityValidationError) as exc_info:
            await employee_service.create_employee("", "", "a@b.c")

        assert "first name" in exc_info.value.message
        assert "last name" in exc_info.value.message
        assert "email" not in exc_info.value.message


class TestUpdate:

    @pytest.mark.anyio
    async def test_update_replaces_empty_roles(self, employee_service, employee_repository, roles):
        # Arrange: employee starts with no roles

        # Act
        updated = await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[ROLE_5_ID, ROLE_6_ID])

        # Assert
        assert updated.roles == tuple(roles)
        assert (await employee_repository.get_by_id(EMPLOYEE_1_ID)).roles == tuple(roles)

    @pytest.mark.anyio
    async def test_update_replaces_not_merges_roles(self, employee_service):
        await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[ROLE_5_ID])

        updated = await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[ROLE_6_ID])

        assert [role.id for role in updated.roles] == [ROLE_6_ID]

    @pytest.mark.anyio
    async def test_update_empty_role_list_clears_roles(self, employee_service):
        await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[ROLE_5_ID])

        updated = await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[])

        assert updated.roles == ()

    @pytest.mark.anyio
    async def test_update_without_role_ids_keeps_roles(self, employee_service):
        await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[ROLE_5_ID])

        updated = await employee_service.update_employee(EMPLOYEE_1_ID, email="new@somemail.ru")

        assert [role.id for role in updated.roles] == [ROLE_5_ID]

    @pytest.mark.anyio
    async def test_partial_update_keeps_omitted_fields(self, employee_service, employee):
        updated = await employee_service.update_employee(EMPLOYEE_1_ID, first_name="Ioann")

        assert updated.first_name == "Ioann"
        assert updated.last_name == employee.last_name
        assert updated.email == employee.email
        assert updated.id == employee.id

    @pytest.mark.anyio
    async def test_update_blank_field_rejected(self, employee_service, employee_repository, employee):
        # Act
        with pytest.raises(EntityValidationError) as exc_info:
            await employee_service.update_employee(EMPLOYEE_1_ID, first_name="", email="x@y.z")

        # Assert: nothing written
        assert exc_info.value.fields == ("first_name",)
        assert await employee_repository.get_by_id(EMPLOYEE_1_ID) == employee

    @pytest.mark.anyio
    async def test_update_missing_employee(self, employee_service, employee_repository, employee):
        # Act
        with pytest.raises(EntityNotFoundError):
            await employee_service.update_employee(uuid4(), first_name="Ghost", role_ids=[ROLE_5_ID])

        # Assert
        assert await employee_repository.get_all() == [employee]


class TestDelete:

    @pytest.mark.anyio
    async def test_delete_existing(self, employee_service, employee_repository):
        await employee_service.delete_employee(EMPLOYEE_1_ID)

        assert await employee_repository.get_by_id(EMPLOYEE_1_ID) is None
        assert await employee_repository.get_all() == []

    @pytest.mark.anyio
    async def test_delete_missing(self, employee_service, employee_repository, employee):
        with pytest.raises(EntityNotFoundError):
            await employee_service.delete_employee(uuid4())

        assert await employee_repository.get_all() == [employee]


class TestStoredValues:

    @pytest.mark.anyio
    async def test_fetched_employee_cannot_change_stored_roles(
        self, employee_service, employee_repository
    ):
        # Arrange
        await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[ROLE_5_ID])
        fetched = await employee_service.get_employee(EMPLOYEE_1_ID)

        # Act
        with pytest.raises(AttributeError):
            fetched.roles.append(fetched.roles[0])

        # Assert
        stored = await employee_repository.get_by_id(EMPLOYEE_1_ID)
        assert [role.id for role in stored.roles] == [ROLE_5_ID]

    @pytest.mark.anyio
    async def test_update_without_roles_does_not_share_mutable_state(
        self, employee_service, employee_repository
    ):
        # Arrange
        before = await employee_service.update_employee(EMPLOYEE_1_ID, role_ids=[ROLE_5_ID, ROLE_6_ID])

        # Act
        after = await employee_service.update_employee(EMPLOYEE_1_ID, first_name="Ioann")

        # Assert
        assert isinstance(after.roles, tuple)
        assert after.roles == before.roles
        assert (await employee_repository.get_by_id(EMPLOYEE_1_ID)).first_name == "Ioann"


class TestRoleResolution:

    @pytest.mark.anyio
    async def test_duplicate_role_ids_are_not_reported_as_unknown(self, employee_service, caplog):
        # Act
        with caplog.at_level("DEBUG", logger="promocode_factory.services.employee_service"):
            created = await employee_service.create_employee(
                "Petr", "Andreev", "andreev@somemail.ru", role_ids=[ROLE_5_ID, ROLE_5_ID]
            )

        # Assert
        assert [role.id for role in created.roles] == [ROLE_5_ID]
        assert "Unknown role ids dropped" not in caplog.messages

    @pytest.mark.anyio
    async def test_unknown_role_ids_are_logged(self, employee_service, caplog):
        with caplog.at_level("DEBUG", logger="promocode_factory.services.employee_service"):
            await employee_service.create_employee(
                "Petr", "Andreev", "andreev@somemail.ru", role_ids=[ROLE_5_ID, uuid4()]
            )

        record = next(r for r in caplog.records if r.getMessage() == "Unknown role ids dropped")
        assert record.requested == 2
        assert record.resolved == 1

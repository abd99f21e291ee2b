"""Tests for EmployeeService against a mocked repository."""

import pytest
from sqlalchemy.exc import OperationalError

from app.exceptions import EmployeeNotFoundError
from app.models import EmployeeORM
from app.schemas import EmployeeIn
from app.service import EmployeeService


def make_payload(**overrides):
    data = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "location": "London",
        "email": "ada@x.com",
    }
    data.update(overrides)
    return EmployeeIn.model_validate(data)


@pytest.mark.asyncio
async def test_list_employees_delegates_to_repository(mock_repository, stored_employee):
    mock_repository.find_all.return_value = [stored_employee]
    service = EmployeeService(mock_repository)

    result = await service.list_employees()

    assert result == [stored_employee]
    mock_repository.find_all.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_employee_never_passes_client_id(mock_repository):
    service = EmployeeService(mock_repository)

    employee = await service.create_employee(make_payload(id=42))

    saved = mock_repository.save.await_args.args[0]
    assert isinstance(saved, EmployeeORM)
    assert saved.first_name == "Ada"
    assert saved.email == "ada@x.com"
    assert employee.id == 1


@pytest.mark.asyncio
async def test_get_employee_found(mock_repository, stored_employee):
    mock_repository.find_by_id.return_value = stored_employee
    service = EmployeeService(mock_repository)

    result = await service.get_employee(7)

    assert result is stored_employee
    mock_repository.find_by_id.assert_awaited_once_with(7)


@pytest.mark.asyncio
async def test_get_employee_missing_raises_not_found(mock_repository):
    service = EmployeeService(mock_repository)

    with pytest.raises(EmployeeNotFoundError) as exc_info:
        await service.get_employee(99999)

    assert exc_info.value.employee_id == 99999
    assert str(exc_info.value) == "Not found"


@pytest.mark.asyncio
async def test_update_employee_overwrites_all_fields_but_id(mock_repository, stored_employee):
    mock_repository.find_by_id.return_value = stored_employee
    service = EmployeeService(mock_repository)

    result = await service.update_employee(
        7, make_payload(id=500, firstName="Ada2", location="")
    )

    assert result.id == 7
    assert result.first_name == "Ada2"
    assert result.last_name == "Lovelace"
    assert result.location == ""
    assert result.email == "ada@x.com"
    mock_repository.save.assert_awaited_once_with(stored_employee)


@pytest.mark.asyncio
async def test_update_employee_missing_does_not_save(mock_repository):
    service = EmployeeService(mock_repository)

    with pytest.raises(EmployeeNotFoundError):
        await service.update_employee(3, make_payload())

    mock_repository.save.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_employee_returns_removed_record(mock_repository, stored_employee):
    mock_repository.find_by_id.return_value = stored_employee
    service = EmployeeService(mock_repository)

    result = await service.delete_employee(7)

    assert result is stored_employee
    assert result.first_name == "Grace"
    mock_repository.delete.assert_awaited_once_with(stored_employee)


@pytest.mark.asyncio
async def test_delete_employee_missing_does_not_delete(mock_repository):
    service = EmployeeService(mock_repository)

    with pytest.raises(EmployeeNotFoundError):
        await service.delete_employee(3)

    mock_repository.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_store_failure_propagates(mock_repository):
    mock_repository.find_by_id.side_effect = OperationalError("SELECT", {}, Exception("db down"))
    service = EmployeeService(mock_repository)

    with pytest.raises(OperationalError):
        await service.get_employee(1)

"""Employee operations on top of the repository."""

from typing import List

import structlog

from app.exceptions import EmployeeNotFoundError
from app.models import EmployeeORM
from app.repository import EmployeeRepository
from app.schemas import EmployeeIn

logger = structlog.get_logger(__name__)


class EmployeeService:
    """
    List, create, fetch, update and delete employees.

    The repository is handed in at construction; the service keeps no other
    state. Lookups by id that find nothing raise EmployeeNotFoundError and
    the HTTP layer turns that into a 404.
    """

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    async def list_employees(self) -> List[EmployeeORM]:
        return await self.repository.find_all()

    async def create_employee(self, payload: EmployeeIn) -> EmployeeORM:
        # id is always assigned by the store
        employee = EmployeeORM(
            first_name=payload.first_name,
            last_name=payload.last_name,
            location=payload.location,
            email=payload.email,
        )
        employee = await self.repository.save(employee)
        logger.info("Employee created", employee_id=employee.id)
        return employee

    async def get_employee(self, employee_id: int) -> EmployeeORM:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def update_employee(self, employee_id: int, payload: EmployeeIn) -> EmployeeORM:
        """Overwrite all four mutable fields; no partial update."""
        employee = await self.get_employee(employee_id)

        employee.first_name = payload.first_name
        employee.last_name = payload.last_name
        employee.location = payload.location
        employee.email = payload.email

        employee = await self.repository.save(employee)
        logger.info("Employee updated", employee_id=employee.id)
        return employee

    async def delete_employee(self, employee_id: int) -> EmployeeORM:
        """Hard delete. Returns the record as it was before removal."""
        employee = await self.get_employee(employee_id)
        await self.repository.delete(employee)
        logger.info("Employee deleted", employee_id=employee_id)
        return employee

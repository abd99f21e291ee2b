"""Persistence for employee records."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import SERVICE_NAME
from app.models import EmployeeORM
from app.observability import track_db_operation

TABLE = EmployeeORM.__tablename__


class EmployeeRepository:
    """Keyed storage for employees on top of one async session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @track_db_operation("select", TABLE, SERVICE_NAME)
    async def find_all(self) -> List[EmployeeORM]:
        result = await self.session.execute(select(EmployeeORM).order_by(EmployeeORM.id))
        return list(result.scalars().all())

    @track_db_operation("get", TABLE, SERVICE_NAME)
    async def find_by_id(self, employee_id: int) -> Optional[EmployeeORM]:
        return await self.session.get(EmployeeORM, employee_id)

    @track_db_operation("save", TABLE, SERVICE_NAME)
    async def save(self, employee: EmployeeORM) -> EmployeeORM:
        """Insert or update, then reload so generated values are populated."""
        self.session.add(employee)
        await self.session.commit()
        await self.session.refresh(employee)
        return employee

    @track_db_operation("delete", TABLE, SERVICE_NAME)
    async def delete(self, employee: EmployeeORM) -> None:
        await self.session.delete(employee)
        await self.session.commit()

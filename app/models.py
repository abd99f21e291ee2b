"""Employee database models."""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db import Base


class EmployeeORM(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[Optional[str]] = mapped_column("first_name", String(255), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column("last_name", String(255), nullable=True)
    location: Mapped[Optional[str]] = mapped_column("location", String(255), nullable=True)
    # Attribute is "email"; the column keeps its own name.
    email: Mapped[Optional[str]] = mapped_column("email_address", String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<EmployeeORM id={self.id} email={self.email!r}>"

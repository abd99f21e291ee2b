"""Request and response payloads for the employee API."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmployeeBase(BaseModel):
    # camelCase on the wire, snake_case in Python; both accepted on input.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None


class EmployeeIn(EmployeeBase):
    """Payload for create and update.

    Numbers are bound as strings ({"firstName": 123} stores "123"). A
    client-sent id of any type is accepted and never used.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Any = None


class EmployeeOut(EmployeeBase):
    id: int

"""
Custom exceptions for the employee service layer.
"""


class EmployeeServiceError(Exception):
    """Base class for exceptions raised by the employee service."""
    pass


class EmployeeNotFoundError(EmployeeServiceError):
    """Raised when no employee exists for the requested id."""

    message = "Not found"

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(self.message)

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingRequiredFieldError(ValidationError):
    """Raised when a required attendance field is absent."""

    def __init__(self, *field_names: str):
        self.field_names = field_names
        super().__init__(f"{', '.join(field_names)} required")


class NoShiftAssignedError(ValidationError):
    """Raised when an employee has no active shift assignment."""

    def __init__(self, employee_id: Optional[int] = None):
        self.employee_id = employee_id
        who = f"Employee {employee_id}" if employee_id is not None else "Employee"
        super().__init__(f"{who} has no active shift assigned")


class ShiftNotAssignedOrInactiveError(ValidationError):
    """Raised when manual mode names a shift the employee is not actively assigned to."""

    def __init__(self, employee_id: int, shift_id: int):
        self.employee_id = employee_id
        self.shift_id = shift_id
        super().__init__(f"Employee {employee_id} is not assigned to shift {shift_id} or the shift is inactive")


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class RecordNotFoundError(NotFoundError):
    def __init__(self, attendance_id: int):
        self.attendance_id = attendance_id
        super().__init__(f"Attendance record {attendance_id} not found")

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ShiftDefinition


class ShiftCatalog(Protocol):
    """Read-only view of the shifts an employee is assigned to."""

    def list_active_assignments(self, employee_id: int) -> Sequence[ShiftDefinition]:
        """Active shifts of the employee, ascending by start time."""

        raise NotImplementedError

    def get_assignment(self, employee_id: int, shift_id: int) -> Optional[ShiftDefinition]:
        """The shift if the employee is actively assigned to it."""

        raise NotImplementedError

    def get_primary_assignment(self, employee_id: int) -> Optional[ShiftDefinition]:
        """First active assignment in assignment order (used on checkout)."""

        raise NotImplementedError

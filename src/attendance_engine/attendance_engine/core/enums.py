from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status values as stored in the database."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"


class ShiftStatus(str, Enum):
    """Lifecycle flag of a shift definition."""

    ACTIVE = "active"
    INACTIVE = "inactive"

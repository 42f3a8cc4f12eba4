from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        fingerprint_id: str,
        in_time: datetime,
        out_time: Optional[datetime],
        shift: str,
        status: AttendanceStatus,
        in_user: int = 1,
        out_user: int = 0,
        in_approval: int = 1,
        out_approval: int = 0,
    ) -> int:
        raise NotImplementedError

    def update_status(
        self,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        in_time: Optional[datetime] = None,
        out_time: Optional[datetime] = None,
    ) -> bool:
        """Write status and any supplied times.

        A supplied ``out_time`` also marks the checkout as captured and approved.
        """

        raise NotImplementedError

    def update_edit_times(
        self,
        *,
        attendance_id: int,
        edit_in_time: Optional[datetime],
        edit_out_time: Optional[datetime],
    ) -> bool:
        """Overwrite the supplied supervisor-corrected times; status is untouched."""

        raise NotImplementedError

    def update_approvals(
        self,
        *,
        attendance_id: int,
        in_approval: Optional[int],
        out_approval: Optional[int],
    ) -> bool:
        """Overwrite only the approval flags that were supplied."""

        raise NotImplementedError

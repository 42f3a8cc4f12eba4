from __future__ import annotations

from dataclasses import replace
from datetime import datetime, time
from typing import Optional

import pytest

from src.attendance_engine.attendance_engine.attendance.model import AttendanceRecord
from src.attendance_engine.attendance_engine.attendance.service import AttendanceService
from src.attendance_engine.attendance_engine.core.enums import AttendanceStatus
from src.attendance_engine.attendance_engine.shifts.model import ShiftDefinition


class InMemoryShiftCatalog:
    """Assignments kept in insertion order, like assignment ids."""

    def __init__(self, assignments: dict[int, list[ShiftDefinition]] | None = None):
        self._assignments = assignments or {}

    def list_active_assignments(self, employee_id: int):
        shifts = [s for s in self._assignments.get(employee_id, []) if s.is_active]
        return sorted(shifts, key=lambda s: s.start_time)

    def get_assignment(self, employee_id: int, shift_id: int) -> Optional[ShiftDefinition]:
        for s in self._assignments.get(employee_id, []):
            if s.shift_id == shift_id and s.is_active:
                return s
        return None

    def get_primary_assignment(self, employee_id: int) -> Optional[ShiftDefinition]:
        for s in self._assignments.get(employee_id, []):
            if s.is_active:
                return s
        return None


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self.records.get(attendance_id)

    def create(self, *, employee_id, fingerprint_id, in_time, out_time, shift, status,
               in_user=1, out_user=0, in_approval=1, out_approval=0) -> int:
        self._id += 1
        self.records[self._id] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            fingerprint_id=fingerprint_id,
            in_time=in_time,
            out_time=out_time,
            shift=shift,
            status=status,
            in_user=in_user,
            out_user=out_user,
            in_approval=in_approval,
            out_approval=out_approval,
        )
        return self._id

    def _replace(self, attendance_id: int, **changes) -> bool:
        rec = self.records.get(attendance_id)
        if rec is None:
            return False
        self.records[attendance_id] = replace(rec, **changes)
        return True

    def update_status(self, *, attendance_id, status, in_time=None, out_time=None) -> bool:
        changes = {"status": status}
        if out_time is not None:
            changes.update(out_time=out_time, out_user=1, out_approval=1)
        if in_time is not None:
            changes["in_time"] = in_time
        return self._replace(attendance_id, **changes)

    def update_edit_times(self, *, attendance_id, edit_in_time, edit_out_time) -> bool:
        changes = {}
        if edit_in_time is not None:
            changes["edit_in_time"] = edit_in_time
        if edit_out_time is not None:
            changes["edit_out_time"] = edit_out_time
        return self._replace(attendance_id, **changes)

    def update_approvals(self, *, attendance_id, in_approval, out_approval) -> bool:
        changes = {}
        if in_approval is not None:
            changes["in_approval"] = in_approval
        if out_approval is not None:
            changes["out_approval"] = out_approval
        return self._replace(attendance_id, **changes)

    def seed(self, *, employee_id: int, in_time: datetime, status: AttendanceStatus, shift: str = "Day") -> int:
        return self.create(
            employee_id=employee_id,
            fingerprint_id="FP-1",
            in_time=in_time,
            out_time=None,
            shift=shift,
            status=status,
        )


@pytest.fixture
def day_shift() -> ShiftDefinition:
    return ShiftDefinition(shift_id=1, shift_type="Day", start_time=time(9, 0), end_time=time(17, 0), max_arrival_delay=15)


@pytest.fixture
def evening_shift() -> ShiftDefinition:
    return ShiftDefinition(shift_id=2, shift_type="Evening", start_time=time(14, 0), end_time=time(22, 0), max_arrival_delay=10)


@pytest.fixture
def night_shift() -> ShiftDefinition:
    return ShiftDefinition(shift_id=3, shift_type="Night", start_time=time(22, 0), end_time=time(6, 0), max_arrival_delay=15)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def catalog(day_shift, evening_shift, night_shift) -> InMemoryShiftCatalog:
    return InMemoryShiftCatalog({1: [day_shift, evening_shift], 2: [night_shift]})


@pytest.fixture
def service(attendance_repo, catalog) -> AttendanceService:
    return AttendanceService(attendance_repo, catalog)

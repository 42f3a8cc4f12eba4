from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.validators import require_any, require_present
from ..core.constants import SHIFT_REASON_MANUAL
from ..core.enums import AttendanceStatus
from ..core.exceptions import NoShiftAssignedError, RecordNotFoundError, ShiftNotAssignedOrInactiveError
from ..shifts.matcher import ShiftMatcher
from ..shifts.model import ShiftDefinition
from ..shifts.repository import ShiftCatalog
from .classifier import AttendanceClassifier, Classification
from .model import AttendanceEntry, AttendanceRecord, AttendanceResult, StatusUpdate, StatusUpdateResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Creates and amends attendance records.

    Both creation modes share the classifier; they differ only in how the
    shift is chosen (matcher vs. the caller's shift id).
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        shifts: ShiftCatalog,
        *,
        matcher: ShiftMatcher | None = None,
        classifier: AttendanceClassifier | None = None,
    ):
        self._attendance = attendance
        self._shifts = shifts
        self._matcher = matcher or ShiftMatcher()
        self._classifier = classifier or AttendanceClassifier()

    def record_attendance(self, entry: AttendanceEntry) -> AttendanceResult:
        require_present(
            employee_id=entry.employee_id,
            fingerprint_id=entry.fingerprint_id,
            in_time=entry.in_time,
        )

        shifts = self._shifts.list_active_assignments(entry.employee_id)
        if not shifts:
            raise NoShiftAssignedError(entry.employee_id)

        match = self._matcher.match(shifts, entry.in_time, employee_id=entry.employee_id)
        classification = self._classifier.classify(match.shift, entry.in_time, entry.out_time, reason=match.reason)
        attendance_id = self._persist(entry, match.shift, classification)

        return AttendanceResult(
            attendance_id=attendance_id,
            status=classification.status,
            shift=match.shift.summary(),
            timing=classification.timing,
            employee_shifts=tuple(s.summary() for s in shifts),
        )

    def record_attendance_with_shift(self, entry: AttendanceEntry) -> AttendanceResult:
        require_present(
            employee_id=entry.employee_id,
            fingerprint_id=entry.fingerprint_id,
            in_time=entry.in_time,
            shift_id=entry.shift_id,
        )

        shift = self._shifts.get_assignment(entry.employee_id, entry.shift_id)
        if shift is None or not shift.is_active:
            raise ShiftNotAssignedOrInactiveError(entry.employee_id, entry.shift_id)

        classification = self._classifier.classify(shift, entry.in_time, entry.out_time, reason=SHIFT_REASON_MANUAL)
        attendance_id = self._persist(entry, shift, classification)

        return AttendanceResult(
            attendance_id=attendance_id,
            status=classification.status,
            shift=shift.summary(),
            timing=classification.timing,
        )

    def update_status(self, attendance_id: int, update: StatusUpdate) -> StatusUpdateResult:
        record = self._attendance.get_by_id(attendance_id)
        if record is None:
            raise RecordNotFoundError(attendance_id)

        if update.status is not None:
            new_status = update.status
            logger.info("Attendance %s status overridden to %s", attendance_id, new_status.value)
        elif update.out_time is not None:
            new_status = self._status_after_checkout(record, update)
        else:
            new_status = record.status

        affected = self._attendance.update_status(
            attendance_id=attendance_id,
            status=new_status,
            in_time=update.in_time,
            out_time=update.out_time,
        )
        if not affected:
            raise RecordNotFoundError(attendance_id)
        return StatusUpdateResult(status=new_status, affected=affected)

    def update_edit_times(
        self,
        attendance_id: int,
        *,
        edit_in_time: Optional[datetime] = None,
        edit_out_time: Optional[datetime] = None,
    ) -> None:
        require_any(edit_in_time=edit_in_time, edit_out_time=edit_out_time)
        updated = self._attendance.update_edit_times(
            attendance_id=attendance_id,
            edit_in_time=edit_in_time,
            edit_out_time=edit_out_time,
        )
        if not updated:
            raise RecordNotFoundError(attendance_id)

    def update_approvals(
        self,
        attendance_id: int,
        *,
        in_approval: Optional[int] = None,
        out_approval: Optional[int] = None,
    ) -> None:
        require_any(in_approval=in_approval, out_approval=out_approval)
        updated = self._attendance.update_approvals(
            attendance_id=attendance_id,
            in_approval=None if in_approval is None else int(bool(in_approval)),
            out_approval=None if out_approval is None else int(bool(out_approval)),
        )
        if not updated:
            raise RecordNotFoundError(attendance_id)

    def get_record(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if record is None:
            raise RecordNotFoundError(attendance_id)
        return record

    def _status_after_checkout(self, record: AttendanceRecord, update: StatusUpdate) -> AttendanceStatus:
        # Arrival classification is settled by now; only Present -> Half Day can happen.
        shift = self._shifts.get_primary_assignment(record.employee_id)
        if shift is None:
            logger.debug("Employee %s has no active shift; keeping status of %s", record.employee_id, record.attendance_id)
            return record.status
        return self._classifier.apply_departure(
            shift,
            record.status,
            update.out_time,
            arrival=update.in_time or record.in_time,
        )

    def _persist(self, entry: AttendanceEntry, shift: ShiftDefinition, classification: Classification) -> int:
        attendance_id = self._attendance.create(
            employee_id=entry.employee_id,
            fingerprint_id=entry.fingerprint_id,
            in_time=entry.in_time,
            out_time=entry.out_time,
            shift=entry.shift or shift.shift_type,
            status=classification.status,
            in_user=entry.in_user,
            out_user=entry.out_user,
            in_approval=entry.in_approval,
            out_approval=entry.out_approval,
        )
        logger.info(
            "Attendance %s: employee %s on shift %s -> %s (%s)",
            attendance_id,
            entry.employee_id,
            shift.shift_id,
            classification.status.value,
            classification.timing.shift_selection_reason,
        )
        return attendance_id

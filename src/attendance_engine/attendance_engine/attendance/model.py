from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import format_clock, parse_iso_datetime
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..shifts.model import ShiftSummary


def _optional_int(payload: Mapping[str, Any], key: str) -> Optional[int]:
    value = payload.get(key)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{key} must be an integer") from exc


def parse_flag(payload: Mapping[str, Any], key: str, default: Optional[int]) -> Optional[int]:
    value = payload.get(key)
    if value is None:
        return default
    try:
        return 1 if int(value) else 0
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{key} must be 0 or 1") from exc


def parse_status(value: Any) -> Optional[AttendanceStatus]:
    if value is None or value == "":
        return None
    try:
        return AttendanceStatus(value)
    except ValueError as exc:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"attendance_status must be one of: {allowed}") from exc


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in (and eventual clock-out) of an employee."""

    attendance_id: int
    employee_id: int
    fingerprint_id: str
    in_time: datetime
    out_time: Optional[datetime]
    shift: str
    status: AttendanceStatus
    in_user: int = 1
    out_user: int = 0
    in_approval: int = 1
    out_approval: int = 0
    edit_in_time: Optional[datetime] = None
    edit_out_time: Optional[datetime] = None

    def to_dict(self) -> dict:
        def iso(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value else None

        return {
            "id": self.attendance_id,
            "employee_id": self.employee_id,
            "fingerprint_id": self.fingerprint_id,
            "in_time": iso(self.in_time),
            "out_time": iso(self.out_time),
            "in_user": self.in_user,
            "out_user": self.out_user,
            "in_approval": self.in_approval,
            "out_approval": self.out_approval,
            "shift": self.shift,
            "attendance_status": self.status.value,
            "edit_in_time": iso(self.edit_in_time),
            "edit_out_time": iso(self.edit_out_time),
        }


@dataclass(frozen=True)
class AttendanceEntry:
    """A clock-in as submitted by a device or an operator.

    ``shift_id`` is only read in manual-shift mode; ``shift`` overrides the
    label stored on the record.
    """

    employee_id: Optional[int]
    fingerprint_id: Optional[str]
    in_time: Optional[datetime]
    out_time: Optional[datetime] = None
    shift_id: Optional[int] = None
    shift: Optional[str] = None
    in_user: int = 1
    out_user: int = 0
    in_approval: int = 1
    out_approval: int = 0

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AttendanceEntry":
        fingerprint = payload.get("fingerprint_id")
        return cls(
            employee_id=_optional_int(payload, "employee_id"),
            fingerprint_id=str(fingerprint) if fingerprint not in (None, "") else None,
            in_time=parse_iso_datetime(payload.get("in_time"), "in_time"),
            out_time=parse_iso_datetime(payload.get("out_time"), "out_time"),
            shift_id=_optional_int(payload, "shift_id"),
            shift=payload.get("shift") or None,
            in_user=parse_flag(payload, "in_user", 1),
            out_user=parse_flag(payload, "out_user", 0),
            in_approval=parse_flag(payload, "in_approval", 1),
            out_approval=parse_flag(payload, "out_approval", 0),
        )


@dataclass(frozen=True)
class StatusUpdate:
    """Checkout or correction applied to an existing record."""

    out_time: Optional[datetime] = None
    in_time: Optional[datetime] = None
    status: Optional[AttendanceStatus] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StatusUpdate":
        return cls(
            out_time=parse_iso_datetime(payload.get("out_time"), "out_time"),
            in_time=parse_iso_datetime(payload.get("in_time"), "in_time"),
            status=parse_status(payload.get("attendance_status", payload.get("status"))),
        )


@dataclass(frozen=True)
class ArrivalWindow:
    expected: datetime
    allowed: datetime
    actual: datetime

    @property
    def delay_minutes(self) -> int:
        """Whole minutes past the expected start, never negative."""
        return max(0, math.floor((self.actual - self.expected).total_seconds() / 60))


@dataclass(frozen=True)
class TimingAnalysis:
    """Audit breakdown of how an arrival was judged."""

    expected_arrival: str
    allowed_arrival: str
    actual_arrival: str
    delay_minutes: int
    shift_selection_reason: str
    status_reason: Optional[str] = None

    @classmethod
    def from_window(cls, window: ArrivalWindow, *, reason: str, status_reason: Optional[str] = None) -> "TimingAnalysis":
        return cls(
            expected_arrival=format_clock(window.expected),
            allowed_arrival=format_clock(window.allowed),
            actual_arrival=format_clock(window.actual),
            delay_minutes=window.delay_minutes,
            shift_selection_reason=reason,
            status_reason=status_reason,
        )

    def to_dict(self) -> dict:
        return {
            "expected_arrival": self.expected_arrival,
            "allowed_arrival": self.allowed_arrival,
            "actual_arrival": self.actual_arrival,
            "delay_minutes": self.delay_minutes,
            "shift_selection_reason": self.shift_selection_reason,
            "status_reason": self.status_reason,
        }


@dataclass(frozen=True)
class AttendanceResult:
    attendance_id: int
    status: AttendanceStatus
    shift: ShiftSummary
    timing: TimingAnalysis
    employee_shifts: Sequence[ShiftSummary] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        data = {
            "id": self.attendance_id,
            "attendance_status": self.status.value,
            "selected_shift": self.shift.to_dict(),
            "timing_analysis": self.timing.to_dict(),
        }
        if self.employee_shifts:
            data["all_employee_shifts"] = [s.to_dict() for s in self.employee_shifts]
        return data


@dataclass(frozen=True)
class StatusUpdateResult:
    status: AttendanceStatus
    affected: bool

    def to_dict(self) -> dict:
        return {"attendance_status": self.status.value, "affected": self.affected}

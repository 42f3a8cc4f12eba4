from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import DepartureStrategy, StatusDecision


class EarlyLeaveStrategy(DepartureStrategy):
    """Early departure after an on-time arrival (only chosen for Present)."""

    def decide(self, *, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY, note="Left more than the allowed margin before shift end")

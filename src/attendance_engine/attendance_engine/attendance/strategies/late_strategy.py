from __future__ import annotations

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftDefinition
from ..model import ArrivalWindow
from .base import ArrivalStrategy, StatusDecision


class LateStrategy(ArrivalStrategy):
    """Arrival past the allowed delay but inside the outer grace window."""

    def decide(self, *, window: ArrivalWindow, shift: ShiftDefinition) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, note=f"Late by {window.delay_minutes} minutes")

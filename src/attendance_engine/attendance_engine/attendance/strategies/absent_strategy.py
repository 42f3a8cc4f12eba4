from __future__ import annotations

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftDefinition
from ..model import ArrivalWindow
from .base import ArrivalStrategy, StatusDecision


class AbsentStrategy(ArrivalStrategy):
    """Arrival beyond the outer grace window counts as a missed shift."""

    def decide(self, *, window: ArrivalWindow, shift: ShiftDefinition) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.ABSENT,
            note=f"Arrived {window.delay_minutes} minutes after shift start, past the grace window",
        )

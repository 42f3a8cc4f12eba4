from __future__ import annotations

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftDefinition
from ..model import ArrivalWindow
from .base import ArrivalStrategy, StatusDecision


class OnTimeStrategy(ArrivalStrategy):
    """Arrival within the shift's allowed delay."""

    def decide(self, *, window: ArrivalWindow, shift: ShiftDefinition) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, note="Arrived within allowed delay")

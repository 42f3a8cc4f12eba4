from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import DepartureStrategy, StatusDecision


class NormalStrategy(DepartureStrategy):
    """Departure leaves the arrival status as it is."""

    def decide(self, *, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current)

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.constants import DEFAULT_EARLY_DEPARTURE_MINUTES, DEFAULT_OUTER_GRACE_MINUTES
from ..core.enums import AttendanceStatus
from ..shifts.model import ShiftDefinition
from .model import ArrivalWindow
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import ArrivalStrategy, DepartureStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    outer_grace_minutes: int = DEFAULT_OUTER_GRACE_MINUTES
    early_departure_minutes: int = DEFAULT_EARLY_DEPARTURE_MINUTES

    def for_arrival(self, *, window: ArrivalWindow, shift: ShiftDefinition) -> ArrivalStrategy:
        if window.actual <= window.allowed:
            return OnTimeStrategy()
        if window.delay_minutes > shift.max_arrival_delay + self.outer_grace_minutes:
            return AbsentStrategy()
        return LateStrategy()

    def for_departure(
        self,
        *,
        departure: datetime,
        expected_departure: datetime,
        current_status: AttendanceStatus,
    ) -> DepartureStrategy:
        # Late and Absent are already more severe than Half Day.
        cutoff = expected_departure - timedelta(minutes=self.early_departure_minutes)
        if departure < cutoff and current_status == AttendanceStatus.PRESENT:
            return EarlyLeaveStrategy()
        return NormalStrategy()

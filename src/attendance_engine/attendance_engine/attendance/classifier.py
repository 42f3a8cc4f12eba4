from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..core.constants import SHIFT_REASON_MATCHED
from ..core.enums import AttendanceStatus
from ..shifts.model import ShiftDefinition
from .factory import AttendanceStrategyFactory
from .model import ArrivalWindow, TimingAnalysis


@dataclass(frozen=True)
class Classification:
    status: AttendanceStatus
    timing: TimingAnalysis


class AttendanceClassifier:
    """Turns a shift plus arrival (and optional departure) into a status.

    Arrival picks one of Present, Late or Absent. A departure can only turn
    Present into Half Day.
    """

    def __init__(self, strategy_factory: Optional[AttendanceStrategyFactory] = None):
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def arrival_window(self, shift: ShiftDefinition, arrival: datetime) -> ArrivalWindow:
        expected = shift.instance_start(arrival)
        return ArrivalWindow(
            expected=expected,
            allowed=expected + timedelta(minutes=shift.max_arrival_delay),
            actual=arrival,
        )

    def classify(
        self,
        shift: ShiftDefinition,
        arrival: datetime,
        departure: Optional[datetime] = None,
        *,
        reason: str = SHIFT_REASON_MATCHED,
    ) -> Classification:
        if shift is None:
            raise ValueError("classify() needs a resolved shift")

        window = self.arrival_window(shift, arrival)
        decision = self._factory.for_arrival(window=window, shift=shift).decide(window=window, shift=shift)
        status = decision.status
        note = decision.note

        if departure is not None:
            departed = self._departure_decision(shift, status, departure, instance_start=window.expected)
            if departed.status != status:
                status, note = departed.status, departed.note

        return Classification(
            status=status,
            timing=TimingAnalysis.from_window(window, reason=reason, status_reason=note),
        )

    def apply_departure(
        self,
        shift: ShiftDefinition,
        current: AttendanceStatus,
        departure: datetime,
        *,
        arrival: Optional[datetime] = None,
    ) -> AttendanceStatus:
        """Early-departure rule alone, for checkouts on an already classified record."""
        instance_start = shift.instance_start(arrival) if arrival is not None else None
        return self._departure_decision(shift, current, departure, instance_start=instance_start).status

    def _departure_decision(
        self,
        shift: ShiftDefinition,
        current: AttendanceStatus,
        departure: datetime,
        *,
        instance_start: Optional[datetime],
    ):
        expected = shift.expected_departure(departure, instance_start=instance_start)
        strategy = self._factory.for_departure(
            departure=departure,
            expected_departure=expected,
            current_status=current,
        )
        return strategy.decide(current=current)

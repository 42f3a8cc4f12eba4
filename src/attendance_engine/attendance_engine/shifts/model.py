from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import format_clock
from ..core.enums import ShiftStatus


def _since_midnight(value: time) -> timedelta:
    return timedelta(hours=value.hour, minutes=value.minute, seconds=value.second)


@dataclass(frozen=True)
class ShiftSummary:
    """Compact view of the shift an attendance record was classified against."""

    shift_id: int
    shift_type: str
    start_time: time
    end_time: time
    max_delay_minutes: int

    def to_dict(self) -> dict:
        return {
            "shift_id": self.shift_id,
            "shift_type": self.shift_type,
            "start_time": format_clock(self.start_time),
            "end_time": format_clock(self.end_time),
            "max_delay_minutes": self.max_delay_minutes,
        }


@dataclass(frozen=True)
class ShiftDefinition:
    """Domain entity: a work shift window with its tolerances.

    ``end_time`` at or before ``start_time`` means the shift runs past midnight.
    ``latest_leave`` and ``ot_start_hours`` are carried through untouched.
    """

    shift_id: int
    shift_type: str
    start_time: time
    end_time: time
    max_arrival_delay: int = 0
    latest_leave: Optional[time] = None
    ot_start_hours: Optional[float] = None
    status: ShiftStatus = ShiftStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == ShiftStatus.ACTIVE

    @property
    def crosses_midnight(self) -> bool:
        return self.end_time <= self.start_time

    @property
    def duration(self) -> timedelta:
        span = _since_midnight(self.end_time) - _since_midnight(self.start_time)
        if span <= timedelta(0):
            span += timedelta(days=1)
        return span

    def start_on(self, day: date, *, tzinfo=None) -> datetime:
        return datetime.combine(day, self.start_time, tzinfo=tzinfo)

    def instance_start(self, arrival: datetime) -> datetime:
        """Start of the shift instance an arrival belongs to.

        Same-day shifts are overlaid on the arrival's own day. Overnight shifts
        may have started the evening before, so the nearer of the two candidate
        starts wins (today's on a tie).
        """
        same_day = self.start_on(arrival.date(), tzinfo=arrival.tzinfo)
        if not self.crosses_midnight:
            return same_day

        previous = same_day - timedelta(days=1)
        if abs(arrival - previous) < abs(arrival - same_day):
            return previous
        return same_day

    def expected_departure(self, departure: datetime, *, instance_start: Optional[datetime] = None) -> datetime:
        if self.crosses_midnight and instance_start is not None:
            end = instance_start + self.duration
            # Mixed naive/aware pairs compare on the wall clock, like same-day shifts.
            if (end.tzinfo is None) != (departure.tzinfo is None):
                end = end.replace(tzinfo=departure.tzinfo)
            return end
        return datetime.combine(departure.date(), self.end_time, tzinfo=departure.tzinfo)

    def summary(self) -> ShiftSummary:
        return ShiftSummary(
            shift_id=self.shift_id,
            shift_type=self.shift_type,
            start_time=self.start_time,
            end_time=self.end_time,
            max_delay_minutes=self.max_arrival_delay,
        )


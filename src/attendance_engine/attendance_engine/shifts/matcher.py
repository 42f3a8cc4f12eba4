from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import minutes_from_midnight
from ..core.constants import (
    DEFAULT_OUTER_GRACE_MINUTES,
    MINUTES_PER_DAY,
    SHIFT_REASON_FALLBACK,
    SHIFT_REASON_MATCHED,
)
from ..core.exceptions import NoShiftAssignedError
from .model import ShiftDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftMatch:
    shift: ShiftDefinition
    reason: str
    fallback: bool = False


class ShiftMatcher:
    """Pick the shift an arrival belongs to among an employee's assignments.

    Pass one keeps shifts that started at or before the arrival and are still
    within ``max_arrival_delay + outer_grace_minutes``; the latest such start
    wins. When nothing qualifies, the shift whose start is closest on the clock
    is used. Ties go to the earlier entry of the input list, which the catalog
    orders by start time.
    """

    def __init__(self, *, outer_grace_minutes: int = DEFAULT_OUTER_GRACE_MINUTES):
        self._outer_grace_minutes = int(outer_grace_minutes)

    @property
    def outer_grace_minutes(self) -> int:
        return self._outer_grace_minutes

    def match(
        self,
        shifts: Sequence[ShiftDefinition],
        arrival: datetime,
        *,
        employee_id: Optional[int] = None,
    ) -> ShiftMatch:
        candidates = [s for s in shifts if s.is_active]
        if not candidates:
            raise NoShiftAssignedError(employee_id)

        arrival_minutes = minutes_from_midnight(arrival)

        best: Optional[ShiftDefinition] = None
        best_diff: Optional[int] = None
        for shift in candidates:
            diff = self._minutes_after_start(shift, arrival_minutes)
            if 0 <= diff <= shift.max_arrival_delay + self._outer_grace_minutes:
                if best_diff is None or diff < best_diff:
                    best, best_diff = shift, diff

        if best is not None:
            return ShiftMatch(shift=best, reason=SHIFT_REASON_MATCHED)

        # min() keeps the first of equal keys
        closest = min(candidates, key=lambda s: self._clock_distance(s, arrival_minutes))
        logger.debug(
            "No shift window fits arrival %s for employee %s; falling back to shift %s",
            arrival.isoformat(),
            employee_id,
            closest.shift_id,
        )
        return ShiftMatch(shift=closest, reason=SHIFT_REASON_FALLBACK, fallback=True)

    @staticmethod
    def _minutes_after_start(shift: ShiftDefinition, arrival_minutes: int) -> int:
        diff = arrival_minutes - minutes_from_midnight(shift.start_time)
        if diff < 0 and shift.crosses_midnight:
            diff += MINUTES_PER_DAY
        return diff

    @staticmethod
    def _clock_distance(shift: ShiftDefinition, arrival_minutes: int) -> int:
        distance = abs(arrival_minutes - minutes_from_midnight(shift.start_time))
        if shift.crosses_midnight:
            distance = min(distance, MINUTES_PER_DAY - distance)
        return distance

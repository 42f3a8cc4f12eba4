from __future__ import annotations

from datetime import datetime, time

import pytest

from src.attendance_engine.attendance_engine.core.constants import SHIFT_REASON_FALLBACK, SHIFT_REASON_MATCHED
from src.attendance_engine.attendance_engine.core.enums import ShiftStatus
from src.attendance_engine.attendance_engine.core.exceptions import NoShiftAssignedError
from src.attendance_engine.attendance_engine.shifts.matcher import ShiftMatcher
from src.attendance_engine.attendance_engine.shifts.model import ShiftDefinition


def _shift(shift_id: int, start: time, end: time, delay: int = 0, **kwargs) -> ShiftDefinition:
    return ShiftDefinition(
        shift_id=shift_id,
        shift_type=f"S{shift_id}",
        start_time=start,
        end_time=end,
        max_arrival_delay=delay,
        **kwargs,
    )


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 2, hour, minute)


def test_match_picks_shift_that_started_before_arrival(day_shift, evening_shift):
    match = ShiftMatcher().match([day_shift, evening_shift], _at(9, 10))

    assert match.shift == day_shift
    assert match.reason == SHIFT_REASON_MATCHED
    assert match.fallback is False


def test_match_prefers_latest_start_among_eligible_shifts():
    early = _shift(1, time(8, 0), time(16, 0), delay=15)
    later = _shift(2, time(9, 0), time(17, 0), delay=15)

    match = ShiftMatcher().match([early, later], _at(9, 20))

    assert match.shift == later


def test_very_late_arrival_stays_on_own_shift(day_shift, evening_shift):
    # 13:00 is 240 minutes into the day shift, still inside 15 + 240
    match = ShiftMatcher().match([day_shift, evening_shift], _at(13, 0))

    assert match.shift == day_shift
    assert match.fallback is False


def test_arrival_past_outer_window_moves_to_next_shift(day_shift, evening_shift):
    match = ShiftMatcher().match([day_shift, evening_shift], _at(14, 5))

    assert match.shift == evening_shift


def test_arrival_before_every_shift_falls_back_to_closest_start(day_shift, evening_shift):
    match = ShiftMatcher().match([day_shift, evening_shift], _at(8, 0))

    assert match.shift == day_shift
    assert match.reason == SHIFT_REASON_FALLBACK
    assert match.fallback is True


def test_arrival_after_every_window_falls_back_to_closest_start(day_shift, evening_shift):
    match = ShiftMatcher().match([day_shift, evening_shift], _at(23, 30))

    assert match.shift == evening_shift
    assert match.fallback is True


def test_window_tie_goes_to_first_shift_in_input_order():
    a = _shift(1, time(9, 0), time(17, 0), delay=15)
    b = _shift(2, time(9, 0), time(13, 0), delay=5)
    matcher = ShiftMatcher()

    first = matcher.match([a, b], _at(9, 10))
    assert first.shift == a
    assert first.fallback is False
    assert matcher.match([b, a], _at(9, 10)).shift == b


def test_fallback_tie_goes_to_first_shift_in_input_order():
    a = _shift(1, time(8, 0), time(16, 0))
    b = _shift(2, time(10, 0), time(18, 0))
    matcher = ShiftMatcher(outer_grace_minutes=0)

    assert matcher.match([a, b], _at(9, 0)).shift == a
    assert matcher.match([b, a], _at(9, 0)).shift == b


def test_outer_grace_is_configurable(day_shift, evening_shift):
    match = ShiftMatcher(outer_grace_minutes=60).match([day_shift, evening_shift], _at(13, 0))

    assert match.shift == evening_shift
    assert match.fallback is True


def test_match_is_deterministic(day_shift, evening_shift):
    matcher = ShiftMatcher()
    results = {matcher.match([day_shift, evening_shift], _at(11, 45)).shift.shift_id for _ in range(20)}

    assert results == {day_shift.shift_id}


def test_overnight_shift_matches_arrival_after_midnight(day_shift):
    night = _shift(3, time(22, 0), time(6, 0), delay=15)

    match = ShiftMatcher().match([day_shift, night], _at(1, 0))

    assert match.shift == night
    assert match.fallback is False


def test_empty_assignment_list_raises():
    with pytest.raises(NoShiftAssignedError):
        ShiftMatcher().match([], _at(9, 0), employee_id=7)


def test_inactive_shifts_are_never_matched(day_shift):
    inactive = _shift(5, time(9, 0), time(17, 0), status=ShiftStatus.INACTIVE)

    with pytest.raises(NoShiftAssignedError):
        ShiftMatcher().match([inactive], _at(9, 0))

    assert ShiftMatcher().match([inactive, day_shift], _at(9, 0)).shift == day_shift

from datetime import datetime, time, timedelta

from src.attendance_engine.attendance_engine.attendance.factory import AttendanceStrategyFactory
from src.attendance_engine.attendance_engine.attendance.model import ArrivalWindow
from src.attendance_engine.attendance_engine.attendance.strategies.absent_strategy import AbsentStrategy
from src.attendance_engine.attendance_engine.attendance.strategies.early_strategy import EarlyLeaveStrategy
from src.attendance_engine.attendance_engine.attendance.strategies.late_strategy import LateStrategy
from src.attendance_engine.attendance_engine.attendance.strategies.normal_strategy import NormalStrategy
from src.attendance_engine.attendance_engine.attendance.strategies.on_time_strategy import OnTimeStrategy
from src.attendance_engine.attendance_engine.core.enums import AttendanceStatus
from src.attendance_engine.attendance_engine.shifts.model import ShiftDefinition

SHIFT = ShiftDefinition(shift_id=1, shift_type="Morning", start_time=time(8, 0), end_time=time(17, 0), max_arrival_delay=5)
START = datetime(2025, 1, 1, 8, 0, 0)
END = datetime(2025, 1, 1, 17, 0, 0)


def _window(actual: datetime) -> ArrivalWindow:
    return ArrivalWindow(expected=START, allowed=START + timedelta(minutes=5), actual=actual)


def test_factory_arrival_on_time_within_grace():
    strategy = AttendanceStrategyFactory().for_arrival(window=_window(datetime(2025, 1, 1, 8, 4, 59)), shift=SHIFT)

    assert isinstance(strategy, OnTimeStrategy)


def test_factory_arrival_late_after_grace():
    strategy = AttendanceStrategyFactory().for_arrival(window=_window(datetime(2025, 1, 1, 8, 6, 0)), shift=SHIFT)

    assert isinstance(strategy, LateStrategy)


def test_factory_arrival_absent_past_outer_grace():
    strategy = AttendanceStrategyFactory().for_arrival(window=_window(datetime(2025, 1, 1, 12, 6, 0)), shift=SHIFT)

    assert isinstance(strategy, AbsentStrategy)


def test_factory_departure_early_only_when_present():
    factory = AttendanceStrategyFactory()
    departure = datetime(2025, 1, 1, 15, 0, 0)

    early = factory.for_departure(departure=departure, expected_departure=END, current_status=AttendanceStatus.PRESENT)
    late = factory.for_departure(departure=departure, expected_departure=END, current_status=AttendanceStatus.LATE)

    assert isinstance(early, EarlyLeaveStrategy)
    assert isinstance(late, NormalStrategy)


def test_departure_strategies_decide_status():
    assert EarlyLeaveStrategy().decide(current=AttendanceStatus.PRESENT).status == AttendanceStatus.HALF_DAY
    assert NormalStrategy().decide(current=AttendanceStatus.LATE).status == AttendanceStatus.LATE

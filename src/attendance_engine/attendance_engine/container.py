from __future__ import annotations

from dataclasses import dataclass

from .attendance.classifier import AttendanceClassifier
from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_EARLY_DEPARTURE_MINUTES, DEFAULT_OUTER_GRACE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .shifts.matcher import ShiftMatcher
from .shifts.mysql_shift_repository import MySQLShiftCatalog


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    shifts_repo: MySQLShiftCatalog
    attendance_repo: MySQLAttendanceRepository

    matcher: ShiftMatcher
    classifier: AttendanceClassifier
    attendance_service: AttendanceService


def build_container(
    *,
    db_config: dict,
    outer_grace_minutes: int = DEFAULT_OUTER_GRACE_MINUTES,
    early_departure_minutes: int = DEFAULT_EARLY_DEPARTURE_MINUTES,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    shifts_repo = MySQLShiftCatalog(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    matcher = ShiftMatcher(outer_grace_minutes=outer_grace_minutes)
    classifier = AttendanceClassifier(
        AttendanceStrategyFactory(
            outer_grace_minutes=outer_grace_minutes,
            early_departure_minutes=early_departure_minutes,
        )
    )
    attendance_service = AttendanceService(
        attendance_repo,
        shifts_repo,
        matcher=matcher,
        classifier=classifier,
    )

    return Container(
        conn=conn,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        matcher=matcher,
        classifier=classifier,
        attendance_service=attendance_service,
    )

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import ShiftStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ShiftDefinition
from .repository import ShiftCatalog

_SHIFT_COLUMNS = """
    s.shift_id, s.shift_type, s.start_time, s.end_time, s.max_arrival_delay,
    s.latest_leave, s.ot_start_hours, s.status
"""


def _to_shift(r: Dict[str, Any]) -> ShiftDefinition:
    ot_start = r.get("ot_start_hours")
    return ShiftDefinition(
        shift_id=int(r["shift_id"]),
        shift_type=r["shift_type"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        max_arrival_delay=int(r.get("max_arrival_delay") or 0),
        latest_leave=normalize_mysql_time(r.get("latest_leave")),
        ot_start_hours=float(ot_start) if ot_start is not None else None,
        status=ShiftStatus(r.get("status") or ShiftStatus.ACTIVE.value),
    )


class MySQLShiftCatalog(ShiftCatalog):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active_assignments(self, employee_id: int) -> Sequence[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SHIFT_COLUMNS}
                FROM employee_shifts es
                JOIN shifts s ON s.shift_id = es.shift_id
                WHERE es.employee_id=%s AND s.status=%s
                ORDER BY s.start_time ASC, es.assignment_id ASC
                """,
                (int(employee_id), ShiftStatus.ACTIVE.value),
            )
            return [_to_shift(r) for r in fetchall(cur)]

    def get_assignment(self, employee_id: int, shift_id: int) -> Optional[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SHIFT_COLUMNS}
                FROM employee_shifts es
                JOIN shifts s ON s.shift_id = es.shift_id
                WHERE es.employee_id=%s AND s.shift_id=%s AND s.status=%s
                LIMIT 1
                """,
                (int(employee_id), int(shift_id), ShiftStatus.ACTIVE.value),
            )
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def get_primary_assignment(self, employee_id: int) -> Optional[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SHIFT_COLUMNS}
                FROM employee_shifts es
                JOIN shifts s ON s.shift_id = es.shift_id
                WHERE es.employee_id=%s AND s.status=%s
                ORDER BY es.assignment_id ASC
                LIMIT 1
                """,
                (int(employee_id), ShiftStatus.ACTIVE.value),
            )
            r = fetchone(cur)
            return _to_shift(r) if r else None

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        fingerprint_id=str(r["fingerprint_id"]),
        in_time=r["in_time"],
        out_time=r.get("out_time"),
        shift=r["shift"],
        status=AttendanceStatus(r["attendance_status"]),
        in_user=int(r.get("in_user") or 0),
        out_user=int(r.get("out_user") or 0),
        in_approval=int(r.get("in_approval") or 0),
        out_approval=int(r.get("out_approval") or 0),
        edit_in_time=r.get("edit_in_time"),
        edit_out_time=r.get("edit_out_time"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, fingerprint_id, in_time, out_time,
                       in_user, out_user, in_approval, out_approval, shift,
                       attendance_status, edit_in_time, edit_out_time
                FROM attendance_records
                WHERE attendance_id=%s
                """,
                (int(attendance_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        fingerprint_id: str,
        in_time: datetime,
        out_time: Optional[datetime],
        shift: str,
        status: AttendanceStatus,
        in_user: int = 1,
        out_user: int = 0,
        in_approval: int = 1,
        out_approval: int = 0,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, fingerprint_id, in_time, out_time, in_user, out_user,
                    in_approval, out_approval, shift, attendance_status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    fingerprint_id,
                    in_time,
                    out_time,
                    in_user,
                    out_user,
                    in_approval,
                    out_approval,
                    shift,
                    status.value,
                ),
            )
            return int(cur.lastrowid)

    def update_status(
        self,
        *,
        attendance_id: int,
        status: AttendanceStatus,
        in_time: Optional[datetime] = None,
        out_time: Optional[datetime] = None,
    ) -> bool:
        assignments = ["attendance_status=%s"]
        params: list[object] = [status.value]

        if out_time is not None:
            assignments.append("out_time=%s, out_user=1, out_approval=1")
            params.append(out_time)
        if in_time is not None:
            assignments.append("in_time=%s")
            params.append(in_time)

        params.append(int(attendance_id))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance_records SET {', '.join(assignments)} WHERE attendance_id=%s",
                tuple(params),
            )
            return cur.rowcount > 0

    def update_edit_times(
        self,
        *,
        attendance_id: int,
        edit_in_time: Optional[datetime],
        edit_out_time: Optional[datetime],
    ) -> bool:
        assignments: list[str] = []
        params: list[object] = []

        if edit_in_time is not None:
            assignments.append("edit_in_time=%s")
            params.append(edit_in_time)
        if edit_out_time is not None:
            assignments.append("edit_out_time=%s")
            params.append(edit_out_time)
        if not assignments:
            return False

        params.append(int(attendance_id))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance_records SET {', '.join(assignments)} WHERE attendance_id=%s",
                tuple(params),
            )
            return cur.rowcount > 0

    def update_approvals(
        self,
        *,
        attendance_id: int,
        in_approval: Optional[int],
        out_approval: Optional[int],
    ) -> bool:
        assignments: list[str] = []
        params: list[object] = []

        if in_approval is not None:
            assignments.append("in_approval=%s")
            params.append(int(in_approval))
        if out_approval is not None:
            assignments.append("out_approval=%s")
            params.append(int(out_approval))
        if not assignments:
            return False

        params.append(int(attendance_id))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance_records SET {', '.join(assignments)} WHERE attendance_id=%s",
                tuple(params),
            )
            return cur.rowcount > 0

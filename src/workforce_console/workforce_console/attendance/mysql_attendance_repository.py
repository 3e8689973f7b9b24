from __future__ import annotations

import uuid
from datetime import date, time
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus, PermissionType
from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, optional_float
from .model import AttendanceRecord, GeoLocation
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, profile_id, attendance_date, clock_in, clock_out, status,
    permission_type, location_name, latitude, longitude, notes
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=str(r["attendance_id"]),
        profile_id=str(r["profile_id"]),
        attendance_date=r["attendance_date"],
        status=AttendanceStatus(r["status"]),
        clock_in=normalize_mysql_time(r.get("clock_in")),
        clock_out=normalize_mysql_time(r.get("clock_out")),
        permission_type=PermissionType(r.get("permission_type") or PermissionType.NONE.value),
        location_name=r.get("location_name"),
        latitude=optional_float(r.get("latitude")),
        longitude=optional_float(r.get("longitude")),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _select_by_id(cur, attendance_id: str) -> Optional[AttendanceRecord]:
        cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE attendance_id=%s", (attendance_id,))
        r = fetchone(cur)
        return _to_record(r) if r else None

    def _require_written(self, cur, attendance_id: str) -> AttendanceRecord:
        record = self._select_by_id(cur, attendance_id)
        if record is None:
            raise PersistenceError("write returned no row")
        return record

    def get_for_profile_and_date(self, profile_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE profile_id=%s AND attendance_date=%s
                LIMIT 1
                """,
                (profile_id, attendance_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_recent_for_profile(self, profile_id: str, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE profile_id=%s
                ORDER BY attendance_date DESC
                LIMIT %s
                """,
                (profile_id, int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def create_clock_in(
        self,
        *,
        profile_id: str,
        attendance_date: date,
        clock_in: time,
        status: AttendanceStatus,
        location: GeoLocation,
    ) -> AttendanceRecord:
        attendance_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(
                    attendance_id, profile_id, attendance_date, clock_in, status,
                    location_name, latitude, longitude
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    attendance_id,
                    profile_id,
                    attendance_date,
                    clock_in,
                    status.value,
                    location.label,
                    location.latitude,
                    location.longitude,
                ),
            )
            return self._require_written(cur, attendance_id)

    def update_clock_in(
        self,
        *,
        attendance_id: str,
        clock_in: time,
        status: AttendanceStatus,
        location: GeoLocation,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET clock_in=%s, status=%s, location_name=%s, latitude=%s, longitude=%s
                WHERE attendance_id=%s
                """,
                (clock_in, status.value, location.label, location.latitude, location.longitude, attendance_id),
            )
            return self._require_written(cur, attendance_id)

    def update_clock_out(self, *, attendance_id: str, profile_id: str, clock_out: time) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance
                SET clock_out=%s
                WHERE attendance_id=%s AND profile_id=%s
                """,
                (clock_out, attendance_id, profile_id),
            )
            # MySQL reports 0 changed rows when the value is identical, so
            # re-read with the owner filter instead of trusting rowcount.
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance WHERE attendance_id=%s AND profile_id=%s",
                (attendance_id, profile_id),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_leave(
        self,
        *,
        profile_id: str,
        attendance_date: date,
        status: AttendanceStatus,
        permission_type: PermissionType,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        attendance_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(attendance_id, profile_id, attendance_date, status, permission_type, notes)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (attendance_id, profile_id, attendance_date, status.value, permission_type.value, notes),
            )
            return self._require_written(cur, attendance_id)

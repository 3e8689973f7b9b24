from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus, PermissionType
from .model import AttendanceRecord, GeoLocation


class AttendanceRepository(Protocol):
    """Point lookup, insert and update-by-id; every write returns the resulting row."""

    def get_for_profile_and_date(self, profile_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_recent_for_profile(self, profile_id: str, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create_clock_in(
        self,
        *,
        profile_id: str,
        attendance_date: date,
        clock_in: time,
        status: AttendanceStatus,
        location: GeoLocation,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update_clock_in(
        self,
        *,
        attendance_id: str,
        clock_in: time,
        status: AttendanceStatus,
        location: GeoLocation,
    ) -> AttendanceRecord:
        """Overwrite clock-in fields of an existing row; clock_out is left as is."""

        raise NotImplementedError

    def update_clock_out(self, *, attendance_id: str, profile_id: str, clock_out: time) -> Optional[AttendanceRecord]:
        """Return None when no row matched both id and owner."""

        raise NotImplementedError

    def create_leave(
        self,
        *,
        profile_id: str,
        attendance_date: date,
        status: AttendanceStatus,
        permission_type: PermissionType,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

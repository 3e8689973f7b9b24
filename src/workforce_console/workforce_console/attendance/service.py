from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import now_local, to_business_time
from ..common.validators import require_person
from ..core.constants import DEFAULT_BUSINESS_TIMEZONE, DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus, LeaveCategory, PermissionType
from ..core.exceptions import PersistenceError, RecordNotFoundError, ValidationError
from .factory import AttendanceStrategyFactory
from .leave import classify_leave, display_label, record_label
from .model import AttendanceRecord, GeoLocation
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceRowUI:
    date: str
    clock_in: str
    clock_out: str
    status: str
    css_class: str


_CSS_CLASSES = {
    AttendanceStatus.PRESENT: "text-green-500",
    AttendanceStatus.LATE: "text-red-500",
    AttendanceStatus.SICK: "text-orange-500",
    AttendanceStatus.PERMISSION: "text-orange-500",
    AttendanceStatus.LEAVE: "text-blue-500",
}


class AttendanceService:
    """Clock-in/out and leave submission for the signed-in person.

    Every operation reads at most one row, writes one row and returns the row
    as stored. Concurrent calls for the same person/day are last-write-wins.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        tz_name: str = DEFAULT_BUSINESS_TIMEZONE,
    ):
        self._attendance = attendance
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._tz_name = tz_name

    def _local(self, now: datetime | None) -> datetime:
        return to_business_time(now or now_local(self._tz_name), self._tz_name)

    def clock_in(
        self,
        person_id: Optional[str],
        *,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        location_label: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        person_id = require_person(person_id)
        now = self._local(now)
        today = now.date()
        clock_time = now.time().replace(microsecond=0, tzinfo=None)

        decision = self._factory.for_clock_in(now=now).decide_clock_in(now=now)
        location = GeoLocation(label=location_label, latitude=latitude, longitude=longitude)

        try:
            existing = self._attendance.get_for_profile_and_date(person_id, today)
            if existing:
                # Re-clocking-in overwrites the morning's time/location; clock_out stays.
                record = self._attendance.update_clock_in(
                    attendance_id=existing.attendance_id,
                    clock_in=clock_time,
                    status=decision.status,
                    location=location,
                )
            else:
                record = self._attendance.create_clock_in(
                    profile_id=person_id,
                    attendance_date=today,
                    clock_in=clock_time,
                    status=decision.status,
                    location=location,
                )
        except PersistenceError as e:
            logger.error("Clock-in error for %s: %s", person_id, e)
            raise PersistenceError(f"Failed to clock in: {e}") from e

        logger.info("Clock-in %s %s at %s (%s)", person_id, today, clock_time, decision.status.value)
        return record

    def clock_out(self, person_id: Optional[str], attendance_id: str, *, now: datetime | None = None) -> AttendanceRecord:
        person_id = require_person(person_id)
        clock_time = self._local(now).time().replace(microsecond=0, tzinfo=None)

        try:
            # Ownership is checked by the write itself (id AND owner must match).
            record = self._attendance.update_clock_out(
                attendance_id=str(attendance_id),
                profile_id=person_id,
                clock_out=clock_time,
            )
        except PersistenceError as e:
            logger.error("Clock-out error for %s: %s", person_id, e)
            raise PersistenceError(f"Failed to clock out: {e}") from e

        if record is None:
            raise RecordNotFoundError("Failed to clock out: attendance record not found")
        return record

    def submit_leave(
        self,
        person_id: Optional[str],
        category: Union[str, LeaveCategory],
        subtype: Union[str, PermissionType, None] = None,
        *,
        attendance_date: date | None = None,
        notes: Optional[str] = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        person_id = require_person(person_id)
        classification = classify_leave(category, subtype)
        attendance_date = attendance_date or self._local(now).date()

        try:
            # Plain insert: a same-day clock-in row makes this fail on the unique key.
            record = self._attendance.create_leave(
                profile_id=person_id,
                attendance_date=attendance_date,
                status=classification.status,
                permission_type=classification.permission_type,
                notes=(notes or "").strip() or None,
            )
        except PersistenceError as e:
            logger.error("Leave submission error for %s: %s", person_id, e)
            raise PersistenceError(f"Failed to submit leave request: {e}") from e

        logger.info("Leave %s %s %s/%s", person_id, attendance_date, record.status.value, record.permission_type.value)
        return record

    def get_today_record(self, person_id: str, *, now: datetime | None = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_profile_and_date(require_person(person_id), self._local(now).date())

    def get_today_label(self, person_id: str, *, now: datetime | None = None) -> str:
        return record_label(self.get_today_record(person_id, now=now))

    def get_history_ui(self, person_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRowUI]:
        person_id = require_person(person_id)
        if limit is None or int(limit) < 1:
            raise ValidationError("History limit must be at least 1")
        rows = self._attendance.get_recent_for_profile(person_id, int(limit))
        return [self._to_ui(r) for r in rows]

    def _to_ui(self, r: AttendanceRecord) -> AttendanceRowUI:
        return AttendanceRowUI(
            date=r.attendance_date.strftime("%Y-%m-%d"),
            clock_in=r.clock_in.strftime("%H:%M:%S") if r.clock_in else "-",
            clock_out=r.clock_out.strftime("%H:%M:%S") if r.clock_out else "-",
            status=display_label(r.status, r.permission_type),
            css_class=_CSS_CLASSES.get(r.status, "text-gray-500"),
        )

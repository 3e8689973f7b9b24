from datetime import date, datetime, time, timezone

import pytest

from src.workforce_console.workforce_console.attendance.service import AttendanceService
from src.workforce_console.workforce_console.core.enums import AttendanceStatus, PermissionType
from src.workforce_console.workforce_console.core.exceptions import (
    AuthenticationError,
    PersistenceError,
    RecordNotFoundError,
    ValidationError,
)

MORNING = datetime(2026, 10, 19, 8, 50, 12)
LATE_MORNING = datetime(2026, 10, 19, 9, 30, 0)


def test_clock_in_creates_one_row_per_day(attendance_repo):
    svc = AttendanceService(attendance_repo)

    first = svc.clock_in("p1", latitude=-6.2, longitude=106.8, location_label="Kantor", now=MORNING)
    second = svc.clock_in("p1", location_label="Rumah", now=LATE_MORNING)

    assert len(attendance_repo.rows) == 1
    assert second.attendance_id == first.attendance_id
    assert first.status == AttendanceStatus.PRESENT
    assert second.status == AttendanceStatus.LATE
    assert second.clock_in == time(9, 30)
    assert second.location_name == "Rumah"
    assert second.latitude is None


def test_clock_in_converts_to_business_timezone(attendance_repo):
    svc = AttendanceService(attendance_repo)

    # 02:20 UTC is 09:20 in Jakarta.
    record = svc.clock_in("p1", now=datetime(2026, 10, 19, 2, 20, tzinfo=timezone.utc))

    assert record.attendance_date == date(2026, 10, 19)
    assert record.clock_in == time(9, 20)
    assert record.status == AttendanceStatus.LATE


def test_clock_in_keeps_existing_clock_out(attendance_repo):
    svc = AttendanceService(attendance_repo)
    record = svc.clock_in("p1", now=MORNING)
    svc.clock_out("p1", record.attendance_id, now=datetime(2026, 10, 19, 17, 5))

    again = svc.clock_in("p1", now=LATE_MORNING)

    assert again.clock_out == time(17, 5)


def test_clock_in_requires_person(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(AuthenticationError):
        svc.clock_in(None, now=MORNING)
    assert attendance_repo.rows == {}


def test_clock_in_store_failure_is_reported(attendance_repo):
    attendance_repo.fail_with = "connection lost"
    svc = AttendanceService(attendance_repo)

    with pytest.raises(PersistenceError, match="Failed to clock in: connection lost"):
        svc.clock_in("p1", now=MORNING)


def test_clock_out_only_touches_clock_out(attendance_repo):
    svc = AttendanceService(attendance_repo)
    record = svc.clock_in("p1", now=MORNING)

    out = svc.clock_out("p1", record.attendance_id, now=datetime(2026, 10, 19, 17, 0, 45, 123))

    assert out.clock_out == time(17, 0, 45)
    assert out.clock_in == record.clock_in
    assert out.status == record.status


def test_clock_out_twice_last_write_wins(attendance_repo):
    svc = AttendanceService(attendance_repo)
    record = svc.clock_in("p1", now=MORNING)

    svc.clock_out("p1", record.attendance_id, now=datetime(2026, 10, 19, 17, 0))
    out = svc.clock_out("p1", record.attendance_id, now=datetime(2026, 10, 19, 18, 0))

    assert out.clock_out == time(18, 0)


def test_clock_out_other_persons_record_is_not_found(attendance_repo):
    svc = AttendanceService(attendance_repo)
    record = svc.clock_in("p1", now=MORNING)

    with pytest.raises(RecordNotFoundError):
        svc.clock_out("p2", record.attendance_id, now=datetime(2026, 10, 19, 17, 0))
    assert attendance_repo.rows[record.attendance_id].clock_out is None


def test_clock_out_unknown_id(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(RecordNotFoundError):
        svc.clock_out("p1", "missing", now=MORNING)


def test_submit_leave_stores_subtype(attendance_repo):
    svc = AttendanceService(attendance_repo)

    record = svc.submit_leave("p1", "izin", "halfday", attendance_date=date(2026, 10, 20), notes="  dokter ")

    assert record.status == AttendanceStatus.PERMISSION
    assert record.permission_type == PermissionType.HALFDAY
    assert record.clock_in is None
    assert record.notes == "dokter"
    assert svc.get_history_ui("p1")[0].status == "Permission – Half Day"


def test_submit_leave_defaults_to_today(attendance_repo):
    svc = AttendanceService(attendance_repo)

    record = svc.submit_leave("p1", "sakit", now=MORNING)

    assert record.attendance_date == date(2026, 10, 19)
    assert record.permission_type == PermissionType.NONE


def test_submit_leave_after_clock_in_same_day_fails(attendance_repo):
    svc = AttendanceService(attendance_repo)
    record = svc.clock_in("p1", now=MORNING)

    with pytest.raises(PersistenceError, match="Failed to submit leave request"):
        svc.submit_leave("p1", "cuti", attendance_date=date(2026, 10, 19))
    assert attendance_repo.rows[record.attendance_id].status == AttendanceStatus.PRESENT


def test_submit_leave_invalid_subtype_writes_nothing(attendance_repo):
    svc = AttendanceService(attendance_repo)

    with pytest.raises(ValidationError):
        svc.submit_leave("p1", "izin", attendance_date=date(2026, 10, 20))
    assert attendance_repo.rows == {}


def test_today_label(attendance_repo):
    svc = AttendanceService(attendance_repo)

    assert svc.get_today_label("p1", now=MORNING) == "Not Checked In"
    svc.clock_in("p1", now=LATE_MORNING)
    assert svc.get_today_label("p1", now=MORNING) == "Late"


def test_history_ui_newest_first(attendance_repo):
    svc = AttendanceService(attendance_repo)
    svc.clock_in("p1", now=datetime(2026, 10, 17, 8, 0))
    svc.clock_in("p1", now=datetime(2026, 10, 18, 9, 40))
    svc.submit_leave("p1", "cuti", attendance_date=date(2026, 10, 19))

    rows = svc.get_history_ui("p1", limit=2)

    assert [r.date for r in rows] == ["2026-10-19", "2026-10-18"]
    assert rows[0].clock_in == "-"
    assert rows[0].status == "On Leave"
    assert rows[1].css_class == "text-red-500"


@pytest.mark.parametrize("limit", [0, -1])
def test_history_rejects_non_positive_limit(attendance_repo, limit):
    svc = AttendanceService(attendance_repo)
    svc.submit_leave("p1", "cuti", attendance_date=date(2026, 10, 19))

    with pytest.raises(ValidationError):
        svc.get_history_ui("p1", limit=limit)

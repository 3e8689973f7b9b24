import pytest

from src.workforce_console.workforce_console.attendance.leave import (
    NOT_CHECKED_IN,
    classify_leave,
    display_label,
    record_label,
)
from src.workforce_console.workforce_console.core.enums import AttendanceStatus, LeaveCategory, PermissionType
from src.workforce_console.workforce_console.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "category, subtype, expected",
    [
        ("izin", "halfday", (AttendanceStatus.PERMISSION, PermissionType.HALFDAY)),
        ("izin", "fullday", (AttendanceStatus.PERMISSION, PermissionType.FULLDAY)),
        ("sakit", None, (AttendanceStatus.SICK, PermissionType.NONE)),
        ("cuti", None, (AttendanceStatus.LEAVE, PermissionType.NONE)),
        (LeaveCategory.SAKIT, "halfday", (AttendanceStatus.SICK, PermissionType.NONE)),
        ("Izin - Half Day", None, (AttendanceStatus.PERMISSION, PermissionType.HALFDAY)),
        ("Izin - Full Day", "halfday", (AttendanceStatus.PERMISSION, PermissionType.FULLDAY)),
    ],
)
def test_classify_leave(category, subtype, expected):
    result = classify_leave(category, subtype)

    assert (result.status, result.permission_type) == expected


def test_classify_izin_requires_subtype():
    with pytest.raises(ValidationError):
        classify_leave("izin")

    with pytest.raises(ValidationError):
        classify_leave("izin", "none")


def test_classify_unknown_category():
    with pytest.raises(ValidationError):
        classify_leave("vacation")


@pytest.mark.parametrize(
    "status, permission_type, label",
    [
        ("present", "none", "Present"),
        ("late", "none", "Late"),
        ("sick", "none", "Sick"),
        ("leave", "none", "On Leave"),
        ("permission", "halfday", "Permission – Half Day"),
        ("permission", "fullday", "Permission – Full Day"),
        ("permission", "none", "Permission"),
        ("permission", "weird", "Permission"),
        ("absent", "none", NOT_CHECKED_IN),
        ("banana", None, NOT_CHECKED_IN),
        (None, None, NOT_CHECKED_IN),
    ],
)
def test_display_label(status, permission_type, label):
    assert display_label(status, permission_type) == label


def test_record_label(make_record):
    assert record_label(None) == NOT_CHECKED_IN
    assert record_label(make_record(status=AttendanceStatus.LATE)) == "Late"
    assert (
        record_label(make_record(status=AttendanceStatus.PERMISSION, permission_type=PermissionType.HALFDAY))
        == "Permission – Half Day"
    )

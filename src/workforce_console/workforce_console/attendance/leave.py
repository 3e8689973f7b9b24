"""Leave submissions: category/subtype classification and display labels."""

from __future__ import annotations

from typing import Optional, Union

from ..core.enums import AttendanceStatus, LeaveCategory, PermissionType
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, LeaveClassification

_CATEGORY_STATUS = {
    LeaveCategory.IZIN: AttendanceStatus.PERMISSION,
    LeaveCategory.SAKIT: AttendanceStatus.SICK,
    LeaveCategory.CUTI: AttendanceStatus.LEAVE,
}

# Labels the old leave modal sent as a single string.
_LEGACY_LABELS = {
    "izin - half day": (LeaveCategory.IZIN, PermissionType.HALFDAY),
    "izin - full day": (LeaveCategory.IZIN, PermissionType.FULLDAY),
}

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.SICK: "Sick",
    AttendanceStatus.LEAVE: "On Leave",
}

PERMISSION_LABELS = {
    PermissionType.HALFDAY: "Permission – Half Day",
    PermissionType.FULLDAY: "Permission – Full Day",
}

NOT_CHECKED_IN = "Not Checked In"


def _parse_category(category: Union[str, LeaveCategory]) -> LeaveCategory:
    try:
        return LeaveCategory(str(getattr(category, "value", category)).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown leave category: {category}")


def _parse_subtype(subtype: Union[str, PermissionType, None]) -> Optional[PermissionType]:
    if subtype is None or subtype == "":
        return None
    try:
        return PermissionType(str(getattr(subtype, "value", subtype)).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown permission type: {subtype}")


def classify_leave(
    category: Union[str, LeaveCategory],
    subtype: Union[str, PermissionType, None] = None,
) -> LeaveClassification:
    """Map (izin|sakit|cuti, subtype) to the stored (status, permission_type) pair.

    Izin needs a halfday/fullday subtype. Sakit and cuti always store ``none``
    whatever subtype was sent.
    """
    legacy = _LEGACY_LABELS.get(str(getattr(category, "value", category)).strip().lower())
    if legacy:
        category, subtype = legacy

    parsed = _parse_category(category)
    status = _CATEGORY_STATUS[parsed]

    if parsed != LeaveCategory.IZIN:
        return LeaveClassification(status=status, permission_type=PermissionType.NONE)

    permission_type = _parse_subtype(subtype)
    if permission_type not in {PermissionType.HALFDAY, PermissionType.FULLDAY}:
        raise ValidationError("Permission requires a half day or full day subtype")
    return LeaveClassification(status=status, permission_type=permission_type)


def display_label(status: Union[str, AttendanceStatus, None], permission_type: Union[str, PermissionType, None] = None) -> str:
    """Pure (status, subtype) -> label; anything unknown reads as not checked in."""
    try:
        parsed_status = AttendanceStatus(getattr(status, "value", status))
    except ValueError:
        return NOT_CHECKED_IN

    if parsed_status == AttendanceStatus.PERMISSION:
        try:
            parsed_type = PermissionType(getattr(permission_type, "value", permission_type))
        except ValueError:
            parsed_type = PermissionType.NONE
        return PERMISSION_LABELS.get(parsed_type, "Permission")

    return STATUS_LABELS.get(parsed_status, NOT_CHECKED_IN)


def record_label(record: Optional[AttendanceRecord]) -> str:
    if record is None:
        return NOT_CHECKED_IN
    return display_label(record.status, record.permission_type)

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Profile roles as stored in the profiles table."""

    INHOUSE = "Inhouse"
    REFFERAL = "Refferal"
    AGENCY = "Agency"
    MANAGER = "Manajer"
    STAFF_OPS = "Staff Ops"
    ADMINISTRATOR = "Administrator"
    SUPER_ADMIN = "SuperAdmin"

    @property
    def is_admin(self) -> bool:
        return self in {Role.ADMINISTRATOR, Role.SUPER_ADMIN}


class AttendanceStatus(str, Enum):
    """Attendance status stored per day. ABSENT is never written, only derived."""

    PRESENT = "present"
    LATE = "late"
    SICK = "sick"
    PERMISSION = "permission"
    LEAVE = "leave"
    ABSENT = "absent"


class PermissionType(str, Enum):
    NONE = "none"
    HALFDAY = "halfday"
    FULLDAY = "fullday"


class LeaveCategory(str, Enum):
    """Leave categories offered in the leave modal (izin/sakit/cuti)."""

    IZIN = "izin"
    SAKIT = "sakit"
    CUTI = "cuti"


class AdPlatform(str, Enum):
    FACEBOOK = "Facebook"
    FB_ADS = "FB Ads"
    GOOGLE = "Google"
    TIKTOK = "TikTok"
    INSTAGRAM = "Instagram"

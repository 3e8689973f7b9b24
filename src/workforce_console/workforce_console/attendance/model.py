from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus, PermissionType


@dataclass(frozen=True)
class GeoLocation:
    """Where the clock-in happened.

    Coordinates are optional: when the device lookup fails, ``label`` carries
    the fallback or error text instead.
    """

    label: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per person per business day."""

    attendance_id: str
    profile_id: str
    attendance_date: date
    status: AttendanceStatus
    clock_in: Optional[time] = None
    clock_out: Optional[time] = None
    permission_type: PermissionType = PermissionType.NONE
    location_name: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class LeaveClassification:
    status: AttendanceStatus
    permission_type: PermissionType

from __future__ import annotations

import os
from dataclasses import replace
from datetime import date, time
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

os.environ.setdefault("APP_ENV", "testing")

from src.workforce_console.workforce_console.main import create_app
from src.workforce_console.workforce_console.attendance.model import AttendanceRecord, GeoLocation
from src.workforce_console.workforce_console.container import assemble
from src.workforce_console.workforce_console.core.enums import AttendanceStatus, PermissionType, Role
from src.workforce_console.workforce_console.core.exceptions import PersistenceError
from src.workforce_console.workforce_console.users.model import Profile


class InMemoryAttendance:
    """Mimics the attendance table, including the (profile_id, date) unique key."""

    def __init__(self):
        self.rows: dict[str, AttendanceRecord] = {}
        self._id = 0
        self.fail_with: Optional[str] = None

    def _check_failure(self):
        if self.fail_with:
            raise PersistenceError(self.fail_with)

    def _next_id(self) -> str:
        self._id += 1
        return f"att-{self._id}"

    def _insert(self, record: AttendanceRecord) -> AttendanceRecord:
        for r in self.rows.values():
            if r.profile_id == record.profile_id and r.attendance_date == record.attendance_date:
                raise PersistenceError("Duplicate entry for key 'uq_attendance_profile_date'")
        self.rows[record.attendance_id] = record
        return record

    def get_for_profile_and_date(self, profile_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        for r in self.rows.values():
            if r.profile_id == profile_id and r.attendance_date == attendance_date:
                return r
        return None

    def get_recent_for_profile(self, profile_id: str, limit: int):
        items = [r for r in self.rows.values() if r.profile_id == profile_id]
        items.sort(key=lambda r: r.attendance_date, reverse=True)
        return items[:limit]

    def create_clock_in(self, *, profile_id, attendance_date, clock_in, status, location: GeoLocation):
        self._check_failure()
        return self._insert(
            AttendanceRecord(
                attendance_id=self._next_id(),
                profile_id=profile_id,
                attendance_date=attendance_date,
                status=status,
                clock_in=clock_in,
                location_name=location.label,
                latitude=location.latitude,
                longitude=location.longitude,
            )
        )

    def update_clock_in(self, *, attendance_id, clock_in, status, location: GeoLocation):
        self._check_failure()
        updated = replace(
            self.rows[attendance_id],
            clock_in=clock_in,
            status=status,
            location_name=location.label,
            latitude=location.latitude,
            longitude=location.longitude,
        )
        self.rows[attendance_id] = updated
        return updated

    def update_clock_out(self, *, attendance_id, profile_id, clock_out: time):
        self._check_failure()
        current = self.rows.get(attendance_id)
        if current is None or current.profile_id != profile_id:
            return None
        updated = replace(current, clock_out=clock_out)
        self.rows[attendance_id] = updated
        return updated

    def create_leave(self, *, profile_id, attendance_date, status, permission_type, notes=None):
        self._check_failure()
        return self._insert(
            AttendanceRecord(
                attendance_id=self._next_id(),
                profile_id=profile_id,
                attendance_date=attendance_date,
                status=status,
                permission_type=permission_type,
                notes=notes,
            )
        )


class InMemoryProfiles:
    def __init__(self, profiles):
        self._by_id = {p.id: p for p in profiles}

    def get_by_id(self, profile_id):
        return self._by_id.get(profile_id)

    def get_by_username(self, username):
        for p in self._by_id.values():
            if p.username == username:
                return p
        return None

    def list_active(self):
        return sorted((p for p in self._by_id.values() if p.is_active), key=lambda p: p.full_name)


class InMemorySliks:
    def __init__(self):
        self.saved = []

    def create(self, *, record, created_by):
        self.saved.append((record, created_by))
        return f"slik-{len(self.saved)}"


class InMemoryReports:
    def __init__(self):
        self.leads = []
        self.ads = []

    def create_lead_report(self, **kwargs):
        self.leads.append(kwargs)
        return f"lead-{len(self.leads)}"

    def create_ad_report(self, *, row):
        self.ads.append(row)
        return f"ad-{len(self.ads)}"


class FakeExtractor:
    def __init__(self, payload=None, error: Optional[Exception] = None):
        self.payload = payload or {}
        self.error = error
        self.calls = 0

    def extract(self, image_bytes, *, mime_type="image/jpeg"):
        self.calls += 1
        if self.error:
            raise self.error
        return dict(self.payload)


STAFF = Profile(
    id="p-staff",
    username="andika",
    email="andika@example.com",
    full_name="Andika Pratama",
    role=Role.INHOUSE,
    password_hash=generate_password_hash("staff123"),
)
ADMIN = Profile(
    id="p-admin",
    username="admin",
    email="admin@example.com",
    full_name="Admin Demo",
    role=Role.ADMINISTRATOR,
    password_hash=generate_password_hash("admin123"),
)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def extractor():
    return FakeExtractor(payload={"nik": "3201010101010001", "nama": "ANDIKA PRATAMA"})


@pytest.fixture
def sliks_repo():
    return InMemorySliks()


@pytest.fixture
def reports_repo():
    return InMemoryReports()


@pytest.fixture
def container(attendance_repo, extractor, sliks_repo, reports_repo):
    return assemble(
        profiles_repo=InMemoryProfiles([STAFF, ADMIN]),
        attendance_repo=attendance_repo,
        sliks_repo=sliks_repo,
        reports_repo=reports_repo,
        extractor=extractor,
    )


@pytest.fixture
def app(container):
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username="andika", password="staff123"):
    return client.post("/login", json={"username": username, "password": password})


@pytest.fixture
def staff_client(client):
    assert login(client).status_code == 200
    return client


@pytest.fixture
def admin_client(client):
    assert login(client, "admin", "admin123").status_code == 200
    return client


@pytest.fixture
def make_record():
    def _make(**overrides) -> AttendanceRecord:
        values = dict(
            attendance_id="att-x",
            profile_id="p-other",
            attendance_date=date(2026, 2, 2),
            status=AttendanceStatus.PRESENT,
            clock_in=time(8, 55),
            permission_type=PermissionType.NONE,
        )
        values.update(overrides)
        return AttendanceRecord(**values)

    return _make

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import parse_hhmm
from .core.constants import (
    DEFAULT_BUSINESS_TIMEZONE,
    DEFAULT_LATE_GRACE_MINUTES,
    DEFAULT_VISION_MODEL,
    DEFAULT_WORK_START,
)
from .database.connection import DBConfig, DatabaseConnection
from .identity.extractor import IdentityExtractor, OpenAIIdentityExtractor
from .identity.mysql_slik_repository import MySQLSlikRepository
from .identity.repository import SlikRepository
from .identity.service import IdentityCaptureService
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .reports.service import ReportService
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.repository import ProfileRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    profiles_repo: ProfileRepository
    attendance_repo: AttendanceRepository
    sliks_repo: SlikRepository
    reports_repo: ReportRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    identity_service: IdentityCaptureService
    report_service: ReportService


def assemble(
    *,
    profiles_repo: ProfileRepository,
    attendance_repo: AttendanceRepository,
    sliks_repo: SlikRepository,
    reports_repo: ReportRepository,
    extractor: IdentityExtractor,
    strategy_factory: Optional[AttendanceStrategyFactory] = None,
    tz_name: str = DEFAULT_BUSINESS_TIMEZONE,
) -> Container:
    """Wire services over whatever repositories are given (MySQL or in-memory)."""
    return Container(
        profiles_repo=profiles_repo,
        attendance_repo=attendance_repo,
        sliks_repo=sliks_repo,
        reports_repo=reports_repo,
        auth_service=AuthService(profiles_repo),
        attendance_service=AttendanceService(attendance_repo, strategy_factory=strategy_factory, tz_name=tz_name),
        identity_service=IdentityCaptureService(extractor, sliks_repo),
        report_service=ReportService(reports_repo),
    )


def build_container(*, db_config: dict, settings=None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    work_start = getattr(settings, "WORK_START", None)
    strategy_factory = AttendanceStrategyFactory(
        work_start=parse_hhmm(work_start) if work_start else DEFAULT_WORK_START,
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", DEFAULT_LATE_GRACE_MINUTES)),
    )
    extractor = OpenAIIdentityExtractor(
        api_key=getattr(settings, "OPENAI_API_KEY", None),
        model=getattr(settings, "VISION_MODEL", DEFAULT_VISION_MODEL),
    )

    return assemble(
        profiles_repo=MySQLProfileRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        sliks_repo=MySQLSlikRepository(conn),
        reports_repo=MySQLReportRepository(conn),
        extractor=extractor,
        strategy_factory=strategy_factory,
        tz_name=getattr(settings, "BUSINESS_TIMEZONE", DEFAULT_BUSINESS_TIMEZONE),
    )

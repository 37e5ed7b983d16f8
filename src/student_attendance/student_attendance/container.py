from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .account.service import AccountDeletionService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_TOKEN_TTL_MINUTES
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .timetable.mysql_timetable_repository import MySQLTimetableRepository
from .timetable.repository import TimetableRepository
from .timetable.service import TimetableService
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.mysql_role_repository import MySQLRoleRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import ProfileRepository, RoleRepository, UserRepository
from .users.service import AuthService, ProfileService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    profiles_repo: ProfileRepository
    roles_repo: RoleRepository
    timetable_repo: TimetableRepository
    attendance_repo: AttendanceRepository
    holidays_repo: HolidayRepository

    auth_service: AuthService
    profile_service: ProfileService
    holiday_service: HolidayService
    timetable_service: TimetableService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    account_deletion_service: AccountDeletionService


def assemble_container(
    *,
    users_repo: UserRepository,
    profiles_repo: ProfileRepository,
    roles_repo: RoleRepository,
    timetable_repo: TimetableRepository,
    attendance_repo: AttendanceRepository,
    holidays_repo: HolidayRepository,
    secret_key: str,
    token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations (MySQL or in-memory)."""

    auth_service = AuthService(
        users_repo,
        profiles_repo,
        roles_repo,
        secret_key=secret_key,
        token_ttl_minutes=token_ttl_minutes,
    )
    profile_service = ProfileService(profiles_repo)
    holiday_service = HolidayService(holidays_repo)
    timetable_service = TimetableService(timetable_repo, profiles_repo, holiday_service)
    attendance_service = AttendanceService(attendance_repo)
    dashboard_service = DashboardService(profile_service, timetable_service, attendance_service)
    account_deletion_service = AccountDeletionService(
        attendance_repo,
        holidays_repo,
        roles_repo,
        profiles_repo,
        users_repo,
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        profiles_repo=profiles_repo,
        roles_repo=roles_repo,
        timetable_repo=timetable_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        auth_service=auth_service,
        profile_service=profile_service,
        holiday_service=holiday_service,
        timetable_service=timetable_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
        account_deletion_service=account_deletion_service,
    )


def build_container(*, db_config: dict, secret_key: str, token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return assemble_container(
        users_repo=MySQLUserRepository(conn),
        profiles_repo=MySQLProfileRepository(conn),
        roles_repo=MySQLRoleRepository(conn),
        timetable_repo=MySQLTimetableRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        secret_key=secret_key,
        token_ttl_minutes=token_ttl_minutes,
        conn=conn,
    )

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .access.mysql_access_repository import MySQLAccessCodeRepository
from .access.repository import AccessCodeRepository
from .access.service import AccessCodeGate
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceMutationService, AttendanceQueryService, AttendanceReportService
from .core.constants import TOKEN_TTL_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .users.tokens import TokenIssuer


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    schedules_repo: ScheduleRepository
    attendance_repo: AttendanceRepository
    access_repo: AccessCodeRepository

    token_issuer: TokenIssuer
    auth_service: AuthService
    schedule_service: ScheduleService
    attendance_query_service: AttendanceQueryService
    attendance_report_service: AttendanceReportService
    attendance_mutation_service: AttendanceMutationService
    access_gate: AccessCodeGate


def wire_container(
    *,
    users_repo: UserRepository,
    schedules_repo: ScheduleRepository,
    attendance_repo: AttendanceRepository,
    access_repo: AccessCodeRepository,
    token_issuer: TokenIssuer,
    conn: Optional[DatabaseConnection] = None,
    **service_kwargs,
) -> Container:
    """Build services on top of the given repositories (real or in-memory)."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        access_repo=access_repo,
        token_issuer=token_issuer,
        auth_service=AuthService(users_repo, token_issuer),
        schedule_service=ScheduleService(schedules_repo),
        attendance_query_service=AttendanceQueryService(attendance_repo),
        attendance_report_service=AttendanceReportService(attendance_repo),
        attendance_mutation_service=AttendanceMutationService(attendance_repo, **service_kwargs),
        access_gate=AccessCodeGate(access_repo),
    )


def build_container(*, db_config: dict, jwt_secret: str, token_ttl_seconds: int = TOKEN_TTL_SECONDS) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", 0)),
    )
    conn = DatabaseConnection(config)

    return wire_container(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        schedules_repo=MySQLScheduleRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        access_repo=MySQLAccessCodeRepository(conn),
        token_issuer=TokenIssuer(jwt_secret, ttl_seconds=token_ttl_seconds),
    )

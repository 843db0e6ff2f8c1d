from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import AccessCodeRepository


class MySQLAccessCodeRepository(AccessCodeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def matches(self, *, teacher_id: int, para_id: int, access_code: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS hit FROM paras WHERE teacher_id=%s AND id=%s AND access_code=%s",
                (int(teacher_id), int(para_id), access_code),
            )
            return fetchone(cur) is not None

    def clear_if_matches(self, *, teacher_id: int, para_id: int, access_code: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE paras
                SET access_code=NULL
                WHERE teacher_id=%s AND id=%s AND access_code=%s
                """,
                (int(teacher_id), int(para_id), access_code),
            )
            return cur.rowcount > 0

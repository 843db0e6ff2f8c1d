from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import RangeVisitRow, VisitChange, VisitRow
from .repository import AttendanceRepository, MissingVisitError


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_visits_for_para(self, *, para_id: int, visit_date: date) -> Sequence[VisitRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.usergroup, v.is_visited, v.student_id, s.firstname, s.lastname
                FROM visits v
                JOIN students s ON s.id = v.student_id
                WHERE v.para_id=%s AND v.visit_date=%s
                ORDER BY s.lastname, s.firstname, s.id
                """,
                (int(para_id), visit_date),
            )
            return [
                VisitRow(
                    group=r["usergroup"],
                    student_id=int(r["student_id"]),
                    student_name=r["firstname"],
                    student_lastname=r["lastname"],
                    is_visited=bool(r["is_visited"]),
                )
                for r in fetchall(cur)
            ]

    def list_visits_in_range(
        self,
        *,
        teacher_id: int,
        lesson_id: int,
        group: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[RangeVisitRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.firstname, s.lastname, v.student_id, v.visit_date, v.is_visited
                FROM visits v
                JOIN students s ON s.id = v.student_id
                JOIN paras p ON p.id = v.para_id
                WHERE p.teacher_id=%s
                  AND p.lesson_id=%s
                  AND EXISTS (SELECT 1 FROM para_groups pg WHERE pg.para_id = p.id AND pg.group_name=%s)
                  AND v.visit_date BETWEEN %s AND %s
                ORDER BY v.visit_date, p.time, v.para_id, v.student_id
                """,
                (int(teacher_id), int(lesson_id), group, start_date, end_date),
            )
            return [
                RangeVisitRow(
                    student_id=int(r["student_id"]),
                    student_name=r["firstname"],
                    student_lastname=r["lastname"],
                    visit_date=r["visit_date"],
                    is_visited=bool(r["is_visited"]),
                )
                for r in fetchall(cur)
            ]

    def update_visits(self, changes: Sequence[VisitChange]) -> int:
        # One cursor context = one transaction; any raise rolls back every update.
        with db_cursor(self._conn_factory) as (_, cur):
            for change in changes:
                cur.execute(
                    """
                    UPDATE visits
                    SET is_visited=%s
                    WHERE student_id=%s AND para_id=%s AND visit_date=%s
                    """,
                    (int(change.is_visited), change.student_id, change.para_id, change.visit_date),
                )
                if cur.rowcount == 0:
                    raise MissingVisitError(
                        f"no visit for student={change.student_id} para={change.para_id} "
                        f"date={change.visit_date.isoformat()}"
                    )
            return len(changes)

    def find_para_id_by_pair_code(self, pair_code: str) -> Optional[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM paras WHERE pair_code=%s", (pair_code,))
            r = fetchone(cur)
            return int(r["id"]) if r else None

    def mark_visited(self, *, student_id: int, para_id: int, visit_date: date) -> bool:
        # Only students whose group the para serves get a row; unknown students match nothing.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO visits(student_id, para_id, visit_date, is_visited)
                SELECT s.id, pg.para_id, %s, 1
                FROM students s
                JOIN para_groups pg ON pg.group_name = s.usergroup
                WHERE s.id=%s AND pg.para_id=%s
                ON DUPLICATE KEY UPDATE is_visited=1
                """,
                (visit_date, int(student_id), int(para_id)),
            )
            return cur.rowcount > 0

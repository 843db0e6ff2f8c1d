from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import format_time
from ..core.enums import Weekday
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, split_list
from .model import ScheduleEntry
from .repository import ScheduleRepository

_SELECT_ENTRIES = """
    SELECT
        p.id AS para_id,
        l.id AS lesson_id,
        l.title AS lesson_title,
        p.time,
        (SELECT GROUP_CONCAT(pg.group_name ORDER BY pg.group_name SEPARATOR ',')
           FROM para_groups pg WHERE pg.para_id = p.id) AS group_list,
        (SELECT GROUP_CONCAT(pw.day_of_week ORDER BY pw.day_of_week SEPARATOR ',')
           FROM para_weekdays pw WHERE pw.para_id = p.id) AS weekday_list
    FROM paras p
    JOIN lessons l ON l.id = p.lesson_id
"""


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_teacher_and_weekday(self, *, teacher_id: int, weekday: Weekday) -> Sequence[ScheduleEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_ENTRIES
                + """
                WHERE p.teacher_id=%s
                  AND EXISTS (SELECT 1 FROM para_weekdays w WHERE w.para_id = p.id AND w.day_of_week=%s)
                ORDER BY p.time, p.id
                """,
                (int(teacher_id), int(weekday)),
            )
            return [self._to_entry(r) for r in fetchall(cur)]

    def list_for_teacher(self, *, teacher_id: int) -> Sequence[ScheduleEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_ENTRIES
                + """
                WHERE p.teacher_id=%s
                ORDER BY l.title, p.time, p.id
                """,
                (int(teacher_id),),
            )
            return [self._to_entry(r) for r in fetchall(cur)]

    @staticmethod
    def _to_entry(r: dict) -> ScheduleEntry:
        return ScheduleEntry(
            para_id=int(r["para_id"]),
            lesson_id=int(r["lesson_id"]),
            lesson_title=r["lesson_title"],
            time=format_time(r.get("time")),
            groups=split_list(r.get("group_list")),
            weekdays=[int(d) for d in split_list(r.get("weekday_list"))],
        )

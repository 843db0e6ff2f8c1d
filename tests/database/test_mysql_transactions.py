from __future__ import annotations

from datetime import date

import pytest

from src.attendance_journal.attendance_journal.access.mysql_access_repository import MySQLAccessCodeRepository
from src.attendance_journal.attendance_journal.attendance.model import VisitChange
from src.attendance_journal.attendance_journal.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.attendance_journal.attendance_journal.attendance.repository import MissingVisitError


class FakeCursor:
    def __init__(self, rowcounts):
        self._rowcounts = list(rowcounts)
        self.executed = []
        self.rowcount = 0
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))
        self.rowcount = self._rowcounts.pop(0) if self._rowcounts else 0

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, *rowcounts):
        self.cursor = FakeCursor(rowcounts)
        self.conn = FakeConnection(self.cursor)
        self.connects = 0

    def connect(self):
        self.connects += 1
        return self.conn


DAY = date(2026, 3, 2)


def _changes(n):
    return [VisitChange(student_id=i, para_id=10, visit_date=DAY, is_visited=True) for i in range(1, n + 1)]


def test_batch_runs_in_one_connection_and_commits():
    factory = FakeConnFactory(1, 1, 1)

    updated = MySQLAttendanceRepository(factory).update_visits(_changes(3))

    assert updated == 3
    assert factory.connects == 1
    assert len(factory.cursor.executed) == 3
    assert factory.conn.committed and not factory.conn.rolled_back
    assert factory.conn.closed


def test_batch_with_unmatched_key_rolls_back_and_stops():
    factory = FakeConnFactory(1, 0, 1)

    with pytest.raises(MissingVisitError):
        MySQLAttendanceRepository(factory).update_visits(_changes(3))

    assert len(factory.cursor.executed) == 2
    assert factory.conn.rolled_back and not factory.conn.committed
    assert factory.conn.closed


def test_update_statement_targets_composite_key():
    factory = FakeConnFactory(1)

    MySQLAttendanceRepository(factory).update_visits(
        [VisitChange(student_id=4, para_id=10, visit_date=DAY, is_visited=False)]
    )

    sql, params = factory.cursor.executed[0]
    assert "WHERE student_id=%s AND para_id=%s AND visit_date=%s" in sql
    assert params == (0, 4, 10, DAY)


def test_revoke_is_a_single_conditional_update():
    factory = FakeConnFactory(1)

    assert MySQLAccessCodeRepository(factory).clear_if_matches(teacher_id=7, para_id=10, access_code="c") is True

    assert len(factory.cursor.executed) == 1
    sql, params = factory.cursor.executed[0]
    assert sql.startswith("UPDATE paras SET access_code=NULL")
    assert params == (7, 10, "c")


def test_revoke_without_match_reports_false():
    factory = FakeConnFactory(0)

    assert MySQLAccessCodeRepository(factory).clear_if_matches(teacher_id=7, para_id=10, access_code="c") is False


def test_mark_inserts_only_for_students_in_para_groups():
    factory = FakeConnFactory(1)

    assert MySQLAttendanceRepository(factory).mark_visited(student_id=3, para_id=10, visit_date=DAY) is True

    sql, params = factory.cursor.executed[0]
    assert "JOIN para_groups pg ON pg.group_name = s.usergroup" in sql
    assert sql.endswith("ON DUPLICATE KEY UPDATE is_visited=1")
    assert params == (DAY, 3, 10)
    assert factory.conn.committed


@pytest.mark.parametrize("student_id", [4, 999])
def test_mark_for_ineligible_or_unknown_student_writes_nothing(student_id):
    factory = FakeConnFactory(0)

    assert MySQLAttendanceRepository(factory).mark_visited(student_id=student_id, para_id=10, visit_date=DAY) is False
    assert len(factory.cursor.executed) == 1

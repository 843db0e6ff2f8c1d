from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.attendance_journal.attendance_journal.attendance.model import RangeVisitRow, VisitRow
from src.attendance_journal.attendance_journal.attendance.repository import MissingVisitError
from src.attendance_journal.attendance_journal.container import wire_container
from src.attendance_journal.attendance_journal.core.enums import Role
from src.attendance_journal.attendance_journal.core.exceptions import ConflictError
from src.attendance_journal.attendance_journal.main import create_app
from src.attendance_journal.attendance_journal.schedules.model import ScheduleEntry
from src.attendance_journal.attendance_journal.users.model import Teacher, User
from src.attendance_journal.attendance_journal.users.tokens import TokenIssuer

TEST_JWT_SECRET = "test-jwt-secret"
FIXED_TODAY = date(2026, 3, 2)


@dataclass
class Student:
    student_id: int
    firstname: str
    lastname: str
    usergroup: str


@dataclass
class Para:
    para_id: int
    teacher_id: int
    lesson_id: int
    lesson_title: str
    time: str
    groups: list[str]
    weekdays: list[int]
    pair_code: Optional[str] = None
    access_code: Optional[str] = None


@dataclass
class InMemoryStore:
    """Shared state behind the in-memory repositories (stands in for MySQL)."""

    students: dict[int, Student] = field(default_factory=dict)
    paras: dict[int, Para] = field(default_factory=dict)
    visits: dict[tuple[int, int, date], bool] = field(default_factory=dict)
    users: dict[str, User] = field(default_factory=dict)
    teachers: dict[int, Teacher] = field(default_factory=dict)


class InMemoryAttendance:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_visits_for_para(self, *, para_id, visit_date):
        out = []
        for (sid, pid, d), visited in self._store.visits.items():
            if pid == para_id and d == visit_date:
                s = self._store.students[sid]
                out.append(VisitRow(s.usergroup, sid, s.firstname, s.lastname, visited))
        return out

    def list_visits_in_range(self, *, teacher_id, lesson_id, group, start_date, end_date):
        out = []
        for (sid, pid, d), visited in sorted(self._store.visits.items(), key=lambda kv: (kv[0][2], kv[0][1])):
            p = self._store.paras[pid]
            if p.teacher_id == teacher_id and p.lesson_id == lesson_id and group in p.groups and start_date <= d <= end_date:
                s = self._store.students[sid]
                out.append(RangeVisitRow(sid, s.firstname, s.lastname, d, visited))
        return out

    def update_visits(self, changes):
        snapshot = dict(self._store.visits)
        try:
            for c in changes:
                key = (c.student_id, c.para_id, c.visit_date)
                if key not in self._store.visits:
                    raise MissingVisitError(str(key))
                self._store.visits[key] = c.is_visited
        except Exception:
            self._store.visits = snapshot
            raise
        return len(changes)

    def find_para_id_by_pair_code(self, pair_code):
        for p in self._store.paras.values():
            if p.pair_code == pair_code:
                return p.para_id
        return None

    def mark_visited(self, *, student_id, para_id, visit_date):
        s = self._store.students.get(student_id)
        if s is None or s.usergroup not in self._store.paras[para_id].groups:
            return False
        self._store.visits[(student_id, para_id, visit_date)] = True
        return True


class InMemoryAccessCodes:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _match(self, teacher_id, para_id, access_code) -> Optional[Para]:
        p = self._store.paras.get(para_id)
        if p and p.teacher_id == teacher_id and p.access_code is not None and p.access_code == access_code:
            return p
        return None

    def matches(self, *, teacher_id, para_id, access_code):
        return self._match(teacher_id, para_id, access_code) is not None

    def clear_if_matches(self, *, teacher_id, para_id, access_code):
        p = self._match(teacher_id, para_id, access_code)
        if p is None:
            return False
        p.access_code = None
        return True


class InMemorySchedules:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _entry(self, p: Para) -> ScheduleEntry:
        return ScheduleEntry(p.para_id, p.lesson_id, p.lesson_title, p.time, list(p.groups), list(p.weekdays))

    def list_for_teacher_and_weekday(self, *, teacher_id, weekday):
        paras = [p for p in self._store.paras.values() if p.teacher_id == teacher_id and int(weekday) in p.weekdays]
        return [self._entry(p) for p in sorted(paras, key=lambda p: p.time)]

    def list_for_teacher(self, *, teacher_id):
        return [self._entry(p) for p in self._store.paras.values() if p.teacher_id == teacher_id]


class InMemoryUsers:
    def __init__(self, store: InMemoryStore):
        self._store = store

    def get_by_email(self, email):
        return self._store.users.get(email)

    def create_user(self, *, email, password_hash):
        if email in self._store.users:
            raise ConflictError("User already exists")
        user = User(user_id=len(self._store.users) + 1, email=email, password_hash=password_hash, role=Role.STUDENT)
        self._store.users[email] = user
        return user

    def get_teacher_for_user(self, user_id):
        return self._store.teachers.get(user_id)


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def store() -> InMemoryStore:
    s = InMemoryStore()
    s.students = {
        1: Student(1, "Alan", "Turing", "CS-101"),
        2: Student(2, "Edsger", "Dijkstra", "CS-102"),
        3: Student(3, "Grace", "Hopper", "CS-101"),
    }
    s.paras = {
        10: Para(10, 7, 100, "Discrete Mathematics", "08:30:00", ["CS-101", "CS-102"], [1, 3], "MATH-0830", "open-sesame"),
        11: Para(11, 7, 200, "Databases", "10:15:00", ["CS-101"], [2]),
    }
    for sid in (1, 2, 3):
        s.visits[(sid, 10, FIXED_TODAY)] = False
    return s


@pytest.fixture
def container(store):
    return wire_container(
        users_repo=InMemoryUsers(store),
        schedules_repo=InMemorySchedules(store),
        attendance_repo=InMemoryAttendance(store),
        access_repo=InMemoryAccessCodes(store),
        token_issuer=TokenIssuer(TEST_JWT_SECRET),
        today=lambda: FIXED_TODAY,
    )


@pytest.fixture
def client(container):
    app = create_app(container)
    return app.test_client()


@pytest.fixture
def jwt_secret() -> str:
    return TEST_JWT_SECRET

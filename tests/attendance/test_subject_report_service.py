from __future__ import annotations

from datetime import date

import pytest

from src.attendance_journal.attendance_journal.attendance.model import RangeVisitRow
from src.attendance_journal.attendance_journal.attendance.service import AttendanceReportService, collect_by_student
from src.attendance_journal.attendance_journal.core.exceptions import ValidationError


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def list_visits_in_range(self, *, teacher_id, lesson_id, group, start_date, end_date):
        self.last_args = {
            "teacher_id": teacher_id,
            "lesson_id": lesson_id,
            "group": group,
            "start_date": start_date,
            "end_date": end_date,
        }
        return self._rows


PARAMS = {
    "teacher_id": "7",
    "subject_id": "100",
    "group_id": "CS-101",
    "start_date": "2026-03-01",
    "end_date": "2026-03-31",
}


def test_collect_by_student_keeps_arrival_order():
    rows = [
        RangeVisitRow(2, "Grace", "Hopper", date(2026, 3, 2), True),
        RangeVisitRow(1, "Alan", "Turing", date(2026, 3, 2), False),
        RangeVisitRow(2, "Grace", "Hopper", date(2026, 3, 4), False),
    ]

    students = collect_by_student(rows)

    assert [s.student_id for s in students] == [2, 1]
    assert students[0].to_dict() == {
        "studentName": "Grace",
        "studentLastname": "Hopper",
        "studentId": 2,
        "visits": [
            {"date": "2026-03-02", "isVisited": True},
            {"date": "2026-03-04", "isVisited": False},
        ],
    }


def test_report_forwards_filters():
    repo = FakeAttendanceRepo([])
    AttendanceReportService(repo).by_subject(**PARAMS)

    assert repo.last_args == {
        "teacher_id": 7,
        "lesson_id": 100,
        "group": "CS-101",
        "start_date": date(2026, 3, 1),
        "end_date": date(2026, 3, 31),
    }


def test_empty_range_is_an_empty_list_not_an_error():
    assert AttendanceReportService(FakeAttendanceRepo([])).by_subject(**PARAMS) == []


def test_single_day_range_is_allowed():
    params = dict(PARAMS, start_date="2026-03-02", end_date="2026-03-02")
    repo = FakeAttendanceRepo([])

    AttendanceReportService(repo).by_subject(**params)

    assert repo.last_args["start_date"] == repo.last_args["end_date"]


@pytest.mark.parametrize("missing", sorted(PARAMS))
def test_every_param_is_required(missing):
    params = dict(PARAMS, **{missing: None})

    with pytest.raises(ValidationError):
        AttendanceReportService(FakeAttendanceRepo([])).by_subject(**params)


def test_inverted_range_is_rejected():
    params = dict(PARAMS, start_date="2026-04-01", end_date="2026-03-01")

    with pytest.raises(ValidationError):
        AttendanceReportService(FakeAttendanceRepo([])).by_subject(**params)

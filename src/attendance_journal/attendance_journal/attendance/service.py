from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Iterable, Sequence

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.validators import parse_bool, parse_int, require_fields, require_non_empty
from ..core.exceptions import InternalError, InvalidPairCodeError, NotFoundError, ValidationError
from .model import GroupRoster, RangeVisitRow, StudentVisits, VisitChange, VisitRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def group_by_usergroup(rows: Iterable[VisitRow]) -> list[GroupRoster]:
    """Partition roster rows by student group, keeping first-seen group order."""
    rosters: dict[str, GroupRoster] = {}
    for row in rows:
        roster = rosters.get(row.group)
        if roster is None:
            roster = rosters[row.group] = GroupRoster(group=row.group)
        roster.visits.append(row)
    return list(rosters.values())


def collect_by_student(rows: Iterable[RangeVisitRow]) -> list[StudentVisits]:
    """Fold range rows into one visit history per student, in arrival order."""
    students: dict[int, StudentVisits] = {}
    for row in rows:
        entry = students.get(row.student_id)
        if entry is None:
            entry = students[row.student_id] = StudentVisits(
                student_id=row.student_id,
                student_name=row.student_name,
                student_lastname=row.student_lastname,
            )
        entry.visits.append((row.visit_date, row.is_visited))
    return list(students.values())


class AttendanceQueryService:
    """Roster of a single lesson instance on a single date."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_roster(self, *, para_id: Any, visit_date: Any) -> list[GroupRoster]:
        require_fields(
            {"paraId": para_id, "date": visit_date},
            ("paraId", "date"),
            "Please provide both paraId and date",
        )
        rows = self._attendance.list_visits_for_para(
            para_id=parse_int(para_id, "paraId"),
            visit_date=parse_iso_date(visit_date, "date"),
        )
        rosters = group_by_usergroup(rows)
        if not rosters:
            raise NotFoundError("No attendance records found for the given criteria")
        return rosters


class AttendanceReportService:
    """Per-student visit histories for one subject and group over a date range.

    Unlike the roster, an empty range is a valid answer and yields an empty list.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def by_subject(
        self,
        *,
        teacher_id: Any,
        subject_id: Any,
        group_id: Any,
        start_date: Any,
        end_date: Any,
    ) -> list[StudentVisits]:
        require_fields(
            {
                "teacherId": teacher_id,
                "subjectId": subject_id,
                "groupId": group_id,
                "startDate": start_date,
                "endDate": end_date,
            },
            ("teacherId", "subjectId", "groupId", "startDate", "endDate"),
            "Please provide teacherId, subjectId, groupId, startDate, and endDate",
        )
        start = parse_iso_date(start_date, "startDate")
        end = parse_iso_date(end_date, "endDate")
        if start > end:
            raise ValidationError("startDate must not be after endDate")

        rows = self._attendance.list_visits_in_range(
            teacher_id=parse_int(teacher_id, "teacherId"),
            lesson_id=parse_int(subject_id, "subjectId"),
            group=require_non_empty(str(group_id), "groupId"),
            start_date=start,
            end_date=end,
        )
        return collect_by_student(rows)


class AttendanceMutationService:
    """Batch attendance updates and pair-code self check-in."""

    def __init__(self, attendance: AttendanceRepository, *, today: Callable[[], date] = today_local):
        self._attendance = attendance
        self._today = today

    @staticmethod
    def parse_changes(visits: Any) -> list[VisitChange]:
        if not isinstance(visits, list) or not visits:
            raise ValidationError("Please provide an array of attendance records")

        changes: list[VisitChange] = []
        for idx, record in enumerate(visits):
            if not isinstance(record, dict):
                raise ValidationError(f"visits[{idx}] must be an object")
            missing = [k for k in ("studentId", "paraId", "date", "isVisited") if record.get(k) is None]
            if missing:
                raise ValidationError(f"visits[{idx}] is missing {', '.join(missing)}")
            changes.append(
                VisitChange(
                    student_id=parse_int(record["studentId"], f"visits[{idx}].studentId"),
                    para_id=parse_int(record["paraId"], f"visits[{idx}].paraId"),
                    visit_date=parse_iso_date(record["date"], f"visits[{idx}].date"),
                    is_visited=parse_bool(record["isVisited"], f"visits[{idx}].isVisited"),
                )
            )
        return changes

    def apply_batch(self, visits: Any) -> int:
        """Validate every record, then apply them all atomically.

        Any store failure (including a record with no matching Visit row) has
        already been rolled back by the time InternalError is raised.
        """
        changes = self.parse_changes(visits)
        try:
            updated = self._attendance.update_visits(changes)
        except Exception as e:
            raise InternalError("Batch attendance update failed") from e

        logger.info("updated %d visit(s)", updated)
        return updated

    def mark_by_pair_code(self, *, student_id: Any, pair_code: Any) -> bool:
        require_fields(
            {"studentId": student_id, "pairCode": pair_code},
            ("studentId", "pairCode"),
            "Please provide both studentId and pairCode",
        )
        sid = parse_int(student_id, "studentId")
        code = require_non_empty(str(pair_code), "pairCode")

        para_id = self._attendance.find_para_id_by_pair_code(code)
        if para_id is None:
            raise InvalidPairCodeError("Invalid pair code")

        if not self._attendance.mark_visited(student_id=sid, para_id=para_id, visit_date=self._today()):
            logger.info("student %s is not enrolled in a group of para %s", sid, para_id)
            return False

        logger.info("student %s checked in to para %s", sid, para_id)
        return True

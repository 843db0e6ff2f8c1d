from __future__ import annotations

from typing import Any, Sequence

from ..common.datetime_utils import parse_weekday
from ..common.validators import parse_int, require_fields
from ..core.exceptions import NotFoundError
from .model import ScheduleEntry
from .repository import ScheduleRepository


class ScheduleService:
    """Use cases: a teacher's schedule for a weekday and the subjects they teach.

    Both lookups treat an empty result as NotFoundError.
    """

    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def get_schedule(self, *, teacher_id: Any, day_of_week: Any) -> Sequence[ScheduleEntry]:
        require_fields(
            {"teacherId": teacher_id, "dayOfWeek": day_of_week},
            ("teacherId", "dayOfWeek"),
            "Please provide both teacherId and day of week",
        )
        weekday = parse_weekday(day_of_week)
        entries = self._schedules.list_for_teacher_and_weekday(
            teacher_id=parse_int(teacher_id, "teacherId"),
            weekday=weekday,
        )
        if not entries:
            raise NotFoundError("No schedule found for the given teacher on this date")
        return entries

    def list_subjects(self, *, teacher_id: Any) -> Sequence[ScheduleEntry]:
        require_fields({"teacherId": teacher_id}, ("teacherId",), "Please provide teacherId")
        entries = self._schedules.list_for_teacher(teacher_id=parse_int(teacher_id, "teacherId"))
        if not entries:
            raise NotFoundError("No subjects found for the given teacher")
        return entries

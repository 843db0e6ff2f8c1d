from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ScheduleEntry:
    """Read-model: one lesson instance in a teacher's weekly schedule."""

    para_id: int
    lesson_id: int
    lesson_title: str
    time: Optional[str]
    groups: list[str] = field(default_factory=list)
    weekdays: list[int] = field(default_factory=list)

    def to_schedule_dict(self) -> dict:
        return {
            "para_id": self.para_id,
            "lesson_title": self.lesson_title,
            "groupArr": list(self.groups),
            "time": self.time,
            "dayOfWeekArr": list(self.weekdays),
        }

    def to_subject_dict(self) -> dict:
        return {
            "subject_id": self.lesson_id,
            "subject_title": self.lesson_title,
            "groupArr": list(self.groups),
            "time": self.time,
        }

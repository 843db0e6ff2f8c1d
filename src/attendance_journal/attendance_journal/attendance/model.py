from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class VisitRow:
    """Read-model: one Visit of a lesson instance on a date, joined with its Student."""

    group: str
    student_id: int
    student_name: str
    student_lastname: str
    is_visited: bool

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "studentLastname": self.student_lastname,
            "isVisited": self.is_visited,
        }


@dataclass
class GroupRoster:
    group: str
    visits: list[VisitRow] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"group": self.group, "visits": [v.to_dict() for v in self.visits]}


@dataclass(frozen=True)
class RangeVisitRow:
    """Read-model for date-range reports (one Visit joined with Student)."""

    student_id: int
    student_name: str
    student_lastname: str
    visit_date: date
    is_visited: bool


@dataclass
class StudentVisits:
    student_id: int
    student_name: str
    student_lastname: str
    visits: list[tuple[date, bool]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "studentName": self.student_name,
            "studentLastname": self.student_lastname,
            "studentId": self.student_id,
            "visits": [{"date": d.isoformat(), "isVisited": v} for d, v in self.visits],
        }


@dataclass(frozen=True)
class VisitChange:
    """One entry of a batch update, addressed by the (student, para, date) key."""

    student_id: int
    para_id: int
    visit_date: date
    is_visited: bool

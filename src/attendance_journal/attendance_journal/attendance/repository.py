from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import RangeVisitRow, VisitChange, VisitRow


class MissingVisitError(LookupError):
    """A batch update addressed a (student, para, date) key with no Visit row."""


class AttendanceRepository(Protocol):
    def list_visits_for_para(self, *, para_id: int, visit_date: date) -> Sequence[VisitRow]:
        raise NotImplementedError

    def list_visits_in_range(
        self,
        *,
        teacher_id: int,
        lesson_id: int,
        group: str,
        start_date: date,
        end_date: date,
    ) -> Sequence[RangeVisitRow]:
        raise NotImplementedError

    def update_visits(self, changes: Sequence[VisitChange]) -> int:
        """Apply every change in one transaction or none of them.

        Raises MissingVisitError (after rolling back) when a change matches no row.
        """

        raise NotImplementedError

    def find_para_id_by_pair_code(self, pair_code: str) -> Optional[int]:
        raise NotImplementedError

    def mark_visited(self, *, student_id: int, para_id: int, visit_date: date) -> bool:
        """Set is_visited on the keyed Visit, creating the row if it is missing.

        Returns False, writing nothing, when the student is unknown or their
        group is not one the para serves.
        """

        raise NotImplementedError

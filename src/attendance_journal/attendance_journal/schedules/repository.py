from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Weekday
from .model import ScheduleEntry


class ScheduleRepository(Protocol):
    """Read-only view of lesson instances (paras) for schedule lookups."""

    def list_for_teacher_and_weekday(self, *, teacher_id: int, weekday: Weekday) -> Sequence[ScheduleEntry]:
        raise NotImplementedError

    def list_for_teacher(self, *, teacher_id: int) -> Sequence[ScheduleEntry]:
        raise NotImplementedError

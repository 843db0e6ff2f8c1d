from __future__ import annotations

from enum import Enum, IntEnum


class Role(str, Enum):
    """User role stored in users.role."""

    TEACHER = "teacher"
    STUDENT = "student"


class Weekday(IntEnum):
    """ISO weekday numbering used by para_weekdays.day_of_week."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

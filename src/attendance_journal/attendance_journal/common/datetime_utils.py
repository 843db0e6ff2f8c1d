from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from ..core.enums import Weekday
from ..core.exceptions import ValidationError


def parse_iso_date(value: Any, field_name: str = "date") -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def parse_weekday(value: Any) -> Weekday:
    """Accept ISO weekday numbers (1..7) or English names, case-insensitive."""
    s = str(value).strip()
    if s.isdigit():
        try:
            return Weekday(int(s))
        except ValueError:
            raise ValidationError("dayOfWeek must be between 1 and 7")
    try:
        return Weekday[s.upper()]
    except KeyError:
        raise ValidationError("dayOfWeek is not a valid weekday")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def format_time(value: Any) -> Optional[str]:
    """Render a TIME column as HH:MM:SS.

    mysql-connector returns TIME as datetime.timedelta; other drivers may hand
    back datetime.time or a string.
    """
    if value is None:
        return None
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours, rest = divmod(total_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return str(value)

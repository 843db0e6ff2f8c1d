from __future__ import annotations

import re
from typing import Any, Mapping

from ..core.exceptions import ValidationError

INT_PATTERN = re.compile(r"-?[0-9]+")


def require_fields(data: Mapping[str, Any], names: tuple[str, ...], message: str) -> None:
    """Fail with ``message`` unless every field in ``names`` is present and truthy."""
    for name in names:
        value = data.get(name)
        if value is None or value == "" or value is False:
            raise ValidationError(message)


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is invalid")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def parse_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INT_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    raise ValidationError(f"{field_name} must be an integer")


def parse_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise ValidationError(f"{field_name} must be a boolean")

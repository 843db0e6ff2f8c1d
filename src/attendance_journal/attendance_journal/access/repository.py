from __future__ import annotations

from typing import Protocol


class AccessCodeRepository(Protocol):
    def matches(self, *, teacher_id: int, para_id: int, access_code: str) -> bool:
        raise NotImplementedError

    def clear_if_matches(self, *, teacher_id: int, para_id: int, access_code: str) -> bool:
        """Clear the access code in the same statement that checks it."""

        raise NotImplementedError

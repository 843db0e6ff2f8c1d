from __future__ import annotations

import logging
from typing import Any

from ..common.validators import parse_int, require_fields, require_non_empty
from .repository import AccessCodeRepository

logger = logging.getLogger(__name__)

ACCESS_FIELDS_REQUIRED = "Please provide teacherId, pairId, and accessCode"


class AccessCodeGate:
    """Checks and revokes the teacher-issued access code of a lesson instance.

    A mismatch is an authorization answer (False), never an error.
    """

    def __init__(self, codes: AccessCodeRepository):
        self._codes = codes

    @staticmethod
    def _parse(teacher_id: Any, pair_id: Any, access_code: Any) -> tuple[int, int, str]:
        require_fields(
            {"teacherId": teacher_id, "pairId": pair_id, "accessCode": access_code},
            ("teacherId", "pairId", "accessCode"),
            ACCESS_FIELDS_REQUIRED,
        )
        return (
            parse_int(teacher_id, "teacherId"),
            parse_int(pair_id, "pairId"),
            require_non_empty(str(access_code), "accessCode"),
        )

    def verify(self, *, teacher_id: Any, pair_id: Any, access_code: Any) -> bool:
        tid, pid, code = self._parse(teacher_id, pair_id, access_code)
        return self._codes.matches(teacher_id=tid, para_id=pid, access_code=code)

    def revoke(self, *, teacher_id: Any, pair_id: Any, access_code: Any) -> bool:
        tid, pid, code = self._parse(teacher_id, pair_id, access_code)
        revoked = self._codes.clear_if_matches(teacher_id=tid, para_id=pid, access_code=code)
        if revoked:
            logger.info("access code revoked for para %s", pid)
        return revoked

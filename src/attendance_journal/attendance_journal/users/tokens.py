from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from ..core.constants import JWT_ALGORITHM, TOKEN_TTL_SECONDS


class TokenIssuer:
    """Signs short-lived bearer tokens binding {userId, email}."""

    def __init__(self, secret: str, *, ttl_seconds: int = TOKEN_TTL_SECONDS):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl_seconds = int(ttl_seconds)

    def issue(self, *, user_id: int, email: str, now: datetime | None = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "userId": int(user_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self._ttl_seconds)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def decode(self, token: str) -> dict:
        """Returns the payload if valid, else raises jwt exceptions."""
        return jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])

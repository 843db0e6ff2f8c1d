from __future__ import annotations

from typing import Optional, Protocol

from .model import Teacher, User


class UserRepository(Protocol):
    """Repository interface for the credential store.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, *, email: str, password_hash: str) -> User:
        """Insert a user; raises ConflictError when the email is taken."""

        raise NotImplementedError

    def get_teacher_for_user(self, user_id: int) -> Optional[Teacher]:
        raise NotImplementedError

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_fields, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from .model import Teacher, User
from .repository import UserRepository
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)

CREDENTIALS_REQUIRED = "Please provide both email and password"


@dataclass(frozen=True)
class LoginResult:
    user: User
    teacher: Optional[Teacher]
    token: str

    def to_dict(self) -> dict:
        user = {"id": self.user.user_id, "email": self.user.email, "role": self.user.role.value}
        if self.teacher:
            user.update(
                {
                    "teacherId": self.teacher.teacher_id,
                    "firstname": self.teacher.firstname,
                    "lastname": self.teacher.lastname,
                }
            )
        return {"user": user, "token": self.token}


class AuthService:
    """Use cases: login and registration."""

    def __init__(self, users: UserRepository, tokens: TokenIssuer):
        self._users = users
        self._tokens = tokens

    def login(self, email: Optional[str], password: Optional[str]) -> LoginResult:
        require_fields({"email": email, "password": password}, ("email", "password"), CREDENTIALS_REQUIRED)
        email = require_non_empty(email, "email")
        if not isinstance(password, str):
            raise ValidationError("password is invalid")

        user = self._users.get_by_email(email)
        if not user:
            raise NotFoundError("User not found")

        try:
            ok = check_password_hash(user.password_hash, password)
        except (TypeError, ValueError):
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Invalid password")

        teacher = None
        if user.role == Role.TEACHER:
            teacher = self._users.get_teacher_for_user(user.user_id)

        token = self._tokens.issue(user_id=user.user_id, email=user.email)
        logger.info("user %s logged in", user.user_id)
        return LoginResult(user=user, teacher=teacher, token=token)

    def register(self, email: Optional[str], password: Optional[str]) -> User:
        require_fields({"email": email, "password": password}, ("email", "password"), CREDENTIALS_REQUIRED)
        email = require_non_empty(email, "email")
        require_min_length(password, "password", MIN_PASSWORD_LENGTH)

        if self._users.get_by_email(email):
            raise ConflictError("User already exists")

        user = self._users.create_user(email=email, password_hash=generate_password_hash(password))
        logger.info("registered user %s", user.user_id)
        return user

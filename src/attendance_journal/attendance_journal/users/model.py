from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account in the credential store.

    Plain data object; no DB access code lives here.
    """

    user_id: int
    email: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class Teacher:
    """1:1 extension of a User with role=teacher."""

    teacher_id: int
    user_id: int
    firstname: str
    lastname: str

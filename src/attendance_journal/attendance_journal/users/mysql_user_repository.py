from __future__ import annotations

from typing import Optional

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.enums import Role
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Teacher, User
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, email, password_hash, role
                FROM users
                WHERE email=%s
                """,
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                user_id=int(row["id"]),
                email=row["email"],
                password_hash=row["password_hash"],
                role=Role(row["role"]),
            )

    def create_user(self, *, email: str, password_hash: str) -> User:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users(email, password_hash) VALUES(%s,%s)",
                    (email, password_hash),
                )
                user_id = int(cur.lastrowid)
        except IntegrityError as e:
            # A concurrent registration can slip past the service's pre-check.
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise ConflictError("User already exists") from e
            raise

        return User(user_id=user_id, email=email, password_hash=password_hash, role=Role.STUDENT)

    def get_teacher_for_user(self, user_id: int) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, user_id, firstname, lastname FROM teachers WHERE user_id=%s",
                (int(user_id),),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Teacher(
                teacher_id=int(row["id"]),
                user_id=int(row["user_id"]),
                firstname=row["firstname"],
                lastname=row["lastname"],
            )

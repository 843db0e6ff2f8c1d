from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector.constants import ClientFlag
from mysql.connector.pooling import MySQLConnectionPool

from ..core.constants import DEFAULT_POOL_NAME


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = 0


class DatabaseConnection:
    """Process-scoped DB connection factory.

    One instance is built by the container and handed to every repository.
    With ``pool_size`` > 0 connections come from a mysql-connector pool that is
    created on first use; otherwise a short-lived connection is opened per
    operation.

    FOUND_ROWS makes ``cursor.rowcount`` report matched rows for UPDATE, so an
    update that sets a value to what it already was still counts as a hit.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[MySQLConnectionPool] = None

    def _connect_kwargs(self) -> dict:
        return {
            "host": self._config.host,
            "port": int(self._config.port),
            "user": self._config.user,
            "password": self._config.password,
            "database": self._config.database,
            "client_flags": [ClientFlag.FOUND_ROWS],
        }

    def connect(self):
        if self._config.pool_size <= 0:
            return mysql.connector.connect(**self._connect_kwargs())

        if self._pool is None:
            self._pool = MySQLConnectionPool(
                pool_name=DEFAULT_POOL_NAME,
                pool_size=int(self._config.pool_size),
                **self._connect_kwargs(),
            )
        return self._pool.get_connection()

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Scoped transaction: commit on clean exit, roll back on any exception.

    Every statement executed through the yielded cursor belongs to one
    transaction, so a failure midway leaves none of them applied.
    """
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def split_list(value: Optional[str], *, sep: str = ",") -> List[str]:
    """Split a GROUP_CONCAT column back into its items."""
    if not value:
        return []
    return [item for item in str(value).split(sep) if item]

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import StoreError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor) inside a transaction.

    Commits when the block finishes, rolls back on any error. Connector
    failures surface as StoreError with the original error as ``__cause__``.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise StoreError("Could not connect to the database") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise StoreError(f"Database operation failed: {exc.msg}") from exc
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


def is_duplicate_key(exc: BaseException, key: Optional[str] = None) -> bool:
    """True when ``exc`` was caused by a duplicate-entry error, optionally on the named unique key."""
    cause = exc.__cause__
    if not isinstance(cause, mysql.connector.IntegrityError) or cause.errno != errorcode.ER_DUP_ENTRY:
        return False
    return key is None or key in (cause.msg or "")

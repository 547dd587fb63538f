from __future__ import annotations

from contextlib import contextmanager, suppress
from typing import Any, Dict, List, Optional

import mysql.connector
import structlog

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = structlog.get_logger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction.

    Commits when the block exits normally, rolls back otherwise. Driver errors
    surface as StoreError; domain errors raised inside the block pass through.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("store_connect_failed", error=str(e))
        raise StoreError(str(e)) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        # A dropped connection can fail the rollback too; report the original error.
        with suppress(mysql.connector.Error):
            conn.rollback()
        logger.error("store_error", error=str(e))
        raise StoreError(str(e)) from e
    except Exception:
        with suppress(mysql.connector.Error):
            conn.rollback()
        raise
    finally:
        with suppress(mysql.connector.Error):
            conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def placeholders(count: int) -> str:
    return ",".join(["%s"] * count)

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, Optional

from ..attendance.training_time import TrainingTime
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# delete_flg values of the LMS tables
DB_FLG_FALSE = 0
DB_FLG_TRUE = 1


def to_delete_flg(deleted: bool) -> int:
    return DB_FLG_TRUE if deleted else DB_FLG_FALSE


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Cursor on a fresh connection; commits on success, rolls back on any error."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield cur
            conn.commit()
        except Exception as exc:
            logger.warning("rolling back: %s", exc)
            conn.rollback()
            raise
        finally:
            cur.close()
    finally:
        conn.close()


def first_row(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def count_column(cur, column: str) -> int:
    """Value of a ``COUNT(*) AS <column>`` query; 0 when nothing came back."""

    row = cur.fetchone()
    return int(row[column]) if row else 0


def to_training_time(value: Any) -> Optional[TrainingTime]:
    """Read a MySQL TIME column as a TrainingTime.

    mysql-connector returns TIME as ``datetime.timedelta`` (sometimes
    ``datetime.time`` or a string depending on the cursor).
    """

    if value is None:
        return None
    if isinstance(value, time):
        return TrainingTime.from_time(value)
    if isinstance(value, timedelta):
        total_minutes = (int(value.total_seconds()) % 86400) // 60
        return TrainingTime(total_minutes // 60, total_minutes % 60)
    if isinstance(value, str):
        return TrainingTime.parse(":".join(value.strip().split(":")[:2]))
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")

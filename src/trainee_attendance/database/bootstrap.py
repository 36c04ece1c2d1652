from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Optional

from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def iter_sql_statements(sql: str) -> Iterable[str]:
    # schema.sql has no ';' inside literals, so a plain split is enough.
    sql = re.sub(r"(?m)^\s*--.*$", "", sql)
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: Optional[Path] = None) -> int:
    """Create missing tables (idempotent: CREATE TABLE IF NOT EXISTS). Returns statement count."""

    path = schema_path or SCHEMA_PATH
    statements = list(iter_sql_statements(path.read_text(encoding="utf-8")))
    with db_cursor(conn_factory, dictionary=False) as cur:
        for stmt in statements:
            cur.execute(stmt)
    logger.info("schema applied from %s (%d statements)", path, len(statements))
    return len(statements)

from __future__ import annotations

from datetime import date
from typing import Dict, Mapping, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import DB_FLG_FALSE, count_column, db_cursor, first_row, to_training_time
from .model import TrainingPeriod
from .repository import ScheduleRepository


class MySQLScheduleRepository(ScheduleRepository):
    """Training days come from ``m_section``; hours from the course's sections.

    Courses whose sections carry no start/end times use ``standard_period``.
    """

    def __init__(self, conn_factory: DatabaseConnection, standard_period: TrainingPeriod):
        self._conn_factory = conn_factory
        self._standard_period = standard_period

    def is_work_day(self, course_id: Optional[int], training_date: date) -> bool:
        if course_id is None:
            return False
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT COUNT(*) AS sections
                FROM m_section
                WHERE course_id=%s AND section_date=%s AND delete_flg=%s
                """,
                (int(course_id), training_date, DB_FLG_FALSE),
            )
            return count_column(cur, "sections") > 0

    def training_period(self, course_id: Optional[int]) -> Optional[TrainingPeriod]:
        if course_id is None:
            return self._standard_period
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT MIN(start_time) AS start_time, MAX(end_time) AS end_time
                FROM m_section
                WHERE course_id=%s AND delete_flg=%s
                """,
                (int(course_id), DB_FLG_FALSE),
            )
            r = first_row(cur)
        start = to_training_time(r.get("start_time")) if r else None
        end = to_training_time(r.get("end_time")) if r else None
        if start is None or end is None:
            return self._standard_period
        return TrainingPeriod(start_time=start, end_time=end)

    def section_names(self, course_id: Optional[int]) -> Mapping[date, str]:
        if course_id is None:
            return {}
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT section_date, section_name
                FROM m_section
                WHERE course_id=%s AND delete_flg=%s
                ORDER BY section_date, section_id
                """,
                (int(course_id), DB_FLG_FALSE),
            )
            rows = cur.fetchall() or []
        names: Dict[date, str] = {}
        for r in rows:
            names.setdefault(r["section_date"], r["section_name"])
        return names

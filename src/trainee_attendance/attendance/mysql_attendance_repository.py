from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DB_FLG_FALSE, count_column, db_cursor, first_row, to_delete_flg
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    student_attendance_id, lms_user_id, account_id, training_date,
    training_start_time, training_end_time, blank_time, status, note, delete_flg,
    first_create_user, first_create_date, last_modified_user, last_modified_date
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["student_attendance_id"]),
        trainee_id=int(r["lms_user_id"]),
        training_date=r["training_date"],
        start_time=r.get("training_start_time") or "",
        end_time=r.get("training_end_time") or "",
        status=AttendanceStatus.from_code(r["status"]),
        blank_time=r.get("blank_time"),
        note=r.get("note") or "",
        account_id=r.get("account_id"),
        deleted=bool(r.get("delete_flg")),
        created_by=r.get("first_create_user"),
        created_at=r.get("first_create_date"),
        modified_by=r.get("last_modified_user"),
        modified_at=r.get("last_modified_date"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_trainee_and_date(self, trainee_id: int, training_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM t_student_attendance
                WHERE lms_user_id=%s AND training_date=%s
                ORDER BY delete_flg
                LIMIT 1
                """,
                (int(trainee_id), training_date),
            )
            r = first_row(cur)
            return _to_record(r) if r else None

    def find_all_by_trainee(self, trainee_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM t_student_attendance
                WHERE lms_user_id=%s
                ORDER BY training_date, delete_flg
                """,
                (int(trainee_id),),
            )
            return [_to_record(r) for r in cur.fetchall() or []]

    def insert(self, record: AttendanceRecord) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO t_student_attendance(
                    lms_user_id, account_id, training_date, training_start_time, training_end_time,
                    blank_time, status, note, delete_flg,
                    first_create_user, first_create_date, last_modified_user, last_modified_date
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.trainee_id,
                    record.account_id,
                    record.training_date,
                    record.start_time,
                    record.end_time,
                    record.blank_time,
                    record.status.code,
                    record.note,
                    to_delete_flg(record.deleted),
                    record.created_by,
                    record.created_at,
                    record.modified_by,
                    record.modified_at,
                ),
            )
            return int(cur.lastrowid)

    def update(self, record: AttendanceRecord) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                UPDATE t_student_attendance
                SET account_id=%s, training_start_time=%s, training_end_time=%s, blank_time=%s,
                    status=%s, note=%s, delete_flg=%s, last_modified_user=%s, last_modified_date=%s
                WHERE student_attendance_id=%s
                """,
                (
                    record.account_id,
                    record.start_time,
                    record.end_time,
                    record.blank_time,
                    record.status.code,
                    record.note,
                    to_delete_flg(record.deleted),
                    record.modified_by,
                    record.modified_at,
                    int(record.attendance_id),
                ),
            )
            return cur.rowcount > 0

    def count_unfilled_before(self, trainee_id: int, training_date: date) -> int:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                SELECT COUNT(*) AS unfilled
                FROM t_student_attendance
                WHERE lms_user_id=%s AND delete_flg=%s AND training_date < %s
                  AND (training_start_time='' OR training_end_time='')
                """,
                (int(trainee_id), DB_FLG_FALSE, training_date),
            )
            return count_column(cur, "unfilled")

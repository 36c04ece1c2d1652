from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Persistence for attendance rows.

    The (trainee, training date) key also covers soft-deleted rows, so lookups
    return them too (``deleted=True``); callers revive such a row with
    ``update`` instead of inserting a second one.
    """

    def find_by_trainee_and_date(self, trainee_id: int, training_date: date) -> Optional[AttendanceRecord]:
        """The row for that day, live or soft-deleted; a live row is preferred."""

        raise NotImplementedError

    def find_all_by_trainee(self, trainee_id: int) -> Sequence[AttendanceRecord]:
        """Every row of the trainee, soft-deleted ones included, by training date."""

        raise NotImplementedError

    def insert(self, record: AttendanceRecord) -> int:
        """Insert a new row. Returns the generated attendance_id."""

        raise NotImplementedError

    def update(self, record: AttendanceRecord) -> bool:
        raise NotImplementedError

    def count_unfilled_before(self, trainee_id: int, training_date: date) -> int:
        """Count past rows with a missing start or end time."""

        raise NotImplementedError

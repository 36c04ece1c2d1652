from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Tuple

from ..core.enums import AttendanceStatus
from .training_time import TrainingTime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per (trainee, training date).

    ``start_time``/``end_time`` hold ``H:mm`` text; an empty string means the
    time was not entered.
    """

    attendance_id: Optional[int]
    trainee_id: int
    training_date: date
    start_time: str
    end_time: str
    status: AttendanceStatus
    blank_time: Optional[int] = None
    note: str = ""
    account_id: Optional[int] = None
    deleted: bool = False
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    modified_by: Optional[int] = None
    modified_at: Optional[datetime] = None

    @property
    def start(self) -> Optional[TrainingTime]:
        return TrainingTime.parse_optional(self.start_time)

    @property
    def end(self) -> Optional[TrainingTime]:
        return TrainingTime.parse_optional(self.end_time)

    @property
    def is_persisted(self) -> bool:
        return self.attendance_id is not None


@dataclass(frozen=True)
class DailyEditInput:
    """One day of the attendance edit form.

    Hour and minute are separate selects on the form, so either one may be
    missing on its own.
    """

    training_date: date
    start_hour: Optional[int] = None
    start_minute: Optional[int] = None
    end_hour: Optional[int] = None
    end_minute: Optional[int] = None
    blank_time: Optional[int] = None
    note: Optional[str] = ""
    status_label: Optional[str] = None

    @property
    def start(self) -> Optional[TrainingTime]:
        return TrainingTime.from_parts(self.start_hour, self.start_minute)

    @property
    def end(self) -> Optional[TrainingTime]:
        return TrainingTime.from_parts(self.end_hour, self.end_minute)

    @property
    def is_marked_absent(self) -> bool:
        return AttendanceStatus.from_label(self.status_label) is AttendanceStatus.ABSENT


@dataclass(frozen=True)
class PlannedWrite:
    """A reconciled record and whether it must be inserted (True) or updated."""

    record: AttendanceRecord
    is_new: bool


@dataclass(frozen=True)
class AttendanceOverviewRow:
    """Read-model for the attendance list screen."""

    attendance_id: Optional[int]
    training_date: date
    start_time: str
    end_time: str
    blank_time: Optional[int]
    blank_time_value: str
    status: AttendanceStatus
    status_display_name: str
    note: str
    is_today: bool
    section_name: Optional[str] = None


@dataclass(frozen=True)
class AttendanceEditForm:
    """The edit screen of one trainee: current days plus the select choices."""

    trainee_id: int
    days: List[DailyEditInput]
    leave_date: Optional[date] = None
    hour_choices: List[int] = field(default_factory=list)
    minute_choices: List[int] = field(default_factory=list)
    blank_time_choices: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def display_leave_date(self) -> str:
        if self.leave_date is None:
            return ""
        return f"{self.leave_date.year}/{self.leave_date.month}/{self.leave_date.day}"

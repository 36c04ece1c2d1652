from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Role of the logged-in user, used for permission checks."""

    STUDENT = "student"
    STAFF = "staff"
    ADMIN = "admin"


class AttendanceStatus(str, Enum):
    """Lateness/early-leave classification of a training day."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    LATE_AND_EARLY_LEAVE = "LATE_AND_EARLY_LEAVE"
    ABSENT = "ABSENT"

    @property
    def code(self) -> int:
        return _STATUS_CODES[self]

    @property
    def display_name(self) -> str:
        return _STATUS_DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: int) -> "AttendanceStatus":
        for status, value in _STATUS_CODES.items():
            if value == int(code):
                return status
        raise ValueError(f"Unknown attendance status code: {code!r}")

    @classmethod
    def from_label(cls, label: Optional[str]) -> Optional["AttendanceStatus"]:
        """Resolve a form label (display name, enum value or numeric code)."""

        text = (label or "").strip()
        if not text:
            return None
        for status in cls:
            if text in (status.value, status.display_name, str(status.code)):
                return status
        return None


_STATUS_CODES = {
    AttendanceStatus.ON_TIME: 0,
    AttendanceStatus.LATE: 1,
    AttendanceStatus.EARLY_LEAVE: 2,
    AttendanceStatus.LATE_AND_EARLY_LEAVE: 3,
    AttendanceStatus.ABSENT: 4,
}

_STATUS_DISPLAY_NAMES = {
    AttendanceStatus.ON_TIME: "On time",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.EARLY_LEAVE: "Early leave",
    AttendanceStatus.LATE_AND_EARLY_LEAVE: "Late / early leave",
    AttendanceStatus.ABSENT: "Absent",
}


class PunchType(str, Enum):
    """Which punch button was pressed."""

    PUNCH_IN = "PUNCH_IN"
    PUNCH_OUT = "PUNCH_OUT"


class PunchState(str, Enum):
    """Progress of a single training day through the punch buttons."""

    NO_RECORD = "NO_RECORD"
    PUNCHED_IN = "PUNCHED_IN"
    PUNCHED_OUT = "PUNCHED_OUT"

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time

from ..common.clock import Clock
from ..core.exceptions import TimeFormatError

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


@dataclass(frozen=True, order=True)
class TrainingTime:
    """Time of day (hour, minute) in local business time.

    Instances are ordered by ``hour * 60 + minute``; the canonical text form
    is ``H:mm`` (hour unpadded, minute on two digits).
    """

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise TimeFormatError(f"Time out of range: {self.hour}:{self.minute}")

    @classmethod
    def parse(cls, text: str) -> "TrainingTime":
        m = _TIME_PATTERN.match((text or "").strip())
        if not m:
            raise TimeFormatError(f"Invalid time (H:mm): {text!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    @classmethod
    def parse_optional(cls, text: str | None) -> "TrainingTime | None":
        """Parse a stored time column where ``""``/None means "not entered"."""

        if text is None or not text.strip():
            return None
        return cls.parse(text)

    @classmethod
    def from_parts(cls, hour: int | None, minute: int | None) -> "TrainingTime | None":
        if hour is None or minute is None:
            return None
        return cls.parse(f"{hour}:{minute:02d}")

    @classmethod
    def from_time(cls, value: time | datetime) -> "TrainingTime":
        return cls(value.hour, value.minute)

    @classmethod
    def now(cls, clock: Clock) -> "TrainingTime":
        return cls.from_time(clock.now())

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def format(self) -> str:
        return f"{self.hour}:{self.minute:02d}"

    def __str__(self) -> str:
        return self.format()


def compare(a: TrainingTime, b: TrainingTime) -> int:
    """-1, 0 or 1 as ``a`` is before, equal to or after ``b``."""

    return (a.total_minutes > b.total_minutes) - (a.total_minutes < b.total_minutes)


def format_optional(value: TrainingTime | None) -> str:
    return value.format() if value is not None else ""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import BLANK_TIME_MAX_MINUTES, BLANK_TIME_STEP_MINUTES
from ..core.exceptions import BlankTimeExceedsWorkError, ValidationError
from .training_time import TrainingTime


@dataclass(frozen=True)
class BlankTime:
    """Unpaid break inside a training day, in minutes."""

    minutes: int

    def __post_init__(self) -> None:
        if self.minutes < 0:
            raise ValidationError(f"Blank time must not be negative: {self.minutes}")

    @property
    def hours_part(self) -> int:
        return self.minutes // 60

    @property
    def minutes_part(self) -> int:
        return self.minutes % 60

    def __str__(self) -> str:
        return format_blank_time(self.minutes)


def format_blank_time(minutes: Optional[int]) -> str:
    """Render minutes as "1h 30m" / "2h" / "45m"; empty string when not entered."""

    if minutes is None:
        return ""
    hours, rest = divmod(int(minutes), 60)
    if hours and rest:
        return f"{hours}h {rest}m"
    if hours:
        return f"{hours}h"
    return f"{rest}m"


def worked_minutes(start: Optional[TrainingTime], end: Optional[TrainingTime]) -> Optional[int]:
    if start is None or end is None:
        return None
    return end.total_minutes - start.total_minutes


def validate_blank_time(
    minutes: Optional[int],
    start: Optional[TrainingTime],
    end: Optional[TrainingTime],
) -> None:
    worked = worked_minutes(start, end)
    if minutes is None or worked is None:
        return
    if int(minutes) > worked:
        raise BlankTimeExceedsWorkError(f"Blank time {minutes}m exceeds worked time {worked}m")


def blank_time_choices() -> list[tuple[int, str]]:
    """Selectable break durations for the edit form."""

    return [
        (m, format_blank_time(m))
        for m in range(BLANK_TIME_STEP_MINUTES, BLANK_TIME_MAX_MINUTES + 1, BLANK_TIME_STEP_MINUTES)
    ]

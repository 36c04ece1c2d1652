from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus
from ..schedules.model import TrainingPeriod
from .training_time import TrainingTime


@dataclass(frozen=True)
class StatusClassifier:
    """Derive an attendance status from actual and scheduled times.

    Lateness and early leave are decided independently and then combined.
    ``absent`` is an explicit caller input; it only applies to a day without
    any recorded time.
    """

    standard_period: TrainingPeriod

    def classify(
        self,
        scheduled_start: Optional[TrainingTime],
        scheduled_end: Optional[TrainingTime],
        actual_start: Optional[TrainingTime],
        actual_end: Optional[TrainingTime],
        *,
        absent: bool = False,
    ) -> AttendanceStatus:
        if absent and actual_start is None and actual_end is None:
            return AttendanceStatus.ABSENT

        scheduled_start = scheduled_start or self.standard_period.start_time
        scheduled_end = scheduled_end or self.standard_period.end_time

        late = actual_start is not None and actual_start > scheduled_start
        early = actual_end is not None and actual_end < scheduled_end

        if late and early:
            return AttendanceStatus.LATE_AND_EARLY_LEAVE
        if late:
            return AttendanceStatus.LATE
        if early:
            return AttendanceStatus.EARLY_LEAVE
        return AttendanceStatus.ON_TIME

    def classify_for(
        self,
        period: Optional[TrainingPeriod],
        actual_start: Optional[TrainingTime],
        actual_end: Optional[TrainingTime],
        *,
        absent: bool = False,
    ) -> AttendanceStatus:
        """Classify against a course period (standard hours when None)."""

        period = period or self.standard_period
        return self.classify(period.start_time, period.end_time, actual_start, actual_end, absent=absent)

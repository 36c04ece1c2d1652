from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol

from .model import TrainingPeriod


class ScheduleRepository(Protocol):
    def is_work_day(self, course_id: Optional[int], training_date: date) -> bool:
        raise NotImplementedError

    def training_period(self, course_id: Optional[int]) -> Optional[TrainingPeriod]:
        """Scheduled hours for the course; None falls back to the standard work hours."""

        raise NotImplementedError

    def section_names(self, course_id: Optional[int]) -> Mapping[date, str]:
        """Section name per training date; the first section of a day names it."""

        raise NotImplementedError

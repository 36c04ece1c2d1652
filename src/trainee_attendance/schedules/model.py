from __future__ import annotations

from dataclasses import dataclass

from ..attendance.training_time import TrainingTime


@dataclass(frozen=True)
class TrainingPeriod:
    """Scheduled start/end of a training day."""

    start_time: TrainingTime
    end_time: TrainingTime

    @classmethod
    def parse(cls, start: str, end: str) -> "TrainingPeriod":
        return cls(start_time=TrainingTime.parse(start), end_time=TrainingTime.parse(end))

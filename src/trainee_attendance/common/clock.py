from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol

from ..core.constants import DEFAULT_ROLLOVER_HOUR
from .datetime_utils import now_local


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError

    def current_training_date(self) -> date:
        """The institution's current training day (may differ from the calendar date)."""

        raise NotImplementedError


class SystemClock(Clock):
    """Wall clock whose training day rolls over at ``rollover_hour`` instead of midnight."""

    def __init__(self, rollover_hour: int = DEFAULT_ROLLOVER_HOUR):
        if not 0 <= int(rollover_hour) <= 23:
            raise ValueError(f"rollover_hour must be within 0-23, got {rollover_hour!r}")
        self._rollover_hour = int(rollover_hour)

    def now(self) -> datetime:
        return now_local()

    def current_training_date(self) -> date:
        return (self.now() - timedelta(hours=self._rollover_hour)).date()


class FixedClock(Clock):
    """Clock frozen at a given instant (scripts and tests)."""

    def __init__(self, instant: datetime, training_date: date | None = None):
        self._instant = instant
        self._training_date = training_date or instant.date()

    def now(self) -> datetime:
        return self._instant

    def current_training_date(self) -> date:
        return self._training_date

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from ..common.clock import Clock
from ..common.messages import MessageSource
from ..core.constants import MSG_UPDATE_NOTICE
from ..core.enums import PunchState, PunchType
from ..core.exceptions import (
    AlreadyPunchedError,
    ForbiddenError,
    InvalidTimeRangeError,
    NoPunchInError,
    NotWorkDayError,
)
from ..schedules.repository import ScheduleRepository
from ..users.model import LoginContext
from .classifier import StatusClassifier
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .training_time import TrainingTime

logger = logging.getLogger(__name__)


def punch_state(record: Optional[AttendanceRecord]) -> PunchState:
    if record is None or record.deleted or not record.start_time:
        return PunchState.NO_RECORD
    if not record.end_time:
        return PunchState.PUNCHED_IN
    return PunchState.PUNCHED_OUT


class PunchWorkflow:
    """Punch-in / punch-out buttons for the current training day.

    Every check runs before anything is written; a successful punch performs
    exactly one insert or update.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        schedules: ScheduleRepository,
        clock: Clock,
        classifier: StatusClassifier,
        messages: MessageSource,
    ):
        self._attendance = attendance
        self._schedules = schedules
        self._clock = clock
        self._classifier = classifier
        self._messages = messages

    def check(
        self,
        context: LoginContext,
        punch_type: PunchType,
        *,
        training_date: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> Optional[AttendanceRecord]:
        """Raise if the punch is not allowed; return the day's existing record (if any)."""

        training_date = training_date or self._clock.current_training_date()

        if not context.is_student:
            raise ForbiddenError(f"role {context.role.value} cannot punch")
        if not self._schedules.is_work_day(context.course_id, training_date):
            raise NotWorkDayError(f"{training_date} is not a training day")

        record = self._attendance.find_by_trainee_and_date(context.trainee_id, training_date)
        state = punch_state(record)

        if punch_type == PunchType.PUNCH_IN:
            if state != PunchState.NO_RECORD:
                raise AlreadyPunchedError(f"already punched in on {training_date}")
            return record

        if state == PunchState.NO_RECORD:
            raise NoPunchInError(f"no punch-in on {training_date}")
        if state == PunchState.PUNCHED_OUT:
            raise AlreadyPunchedError(f"already punched out on {training_date}")

        candidate_end = TrainingTime.from_time(now or self._clock.now())
        if record.start > candidate_end:
            raise InvalidTimeRangeError(f"punch-out {candidate_end} is before punch-in {record.start_time}")
        return record

    def punch_in(self, context: LoginContext, *, now: Optional[datetime] = None) -> str:
        now = now or self._clock.now()
        training_date = self._clock.current_training_date()
        existing = self.check(context, PunchType.PUNCH_IN, training_date=training_date, now=now)

        start = TrainingTime.from_time(now)
        period = self._schedules.training_period(context.course_id)
        status = self._classifier.classify_for(period, start, None)

        if existing is None:
            record = AttendanceRecord(
                attendance_id=None,
                trainee_id=context.trainee_id,
                training_date=training_date,
                start_time=start.format(),
                end_time="",
                status=status,
                blank_time=None,
                note="",
                account_id=context.account_id,
                deleted=False,
                created_by=context.actor_id,
                created_at=now,
                modified_by=context.actor_id,
                modified_at=now,
            )
            new_id = self._attendance.insert(record)
            logger.info("punch-in inserted trainee=%s date=%s id=%s start=%s status=%s",
                        context.trainee_id, training_date, new_id, record.start_time, status.value)
        else:
            if existing.deleted:
                # revived row starts over; only its id and creation audit survive
                existing = replace(existing, end_time="", blank_time=None, note="", account_id=context.account_id)
            record = replace(
                existing,
                start_time=start.format(),
                status=status,
                deleted=False,
                modified_by=context.actor_id,
                modified_at=now,
            )
            self._attendance.update(record)
            logger.info("punch-in updated trainee=%s date=%s id=%s start=%s status=%s",
                        context.trainee_id, training_date, record.attendance_id, record.start_time, status.value)

        return self._messages.get_message(MSG_UPDATE_NOTICE)

    def punch_out(self, context: LoginContext, *, now: Optional[datetime] = None) -> str:
        now = now or self._clock.now()
        training_date = self._clock.current_training_date()
        existing = self.check(context, PunchType.PUNCH_OUT, training_date=training_date, now=now)

        end = TrainingTime.from_time(now)
        period = self._schedules.training_period(context.course_id)
        status = self._classifier.classify_for(period, existing.start, end)

        record = replace(
            existing,
            end_time=end.format(),
            status=status,
            deleted=False,
            modified_by=context.actor_id,
            modified_at=now,
        )
        self._attendance.update(record)
        logger.info("punch-out trainee=%s date=%s id=%s end=%s status=%s",
                    context.trainee_id, training_date, record.attendance_id, record.end_time, status.value)

        return self._messages.get_message(MSG_UPDATE_NOTICE)

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Mapping, Optional, Sequence, Union

from ..common.clock import Clock
from ..common.datetime_utils import parse_training_date
from ..common.messages import MessageSource
from ..core.constants import MSG_UPDATE_NOTICE
from ..core.exceptions import BatchValidationError, ValidationError
from ..schedules.repository import ScheduleRepository
from ..users.model import LoginContext
from .blank_time import blank_time_choices, format_blank_time
from .model import AttendanceEditForm, AttendanceOverviewRow, AttendanceRecord, DailyEditInput
from .punch import PunchWorkflow
from .reconciler import RecordReconciler
from .repository import AttendanceRepository
from .validator import BatchValidator, ValidationResult

logger = logging.getLogger(__name__)


def hour_choices() -> List[int]:
    return list(range(0, 24))


def minute_choices() -> List[int]:
    return list(range(0, 60))


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        schedules: ScheduleRepository,
        clock: Clock,
        messages: MessageSource,
        *,
        punch: PunchWorkflow,
        validator: BatchValidator,
        reconciler: RecordReconciler,
    ):
        self._attendance = attendance
        self._schedules = schedules
        self._clock = clock
        self._messages = messages
        self._punch = punch
        self._validator = validator
        self._reconciler = reconciler

    def punch_in(self, context: LoginContext, *, now: Optional[datetime] = None) -> str:
        return self._punch.punch_in(context, now=now)

    def punch_out(self, context: LoginContext, *, now: Optional[datetime] = None) -> str:
        return self._punch.punch_out(context, now=now)

    def get_attendance_overview(
        self,
        trainee_id: int,
        *,
        course_id: Optional[int] = None,
        today: Optional[date] = None,
    ) -> List[AttendanceOverviewRow]:
        today = today or self._clock.current_training_date()
        sections = self._schedules.section_names(course_id)
        return [self._to_overview(r, today, sections) for r in self._live_rows(trainee_id)]

    def build_edit_form(self, trainee_id: int, *, leave_date: Optional[date] = None) -> AttendanceEditForm:
        """Current rows as edit-form days, with times split into hour/minute."""

        return AttendanceEditForm(
            trainee_id=trainee_id,
            days=[self._to_edit_input(r) for r in self._live_rows(trainee_id)],
            leave_date=leave_date,
            hour_choices=hour_choices(),
            minute_choices=minute_choices(),
            blank_time_choices=blank_time_choices(),
        )

    def validate(self, batch: Sequence[DailyEditInput]) -> ValidationResult:
        return self._validator.validate(batch, self._clock.current_training_date())

    def update(
        self,
        context: LoginContext,
        batch: Sequence[DailyEditInput],
        *,
        target_trainee_id: Optional[int] = None,
    ) -> str:
        """Validate, reconcile and write an edit batch.

        Students always edit their own attendance; staff pass the trainee they
        edit for. Nothing is written when validation fails.
        """

        trainee_id = self._resolve_trainee(context, target_trainee_id)

        result = self.validate(batch)
        if not result.is_valid:
            logger.info("attendance batch rejected trainee=%s errors=%s", trainee_id, result.fields())
            raise BatchValidationError(result)

        now = self._clock.now()
        existing = self._attendance.find_all_by_trainee(trainee_id)
        period = self._schedules.training_period(context.course_id)
        plan = self._reconciler.reconcile(
            existing, batch, trainee_id=trainee_id, actor=context, now=now, period=period
        )

        inserted = updated = 0
        for write in plan:
            if write.is_new:
                self._attendance.insert(write.record)
                inserted += 1
            else:
                self._attendance.update(write.record)
                updated += 1

        logger.info("attendance batch saved trainee=%s actor=%s inserted=%d updated=%d",
                    trainee_id, context.actor_id, inserted, updated)
        return self._messages.get_message(MSG_UPDATE_NOTICE)

    def get_unfilled_count(self, trainee_id: int, *, as_of: Union[str, date, None] = None) -> int:
        """Past days with a missing start or end time.

        A malformed ``as_of`` date counts as zero unfilled days.
        """

        try:
            if as_of is None:
                training_date = self._clock.current_training_date()
            elif isinstance(as_of, date):
                training_date = as_of
            else:
                training_date = parse_training_date(as_of)
        except ValueError:
            logger.exception("unfilled count: cannot parse date %r, returning 0", as_of)
            return 0
        return int(self._attendance.count_unfilled_before(trainee_id, training_date))

    @staticmethod
    def _resolve_trainee(context: LoginContext, target_trainee_id: Optional[int]) -> int:
        if context.is_student:
            return context.trainee_id
        if target_trainee_id is None:
            raise ValidationError("target trainee is required when editing on behalf of a trainee")
        return int(target_trainee_id)

    def _live_rows(self, trainee_id: int) -> List[AttendanceRecord]:
        rows = [r for r in self._attendance.find_all_by_trainee(trainee_id) if not r.deleted]
        return sorted(rows, key=lambda r: r.training_date)

    @staticmethod
    def _to_overview(r: AttendanceRecord, today: date, sections: Mapping[date, str]) -> AttendanceOverviewRow:
        return AttendanceOverviewRow(
            attendance_id=r.attendance_id,
            training_date=r.training_date,
            start_time=r.start_time,
            end_time=r.end_time,
            blank_time=r.blank_time,
            blank_time_value=format_blank_time(r.blank_time),
            status=r.status,
            status_display_name=r.status.display_name,
            note=r.note,
            is_today=r.training_date == today,
            section_name=sections.get(r.training_date),
        )

    @staticmethod
    def _to_edit_input(r: AttendanceRecord) -> DailyEditInput:
        start = r.start
        end = r.end
        return DailyEditInput(
            training_date=r.training_date,
            start_hour=start.hour if start else None,
            start_minute=start.minute if start else None,
            end_hour=end.hour if end else None,
            end_minute=end.minute if end else None,
            blank_time=r.blank_time,
            note=r.note,
            status_label=r.status.display_name,
        )

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Dict, List, Mapping, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..schedules.model import TrainingPeriod
from ..users.model import LoginContext
from .classifier import StatusClassifier
from .model import AttendanceRecord, DailyEditInput, PlannedWrite
from .training_time import format_optional


def index_by_training_date(records: Sequence[AttendanceRecord]) -> Mapping[date, AttendanceRecord]:
    """Read-only lookup of existing rows.

    A live row wins over a soft-deleted one for the same date; otherwise the
    first row wins.
    """

    index: Dict[date, AttendanceRecord] = {}
    for record in records:
        seen = index.get(record.training_date)
        if seen is None or (seen.deleted and not record.deleted):
            index[record.training_date] = record
    return index


class RecordReconciler:
    """Merge edited days with a trainee's persisted rows into an insert/update plan.

    The existing rows are only read; the plan is a separate list with one entry
    per distinct training date, in order of first appearance. When a date is
    edited more than once in a batch the last entry wins.
    """

    def __init__(self, classifier: StatusClassifier):
        self._classifier = classifier

    def reconcile(
        self,
        existing: Sequence[AttendanceRecord],
        batch: Sequence[DailyEditInput],
        *,
        trainee_id: int,
        actor: LoginContext,
        now: datetime,
        period: Optional[TrainingPeriod] = None,
    ) -> List[PlannedWrite]:
        by_date = index_by_training_date(existing)
        plan: List[PlannedWrite] = []
        planned: Dict[date, int] = {}

        for day in batch:
            slot = planned.get(day.training_date)
            if slot is not None:
                current: Optional[AttendanceRecord] = plan[slot].record
            else:
                current = by_date.get(day.training_date)

            start = day.start
            end = day.end
            if day.is_marked_absent:
                status = AttendanceStatus.ABSENT
            else:
                status = self._classifier.classify_for(period, start, end)

            if current is None:
                record = AttendanceRecord(
                    attendance_id=None,
                    trainee_id=trainee_id,
                    training_date=day.training_date,
                    start_time=format_optional(start),
                    end_time=format_optional(end),
                    status=status,
                    blank_time=day.blank_time,
                    note=day.note or "",
                    account_id=actor.account_id,
                    deleted=False,
                    created_by=actor.actor_id,
                    created_at=now,
                    modified_by=actor.actor_id,
                    modified_at=now,
                )
            else:
                record = replace(
                    current,
                    trainee_id=trainee_id,
                    start_time=format_optional(start),
                    end_time=format_optional(end),
                    status=status,
                    blank_time=day.blank_time,
                    note=day.note or "",
                    account_id=actor.account_id,
                    deleted=False,
                    modified_by=actor.actor_id,
                    modified_at=now,
                )

            write = PlannedWrite(record=record, is_new=not record.is_persisted)
            if slot is None:
                planned[day.training_date] = len(plan)
                plan.append(write)
            else:
                plan[slot] = write

        return plan

from dataclasses import replace
from datetime import date, datetime

import pytest

from trainee_attendance.attendance.classifier import StatusClassifier
from trainee_attendance.attendance.model import AttendanceRecord, DailyEditInput
from trainee_attendance.attendance.reconciler import RecordReconciler, index_by_training_date
from trainee_attendance.core.enums import AttendanceStatus, Role
from trainee_attendance.schedules.model import TrainingPeriod
from trainee_attendance.users.model import LoginContext

NOW = datetime(2026, 2, 10, 12, 0)
STAFF = LoginContext(trainee_id=5, role=Role.STAFF, actor_id=900, account_id=2)


@pytest.fixture
def reconciler():
    return RecordReconciler(StatusClassifier(TrainingPeriod.parse("9:00", "18:00")))


def _existing(day: date, **kwargs) -> AttendanceRecord:
    values = dict(
        attendance_id=11,
        trainee_id=5,
        training_date=day,
        start_time="9:00",
        end_time="18:00",
        status=AttendanceStatus.ON_TIME,
        blank_time=None,
        note="",
        created_by=5,
        created_at=datetime(2026, 2, 1, 9, 0),
        modified_by=5,
        modified_at=datetime(2026, 2, 1, 18, 0),
    )
    values.update(kwargs)
    return AttendanceRecord(**values)


def test_matching_date_reuses_identity_and_creation_audit(reconciler):
    existing = [_existing(date(2026, 2, 2))]
    batch = [DailyEditInput(date(2026, 2, 2), 9, 30, 18, 0, blank_time=30, note="train delay")]

    plan = reconciler.reconcile(existing, batch, trainee_id=5, actor=STAFF, now=NOW)

    assert len(plan) == 1
    write = plan[0]
    assert write.is_new is False
    assert write.record.attendance_id == 11
    assert write.record.created_by == 5
    assert write.record.created_at == datetime(2026, 2, 1, 9, 0)
    assert write.record.modified_by == 900
    assert write.record.modified_at == NOW
    assert write.record.start_time == "9:30"
    assert write.record.end_time == "18:00"
    assert write.record.blank_time == 30
    assert write.record.note == "train delay"
    assert write.record.status == AttendanceStatus.LATE


def test_unknown_date_becomes_insert(reconciler):
    batch = [DailyEditInput(date(2026, 2, 3), 9, 0, 17, 5)]

    plan = reconciler.reconcile([_existing(date(2026, 2, 2))], batch, trainee_id=5, actor=STAFF, now=NOW)

    write = plan[0]
    assert write.is_new is True
    assert write.record.attendance_id is None
    assert write.record.trainee_id == 5
    assert write.record.account_id == 2
    assert write.record.created_by == 900
    assert write.record.created_at == NOW
    assert write.record.end_time == "17:05"
    assert write.record.status == AttendanceStatus.EARLY_LEAVE


def test_half_entered_time_is_cleared(reconciler):
    batch = [DailyEditInput(date(2026, 2, 2), 9, None, None, 0)]

    plan = reconciler.reconcile([_existing(date(2026, 2, 2))], batch, trainee_id=5, actor=STAFF, now=NOW)

    assert plan[0].record.start_time == ""
    assert plan[0].record.end_time == ""


def test_absent_label_is_never_overwritten(reconciler):
    batch = [
        DailyEditInput(date(2026, 2, 2), status_label="Absent"),
        DailyEditInput(date(2026, 2, 3), 10, 0, 18, 0, status_label="ABSENT"),
    ]

    plan = reconciler.reconcile([], batch, trainee_id=5, actor=STAFF, now=NOW)

    assert [w.record.status for w in plan] == [AttendanceStatus.ABSENT, AttendanceStatus.ABSENT]


def test_empty_day_without_absent_label_gets_neutral_status(reconciler):
    batch = [DailyEditInput(date(2026, 2, 4), note=None, status_label="Late")]

    plan = reconciler.reconcile([], batch, trainee_id=5, actor=STAFF, now=NOW)

    record = plan[0].record
    assert plan[0].is_new is True
    assert record.start_time == "" and record.end_time == ""
    assert record.note == ""
    assert record.status == AttendanceStatus.ON_TIME


def test_existing_rows_are_not_touched_and_not_planned(reconciler):
    untouched = _existing(date(2026, 2, 1), attendance_id=10)
    edited = _existing(date(2026, 2, 2))
    existing = [untouched, edited]

    plan = reconciler.reconcile(existing, [DailyEditInput(date(2026, 2, 2), 9, 0, 18, 0)],
                                trainee_id=5, actor=STAFF, now=NOW)

    assert [w.record.attendance_id for w in plan] == [11]
    assert existing == [untouched, edited]


def test_course_period_overrides_standard_hours(reconciler):
    batch = [DailyEditInput(date(2026, 2, 2), 9, 30, 17, 0)]
    period = TrainingPeriod.parse("10:00", "17:00")

    plan = reconciler.reconcile([], batch, trainee_id=5, actor=STAFF, now=NOW, period=period)

    assert plan[0].record.status == AttendanceStatus.ON_TIME


def test_reconciling_twice_is_stable(reconciler):
    batch = [
        DailyEditInput(date(2026, 2, 2), 9, 15, 17, 0, blank_time=15),
        DailyEditInput(date(2026, 2, 3), status_label="Absent"),
        DailyEditInput(date(2026, 2, 4)),
    ]
    first = reconciler.reconcile([_existing(date(2026, 2, 2))], batch, trainee_id=5, actor=STAFF, now=NOW)
    persisted = [replace(w.record, attendance_id=w.record.attendance_id or 100 + i) for i, w in enumerate(first)]

    second = reconciler.reconcile(persisted, batch, trainee_id=5, actor=STAFF, now=datetime(2026, 2, 11, 8, 0))

    assert all(not w.is_new for w in second)
    for before, after in zip(persisted, second):
        assert after.record.attendance_id == before.attendance_id
        assert after.record.start_time == before.start_time
        assert after.record.end_time == before.end_time
        assert after.record.status == before.status
        assert after.record.blank_time == before.blank_time


def test_index_keeps_first_row_per_date():
    a = _existing(date(2026, 2, 2), attendance_id=1)
    b = _existing(date(2026, 2, 2), attendance_id=2)

    assert index_by_training_date([a, b])[date(2026, 2, 2)].attendance_id == 1


def test_same_date_twice_in_batch_plans_one_insert_last_entry_wins(reconciler):
    batch = [
        DailyEditInput(date(2026, 2, 3), 9, 0, 18, 0, note="first"),
        DailyEditInput(date(2026, 2, 4), 9, 0, 18, 0),
        DailyEditInput(date(2026, 2, 3), 10, 0, 18, 0, note="second"),
    ]

    plan = reconciler.reconcile([], batch, trainee_id=5, actor=STAFF, now=NOW)

    assert [w.record.training_date for w in plan] == [date(2026, 2, 3), date(2026, 2, 4)]
    write = plan[0]
    assert write.is_new is True
    assert write.record.start_time == "10:00"
    assert write.record.note == "second"
    assert write.record.status == AttendanceStatus.LATE
    assert write.record.created_at == NOW


def test_same_date_twice_on_existing_row_plans_one_update(reconciler):
    batch = [
        DailyEditInput(date(2026, 2, 2), 9, 30, 18, 0),
        DailyEditInput(date(2026, 2, 2), 9, 0, 18, 0),
    ]

    plan = reconciler.reconcile([_existing(date(2026, 2, 2))], batch, trainee_id=5, actor=STAFF, now=NOW)

    assert len(plan) == 1
    assert plan[0].is_new is False
    assert plan[0].record.attendance_id == 11
    assert plan[0].record.created_at == datetime(2026, 2, 1, 9, 0)
    assert plan[0].record.status == AttendanceStatus.ON_TIME


def test_soft_deleted_row_is_revived_not_inserted(reconciler):
    existing = [_existing(date(2026, 2, 2), deleted=True, note="old")]
    batch = [DailyEditInput(date(2026, 2, 2), 9, 0, 18, 0)]

    plan = reconciler.reconcile(existing, batch, trainee_id=5, actor=STAFF, now=NOW)

    assert plan[0].is_new is False
    assert plan[0].record.attendance_id == 11
    assert plan[0].record.deleted is False
    assert plan[0].record.note == ""


def test_index_prefers_live_row_over_soft_deleted():
    gone = _existing(date(2026, 2, 2), attendance_id=1, deleted=True)
    live = _existing(date(2026, 2, 2), attendance_id=2)

    assert index_by_training_date([gone, live])[date(2026, 2, 2)].attendance_id == 2

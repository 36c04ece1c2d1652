from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from .attendance.classifier import StatusClassifier
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.punch import PunchWorkflow
from .attendance.reconciler import RecordReconciler
from .attendance.service import AttendanceService
from .attendance.validator import BatchValidator
from .common.clock import SystemClock
from .common.messages import DictMessageSource
from .database.connection import DBConfig, DatabaseConnection
from .schedules.model import TrainingPeriod
from .schedules.mysql_schedule_repository import MySQLScheduleRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    attendance_repo: MySQLAttendanceRepository
    schedules_repo: MySQLScheduleRepository

    clock: SystemClock
    messages: DictMessageSource
    classifier: StatusClassifier
    validator: BatchValidator
    reconciler: RecordReconciler
    punch_workflow: PunchWorkflow
    attendance_service: AttendanceService


def build_container(*, settings: ModuleType) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(getattr(settings, "DB_CONFIG")))

    standard_period = TrainingPeriod.parse(
        getattr(settings, "WORK_START_TIME"),
        getattr(settings, "WORK_END_TIME"),
    )

    attendance_repo = MySQLAttendanceRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn, standard_period)

    clock = SystemClock(int(getattr(settings, "TRAINING_DAY_ROLLOVER_HOUR", 0)))
    messages = DictMessageSource(getattr(settings, "MESSAGES", None))
    classifier = StatusClassifier(standard_period)
    validator = BatchValidator(messages)
    reconciler = RecordReconciler(classifier)
    punch_workflow = PunchWorkflow(attendance_repo, schedules_repo, clock, classifier, messages)
    attendance_service = AttendanceService(
        attendance_repo,
        schedules_repo,
        clock,
        messages,
        punch=punch_workflow,
        validator=validator,
        reconciler=reconciler,
    )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        schedules_repo=schedules_repo,
        clock=clock,
        messages=messages,
        classifier=classifier,
        validator=validator,
        reconciler=reconciler,
        punch_workflow=punch_workflow,
        attendance_service=attendance_service,
    )

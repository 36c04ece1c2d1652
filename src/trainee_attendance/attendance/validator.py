from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence, Set, Tuple

from ..common.messages import MessageSource
from ..common.validators import both_present, exactly_one_present, exceeds_max_length
from ..core import constants as c
from .blank_time import worked_minutes
from .model import DailyEditInput
from .training_time import TrainingTime

FIELD_NOTE = "note"
FIELD_END_ONLY = "EndOnly"
FIELD_TIME_OVER = "trainingTimeOver"
FIELD_BLANK_TIME = "blankTime"

_MAX_HOUR = 23
_MAX_MINUTE = 59


def list_field(index: int, name: str) -> str:
    """Form path of a per-day field, e.g. ``attendanceList[0].trainingStartHour``."""

    return f"attendanceList[{index}].{name}"


def _time_in_range(hour: Optional[int], minute: Optional[int]) -> Optional[TrainingTime]:
    # out-of-range parts are reported by the range check and count as not entered here
    if not both_present(hour, minute):
        return None
    if not (0 <= hour <= _MAX_HOUR and 0 <= minute <= _MAX_MINUTE):
        return None
    return TrainingTime(hour, minute)


@dataclass(frozen=True)
class FieldError:
    field: str
    key: str
    params: Tuple[str, ...]
    message: str


@dataclass
class ValidationResult:
    """Errors of a whole batch, addressable by field and as a flat message set."""

    errors: List[FieldError] = field(default_factory=list)
    field_errors: Dict[str, List[str]] = field(default_factory=dict)
    messages: Set[str] = field(default_factory=set)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add(self, error: FieldError) -> None:
        self.errors.append(error)
        self.field_errors.setdefault(error.field, []).append(error.message)
        self.messages.add(error.message)

    def fields(self) -> List[str]:
        return [e.field for e in self.errors]


class BatchValidator:
    """Cross-field checks for a multi-day edit batch.

    Hour, minute and blank-time ranges are checked on every day, because an
    out-of-range value cannot be stored at all. The remaining rules only run
    on days strictly before ``today``. Every rule runs on every such day and
    all errors are reported together.
    """

    def __init__(self, messages: MessageSource, *, note_max_length: int = c.NOTE_MAX_LENGTH):
        self._messages = messages
        self._note_max_length = int(note_max_length)

    def validate(self, batch: Sequence[DailyEditInput], today: date) -> ValidationResult:
        result = ValidationResult()
        batch_size = len(batch)

        for index, day in enumerate(batch):
            self._check_ranges(result, index, day)
            if day.training_date >= today:
                continue
            self._check_note(result, day)
            self._check_pairs(result, index, day)
            self._check_order(result, day, batch_size)
            self._check_blank_time(result, day)

        return result

    def _error(self, result: ValidationResult, field_name: str, key: str, *params: str) -> None:
        values = tuple(str(p) for p in params)
        message = self._messages.get_message(key, *values)
        result.add(FieldError(field=field_name, key=key, params=values, message=message))

    def _check_ranges(self, result: ValidationResult, index: int, day: DailyEditInput) -> None:
        parts = (
            (day.start_hour, _MAX_HOUR, "trainingStartHour", c.LABEL_START_TIME),
            (day.start_minute, _MAX_MINUTE, "trainingStartMinute", c.LABEL_START_TIME),
            (day.end_hour, _MAX_HOUR, "trainingEndHour", c.LABEL_END_TIME),
            (day.end_minute, _MAX_MINUTE, "trainingEndMinute", c.LABEL_END_TIME),
        )
        for value, upper, name, label_key in parts:
            if value is not None and not 0 <= value <= upper:
                label = self._messages.get_message(label_key)
                self._error(result, list_field(index, name), c.MSG_INPUT_INVALID, label)

        if day.blank_time is not None and day.blank_time < 0:
            label = self._messages.get_message(c.LABEL_BLANK_TIME)
            self._error(result, list_field(index, FIELD_BLANK_TIME), c.MSG_INPUT_INVALID, label)

    def _check_note(self, result: ValidationResult, day: DailyEditInput) -> None:
        if exceeds_max_length(day.note, self._note_max_length):
            label = self._messages.get_message(c.LABEL_NOTE)
            self._error(result, FIELD_NOTE, c.MSG_MAX_LENGTH, label, str(self._note_max_length))

    def _check_pairs(self, result: ValidationResult, index: int, day: DailyEditInput) -> None:
        pairs = (
            (day.start_hour, day.start_minute, "trainingStartHour", "trainingStartMinute", c.LABEL_START_TIME),
            (day.end_hour, day.end_minute, "trainingEndHour", "trainingEndMinute", c.LABEL_END_TIME),
        )
        for hour, minute, hour_field, minute_field, label_key in pairs:
            if not exactly_one_present(hour, minute):
                continue
            missing = hour_field if hour is None else minute_field
            label = self._messages.get_message(label_key)
            self._error(result, list_field(index, missing), c.MSG_INPUT_INVALID, label)

        start_empty = day.start_hour is None and day.start_minute is None
        if start_empty and both_present(day.end_hour, day.end_minute):
            self._error(result, FIELD_END_ONLY, c.MSG_PUNCH_IN_EMPTY)

    def _check_order(self, result: ValidationResult, day: DailyEditInput, batch_size: int) -> None:
        if not (both_present(day.start_hour, day.start_minute) and both_present(day.end_hour, day.end_minute)):
            return
        start = day.start_hour * 100 + day.start_minute
        end = day.end_hour * 100 + day.end_minute
        if start >= end:
            self._error(result, FIELD_TIME_OVER, c.MSG_TRAINING_TIME_RANGE, str(batch_size))

    def _check_blank_time(self, result: ValidationResult, day: DailyEditInput) -> None:
        if day.blank_time is None:
            return
        start = _time_in_range(day.start_hour, day.start_minute)
        end = _time_in_range(day.end_hour, day.end_minute)
        worked = worked_minutes(start, end) or 0
        if worked < day.blank_time:
            self._error(result, FIELD_BLANK_TIME, c.MSG_BLANK_TIME_ERROR)

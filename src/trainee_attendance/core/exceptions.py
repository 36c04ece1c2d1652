from __future__ import annotations

from typing import Sequence

from .constants import (
    MSG_AUTHORIZATION,
    MSG_BLANK_TIME_ERROR,
    MSG_NOT_WORK_DAY,
    MSG_PUNCH_ALREADY_EXISTS,
    MSG_PUNCH_IN_EMPTY,
    MSG_TIME_FORMAT,
    MSG_TRAINING_TIME_RANGE,
)


class DomainError(Exception):
    """Base exception for business rule violations.

    Carries a message key and its parameters; the display text is resolved by
    the caller through a MessageSource.
    """

    message_key: str = ""

    def __init__(self, detail: str = "", *, params: Sequence[str] = ()):
        super().__init__(detail or self.message_key)
        self.params = tuple(str(p) for p in params)


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TimeFormatError(ValidationError):
    """Raised when a time-of-day string is not a valid H:mm value."""

    message_key = MSG_TIME_FORMAT


class BlankTimeExceedsWorkError(ValidationError):
    """Raised when the unpaid break is longer than the worked duration."""

    message_key = MSG_BLANK_TIME_ERROR


class BatchValidationError(ValidationError):
    """Raised by the batch save when the validator reported field errors."""

    def __init__(self, result):
        super().__init__(f"{len(result.errors)} field error(s) in attendance batch")
        self.result = result


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    message_key = MSG_AUTHORIZATION


ForbiddenError = AuthorizationError


class AttendanceStateError(DomainError):
    """Raised when a punch is not allowed in the current state of the day."""


class AlreadyPunchedError(AttendanceStateError):
    message_key = MSG_PUNCH_ALREADY_EXISTS


class NoPunchInError(AttendanceStateError):
    message_key = MSG_PUNCH_IN_EMPTY


class NotWorkDayError(AttendanceStateError):
    message_key = MSG_NOT_WORK_DAY


class InvalidTimeRangeError(AttendanceStateError):
    message_key = MSG_TRAINING_TIME_RANGE

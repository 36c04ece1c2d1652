from __future__ import annotations

from typing import Mapping, Optional, Protocol

from ..core import constants as c


class MessageSource(Protocol):
    """Localized message lookup keyed by identifiers; the core never builds display text."""

    def get_message(self, key: str, *params: str) -> str:
        raise NotImplementedError


DEFAULT_MESSAGES: Mapping[str, str] = {
    c.MSG_AUTHORIZATION: "You are not allowed to perform this operation.",
    c.MSG_NOT_WORK_DAY: "Today is not a training day.",
    c.MSG_PUNCH_ALREADY_EXISTS: "Attendance for today is already entered. Please edit it directly.",
    c.MSG_PUNCH_IN_EMPTY: "Punch-out cannot be entered without a punch-in.",
    c.MSG_TRAINING_TIME_RANGE: "Punch-out time must be later than punch-in time ({0}).",
    c.MSG_BLANK_TIME_ERROR: "Blank time must not exceed the training time.",
    c.MSG_UPDATE_NOTICE: "Attendance has been updated.",
    c.MSG_MAX_LENGTH: "{0} must be at most {1} characters.",
    c.MSG_INPUT_INVALID: "{0} is invalid.",
    c.MSG_TIME_FORMAT: "Time must be written as H:mm.",
    c.LABEL_NOTE: "Note",
    c.LABEL_START_TIME: "Start time",
    c.LABEL_END_TIME: "End time",
    c.LABEL_BLANK_TIME: "Blank time",
}


class DictMessageSource(MessageSource):
    """Message templates held in a mapping, formatted with positional ``{0}`` params.

    Unknown keys render as the key itself so a missing template never hides an error.
    """

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        self._templates = dict(DEFAULT_MESSAGES)
        if templates:
            self._templates.update(templates)

    def get_message(self, key: str, *params: str) -> str:
        template = self._templates.get(key)
        if template is None:
            return key
        return template.format(*params)

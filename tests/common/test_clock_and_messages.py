from datetime import date, datetime
from unittest.mock import patch

import pytest

from trainee_attendance.common.clock import FixedClock, SystemClock
from trainee_attendance.common.datetime_utils import parse_training_date
from trainee_attendance.common.messages import DictMessageSource
from trainee_attendance.core import constants as c
from trainee_attendance.core.enums import AttendanceStatus


def test_training_day_rolls_over_at_configured_hour():
    clock = SystemClock(rollover_hour=5)
    with patch("trainee_attendance.common.clock.now_local", return_value=datetime(2026, 2, 10, 4, 59)):
        assert clock.current_training_date() == date(2026, 2, 9)
    with patch("trainee_attendance.common.clock.now_local", return_value=datetime(2026, 2, 10, 5, 0)):
        assert clock.current_training_date() == date(2026, 2, 10)


def test_midnight_rollover_is_calendar_date():
    with patch("trainee_attendance.common.clock.now_local", return_value=datetime(2026, 2, 10, 0, 1)):
        assert SystemClock().current_training_date() == date(2026, 2, 10)


def test_rollover_hour_must_be_an_hour():
    with pytest.raises(ValueError):
        SystemClock(rollover_hour=24)


def test_fixed_clock():
    clock = FixedClock(datetime(2026, 2, 10, 1, 0), date(2026, 2, 9))
    assert clock.now() == datetime(2026, 2, 10, 1, 0)
    assert clock.current_training_date() == date(2026, 2, 9)


def test_parse_training_date_formats():
    assert parse_training_date("2026-02-10") == date(2026, 2, 10)
    assert parse_training_date("2026/02/10") == date(2026, 2, 10)
    with pytest.raises(ValueError):
        parse_training_date("10.02.2026")


def test_messages_format_positional_params():
    messages = DictMessageSource()
    assert messages.get_message(c.MSG_MAX_LENGTH, "Note", "100") == "Note must be at most 100 characters."
    assert messages.get_message("no.such.key") == "no.such.key"


def test_messages_can_be_overridden():
    messages = DictMessageSource({c.MSG_UPDATE_NOTICE: "Saved."})
    assert messages.get_message(c.MSG_UPDATE_NOTICE) == "Saved."


def test_status_codes_and_labels():
    assert AttendanceStatus.from_code(3) is AttendanceStatus.LATE_AND_EARLY_LEAVE
    assert AttendanceStatus.from_label("Absent") is AttendanceStatus.ABSENT
    assert AttendanceStatus.from_label("4") is AttendanceStatus.ABSENT
    assert AttendanceStatus.from_label("") is None
    assert AttendanceStatus.from_label("unknown") is None
    with pytest.raises(ValueError):
        AttendanceStatus.from_code(9)

from datetime import datetime, time

import pytest

from trainee_attendance.attendance.training_time import TrainingTime, compare, format_optional
from trainee_attendance.common.clock import FixedClock
from trainee_attendance.core.exceptions import TimeFormatError, ValidationError


def test_parse_accepts_padded_and_unpadded_hour():
    assert TrainingTime.parse("9:05") == TrainingTime(9, 5)
    assert TrainingTime.parse("09:05") == TrainingTime(9, 5)
    assert TrainingTime.parse(" 17:00 ") == TrainingTime(17, 0)


@pytest.mark.parametrize("text", ["", "9", "9:5", "24:00", "12:60", "ab:cd", "9:00:00", "-1:00"])
def test_parse_rejects_invalid_text(text):
    with pytest.raises(TimeFormatError):
        TrainingTime.parse(text)


def test_time_format_error_is_a_validation_error():
    with pytest.raises(ValidationError):
        TrainingTime(25, 0)


def test_format_is_unpadded_hour_two_digit_minute():
    assert TrainingTime(9, 0).format() == "9:00"
    assert TrainingTime(13, 7).format() == "13:07"
    assert str(TrainingTime(0, 0)) == "0:00"


def test_parse_format_round_trip_for_every_minute_of_the_day():
    for hour in range(24):
        for minute in range(60):
            t = TrainingTime(hour, minute)
            assert TrainingTime.parse(t.format()) == t


def test_ordering_follows_minutes_of_day():
    assert TrainingTime(8, 59) < TrainingTime(9, 0)
    assert TrainingTime(10, 0) > TrainingTime(9, 59)
    assert compare(TrainingTime(9, 0), TrainingTime(9, 0)) == 0
    assert compare(TrainingTime(9, 0), TrainingTime(9, 1)) == -1
    assert compare(TrainingTime(12, 0), TrainingTime(9, 30)) == 1


def test_from_parts_requires_both_parts():
    assert TrainingTime.from_parts(9, 5) == TrainingTime(9, 5)
    assert TrainingTime.from_parts(9, None) is None
    assert TrainingTime.from_parts(None, 30) is None


def test_parse_optional_treats_blank_as_missing():
    assert TrainingTime.parse_optional("") is None
    assert TrainingTime.parse_optional(None) is None
    assert TrainingTime.parse_optional("9:00") == TrainingTime(9, 0)


def test_now_samples_clock_and_drops_seconds():
    clock = FixedClock(datetime(2026, 2, 2, 8, 59, 59))
    assert TrainingTime.now(clock) == TrainingTime(8, 59)
    assert TrainingTime.from_time(time(7, 15, 30)) == TrainingTime(7, 15)


def test_total_minutes_and_optional_format():
    assert TrainingTime(1, 30).total_minutes == 90
    assert format_optional(None) == ""
    assert format_optional(TrainingTime(9, 0)) == "9:00"

import importlib

import pytest

from trainee_attendance.config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "trainee_attendance.config.production"),
        ("PROD", "trainee_attendance.config.production"),
        ("testing", "trainee_attendance.config.testing"),
        ("anything", "trainee_attendance.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_testing_settings_define_standard_hours():
    settings = importlib.import_module("trainee_attendance.config.testing")
    assert settings.WORK_START_TIME == "9:00"
    assert settings.WORK_END_TIME == "18:00"
    assert settings.DB_CONFIG["database"] == "lms_attendance_test"

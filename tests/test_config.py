"""
Pace Planner - Configuration / Errors Tests
"""
import logging
import pytest
import sys
import os

# srcディレクトリをパスに追加
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from pace_planner.config import LOG_LEVEL_ENV, get_event_preset, get_log_level
from pace_planner.errors import (
    InvalidDistance,
    InvalidGoalTime,
    InvalidTargetPace,
    PaceCalculationError,
)


class TestGetLogLevel:
    """get_log_level関数のテスト"""

    def test_default(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert get_log_level() == logging.INFO

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert get_log_level() == logging.DEBUG

    def test_invalid_env(self, monkeypatch):
        """不正な値はINFO"""
        monkeypatch.setenv(LOG_LEVEL_ENV, "loud")
        assert get_log_level() == logging.INFO


class TestGetEventPreset:
    """get_event_preset関数のテスト"""

    def test_known_event(self):
        assert get_event_preset("10K") == (10.0, "km")
        assert get_event_preset("Half Marathon") == (21.0975, "km")

    def test_unknown_event(self):
        assert get_event_preset("Custom Distance") is None


class TestErrors:
    """入力検証エラーのテスト"""

    @pytest.mark.parametrize("error_cls, message", [
        (InvalidDistance, "Please enter a valid distance"),
        (InvalidGoalTime, "Please enter a goal time"),
        (InvalidTargetPace, "Please enter a target pace"),
    ])
    def test_default_messages(self, error_cls, message):
        error = error_cls()

        assert error.message == message
        assert str(error) == message
        assert isinstance(error, PaceCalculationError)
        assert isinstance(error, ValueError)

    def test_custom_message(self):
        error = InvalidDistance("Unknown distance unit: 'yd'")
        assert error.message == "Unknown distance unit: 'yd'"

"""Tests for settings resolution and logger setup."""

import sys

from loguru import logger

from trainlog.config.settings import Settings, settings
from trainlog.core.logger import setup_logger


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("WEEKLY_GOAL_KM", "35.5")
    monkeypatch.setenv("WEEKS_BACK", "6")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.weekly_goal_km == 35.5
    assert settings.weeks_back == 6
    assert settings.log_level == "DEBUG"
    assert settings.acwr_history_weeks == 8


def test_settings_fall_back_on_invalid_values(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    monkeypatch.setenv("WEEKLY_GOAL_KM", "-3")
    monkeypatch.setenv("ACWR_HISTORY_WEEKS", "0")

    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.weekly_goal_km == 0.0
    assert settings.acwr_history_weeks == 1


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "trainlog.log"

    setup_logger(level="DEBUG", log_file=str(log_file))
    logger.info("weekly report generated")
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    assert "weekly report generated" in log_file.read_text(encoding="utf-8")


def test_setup_logger_reads_settings(monkeypatch, tmp_path):
    """Level and file sink fall back to LOG_LEVEL / LOG_FILE; debug overrides the level."""
    log_file = tmp_path / "from-settings.log"
    monkeypatch.setattr(settings, "log_level", "WARNING")
    monkeypatch.setattr(settings, "log_file", str(log_file))

    assert setup_logger() == "WARNING"
    logger.info("below threshold")
    logger.warning("load spike")
    assert setup_logger(debug=True) == "DEBUG"
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    content = log_file.read_text(encoding="utf-8")
    assert "load spike" in content
    assert "below threshold" not in content

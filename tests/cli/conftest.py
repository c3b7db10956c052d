"""Shared fixtures for CLI tests.

Provides a JSON export of session rows on disk and restores the loguru
handler after each command (the CLI rebinds it to the runner's stderr).
"""

import json
import sys
from datetime import date, timedelta

import pytest
from loguru import logger

CLI_NOW = date(2024, 6, 12)


def _day(days_ago: int) -> str:
    return (CLI_NOW - timedelta(days=days_ago)).isoformat()


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def sessions_file(tmp_path):
    rows = [
        {
            "id": "b-1",
            "date": _day(0),
            "session_type": "boulder",
            "duration_min": 70,
            "rpe_1_10": 10,
            "climbs": [
                {"discipline": "boulder", "color_band": "green", "sent": True, "attempts": 1},
                {"discipline": "boulder", "color_band": "red", "sent": True, "attempts": 2},
            ],
        },
        {"id": "r-1", "date": _day(5), "session_type": "running", "distance_km": 10, "duration_min": 55},
        {"id": "r-2", "date": _day(1), "session_type": "running", "distance_km": 13, "duration_min": 70},
        {"id": "bad", "date": "yesterday"},
    ]
    path = tmp_path / "sessions.json"
    path.write_text(json.dumps(rows), encoding="utf-8")
    return path

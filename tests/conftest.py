"""Root conftest for all tests.

Shared fixtures: a fixed reference instant and factories for session and
climb records, so no test depends on the wall clock.
"""

from datetime import date, datetime, timedelta

import pytest

from trainlog.schemas.session import ClimbRecord, SessionRecord

# Wednesday; its week runs Monday 2024-06-10 to Sunday 2024-06-16
REFERENCE_NOW = datetime(2024, 6, 12, 18, 30)


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant for every date-window computation."""
    return REFERENCE_NOW


@pytest.fixture
def today(now) -> date:
    return now.date()


@pytest.fixture
def make_climb():
    """Factory for climb records with sensible defaults."""

    def _make(
        discipline: str = "boulder",
        color_band: str | None = None,
        grade_value: str | None = None,
        sent: bool = False,
        flash: bool = False,
        attempts: int = 1,
        **extra,
    ) -> ClimbRecord:
        return ClimbRecord(
            discipline=discipline,
            color_band=color_band,
            grade_value=grade_value,
            sent=sent,
            flash=flash,
            attempts=attempts,
            **extra,
        )

    return _make


@pytest.fixture
def make_session(today):
    """Factory for session records; `days_ago` is relative to the reference day."""

    def _make(
        days_ago: int = 0,
        session_type: str = "boulder",
        duration_min: int | None = None,
        rpe: int | None = None,
        distance_km: float | None = None,
        elevation_gain_m: float | None = None,
        climbs: list[ClimbRecord] | None = None,
        **extra,
    ) -> SessionRecord:
        return SessionRecord(
            date=today - timedelta(days=days_ago),
            session_type=session_type,
            duration_min=duration_min,
            rpe_1_10=rpe,
            distance_km=distance_km,
            elevation_gain_m=elevation_gain_m,
            climbs=climbs or [],
            **extra,
        )

    return _make

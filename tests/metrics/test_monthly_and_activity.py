"""Tests for monthly comparison and activity time breakdown."""

from datetime import date, datetime

import pytest

from trainlog.metrics.activity_breakdown import calculate_activity_breakdown, calculate_weekly_activity_hours
from trainlog.metrics.monthly_comparison import calculate_monthly_climb_metrics, calculate_monthly_running_metrics
from trainlog.schemas.session import SessionRecord


def test_monthly_buckets_are_last_six_months(now):
    climbing = calculate_monthly_climb_metrics([], now)
    running = calculate_monthly_running_metrics([], now)

    assert [m.month for m in climbing] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
    assert [m.month_start for m in running][-1] == date(2024, 6, 1)
    assert all(m.boulder_max_sent == 0 and m.boulder_max_sent_label == "-" for m in climbing)
    assert all(m.avg_pace == 0 for m in running)


def test_monthly_buckets_cross_year_boundary():
    months = calculate_monthly_running_metrics([], datetime(2024, 2, 10), months=4)

    assert [m.month_start for m in months] == [date(2023, 11, 1), date(2023, 12, 1), date(2024, 1, 1), date(2024, 2, 1)]


def test_monthly_climb_progression(make_session, make_climb, now):
    sessions = [
        make_session(
            days_ago=2,
            duration_min=90,
            climbs=[
                make_climb(color_band="red", sent=True, flash=True),
                make_climb(color_band="black", sent=False, attempts=5),
            ],
        ),
        make_session(
            days_ago=20,  # 2024-05-23
            session_type="rope",
            duration_min=120,
            climbs=[
                make_climb(discipline="route", grade_value="6c", sent=True, attempts=2),
                make_climb(discipline="route", grade_value="7a", sent=False, attempts=3),
            ],
        ),
        make_session(days_ago=1, session_type="training", climbs=[make_climb(color_band="black", sent=True)]),
    ]

    months = calculate_monthly_climb_metrics(sessions, now)
    may, june = months[-2], months[-1]

    assert june.boulder_max_sent == 5
    assert june.boulder_max_sent_label == "Red (≈ 6b–6c)"
    assert june.boulder_attempts == 6
    assert june.boulder_sends == 1
    assert june.boulder_flashes == 1
    assert june.climb_sessions == 1
    assert june.total_climb_time == 90
    assert may.route_max_sent_label == "6c"
    assert may.route_attempts == 5
    assert may.route_sends == 1
    assert may.boulder_max_sent == 0


def test_monthly_running_totals_and_pace(make_session, now):
    sessions = [
        make_session(days_ago=0, session_type="running", duration_min=60, distance_km=10, elevation_gain_m=120.4),
        make_session(days_ago=3, session_type="running", duration_min=30, distance_km=5, elevation_gain_m=80.2),
        make_session(days_ago=5, session_type="boulder", duration_min=90),
    ]

    june = calculate_monthly_running_metrics(sessions, now)[-1]

    assert june.total_km == 15.0
    assert june.total_time == 90
    assert june.total_elevation == 201
    assert june.sessions == 2
    assert june.avg_pace == pytest.approx(6.0)


def test_activity_breakdown_shares(make_session, now):
    sessions = [
        make_session(days_ago=1, session_type="boulder", duration_min=90),
        make_session(days_ago=2, session_type="running", time_min=30),
        make_session(days_ago=40, session_type="boulder", duration_min=600),
    ]

    breakdown = calculate_activity_breakdown(sessions, now, period_days=30)

    assert [i.session_type for i in breakdown.items] == ["boulder", "running"]
    assert [i.percentage for i in breakdown.items] == [75, 25]
    assert [i.hours for i in breakdown.items] == [1.5, 0.5]
    assert breakdown.total_minutes == 120
    assert breakdown.total_hours == 2.0


def test_activity_hours_round_half_up(make_session, now):
    """15 and 75 minutes show as 0.3 h and 1.3 h, as on the existing charts."""
    sessions = [
        make_session(days_ago=1, session_type="boulder", duration_min=15),
        make_session(days_ago=2, session_type="running", duration_min=75),
    ]

    breakdown = calculate_activity_breakdown(sessions, now)
    rows, _ = calculate_weekly_activity_hours(sessions, now, period_days=7)

    assert {i.session_type: i.hours for i in breakdown.items} == {"boulder": 0.3, "running": 1.3}
    assert rows[-1].hours_by_type == {"boulder": 0.3, "running": 1.3}
    assert rows[-1].total == 1.6


def test_monthly_km_round_half_up(make_session, now):
    runs = [make_session(days_ago=1, session_type="running", distance_km=2.25, duration_min=15)]

    june = calculate_monthly_running_metrics(runs, now)[-1]

    assert june.total_km == 2.3


def test_activity_breakdown_empty(now):
    breakdown = calculate_activity_breakdown([], now)

    assert breakdown.items == []
    assert breakdown.total_minutes == 0


def test_weekly_activity_hours(make_session, now):
    sessions = [
        make_session(days_ago=1, session_type="boulder", duration_min=90),
        make_session(days_ago=2, session_type="running", duration_min=30),
        make_session(days_ago=5, session_type="strength", duration_min=60),
    ]

    rows, avg_hours = calculate_weekly_activity_hours(sessions, now, period_days=14)

    assert len(rows) == 2
    assert rows[0].hours_by_type == {"boulder": 0.0, "running": 0.0, "strength": 1.0}
    assert rows[1].hours_by_type == {"boulder": 1.5, "running": 0.5, "strength": 0.0}
    assert rows[1].week_label == "10 Jun"
    assert [r.total for r in rows] == [1.0, 2.0]
    assert avg_hours == 1.5


def test_legacy_session_type_still_parses():
    session = SessionRecord(date="2024-06-01", session_type="Hangboard", duration_min=20)

    assert session.session_type == "hangboard"

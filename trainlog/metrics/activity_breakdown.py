"""Time distribution across session types.

Feeds the activity donut (share of minutes per type over a trailing period)
and the weekly stacked bar chart (hours per type per week).
"""

from __future__ import annotations

import math
from collections import defaultdict
from datetime import date, datetime, timedelta

from trainlog.metrics.weekly_aggregation import get_weekly_sessions
from trainlog.schemas.metrics import ActivityBreakdown, ActivityShare, WeeklyActivityHours
from trainlog.schemas.session import SessionRecord
from trainlog.utils.calendar import as_day, day_month_label
from trainlog.utils.rounding import round_half_up


def _hours(minutes: float) -> float:
    return round_half_up(minutes / 60, 1)


def calculate_activity_breakdown(
    sessions: list[SessionRecord],
    now: date | datetime,
    period_days: int = 30,
) -> ActivityBreakdown:
    """Share of training minutes per session type.

    Args:
        sessions: Session records
        now: Reference instant
        period_days: Trailing window; sessions dated on or after now - period_days count

    Returns:
        ActivityBreakdown with items sorted by minutes (largest first)
    """
    since = as_day(now) - timedelta(days=period_days)
    minutes_by_type: dict[str, int] = defaultdict(int)
    for session in sessions:
        if session.date >= since:
            minutes_by_type[session.session_type] += session.effective_duration_min

    total = sum(minutes_by_type.values())
    items = [
        ActivityShare(
            session_type=session_type,
            minutes=minutes,
            hours=_hours(minutes),
            percentage=round_half_up(minutes / total * 100) if total > 0 else 0,
        )
        for session_type, minutes in minutes_by_type.items()
    ]
    items.sort(key=lambda item: item.minutes, reverse=True)

    return ActivityBreakdown(items=items, total_minutes=total, total_hours=_hours(total))


def calculate_weekly_activity_hours(
    sessions: list[SessionRecord],
    now: date | datetime,
    period_days: int = 30,
) -> tuple[list[WeeklyActivityHours], float]:
    """Hours per session type for each week covering the trailing period.

    Args:
        sessions: Session records
        now: Reference instant
        period_days: Period length; ceil(period_days / 7) weeks are reported

    Returns:
        (weekly rows oldest first, average hours per week rounded to 0.1)
    """
    weeks_back = max(1, math.ceil(period_days / 7))
    session_types = sorted({s.session_type for s in sessions})
    rows: list[WeeklyActivityHours] = []

    for bucket in get_weekly_sessions(sessions, now, weeks_back):
        minutes_by_type: dict[str, int] = defaultdict(int)
        for session in bucket.sessions:
            minutes_by_type[session.session_type] += session.effective_duration_min
        hours_by_type = {t: _hours(minutes_by_type.get(t, 0)) for t in session_types}
        rows.append(
            WeeklyActivityHours(
                week_label=day_month_label(bucket.start),
                week_start=bucket.start,
                hours_by_type=hours_by_type,
                total=round_half_up(sum(hours_by_type.values()), 1),
            )
        )

    avg_hours = round_half_up(sum(r.total for r in rows) / weeks_back, 1)
    return rows, avg_hours

"""Training load metrics computation (TRIMP, ACWR).

This module computes the acute:chronic workload ratio from session-level
TRIMP scores and classifies it into a risk zone.

Metrics:
- TRIMP: duration_min * rpe + distance_km * 10 (defaults: 60 min, RPE 5)
- Acute load: TRIMP summed over the trailing 7 days (anchor day included)
- Chronic load: TRIMP of the 4 weeks preceding the acute window, summed per
  week and averaged over 4 (empty weeks still count)
- ACWR: acute / chronic, 0 when chronic is 0

Properties:
- Deterministic: same (sessions, now) always produces the same output
- Independent: every history point recomputes its windows from scratch
- Total: empty input gives zero loads and the "undertraining" zone
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timedelta

from loguru import logger

from trainlog.metrics.constants import (
    ACUTE_WINDOW_DAYS,
    ACWR_CAUTION_MAX,
    ACWR_HISTORY_WEEKS,
    ACWR_OPTIMAL_MAX,
    ACWR_UNDERTRAINING_BELOW,
    CHRONIC_WINDOW_COUNT,
    LOAD_TREND_THRESHOLD_PCT,
    TRIMP_DEFAULT_DURATION_MIN,
    TRIMP_DEFAULT_RPE,
    TRIMP_DISTANCE_MULTIPLIER,
)
from trainlog.schemas.metrics import AcwrTrendPoint, LoadMetrics, LoadStatus, LoadTrend
from trainlog.schemas.session import SessionRecord
from trainlog.utils.calendar import as_day, day_month_label
from trainlog.utils.rounding import round_half_up

LOAD_STATUS_DESCRIPTIONS: dict[str, str] = {
    "optimal": "Balanced load. Good moment to maintain or increase slightly.",
    "caution": "High load. Consider easing intensity over the next few days.",
    "danger": "Overtraining risk. Reduce load significantly.",
    "undertraining": "Low load. You can add volume or intensity.",
}


def calculate_trimp(session: SessionRecord) -> float:
    """Compute the TRIMP load sample of a single session.

    Args:
        session: Session record

    Returns:
        duration_min * rpe + distance_km * 10, with duration defaulting to
        60 min and RPE to 5 when absent. Sessions without a distance add no
        distance term.
    """
    duration = session.duration_min or TRIMP_DEFAULT_DURATION_MIN
    rpe = session.rpe_1_10 or TRIMP_DEFAULT_RPE
    distance_load = (session.distance_km or 0.0) * TRIMP_DISTANCE_MULTIPLIER
    return duration * rpe + distance_load


def get_load_status(acwr: float) -> LoadStatus:
    """Classify an ACWR value into its risk zone.

    < 0.8 undertraining, 0.8-1.3 (inclusive) optimal, (1.3, 1.5] caution,
    > 1.5 danger.
    """
    if acwr < ACWR_UNDERTRAINING_BELOW:
        return "undertraining"
    if acwr <= ACWR_OPTIMAL_MAX:
        return "optimal"
    if acwr <= ACWR_CAUTION_MAX:
        return "caution"
    return "danger"


def get_load_trend(acute: float, previous_acute: float) -> LoadTrend:
    """Compare acute load with the previous 7-day window (+/-10% thresholds)."""
    percent_change = (acute - previous_acute) / previous_acute * 100 if previous_acute > 0 else 0.0

    if percent_change > LOAD_TREND_THRESHOLD_PCT:
        return "increasing"
    if percent_change < -LOAD_TREND_THRESHOLD_PCT:
        return "decreasing"
    return "stable"


def _daily_loads(sessions: list[SessionRecord]) -> dict[date, float]:
    """Total TRIMP per calendar day."""
    loads: dict[date, float] = defaultdict(float)
    for session in sessions:
        loads[session.date] += calculate_trimp(session)
    return loads


def _window_load(daily_loads: dict[date, float], start: date, end: date) -> float:
    """Sum of daily loads for start <= day < end."""
    total = 0.0
    day = start
    while day < end:
        total += daily_loads.get(day, 0.0)
        day += timedelta(days=1)
    return total


def _loads_at(daily_loads: dict[date, float], anchor: date) -> tuple[float, float, float]:
    """Return (acute, chronic, previous_acute) for the given anchor day.

    Acute covers [anchor - 7, anchor]. Chronic week k covers
    [anchor - 7k - 7, anchor - 7k) for k in 1..4; previous acute is chronic
    week 1.
    """
    window = timedelta(days=ACUTE_WINDOW_DAYS)
    acute_start = anchor - window
    acute = _window_load(daily_loads, acute_start, anchor + timedelta(days=1))

    weekly = [
        _window_load(daily_loads, acute_start - window * k, acute_start - window * (k - 1))
        for k in range(1, CHRONIC_WINDOW_COUNT + 1)
    ]
    chronic = sum(weekly) / CHRONIC_WINDOW_COUNT
    return acute, chronic, weekly[0]


def _acwr(acute: float, chronic: float) -> float:
    return acute / chronic if chronic > 0 else 0.0


def calculate_load_metrics(sessions: list[SessionRecord], now: date | datetime) -> LoadMetrics:
    """Compute the current ACWR, its zone and the acute load trend.

    Args:
        sessions: Session records of any type
        now: Reference instant (its calendar day anchors every window)

    Returns:
        LoadMetrics with acute, chronic, acwr, status and trend
    """
    acute, chronic, previous_acute = _loads_at(_daily_loads(sessions), as_day(now))
    acwr = _acwr(acute, chronic)
    metrics = LoadMetrics(
        acute=acute,
        chronic=chronic,
        acwr=acwr,
        status=get_load_status(acwr),
        trend=get_load_trend(acute, previous_acute),
    )
    logger.debug(f"Load metrics: acute={acute:.0f} chronic={chronic:.1f} acwr={acwr:.2f} status={metrics.status}")
    return metrics


def calculate_acwr_history(
    sessions: list[SessionRecord],
    now: date | datetime,
    weeks: int = ACWR_HISTORY_WEEKS,
) -> list[AcwrTrendPoint]:
    """Compute the ACWR trend series for charting.

    Args:
        sessions: Session records of any type
        now: Reference instant
        weeks: Number of points; anchors are now - (weeks-1) weeks through now

    Returns:
        Points ordered oldest first. acwr is rounded to 2 decimals, acute and
        chronic to integers. The last point matches calculate_load_metrics.
    """
    daily_loads = _daily_loads(sessions)
    today = as_day(now)
    points: list[AcwrTrendPoint] = []

    for weeks_ago in range(max(1, weeks) - 1, -1, -1):
        anchor = today - timedelta(weeks=weeks_ago)
        acute, chronic, _ = _loads_at(daily_loads, anchor)
        points.append(
            AcwrTrendPoint(
                week_label=day_month_label(anchor),
                anchor=anchor,
                acwr=round(_acwr(acute, chronic), 2),
                acute=round_half_up(acute),
                chronic=round_half_up(chronic),
            )
        )

    logger.debug(f"ACWR history: points={len(points)} sessions={len(sessions)}")
    return points

"""Weekly aggregation of climbing and running sessions.

Sessions are partitioned once into Monday-Sunday week buckets ending with
the week that contains `now`, then each bucket is summarized:

- Climb metrics: max sent / max tried grade, attempts-weighted average
  grade, volume counts, duration and near-limit ("hard") attempts, for one
  modality (boulder, autobelay or rope)
- Running metrics: distance, time, elevation, goal progress, duration x RPE
  load and week-over-week distance change

Properties:
- Deterministic: output depends only on (sessions, now, parameters)
- Pure: the input list is never mutated; all records are freshly built
- Total: empty weeks and missing fields produce zeros, never errors
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime

from loguru import logger

from trainlog.metrics.constants import (
    BOULDER_MODALITY,
    CLIMB_SESSION_TYPES,
    HARD_ATTEMPT_INDEX_OFFSET,
    RUNNING_DEFAULT_RPE,
    RUNNING_SESSION_TYPE,
)
from trainlog.metrics.grades import climb_grade, grade_label
from trainlog.schemas.metrics import ClimbWeeklyMetrics, RunningWeeklyMetrics
from trainlog.schemas.session import ClimbRecord, Modality, SessionRecord
from trainlog.utils.calendar import short_week_label, week_start, week_windows
from trainlog.utils.rounding import round_half_up


@dataclass(frozen=True)
class WeekBucket:
    """Sessions whose date falls in [start, end] (Monday to Sunday)."""

    start: date
    end: date
    sessions: list[SessionRecord] = field(default_factory=list)


def filter_climbs_by_modality(climbs: list[ClimbRecord], modality: Modality) -> list[ClimbRecord]:
    """Select the climbs of one modality.

    Boulder selects discipline == "boulder". Autobelay and rope both select
    discipline == "route": storage does not tell them apart.
    """
    if modality == BOULDER_MODALITY:
        return [c for c in climbs if c.discipline == "boulder"]
    return [c for c in climbs if c.discipline == "route"]


def get_weekly_sessions(
    sessions: list[SessionRecord],
    now: date | datetime,
    weeks_back: int = 4,
) -> list[WeekBucket]:
    """Partition sessions into the `weeks_back` weeks ending with the week of now.

    Args:
        sessions: Session records in any order
        now: Reference instant
        weeks_back: Number of buckets (values below 1 are treated as 1)

    Returns:
        Buckets in chronological order (oldest first). Sessions outside the
        covered range are dropped.
    """
    by_week: dict[date, list[SessionRecord]] = defaultdict(list)
    for session in sessions:
        by_week[week_start(session.date)].append(session)

    return [WeekBucket(start=start, end=end, sessions=list(by_week.get(start, ()))) for start, end in week_windows(now, weeks_back)]


def _summarize_climbs(bucket: WeekBucket, modality: Modality) -> ClimbWeeklyMetrics:
    climbing_sessions = [s for s in bucket.sessions if s.session_type in CLIMB_SESSION_TYPES]
    climbs = [c for s in climbing_sessions for c in filter_climbs_by_modality(s.climbs, modality)]
    indices = [climb_grade(c.color_band, c.grade_value, modality).index for c in climbs]

    sent_indices = [i for c, i in zip(climbs, indices) if c.sent and i > 0]
    tried_indices = [i for c, i in zip(climbs, indices) if not c.sent and i > 0]
    max_sent = max(sent_indices, default=0)
    max_tried = max(tried_indices, default=0)

    weighted_sum = 0
    total_weight = 0
    for climb, index in zip(climbs, indices):
        if index > 0:
            weighted_sum += index * climb.attempts
            total_weight += climb.attempts
    avg_weighted = round_half_up(weighted_sum / total_weight) if total_weight > 0 else 0

    # Near-limit heuristic, not a statistical measure
    hard_threshold = avg_weighted + HARD_ATTEMPT_INDEX_OFFSET
    hard_attempts = sum(1 for i in indices if i >= hard_threshold)

    return ClimbWeeklyMetrics(
        week_label=short_week_label(bucket.start),
        week_start=bucket.start,
        max_sent_index=max_sent,
        max_sent_label=grade_label(max_sent, modality),
        max_tried_index=max_tried,
        max_tried_label=grade_label(max_tried, modality),
        avg_weighted_index=avg_weighted,
        avg_weighted_label=grade_label(avg_weighted, modality),
        total_attempts=sum(c.attempts for c in climbs),
        sent_count=sum(1 for c in climbs if c.sent),
        tried_count=sum(1 for c in climbs if not c.sent),
        flash_count=sum(1 for c in climbs if c.flash),
        total_duration_min=sum(s.duration_min or 0 for s in climbing_sessions),
        hard_attempts=hard_attempts,
    )


def calculate_climb_metrics(
    sessions: list[SessionRecord],
    modality: Modality,
    now: date | datetime,
    weeks_back: int = 4,
) -> list[ClimbWeeklyMetrics]:
    """Compute weekly climbing metrics for one modality.

    Args:
        sessions: Session records (only boulder/rope/hybrid sessions are used)
        modality: "boulder", "autobelay" or "rope"
        now: Reference instant; the last bucket is the week containing it
        weeks_back: Number of weeks to report

    Returns:
        One ClimbWeeklyMetrics per week, oldest first

    Notes:
        - Ungraded climbs (index 0) count toward volume but never toward
          max or average grades
        - avg_weighted_index = sum(index * attempts) / sum(attempts) rounded
          half up, 0 when no climb is graded
    """
    buckets = get_weekly_sessions(sessions, now, weeks_back)
    metrics = [_summarize_climbs(bucket, modality) for bucket in buckets]
    logger.debug(f"Computed climb metrics: modality={modality} weeks={len(metrics)} sessions={len(sessions)}")
    return metrics


def _running_totals(bucket: WeekBucket) -> tuple[list[SessionRecord], float]:
    runs = [s for s in bucket.sessions if s.session_type == RUNNING_SESSION_TYPE]
    return runs, sum(s.distance_km or 0.0 for s in runs)


def _distance_delta_pct(current_km: float, previous_km: float) -> float:
    if previous_km <= 0:
        return 0.0
    return (current_km - previous_km) / previous_km * 100


def calculate_running_metrics(
    sessions: list[SessionRecord],
    weekly_goal_km: float,
    now: date | datetime,
    weeks_back: int = 4,
) -> list[RunningWeeklyMetrics]:
    """Compute weekly running metrics.

    Args:
        sessions: Session records (only "running" sessions are used)
        weekly_goal_km: Weekly distance goal; a goal of 0 gives 0% progress
        now: Reference instant; the last bucket is the week containing it
        weeks_back: Number of weeks to report

    Returns:
        One RunningWeeklyMetrics per week, oldest first. distance_delta_pct
        compares each week with the previous bucket (0 for the first one or
        when the previous week has no distance).
    """
    buckets = get_weekly_sessions(sessions, now, weeks_back)
    metrics: list[RunningWeeklyMetrics] = []
    previous_km = 0.0

    for index, bucket in enumerate(buckets):
        runs, distance_km = _running_totals(bucket)
        weekly_load = sum(s.effective_duration_min * (s.rpe_1_10 or RUNNING_DEFAULT_RPE) for s in runs)

        metrics.append(
            RunningWeeklyMetrics(
                week_label=short_week_label(bucket.start),
                week_start=bucket.start,
                weekly_time_min=sum(s.effective_duration_min for s in runs),
                weekly_distance_km=distance_km,
                weekly_elevation_gain_m=sum(s.elevation_gain_m or 0.0 for s in runs),
                goal_progress_pct=distance_km / weekly_goal_km * 100 if weekly_goal_km > 0 else 0.0,
                weekly_load=weekly_load,
                distance_delta_pct=_distance_delta_pct(distance_km, previous_km) if index > 0 else 0.0,
                session_count=len(runs),
            )
        )
        previous_km = distance_km

    logger.debug(f"Computed running metrics: goal_km={weekly_goal_km} weeks={len(metrics)} sessions={len(sessions)}")
    return metrics


def current_week_climb_metrics(
    sessions: list[SessionRecord],
    modality: Modality,
    now: date | datetime,
) -> ClimbWeeklyMetrics:
    """Climb metrics for the week containing now."""
    return calculate_climb_metrics(sessions, modality, now, weeks_back=1)[-1]


def current_week_running_metrics(
    sessions: list[SessionRecord],
    weekly_goal_km: float,
    now: date | datetime,
) -> RunningWeeklyMetrics:
    """Running metrics for the week containing now, with the delta vs last week."""
    return calculate_running_metrics(sessions, weekly_goal_km, now, weeks_back=2)[-1]

"""Month-over-month comparison of climbing and running.

Buckets sessions into the last N calendar months (oldest first) and
summarizes boulder and route progression plus running volume per month.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime

from loguru import logger

from trainlog.metrics.constants import CLIMB_SESSION_TYPES, MONTHLY_COMPARISON_MONTHS, RUNNING_SESSION_TYPE
from trainlog.metrics.grades import color_to_index, french_to_index, grade_label
from trainlog.metrics.weekly_aggregation import filter_climbs_by_modality
from trainlog.schemas.metrics import MonthlyClimbMetrics, MonthlyRunningMetrics
from trainlog.schemas.session import SessionRecord
from trainlog.utils.calendar import month_label, month_start, month_windows
from trainlog.utils.rounding import round_half_up


def _sessions_by_month(sessions: list[SessionRecord], now: date | datetime, months: int) -> list[tuple[date, list[SessionRecord]]]:
    by_month: dict[date, list[SessionRecord]] = defaultdict(list)
    for session in sessions:
        by_month[month_start(session.date)].append(session)
    return [(start, by_month.get(start, [])) for start, _ in month_windows(now, months)]


def calculate_monthly_climb_metrics(
    sessions: list[SessionRecord],
    now: date | datetime,
    months: int = MONTHLY_COMPARISON_MONTHS,
) -> list[MonthlyClimbMetrics]:
    """Summarize climbing per calendar month.

    Boulders are graded by color band, routes (autobelay and rope alike) by
    French grade. Max sent ignores ungraded climbs.
    """
    result: list[MonthlyClimbMetrics] = []

    for start, month_sessions in _sessions_by_month(sessions, now, months):
        climbing = [s for s in month_sessions if s.session_type in CLIMB_SESSION_TYPES]
        boulders = [c for s in climbing for c in filter_climbs_by_modality(s.climbs, "boulder")]
        routes = [c for s in climbing for c in filter_climbs_by_modality(s.climbs, "rope")]

        boulder_max = max((color_to_index(c.color_band) for c in boulders if c.sent), default=0)
        route_max = max((french_to_index(c.grade_value) for c in routes if c.sent), default=0)

        result.append(
            MonthlyClimbMetrics(
                month=month_label(start),
                month_start=start,
                boulder_max_sent=boulder_max,
                boulder_max_sent_label=grade_label(boulder_max, "boulder"),
                boulder_attempts=sum(c.attempts for c in boulders),
                boulder_sends=sum(1 for c in boulders if c.sent),
                boulder_flashes=sum(1 for c in boulders if c.flash),
                route_max_sent=route_max,
                route_max_sent_label=grade_label(route_max, "rope"),
                route_attempts=sum(c.attempts for c in routes),
                route_sends=sum(1 for c in routes if c.sent),
                climb_sessions=len(climbing),
                total_climb_time=sum(s.duration_min or 0 for s in climbing),
            )
        )

    logger.debug(f"Computed monthly climb metrics: months={len(result)}")
    return result


def calculate_monthly_running_metrics(
    sessions: list[SessionRecord],
    now: date | datetime,
    months: int = MONTHLY_COMPARISON_MONTHS,
) -> list[MonthlyRunningMetrics]:
    """Summarize running per calendar month.

    avg_pace is minutes per km over the whole month, 0 when no distance was
    logged.
    """
    result: list[MonthlyRunningMetrics] = []

    for start, month_sessions in _sessions_by_month(sessions, now, months):
        runs = [s for s in month_sessions if s.session_type == RUNNING_SESSION_TYPE]
        total_km = sum(s.distance_km or 0.0 for s in runs)
        total_time = sum(s.effective_duration_min for s in runs)
        total_elevation = sum(s.elevation_gain_m or 0.0 for s in runs)

        result.append(
            MonthlyRunningMetrics(
                month=month_label(start),
                month_start=start,
                total_km=round_half_up(total_km, 1),
                total_time=total_time,
                total_elevation=round_half_up(total_elevation),
                sessions=len(runs),
                avg_pace=total_time / total_km if total_km > 0 else 0.0,
            )
        )

    logger.debug(f"Computed monthly running metrics: months={len(result)}")
    return result

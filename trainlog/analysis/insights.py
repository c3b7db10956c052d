"""Training assistant insights.

Turns the current week's metrics into short guidance lines. Insights are
descriptive guidance only; nothing here creates or modifies sessions.
"""

from datetime import date, datetime

from trainlog.metrics.constants import (
    DELOAD_DECREASE_PCT,
    HARD_ATTEMPT_SHARE,
    HIGH_RUNNING_LOAD,
    HIGH_SEND_SHARE,
    LOW_GOAL_PROGRESS_PCT,
    SUDDEN_INCREASE_PCT,
)
from trainlog.metrics.weekly_aggregation import current_week_climb_metrics, current_week_running_metrics
from trainlog.schemas.metrics import Insight, RunningWeeklyMetrics
from trainlog.schemas.session import Modality, SessionRecord
from trainlog.utils.rounding import round_half_up

MODALITY_LABELS: dict[str, str] = {
    "boulder": "Boulder",
    "autobelay": "Autobelay",
    "rope": "Rope",
}


def is_sudden_distance_increase(metrics: RunningWeeklyMetrics) -> bool:
    """True when weekly distance rose more than 25% over the previous week."""
    return metrics.distance_delta_pct > SUDDEN_INCREASE_PCT


def generate_climb_insights(
    sessions: list[SessionRecord],
    modality: Modality,
    now: date | datetime,
) -> list[Insight]:
    """Guidance for the current climbing week.

    Returns:
        Summary line, volume line and one focus recommendation:
        - hard attempts above 50% of attempts: technique/volume session
        - sends above 80% of attempts: raise the difficulty
        - otherwise: balance projects and accessible volume
    """
    metrics = current_week_climb_metrics(sessions, modality, now)
    label = MODALITY_LABELS.get(modality, modality.capitalize())

    insights = [
        Insight(kind="info", text=f"{label}: Max sent {metrics.max_sent_label}. Max tried {metrics.max_tried_label}."),
    ]

    volume = f"Volume: {metrics.total_attempts} attempts, {metrics.sent_count} tops"
    if metrics.flash_count > 0:
        volume += f", {metrics.flash_count} flashes"
    insights.append(Insight(kind="info", text=f"{volume}."))

    if metrics.hard_attempts > metrics.total_attempts * HARD_ATTEMPT_SHARE:
        insights.append(
            Insight(kind="warning", text="High share of attempts at your limit. Consider a technique/volume session today.")
        )
    elif metrics.sent_count > metrics.total_attempts * HIGH_SEND_SHARE:
        insights.append(Insight(kind="success", text="Good send ratio. You can raise the difficulty to progress."))
    else:
        insights.append(Insight(kind="info", text="Focus of the day: balance projects and accessible volume."))

    return insights


def generate_running_insights(
    sessions: list[SessionRecord],
    weekly_goal_km: float,
    now: date | datetime,
) -> list[Insight]:
    """Guidance for the current running week.

    Returns:
        Summary line with goal progress, an optional distance alert
        (> +25% sudden increase, < -20% deload week) and one load-based
        focus recommendation.
    """
    metrics = current_week_running_metrics(sessions, weekly_goal_km, now)
    goal_pct = round_half_up(metrics.goal_progress_pct)

    insights = [
        Insight(
            kind="success" if goal_pct >= 100 else "info",
            text=(
                f"Running: {metrics.weekly_distance_km:.1f}/{weekly_goal_km:g} km ({goal_pct}%). "
                f"D+ {round_half_up(metrics.weekly_elevation_gain_m)} m."
            ),
        )
    ]

    if is_sudden_distance_increase(metrics):
        insights.append(
            Insight(
                kind="warning",
                text=f"Careful: +{round_half_up(metrics.distance_delta_pct)}% km vs last week. Moderate the load.",
            )
        )
    elif metrics.distance_delta_pct < DELOAD_DECREASE_PCT and metrics.weekly_distance_km > 0:
        insights.append(
            Insight(kind="info", text="Reduced volume this week. Good deload week, or consider adding a session.")
        )

    if metrics.weekly_load > HIGH_RUNNING_LOAD:
        insights.append(Insight(kind="warning", text="High load. Next session: easy run or rest."))
    elif metrics.goal_progress_pct < LOW_GOAL_PROGRESS_PCT:
        insights.append(
            Insight(kind="info", text="Below 50% of the weekly goal. Add a short session if you want to reach it.")
        )
    else:
        insights.append(Insight(kind="success", text="Good pace. Keep it consistent and listen to your body."))

    return insights

"""Aggregate records handed to chart and UI collaborators.

All fields are primitives (plus ISO dates); model_dump() yields chart-ready
dicts. Records are created fresh on every call and never persisted.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel

LoadStatus = Literal["undertraining", "optimal", "caution", "danger"]
LoadTrend = Literal["increasing", "stable", "decreasing"]
TrendDirection = Literal["up", "down", "flat"]
InsightKind = Literal["info", "warning", "success"]


class ClimbWeeklyMetrics(BaseModel):
    """Climbing summary for one Monday-Sunday week and one modality."""

    week_label: str
    week_start: date
    max_sent_index: int = 0
    max_sent_label: str = "-"
    max_tried_index: int = 0
    max_tried_label: str = "-"
    avg_weighted_index: int = 0
    avg_weighted_label: str = "-"
    total_attempts: int = 0
    sent_count: int = 0
    tried_count: int = 0
    flash_count: int = 0
    total_duration_min: int = 0
    hard_attempts: int = 0


class RunningWeeklyMetrics(BaseModel):
    """Running summary for one Monday-Sunday week."""

    week_label: str
    week_start: date
    weekly_time_min: int = 0
    weekly_distance_km: float = 0.0
    weekly_elevation_gain_m: float = 0.0
    goal_progress_pct: float = 0.0
    weekly_load: int = 0
    distance_delta_pct: float = 0.0
    session_count: int = 0


class LoadMetrics(BaseModel):
    """Point-in-time acute:chronic workload ratio and its zone."""

    acute: float
    chronic: float
    acwr: float
    status: LoadStatus
    trend: LoadTrend


class AcwrTrendPoint(BaseModel):
    """One point of the ACWR history chart."""

    week_label: str
    anchor: date
    acwr: float
    acute: int
    chronic: int


class MonthlyClimbMetrics(BaseModel):
    month: str
    month_start: date
    boulder_max_sent: int = 0
    boulder_max_sent_label: str = "-"
    boulder_attempts: int = 0
    boulder_sends: int = 0
    boulder_flashes: int = 0
    route_max_sent: int = 0
    route_max_sent_label: str = "-"
    route_attempts: int = 0
    route_sends: int = 0
    climb_sessions: int = 0
    total_climb_time: int = 0


class MonthlyRunningMetrics(BaseModel):
    month: str
    month_start: date
    total_km: float = 0.0
    total_time: int = 0
    total_elevation: int = 0
    sessions: int = 0
    avg_pace: float = 0.0  # min/km


class ActivityShare(BaseModel):
    """Time spent on one session type over a trailing period."""

    session_type: str
    minutes: int
    hours: float
    percentage: int


class ActivityBreakdown(BaseModel):
    items: list[ActivityShare]
    total_minutes: int
    total_hours: float


class WeeklyActivityHours(BaseModel):
    """Hours per session type for one week (stacked bar chart row)."""

    week_label: str
    week_start: date
    hours_by_type: dict[str, float]
    total: float


class Insight(BaseModel):
    kind: InsightKind
    text: str

"""Metrics module - training log analytics.

This module provides:
- Grade normalization (boulder color bands, French route grades)
- Weekly climbing and running aggregation
- Training load (TRIMP, ACWR) with risk zones and history
- Monthly comparison and activity time breakdown
"""

from trainlog.metrics.activity_breakdown import calculate_activity_breakdown, calculate_weekly_activity_hours
from trainlog.metrics.grades import (
    BoulderGrade,
    RouteGrade,
    boulder_display_label,
    color_to_index,
    french_to_index,
    grade_label,
    grade_to_index,
    index_to_color,
    index_to_french,
)
from trainlog.metrics.monthly_comparison import calculate_monthly_climb_metrics, calculate_monthly_running_metrics
from trainlog.metrics.training_load import (
    calculate_acwr_history,
    calculate_load_metrics,
    calculate_trimp,
    get_load_status,
    get_load_trend,
)
from trainlog.metrics.weekly_aggregation import (
    calculate_climb_metrics,
    calculate_running_metrics,
    current_week_climb_metrics,
    current_week_running_metrics,
    get_weekly_sessions,
)

__all__ = [
    "BoulderGrade",
    "RouteGrade",
    "boulder_display_label",
    "calculate_activity_breakdown",
    "calculate_acwr_history",
    "calculate_climb_metrics",
    "calculate_load_metrics",
    "calculate_monthly_climb_metrics",
    "calculate_monthly_running_metrics",
    "calculate_running_metrics",
    "calculate_trimp",
    "calculate_weekly_activity_hours",
    "color_to_index",
    "current_week_climb_metrics",
    "current_week_running_metrics",
    "french_to_index",
    "get_load_status",
    "get_load_trend",
    "get_weekly_sessions",
    "grade_label",
    "grade_to_index",
    "index_to_color",
    "index_to_french",
]

"""Analytics constants - single source of truth.

Every heuristic threshold used by the aggregation and training load
engines is defined here. Values are kept identical to the ones users'
historical charts were computed with.
"""

# Session types that count as climbing sessions
CLIMB_SESSION_TYPES = frozenset({"boulder", "rope", "hybrid"})
RUNNING_SESSION_TYPE = "running"

# Climb modalities. Autobelay and rope are both stored as "route" climbs,
# so they select the same rows.
BOULDER_MODALITY = "boulder"
ROUTE_MODALITIES = frozenset({"autobelay", "rope"})

# TRIMP = duration_min * rpe + distance_km * multiplier
TRIMP_DEFAULT_DURATION_MIN = 60
TRIMP_DEFAULT_RPE = 5
TRIMP_DISTANCE_MULTIPLIER = 10

# Weekly running load = duration_min * rpe
RUNNING_DEFAULT_RPE = 5

# ACWR windows
ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_COUNT = 4
ACWR_HISTORY_WEEKS = 8

# ACWR zone boundaries
ACWR_UNDERTRAINING_BELOW = 0.8
ACWR_OPTIMAL_MAX = 1.3
ACWR_CAUTION_MAX = 1.5

# Acute load trend (percent change vs previous 7-day window)
LOAD_TREND_THRESHOLD_PCT = 10.0

# A climb is a "hard attempt" at avg_weighted_index + offset or above
HARD_ATTEMPT_INDEX_OFFSET = 1

# Insight thresholds
SUDDEN_INCREASE_PCT = 25.0
DELOAD_DECREASE_PCT = -20.0
HIGH_RUNNING_LOAD = 500
LOW_GOAL_PROGRESS_PCT = 50.0
HARD_ATTEMPT_SHARE = 0.5
HIGH_SEND_SHARE = 0.8

# Monthly comparison window
MONTHLY_COMPARISON_MONTHS = 6

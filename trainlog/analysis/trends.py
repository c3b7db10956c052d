"""Trend computation.

Simple direction indicators for period-over-period comparisons.
"""

from trainlog.schemas.metrics import TrendDirection


def compare_values(current: float, previous: float) -> TrendDirection:
    """Direction of change from previous to current.

    Args:
        current: Value for the latest period
        previous: Value for the period before

    Returns:
        "up", "down", or "flat"
    """
    if current > previous:
        return "up"
    if current < previous:
        return "down"
    return "flat"


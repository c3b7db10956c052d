"""Rounding helpers.

Chart values are rounded half away from zero (4.5 -> 5), not with Python's
round-half-to-even, so weekly averages match the values users already saw.
"""

import math


def round_half_up(value: float, decimals: int = 0) -> int | float:
    """Round to the nearest integer, or to `decimals` places, halves away from zero.

    Returns an int when decimals is 0, a float otherwise.
    """
    if decimals:
        scale = 10**decimals
        return round_half_up(value * scale) / scale
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)

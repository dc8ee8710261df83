"""Period clamping for short series"""

import math

# Guards floor() against ratios like 1/3 landing just under an integer
_EPSILON = 1e-9


def clamp_period(period: int, length: int, ratio: float) -> int:
    """
    Clamp an indicator period to the available data

    clamped = max(1, min(period, floor(length * ratio)))

    Args:
        period: Configured period
        length: Number of data points available
        ratio: Largest fraction of the data a single window may span

    Returns:
        Effective period, never below 1
    """
    return max(1, min(period, math.floor(length * ratio + _EPSILON)))

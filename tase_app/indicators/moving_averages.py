"""SMA and EMA calculations"""

import math
from typing import Sequence


def sma(values: Sequence[float], period: int) -> list[float]:
    """
    Simple Moving Average over each trailing window

    Args:
        values: Input series in chronological order
        period: Window size

    Returns:
        One mean per full window (len(values) - period + 1 values),
        empty if there are fewer values than the period
    """
    if period <= 0 or len(values) < period:
        return []

    return [math.fsum(values[i - period + 1:i + 1]) / period for i in range(period - 1, len(values))]


def ema(values: Sequence[float], period: int) -> list[float]:
    """
    Exponential Moving Average seeded with the SMA of the first window

    EMA[t] = value[t] * k + EMA[t-1] * (1 - k), k = 2 / (period + 1)

    Args:
        values: Input series in chronological order
        period: Smoothing period

    Returns:
        One value per input from the seed bar onward
        (len(values) - period + 1 values), empty if insufficient data
    """
    if period <= 0 or len(values) < period:
        return []

    k = 2.0 / (period + 1)
    result = [math.fsum(values[:period]) / period]

    for value in values[period:]:
        result.append(value * k + result[-1] * (1 - k))

    return result

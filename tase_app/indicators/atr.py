"""ATR (Average True Range) calculations"""

import math
from typing import Optional, Sequence

from .moving_averages import sma


def calculate_true_range(high: float, low: float, prev_close: Optional[float] = None) -> float:
    """
    Calculate True Range for a single bar

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Args:
        high: Bar high
        low: Bar low
        prev_close: Previous bar close (None for first bar)

    Returns:
        True Range value
    """
    if prev_close is None:
        # First bar case - use high-low range
        return high - low

    return max(high - low, abs(high - prev_close), abs(low - prev_close))


def true_ranges(highs: Sequence[float], lows: Sequence[float], closes: Sequence[float]) -> list[float]:
    """True Range for every bar of a series."""
    result = []
    for i in range(len(closes)):
        prev_close = closes[i - 1] if i > 0 else None
        result.append(calculate_true_range(highs[i], lows[i], prev_close))
    return result


def atr(highs: Sequence[float], lows: Sequence[float], closes: Sequence[float],
        period: int = 14) -> list[float]:
    """
    Average True Range as the SMA of True Range

    Args:
        highs: Bar highs
        lows: Bar lows
        closes: Bar closes
        period: ATR period (default 14)

    Returns:
        ATR series, empty if insufficient data
    """
    return sma(true_ranges(highs, lows, closes), period)


def apply_atr_floor(value: Optional[float], close: float, floor_pct: float = 0.001,
                    precision: Optional[int] = None) -> float:
    """
    Replace an unusable ATR with a floor proportional to price

    An ATR that is missing, non-finite, not positive, or that rounds to zero
    at the output precision becomes floor_pct * close. When that floor also
    rounds to zero, the smallest step at the output precision is used.

    Args:
        value: Raw ATR value
        close: Current close price
        floor_pct: Floor as a fraction of close (default 0.1%)
        precision: Output decimal places used for the rounds-to-zero check

    Returns:
        Usable ATR value
    """
    if value is not None and math.isfinite(value) and value > 0:
        if precision is None or round(value, precision) != 0:
            return value

    floor = abs(close * floor_pct)
    if precision is not None and round(floor, precision) == 0:
        return 10.0 ** -precision
    return floor

"""Pivot-based significant level detection"""

from typing import Optional, Sequence

from ..config.defaults import LevelParams
from ..indicators.periods import clamp_period


def window_radius(length: int, params: Optional[LevelParams] = None) -> int:
    """
    Pivot window radius scaled to the series length

    Args:
        length: Number of bars in the series
        params: Level parameters (default radius 20, ratio 1/4)

    Returns:
        Radius w such that a pivot needs w bars on each side
    """
    params = params or LevelParams()
    return clamp_period(params.window_radius, length, params.window_ratio)


def find_significant_levels(highs: Sequence[float], lows: Sequence[float], window: int) -> list[float]:
    """
    Find pivot highs and lows over a symmetric window

    A bar at index i (with `window` bars on each side) is a pivot high when its
    high equals the maximum high of [i - window, i + window], and a pivot low
    when its low equals the minimum low of the same window.

    Args:
        highs: Bar highs
        lows: Bar lows
        window: Window radius

    Returns:
        Deduplicated pivot prices sorted ascending; empty when
        len(highs) <= 2 * window
    """
    levels = set()

    for i in range(window, len(highs) - window):
        if highs[i] == max(highs[i - window:i + window + 1]):
            levels.add(highs[i])

        if lows[i] == min(lows[i - window:i + window + 1]):
            levels.add(lows[i])

    return sorted(levels)

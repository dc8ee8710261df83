"""Breakout detection with retest and confirmation gates"""

import bisect
from typing import Optional, Sequence

from ..config.defaults import BreakoutParams
from ..data.models import PriceArrays
from ..indicators.periods import clamp_period
from ..models.breakout import (
    BreakoutAnalysis,
    BreakoutDirection,
    BreakoutEvent,
    LevelContext,
)


def nearest_levels(reference: float, levels: Sequence[float], band_pct: float = 0.02) -> LevelContext:
    """
    Pick the nearest support and resistance around a reference price

    Levels strictly above the reference are resistance and strictly below are
    support. A side with no level falls back to reference * (1 +/- band_pct).

    Args:
        reference: Price to partition levels around
        levels: Significant levels sorted ascending
        band_pct: Synthetic band distance as a fraction of the reference

    Returns:
        LevelContext with the nearest level on each side
    """
    below = bisect.bisect_left(levels, reference)
    above = bisect.bisect_right(levels, reference)

    synthetic_support = below == 0
    synthetic_resistance = above == len(levels)

    support = reference * (1 - band_pct) if synthetic_support else levels[below - 1]
    resistance = reference * (1 + band_pct) if synthetic_resistance else levels[above]

    return LevelContext(
        reference=reference,
        support=support,
        resistance=resistance,
        synthetic_support=synthetic_support,
        synthetic_resistance=synthetic_resistance,
    )


def detect_direction(close: float, context: LevelContext) -> Optional[BreakoutDirection]:
    """UP above the nearest resistance, DOWN below the nearest support, else None."""
    if close > context.resistance:
        return BreakoutDirection.UP
    if close < context.support:
        return BreakoutDirection.DOWN
    return None


def has_retest(closes: Sequence[float], level: float, window: int, tolerance_pct: float = 0.005) -> bool:
    """
    Check whether a recent close returned to the broken level

    Args:
        closes: Close prices
        level: Breakout level
        window: Number of most recent closes to inspect
        tolerance_pct: Band half-width as a fraction of the level

    Returns:
        True if any of the last `window` closes lies within the band
    """
    lower = level * (1 - tolerance_pct)
    upper = level * (1 + tolerance_pct)
    return any(lower <= close <= upper for close in closes[-window:])


def is_large_range(highs: Sequence[float], lows: Sequence[float], lookback: int,
                   multiplier: float = 1.5) -> bool:
    """
    Check whether the current bar's range is large against recent bars

    The average covers the last `lookback` bars including the current one.
    """
    ranges = [h - l for h, l in zip(highs[-lookback:], lows[-lookback:])]
    if not ranges:
        return False

    avg_range = sum(ranges) / len(ranges)
    return ranges[-1] > avg_range * multiplier


def is_high_volume(volumes: Sequence[float], lookback: int, multiplier: float = 1.5) -> bool:
    """
    Check whether the current bar's volume is high against recent bars

    Returns False when the series carries no volume (zero average).
    """
    recent = list(volumes[-lookback:])
    if not recent:
        return False

    avg_volume = sum(recent) / len(recent)
    if avg_volume <= 0:
        return False

    return recent[-1] > avg_volume * multiplier


class BreakoutClassifier:
    """
    Classifies the current bar against the significant level set

    A breakout is confirmed only when price retested the broken level AND the
    current bar shows a large range or high volume. The retest is a hard gate.
    """

    def __init__(self, params: Optional[BreakoutParams] = None):
        self.params = params or BreakoutParams()

    def reference_price(self, closes: Sequence[float]) -> float:
        """Price the level set is partitioned around."""
        if self.params.partition_on_prior_close and len(closes) >= 2:
            return closes[-2]
        return closes[-1]

    def classify(self, arrays: PriceArrays, levels: Sequence[float]) -> BreakoutAnalysis:
        """
        Classify the latest bar of a series

        Args:
            arrays: Field arrays of the validated series
            levels: Significant levels sorted ascending

        Returns:
            BreakoutAnalysis with the level context and optional breakout event
        """
        p = self.params
        length = len(arrays)
        close = arrays.last_close

        context = nearest_levels(self.reference_price(arrays.closes), levels, p.synthetic_band_pct)
        direction = detect_direction(close, context)

        if direction is None:
            return BreakoutAnalysis(levels=context)

        level = context.resistance if direction is BreakoutDirection.UP else context.support

        retest_window = clamp_period(p.retest_window, length, p.retest_ratio)
        retested = has_retest(arrays.closes, level, retest_window, p.retest_tolerance_pct)

        range_lookback = clamp_period(p.confirmation_lookback, length, p.confirmation_ratio)
        large_range = is_large_range(arrays.highs, arrays.lows, range_lookback, p.range_multiplier)

        volume_lookback = clamp_period(p.volume_lookback, length, 1.0)
        high_volume = is_high_volume(arrays.volumes, volume_lookback, p.volume_multiplier)

        event = BreakoutEvent(
            level=level,
            direction=direction,
            retested=retested,
            confirmed=retested and (large_range or high_volume),
            large_range=large_range,
            high_volume=high_volume,
        )
        return BreakoutAnalysis(levels=context, event=event)

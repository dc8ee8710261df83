"""Trend classification from moving-average ordering"""

import math

from ..models.result import Trend

# Averages of a constant series can land one float step away from the price
REL_TOL = 1e-12


def _above(upper: float, lower: float) -> bool:
    return upper > lower and not math.isclose(upper, lower, rel_tol=REL_TOL)


def classify_trend(close: float, sma_fast: float, sma_slow: float) -> Trend:
    """
    Classify trend from the ordering of price and two moving averages

    Uptrend iff close > fast > slow; Downtrend iff close < fast < slow;
    Sideways otherwise. Values equal within a relative tolerance of 1e-12
    count as equal.
    """
    if _above(close, sma_fast) and _above(sma_fast, sma_slow):
        return Trend.UPTREND
    if _above(sma_fast, close) and _above(sma_slow, sma_fast):
        return Trend.DOWNTREND
    return Trend.SIDEWAYS

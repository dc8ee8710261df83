"""Indicator library: pure functions over price arrays"""

from .atr import apply_atr_floor, atr, calculate_true_range, true_ranges
from .calculator import IndicatorCalculator
from .moving_averages import ema, sma
from .oscillators import MACDResult, macd, rsi
from .periods import clamp_period

__all__ = [
    "IndicatorCalculator",
    "sma",
    "ema",
    "rsi",
    "macd",
    "MACDResult",
    "atr",
    "true_ranges",
    "calculate_true_range",
    "apply_atr_floor",
    "clamp_period",
]

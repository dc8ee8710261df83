"""Trend classification and signal composition"""

from .composer import SignalComposer, TradePlan
from .trend import classify_trend

__all__ = ["SignalComposer", "TradePlan", "classify_trend"]

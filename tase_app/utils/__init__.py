"""
Utility functions module.

Timeframe label parsing and classification shared by validation, configuration
and multi-timeframe evaluation.
"""

from .timeframes import TimeframeClass, classify_timeframe, timeframe_minutes

__all__ = ["TimeframeClass", "classify_timeframe", "timeframe_minutes"]

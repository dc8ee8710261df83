"""Support/resistance levels and breakout classification"""

from .classifier import (
    BreakoutClassifier,
    detect_direction,
    has_retest,
    is_high_volume,
    is_large_range,
    nearest_levels,
)
from .levels import find_significant_levels, window_radius

__all__ = [
    "BreakoutClassifier",
    "detect_direction",
    "has_retest",
    "is_high_volume",
    "is_large_range",
    "nearest_levels",
    "find_significant_levels",
    "window_radius",
]

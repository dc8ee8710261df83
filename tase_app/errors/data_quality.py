"""
Data quality error classifications for bar series input.

These exceptions describe why a candidate bar series cannot be analysed.
"""

from typing import Any, Dict, Optional


class DataQualityError(Exception):
    """Base class for input issues that are reported, not propagated."""

    def __init__(self, message: str, timeframe: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.timeframe = timeframe
        self.context = context or {}
        self.recoverable = True


class InvalidInputError(DataQualityError):
    """Series is absent, not a sequence, or holds a malformed bar."""

    def __init__(self, message: str, bar_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.bar_index = bar_index


class InsufficientDataError(DataQualityError):
    """Series is shorter than the timeframe's minimum bar count."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count

"""
System failure classifications for the computation pipeline.
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for failures that are not caused by the caller's input."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ComputationError(SystemFailureError):
    """Unexpected arithmetic failure while computing an indicator or signal."""

    def __init__(self, message: str, indicator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator

"""
Error classification for the signal engine.

Input problems are data quality errors and can always be turned into a
structured analysis result. Arithmetic failures inside the pipeline are
system failures, recovered the same way at the engine boundary.
"""

from .data_quality import (
    DataQualityError,
    InvalidInputError,
    InsufficientDataError,
)
from .system_failures import (
    SystemFailureError,
    ComputationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidInputError",
    "InsufficientDataError",
    # System Failures
    "SystemFailureError",
    "ComputationError",
]

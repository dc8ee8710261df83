"""
Logging configuration and diagnostics observers for the signal engine.
"""
from .config import configure_logging, get_logger, get_signal_logger
from .observer import AnalysisObserver, LoggingObserver, NullObserver

__all__ = [
    "configure_logging",
    "get_logger",
    "get_signal_logger",
    "AnalysisObserver",
    "LoggingObserver",
    "NullObserver",
]

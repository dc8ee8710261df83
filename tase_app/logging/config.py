"""
Logging configuration for the signal engine.

Everything in tase_app logs through structlog on top of stdlib logging. Call
configure_logging once at process start; until then structlog's defaults apply.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    stream: Optional[IO[str]] = None
) -> None:
    """
    Configure structlog and the root stdlib logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Render JSON lines instead of the console format
        include_timestamp: Add an ISO timestamp to every event
        include_caller: Add the calling file name and line number
        stream: Output stream for the root handler (default: stdout)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stdout,
        format="%(message)s"
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    renderer = structlog.processors.JSONRenderer() if format_json else structlog.dev.ConsoleRenderer()
    processors.append(renderer)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_signal_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for signal engine diagnostics.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for analysis events
    """
    return get_logger(name).bind(subsystem="signal_engine")


def log_signal_decision(
    logger: FilteringBoundLogger,
    timeframe: Optional[str],
    signal: str,
    trend: str,
    basis: Optional[str],
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a signal decision with standardized format.

    Args:
        logger: Structlog logger instance
        timeframe: Timeframe the decision belongs to
        signal: Emitted signal value
        trend: Trend classification value
        basis: Rule that produced a directional signal, None for Hold
        context: Additional context data
    """
    bound_logger = logger.bind(
        timeframe=timeframe,
        signal=signal,
        trend=trend,
        basis=basis,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("signal_emitted")

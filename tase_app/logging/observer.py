"""
Diagnostics observers for the analysis pipeline.

The engine notifies an observer at each pipeline stage instead of logging from
inside the math. Observers only see immutable values and cannot change the
result.
"""
from typing import Optional

from ..models.breakout import BreakoutAnalysis
from ..models.indicators import IndicatorSnapshot
from ..models.result import AnalysisResult
from .config import get_signal_logger, log_signal_decision


class AnalysisObserver:
    """Receives pipeline events; every hook is a no-op by default."""

    def on_start(self, timeframe: Optional[str], bar_count: Optional[int]) -> None:
        pass

    def on_rejected(self, timeframe: Optional[str], error: Exception) -> None:
        pass

    def on_indicators(self, timeframe: Optional[str], snapshot: IndicatorSnapshot) -> None:
        pass

    def on_breakout(self, timeframe: Optional[str], levels: list[float],
                    breakout: BreakoutAnalysis) -> None:
        pass

    def on_signal(self, timeframe: Optional[str], result: AnalysisResult,
                  basis: Optional[str]) -> None:
        pass

    def on_failure(self, timeframe: Optional[str], error: Exception) -> None:
        pass


class NullObserver(AnalysisObserver):
    """Observer that ignores every event."""


class LoggingObserver(AnalysisObserver):
    """Writes pipeline events as structured log entries."""

    def __init__(self, name: str = "tase_app.engine"):
        self.logger = get_signal_logger(name)

    def on_start(self, timeframe: Optional[str], bar_count: Optional[int]) -> None:
        self.logger.debug("analysis_start", timeframe=timeframe, bar_count=bar_count)

    def on_rejected(self, timeframe: Optional[str], error: Exception) -> None:
        self.logger.warning(
            "analysis_rejected",
            timeframe=timeframe,
            error=str(error),
            error_type=type(error).__name__,
            required_count=getattr(error, "required_count", None),
            available_count=getattr(error, "available_count", None),
            bar_index=getattr(error, "bar_index", None),
        )

    def on_indicators(self, timeframe: Optional[str], snapshot: IndicatorSnapshot) -> None:
        self.logger.debug("indicators_computed", timeframe=timeframe, **snapshot.as_log_context())
        if snapshot.degraded:
            self.logger.info(
                "indicator_periods_clamped",
                timeframe=timeframe,
                periods=dict(snapshot.periods),
            )

    def on_breakout(self, timeframe: Optional[str], levels: list[float],
                    breakout: BreakoutAnalysis) -> None:
        event = breakout.event
        self.logger.debug(
            "breakout_evaluated",
            timeframe=timeframe,
            level_count=len(levels),
            support=breakout.levels.support,
            resistance=breakout.levels.resistance,
            synthetic_support=breakout.levels.synthetic_support,
            synthetic_resistance=breakout.levels.synthetic_resistance,
            breakout_level=event.level if event else None,
            breakout_direction=event.direction.value if event else None,
            retested=event.retested if event else False,
            confirmed=breakout.confirmed,
        )

    def on_signal(self, timeframe: Optional[str], result: AnalysisResult,
                  basis: Optional[str]) -> None:
        log_signal_decision(
            self.logger,
            timeframe=timeframe,
            signal=result.signal.value,
            trend=result.trend.value,
            basis=basis,
            context={
                "entry": result.entry,
                "stop_loss": result.stop_loss,
                "take_profit": result.take_profit,
                "rsi": result.rsi,
                "atr": result.atr,
            },
        )

    def on_failure(self, timeframe: Optional[str], error: Exception) -> None:
        self.logger.error(
            "analysis_failed",
            timeframe=timeframe,
            error=str(error),
            error_type=type(error).__name__,
        )

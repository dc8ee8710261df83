"""
Analysis result models.

AnalysisResult is the only externally visible artifact of the engine. It has
the same shape whether the analysis succeeded or failed; failures carry
sentinel trend and signal values, zeroed numbers and an error message.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Trend(str, Enum):
    """Trend classification, including failure sentinels."""
    UPTREND = "Uptrend"
    DOWNTREND = "Downtrend"
    SIDEWAYS = "Sideways"
    INSUFFICIENT_DATA = "Insufficient Data"
    ERROR = "Error"


class Signal(str, Enum):
    """Trade signal, including failure sentinels."""
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "Hold"
    NO_SIGNAL = "No Signal"
    ERROR = "Error"


@dataclass(frozen=True)
class AnalysisResult:
    """Trading recommendation for one bar series"""
    trend: Trend
    signal: Signal
    entry: float = 0.0
    stop_loss: float = 0.0
    take_profit: float = 0.0
    rsi: float = 0.0
    atr: float = 0.0
    breakout_level: Optional[float] = None
    breakout_direction: Optional[str] = None
    breakout_confirmed: bool = False
    error: Optional[str] = None
    timeframe: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def failure(cls, timeframe: Optional[str], message: str) -> "AnalysisResult":
        """Create an error-tagged result."""
        return cls(trend=Trend.ERROR, signal=Signal.ERROR, error=message, timeframe=timeframe)

    @classmethod
    def insufficient(cls, timeframe: Optional[str], message: str) -> "AnalysisResult":
        """Create a result for a series below the timeframe minimum."""
        return cls(
            trend=Trend.INSUFFICIENT_DATA,
            signal=Signal.NO_SIGNAL,
            error=message,
            timeframe=timeframe
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the JSON-ready record."""
        return {
            "trend": self.trend.value,
            "signal": self.signal.value,
            "entry": self.entry,
            "stop_loss": self.stop_loss,
            "take_profit": self.take_profit,
            "rsi": self.rsi,
            "atr": self.atr,
            "breakout_level": self.breakout_level,
            "breakout_direction": self.breakout_direction,
            "breakout_confirmed": self.breakout_confirmed,
            "error": self.error,
            "timeframe": self.timeframe,
        }


@dataclass(frozen=True)
class SymbolAnalysis:
    """Per-timeframe analyses of one instrument"""
    symbol: str
    analysis: dict[str, AnalysisResult] = field(default_factory=dict)
    timestamp: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "analysis": {tf: result.to_dict() for tf, result in self.analysis.items()},
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }

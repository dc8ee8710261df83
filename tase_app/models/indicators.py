"""Data models for indicator calculations"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class IndicatorSnapshot:
    """Latest indicator values for one bar series"""
    close: float
    sma_fast: float
    sma_slow: float
    rsi: float
    atr: float
    macd: Optional[float] = None
    macd_signal: Optional[float] = None
    macd_histogram: Optional[float] = None

    # Effective periods after clamping, keyed by indicator name
    periods: dict[str, int] = field(default_factory=dict)

    # True when any period was clamped below its configured value
    degraded: bool = False

    # True when the ATR floor replaced the computed value
    atr_floored: bool = False

    def as_log_context(self) -> dict:
        """Flatten the snapshot for structured logging"""
        return {
            "close": self.close,
            "sma_fast": self.sma_fast,
            "sma_slow": self.sma_slow,
            "rsi": self.rsi,
            "atr": self.atr,
            "macd": self.macd,
            "macd_signal": self.macd_signal,
            "macd_histogram": self.macd_histogram,
            "periods": dict(self.periods),
            "degraded": self.degraded,
            "atr_floored": self.atr_floored,
        }

"""
Canonical data models for price bars.

Bars are immutable once parsed. The engine reads them into plain float lists
per field and never modifies the caller's sequence.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence, Union

Timestamp = Union[datetime, int, float, str]


@dataclass(frozen=True)
class Bar:
    """Single OHLCV bar for one instrument and timeframe."""
    timestamp: Optional[Timestamp]   # Bar open time as delivered upstream
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0              # 0 when the provider has no volume

    @property
    def range(self) -> float:
        """High-low range of the bar."""
        return self.high - self.low


@dataclass(frozen=True)
class PriceArrays:
    """Per-field float lists extracted from a bar series, index-aligned."""
    opens: list[float]
    highs: list[float]
    lows: list[float]
    closes: list[float]
    volumes: list[float]

    @classmethod
    def from_bars(cls, bars: Sequence[Bar]) -> "PriceArrays":
        """Extract field arrays from validated bars."""
        return cls(
            opens=[bar.open for bar in bars],
            highs=[bar.high for bar in bars],
            lows=[bar.low for bar in bars],
            closes=[bar.close for bar in bars],
            volumes=[bar.volume for bar in bars],
        )

    def __len__(self) -> int:
        return len(self.closes)

    @property
    def last_close(self) -> float:
        return self.closes[-1]

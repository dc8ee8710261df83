"""RSI and MACD calculations"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .moving_averages import ema


def _rsi_value(avg_gain: float, avg_loss: float) -> float:
    if avg_loss == 0:
        return 100.0
    return 100.0 - 100.0 / (1.0 + avg_gain / avg_loss)


def rsi(closes: Sequence[float], period: int = 14) -> list[float]:
    """
    Wilder's Relative Strength Index

    Seed averages are plain means over the first `period` deltas; later
    averages use Wilder smoothing avg = (avg * (period - 1) + new) / period.

    Args:
        closes: Close prices in chronological order
        period: RSI period (default 14)

    Returns:
        RSI values from bar `period` onward, empty if insufficient data
    """
    if period <= 0 or len(closes) <= period:
        return []

    gains = []
    losses = []
    for i in range(1, len(closes)):
        delta = closes[i] - closes[i - 1]
        gains.append(delta if delta > 0 else 0.0)
        losses.append(-delta if delta < 0 else 0.0)

    avg_gain = sum(gains[:period]) / period
    avg_loss = sum(losses[:period]) / period
    result = [_rsi_value(avg_gain, avg_loss)]

    for i in range(period, len(gains)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        result.append(_rsi_value(avg_gain, avg_loss))

    return result


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram, each aligned to its own start"""
    macd_line: list[float]
    signal_line: list[float]
    histogram: list[float]

    @property
    def latest_macd(self) -> Optional[float]:
        return self.macd_line[-1] if self.macd_line else None

    @property
    def latest_signal(self) -> Optional[float]:
        return self.signal_line[-1] if self.signal_line else None

    @property
    def latest_histogram(self) -> Optional[float]:
        return self.histogram[-1] if self.histogram else None


def macd(closes: Sequence[float], fast: int = 12, slow: int = 26, signal: int = 9) -> MACDResult:
    """
    Moving Average Convergence Divergence

    The MACD line starts where the slow EMA starts; the fast EMA is offset by
    (slow - fast) to line up. The histogram starts where the signal line starts.

    Args:
        closes: Close prices in chronological order
        fast: Fast EMA period
        slow: Slow EMA period, must exceed `fast`
        signal: Signal line EMA period

    Returns:
        MACDResult; lists are empty when there is not enough data
    """
    if fast >= slow:
        raise ValueError(f"MACD fast period {fast} must be below slow period {slow}")

    fast_ema = ema(closes, fast)
    slow_ema = ema(closes, slow)
    if not slow_ema:
        return MACDResult(macd_line=[], signal_line=[], histogram=[])

    offset = slow - fast
    macd_line = [fast_ema[i + offset] - slow_value for i, slow_value in enumerate(slow_ema)]

    signal_line = ema(macd_line, signal)
    start = signal - 1
    histogram = [macd_line[i + start] - signal_value for i, signal_value in enumerate(signal_line)]

    return MACDResult(macd_line=macd_line, signal_line=signal_line, histogram=histogram)

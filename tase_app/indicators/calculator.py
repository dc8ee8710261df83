"""Indicator calculator coordinating all indicator calculations for a series"""

from typing import Any, Callable, Optional

from ..config.defaults import IndicatorParams
from ..data.models import PriceArrays
from ..errors import ComputationError
from ..models.indicators import IndicatorSnapshot
from .atr import apply_atr_floor, atr
from .moving_averages import sma
from .oscillators import macd, rsi
from .periods import clamp_period


class IndicatorCalculator:
    """
    Computes the latest value of every indicator the signal composer uses

    Periods are clamped to the series length so short series degrade rather
    than fail. Missing outputs fall back to neutral values: RSI 50, SMA equal
    to the current close, ATR from the series' high-low range.
    """

    def __init__(self, params: Optional[IndicatorParams] = None, price_decimals: Optional[int] = None):
        self.params = params or IndicatorParams()
        self.price_decimals = price_decimals

    def effective_periods(self, length: int) -> dict[str, int]:
        """Clamp every configured period to a series of `length` bars."""
        p = self.params

        macd_slow = max(2, clamp_period(p.macd_slow_period, length, p.macd_ratio))
        macd_fast = max(1, min(p.macd_fast_period, macd_slow - 1))
        macd_line_length = max(1, length - macd_slow + 1)

        return {
            "rsi": clamp_period(p.rsi_period, length, p.rsi_ratio),
            "atr": clamp_period(p.atr_period, length, p.atr_ratio),
            "sma_fast": clamp_period(p.sma_fast_period, length, p.sma_fast_ratio),
            "sma_slow": clamp_period(p.sma_slow_period, length, p.sma_slow_ratio),
            "macd_fast": macd_fast,
            "macd_slow": macd_slow,
            "macd_signal": clamp_period(p.macd_signal_period, macd_line_length, p.macd_ratio),
        }

    def calculate(self, arrays: PriceArrays) -> IndicatorSnapshot:
        """
        Calculate all indicators for a validated series

        Args:
            arrays: Field arrays extracted from the bar series

        Returns:
            IndicatorSnapshot with the latest value of each indicator

        Raises:
            ComputationError: If any indicator calculation fails
        """
        p = self.params
        length = len(arrays)
        close = arrays.last_close
        periods = self.effective_periods(length)

        rsi_series = self._compute("rsi", rsi, arrays.closes, periods["rsi"])
        rsi_value = rsi_series[-1] if rsi_series else p.neutral_rsi

        atr_series = self._compute("atr", atr, arrays.highs, arrays.lows, arrays.closes, periods["atr"])
        if atr_series:
            raw_atr = atr_series[-1]
        else:
            raw_atr = (max(arrays.highs) - min(arrays.lows)) * p.atr_range_fallback_pct
        atr_value = apply_atr_floor(raw_atr, close, p.atr_floor_pct, self.price_decimals)

        sma_fast_series = self._compute("sma_fast", sma, arrays.closes, periods["sma_fast"])
        sma_slow_series = self._compute("sma_slow", sma, arrays.closes, periods["sma_slow"])

        macd_result = self._compute(
            "macd", macd, arrays.closes,
            periods["macd_fast"], periods["macd_slow"], periods["macd_signal"]
        )

        configured = {
            "rsi": p.rsi_period,
            "atr": p.atr_period,
            "sma_fast": p.sma_fast_period,
            "sma_slow": p.sma_slow_period,
            "macd_fast": p.macd_fast_period,
            "macd_slow": p.macd_slow_period,
            "macd_signal": p.macd_signal_period,
        }
        degraded = any(periods[name] < configured[name] for name in configured)

        return IndicatorSnapshot(
            close=close,
            sma_fast=sma_fast_series[-1] if sma_fast_series else close,
            sma_slow=sma_slow_series[-1] if sma_slow_series else close,
            rsi=rsi_value,
            atr=atr_value,
            macd=macd_result.latest_macd,
            macd_signal=macd_result.latest_signal,
            macd_histogram=macd_result.latest_histogram,
            periods=periods,
            degraded=degraded,
            atr_floored=atr_value != raw_atr,
        )

    def _compute(self, name: str, func: Callable[..., Any], *args: Any) -> Any:
        """Run one indicator function, classifying arithmetic failures."""
        try:
            return func(*args)
        except (ArithmeticError, ValueError, TypeError) as e:
            raise ComputationError(
                f"{name} calculation failed: {e}",
                indicator=name
            ) from e

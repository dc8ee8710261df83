"""Tests for IndicatorCalculator and period clamping"""

import math
import pytest
from unittest.mock import patch

from tase_app.config.defaults import IndicatorParams
from tase_app.data.models import PriceArrays
from tase_app.errors import ComputationError
from tase_app.indicators.calculator import IndicatorCalculator
from tase_app.indicators.periods import clamp_period


class TestClampPeriod:
    """Test period clamping for short series"""

    def test_clamp_keeps_period_on_long_series(self):
        assert clamp_period(14, 100, 1 / 3) == 14

    def test_clamp_shrinks_on_short_series(self):
        assert clamp_period(14, 30, 1 / 3) == 10
        assert clamp_period(50, 60, 0.8) == 48

    def test_clamp_exact_thirds(self):
        """Test floor of n/3 is exact for multiples of three"""
        assert clamp_period(100, 45, 1 / 3) == 15

    def test_clamp_never_below_one(self):
        assert clamp_period(14, 1, 1 / 3) == 1
        assert clamp_period(14, 0, 0.5) == 1


class TestIndicatorCalculator:
    """Test IndicatorCalculator integration"""

    def test_effective_periods_default_series(self):
        """Test clamped periods for a 60-bar series"""
        periods = IndicatorCalculator().effective_periods(60)

        assert periods["rsi"] == 14
        assert periods["atr"] == 14
        assert periods["sma_fast"] == 20
        assert periods["sma_slow"] == 48
        assert periods["macd_slow"] == 26
        assert periods["macd_fast"] == 12
        assert periods["macd_signal"] == 9

    def test_effective_periods_short_series(self):
        """Test MACD fast stays below slow on tiny series"""
        periods = IndicatorCalculator().effective_periods(4)

        assert periods["macd_slow"] == 2
        assert periods["macd_fast"] == 1
        assert periods["macd_fast"] < periods["macd_slow"]

    def test_calculate_rising_series(self, rising_bars):
        """Test snapshot values for a monotonic rise"""
        snapshot = IndicatorCalculator().calculate(PriceArrays.from_bars(rising_bars))

        assert snapshot.close == 159.0
        assert snapshot.rsi == 100.0
        assert snapshot.atr == pytest.approx(2.0)
        assert snapshot.close > snapshot.sma_fast > snapshot.sma_slow
        assert snapshot.macd is not None and snapshot.macd > 0
        assert snapshot.degraded is True  # slow SMA clamped to 48
        assert snapshot.atr_floored is False

    def test_calculate_flat_series_floors_atr(self, flat_bars):
        """Test flat series ATR floors to 0.1% of close"""
        snapshot = IndicatorCalculator(price_decimals=5).calculate(PriceArrays.from_bars(flat_bars))

        assert snapshot.atr == pytest.approx(0.1)
        assert snapshot.atr_floored is True
        assert snapshot.sma_fast == snapshot.sma_slow == 100.0

    def test_all_values_finite(self, bar_factory):
        """Test every indicator output is finite"""
        closes = [100 + math.sin(i / 2) * 4 + i * 0.1 for i in range(80)]
        snapshot = IndicatorCalculator().calculate(PriceArrays.from_bars(bar_factory(closes)))

        for value in (snapshot.sma_fast, snapshot.sma_slow, snapshot.rsi, snapshot.atr,
                      snapshot.macd, snapshot.macd_signal, snapshot.macd_histogram):
            assert math.isfinite(value)
        assert 0.0 <= snapshot.rsi <= 100.0
        assert snapshot.atr > 0

    def test_neutral_fallbacks_without_output(self, bar_factory):
        """Test neutral RSI and close-valued SMA when no window fits"""
        params = IndicatorParams(rsi_period=14, rsi_ratio=1.0, sma_fast_period=20, sma_fast_ratio=1.0)
        arrays = PriceArrays.from_bars(bar_factory([10.0]))
        snapshot = IndicatorCalculator(params).calculate(arrays)

        assert snapshot.rsi == 50.0
        assert snapshot.sma_fast == 10.0

    def test_arithmetic_failure_raises_computation_error(self, rising_bars):
        """Test indicator failures are classified"""
        arrays = PriceArrays.from_bars(rising_bars)
        with patch("tase_app.indicators.calculator.rsi", side_effect=ZeroDivisionError("division by zero")):
            with pytest.raises(ComputationError) as exc_info:
                IndicatorCalculator().calculate(arrays)

        assert exc_info.value.indicator == "rsi"

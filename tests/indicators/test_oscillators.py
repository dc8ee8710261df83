"""Tests for RSI and MACD calculations"""

import math
import pytest
from tase_app.indicators.moving_averages import ema
from tase_app.indicators.oscillators import MACDResult, macd, rsi


class TestRSI:
    """Test Wilder RSI"""

    def test_rsi_monotonic_rise(self):
        """Test RSI is 100 when every delta is a gain"""
        closes = [100.0 + i for i in range(30)]
        assert all(value == 100.0 for value in rsi(closes, 14))

    def test_rsi_monotonic_fall(self):
        """Test RSI is 0 when every delta is a loss"""
        closes = [100.0 - i for i in range(30)]
        assert all(value == 0.0 for value in rsi(closes, 14))

    def test_rsi_flat_series_uses_zero_loss_branch(self):
        """Test RSI is 100 when average loss is exactly zero"""
        assert rsi([50.0] * 20, 14) == [100.0] * 6

    def test_rsi_output_length(self):
        """Test RSI starts after the first `period` deltas"""
        closes = [float(i % 7) + 10 for i in range(40)]
        assert len(rsi(closes, 14)) == 40 - 14

    def test_rsi_insufficient_data(self):
        """Test RSI needs more closes than the period"""
        assert rsi([1.0] * 14, 14) == []

    def test_rsi_seed_value(self):
        """Test RSI seed uses plain means of gains and losses"""
        closes = [10.0, 11.0, 10.5, 11.5]  # gains 1, 0, 1; losses 0, 0.5, 0
        avg_gain = 2.0 / 3
        avg_loss = 0.5 / 3
        expected = 100 - 100 / (1 + avg_gain / avg_loss)
        assert rsi(closes, 3) == [pytest.approx(expected)]

    def test_rsi_wilder_smoothing(self):
        """Test RSI after the seed uses Wilder smoothing"""
        closes = [10.0, 11.0, 10.5, 11.5, 11.0]
        avg_gain = (2.0 / 3 * 2 + 0.0) / 3
        avg_loss = (0.5 / 3 * 2 + 0.5) / 3
        expected = 100 - 100 / (1 + avg_gain / avg_loss)
        assert rsi(closes, 3)[-1] == pytest.approx(expected)

    def test_rsi_bounded(self):
        """Test RSI stays within [0, 100]"""
        closes = [100 + math.sin(i) * 10 + i * 0.3 for i in range(80)]
        values = rsi(closes, 14)
        assert values
        assert all(0.0 <= value <= 100.0 for value in values)


class TestMACD:
    """Test MACD line, signal and histogram"""

    def closes(self, count=60):
        return [100 + math.sin(i / 4) * 3 + i * 0.2 for i in range(count)]

    def test_macd_alignment(self):
        """Test MACD line starts at the slow EMA's start"""
        closes = self.closes()
        result = macd(closes, 12, 26, 9)

        fast = ema(closes, 12)
        slow = ema(closes, 26)
        assert len(result.macd_line) == len(slow)
        assert result.macd_line[0] == pytest.approx(fast[14] - slow[0])
        assert result.macd_line[-1] == pytest.approx(fast[-1] - slow[-1])

    def test_macd_signal_and_histogram(self):
        """Test signal is EMA of MACD and histogram aligns at the signal start"""
        result = macd(self.closes(), 12, 26, 9)

        assert result.signal_line == ema(result.macd_line, 9)
        assert len(result.histogram) == len(result.signal_line)
        assert result.histogram[0] == pytest.approx(result.macd_line[8] - result.signal_line[0])
        assert result.latest_histogram == pytest.approx(result.latest_macd - result.latest_signal)

    def test_macd_insufficient_data(self):
        """Test MACD with fewer closes than the slow period"""
        result = macd([1.0] * 10, 12, 26, 9)
        assert result == MACDResult(macd_line=[], signal_line=[], histogram=[])
        assert result.latest_macd is None

    def test_macd_rejects_inverted_periods(self):
        """Test MACD requires fast below slow"""
        with pytest.raises(ValueError):
            macd(self.closes(), 26, 12, 9)

    def test_macd_constant_series(self):
        """Test MACD of a constant series is zero"""
        result = macd([42.0] * 50, 12, 26, 9)
        assert all(value == pytest.approx(0.0) for value in result.macd_line)
        assert all(value == pytest.approx(0.0) for value in result.histogram)

"""Tests for trend classification"""

import pytest

from tase_app.models.result import Trend
from tase_app.signals.trend import classify_trend


@pytest.mark.parametrize("close,fast,slow,expected", [
    (110.0, 105.0, 100.0, Trend.UPTREND),
    (90.0, 95.0, 100.0, Trend.DOWNTREND),
    (100.0, 100.0, 100.0, Trend.SIDEWAYS),
    (110.0, 100.0, 105.0, Trend.SIDEWAYS),
    (104.0, 105.0, 100.0, Trend.SIDEWAYS),
    (105.0, 105.0, 100.0, Trend.SIDEWAYS),
])
def test_classify_trend(close, fast, slow, expected):
    assert classify_trend(close, fast, slow) is expected


@pytest.mark.parametrize("close,fast,slow", [
    (1.0845, 1.0845000000000002, 1.0845),
    (2345.67, 2345.6699999999996, 2345.67),
    (0.001, 0.0009999999999999998, 0.001),
])
def test_float_noise_is_sideways(close, fast, slow):
    assert classify_trend(close, fast, slow) is Trend.SIDEWAYS

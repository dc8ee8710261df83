"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from tase_app.data.models import Bar

BASE_TS = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_bars(
    closes: Sequence[float],
    spread: float = 1.0,
    volumes: Optional[Sequence[float]] = None,
    step: timedelta = timedelta(days=1),
) -> List[Bar]:
    """Build bars around a close series: open half a spread below, high/low one spread out."""
    bars = []
    for i, close in enumerate(closes):
        bars.append(Bar(
            timestamp=BASE_TS + step * i,
            open=close - spread / 2,
            high=close + spread,
            low=close - spread,
            close=close,
            volume=volumes[i] if volumes is not None else 0.0,
        ))
    return bars


@pytest.fixture
def bar_factory() -> Callable[..., List[Bar]]:
    """Factory building bar series from close prices."""
    return make_bars


@pytest.fixture
def rising_bars() -> List[Bar]:
    """60 daily bars with strictly increasing closes and no volume."""
    return make_bars([100.0 + i for i in range(60)])


@pytest.fixture
def falling_bars() -> List[Bar]:
    """60 daily bars with strictly decreasing closes and no volume."""
    return make_bars([200.0 - i for i in range(60)])


@pytest.fixture
def flat_bars() -> List[Bar]:
    """60 daily bars with open = high = low = close."""
    return make_bars([100.0] * 60, spread=0.0)


@pytest.fixture
def breakout_bars() -> List[Bar]:
    """
    60 daily bars ending in a confirmed upside breakout.

    A single pivot high at 160 (bar 30) is the only significant level. Bar 58
    closes at 159.5, retesting the level from below, and bar 59 closes at 162
    on a bar three times the usual range.
    """
    closes = [100.0 + i for i in range(58)] + [159.5, 162.0]
    bars = make_bars(closes)

    bars[30] = Bar(timestamp=bars[30].timestamp, open=129.5, high=160.0, low=129.0, close=130.0, volume=0.0)
    bars[59] = Bar(timestamp=bars[59].timestamp, open=159.5, high=164.0, low=158.0, close=162.0, volume=0.0)
    return bars


@pytest.fixture
def sample_bar_payload() -> Dict[str, Any]:
    """Sample raw bar as delivered by the market-data client."""
    return {
        "timestamp": "2024-01-01T12:00:00.000Z",
        "open": 100.0,
        "high": 105.0,
        "low": 99.0,
        "close": 103.0,
        "volume": 1000,
    }

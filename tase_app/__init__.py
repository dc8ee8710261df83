"""
TASE App - Technical Analysis Signal Engine

Turns a time-ordered OHLCV bar series for one instrument and timeframe into a
trend classification, a BUY/SELL/Hold signal and, for directional signals,
ATR-sized entry, stop-loss and take-profit levels.
"""

__version__ = "0.1.0"
__author__ = "TASE Team"

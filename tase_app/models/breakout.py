"""Data models for support/resistance levels and breakouts"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BreakoutDirection(str, Enum):
    """Side on which price left the level band."""
    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True)
class LevelContext:
    """Nearest support and resistance around a reference price"""
    reference: float
    support: float
    resistance: float
    synthetic_support: bool = False      # Support came from the fallback band
    synthetic_resistance: bool = False   # Resistance came from the fallback band


@dataclass(frozen=True)
class BreakoutEvent:
    """A level crossed by the current close, with its confirmation gates"""
    level: float
    direction: BreakoutDirection
    retested: bool
    confirmed: bool
    large_range: bool = False
    high_volume: bool = False


@dataclass(frozen=True)
class BreakoutAnalysis:
    """Level context and the breakout it produced, if any"""
    levels: LevelContext
    event: Optional[BreakoutEvent] = None

    @property
    def confirmed(self) -> bool:
        return self.event is not None and self.event.confirmed

"""
Market-data collaborator interface.

The engine does not fetch data itself. Any client that can return an ordered
bar sequence for a symbol, timeframe and time range can drive multi-timeframe
analysis.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Union

from .models import Bar


class MarketDataSource(ABC):
    """Base class for historical bar providers."""

    @abstractmethod
    def fetch_bars(
        self,
        symbol: str,
        timeframe: str,
        start: datetime,
        end: datetime
    ) -> Sequence[Union[Bar, Mapping]]:
        """
        Retrieve bars for a symbol and timeframe.

        Args:
            symbol: Instrument symbol in the provider's notation
            timeframe: Timeframe label such as ``H1`` or ``D1``
            start: Start of the requested window
            end: End of the requested window

        Returns:
            Bars in chronological order, as Bar instances or OHLCV mappings
        """

"""
Bar series validation.

A series is accepted only if it is a real sequence, long enough for its
timeframe, and every bar is structurally sound. The length check runs before
the per-bar checks so that short series are always reported as insufficient.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ..config.defaults import ValidationParams
from ..errors import InsufficientDataError, InvalidInputError
from ..utils.timeframes import TimeframeClass, classify_timeframe
from .models import Bar
from .parsers import parse_bar


def check_bar_structure(bar: Bar) -> Optional[str]:
    """
    Check the OHLC invariants of a single bar.

    Returns:
        Description of the first violated invariant, or None if the bar is sound
    """
    if bar.close <= 0:
        return f"close {bar.close} must be positive"

    if bar.high < bar.low:
        return f"high {bar.high} is below low {bar.low}"

    if bar.high < max(bar.open, bar.close):
        return f"high {bar.high} must be >= max(open {bar.open}, close {bar.close})"

    if bar.low > min(bar.open, bar.close):
        return f"low {bar.low} must be <= min(open {bar.open}, close {bar.close})"

    if bar.volume < 0:
        return f"volume {bar.volume} must not be negative"

    return None


class SeriesValidator:
    """Validates bar series against input and history requirements."""

    def __init__(self, params: Optional[ValidationParams] = None):
        self.params = params or ValidationParams()

    def min_bars(self, timeframe: str) -> int:
        """Minimum series length required for a timeframe label."""
        label = timeframe.upper() if isinstance(timeframe, str) else ""
        if label in self.params.min_bars_overrides:
            return self.params.min_bars_overrides[label]

        timeframe_class = classify_timeframe(timeframe)
        if timeframe_class is TimeframeClass.INTRADAY_FINE:
            return self.params.min_bars_intraday_fine
        if timeframe_class is TimeframeClass.INTRADAY_COARSE:
            return self.params.min_bars_intraday_coarse
        return self.params.min_bars_daily

    def validate(self, bars: Any, timeframe: str) -> tuple[Bar, ...]:
        """
        Validate a candidate bar series.

        Args:
            bars: Sequence of Bar instances or bar mappings
            timeframe: Timeframe label the series belongs to

        Returns:
            The series as a tuple of parsed bars, values unchanged

        Raises:
            InvalidInputError: If the series or any bar is malformed
            InsufficientDataError: If the series is shorter than the timeframe minimum
        """
        if bars is None:
            raise InvalidInputError(f"No candles data provided for {timeframe}", timeframe=timeframe)

        if isinstance(bars, (str, bytes, Mapping)) or not isinstance(bars, Sequence):
            raise InvalidInputError(
                f"Invalid candles data for {timeframe}: expected a sequence of bars, "
                f"got {type(bars).__name__}",
                timeframe=timeframe
            )

        required = self.min_bars(timeframe)
        if len(bars) < required:
            raise InsufficientDataError(
                f"Insufficient historical data for {timeframe} analysis "
                f"({len(bars)}/{required} candles)",
                required_count=required,
                available_count=len(bars),
                timeframe=timeframe
            )

        parsed = []
        for index, raw in enumerate(bars):
            try:
                bar = parse_bar(raw, index)
            except InvalidInputError as e:
                raise InvalidInputError(
                    f"Invalid candle data structure for {timeframe}: {e}",
                    bar_index=index,
                    timeframe=timeframe
                ) from e

            reason = check_bar_structure(bar)
            if reason is not None:
                raise InvalidInputError(
                    f"Invalid candle data structure for {timeframe}: bar {index} {reason}",
                    bar_index=index,
                    timeframe=timeframe
                )
            parsed.append(bar)

        if self.params.require_ordered_timestamps:
            self._validate_ordering(parsed, timeframe)

        return tuple(parsed)

    def _validate_ordering(self, bars: list[Bar], timeframe: str) -> None:
        """Validate that bar timestamps never decrease."""
        previous = None
        for index, bar in enumerate(bars):
            if bar.timestamp is None:
                continue
            if previous is not None:
                try:
                    out_of_order = bar.timestamp < previous
                except TypeError as e:
                    raise InvalidInputError(
                        f"Invalid candle data structure for {timeframe}: bar {index} "
                        f"timestamp type does not match earlier bars",
                        bar_index=index,
                        timeframe=timeframe
                    ) from e
                if out_of_order:
                    raise InvalidInputError(
                        f"Invalid candle data structure for {timeframe}: bar {index} "
                        f"timestamp {bar.timestamp} is earlier than {previous}",
                        bar_index=index,
                        timeframe=timeframe
                    )
            previous = bar.timestamp

"""
Signal composition.

Combines trend, RSI and breakout confirmation into one trade decision. A
confirmed breakout aligned with the trend takes priority; the RSI pullback
rules apply only when no confirmed breakout exists. Stops and targets are
sized from ATR, and rounding happens only when the result is built.
"""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import OutputParams, SignalParams
from ..models.breakout import BreakoutAnalysis, BreakoutDirection
from ..models.indicators import IndicatorSnapshot
from ..models.result import AnalysisResult, Signal, Trend


@dataclass(frozen=True)
class TradePlan:
    """Unrounded trade decision"""
    signal: Signal
    entry: float = 0.0
    stop_loss: float = 0.0
    take_profit: float = 0.0
    basis: Optional[str] = None   # 'breakout' or 'rsi' for directional signals

    @classmethod
    def hold(cls) -> "TradePlan":
        return cls(signal=Signal.HOLD)


class SignalComposer:
    """Turns trend, indicators and breakout state into an AnalysisResult"""

    def __init__(self, params: Optional[SignalParams] = None, output: Optional[OutputParams] = None):
        self.params = params or SignalParams()
        self.output = output or OutputParams()

    def compose(self, trend: Trend, snapshot: IndicatorSnapshot,
                breakout: BreakoutAnalysis) -> TradePlan:
        """
        Decide the trade signal

        Args:
            trend: Trend classification
            snapshot: Latest indicator values
            breakout: Breakout classification of the latest bar

        Returns:
            TradePlan with full-precision prices
        """
        p = self.params
        entry = snapshot.close
        atr = snapshot.atr
        event = breakout.event

        if event is not None and event.confirmed:
            if event.direction is BreakoutDirection.UP and trend is Trend.UPTREND:
                stop_loss = entry - atr * p.breakout_stop_atr_mult
                take_profit = entry + (entry - stop_loss) * p.breakout_reward_ratio
                return TradePlan(Signal.BUY, entry, stop_loss, take_profit, basis="breakout")

            if event.direction is BreakoutDirection.DOWN and trend is Trend.DOWNTREND:
                stop_loss = entry + atr * p.breakout_stop_atr_mult
                take_profit = entry - (stop_loss - entry) * p.breakout_reward_ratio
                return TradePlan(Signal.SELL, entry, stop_loss, take_profit, basis="breakout")

            # Confirmed against the trend: no fallback signal
            return TradePlan.hold()

        if trend is Trend.UPTREND and snapshot.rsi < p.oversold_rsi:
            return TradePlan(
                Signal.BUY,
                entry,
                entry - atr * p.fallback_stop_atr_mult,
                entry + atr * p.fallback_target_atr_mult,
                basis="rsi",
            )

        if trend is Trend.DOWNTREND and snapshot.rsi > p.overbought_rsi:
            return TradePlan(
                Signal.SELL,
                entry,
                entry + atr * p.fallback_stop_atr_mult,
                entry - atr * p.fallback_target_atr_mult,
                basis="rsi",
            )

        return TradePlan.hold()

    def build_result(self, timeframe: Optional[str], trend: Trend, plan: TradePlan,
                     snapshot: IndicatorSnapshot, breakout: BreakoutAnalysis) -> AnalysisResult:
        """Round the decision into the externally visible result."""
        digits = self.output.price_decimals
        event = breakout.event

        return AnalysisResult(
            trend=trend,
            signal=plan.signal,
            entry=round(plan.entry, digits),
            stop_loss=round(plan.stop_loss, digits),
            take_profit=round(plan.take_profit, digits),
            rsi=round(snapshot.rsi, self.output.rsi_decimals),
            atr=round(snapshot.atr, digits),
            breakout_level=round(event.level, digits) if event else None,
            breakout_direction=event.direction.value if event else None,
            breakout_confirmed=breakout.confirmed,
            timeframe=timeframe,
        )

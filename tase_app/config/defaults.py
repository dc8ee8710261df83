"""Default configuration parameters for the signal engine."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationParams:
    """Input acceptance policy."""
    # Minimum bars per timeframe class (must be non-decreasing)
    min_bars_intraday_fine: int = 30                 # below 1h
    min_bars_intraday_coarse: int = 40               # 1h up to 1d
    min_bars_daily: int = 50                         # 1d and above, unknown labels

    # Per-label overrides of the class minimum
    min_bars_overrides: dict[str, int] = field(default_factory=lambda: {"H4": 45})

    require_ordered_timestamps: bool = True


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator periods and the ratios used to clamp them on short series."""
    rsi_period: int = 14
    rsi_ratio: float = 1 / 3
    atr_period: int = 14
    atr_ratio: float = 1 / 3

    sma_fast_period: int = 20
    sma_fast_ratio: float = 0.5
    sma_slow_period: int = 50
    sma_slow_ratio: float = 0.8

    macd_fast_period: int = 12
    macd_slow_period: int = 26
    macd_signal_period: int = 9
    macd_ratio: float = 0.5

    # Fallbacks
    atr_floor_pct: float = 0.001                     # ATR floor as fraction of close
    atr_range_fallback_pct: float = 0.01             # ATR when no TR window fits
    neutral_rsi: float = 50.0


@dataclass(frozen=True)
class LevelParams:
    """Pivot window radius policy."""
    window_radius: int = 20
    window_ratio: float = 0.25


@dataclass(frozen=True)
class BreakoutParams:
    """Breakout detection and confirmation parameters."""
    synthetic_band_pct: float = 0.02                 # Fallback level distance from price
    partition_on_prior_close: bool = True            # Levels split around previous close

    # Retest gate
    retest_window: int = 5
    retest_ratio: float = 0.1
    retest_tolerance_pct: float = 0.005

    # Confirmation gate
    confirmation_lookback: int = 10
    confirmation_ratio: float = 0.2
    volume_lookback: int = 10
    range_multiplier: float = 1.5
    volume_multiplier: float = 1.5


@dataclass(frozen=True)
class SignalParams:
    """Signal thresholds and stop/target sizing."""
    breakout_stop_atr_mult: float = 1.5
    breakout_reward_ratio: float = 2.0               # Target distance per unit of risk

    fallback_stop_atr_mult: float = 2.0
    fallback_target_atr_mult: float = 3.0
    oversold_rsi: float = 40.0
    overbought_rsi: float = 60.0


@dataclass(frozen=True)
class OutputParams:
    """Rounding applied to the analysis result."""
    price_decimals: int = 5
    rsi_decimals: int = 2


@dataclass(frozen=True)
class BatchParams:
    """Multi-timeframe evaluation parameters."""
    lookback_days: dict[str, int] = field(
        default_factory=lambda: {"M15": 7, "H1": 30, "H4": 90, "D1": 365}
    )
    max_workers: int = 1


@dataclass(frozen=True)
class EngineConfig:
    """Complete engine configuration."""
    validation: ValidationParams
    indicators: IndicatorParams
    levels: LevelParams
    breakout: BreakoutParams
    signals: SignalParams
    output: OutputParams
    batch: BatchParams


SECTION_TYPES = {
    "validation": ValidationParams,
    "indicators": IndicatorParams,
    "levels": LevelParams,
    "breakout": BreakoutParams,
    "signals": SignalParams,
    "output": OutputParams,
    "batch": BatchParams,
}


def get_default_config() -> EngineConfig:
    """Get the default configuration instance."""
    return EngineConfig(
        validation=ValidationParams(),
        indicators=IndicatorParams(),
        levels=LevelParams(),
        breakout=BreakoutParams(),
        signals=SignalParams(),
        output=OutputParams(),
        batch=BatchParams(),
    )

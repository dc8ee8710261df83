"""
Main analysis engine coordinator.

Orchestrates the signal pipeline for one bar series:
Validation → Indicators → Levels → Breakout → Trend & Signal → AnalysisResult

Every call is independent and side-effect free apart from observer
notifications. Failures never propagate: they are converted into an
AnalysisResult of the same shape carrying an error message.
"""

from collections.abc import Iterable, Mapping, Sized
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import structlog
import yaml

from .breakout.classifier import BreakoutClassifier
from .breakout.levels import find_significant_levels, window_radius
from .config.defaults import EngineConfig
from .config.loader import ConfigLoader, config_from_dict
from .config.validation import ConfigValidator
from .data.models import Bar, PriceArrays
from .data.source import MarketDataSource
from .data.validators import SeriesValidator
from .errors import InsufficientDataError, InvalidInputError
from .indicators.calculator import IndicatorCalculator
from .logging.observer import AnalysisObserver, LoggingObserver
from .models.result import AnalysisResult, SymbolAnalysis
from .signals.composer import SignalComposer
from .signals.trend import classify_trend

logger = structlog.get_logger(__name__)

DEFAULT_TIMEFRAME = "UNKNOWN"


class SignalEngine:
    """
    Coordinator for technical analysis of bar series.

    Configuration is resolved per timeframe (defaults, then
    config/timeframes.yaml, then the engine's overrides) and cached.
    """

    def __init__(
        self,
        config_dir: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None,
        observer: Optional[AnalysisObserver] = None
    ) -> None:
        """Initialize the signal engine."""
        self.logger = logger
        self.config_loader = ConfigLoader.create(config_dir)
        self.observer = observer or LoggingObserver()
        self._config_cache: dict[str, EngineConfig] = {}

        override_errors = ConfigValidator.validate_config(overrides or {})
        if override_errors:
            self.logger.error(
                "Engine override validation failed, using defaults",
                errors=[f"{err.field}: {err.message} (got: {err.value})" for err in override_errors]
            )
            overrides = {}
        self.overrides = overrides or {}

    def config_for(self, timeframe: str) -> EngineConfig:
        """Resolve the effective configuration for a timeframe."""
        key = timeframe.upper() if isinstance(timeframe, str) else DEFAULT_TIMEFRAME
        cached = self._config_cache.get(key)
        if cached is not None:
            return cached

        try:
            merged = self.config_loader.merge_config(key, self.overrides)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(
                "Timeframe configuration unreadable, using defaults",
                timeframe=key,
                error=str(e),
                error_type=type(e).__name__
            )
            self._config_cache[key] = self.config_loader.defaults
            return self.config_loader.defaults

        errors = ConfigValidator.validate_config(merged)
        if errors:
            self.logger.error(
                "Timeframe configuration invalid, using defaults",
                timeframe=key,
                errors=[f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            )
            config = self.config_loader.defaults
        else:
            config = config_from_dict(merged)

        self._config_cache[key] = config
        return config

    def analyze(self, bars: Any, timeframe: str = DEFAULT_TIMEFRAME) -> AnalysisResult:
        """
        Analyze one bar series.

        Args:
            bars: Ordered sequence of Bar instances or bar mappings
            timeframe: Timeframe label of the series

        Returns:
            AnalysisResult; never raises
        """
        bar_count = len(bars) if isinstance(bars, Sized) else None
        self._notify("on_start", timeframe, bar_count)

        try:
            config = self.config_for(timeframe)
            series = SeriesValidator(config.validation).validate(bars, timeframe)
        except InsufficientDataError as e:
            self._notify("on_rejected", timeframe, e)
            return AnalysisResult.insufficient(timeframe, str(e))
        except InvalidInputError as e:
            self._notify("on_rejected", timeframe, e)
            return AnalysisResult.failure(timeframe, str(e))
        except Exception as e:
            self._notify("on_failure", timeframe, e)
            return AnalysisResult.failure(timeframe, f"{timeframe} analysis failed: {e}")

        try:
            return self._run_pipeline(series, timeframe, config)
        except Exception as e:
            # ComputationError and anything unforeseen end up here
            self._notify("on_failure", timeframe, e)
            return AnalysisResult.failure(timeframe, f"{timeframe} analysis failed: {e}")

    def _run_pipeline(self, series: tuple[Bar, ...], timeframe: str,
                      config: EngineConfig) -> AnalysisResult:
        """Run indicators, levels, breakout and signal stages on a valid series."""
        arrays = PriceArrays.from_bars(series)

        calculator = IndicatorCalculator(config.indicators, price_decimals=config.output.price_decimals)
        snapshot = calculator.calculate(arrays)
        self._notify("on_indicators", timeframe, snapshot)

        trend = classify_trend(snapshot.close, snapshot.sma_fast, snapshot.sma_slow)

        radius = window_radius(len(arrays), config.levels)
        levels = find_significant_levels(arrays.highs, arrays.lows, radius)
        breakout = BreakoutClassifier(config.breakout).classify(arrays, levels)
        self._notify("on_breakout", timeframe, levels, breakout)

        composer = SignalComposer(config.signals, config.output)
        plan = composer.compose(trend, snapshot, breakout)
        result = composer.build_result(timeframe, trend, plan, snapshot, breakout)
        self._notify("on_signal", timeframe, result, plan.basis)

        return result

    def analyze_many(
        self,
        series_by_timeframe: Mapping[str, Any],
        max_workers: Optional[int] = None
    ) -> dict[str, AnalysisResult]:
        """
        Analyze several timeframes of one instrument.

        Each timeframe is analysed independently; a failure in one never
        affects the others.

        Args:
            series_by_timeframe: Bar series keyed by timeframe label
            max_workers: Thread count; 1 runs sequentially

        Returns:
            AnalysisResult per timeframe, in input order
        """
        workers = max_workers or self.config_for(DEFAULT_TIMEFRAME).batch.max_workers

        if workers <= 1 or len(series_by_timeframe) <= 1:
            return {tf: self.analyze(bars, tf) for tf, bars in series_by_timeframe.items()}

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {
                tf: pool.submit(self.analyze, bars, tf)
                for tf, bars in series_by_timeframe.items()
            }
            return {tf: future.result() for tf, future in futures.items()}

    def analyze_symbol(
        self,
        source: MarketDataSource,
        symbol: str,
        timeframes: Optional[Iterable[str]] = None,
        now: Optional[datetime] = None
    ) -> SymbolAnalysis:
        """
        Fetch and analyze an instrument across timeframes.

        Timeframes are fetched one at a time over their configured lookback
        window. A fetch failure becomes an error result for that timeframe only.

        Args:
            source: Market-data collaborator
            symbol: Instrument symbol passed through to the source
            timeframes: Labels to analyse (default: configured lookback table)
            now: End of the fetch window (default: current UTC time)

        Returns:
            SymbolAnalysis with one result per timeframe
        """
        lookback_days = self.config_for(DEFAULT_TIMEFRAME).batch.lookback_days
        labels = list(timeframes) if timeframes is not None else list(lookback_days)
        end = now or datetime.now(timezone.utc)
        fallback_days = max(lookback_days.values(), default=365)

        self.logger.info("Starting symbol analysis", symbol=symbol, timeframes=labels)

        results: dict[str, AnalysisResult] = {}
        for tf in labels:
            days = lookback_days.get(tf.upper(), fallback_days)
            start = end - timedelta(days=days)

            try:
                bars = source.fetch_bars(symbol, tf, start, end)
            except Exception as e:
                self.logger.error(
                    "Bar retrieval failed",
                    symbol=symbol,
                    timeframe=tf,
                    error=str(e),
                    error_type=type(e).__name__
                )
                results[tf] = AnalysisResult.failure(tf, f"Failed to process {tf}: {e}")
                continue

            results[tf] = self.analyze(bars, tf)

        self.logger.info(
            "Symbol analysis completed",
            symbol=symbol,
            signals={tf: result.signal.value for tf, result in results.items()}
        )

        return SymbolAnalysis(symbol=symbol, analysis=results, timestamp=end)

    def _notify(self, hook: str, *args: Any) -> None:
        """Forward an event to the observer; observer errors never reach callers."""
        try:
            getattr(self.observer, hook)(*args)
        except Exception as e:
            self.logger.warning(
                "Analysis observer failed",
                hook=hook,
                error=str(e),
                error_type=type(e).__name__
            )


_default_engine: Optional[SignalEngine] = None


def analyze_strategy(bars: Any, timeframe: str = DEFAULT_TIMEFRAME) -> AnalysisResult:
    """Analyze a bar series with a shared default-configured engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = SignalEngine()
    return _default_engine.analyze(bars, timeframe)

"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any, Callable

from .defaults import SECTION_TYPES, ValidationParams


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _positive_number(value: Any) -> bool:
    return _is_number(value) and value > 0


def _fraction(value: Any) -> bool:
    return _is_number(value) and 0 < value <= 1


def _rsi_level(value: Any) -> bool:
    return _is_number(value) and 0 <= value <= 100


# field -> (check, message)
_RULES: dict[str, tuple[Callable[[Any], bool], str]] = {
    "min_bars_intraday_fine": (_positive_int, "Must be a positive integer"),
    "min_bars_intraday_coarse": (_positive_int, "Must be a positive integer"),
    "min_bars_daily": (_positive_int, "Must be a positive integer"),
    "rsi_period": (_positive_int, "Must be a positive integer"),
    "atr_period": (_positive_int, "Must be a positive integer"),
    "sma_fast_period": (_positive_int, "Must be a positive integer"),
    "sma_slow_period": (_positive_int, "Must be a positive integer"),
    "macd_fast_period": (_positive_int, "Must be a positive integer"),
    "macd_slow_period": (_positive_int, "Must be a positive integer"),
    "macd_signal_period": (_positive_int, "Must be a positive integer"),
    "window_radius": (_positive_int, "Must be a positive integer"),
    "retest_window": (_positive_int, "Must be a positive integer"),
    "confirmation_lookback": (_positive_int, "Must be a positive integer"),
    "volume_lookback": (_positive_int, "Must be a positive integer"),
    "max_workers": (_positive_int, "Must be a positive integer"),
    "price_decimals": (_non_negative_int, "Must be a non-negative integer"),
    "rsi_decimals": (_non_negative_int, "Must be a non-negative integer"),
    "rsi_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "atr_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "sma_fast_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "sma_slow_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "macd_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "window_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "retest_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "confirmation_ratio": (_fraction, "Must be a positive number between 0 and 1"),
    "atr_floor_pct": (_fraction, "Must be a positive number between 0 and 1"),
    "atr_range_fallback_pct": (_fraction, "Must be a positive number between 0 and 1"),
    "synthetic_band_pct": (_fraction, "Must be a positive number between 0 and 1"),
    "retest_tolerance_pct": (_fraction, "Must be a positive number between 0 and 1"),
    "range_multiplier": (_positive_number, "Must be a positive number"),
    "volume_multiplier": (_positive_number, "Must be a positive number"),
    "breakout_stop_atr_mult": (_positive_number, "Must be a positive number"),
    "breakout_reward_ratio": (_positive_number, "Must be a positive number"),
    "fallback_stop_atr_mult": (_positive_number, "Must be a positive number"),
    "fallback_target_atr_mult": (_positive_number, "Must be a positive number"),
    "neutral_rsi": (_rsi_level, "Must be a number between 0 and 100"),
    "oversold_rsi": (_rsi_level, "Must be a number between 0 and 100"),
    "overbought_rsi": (_rsi_level, "Must be a number between 0 and 100"),
    "require_ordered_timestamps": (lambda v: isinstance(v, bool), "Must be a boolean"),
    "partition_on_prior_close": (lambda v: isinstance(v, bool), "Must be a boolean"),
}


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_section(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate the fields of one configuration section."""
        errors = []

        section_type = SECTION_TYPES.get(section)
        if section_type is None:
            return [ValidationError(field=section, message="Unknown configuration section", value=params)]

        if not isinstance(params, dict):
            return [ValidationError(field=section, message="Must be a mapping", value=params)]

        known = {f.name for f in fields(section_type)}
        for name, value in params.items():
            if name not in known:
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message="Unknown configuration field",
                    value=value
                ))
                continue

            rule = _RULES.get(name)
            if rule is not None and not rule[0](value):
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message=rule[1],
                    value=value
                ))

        return errors

    @staticmethod
    def validate_min_bars(params: dict[str, Any]) -> list[ValidationError]:
        """Validate that minimum bar counts grow with the timeframe class."""
        errors = []
        defaults = ValidationParams()

        fine = params.get("min_bars_intraday_fine", defaults.min_bars_intraday_fine)
        coarse = params.get("min_bars_intraday_coarse", defaults.min_bars_intraday_coarse)
        daily = params.get("min_bars_daily", defaults.min_bars_daily)

        if all(_positive_int(v) for v in (fine, coarse, daily)) and not fine <= coarse <= daily:
            errors.append(ValidationError(
                field="validation.min_bars",
                message="Minimum bar counts must not decrease from intraday to daily",
                value=(fine, coarse, daily)
            ))

        overrides = params.get("min_bars_overrides", {})
        if not isinstance(overrides, dict):
            errors.append(ValidationError(
                field="validation.min_bars_overrides",
                message="Must be a mapping of timeframe label to bar count",
                value=overrides
            ))
        else:
            for label, count in overrides.items():
                if not _positive_int(count):
                    errors.append(ValidationError(
                        field=f"validation.min_bars_overrides.{label}",
                        message="Must be a positive integer",
                        value=count
                    ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI fallback thresholds."""
        errors = []

        oversold = params.get("oversold_rsi", 40.0)
        overbought = params.get("overbought_rsi", 60.0)
        if _rsi_level(oversold) and _rsi_level(overbought) and oversold >= overbought:
            errors.append(ValidationError(
                field="signals.oversold_rsi",
                message="Must be below overbought_rsi",
                value=oversold
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params in config.items():
            errors.extend(ConfigValidator.validate_section(section, params))

        if isinstance(config.get("validation"), dict):
            errors.extend(ConfigValidator.validate_min_bars(config["validation"]))

        if isinstance(config.get("signals"), dict):
            errors.extend(ConfigValidator.validate_signal_params(config["signals"]))

        if isinstance(config.get("indicators"), dict):
            params = config["indicators"]
            fast = params.get("macd_fast_period", 12)
            slow = params.get("macd_slow_period", 26)
            if _positive_int(fast) and _positive_int(slow) and fast >= slow:
                errors.append(ValidationError(
                    field="indicators.macd_fast_period",
                    message="Must be below macd_slow_period",
                    value=fast
                ))

        return errors

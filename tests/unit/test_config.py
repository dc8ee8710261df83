"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from tase_app.config.defaults import EngineConfig, get_default_config
from tase_app.config.loader import ConfigLoader, config_from_dict
from tase_app.config.validation import ConfigValidator


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration carries the documented defaults."""
        config = get_default_config()

        assert config.indicators.rsi_period == 14
        assert config.indicators.sma_slow_period == 50
        assert config.breakout.synthetic_band_pct == 0.02
        assert config.breakout.retest_tolerance_pct == 0.005
        assert config.signals.breakout_reward_ratio == 2.0
        assert config.validation.min_bars_overrides == {"H4": 45}
        assert config.batch.lookback_days == {"M15": 7, "H1": 30, "H4": 90, "D1": 365}

    def test_default_dicts_are_not_shared(self) -> None:
        """Test that mutable defaults are independent per instance."""
        assert get_default_config().validation.min_bars_overrides is not \
            get_default_config().validation.min_bars_overrides


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader points at the repository config directory."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_merge_config_defaults_only(self) -> None:
        """Test config merging for a timeframe without overrides."""
        config = ConfigLoader.create().merge_config("D1")

        assert config["levels"]["window_radius"] == 20
        assert config["signals"]["oversold_rsi"] == 40.0

    def test_merge_config_timeframe_file(self) -> None:
        """Test timeframe overrides from config/timeframes.yaml."""
        loader = ConfigLoader.create()

        assert loader.merge_config("M1")["levels"]["window_radius"] == 10
        assert loader.merge_config("m1")["levels"]["window_radius"] == 10

        weekly = loader.merge_config("W1")
        assert weekly["indicators"]["sma_slow_period"] == 26
        assert weekly["validation"]["min_bars_overrides"] == {"H4": 45, "W1": 30}

    def test_merge_config_with_overrides(self) -> None:
        """Test per-call overrides win over the timeframe file."""
        overrides = {"levels": {"window_radius": 5}, "signals": {"oversold_rsi": 35.0}}
        config = ConfigLoader.create().merge_config("M1", overrides)

        assert config["levels"]["window_radius"] == 5
        assert config["signals"]["oversold_rsi"] == 35.0
        # Other defaults should remain
        assert config["signals"]["overbought_rsi"] == 60.0

    def test_missing_timeframe_file(self, tmp_path: Path) -> None:
        """Test a config directory without timeframes.yaml."""
        loader = ConfigLoader.create(tmp_path)
        assert loader.load_timeframe_config("H1") == {}

    def test_custom_timeframe_file(self, tmp_path: Path) -> None:
        """Test loading a timeframes.yaml from a custom directory."""
        (tmp_path / "timeframes.yaml").write_text(
            "timeframes:\n  H1:\n    breakout:\n      volume_multiplier: 2.0\n"
        )
        config = ConfigLoader.create(tmp_path).build_config("H1")

        assert isinstance(config, EngineConfig)
        assert config.breakout.volume_multiplier == 2.0
        assert config.breakout.range_multiplier == 1.5

    def test_empty_timeframe_file(self, tmp_path: Path) -> None:
        """Test an empty timeframes.yaml is treated as no overrides."""
        (tmp_path / "timeframes.yaml").write_text("")
        assert ConfigLoader.create(tmp_path).load_timeframe_config("H1") == {}

    def test_config_from_dict_partial(self) -> None:
        """Test missing sections fall back to dataclass defaults."""
        config = config_from_dict({"output": {"price_decimals": 3}})

        assert config.output.price_decimals == 3
        assert config.output.rsi_decimals == 2
        assert config.indicators.rsi_period == 14


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        """Test the merged default configuration validates cleanly."""
        config = ConfigLoader.create().merge_config("D1")
        assert ConfigValidator.validate_config(config) == []

    def test_invalid_period(self) -> None:
        """Test validation of a non-positive period."""
        errors = ConfigValidator.validate_section("indicators", {"rsi_period": 0})

        assert len(errors) == 1
        assert errors[0].field == "indicators.rsi_period"

    def test_bool_is_not_a_period(self) -> None:
        """Test that booleans are rejected where integers are expected."""
        errors = ConfigValidator.validate_section("levels", {"window_radius": True})
        assert len(errors) == 1

    def test_invalid_fraction(self) -> None:
        """Test validation of out-of-range percentages."""
        errors = ConfigValidator.validate_section("breakout", {"synthetic_band_pct": 1.5})

        assert len(errors) == 1
        assert errors[0].value == 1.5

    def test_unknown_field(self) -> None:
        """Test that unknown fields are reported."""
        errors = ConfigValidator.validate_section("signals", {"stop_mult": 2})

        assert len(errors) == 1
        assert errors[0].message == "Unknown configuration field"

    def test_unknown_section(self) -> None:
        """Test that unknown sections are reported."""
        errors = ConfigValidator.validate_config({"risk": {"max_loss": 1}})

        assert len(errors) == 1
        assert errors[0].field == "risk"

    def test_min_bars_must_not_decrease(self) -> None:
        """Test ordering of the timeframe class minimums."""
        errors = ConfigValidator.validate_min_bars({"min_bars_daily": 20})

        assert len(errors) == 1
        assert errors[0].field == "validation.min_bars"

    def test_min_bars_override_values(self) -> None:
        """Test per-label minimum overrides must be positive integers."""
        errors = ConfigValidator.validate_min_bars({"min_bars_overrides": {"H4": -1}})

        assert len(errors) == 1
        assert errors[0].field == "validation.min_bars_overrides.H4"

    def test_rsi_thresholds_ordered(self) -> None:
        """Test oversold must be below overbought."""
        errors = ConfigValidator.validate_config({"signals": {"oversold_rsi": 70.0}})

        assert [e.field for e in errors] == ["signals.oversold_rsi"]

    @pytest.mark.parametrize("fast,slow", [(26, 26), (30, 26)])
    def test_macd_periods_ordered(self, fast: int, slow: int) -> None:
        """Test MACD fast period must be below slow period."""
        errors = ConfigValidator.validate_config(
            {"indicators": {"macd_fast_period": fast, "macd_slow_period": slow}}
        )

        assert [e.field for e in errors] == ["indicators.macd_fast_period"]

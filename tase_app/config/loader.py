"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import SECTION_TYPES, EngineConfig, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: EngineConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_timeframe_config(self, timeframe: str) -> dict[str, Any]:
        """Load timeframe-specific configuration overrides."""
        timeframes_file = self.config_dir / "timeframes.yaml"

        if not timeframes_file.exists():
            return {}

        with open(timeframes_file) as f:
            timeframes_config = yaml.safe_load(f) or {}

        overrides = timeframes_config.get("timeframes") or {}
        return overrides.get(timeframe.upper(), {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        timeframe: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Timeframe-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        timeframe_config = self.load_timeframe_config(timeframe)
        config = self._deep_merge(config, timeframe_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        timeframe: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> EngineConfig:
        """Merge configuration for a timeframe and rebuild the dataclass tree."""
        return config_from_dict(self.merge_config(timeframe, overrides))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                elif isinstance(value, dict):
                    result[field_name] = dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def config_from_dict(config: dict[str, Any]) -> EngineConfig:
    """Build an EngineConfig from a merged configuration dictionary."""
    sections = {
        name: section_type(**config.get(name, {}))
        for name, section_type in SECTION_TYPES.items()
    }
    return EngineConfig(**sections)

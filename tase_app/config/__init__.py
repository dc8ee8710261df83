"""Configuration defaults, loading and validation for the signal engine."""

from .defaults import EngineConfig, get_default_config
from .loader import ConfigLoader, config_from_dict
from .validation import ConfigValidator, ValidationError

__all__ = [
    "EngineConfig",
    "get_default_config",
    "ConfigLoader",
    "config_from_dict",
    "ConfigValidator",
    "ValidationError",
]

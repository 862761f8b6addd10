"""Configuration loading, schema, and defaults."""

from fizzrail.config.loader import ConfigError, load_config
from fizzrail.config.schema import FizzRailConfig

__all__ = [
    "ConfigError",
    "FizzRailConfig",
    "load_config",
]

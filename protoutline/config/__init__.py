"""Configuration loading and validation."""

from protoutline.config.loader import DEFAULT_CONFIG, DEFAULTS_DIR, load_config, merge_layer
from protoutline.config.schema import CacheConfig, Config, LoggingConfig, ParserConfig

__all__ = [
    "CacheConfig",
    "Config",
    "DEFAULT_CONFIG",
    "DEFAULTS_DIR",
    "LoggingConfig",
    "ParserConfig",
    "load_config",
    "merge_layer",
]

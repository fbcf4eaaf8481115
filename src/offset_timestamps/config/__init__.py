"""Configuration models and loaders for the timestamp helpers."""

from offset_timestamps.config.models import ExtensionsConfig
from offset_timestamps.config.load import ConfigError, load_config

__all__ = ["ConfigError", "ExtensionsConfig", "load_config"]

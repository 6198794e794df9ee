"""Configuration system."""

from gold_signals.config.loader import load_config
from gold_signals.config.schema import AppConfig

__all__ = ["AppConfig", "load_config"]

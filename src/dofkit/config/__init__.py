"""Configuration loading utilities."""
from .loader import CONFIG_ENV, load_config
from .schema import DofkitConfig, LoggingConfig, ShiftConfig

__all__ = ["CONFIG_ENV", "load_config", "DofkitConfig", "LoggingConfig", "ShiftConfig"]

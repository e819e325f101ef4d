"""Configuration management for avatarmenu."""

from avatarmenu.core.config.loader import (
    clear_app_config_cache,
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from avatarmenu.core.config.models import AppConfig, LoggingConfig, OscConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "clear_app_config_cache",
    "configure_logging",
    "detect_format",
    # Models
    "AppConfig",
    "LoggingConfig",
    "OscConfig",
]

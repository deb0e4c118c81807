"""Configuration management for Chromatone."""

from chromatone.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_scheme_config,
)
from chromatone.core.config.models import AppConfig, LoggingConfig, SchemeConfig

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_scheme_config",
    # Models
    "AppConfig",
    "LoggingConfig",
    "SchemeConfig",
]

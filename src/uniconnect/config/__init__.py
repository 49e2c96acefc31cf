"""Configuration for uniconnect."""

from .logging_config import LoggingConfig, setup_logging
from .settings import AppSettings, get_settings, parse_duration

__all__ = [
    "AppSettings",
    "get_settings",
    "parse_duration",
    "LoggingConfig",
    "setup_logging",
]

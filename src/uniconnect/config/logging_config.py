"""Centralized logging configuration for uniconnect.

Provides consistent logging across the service with settings-based control
over level and format.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import AppSettings


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Modules that should only log warnings and above
    QUIET_MODULES = [
        "asyncpg",
        "httpx",
        "httpcore",
        "urllib3",
        "google.auth",
    ]
    
    @classmethod
    def build(cls, level: str = "INFO", log_format: str = "simple") -> Dict[str, Any]:
        """Build a dictConfig mapping for the given level and format."""
        level = level.upper()
        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]
        
        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": level,
                "handlers": ["console"],
            },
            "loggers": {},
        }
        
        for module in cls.QUIET_MODULES:
            logging_config["loggers"][module] = {
                "level": "WARNING" if level != "DEBUG" else "DEBUG",
                "handlers": ["console"],
                "propagate": False,
            }
        
        return logging_config
    
    @classmethod
    def configure(cls, settings: Optional[AppSettings] = None) -> None:
        """Configure logging from application settings."""
        level = settings.log_level if settings else "INFO"
        log_format = settings.log_format if settings else LogFormat.SIMPLE.value
        logging.config.dictConfig(cls.build(level, log_format))
        
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={level}, format={log_format}")


def setup_logging(settings: Optional[AppSettings] = None) -> None:
    """Install the console handler; called by ``create_app``."""
    LoggingConfig.configure(settings)

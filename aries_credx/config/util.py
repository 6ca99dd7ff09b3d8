"""Common configuration helpers."""

import os

from .base import BaseSettings
from .logging import LoggingConfigurator


def common_config(settings: BaseSettings):
    """Perform common app configuration."""
    LoggingConfigurator.configure(
        log_config_path=settings.get_str("log.config"),
        log_level=settings.get_str("log.level") or os.getenv("LOG_LEVEL"),
        log_file=settings.get_str("log.file"),
        log_json=settings.get_bool("log.json", default=False),
    )

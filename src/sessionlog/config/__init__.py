"""Configuration module for sessionlog."""

from sessionlog.config.logger_config import (
    LoggerConfig,
    LoggerConfigError,
    load_logger_config,
    logger_config_from_dict,
    validate_logger_config,
)

__all__ = [
    "LoggerConfig",
    "LoggerConfigError",
    "load_logger_config",
    "logger_config_from_dict",
    "validate_logger_config",
]

"""Configuration module."""

from shared_validators.common.config.settings import (
    DEFAULT_PORT,
    Config,
    Environment,
    LogLevel,
    get_config,
    reset_config,
)

__all__ = [
    "DEFAULT_PORT",
    "Config",
    "Environment",
    "LogLevel",
    "get_config",
    "reset_config",
]

"""Common utilities - logging, config, exceptions."""

from shared_validators.common.logging.logger import get_logger
from shared_validators.common.config import Config, get_config, reset_config
from shared_validators.common.exceptions import (
    SharedValidatorsException,
    ConfigurationError,
    RequestBodyError,
)

__all__ = [
    # Logging
    "get_logger",
    # Config
    "Config",
    "get_config",
    "reset_config",
    # Exceptions
    "SharedValidatorsException",
    "ConfigurationError",
    "RequestBodyError",
]

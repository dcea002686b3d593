"""Configuration management - Centralized configuration for shared-validators.

Provides environment-aware configuration with sensible defaults.
All configuration is loaded from environment variables with fallbacks.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Type, TypeVar

from shared_validators.common.exceptions import ConfigurationError


DEFAULT_PORT = 3001

_E = TypeVar("_E", bound=Enum)


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _enum_from_env(enum_type: Type[_E], name: str, default: str) -> _E:
    raw = os.getenv(name, default)
    try:
        return enum_type(raw)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        raise ConfigurationError(
            f"{name} must be one of: {allowed}",
            details={"variable": name, "value": raw},
        ) from None


def _port_from_env() -> int:
    """PORT as an integer; unset, non-numeric or non-positive falls back to 3001."""
    try:
        port = int(os.getenv("PORT", ""))
    except ValueError:
        return DEFAULT_PORT
    return port if port > 0 else DEFAULT_PORT


def _cors_origins_from_env() -> List[str]:
    origins_env = os.getenv("CORS_ORIGINS", "")
    return [origin.strip() for origin in origins_env.split(",") if origin.strip()]


@dataclass
class Config:
    """Central configuration object.

    Example:
        PORT=8080
        APP_ENVIRONMENT=production
        APP_LOG_LEVEL=WARNING
        CORS_ORIGINS=https://app.example.com,https://admin.example.com
    """

    # Core settings
    environment: Environment = field(
        default_factory=lambda: _enum_from_env(
            Environment, "APP_ENVIRONMENT", "development"
        )
    )
    debug: bool = field(
        default_factory=lambda: os.getenv("APP_DEBUG", "false").lower() == "true"
    )
    log_level: LogLevel = field(
        default_factory=lambda: _enum_from_env(LogLevel, "APP_LOG_LEVEL", "INFO")
    )

    # API settings
    api_host: str = field(
        default_factory=lambda: os.getenv("HOST", "0.0.0.0")
    )
    api_port: int = field(default_factory=_port_from_env)
    cors_origins: List[str] = field(default_factory=_cors_origins_from_env)

    def __post_init__(self):
        """Fill environment-dependent defaults."""
        # Permissive CORS only outside production
        if not self.cors_origins and not self.is_production:
            self.cors_origins = ["*"]

        if self.is_production and self.debug:
            import warnings
            warnings.warn(
                "Debug mode is enabled in production environment",
                RuntimeWarning,
                stacklevel=2
            )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config: The global configuration singleton.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None

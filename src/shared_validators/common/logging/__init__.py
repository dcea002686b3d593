"""Logging helpers."""

from shared_validators.common.logging.logger import get_logger

__all__ = ["get_logger"]

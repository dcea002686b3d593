"""Data validators package."""

from .user_validator import (
    ERROR_MESSAGES,
    field_errors,
    messages_for,
    validate,
    validate_user,
)

__all__ = [
    "ERROR_MESSAGES",
    "field_errors",
    "messages_for",
    "validate",
    "validate_user",
]

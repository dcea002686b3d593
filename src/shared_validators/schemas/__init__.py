"""Data schemas - canonical Pydantic definitions."""

from shared_validators.schemas.user import User

__all__ = [
    "User",
]

"""Core result types."""

from shared_validators.core.types import (
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)

__all__ = [
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
]

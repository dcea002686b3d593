"""shared-validators - one User schema shared by the API and the demo UI."""

__version__ = "0.1.0"

from shared_validators.core.types import (
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from shared_validators.schemas.user import User
from shared_validators.validators import validate, validate_user

__all__ = [
    "User",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "validate",
    "validate_user",
]

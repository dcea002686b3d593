"""API - HTTP surface for the shared User validator.

Endpoints:
    GET  /        liveness check
    POST /users   validate a JSON body
"""

from shared_validators.api.gateway import app
from shared_validators.api.schemas import (
    ErrorResponse,
    HealthResponse,
    UserValidatedResponse,
    UserValidationErrorResponse,
)

__all__ = [
    "app",
    "ErrorResponse",
    "HealthResponse",
    "UserValidatedResponse",
    "UserValidationErrorResponse",
]

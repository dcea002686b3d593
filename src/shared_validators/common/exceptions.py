"""Custom exceptions for shared-validators.

Validation failures are never raised; they come back as
``ValidationFailure``. These exceptions cover everything around the
validator: configuration and malformed request bodies.
"""

from typing import Any, Dict, Optional


class SharedValidatorsException(Exception):
    """Base exception for all shared-validators errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        code: str = "SHARED_VALIDATORS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(SharedValidatorsException):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIG_ERROR", details=details)


class RequestBodyError(SharedValidatorsException):
    """Raised when a request body cannot be decoded as JSON."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_REQUEST_BODY", details=details)

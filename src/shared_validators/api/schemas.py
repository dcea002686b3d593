"""API Schemas - Response models for the API Gateway.

Request bodies are deliberately untyped: ``POST /users`` accepts any JSON
and hands it to the shared validator, so the 400 body carries the same
per-field messages every other surface shows.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from shared_validators.schemas.user import User


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class HealthResponse(BaseModel):
    """Response for GET /."""
    status: Literal["ok"] = Field(default="ok")
    message: str = Field(..., description="Human-readable status")


class UserValidatedResponse(BaseModel):
    """200 response for POST /users."""
    success: Literal[True] = Field(default=True)
    message: str = Field(..., description="Human-readable outcome")
    data: User = Field(..., description="The validated user")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "User validated successfully ✅",
                "data": {
                    "name": "John Doe",
                    "email": "john@example.com",
                    "age": 25,
                },
            }
        }
    }


class UserValidationErrorResponse(BaseModel):
    """400 response for POST /users when validation fails."""
    success: Literal[False] = Field(default=False)
    errors: Dict[str, List[str]] = Field(
        ..., description="Field name -> messages, only for failing fields"
    )
    form_errors: Optional[List[str]] = Field(
        default=None, description="Problems with the body as a whole"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "errors": {
                    "name": ["Name must be at least 2 characters"],
                    "email": ["Invalid email address"],
                    "age": ["Age must be a positive number"],
                },
            }
        }
    }


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    request_id: Optional[str] = Field(
        default=None, description="Request ID for debugging"
    )

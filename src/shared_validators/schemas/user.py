"""User schema - canonical definition shared by every surface."""

from typing import Annotated, Any, Dict, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StrictStr,
)

from shared_validators.schemas.fields import (
    positive,
    refine,
    require_number,
    to_int,
    whole,
)


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100

NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters"
NAME_TOO_LONG = f"Name must be at most {NAME_MAX_LENGTH} characters"
NAME_NOT_TEXT = "Name must be valid unicode text"
INVALID_EMAIL = "Invalid email address"
AGE_NOT_WHOLE = "Age must be a whole number"
AGE_NOT_POSITIVE = "Age must be a positive number"


# Before-validators run last-listed first: number check, refinements, int.
Age = Annotated[
    Optional[int],
    BeforeValidator(to_int),
    BeforeValidator(refine(whole(AGE_NOT_WHOLE), positive(AGE_NOT_POSITIVE))),
    BeforeValidator(require_number),
]


class User(BaseModel):
    """User entity schema.

    Instances are only produced by validation and are never mutated.
    Unknown input keys are dropped. ``age`` is validated only when present,
    so an explicit ``null`` fails while a missing key stays ``None``.
    """
    name: StrictStr = Field(
        ..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH,
        description="Display name"
    )
    email: EmailStr = Field(..., description="Email address")
    age: Age = Field(default=None, description="Age in whole years, optional")

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john@example.com",
                "age": 25,
            }
        },
    )

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of the validated fields, without ``age`` when absent."""
        return self.model_dump(exclude_none=True)

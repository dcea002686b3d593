"""User validation - the single entry point every surface calls."""

from collections.abc import Mapping
from typing import Any, Dict, List

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from shared_validators.core.types import (
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
)
from shared_validators.schemas.fields import REFINEMENTS, describe_type
from shared_validators.schemas.user import (
    INVALID_EMAIL,
    NAME_NOT_TEXT,
    NAME_TOO_LONG,
    NAME_TOO_SHORT,
    User,
)


REQUIRED = "Required"

# (field, pydantic error type) -> message
ERROR_MESSAGES = {
    ("name", "string_too_short"): NAME_TOO_SHORT,
    ("name", "string_too_long"): NAME_TOO_LONG,
    ("name", "string_unicode"): NAME_NOT_TEXT,
    ("email", "value_error"): INVALID_EMAIL,
    ("email", "string_unicode"): INVALID_EMAIL,
}


def messages_for(error: ErrorDetails) -> List[str]:
    """Translate one pydantic error into the messages shown to callers."""
    kind = error["type"]
    if kind == "missing":
        return [REQUIRED]
    if kind == "string_type":
        return [f"Expected string, received {describe_type(error['input'])}"]
    if kind == REFINEMENTS:
        return list(error["ctx"]["messages"])

    field = str(error["loc"][0]) if error["loc"] else ""
    return [ERROR_MESSAGES.get((field, kind), error["msg"])]


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Group the messages of a ValidationError by top-level field."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors(include_url=False):
        field = str(error["loc"][0]) if error["loc"] else "_form"
        errors.setdefault(field, []).extend(messages_for(error))
    return errors


def validate_user(value: Any) -> ValidationResult:
    """Validate an arbitrary value against the User schema.

    Never raises. Branch on ``result.ok``:

    - ``ValidationSuccess.value`` is a :class:`User` holding only the
      declared fields, ``age`` left unset when the input had none.
    - ``ValidationFailure.errors`` maps each failing field to its messages,
      type problems first, then every failing range/format check.

    Args:
        value: Anything - usually a dict decoded from JSON

    Returns:
        ValidationSuccess or ValidationFailure
    """
    if not isinstance(value, Mapping):
        return ValidationFailure(
            form_errors=[f"Expected object, received {describe_type(value)}"]
        )

    try:
        user = User.model_validate(dict(value))
    except ValidationError as e:
        return ValidationFailure(errors=field_errors(e))
    return ValidationSuccess(value=user)


validate = validate_user

"""Reusable field validators for the schemas.

Pydantic stops at the first failing validator on a field, so checks that
must all be reported together live in one validator and travel in the
error context under ``messages``.
"""

import math
from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence

from pydantic_core import PydanticCustomError


NUMBER_TYPE = "number_type"
REFINEMENTS = "refinements"


def describe_type(value: Any) -> str:
    """Name the JSON-ish type of a value for "received ..." messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def require_number(value: Any) -> Any:
    """Accept ints and floats. Booleans and NaN are rejected."""
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if not is_number or (isinstance(value, float) and math.isnan(value)):
        raise PydanticCustomError(
            NUMBER_TYPE,
            "Expected number, received {received}",
            {"received": describe_type(value)},
        )
    return value


# Refinement: returns an error message, or None when the value passes.
Check = Callable[[Any], Optional[str]]


def whole(message: str) -> Check:
    def check(value: Any) -> Optional[str]:
        if isinstance(value, float) and not value.is_integer():
            return message
        return None
    return check


def positive(message: str) -> Check:
    def check(value: Any) -> Optional[str]:
        return message if not value > 0 else None
    return check


def refine(*checks: Check) -> Callable[[Any], Any]:
    """Run every check and fail with all of their messages at once."""
    def validator(value: Any) -> Any:
        messages: Sequence[str] = tuple(
            message for message in (check(value) for check in checks)
            if message is not None
        )
        if messages:
            raise PydanticCustomError(
                REFINEMENTS,
                "{summary}",
                {"summary": "; ".join(messages), "messages": messages},
            )
        return value
    return validator


def to_int(value: Any) -> int:
    """Integral numbers (including int subclasses and 25.0) become plain ``int``."""
    return int(value)

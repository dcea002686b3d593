"""Core types - tagged validation results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Union

from shared_validators.schemas.user import User


@dataclass(frozen=True)
class ValidationSuccess:
    """Input conformed to the schema.

    Attributes:
        value: The validated, whitelisted model instance
    """
    value: User
    ok: Literal[True] = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"ok": True, "value": self.value.to_dict()}


@dataclass(frozen=True)
class ValidationFailure:
    """Input did not conform to the schema.

    Attributes:
        errors: Field name -> ordered messages. Passing fields are absent.
        form_errors: Problems with the input as a whole (e.g. not an object)
    """
    errors: Dict[str, List[str]] = field(default_factory=dict)
    form_errors: List[str] = field(default_factory=list)
    ok: Literal[False] = field(default=False, init=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "ok": False,
            "errors": {name: list(messages) for name, messages in self.errors.items()},
            "form_errors": list(self.form_errors),
        }


ValidationResult = Union[ValidationSuccess, ValidationFailure]

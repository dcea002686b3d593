"""Text rendering of validation results."""

import json
from dataclasses import dataclass

from shared_validators.core.types import ValidationResult


@dataclass(frozen=True)
class RenderedResult:
    """What the demo shows for one trigger."""
    text: str
    is_error: bool


def render_result(label: str, result: ValidationResult) -> RenderedResult:
    """Format a result as a headline followed by indented JSON."""
    if result.ok:
        body = json.dumps(result.value.to_dict(), indent=2, ensure_ascii=False)
        return RenderedResult(f'✅ "{label}" is valid!\n\n{body}', is_error=False)

    errors = dict(result.errors)
    if result.form_errors:
        errors["_form"] = list(result.form_errors)
    body = json.dumps(errors, indent=2, ensure_ascii=False)
    return RenderedResult(
        f'❌ "{label}" has validation errors:\n\n{body}', is_error=True
    )

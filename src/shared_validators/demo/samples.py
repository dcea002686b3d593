"""Fixed sample payloads for the demo."""

from typing import Any, Dict


VALID_USER: Dict[str, Any] = {
    "name": "John Doe",
    "email": "john@example.com",
    "age": 25,
}

INVALID_USER: Dict[str, Any] = {
    "name": "J",             # too short (min 2)
    "email": "not-an-email",  # invalid email
    "age": -5,               # negative number
}

# sample key -> (label, payload)
SAMPLES = {
    "valid": ("Valid User", VALID_USER),
    "invalid": ("Invalid User", INVALID_USER),
}

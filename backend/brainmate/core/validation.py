"""
Presence checks for request payloads.

Payload shapes are otherwise open: articles and highlights pass through
untouched, so only the fields a handler keys on are checked here.
"""

from typing import Any
from brainmate.core.errors import ValidationError


def is_missing(value: Any) -> bool:
    """None and the empty string count as missing; empty objects do not."""
    return value is None or value == ""


def require_fields(message: str = "Missing required fields", **fields: Any) -> None:
    """
    Raise ValidationError if any of the named fields is missing.

    Args:
        message: Client-facing error message
        **fields: Field name to value

    Raises:
        ValidationError: If at least one field is missing
    """
    missing = [name for name, value in fields.items() if is_missing(value)]
    if missing:
        raise ValidationError(message)

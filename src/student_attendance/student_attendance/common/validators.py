from __future__ import annotations

from typing import Any, Iterable, Optional

from ..core.exceptions import ValidationError


def require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    value = require_text(value, field_name).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def optional_text(value: Any, field_name: str) -> Optional[str]:
    """Stripped text, or None when missing or blank."""

    if value is None:
        return None
    return require_text(value, field_name).strip() or None


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if value is None or len(require_text(value, field_name)) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_choice(value: str, field_name: str, choices: Iterable[str]) -> str:
    if value not in set(choices):
        raise ValidationError(f"{field_name} is not valid")
    return value


def require_non_negative(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < 0:
        raise ValidationError("Values cannot be negative")
    return number

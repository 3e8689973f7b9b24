from __future__ import annotations

from typing import Optional

from ..core.exceptions import AuthenticationError, ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_person(person_id: Optional[str]) -> str:
    """Every mutating operation needs a resolved identity."""
    if not person_id or not str(person_id).strip():
        raise AuthenticationError("User not authenticated")
    return str(person_id)


def non_negative_int(value, field_name: str) -> int:
    """Lenient integer parse for report forms: blank means 0."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number

from __future__ import annotations

from ..core.exceptions import ValidationError


def require_int(value, field_name: str) -> int:
    """Accept ints, whole-number floats and integer strings; never truncate."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} must be an integer")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError(f"{field_name} must be an integer")
    raise ValidationError(f"{field_name} must be an integer")


def require_non_negative(value: int, field_name: str) -> int:
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value

from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", [{"field": field_name, "message": "Required"}])
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(
            f"{field_name} must be at least {min_len} characters",
            [{"field": field_name, "message": f"Must be at least {min_len} characters"}],
        )
    return value


def parse_int_arg(value: str | None, field_name: str, *, default: int | None = None) -> int | None:
    """Parse an optional integer query-string argument."""
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer", [{"field": field_name, "message": "Expected integer"}])

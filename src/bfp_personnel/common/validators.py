from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_not_future(value: Optional[date], field_name: str, *, today: date) -> Optional[date]:
    if value is not None and value > today:
        raise ValidationError(f"{field_name} cannot be in the future!")
    return value


def require_order(earlier: Optional[date], later: Optional[date], message: str) -> None:
    """Both dates optional; only compared when both are set."""
    if earlier is not None and later is not None and earlier > later:
        raise ValidationError(message)


def optional_text(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None

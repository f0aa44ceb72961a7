from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import DateLike, coerce_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date(value: DateLike, field_name: str) -> date:
    parsed = coerce_date(value)
    if parsed is None:
        raise ValidationError(f"{field_name} must be a valid date (YYYY-MM-DD)")
    return parsed


def optional_text(value: Optional[str], field_name: str) -> Optional[str]:
    """Strip free text; blank becomes None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip() or None

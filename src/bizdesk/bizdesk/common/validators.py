from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_number(value: Any, field_name: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_positive(value: Any, field_name: str) -> float:
    number = require_number(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")
    return number


def require_non_negative(value: Any, field_name: str) -> float:
    number = require_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number

from __future__ import annotations

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import AMOUNT_MAX_DIGITS, AMOUNT_PLACES
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_datetime, round_to_millis

_AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_PLACES)
_AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_MAX_DIGITS - AMOUNT_PLACES)


def require_non_empty(value: Any, field_name: str, max_length: Optional[int] = None) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value


def quantize_amount(value: Decimal) -> Decimal:
    """Round to the stored scale (DECIMAL(14,2)), half up like MySQL."""
    return value.quantize(_AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)


def _parse_amount(value: Any, field_name: str) -> Decimal:
    # bool is an int subclass; reject it explicitly.
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))
    if isinstance(value, str) and value.strip():
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise ValidationError(f"{field_name} must be a number")
    raise ValidationError(f"{field_name} must be a number")


def require_amount(value: Any, field_name: str = "amount") -> Decimal:
    parsed = _parse_amount(value, field_name)
    if not parsed.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if abs(parsed) >= _AMOUNT_LIMIT:
        raise ValidationError(f"{field_name} is out of range")
    amount = quantize_amount(parsed)
    # Rounding can carry 999999999999.995 over the limit.
    if abs(amount) >= _AMOUNT_LIMIT:
        raise ValidationError(f"{field_name} is out of range")
    return amount


def require_datetime(value: Any, field_name: str) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = parse_iso_datetime(value)
        except (ValueError, OverflowError):
            raise ValidationError(f"{field_name} must be an ISO-8601 date")
    else:
        raise ValidationError(f"{field_name} must be an ISO-8601 date")

    # DATETIME range is 1000-01-01 .. 9999-12-31.
    try:
        rounded = round_to_millis(parsed)
    except OverflowError:
        raise ValidationError(f"{field_name} is out of range")
    if not 1000 <= rounded.year <= 9999:
        raise ValidationError(f"{field_name} is out of range")
    return rounded


def require_identifier(value: Any, field_name: str, max_length: Optional[int] = None) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValidationError(f"{field_name} is required")
    value = str(value).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return value

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Поле «{field_name}» обязательно")
    return value.strip()


def require_non_negative(value: Decimal, field_name: str) -> Decimal:
    if value is None or not value.is_finite() or value < 0:
        raise ValidationError(f"Поле «{field_name}» не может быть отрицательным")
    return value


def require_positive_int(value: int, field_name: str) -> int:
    if value is None or int(value) < 1:
        raise ValidationError(f"Поле «{field_name}» должно быть не меньше 1")
    return int(value)


def parse_decimal(value: Any, field_name: str) -> Decimal:
    """Parse a form value ("1500", "1500,50", 1500) into Decimal."""
    if isinstance(value, Decimal):
        return _require_finite(value, field_name)
    raw = str(value if value is not None else "").strip().replace(" ", "").replace(",", ".")
    if not raw:
        return Decimal("0")
    try:
        parsed = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"Поле «{field_name}» должно быть числом")
    return _require_finite(parsed, field_name)


def _require_finite(value: Decimal, field_name: str) -> Decimal:
    if not value.is_finite():
        raise ValidationError(f"Поле «{field_name}» должно быть числом")
    return value


def parse_int(value: Any, field_name: str) -> int:
    raw = str(value if value is not None else "").strip()
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Поле «{field_name}» должно быть целым числом")

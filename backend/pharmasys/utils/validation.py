from __future__ import annotations
"""Form input coercion with consistent 400 error semantics.

Every helper returns the coerced value (to enable inline usage) or aborts with
``<field> invalid`` / ``<field> required``.
"""
import math
from datetime import date
from typing import Any, Iterable, Mapping, Optional
from flask import abort


def require_fields(data: Mapping[str, Any], *names: str) -> None:
    missing = [n for n in names if data.get(n) in (None, '')]
    if missing:
        abort(400, description=f"{', '.join(missing)} required")


def validate_choice(value: Any, allowed: Iterable[str], field_name: str = 'status') -> str:
    if value not in tuple(allowed):
        abort(400, description=f"{field_name} invalid")
    return value


def parse_int(value: Any, field_name: str, minimum: Optional[int] = 0) -> int:
    if isinstance(value, bool):
        abort(400, description=f"{field_name} invalid")
    if isinstance(value, float) and not math.isfinite(value):
        abort(400, description=f"{field_name} invalid")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        abort(400, description=f"{field_name} invalid")
    if isinstance(value, float) and value != number:
        abort(400, description=f"{field_name} invalid")
    if minimum is not None and number < minimum:
        abort(400, description=f"{field_name} invalid")
    return number


def parse_amount(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        abort(400, description=f"{field_name} invalid")
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        abort(400, description=f"{field_name} invalid")
    if not math.isfinite(amount) or amount < 0:
        abort(400, description=f"{field_name} invalid")
    return amount


def parse_date(value: Any, field_name: str) -> date:
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        abort(400, description=f"{field_name} invalid")

__all__ = ['require_fields', 'validate_choice', 'parse_int', 'parse_amount', 'parse_date']

from __future__ import annotations

from numbers import Number
from typing import Any, Iterable, Mapping

from ..core.exceptions import ValidationError


def is_missing(value: Any) -> bool:
    """None, "", False and numeric zero count as missing; "   ", [] and {} do not."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Number):
        return value == 0 or value != value
    return False


def require_non_empty(value: Any, field_name: str) -> Any:
    if is_missing(value):
        raise ValidationError(f"{field_name} is required")
    return value


def require_fields(payload: Any, fields: Iterable[str]) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("payload must be an object")
    for name in fields:
        require_non_empty(payload.get(name), name)
    return payload

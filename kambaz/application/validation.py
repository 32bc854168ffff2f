from __future__ import annotations

from kambaz.application.errors import ValidationError


def require_id(value: str | None, field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required", details={"field": field})
    return cleaned

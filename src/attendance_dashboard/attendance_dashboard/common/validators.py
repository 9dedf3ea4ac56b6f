from __future__ import annotations

from typing import Optional

from ..core.constants import MAX_YEAR_DIGITS
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required. Fill all required fields.")
    return value.strip()


def restrict_year(value: Optional[str]) -> str:
    """Truncate the year part of a typed YYYY-MM-DD value to four digits.

    Applied while the user types, before any validation.
    """
    if not value or "-" not in value:
        return value or ""
    parts = value.split("-")
    if len(parts[0]) > MAX_YEAR_DIGITS:
        parts[0] = parts[0][:MAX_YEAR_DIGITS]
    return "-".join(parts)

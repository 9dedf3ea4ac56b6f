from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated user as handed over by the login flow."""

    username: str
    role: Role
    employee_id: Optional[int] = None

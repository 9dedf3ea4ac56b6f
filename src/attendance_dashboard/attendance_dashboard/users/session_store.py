from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from ..core.enums import Role
from .model import CurrentUser

logger = logging.getLogger(__name__)


def load_current_user(path: Union[str, Path, None]) -> Optional[CurrentUser]:
    """Read the stored `currentUser` record written by the login flow.

    Expected shape: {"username": ..., "role": ..., "empId": ...}. A missing or
    unreadable file means nobody is signed in.
    """
    if not path:
        return None
    file = Path(path)
    if not file.exists():
        return None

    try:
        data = json.loads(file.read_text(encoding="utf-8"))
        role = Role(str(data.get("role", Role.EMPLOYEE.value)).upper())
        emp_id = data.get("empId")
        return CurrentUser(
            username=str(data.get("username") or ""),
            role=role,
            employee_id=int(emp_id) if emp_id not in (None, "") else None,
        )
    except (OSError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring unreadable session file %s: %s", file, exc)
        return None

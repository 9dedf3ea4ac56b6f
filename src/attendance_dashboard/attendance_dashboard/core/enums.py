from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles, used to pick and guard a dashboard shell."""

    ADMIN = "ADMIN"
    HR = "HR"
    MANAGER = "MANAGER"
    FINANCE = "FINANCE"
    EMPLOYEE = "EMPLOYEE"


class SessionState(str, Enum):
    """Client-side view of today's work session."""

    UNKNOWN = "UNKNOWN"
    CLOCKED_OUT = "CLOCKED_OUT"
    CLOCKED_IN = "CLOCKED_IN"


class Severity(str, Enum):
    SUCCESS = "success"
    WARN = "warn"
    ERROR = "error"


class GeolocationErrorCode(int, Enum):
    """Failure causes of a position request (W3C Geolocation codes)."""

    UNKNOWN = 0
    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3

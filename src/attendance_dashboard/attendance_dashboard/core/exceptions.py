from __future__ import annotations

from typing import Optional

from .enums import GeolocationErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidStateError(ValidationError):
    """Raised when an action is not allowed in the current session state."""


class DateOutOfWindowError(ValidationError):
    """Raised when a regularization date is outside the current month window."""


class ReasonPatternError(ValidationError):
    """Raised when a regularization reason contains disallowed characters."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for a dashboard."""


_GEOLOCATION_MESSAGES = {
    GeolocationErrorCode.PERMISSION_DENIED: "Permission denied. Please allow location access.",
    GeolocationErrorCode.POSITION_UNAVAILABLE: "Location information is unavailable.",
    GeolocationErrorCode.TIMEOUT: "The request to get location timed out.",
    GeolocationErrorCode.UNKNOWN: "An unknown error occurred while fetching location.",
}


class GeolocationError(DomainError):
    """Raised when a position reading cannot be obtained."""

    def __init__(self, code: GeolocationErrorCode, message: Optional[str] = None):
        self.code = GeolocationErrorCode(code)
        super().__init__(message or _GEOLOCATION_MESSAGES[self.code])


class GeolocationUnsupportedError(DomainError):
    """Raised when no geolocation source is available on this device."""

    def __init__(self, message: str = "Your device does not support geolocation."):
        super().__init__(message)


class BackendError(DomainError):
    """Raised when the attendance backend rejects a call or cannot be reached."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AlreadyClockedInError(BackendError):
    """Raised when the backend reports an existing clock-in for today."""


class AuthenticationError(BackendError):
    """Raised when the backend refuses the configured credentials."""

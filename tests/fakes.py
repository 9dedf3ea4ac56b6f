from __future__ import annotations

import threading
from datetime import datetime
from typing import Optional

from attendance_dashboard.attendance.model import AttendanceSnapshot, ClockInRequest
from attendance_dashboard.core.enums import GeolocationErrorCode
from attendance_dashboard.core.exceptions import BackendError, GeolocationError
from attendance_dashboard.geolocation.model import GeolocationReading


class Clock:
    """Settable clock shared by a machine and its ticker."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class InMemoryAttendance:
    def __init__(self, snapshot: Optional[AttendanceSnapshot] = None):
        self.snapshot = snapshot
        self.status_error: Optional[BackendError] = None
        self.clock_in_error: Optional[BackendError] = None
        self.clock_out_error: Optional[BackendError] = None
        self.clock_in_calls: list[ClockInRequest] = []
        self.clock_out_calls = 0
        self.clock_out_message = "Clocked out successfully"
        self.status_calls = 0
        self.release = threading.Event()
        self.release.set()
        self.status_release = threading.Event()
        self.status_release.set()

    def get_current_status(self) -> Optional[AttendanceSnapshot]:
        self.status_calls += 1
        self.status_release.wait(timeout=5)
        if self.status_error:
            raise self.status_error
        return self.snapshot

    def clock_in(self, request: ClockInRequest) -> str:
        self.clock_in_calls.append(request)
        self.release.wait(timeout=5)
        if self.clock_in_error:
            raise self.clock_in_error
        return "Clocked in successfully"

    def clock_out(self) -> str:
        self.clock_out_calls += 1
        self.release.wait(timeout=5)
        if self.clock_out_error:
            raise self.clock_out_error
        return self.clock_out_message


class InMemoryRegularizations:
    def __init__(self):
        self.requests = []
        self.error: Optional[BackendError] = None

    def request_regularization(self, request) -> str:
        self.requests.append(request)
        if self.error:
            raise self.error
        return "Regularization request submitted"


class StaticGeolocation:
    def __init__(self, latitude: float = 12.97, longitude: float = 77.59):
        self.reading = GeolocationReading(latitude=latitude, longitude=longitude)
        self.calls = 0

    async def get_current_position(self) -> GeolocationReading:
        self.calls += 1
        return self.reading


class FailingGeolocation:
    def __init__(self, code: GeolocationErrorCode):
        self.code = code
        self.calls = 0

    async def get_current_position(self) -> GeolocationReading:
        self.calls += 1
        raise GeolocationError(self.code)


class CollectingNotifier:
    def __init__(self):
        self.items = []

    def notify(self, severity, summary, detail) -> None:
        self.items.append((severity, summary, detail))

    @property
    def last(self):
        return self.items[-1]

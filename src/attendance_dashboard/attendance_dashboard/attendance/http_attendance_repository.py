from __future__ import annotations

from typing import Optional

from ..backend.connection import ApiConnection
from ..backend.http_base import decode_body, read_message, send
from ..core.constants import CLOCK_IN_PATH, CLOCK_OUT_PATH, STATUS_PATH
from ..core.exceptions import BackendError
from .model import AttendanceSnapshot, ClockInRequest
from .repository import AttendanceRepository


class HttpAttendanceRepository(AttendanceRepository):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_current_status(self) -> Optional[AttendanceSnapshot]:
        response = send(self._conn, "GET", STATUS_PATH, fallback="Failed to fetch attendance status")
        body = decode_body(response)
        if body is None:
            return None
        if not isinstance(body, dict):
            raise BackendError("Malformed attendance status", status_code=response.status_code)
        return AttendanceSnapshot.from_payload(body)

    def clock_in(self, request: ClockInRequest) -> str:
        response = send(
            self._conn,
            "POST",
            CLOCK_IN_PATH,
            fallback="Clock-in failed",
            json=request.to_payload(),
        )
        return read_message(response, "Clocked in")

    def clock_out(self) -> str:
        response = send(self._conn, "POST", CLOCK_OUT_PATH, fallback="Clock-out failed")
        return read_message(response)
